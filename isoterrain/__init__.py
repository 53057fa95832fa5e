"""isoterrain: a layered, isometric world grid.

Core Objects: Map, Tile and Cell.
"""

import datetime

import isoterrain.cell_space as cell_space
from isoterrain.cell_space import (
    Cell,
    CellRange,
    CellWithCoords,
    Direction,
    Tile,
    TileStorage,
)
from isoterrain.coordinates import CELL_SIZE_WORLD, cell_to_world, world_to_cell
from isoterrain.generation import generate_plain_map, make_tile
from isoterrain.map import Map

__all__ = [
    "CELL_SIZE_WORLD",
    "Cell",
    "CellRange",
    "CellWithCoords",
    "Direction",
    "Map",
    "Tile",
    "TileStorage",
    "cell_space",
    "cell_to_world",
    "generate_plain_map",
    "make_tile",
    "world_to_cell",
]

__title__ = "isoterrain"
__version__ = "0.3.0"
__license__ = "Apache 2.0"
_this_year = datetime.datetime.now(tz=datetime.UTC).date().year
__copyright__ = f"Copyright {_this_year} isoterrain authors"
