"""Cell storage for isometric, layered maps.

This package provides the building blocks behind ``Map``:

- Tile and TileStorage: shared shape templates, referenced by index
- Cell: one occupied slot, pointing to a tile
- CellLayer: sparse storage of one elevation level
- CellState: all layers, command execution and terrain raising
- CellRange: iteration over the cells in a column/row/layer interval
- Direction: compass directions to the neighbors of a cell
"""

from isoterrain.cell_space.cell import Cell, CellWithCoords
from isoterrain.cell_space.cell_layer import CellLayer, CellRow
from isoterrain.cell_space.cell_range import CellRange
from isoterrain.cell_space.cell_state import CellState
from isoterrain.cell_space.commands import ClearCell, MapCommand, RaiseTerrain, SetCell
from isoterrain.cell_space.direction import (
    CARDINAL_DIRECTIONS,
    DIAGONAL_DIRECTIONS,
    Direction,
)
from isoterrain.cell_space.tile import MAP_VERTEX_DTYPE, Tile, TileStorage

__all__ = [
    "CARDINAL_DIRECTIONS",
    "DIAGONAL_DIRECTIONS",
    "MAP_VERTEX_DTYPE",
    "Cell",
    "CellLayer",
    "CellRange",
    "CellRow",
    "CellState",
    "CellWithCoords",
    "ClearCell",
    "Direction",
    "MapCommand",
    "RaiseTerrain",
    "SetCell",
    "Tile",
    "TileStorage",
]
