"""Generation of simple maps, mainly for testing.

Provides a standard set of tiles (flat ground, slopes and 'tents') and a
generator that covers a map with flat ground.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from isoterrain.cell_space import Cell, Tile
from isoterrain.coordinates import CELL_SIZE_WORLD
from isoterrain.isoterrain_logging import function_logger

if TYPE_CHECKING:
    from isoterrain.map import Map

WHITE = (0xFF, 0xFF, 0xFF, 0xFF)
BLUISH = (0xB0, 0xB0, 0xF0, 0xFF)

_H = CELL_SIZE_WORLD[2]
# fmt: off
PLAIN_TILE_HEIGHTS = (
    # flat
    (0,  0,  0,  0),
    # NW/NE/SE/SW slopes
    (0,  _H, _H, 0),
    (0,  0,  _H, _H),
    (_H, 0,  0,  _H),
    (_H, _H, 0,  0),
    # N/E/S/W slopes (both the 'top' and 'bottom' versions)
    (0,  0,  _H, 0),
    (0,  _H, _H, _H),
    (0,  0,  0,  _H),
    (_H, 0,  _H, _H),
    (_H, 0,  0,  0),
    (_H, _H, 0,  _H),
    (0,  _H, 0,  0),
    (_H, _H, _H, 0),
    # 'tents' with opposing corners raised
    (_H, 0,  _H, 0),
    (0,  _H, 0,  _H),
)
# fmt: on


def make_tile(height_n: int, height_e: int, height_s: int, height_w: int) -> Tile:
    """Create a tile with plain graphics for the given corner heights.

    The tile is drawn as a bluish diamond with a white outline and diagonals.
    """
    x_max, y_max = CELL_SIZE_WORLD[0], CELL_SIZE_WORLD[1]
    west = (0, 0, height_w)
    north = (0, y_max, height_n)
    south = (x_max, 0, height_s)
    east = (x_max, y_max, height_e)
    lines = [west, north, south, east, west, south, north, east]
    triangles = [west, south, north, north, south, east]
    return Tile(
        height_n,
        height_e,
        height_s,
        height_w,
        line_vertices=[(position, WHITE) for position in lines],
        triangle_vertices=[(position, BLUISH) for position in triangles],
    )


@function_logger(__name__)
def generate_plain_map(map: Map) -> int:  # noqa: A002
    """Add the plain tile set to a map and fill the map with flat cells.

    One layer is filled completely, and a few cells are added on the layer above
    (one for every 16 rows and 16 columns) to have some layering. Best used on an
    empty, newly constructed map.

    Args:
        map: the map to generate cells in

    Returns:
        the index of the flat tile
    """
    indices = [map.tile_storage.append(make_tile(*heights)) for heights in PLAIN_TILE_HEIGHTS]
    flat_index = indices[0]

    for column in range(map.width):
        for row in range(map.height):
            map.command_set(column, row, 0, Cell(flat_index))
            if column % 16 == 0 and row % 16 == 0 and map.layers > 1:
                map.command_set(column, row, 1, Cell(flat_index))
        map.apply_commands()
    return flat_index
