"""Conversion between world space positions and map cell coordinates.

The map is *staggered*: diamond shaped cells form a rectangular map, each row
runs east-ward in screen space and consecutive rows are offset by half a cell.
A world position is first converted to coordinates on a 'diamond' map (the
layout where the map itself is a big diamond, as in e.g. Age of Empires) and
those are then folded into the staggered (column, row, layer) coordinates.

Both directions use floor division, so they are exact inverses of each other for
negative coordinates too.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

# Size of a map cell in world space; the last component is the height of a layer.
CELL_SIZE_WORLD: tuple[int, int, int] = (256, 256, 128)

CellCoords = tuple[int, int, int]


def world_to_cell(
    position: Sequence[float] | np.ndarray,
    cell_size: Sequence[int] = CELL_SIZE_WORLD,
) -> CellCoords:
    """Get (column, row, layer) coordinates of the cell containing a world position.

    Args:
        position: world space position (x, y, z)
        cell_size: world space size of a cell along each axis

    Returns:
        the column, row and layer of the cell; may lie outside any particular map
    """
    diamond = np.floor(
        np.asarray(position, dtype=np.float64) / np.asarray(cell_size, dtype=np.float64)
    ).astype(np.int64)
    dx, dy, dz = (int(c) for c in diamond)
    # X adds -X rows and X/2 columns, Y adds Y rows and Y/2 columns
    return (dx + dy) // 2, dy - dx, dz


def cell_to_world(
    coords: Sequence[int], cell_size: Sequence[int] = CELL_SIZE_WORLD
) -> np.ndarray:
    """Get the world space position of the eastern corner of a cell.

    Args:
        coords: column, row and layer of the cell
        cell_size: world space size of a cell along each axis

    Returns:
        np.ndarray of shape (3,) with the world position
    """
    column, row, layer = (int(c) for c in coords)
    # columns add one diagonal step on both axes, rows alternate between the two
    diamond = np.array(
        [column - row // 2, column + (row + 1) // 2, layer], dtype=np.float64
    )
    return diamond * np.asarray(cell_size, dtype=np.float64)
