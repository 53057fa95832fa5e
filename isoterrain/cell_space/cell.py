"""Cells of the map.

A cell represents a 'filled' volume: its base is a diamond at the bottom of the
layer the cell is in, while its surface can have a different height at each
corner (defined by the cell's tile), allowing slopes.

Everything that can't change without changing the shape of the cell belongs in
the ``Tile``; ``Cell`` only holds what differs between cells sharing a tile.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Cell:
    """One occupied slot of the map.

    Attributes:
        tile_index: index of the cell's tile in the map's ``TileStorage``
    """

    tile_index: int


class CellWithCoords(NamedTuple):
    """A cell together with the coordinates it was found at."""

    column: int
    row: int
    layer: int
    cell: Cell

    @property
    def tile_index(self) -> int:  # noqa: D102
        return self.cell.tile_index

    @property
    def coords(self) -> tuple[int, int, int]:  # noqa: D102
        return self.column, self.row, self.layer
