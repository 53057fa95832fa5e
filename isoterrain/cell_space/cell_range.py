"""Iteration over the cells of a map.

Cells are visited in the following order (layers, rows and columns without any
cells are skipped; only cells are visited)::

    layer 0:
        row 0:
            column 0
            ...
            column max
        row 1: ...
        ...
        row max
    layer 1: ...
    ...
    layer max
"""

from __future__ import annotations

import sys
from bisect import bisect_left
from collections.abc import Sequence
from typing import TYPE_CHECKING

from isoterrain.cell_space.cell import CellWithCoords

if TYPE_CHECKING:
    from isoterrain.cell_space.cell_state import CellState

UNBOUNDED = (sys.maxsize, sys.maxsize, sys.maxsize)


class CellRange:
    """A forward-only iterator over the cells in a column/row/layer interval.

    The interval is half-open: ``minimum`` is inclusive, ``maximum`` exclusive.
    Bounds past the edge of the map are clamped. Once exhausted, a range stays
    exhausted; construct a new one to iterate again.

    The cell state must not be modified while a range over it is in use.
    """

    def __init__(
        self,
        state: CellState,
        minimum: Sequence[int] = (0, 0, 0),
        maximum: Sequence[int] = UNBOUNDED,
    ) -> None:
        """Create a range over the cells of a cell state.

        Args:
            state: cell state to iterate over
            minimum: minimum column, row and layer (inclusive)
            maximum: maximum column, row and layer (exclusive)

        Raises:
            ValueError: if a minimum is negative or greater than its maximum
        """
        minimum = tuple(int(v) for v in minimum)
        maximum = tuple(int(v) for v in maximum)
        if len(minimum) != 3 or len(maximum) != 3:
            raise ValueError("minimum and maximum must be (column, row, layer) triples")
        for axis, lo, hi in zip(("column", "row", "layer"), minimum, maximum):
            if lo < 0:
                raise ValueError(f"minimum {axis} must be >= 0, got {lo}")
            if lo > hi:
                raise ValueError(f"minimum {axis} must be <= maximum {axis}")

        self._state = state
        self._min_column, self._min_row, self._min_layer = minimum
        self._max_column = min(maximum[0], state.width)
        self._max_row = min(maximum[1], state.height)
        self._max_layer = min(maximum[2], len(state.layers))

        self._layer = self._min_layer
        self._row = self._min_row
        self._index = 0
        self._exhausted = (
            self._min_column >= self._max_column
            or self._min_row >= self._max_row
            or self._min_layer >= self._max_layer
        )
        if not self._exhausted:
            self._skip_empty_layers()
            if not self._exhausted:
                self._skip_cells()

    @property
    def empty(self) -> bool:
        """Whether there are no more cells in the range."""
        return self._exhausted

    def __iter__(self) -> CellRange:  # noqa: D105
        return self

    def __next__(self) -> CellWithCoords:  # noqa: D105
        while not self._exhausted:
            cell_row = self._state.layers[self._layer].rows[self._row]
            if (
                self._index < len(cell_row)
                and cell_row.columns[self._index] < self._max_column
            ):
                item = CellWithCoords(
                    cell_row.columns[self._index],
                    self._row,
                    self._layer,
                    cell_row.cells[self._index],
                )
                self._index += 1
                return item
            # done with this row, the rest of it is past the interval
            self._next_row()
        raise StopIteration

    def _next_row(self) -> None:
        self._row += 1
        if self._row >= self._max_row:
            self._layer += 1
            self._skip_empty_layers()
            if self._exhausted:
                return
        self._skip_cells()

    def _skip_empty_layers(self) -> None:
        """Move to the first row of the next layer in the interval holding any cells."""
        layers = self._state.layers
        while self._layer < self._max_layer and len(layers[self._layer]) == 0:
            self._layer += 1
        if self._layer >= self._max_layer:
            self._exhausted = True
            return
        self._row = self._min_row

    def _skip_cells(self) -> None:
        """Skip all cells before the interval in the current row."""
        columns = self._state.layers[self._layer].rows[self._row].columns
        self._index = bisect_left(columns, self._min_column)
