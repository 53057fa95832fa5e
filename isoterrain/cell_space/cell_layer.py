"""Sparse storage of the cells of one layer of the map."""

from __future__ import annotations

from bisect import bisect_left, bisect_right

import numpy as np

from isoterrain.cell_space.cell import Cell


class CellRow:
    """Cells of one row of a layer, sorted by column.

    There is not necessarily a cell in every column. ``columns`` and ``cells`` are
    parallel lists; ``columns`` is strictly increasing.
    """

    __slots__ = ("cells", "columns")

    def __init__(self) -> None:  # noqa: D107
        self.columns: list[int] = []
        self.cells: list[Cell] = []

    def index_of(self, column: int) -> int | None:
        """Position of the cell at column in this row, if there is one."""
        index = bisect_left(self.columns, column)
        if index < len(self.columns) and self.columns[index] == column:
            return index
        return None

    def is_sorted(self) -> bool:
        """Check the row invariant: columns strictly increasing."""
        return all(a < b for a, b in zip(self.columns, self.columns[1:]))

    def __len__(self) -> int:  # noqa: D105
        return len(self.columns)


class CellLayer:
    """A layer of cells on the map.

    The map consists of multiple layers with different height levels, allowing
    hills, slopes, cliffs, bridges and multi-level structures.

    Attributes:
        width (int): number of columns
        height (int): number of rows
        rows (list[CellRow]): the rows of the layer, ``height`` of them

    Notes:
        Whether a slot is occupied is tracked in a (width, height) boolean array so
        ``has_cell`` never has to search a row. The array and the rows must always
        agree.
    """

    def __init__(self, width: int, height: int) -> None:
        """Construct an empty layer.

        Args:
            width: number of columns
            height: number of rows
        """
        self.width = width
        self.height = height
        self.rows: list[CellRow] = [CellRow() for _ in range(height)]
        self._occupied = np.zeros((width, height), dtype=bool)
        self._count = 0

    def has_cell(self, column: int, row: int) -> bool:
        """Is there a cell at column, row?"""
        return bool(self._occupied[column, row])

    def get_cell(self, column: int, row: int) -> Cell | None:
        """Get the cell at column, row, or None if the slot is empty."""
        if not self._occupied[column, row]:
            return None
        cell_row = self.rows[row]
        return cell_row.cells[cell_row.index_of(column)]

    def set_cell(self, column: int, row: int, cell: Cell) -> None:
        """Set the cell at column, row, replacing any cell already there."""
        cell_row = self.rows[row]
        if self._occupied[column, row]:
            cell_row.cells[cell_row.index_of(column)] = cell
            return

        columns = cell_row.columns
        # fast path when cells are added left to right, e.g. during map generation
        if columns and columns[-1] < column:
            columns.append(column)
            cell_row.cells.append(cell)
        else:
            index = bisect_right(columns, column)
            columns.insert(index, column)
            cell_row.cells.insert(index, cell)
        assert cell_row.is_sorted(), "cell row invalid after inserting a cell"
        self._occupied[column, row] = True
        self._count += 1

    def delete_cell(self, column: int, row: int) -> None:
        """Delete the cell at column, row. Does nothing if there is no cell."""
        if not self._occupied[column, row]:
            return
        cell_row = self.rows[row]
        index = cell_row.index_of(column)
        assert index is not None, (
            f"column {column} not in row {row} even though the slot is occupied"
        )
        del cell_row.columns[index]
        del cell_row.cells[index]
        self._occupied[column, row] = False
        self._count -= 1

    @property
    def occupancy(self) -> np.ndarray:
        """Read-only (width, height) view of which slots hold a cell."""
        view = self._occupied.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        """Number of cells in the layer."""
        return self._count
