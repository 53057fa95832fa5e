"""Map commands.

Commands are queued by the ``command_*`` methods of ``Map`` and executed together
by ``Map.apply_commands``, in the order they were queued.
"""

from __future__ import annotations

from dataclasses import dataclass

from isoterrain.cell_space.cell import Cell


@dataclass(frozen=True, slots=True)
class SetCell:
    """Set the cell at the given coordinates, replacing any existing cell."""

    column: int
    row: int
    layer: int
    cell: Cell


@dataclass(frozen=True, slots=True)
class ClearCell:
    """Delete the cell at the given coordinates, if any."""

    column: int
    row: int
    layer: int


@dataclass(frozen=True, slots=True)
class RaiseTerrain:
    """Raise the cell at the given coordinates to the layer above."""

    column: int
    row: int
    layer: int


MapCommand = SetCell | ClearCell | RaiseTerrain
