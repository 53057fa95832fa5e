"""Compass directions used to address the neighbors of a cell."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """Directions on the map.

    The values of the cardinal directions double as indices into ``Tile.heights``,
    so ``tile.heights[Direction.E]`` is the height of the eastern corner.
    """

    N = 0
    E = 1
    S = 2
    W = 3
    NE = 4
    SE = 5
    SW = 6
    NW = 7

    @property
    def has_n(self) -> bool:
        """Does the direction have an 'N' part? (N, NE and NW)."""
        return self in (Direction.N, Direction.NE, Direction.NW)

    @property
    def has_e(self) -> bool:
        """Does the direction have an 'E' part? (E, NE and SE)."""
        return self in (Direction.E, Direction.NE, Direction.SE)

    @property
    def has_s(self) -> bool:
        """Does the direction have an 'S' part? (S, SE and SW)."""
        return self in (Direction.S, Direction.SE, Direction.SW)

    @property
    def has_w(self) -> bool:
        """Does the direction have an 'W' part? (W, NW and SW)."""
        return self in (Direction.W, Direction.NW, Direction.SW)

    @property
    def is_diagonal(self) -> bool:  # noqa: D102
        return self >= Direction.NE

    def part_dirs(self) -> tuple[Direction, Direction]:
        """Get the cardinal parts of a diagonal direction, e.g. N and W for NW.

        Raises:
            ValueError: if the direction is not diagonal
        """
        try:
            return _PART_DIRS[self]
        except KeyError:
            raise ValueError(
                f"Cannot get parts of non-diagonal direction {self.name}"
            ) from None


_PART_DIRS = {
    Direction.NE: (Direction.N, Direction.E),
    Direction.SE: (Direction.S, Direction.E),
    Direction.SW: (Direction.S, Direction.W),
    Direction.NW: (Direction.N, Direction.W),
}

CARDINAL_DIRECTIONS = (Direction.N, Direction.E, Direction.S, Direction.W)
DIAGONAL_DIRECTIONS = (Direction.NE, Direction.SE, Direction.SW, Direction.NW)
