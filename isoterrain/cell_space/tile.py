"""Tiles and the storage that owns them.

A tile is a shape template shared by any number of cells: the heights of the
four corners of the cell surface plus the vertices the renderer draws for it.
Cells refer to tiles by their index in :class:`TileStorage`. Tiles can only be
appended to the storage, never removed or moved, so an index stays valid for
the lifetime of the storage.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from isoterrain.cell_space.direction import Direction
from isoterrain.errors import TileIndexError

# Vertex layout used in tile graphics.
MAP_VERTEX_DTYPE = np.dtype([("position", np.float32, (3,)), ("color", np.uint8, (4,))])

Heights = tuple[int, int, int, int]


def _as_vertices(vertices) -> np.ndarray:
    array = np.array(vertices if vertices is not None else [], dtype=MAP_VERTEX_DTYPE)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, slots=True)
class Tile:
    """Shape template of a cell.

    Attributes:
        height_n: height of the cell surface at its northern corner
        height_e: height of the cell surface at its eastern corner
        height_s: height of the cell surface at its southern corner
        height_w: height of the cell surface at its western corner
        line_vertices: vertices to draw as lines; vertices 0 and 1 form the first
            line, 2 and 3 the second, etc.
        triangle_vertices: vertices to draw as triangles; vertices 0, 1 and 2 form
            the first triangle, 3, 4 and 5 the second, etc.

    Notes:
        The vertex arrays are read-only numpy arrays of ``MAP_VERTEX_DTYPE``. They
        are only of interest to the renderer and take no part in tile equality.
    """

    height_n: int
    height_e: int
    height_s: int
    height_w: int
    line_vertices: np.ndarray = field(default=None, compare=False, repr=False)
    triangle_vertices: np.ndarray = field(default=None, compare=False, repr=False)

    def __post_init__(self):  # noqa: D105
        for name in ("height_n", "height_e", "height_s", "height_w"):
            value = getattr(self, name)
            if int(value) != value or value < 0:
                raise ValueError(
                    f"Tile {name} must be a non-negative integer, got {value}."
                )
            object.__setattr__(self, name, int(value))
        object.__setattr__(self, "line_vertices", _as_vertices(self.line_vertices))
        object.__setattr__(
            self, "triangle_vertices", _as_vertices(self.triangle_vertices)
        )

    @property
    def heights(self) -> Heights:
        """Corner heights in N, E, S, W order, indexable by ``Direction``."""
        return (self.height_n, self.height_e, self.height_s, self.height_w)

    def height(self, direction: Direction) -> int:
        """Height of the corner in a cardinal direction."""
        return self.heights[direction]

    @property
    def is_flat(self) -> bool:
        """Whether all corners are at the base of the cell."""
        return self.heights == (0, 0, 0, 0)


class TileStorage:
    """Append-only storage of all tiles of a map.

    Cells refer to tiles in this storage by index. There is no way to
    remove or reorder tiles, so an index handed out by ``append`` keeps referring
    to the same tile.
    """

    def __init__(self, tiles: Sequence[Tile] = ()) -> None:
        """Create a storage, optionally seeded with tiles.

        Args:
            tiles: tiles to append, in order
        """
        self._tiles: list[Tile] = []
        for tile in tiles:
            self.append(tile)

    def append(self, tile: Tile) -> int:
        """Add a tile and return its index."""
        if not isinstance(tile, Tile):
            raise TypeError(f"Expected a Tile, got {type(tile).__name__}.")
        self._tiles.append(tile)
        return len(self._tiles) - 1

    def get(self, index: int) -> Tile:
        """Get the tile at index.

        Raises:
            TileIndexError: if no tile exists at index
        """
        if not 0 <= index < len(self._tiles):
            raise TileIndexError(index, len(self._tiles))
        return self._tiles[index]

    def find_matching(self, heights: Sequence[int]) -> int | None:
        """Get the index of the first tile with the given corner heights, if any.

        Args:
            heights: heights of the N, E, S and W corners
        """
        wanted = tuple(heights)
        for index, tile in enumerate(self._tiles):
            if tile.heights == wanted:
                return index
        return None

    def find_flat(self) -> int | None:
        """Get the index of the first flat tile, if any."""
        return self.find_matching((0, 0, 0, 0))

    def __getitem__(self, index: int) -> Tile:  # noqa: D105
        return self.get(index)

    def __len__(self) -> int:  # noqa: D105
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:  # noqa: D105
        return iter(self._tiles)

    def __repr__(self) -> str:  # noqa: D105
        return f"TileStorage({len(self._tiles)} tiles)"
