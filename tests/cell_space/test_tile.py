"""Tests for Tile and TileStorage."""

import numpy as np
import pytest

from isoterrain.cell_space import MAP_VERTEX_DTYPE, Direction, Tile, TileStorage
from isoterrain.errors import SpaceError, TileIndexError


class TestTile:
    """Tests for the Tile class."""

    def test_heights(self):
        """Corner heights are exposed individually and in N, E, S, W order."""
        tile = Tile(1, 2, 3, 4)
        assert tile.heights == (1, 2, 3, 4)
        assert tile.height(Direction.N) == 1
        assert tile.heights[Direction.W] == 4
        assert not tile.is_flat
        assert Tile(0, 0, 0, 0).is_flat

    def test_negative_height_raises(self):
        """Heights are non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            Tile(0, -1, 0, 0)

    def test_vertices_default_to_empty_arrays(self):
        """A tile without graphics gets empty vertex arrays."""
        tile = Tile(0, 0, 0, 0)
        assert tile.line_vertices.dtype == MAP_VERTEX_DTYPE
        assert len(tile.line_vertices) == 0
        assert len(tile.triangle_vertices) == 0

    def test_vertices_are_read_only(self):
        """Tiles are immutable, including their vertices."""
        tile = Tile(
            0, 0, 0, 0, line_vertices=[((0, 0, 0), (255, 255, 255, 255))] * 2
        )
        np.testing.assert_array_equal(tile.line_vertices["color"][0], [255] * 4)
        with pytest.raises(ValueError):
            tile.line_vertices["position"][0] = (1, 1, 1)
        with pytest.raises(AttributeError):
            tile.height_n = 5

    def test_equality_ignores_graphics(self):
        """Tiles compare by their shape."""
        plain = Tile(0, 128, 0, 0)
        drawn = Tile(0, 128, 0, 0, triangle_vertices=[((0, 0, 0), (0, 0, 0, 255))] * 3)
        assert plain == drawn
        assert plain != Tile(0, 0, 0, 0)


class TestTileStorage:
    """Tests for the TileStorage class."""

    def test_append_returns_increasing_indices(self):
        """Indices are handed out in order and never reused."""
        storage = TileStorage()
        assert storage.append(Tile(0, 0, 0, 0)) == 0
        assert storage.append(Tile(0, 0, 0, 0)) == 1
        assert storage.append(Tile(128, 0, 0, 0)) == 2
        assert len(storage) == 3
        assert storage.get(2) == Tile(128, 0, 0, 0)
        assert storage[0] == Tile(0, 0, 0, 0)

    def test_append_rejects_non_tiles(self):
        """Only tiles can be stored."""
        with pytest.raises(TypeError):
            TileStorage().append((0, 0, 0, 0))

    @pytest.mark.parametrize("index", [-1, 3, 100])
    def test_get_out_of_range(self, index):
        """An index not handed out by append is an error."""
        storage = TileStorage([Tile(0, 0, 0, 0)] * 3)
        with pytest.raises(TileIndexError):
            storage.get(index)
        with pytest.raises(IndexError):
            storage[index]
        with pytest.raises(SpaceError, match="out of range"):
            storage.get(index)

    def test_find_matching(self):
        """The first tile with matching heights is found."""
        storage = TileStorage(
            [Tile(0, 128, 0, 0), Tile(0, 0, 0, 0), Tile(0, 128, 0, 0)]
        )
        assert storage.find_matching((0, 128, 0, 0)) == 0
        assert storage.find_matching([0, 0, 0, 0]) == 1
        assert storage.find_flat() == 1
        assert storage.find_matching((1, 2, 3, 4)) is None

    def test_find_flat_without_flat_tile(self):
        """No flat tile gives None."""
        assert TileStorage().find_flat() is None
        assert TileStorage([Tile(128, 0, 0, 0)]).find_flat() is None

    def test_iteration(self):
        """Iterating yields the tiles in index order."""
        tiles = [Tile(0, 0, 0, 0), Tile(128, 0, 0, 0)]
        assert list(TileStorage(tiles)) == tiles
