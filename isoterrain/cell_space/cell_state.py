"""Storage of all cells of the map, and the commands that modify them.

``CellState`` is the backend of ``Map``: it owns the layers, resolves coordinates
to cells and executes map commands, including the terrain raising algorithm that
connects a raised cell to the cells around it.
"""

from __future__ import annotations

from collections.abc import Sequence

from isoterrain.cell_space.cell import Cell
from isoterrain.cell_space.cell_layer import CellLayer
from isoterrain.cell_space.cell_range import UNBOUNDED, CellRange
from isoterrain.cell_space.commands import ClearCell, MapCommand, RaiseTerrain, SetCell
from isoterrain.cell_space.direction import DIAGONAL_DIRECTIONS, Direction
from isoterrain.cell_space.tile import Tile, TileStorage
from isoterrain.coordinates import CELL_SIZE_WORLD, CellCoords
from isoterrain.errors import CommandError
from isoterrain.isoterrain_logging import create_module_logger, method_logger

_isoterrain_logger = create_module_logger()


class CellState:
    """Stores all cells (layers, rows) of the map.

    Attributes:
        width (int): number of columns in each row
        height (int): number of rows in each layer
        layers (list[CellLayer]): the layers, indexed by elevation
        tile_storage (TileStorage): tiles referenced by the cells; only read here
        layer_height (int): height of a layer in the units of tile heights
    """

    def __init__(
        self,
        width: int,
        height: int,
        layers: int,
        tile_storage: TileStorage,
        layer_height: int = CELL_SIZE_WORLD[2],
    ) -> None:
        """Construct the cell state for a map of the given size.

        Args:
            width: width of the map in columns
            height: height of the map in rows
            layers: depth of the map in layers
            tile_storage: tiles referenced by cells
            layer_height: height of one layer in the units of tile heights
        """
        self.width = width
        self.height = height
        self.layers: list[CellLayer] = [CellLayer(width, height) for _ in range(layers)]
        self.tile_storage = tile_storage
        self.layer_height = layer_height

    def in_bounds(self, coords: Sequence[int]) -> bool:
        """Whether the column, row and layer lie within the map."""
        column, row, layer = coords
        return (
            0 <= column < self.width
            and 0 <= row < self.height
            and 0 <= layer < len(self.layers)
        )

    def cell(self, coords: Sequence[int]) -> Cell | None:
        """Get the cell at column, row, layer.

        Returns None both if there is no cell and if the coordinates are outside the
        map; use ``in_bounds`` to tell the two apart.
        """
        if not self.in_bounds(coords):
            return None
        column, row, layer = coords
        return self.layers[layer].get_cell(column, row)

    def tile(self, coords: Sequence[int]) -> Tile | None:
        """Get the tile of the cell at column, row, layer, if there is a cell."""
        cell = self.cell(coords)
        if cell is None:
            return None
        return self.tile_storage.get(cell.tile_index)

    def cell_count(self) -> int:
        """Total number of cells in all layers."""
        return sum(len(layer) for layer in self.layers)

    def all_cells(self) -> CellRange:
        """Get a range of all cells in the map."""
        return CellRange(self)

    def cell_range(
        self, minimum: Sequence[int], maximum: Sequence[int] = UNBOUNDED
    ) -> CellRange:
        """Get a range of the cells in a column/row/layer interval.

        See Also:
            ``Map.cell_range``
        """
        return CellRange(self, minimum, maximum)

    def n(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the northern neighbor."""
        return column, row + 2, layer

    def e(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the eastern neighbor."""
        return column + 1, row, layer

    def s(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the southern neighbor."""
        return column, row - 2, layer

    def w(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the western neighbor."""
        return column - 1, row, layer

    def ne(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the north-eastern neighbor."""
        return column + row % 2, row + 1, layer

    def se(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the south-eastern neighbor."""
        return column + row % 2, row - 1, layer

    def sw(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the south-western neighbor."""
        return column + row % 2 - 1, row - 1, layer

    def nw(self, column: int, row: int, layer: int) -> CellCoords:
        """Coordinates of the north-western neighbor."""
        return column + row % 2 - 1, row + 1, layer

    def neighbor(
        self, direction: Direction, column: int, row: int, layer: int
    ) -> CellCoords:
        """Coordinates of the neighbor in a direction; may lie outside the map."""
        return getattr(self, direction.name.lower())(column, row, layer)

    def command(self, command: MapCommand) -> None:
        """Apply a map command."""
        match command:
            case SetCell(column, row, layer, cell):
                self.layers[layer].set_cell(column, row, cell)
            case ClearCell(column, row, layer):
                self.layers[layer].delete_cell(column, row)
            case RaiseTerrain(column, row, layer):
                self.raise_terrain(column, row, layer)
            case _:
                raise CommandError(command)

    @method_logger(__name__)
    def raise_terrain(self, column: int, row: int, layer: int) -> None:
        """Raise the cell at column, row, layer to the layer above.

        Replaces the cell with a flat cell on the layer above, then connects the new
        cell to the cells around it and creates a foundation (a 'hill') for it if
        needed. Connections for which no tile with the needed heights exists are
        logged and left out.

        Does nothing if there is no cell at the coordinates or if ``layer`` is the
        top layer.

        Notes:
            The foundation is built by raising cells below the neighbors, which
            recurses once per layer the foundation reaches down, at about three
            stack frames per layer. A foundation a few hundred layers deep can
            exceed the interpreter's recursion limit (``sys.getrecursionlimit()``).
        """
        if not 0 <= layer < len(self.layers) - 1:
            return
        if self.cell((column, row, layer)) is None:
            return
        _isoterrain_logger.info(f"raising terrain at {column} {row} {layer}")

        # TODO: use a flat tile of the same terrain type as the raised cell once tiles
        # are grouped into terrain types.
        flat_index = self.tile_storage.find_flat()
        if flat_index is None:
            _isoterrain_logger.warning("Failed to raise terrain: no flat tile loaded.")
            return
        self.layers[layer + 1].set_cell(column, row, Cell(flat_index))
        self.layers[layer].delete_cell(column, row)

        coords_top: dict[Direction, CellCoords] = {}
        coords_bottom: dict[Direction, CellCoords] = {}
        tiles_top: dict[Direction, Tile] = {}
        tiles_bottom: dict[Direction, Tile] = {}
        for direction in Direction:
            coords_top[direction] = self.neighbor(direction, column, row, layer + 1)
            coords_bottom[direction] = self.neighbor(direction, column, row, layer)
            if (tile := self.tile(coords_top[direction])) is not None:
                tiles_top[direction] = tile
            if (tile := self.tile(coords_bottom[direction])) is not None:
                tiles_bottom[direction] = tile

        # First connect to cells (e.g. hills) on the layer of the raised cell.
        done: set[Direction] = set()
        for direction, tile in tiles_top.items():
            self._connect_neighbor(direction, tile, 0, coords_top[direction])
            done.add(direction)

        for direction in DIAGONAL_DIRECTIONS:
            if direction not in done and direction in tiles_bottom:
                if self._connect_diagonal(
                    direction, coords_top, tiles_top, tiles_bottom[direction]
                ):
                    done.add(direction)

        # Build a foundation so the raised cell does not float.
        if layer > 0:
            for direction in Direction:
                if direction in done or direction in tiles_bottom:
                    continue
                self._raise_below(coords_bottom[direction])
                if (tile := self.tile(coords_bottom[direction])) is not None:
                    tiles_bottom[direction] = tile

        # Connect to cells on the layer the cell was raised from.
        for direction in Direction:
            if direction not in done and direction in tiles_bottom:
                self._connect_neighbor(
                    direction,
                    tiles_bottom[direction],
                    self.layer_height,
                    coords_bottom[direction],
                )
                done.add(direction)

    def _raise_below(self, coords: CellCoords) -> None:
        """Raise the cell (if any) one layer below coords."""
        column, row, layer = coords
        assert layer > 0, "cannot raise terrain below the bottom layer"
        self.raise_terrain(column, row, layer - 1)

    def _connect_diagonal(
        self,
        direction: Direction,
        coords_top: dict[Direction, CellCoords],
        tiles_top: dict[Direction, Tile],
        tile_bottom: Tile,
    ) -> bool:
        """Connect a diagonal neighbor that has no cell on the layer of the raised cell.

        There may still be a cell on that layer in one or both of the cardinal
        directions making up the diagonal; those must be connected to as well as
        the diagonal cell on the layer below.

        Returns:
            True if the diagonal was handled, False if neither part has a top cell
        """
        a, b = direction.part_dirs()
        lz = self.layer_height
        below = coords_top[direction][:2] + (coords_top[direction][2] - 1,)
        if a in tiles_top and b in tiles_top:
            self._raise_below(coords_top[direction])
        elif a in tiles_top:
            side = tiles_top[a].heights[b]
            bottom = tile_bottom.heights[b]
            self._make_cell(
                (
                    lz + side if direction.has_n else lz,
                    bottom if direction.has_e else lz,
                    lz + side if direction.has_s else lz,
                    bottom if direction.has_w else lz,
                ),
                below,
            )
        elif b in tiles_top:
            side = tiles_top[b].heights[a]
            bottom = tile_bottom.heights[a]
            self._make_cell(
                (
                    bottom if direction.has_n else lz,
                    lz + side if direction.has_e else lz,
                    bottom if direction.has_s else lz,
                    lz + side if direction.has_w else lz,
                ),
                below,
            )
        else:
            return False
        return True

    def _connect_neighbor(
        self, direction: Direction, tile: Tile, base: int, coords: CellCoords
    ) -> None:
        """Reshape a neighbor of the raised cell so it slopes towards it.

        Args:
            direction: direction of the neighbor from the raised cell
            tile: current tile of the neighbor
            base: height of the raised cell as seen from the neighbor's layer
            coords: column, row and layer of the neighbor
        """
        n, e, s, w = tile.heights
        match direction:
            case Direction.N:
                heights = (n, e, base, w)
            case Direction.E:
                heights = (n, e, s, base)
            case Direction.S:
                heights = (base, e, s, w)
            case Direction.W:
                heights = (n, base, s, w)
            case Direction.NE:
                heights = (n, e, base, base)
            case Direction.SE:
                heights = (base, e, s, base)
            case Direction.SW:
                heights = (base, base, s, w)
            case Direction.NW:
                heights = (n, base, base, w)
        self._make_cell(heights, coords)

    def _make_cell(self, heights: tuple[int, int, int, int], coords: CellCoords) -> None:
        """Put a cell with a tile of the given heights at coords.

        Replaces any cell at coords. If all heights reach the next layer, the cell is
        made on the next layer instead (with heights lowered by a layer) and the
        cell at coords is deleted.
        """
        column, row, layer = coords
        if min(heights) >= self.layer_height:
            if layer + 1 >= len(self.layers):
                _isoterrain_logger.warning(
                    f"Failed to make cell when raising terrain: heights {heights} "
                    f"at {coords} reach above the top layer"
                )
                return
            self.layers[layer].delete_cell(column, row)
            self._make_cell(
                tuple(h - self.layer_height for h in heights),
                (column, row, layer + 1),
            )
            return

        tile_index = self.tile_storage.find_matching(heights)
        if tile_index is None:
            _isoterrain_logger.warning(
                "Failed to make cell when raising terrain: "
                f"found no tile with heights {heights} (N, E, S, W)"
            )
            return
        self.layers[layer].set_cell(column, row, Cell(tile_index))
