"""The map class for isoterrain.

Core Objects: Map
"""

from __future__ import annotations

from collections.abc import Sequence

from isoterrain.cell_space import Cell, CellRange, CellState, Tile, TileStorage
from isoterrain.cell_space.cell_range import UNBOUNDED
from isoterrain.cell_space.commands import ClearCell, MapCommand, RaiseTerrain, SetCell
from isoterrain.coordinates import CELL_SIZE_WORLD
from isoterrain.errors import GridDimensionError, OutOfBoundsError, TileIndexError
from isoterrain.isoterrain_logging import create_module_logger, method_logger

_isoterrain_logger = create_module_logger()

# Rows and columns are stored as 16 bit values by the renderer.
MAX_DIMENSION = 65535
DEFAULT_MAX_RESERVED_COMMANDS = 4096


class Map:
    """Game map.

    The map has multiple layers, enabling e.g. bridges or multi-level structures.

    Cell layout is *staggered* like in C&C TS/RA2: diamond cells form a
    rectangular (not diamond) map. Each row of cells is horizontal (east-ward) in
    screen space, and the rows are staggered and spaced vertically by *half* of
    the cell size. A 64x64 map is therefore a rectangle twice as wide as it is high,
    while a 64x128 map is square in the game world.

    Attributes:
        tile_storage (TileStorage): the tiles cells of this map refer to. Tiles may
            be appended at any time, but never removed.

    Notes:
        The map is not synchronized. Commands may only be queued from one thread, and
        ``apply_commands`` must be called between updates, while nothing is
        iterating over the cells.

    """

    @method_logger(__name__)
    def __init__(
        self,
        width: int,
        height: int,
        layers: int,
        *,
        max_reserved_commands: int = DEFAULT_MAX_RESERVED_COMMANDS,
        layer_height: int = CELL_SIZE_WORLD[2],
    ) -> None:
        """Create a map with specified size.

        Args:
            width: number of cells in each row of the map
            height: number of rows in each layer of the map
            layers: number of layers in the map
            max_reserved_commands: command queue size above which the queue is
                reallocated after applying commands
            layer_height: height of one layer in the units of tile heights

        Raises:
            GridDimensionError: if any dimension is not a positive integer below 65535
        """
        for name, value in (("width", width), ("height", height), ("layers", layers)):
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise GridDimensionError(
                    f"Map {name} must be a positive integer, got {value!r}."
                )
            if value >= MAX_DIMENSION:
                raise GridDimensionError(
                    f"Map {name} can't be more than {MAX_DIMENSION - 1}, got {value}."
                )

        self._width = width
        self._height = height
        self._layers = layers
        self.max_reserved_commands = max_reserved_commands
        self.tile_storage = TileStorage()
        self._cells = CellState(
            width, height, layers, self.tile_storage, layer_height=layer_height
        )
        self._commands: list[MapCommand] = []

    @property
    def width(self) -> int:
        """Width (number of columns) of the map."""
        return self._width

    @property
    def height(self) -> int:
        """Height (number of rows) of the map."""
        return self._height

    @property
    def layers(self) -> int:
        """Depth (number of layers) of the map."""
        return self._layers

    @property
    def dimensions(self) -> tuple[int, int, int]:
        """Width, height and number of layers of the map."""
        return self._width, self._height, self._layers

    @property
    def pending_commands(self) -> int:
        """Number of commands waiting for the next ``apply_commands``."""
        return len(self._commands)

    def in_bounds(self, coords: Sequence[int]) -> bool:
        """Whether column, row and layer lie within the map."""
        return self._cells.in_bounds(coords)

    def cell(self, coords: Sequence[int]) -> Cell | None:
        """Get the cell at column, row, layer; None if empty or outside the map."""
        return self._cells.cell(coords)

    def tile(self, coords: Sequence[int]) -> Tile | None:
        """Get the tile of the cell at column, row, layer, if there is a cell."""
        return self._cells.tile(coords)

    def cell_count(self) -> int:
        """Number of cells in the map."""
        return self._cells.cell_count()

    def all_cells(self) -> CellRange:
        """Get an iterator over all cells (in all rows/columns/layers) of the map.

        Elements are ``CellWithCoords`` named tuples: ``column``, ``row``, ``layer``
        and ``cell``.
        """
        return self._cells.all_cells()

    def cell_range(
        self, minimum: Sequence[int], maximum: Sequence[int] = UNBOUNDED
    ) -> CellRange:
        """Get an iterator over the cells in an interval of columns/rows/layers.

        Args:
            minimum: minimum column, row and layer, inclusive
            maximum: maximum column, row and layer, exclusive. Can be greater than
                the map bounds.

        Examples:
            Iterate over any cells in columns 1, 2, 3 and 4 that are in row 2 and in
            layers 0 and 1::

                for cell in map.cell_range((1, 2, 0), (5, 3, 2)):
                    ...
        """
        return self._cells.cell_range(minimum, maximum)

    def command_set(self, column: int, row: int, layer: int, cell: Cell) -> None:
        """Queue a command to set the cell at column, row, layer.

        Raises:
            OutOfBoundsError: if the coordinates are outside the map
            TileIndexError: if the cell refers to a tile not in ``tile_storage``
        """
        self._check_bounds(column, row, layer)
        if not 0 <= cell.tile_index < len(self.tile_storage):
            raise TileIndexError(cell.tile_index, len(self.tile_storage))
        self._commands.append(SetCell(column, row, layer, cell))

    def command_clear(self, column: int, row: int, layer: int) -> None:
        """Queue a command to delete the cell at column, row, layer.

        Applying the command does nothing if there is no cell.

        Raises:
            OutOfBoundsError: if the coordinates are outside the map
        """
        self._check_bounds(column, row, layer)
        self._commands.append(ClearCell(column, row, layer))

    def command_raise_terrain(self, column: int, row: int, layer: int) -> None:
        """Queue a command to raise the terrain at column, row, layer.

        Applying the command replaces the cell with a cell on the layer above, then
        connects the cells around it to the new cell and creates a foundation (a
        'hill') for it if needed. If there is no cell at the coordinates when the
        command is applied, it does nothing. Terrain on the top layer can't be
        raised; such commands are ignored. The foundation is built recursively;
        see ``CellState.raise_terrain`` for how deep that recursion can go.

        Raises:
            OutOfBoundsError: if the coordinates are outside the map
        """
        self._check_bounds(column, row, layer)
        if layer >= self._layers - 1:
            _isoterrain_logger.debug(
                f"ignoring raise terrain at {column} {row} {layer}: top layer"
            )
            return
        self._commands.append(RaiseTerrain(column, row, layer))

    def apply_commands(self) -> None:
        """Apply (and delete) all queued commands, in the order they were queued.

        Can be called e.g. between game updates. The queue is emptied even if a
        command fails, so no command is ever applied twice.
        """
        commands = self._commands
        try:
            for command in commands:
                self._cells.command(command)
        finally:
            # don't hold on to a large queue after a burst of commands
            if len(commands) > self.max_reserved_commands:
                _isoterrain_logger.debug(
                    f"reallocating queue after {len(commands)} commands"
                )
                self._commands = []
            else:
                commands.clear()

    def _check_bounds(self, column: int, row: int, layer: int) -> None:
        if not self._cells.in_bounds((column, row, layer)):
            raise OutOfBoundsError((column, row, layer), self.dimensions)
