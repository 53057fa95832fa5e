"""Exception hierarchy for isoterrain.

Only precondition violations are raised as exceptions. Gaps in content data (a
missing flat tile, no tile matching the heights a connection needs) are logged
and the map is left as it is.
"""

import isoterrain


class IsoterrainError(Exception):
    """Base class for all isoterrain-specific exceptions.
    It automatically appends the isoterrain version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.isoterrain_version = getattr(isoterrain, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[isoterrain {self.isoterrain_version}] {message}"
        super().__init__(full_message)


# Space Errors
class SpaceError(IsoterrainError):
    """Generic errors related to the map, its layers or its tiles."""


class GridDimensionError(SpaceError):
    """Raised when map dimensions are invalid.
    Examples: zero or negative width/height/layers, non-integer dimensions, or
    dimensions too large to address.
    """


class OutOfBoundsError(SpaceError):
    """Raised when a command addresses a coordinate outside the map."""

    def __init__(self, pos, dimensions):
        self.pos = pos
        self.dimensions = dimensions
        message = f"Position {pos} is out of bounds for map dimensions {dimensions}."
        super().__init__(message)


class TileIndexError(SpaceError, IndexError):
    """Raised when a tile index does not refer to a tile in the tile storage."""

    def __init__(self, index, tile_count):
        self.index = index
        self.tile_count = tile_count
        message = f"Tile index {index} is out of range for {tile_count} stored tiles."
        super().__init__(message)


# Command Errors
class CommandError(IsoterrainError, TypeError):
    """Raised when something that is not a map command is handed to the cell state."""

    def __init__(self, command):
        self.command = command
        message = f"Unknown map command {command!r}."
        super().__init__(message)
