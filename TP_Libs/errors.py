"""
Error types raised by the tile engine.

Classes:
    TileEngineError: Base class for every engine error
    MissingTileError: A referenced tile path does not exist
    TileDecodeError: Source bytes are not a readable raster
    TileEncodeError: The destination could not be created or written
"""


class TileEngineError(Exception):
    """Base class for tile engine errors."""


class MissingTileError(TileEngineError, FileNotFoundError):
    """Raised when a tile path does not exist."""


class TileDecodeError(TileEngineError, OSError):
    """Raised when a tile file cannot be decoded."""


class TileEncodeError(TileEngineError, OSError):
    """Raised when a tile cannot be written to its destination."""
