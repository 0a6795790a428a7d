"""
Tile decode/encode boundary.

Decoding yields an RGBA PIL Image; encoding writes a tile to a destination
path atomically (temporary file in the same directory, then os.replace), so a
failed write never leaves a partial tile where a valid one used to be.

Functions:
    new_tile: Allocate a tile filled with one color
    decode_tile: Load a tile from disk as RGBA
    load_tile_or_placeholder: Load a tile, substituting a transparent placeholder
    encode_tile: Save a tile to disk atomically
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from TP_Libs.constants import (
    DEFAULT_OUTPUT_FORMAT,
    TEMP_FILE_PREFIX,
    TEMP_FILE_SUFFIX,
    TILE_MODE,
    TILE_SIZE,
    TRANSPARENT,
)
from TP_Libs.errors import MissingTileError, TileDecodeError, TileEncodeError, TileEngineError
from TP_Libs.pillow_compat import Image
from TP_Libs.PixelLib.tile_models import RgbaColor

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# mkstemp creates files as 0o600; written tiles get the mode open() would give.
# os.umask can only be read by setting it, so it is read once at import.
_UMASK = os.umask(0)
os.umask(_UMASK)
NEW_FILE_MODE = 0o666 & ~_UMASK


def new_tile(size: int = TILE_SIZE, color: RgbaColor = TRANSPARENT) -> Any:
    """Allocate a square RGBA tile of the given size filled with color."""
    return Image.new(TILE_MODE, (size, size), color)


def decode_tile(tile_path: PathLike) -> Any:
    """
    Load a tile image from disk.

    Args:
        tile_path: Path to the tile file

    Returns:
        PIL Image in RGBA mode, fully loaded (the file handle is released)

    Raises:
        MissingTileError: If the path does not exist
        TileDecodeError: If the file is not a readable raster
    """
    path = Path(tile_path)
    if not path.is_file():
        raise MissingTileError(f"Tile not found: {path}")

    try:
        with Image.open(path) as img:
            img.load()
            tile = img.convert(TILE_MODE)
    except (OSError, ValueError) as e:
        raise TileDecodeError(f"Failed to decode tile {path}: {e}") from e

    return tile


def load_tile_or_placeholder(
    tile_path: Optional[PathLike], size: int = TILE_SIZE
) -> Any:
    """
    Load a tile, or return a fully transparent placeholder if it is unavailable.

    Used by N-way merges and overview assembly, where a missing input is
    recoverable and contributes nothing visible.

    Args:
        tile_path: Path to the tile file (None means "no tile")
        size: Placeholder edge length in pixels

    Returns:
        PIL Image in RGBA mode
    """
    if tile_path is None:
        return new_tile(size, TRANSPARENT)

    try:
        return decode_tile(tile_path)
    except TileEngineError as e:
        logger.debug(f"Could not open tile, using transparent: {tile_path} ({e})")
        return new_tile(size, TRANSPARENT)


def _normalize_format(save_format: str) -> str:
    # PIL uses "JPEG" not "JPG"
    fmt = save_format.upper()
    return "JPEG" if fmt == "JPG" else fmt


def encode_tile(
    tile: Any, tile_path: PathLike, save_format: str = DEFAULT_OUTPUT_FORMAT
) -> Path:
    """
    Save a tile to disk, replacing any existing file atomically.

    Parent directories are created as needed. The image is written to a
    temporary file next to the destination and renamed into place only after
    encoding succeeds.

    Args:
        tile: PIL Image to save
        tile_path: Destination path
        save_format: Image format (PNG default)

    Returns:
        Path where the tile was saved

    Raises:
        TypeError: If tile is not a PIL Image
        TileEncodeError: If the destination cannot be created or written
    """
    if not hasattr(tile, "save") or not hasattr(tile, "mode"):
        raise TypeError(f"Expected PIL Image, got {type(tile)}")

    path = Path(tile_path)
    fmt = _normalize_format(save_format)
    if fmt == "JPEG" and tile.mode == "RGBA":
        tile = tile.convert("RGB")

    tmp_path: Optional[Path] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=TEMP_FILE_PREFIX, suffix=TEMP_FILE_SUFFIX, dir=path.parent
        )
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "wb") as handle:
            tile.save(handle, format=fmt)
        os.chmod(tmp_path, NEW_FILE_MODE)
        os.replace(tmp_path, path)
    except (OSError, ValueError, KeyError) as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise TileEncodeError(f"Failed to save tile to {path}: {e}") from e

    logger.debug(f"Wrote tile {path}")
    return path
