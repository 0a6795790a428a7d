"""
Coverage statistics over tile pixels.

Functions:
    pixel_fraction: Fraction of a tile's pixels exactly equal to a color
    transparent_fraction: Fraction of pixels with alpha 0
    content_pixel_count: Number of content (non-white, non-transparent) pixels
    is_blank_tile: True when a tile carries no content at all
    can_delete_tile: Blank check for a tile on disk
"""

import logging
from pathlib import Path
from typing import Any, Union

from TP_Libs.errors import TileEngineError
from TP_Libs.PixelLib.pixel_classifier import (
    color_mask,
    content_mask,
    tile_array,
    transparent_mask,
)
from TP_Libs.PixelLib.tile_io import decode_tile
from TP_Libs.PixelLib.tile_models import RgbaColor

logger = logging.getLogger(__name__)


def pixel_fraction(tile: Any, color: RgbaColor) -> float:
    """
    Compute the fraction of pixels exactly equal to a color.

    Args:
        tile: PIL Image of any size
        color: RGBA color to count

    Returns:
        Count of matching pixels divided by width * height, in [0, 1]
    """
    width, height = tile.size
    total = width * height
    if total == 0:
        return 0.0
    matches = int(color_mask(tile_array(tile), color).sum())
    return matches / total


def transparent_fraction(tile: Any) -> float:
    """Fraction of pixels with alpha 0, whatever their RGB."""
    width, height = tile.size
    if width * height == 0:
        return 0.0
    return float(transparent_mask(tile_array(tile)).mean())


def content_pixel_count(tile: Any) -> int:
    return int(content_mask(tile_array(tile)).sum())


def is_blank_tile(tile: Any) -> bool:
    """True when every pixel is Background-White or fully transparent."""
    return content_pixel_count(tile) == 0


def can_delete_tile(tile_path: Union[str, Path]) -> bool:
    """
    Check whether a tile file carries no content and can be removed.

    A tile that cannot be read is never reported as deletable.

    Args:
        tile_path: Path to the tile image

    Returns:
        True if the decoded tile is blank, False if it has content or
        could not be decoded
    """
    try:
        tile = decode_tile(tile_path)
    except TileEngineError as e:
        logger.debug(f"Keeping unreadable tile {tile_path}: {e}")
        return False

    return is_blank_tile(tile)
