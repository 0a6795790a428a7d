"""
Pixel classification predicates.

A pixel is "content" when it is neither Background-White nor fully
transparent. The scalar predicates work on single RGBA tuples; the `*_mask`
variants classify a whole (height, width, 4) uint8 array at once.

Functions:
    is_white: Exact match with Background-White, alpha included
    is_transparent: Alpha channel is zero, RGB ignored
    colors_equal: Exact component-wise equality
    is_content: Neither white nor transparent
    tile_array: RGBA uint8 array view of a tile
    color_mask / white_mask / transparent_mask / content_mask: Array variants
"""

from typing import Any, Sequence

import numpy as np

from TP_Libs.constants import WHITE
from TP_Libs.PixelLib.tile_models import RgbaColor


def colors_equal(a: Sequence[int], b: Sequence[int]) -> bool:
    return tuple(a) == tuple(b)


def is_white(pixel: Sequence[int]) -> bool:
    return colors_equal(pixel, WHITE)


def is_transparent(pixel: Sequence[int]) -> bool:
    return pixel[3] == 0


def is_content(pixel: Sequence[int]) -> bool:
    return not is_white(pixel) and not is_transparent(pixel)


def tile_array(tile: Any) -> np.ndarray:
    """
    Return the tile's pixels as a (height, width, 4) uint8 array.

    Args:
        tile: PIL Image (converted to RGBA if needed)

    Returns:
        A new numpy array; writing to it does not touch the tile
    """
    if tile.mode != "RGBA":
        tile = tile.convert("RGBA")
    return np.array(tile, dtype=np.uint8)


def color_mask(pixels: np.ndarray, color: RgbaColor) -> np.ndarray:
    """Boolean (height, width) mask of pixels exactly equal to color."""
    return np.all(pixels == np.array(color, dtype=np.uint8), axis=-1)


def white_mask(pixels: np.ndarray) -> np.ndarray:
    return color_mask(pixels, WHITE)


def transparent_mask(pixels: np.ndarray) -> np.ndarray:
    return pixels[..., 3] == 0


def content_mask(pixels: np.ndarray) -> np.ndarray:
    return ~(white_mask(pixels) | transparent_mask(pixels))
