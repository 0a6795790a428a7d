"""
Color substitution on tiles.

Functions:
    replace_color: New tile with one exact color substituted for another
    replace_color_file: Same substitution applied to a tile on disk, in place
"""

from pathlib import Path
from typing import Any, Union

from TP_Libs.pillow_compat import Image
from TP_Libs.PixelLib.pixel_classifier import color_mask, tile_array
from TP_Libs.PixelLib.tile_io import decode_tile, encode_tile
from TP_Libs.PixelLib.tile_models import RgbaColor


def replace_color(tile: Any, source: RgbaColor, replacement: RgbaColor) -> Any:
    """
    Replace every pixel equal to `source` with `replacement`.

    The input tile is not modified; all non-matching pixels are copied
    unchanged.

    Args:
        tile: PIL Image to process
        source: Exact RGBA color to replace
        replacement: RGBA color written in its place

    Returns:
        A new PIL Image in RGBA mode
    """
    pixels = tile_array(tile)
    pixels[color_mask(pixels, source)] = replacement
    return Image.fromarray(pixels)


def replace_color_file(
    tile_path: Union[str, Path], source: RgbaColor, replacement: RgbaColor
) -> Path:
    """Decode a tile, replace a color and write it back to the same path."""
    tile = decode_tile(tile_path)
    return encode_tile(replace_color(tile, source, replacement), tile_path)
