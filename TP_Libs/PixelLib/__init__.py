"""
PixelLib - Pixel-level tile primitives

This module provides the tile data models, pixel classification, coverage
statistics, color substitution and the decode/encode boundary used by the
rest of the tile engine.
"""

from TP_Libs.PixelLib.tile_models import (
    Corner,
    Edge,
    Rectangle,
    RgbaColor,
    ScanAxis,
)
from TP_Libs.PixelLib.pixel_classifier import (
    colors_equal,
    is_content,
    is_transparent,
    is_white,
)
from TP_Libs.PixelLib.tile_io import (
    decode_tile,
    encode_tile,
    load_tile_or_placeholder,
    new_tile,
)
from TP_Libs.PixelLib.coverage_stats import (
    can_delete_tile,
    content_pixel_count,
    is_blank_tile,
    pixel_fraction,
    transparent_fraction,
)
from TP_Libs.PixelLib.color_transform import (
    replace_color,
    replace_color_file,
)

__all__ = [
    "Corner",
    "Edge",
    "Rectangle",
    "RgbaColor",
    "ScanAxis",
    "colors_equal",
    "is_content",
    "is_transparent",
    "is_white",
    "decode_tile",
    "encode_tile",
    "load_tile_or_placeholder",
    "new_tile",
    "can_delete_tile",
    "content_pixel_count",
    "is_blank_tile",
    "pixel_fraction",
    "transparent_fraction",
    "replace_color",
    "replace_color_file",
]
