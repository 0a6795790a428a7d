"""
Edge cleaning for seamless tile stitching.

Every scanline of the tile that carries no content (only Background-White or
transparent pixels) is overwritten with fully transparent pixels, so that an
all-background line does not occlude tiles composited beneath it. Lines with
any content are left untouched.

The edge index only selects the scan orientation: LEFT/RIGHT scan whole
columns, TOP/BOTTOM scan whole rows. Every line across the full tile is
visited, so the scan direction has no effect on the result.

Functions:
    scan_axis_for_edge: Map an edge index to its scan axis
    clean_edge: Return a cleaned copy of a tile
    clean_edge_file: Clean a tile on disk in place
"""

from pathlib import Path
from typing import Any, Union

from TP_Libs.constants import TRANSPARENT
from TP_Libs.pillow_compat import Image
from TP_Libs.PixelLib.pixel_classifier import content_mask, tile_array
from TP_Libs.PixelLib.tile_io import decode_tile, encode_tile
from TP_Libs.PixelLib.tile_models import ScanAxis, to_edge


def scan_axis_for_edge(edge: int) -> ScanAxis:
    """
    Get the scan axis for an edge index.

    Args:
        edge: Edge index 0-3 (or an Edge)

    Returns:
        ScanAxis.COLUMNS for edges 0/1, ScanAxis.ROWS for edges 2/3

    Raises:
        ValueError: If edge is outside 0-3
    """
    return to_edge(edge).scan_axis


def clean_edge(tile: Any, edge: int) -> Any:
    """
    Clear every background-only scanline of a tile to full transparency.

    Args:
        tile: PIL Image to clean (not modified)
        edge: Edge index selecting the scan axis

    Returns:
        A new PIL Image in RGBA mode

    Raises:
        ValueError: If edge is outside 0-3
    """
    axis = scan_axis_for_edge(edge)
    pixels = tile_array(tile)
    content = content_mask(pixels)

    if axis is ScanAxis.COLUMNS:
        empty_lines = ~content.any(axis=0)
        pixels[:, empty_lines] = TRANSPARENT
    else:
        empty_lines = ~content.any(axis=1)
        pixels[empty_lines, :] = TRANSPARENT

    return Image.fromarray(pixels)


def clean_edge_file(tile_path: Union[str, Path], edge: int) -> Path:
    """
    Clean a tile on disk and write the result back to the same path.

    The previous file is only replaced once the new tile has been fully
    encoded.

    Raises:
        MissingTileError: If the tile does not exist
        TileDecodeError: If the tile cannot be decoded
        TileEncodeError: If the cleaned tile cannot be written
    """
    to_edge(edge)
    tile = decode_tile(tile_path)
    return encode_tile(clean_edge(tile, edge), tile_path)
