"""
Coverage rectangle detection.

Finds where a tile's content starts when scanning inward from one side or
outward from one corner. A pixel counts as content here when its alpha is
non-zero. Both detectors are total over the tile: an empty tile degenerates
to a full-size or zero-size rectangle instead of raising.

Functions:
    coverage_rect_from_side: Sub-rectangle from the first visible scanline to the far side
    coverage_rect_from_corner: Column and row complements of the empty corner zone
"""

from typing import Any, Tuple

import numpy as np

from TP_Libs.PixelLib.pixel_classifier import tile_array
from TP_Libs.PixelLib.tile_models import Edge, Rectangle, ScanAxis, to_corner, to_edge


def _visible(tile: Any) -> np.ndarray:
    return tile_array(tile)[..., 3] != 0


def coverage_rect_from_side(tile: Any, edge: int) -> Rectangle:
    """
    Scan inward from one side and return the region holding all content.

    Scanlines (columns for LEFT/RIGHT, rows for TOP/BOTTOM) are visited from
    the given side inward; the first line with any non-transparent pixel
    bounds the result, which extends from that line to the opposite side.

    Args:
        tile: PIL Image to scan
        edge: Edge index 0-3 (LEFT, RIGHT, TOP, BOTTOM)

    Returns:
        Half-open Rectangle. The full tile when there is no content, or when
        content touches the scanned side.

    Raises:
        ValueError: If edge is outside 0-3
    """
    side = to_edge(edge)
    width, height = tile.size
    visible = _visible(tile)

    if side.scan_axis is ScanAxis.COLUMNS:
        lines = visible.any(axis=0)
    else:
        lines = visible.any(axis=1)

    if side.from_far_side:
        lines = lines[::-1]

    hits = np.flatnonzero(lines)
    if hits.size == 0:
        return Rectangle.full(tile.size)

    offset = int(hits[0])
    if side is Edge.LEFT:
        return Rectangle(offset, 0, width, height)
    if side is Edge.RIGHT:
        return Rectangle(0, 0, width - offset, height)
    if side is Edge.TOP:
        return Rectangle(0, offset, width, height)
    return Rectangle(0, 0, width, height - offset)


def coverage_rect_from_corner(tile: Any, corner: int) -> Tuple[Rectangle, Rectangle]:
    """
    Grow an x-offset and a y-offset outward from a corner until each meets content.

    At every step the column at the current x-offset is checked over the
    y-offsets explored so far, and the row at the current y-offset over the
    x-offsets explored so far. Each offset stops advancing as soon as its
    scan meets a non-transparent pixel; an offset that runs off the tile
    ends at the tile dimension.

    Args:
        tile: PIL Image to scan
        corner: Corner index 0-3 (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT)

    Returns:
        (column_rect, row_rect): the region from the x-offset to the far
        side over the full height, and the region from the y-offset to the
        far side over the full width. Together they bound the L-shaped
        background zone at that corner.

    Raises:
        ValueError: If corner is outside 0-3
    """
    start = to_corner(corner)
    width, height = tile.size

    # Orient the mask so the starting corner sits at [0, 0]
    visible = _visible(tile)
    if start.right:
        visible = visible[:, ::-1]
    if start.bottom:
        visible = visible[::-1, :]

    x_offset = 0
    y_offset = 0
    x_found = width == 0
    y_found = height == 0

    while not (x_found and y_found):
        if not x_found and visible[: y_offset + 1, x_offset].any():
            x_found = True
        if not y_found and visible[y_offset, : x_offset + 1].any():
            y_found = True

        if not x_found:
            x_offset += 1
            x_found = x_offset >= width
        if not y_found:
            y_offset += 1
            y_found = y_offset >= height

    if start.right:
        column_rect = Rectangle(0, 0, width - x_offset, height)
    else:
        column_rect = Rectangle(x_offset, 0, width, height)

    if start.bottom:
        row_rect = Rectangle(0, 0, width, height - y_offset)
    else:
        row_rect = Rectangle(0, y_offset, width, height)

    return column_rect, row_rect
