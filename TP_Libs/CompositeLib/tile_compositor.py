"""
Tile Compositor.

Layers source tiles onto a freshly allocated destination canvas with standard
alpha-over compositing. Input tiles are never modified.

Entry points:
    combine: Two tiles over Background-White, fixed order (B above A)
    merge_two: Two tiles over transparency, content-aware order
    merge_n: N tiles over transparency, caller-supplied order
    assemble_overview: Four child tiles into one parent tile (quad downsample)
    fill_under_rects: Back a tile with Background-White inside given rectangles

Each entry point has a file-backed variant that decodes its inputs and
encodes the result to a destination path.

Example:
    >>> compositor = TileCompositor(CompositorOptions(white_diff_threshold=0.3))
    >>> merged = compositor.merge_two(roads_tile, landuse_tile)
    >>> parent = compositor.assemble_overview(nw, ne, sw, se)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from TP_Libs.constants import TILE_SIZE, TRANSPARENT, WHITE, WHITE_DIFF_THRESHOLD
from TP_Libs.pillow_compat import Image, NEAREST
from TP_Libs.PixelLib.color_transform import replace_color
from TP_Libs.PixelLib.coverage_stats import pixel_fraction, transparent_fraction
from TP_Libs.PixelLib.tile_io import (
    decode_tile,
    encode_tile,
    load_tile_or_placeholder,
    new_tile,
)
from TP_Libs.PixelLib.tile_models import Rectangle

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
RectLike = Union[Rectangle, Tuple[int, int, int, int]]


@dataclass(frozen=True)
class CompositorOptions:
    """Tunables for tile compositing.

    Attributes:
        tile_size: Edge length of a standard tile in pixels (default 256).
                   Overview canvases are twice this size.
        white_diff_threshold: When the Background-White fractions of two
                   tiles differ by less than this, merge_two treats white as
                   background and replaces it with transparency (default 0.25)
    """
    tile_size: int = TILE_SIZE
    white_diff_threshold: float = WHITE_DIFF_THRESHOLD

    def __post_init__(self):
        """Validate options."""
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")

        if not (0.0 <= self.white_diff_threshold <= 1.0):
            raise ValueError(
                f"white_diff_threshold must be 0.0-1.0, got {self.white_diff_threshold}"
            )


class TileCompositor:
    """Handles tile composition onto fresh canvases."""

    def __init__(self, options: Optional[CompositorOptions] = None):
        self.options = options or CompositorOptions()

    @property
    def tile_size(self) -> int:
        return self.options.tile_size

    @staticmethod
    def draw_over(canvas: Any, tile: Any, box: Optional[RectLike] = None) -> None:
        """
        Alpha-composite a tile onto a canvas in place.

        The tile's origin is placed at the box's top-left corner and the tile
        is clipped to the box and to the canvas. Pixels with alpha 0 leave
        the canvas unchanged; partial alpha blends proportionally.

        Args:
            canvas: RGBA PIL Image owned by the caller
            tile: PIL Image to draw (converted to RGBA)
            box: Destination rectangle (default: the whole canvas)

        Raises:
            TypeError: If tile is not a PIL Image
        """
        if not hasattr(tile, "convert"):
            raise TypeError(f"Expected PIL Image, got {type(tile)}")

        if box is None:
            box = Rectangle.full(canvas.size)
        elif not isinstance(box, Rectangle):
            box = Rectangle(*box)

        overlay = tile.convert("RGBA")
        width = min(overlay.width, box.width, canvas.width - box.x0)
        height = min(overlay.height, box.height, canvas.height - box.y0)
        if width <= 0 or height <= 0:
            return

        if (width, height) != overlay.size:
            overlay = overlay.crop((0, 0, width, height))

        canvas.alpha_composite(overlay, dest=(box.x0, box.y0))

    @staticmethod
    def downsample_nearest(canvas: Any, size: int) -> Any:
        """
        Nearest-neighbor downsample of a square canvas to size x size.

        For integral factors the top-left pixel of every factor x factor
        block is kept, so output (x, y) is input (x * factor, y * factor).
        """
        if canvas.size == (size, size):
            return canvas.copy()

        factor = canvas.width // size
        if factor * size == canvas.width and canvas.width == canvas.height:
            pixels = np.asarray(canvas)[::factor, ::factor]
            return Image.fromarray(np.ascontiguousarray(pixels))

        return canvas.resize((size, size), NEAREST)

    def combine(self, tile_a: Any, tile_b: Any) -> Any:
        """
        Layer tile_a then tile_b over a Background-White canvas.

        Returns:
            New RGBA tile of the standard size
        """
        canvas = new_tile(self.tile_size, WHITE)
        self.draw_over(canvas, tile_a)
        self.draw_over(canvas, tile_b)
        return canvas

    def merge_two(self, tile_a: Any, tile_b: Any) -> Any:
        """
        Merge two tiles, placing the one with more background underneath.

        White fractions (exact Background-White) and transparent fractions
        (alpha 0, any RGB) are measured on both inputs. If the
        white fractions differ by less than white_diff_threshold, white is
        replaced with transparency in both tiles before drawing. tile_a is
        drawn first when it has more white or more transparency than tile_b;
        otherwise tile_b is drawn first. The canvas starts fully transparent.

        Returns:
            New RGBA tile of the standard size
        """
        white_a = pixel_fraction(tile_a, WHITE)
        white_b = pixel_fraction(tile_b, WHITE)
        transparent_a = transparent_fraction(tile_a)
        transparent_b = transparent_fraction(tile_b)

        if abs(white_a - white_b) < self.options.white_diff_threshold:
            tile_a = replace_color(tile_a, WHITE, TRANSPARENT)
            tile_b = replace_color(tile_b, WHITE, TRANSPARENT)

        if white_a > white_b or transparent_a > transparent_b:
            layers = (tile_a, tile_b)
        else:
            layers = (tile_b, tile_a)

        logger.debug(
            f"merge_two white=({white_a:.3f}, {white_b:.3f}) "
            f"transparent=({transparent_a:.3f}, {transparent_b:.3f}) "
            f"a_first={layers[0] is tile_a}"
        )

        canvas = new_tile(self.tile_size, TRANSPARENT)
        for layer in layers:
            self.draw_over(canvas, layer)
        return canvas

    def merge_n(self, tiles: Iterable[Optional[Any]]) -> Any:
        """
        Layer tiles in the given order over a transparent canvas.

        A None entry stands for a tile that could not be loaded and is
        replaced with a fully transparent placeholder.

        Returns:
            New RGBA tile of the standard size
        """
        canvas = new_tile(self.tile_size, TRANSPARENT)
        for tile in tiles:
            if tile is None:
                tile = new_tile(self.tile_size, TRANSPARENT)
            self.draw_over(canvas, tile)
        return canvas

    def quadrant_boxes(self) -> Tuple[Rectangle, Rectangle, Rectangle, Rectangle]:
        """Destination boxes (nw, ne, sw, se) on the double-size overview canvas."""
        size = self.tile_size
        return (
            Rectangle(0, 0, size, size),
            Rectangle(size, 0, 2 * size, size),
            Rectangle(0, size, size, 2 * size),
            Rectangle(size, size, 2 * size, 2 * size),
        )

    def assemble_overview(
        self,
        nw: Optional[Any],
        ne: Optional[Any],
        sw: Optional[Any],
        se: Optional[Any],
    ) -> Any:
        """
        Build a parent tile from four child tiles.

        Each child is composited into its quadrant of a transparent canvas
        twice the tile size, then the canvas is downsampled 2:1 by nearest
        neighbor. A None child is replaced with a fully transparent
        placeholder.

        Returns:
            New RGBA tile of the standard size
        """
        canvas = new_tile(2 * self.tile_size, TRANSPARENT)
        for child, box in zip((nw, ne, sw, se), self.quadrant_boxes()):
            if child is None:
                child = new_tile(self.tile_size, TRANSPARENT)
            self.draw_over(canvas, child, box)

        return self.downsample_nearest(canvas, self.tile_size)

    def fill_under_rects(self, tile: Any, rects: Sequence[RectLike]) -> Any:
        """
        Paint Background-White inside each rectangle, then draw the tile over it.

        Returns:
            New RGBA tile of the standard size, transparent outside the
            rectangles wherever the tile itself is transparent
        """
        canvas = new_tile(self.tile_size, TRANSPARENT)
        white = new_tile(self.tile_size, WHITE)
        for rect in rects:
            self.draw_over(canvas, white, rect)
        self.draw_over(canvas, tile)
        return canvas


def combine(tile_a: Any, tile_b: Any, options: Optional[CompositorOptions] = None) -> Any:
    return TileCompositor(options).combine(tile_a, tile_b)


def merge_two(tile_a: Any, tile_b: Any, options: Optional[CompositorOptions] = None) -> Any:
    return TileCompositor(options).merge_two(tile_a, tile_b)


def merge_n(
    tiles: Iterable[Optional[Any]], options: Optional[CompositorOptions] = None
) -> Any:
    return TileCompositor(options).merge_n(tiles)


def assemble_overview(
    nw: Optional[Any],
    ne: Optional[Any],
    sw: Optional[Any],
    se: Optional[Any],
    options: Optional[CompositorOptions] = None,
) -> Any:
    return TileCompositor(options).assemble_overview(nw, ne, sw, se)


def fill_under_rects(
    tile: Any, rects: Sequence[RectLike], options: Optional[CompositorOptions] = None
) -> Any:
    return TileCompositor(options).fill_under_rects(tile, rects)


def combine_files(
    path_a: PathLike,
    path_b: PathLike,
    output_path: PathLike,
    options: Optional[CompositorOptions] = None,
) -> Path:
    """
    Combine two tiles from disk and write the result.

    Raises:
        MissingTileError: If either input does not exist
        TileDecodeError: If either input cannot be decoded
        TileEncodeError: If the output cannot be written
    """
    tile_a = decode_tile(path_a)
    tile_b = decode_tile(path_b)
    return encode_tile(combine(tile_a, tile_b, options), output_path)


def merge_two_files(
    path_a: PathLike,
    path_b: PathLike,
    output_path: PathLike,
    options: Optional[CompositorOptions] = None,
) -> Path:
    """
    Content-aware merge of two tiles from disk.

    Raises:
        MissingTileError: If either input does not exist
        TileDecodeError: If either input cannot be decoded
        TileEncodeError: If the output cannot be written
    """
    tile_a = decode_tile(path_a)
    tile_b = decode_tile(path_b)
    return encode_tile(merge_two(tile_a, tile_b, options), output_path)


def merge_n_files(
    tile_paths: Sequence[PathLike],
    output_path: PathLike,
    options: Optional[CompositorOptions] = None,
) -> Path:
    """
    Merge tiles from disk in the given order; unreadable inputs contribute nothing.

    Raises:
        TileEncodeError: If the output cannot be written
    """
    compositor = TileCompositor(options)
    tiles = [load_tile_or_placeholder(p, compositor.tile_size) for p in tile_paths]
    return encode_tile(compositor.merge_n(tiles), output_path)


def generate_overview_tile(
    output_path: PathLike,
    nw: Optional[PathLike],
    ne: Optional[PathLike],
    sw: Optional[PathLike],
    se: Optional[PathLike],
    options: Optional[CompositorOptions] = None,
) -> Path:
    """
    Build a parent tile from four child tile paths and write it.

    Missing or unreadable children are replaced with transparent
    placeholders.

    Raises:
        TileEncodeError: If the output cannot be written
    """
    compositor = TileCompositor(options)
    children = [load_tile_or_placeholder(p, compositor.tile_size) for p in (nw, ne, sw, se)]
    return encode_tile(compositor.assemble_overview(*children), output_path)
