"""
Tests for side and corner coverage rectangles.
"""

import unittest

from PIL import Image

from TP_Libs.constants import TRANSPARENT, TRANSPARENT_WHITE, WHITE
from TP_Libs.CoverageLib.coverage_rect import (
    coverage_rect_from_corner,
    coverage_rect_from_side,
)
from TP_Libs.PixelLib.tile_models import Corner, Edge, Rectangle

RED = (255, 0, 0, 255)
FULL = Rectangle(0, 0, 256, 256)


def block_tile(box=(10, 10, 50, 50), color=RED, background=TRANSPARENT):
    tile = Image.new("RGBA", (256, 256), background)
    tile.paste(color, box)
    return tile


class TestCoverageRectFromSide(unittest.TestCase):
    """Test scanning inward from one side."""

    def test_each_side(self):
        tile = block_tile()

        self.assertEqual(coverage_rect_from_side(tile, Edge.LEFT), Rectangle(10, 0, 256, 256))
        self.assertEqual(coverage_rect_from_side(tile, Edge.RIGHT), Rectangle(0, 0, 50, 256))
        self.assertEqual(coverage_rect_from_side(tile, Edge.TOP), Rectangle(0, 10, 256, 256))
        self.assertEqual(coverage_rect_from_side(tile, Edge.BOTTOM), Rectangle(0, 0, 256, 50))

    def test_result_contains_all_content(self):
        tile = block_tile((100, 30, 120, 200))
        for edge in Edge:
            rect = coverage_rect_from_side(tile, edge)
            self.assertLessEqual(rect.x0, 100)
            self.assertLessEqual(rect.y0, 30)
            self.assertGreaterEqual(rect.x1, 120)
            self.assertGreaterEqual(rect.y1, 200)

    def test_empty_tile_returns_full_tile(self):
        tile = Image.new("RGBA", (256, 256), TRANSPARENT_WHITE)
        for edge in range(4):
            self.assertEqual(coverage_rect_from_side(tile, edge), FULL)

    def test_opaque_white_counts_as_visible(self):
        tile = Image.new("RGBA", (256, 256), WHITE)
        self.assertEqual(coverage_rect_from_side(tile, Edge.LEFT), FULL)

    def test_content_on_far_edge(self):
        tile = block_tile((255, 0, 256, 1))
        self.assertEqual(coverage_rect_from_side(tile, Edge.LEFT), Rectangle(255, 0, 256, 256))
        self.assertEqual(coverage_rect_from_side(tile, Edge.RIGHT), FULL)

    def test_invalid_edge(self):
        with self.assertRaises(ValueError):
            coverage_rect_from_side(block_tile(), 4)


class TestCoverageRectFromCorner(unittest.TestCase):
    """Test growing offsets outward from one corner."""

    def test_top_left(self):
        columns, rows = coverage_rect_from_corner(block_tile(), Corner.TOP_LEFT)
        self.assertEqual(columns, Rectangle(10, 0, 256, 256))
        self.assertEqual(rows, Rectangle(0, 10, 256, 256))

    def test_bottom_right(self):
        tile = block_tile((206, 206, 246, 246))
        columns, rows = coverage_rect_from_corner(tile, Corner.BOTTOM_RIGHT)
        self.assertEqual(columns, Rectangle(0, 0, 246, 256))
        self.assertEqual(rows, Rectangle(0, 0, 256, 246))

    def test_full_corner_block(self):
        tile = block_tile((200, 200, 256, 256))
        columns, rows = coverage_rect_from_corner(tile, Corner.BOTTOM_RIGHT)
        self.assertEqual((columns, rows), (FULL, FULL))

    def test_top_right(self):
        tile = block_tile((200, 10, 246, 56))
        columns, rows = coverage_rect_from_corner(tile, Corner.TOP_RIGHT)
        self.assertEqual(columns, Rectangle(0, 0, 246, 256))
        self.assertEqual(rows, Rectangle(0, 10, 256, 256))

    def test_bottom_left(self):
        tile = block_tile((10, 200, 56, 246))
        columns, rows = coverage_rect_from_corner(tile, Corner.BOTTOM_LEFT)
        self.assertEqual(columns, Rectangle(10, 0, 256, 256))
        self.assertEqual(rows, Rectangle(0, 0, 256, 246))

    def test_scan_limited_to_explored_offsets(self):
        # The row scan at y=0 only looks at x=0, so it never sees this pixel
        tile = block_tile((200, 0, 201, 1))
        columns, rows = coverage_rect_from_corner(tile, Corner.TOP_LEFT)
        self.assertEqual(columns, Rectangle(200, 0, 256, 256))
        self.assertEqual(rows, Rectangle(0, 256, 256, 256))

    def test_content_at_corner_returns_full_tile(self):
        tile = block_tile((0, 0, 1, 1))
        self.assertEqual(coverage_rect_from_corner(tile, Corner.TOP_LEFT), (FULL, FULL))

    def test_empty_tile_returns_zero_size_rects(self):
        tile = Image.new("RGBA", (256, 256), TRANSPARENT)
        columns, rows = coverage_rect_from_corner(tile, Corner.TOP_LEFT)

        self.assertEqual(columns, Rectangle(256, 0, 256, 256))
        self.assertEqual(rows, Rectangle(0, 256, 256, 256))
        self.assertTrue(columns.is_empty)
        self.assertTrue(rows.is_empty)

    def test_invalid_corner(self):
        with self.assertRaises(ValueError):
            coverage_rect_from_corner(block_tile(), -1)


if __name__ == "__main__":
    unittest.main()
