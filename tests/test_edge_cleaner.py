"""
Tests for edge cleaning.

Tests cover:
- Scan axis selection from the edge index
- Background-only columns/rows cleared, content lines preserved
- Scan direction has no effect
- In-place file cleaning
"""

import tempfile
import unittest
from pathlib import Path

from PIL import Image

from TP_Libs.constants import TRANSPARENT, TRANSPARENT_WHITE, WHITE
from TP_Libs.CoverageLib.edge_cleaner import clean_edge, clean_edge_file, scan_axis_for_edge
from TP_Libs.PixelLib.tile_io import decode_tile
from TP_Libs.PixelLib.tile_models import Edge, ScanAxis

RED = (255, 0, 0, 255)


def white_tile_with_dot(x, y):
    tile = Image.new("RGBA", (256, 256), WHITE)
    tile.putpixel((x, y), RED)
    return tile


class TestScanAxis(unittest.TestCase):

    def test_edge_to_axis(self):
        self.assertIs(scan_axis_for_edge(0), ScanAxis.COLUMNS)
        self.assertIs(scan_axis_for_edge(1), ScanAxis.COLUMNS)
        self.assertIs(scan_axis_for_edge(Edge.TOP), ScanAxis.ROWS)
        self.assertIs(scan_axis_for_edge(3), ScanAxis.ROWS)

    def test_invalid_edge(self):
        for edge in (-1, 4):
            with self.assertRaises(ValueError):
                scan_axis_for_edge(edge)
            with self.assertRaises(ValueError):
                clean_edge(Image.new("RGBA", (4, 4)), edge)


class TestCleanEdge(unittest.TestCase):

    def test_columns_cleared_except_content_column(self):
        tile = white_tile_with_dot(10, 40)
        cleaned = clean_edge(tile, Edge.LEFT)

        # Content column kept verbatim, white included
        self.assertEqual(cleaned.getpixel((10, 40)), RED)
        self.assertEqual(cleaned.getpixel((10, 0)), WHITE)
        # Background-only columns cleared
        self.assertEqual(cleaned.getpixel((0, 0)), TRANSPARENT)
        self.assertEqual(cleaned.getpixel((11, 40)), TRANSPARENT)
        self.assertEqual(cleaned.getpixel((255, 255)), TRANSPARENT)

    def test_rows_cleared_except_content_row(self):
        tile = white_tile_with_dot(10, 40)
        cleaned = clean_edge(tile, Edge.BOTTOM)

        self.assertEqual(cleaned.getpixel((10, 40)), RED)
        self.assertEqual(cleaned.getpixel((200, 40)), WHITE)
        self.assertEqual(cleaned.getpixel((10, 41)), TRANSPARENT)
        self.assertEqual(cleaned.getpixel((10, 0)), TRANSPARENT)

    def test_scan_direction_does_not_matter(self):
        tile = white_tile_with_dot(100, 7)
        self.assertEqual(
            list(clean_edge(tile, 0).getdata()),
            list(clean_edge(tile, 1).getdata()),
        )
        self.assertEqual(
            list(clean_edge(tile, 2).getdata()),
            list(clean_edge(tile, 3).getdata()),
        )

    def test_mixed_background_line_is_cleared(self):
        tile = Image.new("RGBA", (4, 4), WHITE)
        tile.paste(TRANSPARENT_WHITE, (0, 0, 4, 2))
        cleaned = clean_edge(tile, Edge.TOP)
        self.assertEqual(cleaned.getextrema()[3], (0, 0))
        self.assertEqual(cleaned.getpixel((0, 0)), TRANSPARENT)

    def test_input_not_modified(self):
        tile = white_tile_with_dot(1, 1)
        clean_edge(tile, Edge.LEFT)
        self.assertEqual(tile.getpixel((0, 0)), WHITE)

    def test_fully_covered_tile_is_unchanged(self):
        tile = Image.new("RGBA", (16, 16), RED)
        for x in range(16):
            tile.putpixel((x, x), (x * 16, 0, 255 - x * 16, 128))

        for edge in Edge:
            cleaned = clean_edge(tile, edge)
            self.assertEqual(list(cleaned.getdata()), list(tile.getdata()), edge)


class TestCleanEdgeFile(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.path = Path(self.temp_dir.name) / "tile.png"

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_cleans_in_place(self):
        white_tile_with_dot(20, 20).save(self.path)

        result = clean_edge_file(self.path, Edge.RIGHT)

        self.assertEqual(result, self.path)
        reloaded = decode_tile(self.path)
        self.assertEqual(reloaded.getpixel((20, 20)), RED)
        self.assertEqual(reloaded.getpixel((21, 20)), TRANSPARENT)

    def test_invalid_edge_leaves_file_untouched(self):
        white_tile_with_dot(20, 20).save(self.path)
        before = self.path.read_bytes()

        with self.assertRaises(ValueError):
            clean_edge_file(self.path, 7)
        self.assertEqual(self.path.read_bytes(), before)


if __name__ == "__main__":
    unittest.main()
