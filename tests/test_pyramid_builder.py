"""
Tests for the overview pyramid builder.

Tests cover:
- z/x/y path layout and child mapping
- Building one level (quadrant placement, skip/overwrite of existing parents)
- Building a full pyramid, sequential and threaded
- Config validation and round trip
"""

import tempfile
import unittest
from pathlib import Path

import pytest
from PIL import Image

from TP_Libs.constants import TRANSPARENT
from TP_Libs.PixelLib.tile_io import decode_tile
from TP_Libs.PipelineLib.pyramid_builder import (
    PyramidBuilder,
    PyramidBuilderConfig,
    build_overview_level,
    build_pyramid,
    child_tile_paths,
    tile_path,
)

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def write_tile(root, z, x, y, color):
    path = tile_path(root, z, x, y)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (256, 256), color).save(path)
    return path


class TestTilePaths(unittest.TestCase):

    def test_tile_path_layout(self):
        self.assertEqual(tile_path("tiles", 3, 5, 7), Path("tiles/3/5/7.png"))

    def test_child_paths(self):
        nw, ne, sw, se = child_tile_paths("tiles", 2, 1, 3)

        self.assertEqual(nw, Path("tiles/3/2/6.png"))
        self.assertEqual(ne, Path("tiles/3/3/6.png"))
        self.assertEqual(sw, Path("tiles/3/2/7.png"))
        self.assertEqual(se, Path("tiles/3/3/7.png"))


class TestPyramidBuilderConfig(unittest.TestCase):

    def test_round_trip(self):
        config = PyramidBuilderConfig(root="tiles", overwrite=True, max_workers=4)
        self.assertEqual(PyramidBuilderConfig.from_dict(config.to_dict()), config)

    def test_validation(self):
        with self.assertRaises(ValueError):
            PyramidBuilderConfig(tile_size=0)
        with self.assertRaises(ValueError):
            PyramidBuilderConfig(max_workers=0)


class TestBuildLevel(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        write_tile(self.root, 1, 0, 0, RED)
        write_tile(self.root, 1, 1, 1, BLUE)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_parent_from_children(self):
        counts = build_overview_level(self.root, 1)

        self.assertEqual(counts, {"written": 1, "skipped": 0})
        parent = decode_tile(tile_path(self.root, 0, 0, 0))
        self.assertEqual(parent.getpixel((10, 10)), RED)
        self.assertEqual(parent.getpixel((200, 10)), TRANSPARENT)
        self.assertEqual(parent.getpixel((10, 200)), TRANSPARENT)
        self.assertEqual(parent.getpixel((200, 200)), BLUE)

    def test_existing_parent_skipped(self):
        existing = write_tile(self.root, 0, 0, 0, BLUE)

        counts = build_overview_level(self.root, 1)

        self.assertEqual(counts, {"written": 0, "skipped": 1})
        self.assertEqual(decode_tile(existing).getpixel((10, 10)), BLUE)

    def test_existing_parent_overwritten(self):
        existing = write_tile(self.root, 0, 0, 0, BLUE)

        counts = build_overview_level(self.root, 1, overwrite=True)

        self.assertEqual(counts, {"written": 1, "skipped": 0})
        self.assertEqual(decode_tile(existing).getpixel((10, 10)), RED)

    def test_ignores_foreign_entries(self):
        (self.root / "1" / "notes").mkdir()
        (self.root / "1" / "0" / "readme.png").write_bytes(b"")
        (self.root / "1" / "0" / "1.txt").write_text("x")

        builder = PyramidBuilder(PyramidBuilderConfig(root=str(self.root)))
        self.assertEqual(builder.list_tiles(1), [(0, 0), (1, 1)])

    def test_missing_level_builds_nothing(self):
        self.assertEqual(build_overview_level(self.root, 5), {"written": 0, "skipped": 0})

    def test_cannot_build_below_zero(self):
        with self.assertRaises(ValueError):
            build_overview_level(self.root, 0)


class TestBuildPyramid(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        write_tile(self.root, 2, 0, 0, RED)
        write_tile(self.root, 2, 3, 3, BLUE)

    def tearDown(self):
        self.temp_dir.cleanup()

    def check_pyramid(self, counts):
        self.assertEqual(counts, {1: {"written": 2, "skipped": 0}, 0: {"written": 1, "skipped": 0}})
        self.assertTrue(tile_path(self.root, 1, 0, 0).exists())
        self.assertTrue(tile_path(self.root, 1, 1, 1).exists())
        self.assertFalse(tile_path(self.root, 1, 1, 0).exists())

        top = decode_tile(tile_path(self.root, 0, 0, 0))
        self.assertEqual(top.getpixel((0, 0)), RED)
        self.assertEqual(top.getpixel((255, 255)), BLUE)
        self.assertEqual(top.getpixel((128, 0)), TRANSPARENT)

    def test_sequential(self):
        self.check_pyramid(build_pyramid(self.root, max_zoom=2))

    def test_threaded(self):
        self.check_pyramid(build_pyramid(self.root, max_zoom=2, use_threading=True, max_workers=2))

    def test_min_zoom(self):
        counts = build_pyramid(self.root, max_zoom=2, min_zoom=1)
        self.assertEqual(list(counts), [1])
        self.assertFalse(tile_path(self.root, 0, 0, 0).exists())

    def test_invalid_zoom_range(self):
        with self.assertRaises(ValueError):
            build_pyramid(self.root, max_zoom=2, min_zoom=2)
        with self.assertRaises(ValueError):
            build_pyramid(self.root, max_zoom=2, min_zoom=-1)


def test_single_child_parent(tile_dir, make_tile):
    """A lone se child lands in the parent's bottom-right quadrant."""
    child = tile_path(tile_dir, 4, 7, 9)
    child.parent.mkdir(parents=True)
    make_tile(RED, patches=[((0, 0, 2, 2), BLUE)]).save(child)

    counts = build_overview_level(tile_dir, 4)

    assert counts == {"written": 1, "skipped": 0}
    parent = decode_tile(tile_path(tile_dir, 3, 3, 4))
    assert parent.getpixel((128, 128)) == BLUE
    assert parent.getpixel((200, 200)) == RED
    assert parent.getpixel((0, 0)) == TRANSPARENT


@pytest.mark.parametrize("overwrite, expected", [(False, RED), (True, BLUE)])
def test_rebuild_respects_overwrite(tile_dir, make_tile, overwrite, expected):
    for x in (0, 1):
        for y in (0, 1):
            path = tile_path(tile_dir, 1, x, y)
            path.parent.mkdir(parents=True, exist_ok=True)
            make_tile(RED).save(path)
    build_pyramid(tile_dir, max_zoom=1)

    make_tile(BLUE).save(tile_path(tile_dir, 1, 0, 0))
    build_pyramid(tile_dir, max_zoom=1, overwrite=overwrite)

    assert decode_tile(tile_path(tile_dir, 0, 0, 0)).getpixel((0, 0)) == expected
