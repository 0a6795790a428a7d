"""
Pytest configuration and shared fixtures for the tile engine tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image

from TP_Libs.constants import TILE_SIZE, TRANSPARENT, WHITE


@pytest.fixture
def tile_dir(tmp_path):
    """
    Provide an empty tile directory laid out as {z}/{x}/{y}.png.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    root = tmp_path / "tiles"
    root.mkdir()
    return root


@pytest.fixture
def make_tile():
    """
    Provide a factory for standard-size RGBA tiles.

    The factory takes a fill color and an optional list of
    (box, color) pairs painted on top.
    """
    def _make(color=TRANSPARENT, patches=None, size=TILE_SIZE):
        tile = Image.new("RGBA", (size, size), color)
        for box, patch_color in patches or []:
            tile.paste(patch_color, box)
        return tile

    return _make


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        WHITE,
        TRANSPARENT,
        (255, 255, 255, 0),  # Transparent-White
        (128, 128, 128, 128),  # Half-alpha gray
    ]
