"""
CoverageLib - Tile coverage analysis

This module provides the edge cleaner used to clear background-only
scanlines before stitching, and the side/corner coverage rectangle detectors.
"""

from TP_Libs.CoverageLib.edge_cleaner import (
    clean_edge,
    clean_edge_file,
    scan_axis_for_edge,
)
from TP_Libs.CoverageLib.coverage_rect import (
    coverage_rect_from_corner,
    coverage_rect_from_side,
)

__all__ = [
    "clean_edge",
    "clean_edge_file",
    "scan_axis_for_edge",
    "coverage_rect_from_corner",
    "coverage_rect_from_side",
]
