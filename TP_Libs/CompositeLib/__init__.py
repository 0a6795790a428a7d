"""
CompositeLib - Tile compositing

This module provides the tile compositor: two-tile combine and content-aware
merge, N-way merge, quad overview assembly, and their file-backed variants.
"""

from TP_Libs.CompositeLib.tile_compositor import (
    CompositorOptions,
    TileCompositor,
    assemble_overview,
    combine,
    combine_files,
    fill_under_rects,
    generate_overview_tile,
    merge_n,
    merge_n_files,
    merge_two,
    merge_two_files,
)

__all__ = [
    "CompositorOptions",
    "TileCompositor",
    "assemble_overview",
    "combine",
    "combine_files",
    "fill_under_rects",
    "generate_overview_tile",
    "merge_n",
    "merge_n_files",
    "merge_two",
    "merge_two_files",
]
