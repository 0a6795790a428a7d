"""
Tile Pyramid Nodes Library.

This module contains the node implementations that expose the tile engine to
the pipeline executor registry. Each node is a plain dictionary handled by an
`execute_*_node(node, inputs)` function.

Modules:
    tile_merge_node: Tile Combine, Tile Merge and Tile Merge N nodes
    overview_node: Overview Tile node (four children into one parent)
    edge_clean_node: Edge Clean node
    coverage_node: Coverage Rect node (side and corner detectors)
    color_replace_node: Color Replace node
"""

from TP_Libs.NodesLib.tile_merge_node import (
    TileMergeNodeConfig,
    execute_combine_node,
    execute_merge_node,
    execute_merge_n_node,
    create_tile_merge_node,
)
from TP_Libs.NodesLib.overview_node import (
    OverviewNodeConfig,
    execute_overview_node,
    create_overview_node,
)
from TP_Libs.NodesLib.edge_clean_node import (
    EdgeCleanNodeConfig,
    execute_edge_clean_node,
    create_edge_clean_node,
)
from TP_Libs.NodesLib.coverage_node import (
    CoverageRectNodeConfig,
    execute_coverage_rect_node,
    create_coverage_rect_node,
)
from TP_Libs.NodesLib.color_replace_node import (
    ColorReplaceNodeConfig,
    execute_color_replace_node,
    create_color_replace_node,
)

__all__ = [
    "TileMergeNodeConfig",
    "execute_combine_node",
    "execute_merge_node",
    "execute_merge_n_node",
    "create_tile_merge_node",
    "OverviewNodeConfig",
    "execute_overview_node",
    "create_overview_node",
    "EdgeCleanNodeConfig",
    "execute_edge_clean_node",
    "create_edge_clean_node",
    "CoverageRectNodeConfig",
    "execute_coverage_rect_node",
    "create_coverage_rect_node",
    "ColorReplaceNodeConfig",
    "execute_color_replace_node",
    "create_color_replace_node",
]
