"""
PipelineLib - Node dispatch and pyramid generation

This module provides the node executor registry used to run tile nodes by
type, and the builder that generates overview levels of a tile directory.
"""

from TP_Libs.PipelineLib.node_executors import (
    NodeExecutorRegistry,
    executor_wrapper,
    get_default_registry,
    register_default_executors,
)
from TP_Libs.PipelineLib.pyramid_builder import (
    PyramidBuilder,
    PyramidBuilderConfig,
    build_overview_level,
    build_pyramid,
    child_tile_paths,
    tile_path,
)

__all__ = [
    "NodeExecutorRegistry",
    "executor_wrapper",
    "get_default_registry",
    "register_default_executors",
    "PyramidBuilder",
    "PyramidBuilderConfig",
    "build_overview_level",
    "build_pyramid",
    "child_tile_paths",
    "tile_path",
]
