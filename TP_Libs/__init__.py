"""
TP_Libs - Tile Pyramid Library Modules

This package contains the tile compositing and coverage engine used to build
seamless multi-zoom raster tile pyramids, organized into specialized
sub-packages:

- PixelLib: Pixel classification, coverage statistics, color transforms and tile I/O
- CoverageLib: Edge cleaning and coverage rectangle detection
- CompositeLib: Two-tile, N-tile and quad overview compositing
- NodesLib: Node configs and executors wrapping each engine operation
- PipelineLib: Node executor registry and overview pyramid builder
"""

__version__ = "0.1.0"
