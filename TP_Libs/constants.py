"""
Constants and configuration values for the tile engine.

This module centralizes the tile geometry, the sentinel colors and the
tunables used throughout the compositing and coverage code.
"""

# Tile geometry
TILE_SIZE = 256
OVERVIEW_SIZE = TILE_SIZE * 2
TILE_MODE = "RGBA"

# Sentinel colors (R, G, B, A)
WHITE = (255, 255, 255, 255)
TRANSPARENT = (0, 0, 0, 0)
TRANSPARENT_WHITE = (255, 255, 255, 0)

# Merge ordering heuristic: white fractions closer than this are treated as
# non-informative background and replaced with transparency before drawing
WHITE_DIFF_THRESHOLD = 0.25

# Edge indices (scan axis toggles when edge > 1)
EDGE_LEFT = 0
EDGE_RIGHT = 1
EDGE_TOP = 2
EDGE_BOTTOM = 3

# Corner indices (odd corners start on the right, corners > 1 start at the bottom)
CORNER_TOP_LEFT = 0
CORNER_TOP_RIGHT = 1
CORNER_BOTTOM_LEFT = 2
CORNER_BOTTOM_RIGHT = 3

# File naming
DEFAULT_OUTPUT_FORMAT = "PNG"
TILE_EXTENSION = ".png"
TEMP_FILE_PREFIX = ".tile-"
TEMP_FILE_SUFFIX = ".tmp"

# Node types
NODE_TYPE_COMBINE = "Tile Combine"
NODE_TYPE_MERGE = "Tile Merge"
NODE_TYPE_MERGE_N = "Tile Merge N"
NODE_TYPE_OVERVIEW = "Overview Tile"
NODE_TYPE_EDGE_CLEAN = "Edge Clean"
NODE_TYPE_COVERAGE_RECT = "Coverage Rect"
NODE_TYPE_COLOR_REPLACE = "Color Replace"
