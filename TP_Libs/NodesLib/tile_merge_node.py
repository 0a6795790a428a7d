"""
Tile Merge Nodes.

Wrap the compositor's two-tile and N-tile entry points as pipeline nodes.
Tiles come either from upstream node results (inputs) or, when no inputs
are given, from the node's `tile_paths`. When `output_path` is set the result
is written to disk and the path is returned; otherwise the merged tile is
returned.

Node types:
    Tile Combine: tile_a then tile_b over Background-White
    Tile Merge: content-aware two-tile merge
    Tile Merge N: ordered N-tile merge; missing tiles become transparent

Classes:
    TileMergeNodeConfig: Configuration shared by the merge nodes

Functions:
    execute_combine_node / execute_merge_node / execute_merge_n_node: Executors
    create_tile_merge_node: Helper to create a merge node dictionary
"""

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional

from TP_Libs.constants import (
    NODE_TYPE_COMBINE,
    NODE_TYPE_MERGE,
    NODE_TYPE_MERGE_N,
    TILE_SIZE,
    WHITE_DIFF_THRESHOLD,
)
from TP_Libs.CompositeLib.tile_compositor import CompositorOptions, TileCompositor
from TP_Libs.NodesLib.node_common import tile_inputs, write_node_output
from TP_Libs.PixelLib.tile_io import decode_tile, load_tile_or_placeholder

MERGE_NODE_TYPES = (NODE_TYPE_COMBINE, NODE_TYPE_MERGE, NODE_TYPE_MERGE_N)


@dataclass
class TileMergeNodeConfig:
    """Configuration for tile merge nodes.

    Attributes:
        tile_paths: Tile files to merge when the node has no inputs
        output_path: Destination file; None returns the tile instead
        white_diff_threshold: Merge ordering threshold (Tile Merge only)
        tile_size: Standard tile edge length in pixels
        overwrite: Replace an existing output file (default: False)
    """
    tile_paths: List[str] = field(default_factory=list)
    output_path: Optional[str] = None
    white_diff_threshold: float = WHITE_DIFF_THRESHOLD
    tile_size: int = TILE_SIZE
    overwrite: bool = False

    def __post_init__(self):
        """Validate parameters."""
        self.tile_paths = [str(p) for p in self.tile_paths]
        self.get_options()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TileMergeNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_options(self) -> CompositorOptions:
        """Get CompositorOptions from this config."""
        return CompositorOptions(
            tile_size=self.tile_size,
            white_diff_threshold=self.white_diff_threshold,
        )


def _finish(tile: Any, config: TileMergeNodeConfig) -> Any:
    if config.output_path:
        return write_node_output(tile, config.output_path, config.overwrite)
    return tile


def _two_tiles(config: TileMergeNodeConfig, inputs: List[Any], node_type: str) -> List[Any]:
    tiles = tile_inputs(inputs)
    if not tiles:
        tiles = [decode_tile(p) for p in config.tile_paths]

    if len(tiles) != 2 or any(t is None for t in tiles):
        raise ValueError(f"{node_type} node requires exactly 2 tiles, got {len(tiles)}")
    return tiles


def execute_combine_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for Tile Combine nodes.

    Args:
        node: Node dictionary with TileMergeNodeConfig fields
        inputs: Two tiles (tile_a, tile_b), or empty to load `tile_paths`

    Returns:
        The combined tile, or the output Path when `output_path` is set

    Raises:
        ValueError: If there are not exactly two tiles
        MissingTileError / TileDecodeError: If a tile path cannot be loaded
    """
    config = TileMergeNodeConfig.from_dict(node)
    tile_a, tile_b = _two_tiles(config, inputs, NODE_TYPE_COMBINE)
    result = TileCompositor(config.get_options()).combine(tile_a, tile_b)
    return _finish(result, config)


def execute_merge_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for content-aware Tile Merge nodes.

    Args:
        node: Node dictionary with TileMergeNodeConfig fields
        inputs: Two tiles (tile_a, tile_b), or empty to load `tile_paths`

    Returns:
        The merged tile, or the output Path when `output_path` is set

    Raises:
        ValueError: If there are not exactly two tiles
        MissingTileError / TileDecodeError: If a tile path cannot be loaded
    """
    config = TileMergeNodeConfig.from_dict(node)
    tile_a, tile_b = _two_tiles(config, inputs, NODE_TYPE_MERGE)
    result = TileCompositor(config.get_options()).merge_two(tile_a, tile_b)
    return _finish(result, config)


def execute_merge_n_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for Tile Merge N nodes.

    Tiles are layered in input order. Missing or unreadable tile paths, and
    None inputs, contribute a transparent placeholder.

    Args:
        node: Node dictionary with TileMergeNodeConfig fields
        inputs: Tiles to merge, or empty to load `tile_paths`

    Returns:
        The merged tile, or the output Path when `output_path` is set
    """
    config = TileMergeNodeConfig.from_dict(node)
    tiles = tile_inputs(inputs)
    if not tiles:
        tiles = [load_tile_or_placeholder(p, config.tile_size) for p in config.tile_paths]

    result = TileCompositor(config.get_options()).merge_n(tiles)
    return _finish(result, config)


def create_tile_merge_node(
    node_id: str,
    node_type: str = NODE_TYPE_MERGE,
    tile_paths: Optional[List[str]] = None,
    output_path: Optional[str] = None,
    white_diff_threshold: float = WHITE_DIFF_THRESHOLD,
    overwrite: bool = False,
) -> Dict[str, Any]:
    """
    Helper to create a merge node dictionary for graph building.

    Args:
        node_id: Unique node identifier
        node_type: "Tile Combine", "Tile Merge" or "Tile Merge N"
        tile_paths: Tile files used when the node has no inputs
        output_path: Destination file (None returns the tile)
        white_diff_threshold: Merge ordering threshold
        overwrite: Replace an existing output file

    Returns:
        Node dictionary ready for execution

    Raises:
        ValueError: If node_type is not a merge node type
    """
    if node_type not in MERGE_NODE_TYPES:
        raise ValueError(f"Unsupported merge node type: {node_type}")

    return {
        "id": node_id,
        "type": node_type,
        "tile_paths": list(tile_paths or []),
        "output_path": output_path,
        "white_diff_threshold": white_diff_threshold,
        "tile_size": TILE_SIZE,
        "overwrite": overwrite,
    }
