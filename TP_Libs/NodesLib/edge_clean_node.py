"""
Edge Clean Node.

Clears background-only scanlines from a tile so it stitches cleanly over its
neighbors. With an upstream tile the cleaned copy is returned; with no inputs
the tile at `tile_path` is cleaned in place on disk.

Classes:
    EdgeCleanNodeConfig: Configuration for edge clean nodes

Functions:
    execute_edge_clean_node: Pipeline executor
    create_edge_clean_node: Helper to create an edge clean node dictionary
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from TP_Libs.constants import EDGE_LEFT, NODE_TYPE_EDGE_CLEAN
from TP_Libs.CoverageLib.edge_cleaner import clean_edge, clean_edge_file
from TP_Libs.NodesLib.node_common import tile_inputs
from TP_Libs.PixelLib.tile_models import to_edge


@dataclass
class EdgeCleanNodeConfig:
    """Configuration for Edge Clean nodes.

    Attributes:
        edge: Edge index 0-3 (0/1 scan columns, 2/3 scan rows)
        tile_path: Tile to clean in place when the node has no inputs
    """
    edge: int = EDGE_LEFT
    tile_path: Optional[str] = None

    def __post_init__(self):
        """Validate parameters."""
        self.edge = int(to_edge(self.edge))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EdgeCleanNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


def execute_edge_clean_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for Edge Clean nodes.

    Args:
        node: Node dictionary with EdgeCleanNodeConfig fields
        inputs: One tile, or empty to clean `tile_path` on disk

    Returns:
        The cleaned tile, or the Path of the file cleaned in place

    Raises:
        ValueError: If the edge is out of range, or no tile is available
    """
    config = EdgeCleanNodeConfig.from_dict(node)
    tiles = [t for t in tile_inputs(inputs) if t is not None]

    if tiles:
        return clean_edge(tiles[0], config.edge)

    if not config.tile_path:
        raise ValueError("Edge Clean node requires an input tile or tile_path")

    return clean_edge_file(config.tile_path, config.edge)


def create_edge_clean_node(
    node_id: str,
    edge: int = EDGE_LEFT,
    tile_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Helper to create an edge clean node dictionary for graph building."""
    return {
        "id": node_id,
        "type": NODE_TYPE_EDGE_CLEAN,
        "edge": int(to_edge(edge)),
        "tile_path": tile_path,
    }
