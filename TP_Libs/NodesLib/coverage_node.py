"""
Coverage Rect Node.

Reports where a tile's visible content lies, scanning inward from a side or
outward from a corner.

Side mode returns a single Rectangle; corner mode returns the pair
(column_rect, row_rect).
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from TP_Libs.constants import NODE_TYPE_COVERAGE_RECT
from TP_Libs.CoverageLib.coverage_rect import (
    coverage_rect_from_corner,
    coverage_rect_from_side,
)
from TP_Libs.NodesLib.node_common import tile_inputs
from TP_Libs.PixelLib.tile_io import decode_tile
from TP_Libs.PixelLib.tile_models import to_corner, to_edge

COVERAGE_MODES = ("side", "corner")


@dataclass
class CoverageRectNodeConfig:
    """Configuration for Coverage Rect nodes.

    Attributes:
        mode: "side" or "corner"
        index: Edge index (side mode) or corner index (corner mode), 0-3
        tile_path: Tile to scan when the node has no inputs
    """
    mode: str = "side"
    index: int = 0
    tile_path: Optional[str] = None

    def __post_init__(self):
        """Validate parameters."""
        self.mode = str(self.mode).strip().lower()
        if self.mode not in COVERAGE_MODES:
            raise ValueError(f"mode must be one of {COVERAGE_MODES}, got {self.mode!r}")

        if self.mode == "side":
            self.index = int(to_edge(self.index))
        else:
            self.index = int(to_corner(self.index))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoverageRectNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


def execute_coverage_rect_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for Coverage Rect nodes.

    Returns:
        Rectangle in side mode, (column_rect, row_rect) in corner mode

    Raises:
        ValueError: If no tile is available
        MissingTileError / TileDecodeError: If `tile_path` cannot be loaded
    """
    config = CoverageRectNodeConfig.from_dict(node)
    tiles = [t for t in tile_inputs(inputs) if t is not None]

    if tiles:
        tile = tiles[0]
    elif config.tile_path:
        tile = decode_tile(config.tile_path)
    else:
        raise ValueError("Coverage Rect node requires an input tile or tile_path")

    if config.mode == "side":
        return coverage_rect_from_side(tile, config.index)
    return coverage_rect_from_corner(tile, config.index)


def create_coverage_rect_node(
    node_id: str,
    mode: str = "side",
    index: int = 0,
    tile_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Helper to create a coverage rect node dictionary for graph building."""
    config = CoverageRectNodeConfig(mode=mode, index=index, tile_path=tile_path)
    node = {"id": node_id, "type": NODE_TYPE_COVERAGE_RECT}
    node.update(config.to_dict())
    return node
