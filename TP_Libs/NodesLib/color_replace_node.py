"""
Color Replace Node.

Substitutes one exact RGBA color for another across a tile. The default
replaces Background-White with Fully-Transparent, so lower tiles show
through when the tile is merged.

Classes:
    ColorReplaceNodeConfig: Configuration for color replace node

Functions:
    execute_color_replace_node: Pipeline executor for color replace nodes
    create_color_replace_node: Helper to create a color replace node dictionary
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from TP_Libs.constants import NODE_TYPE_COLOR_REPLACE, TRANSPARENT, WHITE
from TP_Libs.NodesLib.node_common import tile_inputs
from TP_Libs.PixelLib.color_transform import replace_color, replace_color_file
from TP_Libs.PixelLib.tile_models import RgbaColor


def _clamp(value: Any) -> int:
    return int(max(0, min(255, int(value))))


@dataclass
class ColorReplaceNodeConfig:
    """Configuration for color replace node execution.

    Attributes:
        source_color_r/g/b/a: Exact color to replace (default Background-White)
        target_color_r/g/b/a: Replacement color (default Fully-Transparent)
        tile_path: Tile to rewrite in place when the node has no inputs
    """
    source_color_r: int = WHITE[0]
    source_color_g: int = WHITE[1]
    source_color_b: int = WHITE[2]
    source_color_a: int = WHITE[3]
    target_color_r: int = TRANSPARENT[0]
    target_color_g: int = TRANSPARENT[1]
    target_color_b: int = TRANSPARENT[2]
    target_color_a: int = TRANSPARENT[3]
    tile_path: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorReplaceNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_source_color(self) -> RgbaColor:
        """Get the source color as RGBA tuple."""
        return (
            _clamp(self.source_color_r),
            _clamp(self.source_color_g),
            _clamp(self.source_color_b),
            _clamp(self.source_color_a),
        )

    def get_target_color(self) -> RgbaColor:
        """Get the replacement color as RGBA tuple."""
        return (
            _clamp(self.target_color_r),
            _clamp(self.target_color_g),
            _clamp(self.target_color_b),
            _clamp(self.target_color_a),
        )


def execute_color_replace_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for color replace nodes.

    Args:
        node: Node dictionary with ColorReplaceNodeConfig fields
        inputs: One tile, or empty to rewrite `tile_path` on disk

    Returns:
        The recolored tile, or the Path of the file rewritten in place

    Raises:
        ValueError: If no tile is available
        TypeError: If the input is not a PIL Image
    """
    config = ColorReplaceNodeConfig.from_dict(node)
    source = config.get_source_color()
    target = config.get_target_color()
    tiles = [t for t in tile_inputs(inputs) if t is not None]

    if tiles:
        return replace_color(tiles[0], source, target)

    if not config.tile_path:
        raise ValueError("Color Replace node requires an input tile or tile_path")

    return replace_color_file(config.tile_path, source, target)


def create_color_replace_node(
    node_id: str,
    source_color: RgbaColor = WHITE,
    target_color: RgbaColor = TRANSPARENT,
    tile_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Helper to create a color replace node dictionary for graph building.

    Args:
        node_id: Unique node identifier
        source_color: RGBA color to replace
        target_color: RGBA color written in its place
        tile_path: Tile rewritten in place when the node has no inputs

    Returns:
        Node dictionary ready for execution
    """
    return {
        "id": node_id,
        "type": NODE_TYPE_COLOR_REPLACE,
        "source_color_r": source_color[0],
        "source_color_g": source_color[1],
        "source_color_b": source_color[2],
        "source_color_a": source_color[3],
        "target_color_r": target_color[0],
        "target_color_g": target_color[1],
        "target_color_b": target_color[2],
        "target_color_a": target_color[3],
        "tile_path": tile_path,
    }
