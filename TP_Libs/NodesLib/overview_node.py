"""
Overview Tile Node.

Assembles one parent tile from the four child tiles below it in the pyramid.
Children come from upstream results, ordered nw, ne, sw, se, or from the
node's child paths when no inputs are given. A missing child is rendered as a
transparent placeholder.

Classes:
    OverviewNodeConfig: Configuration for overview nodes

Functions:
    execute_overview_node: Pipeline executor
    create_overview_node: Helper to create an overview node dictionary
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from TP_Libs.constants import NODE_TYPE_OVERVIEW, TILE_SIZE
from TP_Libs.CompositeLib.tile_compositor import CompositorOptions, TileCompositor
from TP_Libs.NodesLib.node_common import tile_inputs, write_node_output
from TP_Libs.PixelLib.tile_io import load_tile_or_placeholder


@dataclass
class OverviewNodeConfig:
    """Configuration for Overview Tile nodes.

    Attributes:
        nw_path / ne_path / sw_path / se_path: Child tile files (None = missing)
        output_path: Destination file; None returns the tile instead
        tile_size: Standard tile edge length in pixels
        overwrite: Replace an existing output file (default: False)
    """
    nw_path: Optional[str] = None
    ne_path: Optional[str] = None
    sw_path: Optional[str] = None
    se_path: Optional[str] = None
    output_path: Optional[str] = None
    tile_size: int = TILE_SIZE
    overwrite: bool = False

    def __post_init__(self):
        """Validate parameters."""
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverviewNodeConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def child_paths(self) -> List[Optional[str]]:
        """Child paths in quadrant order nw, ne, sw, se."""
        return [self.nw_path, self.ne_path, self.sw_path, self.se_path]


def execute_overview_node(node: Dict[str, Any], inputs: List[Any]) -> Any:
    """
    Pipeline executor for Overview Tile nodes.

    Args:
        node: Node dictionary with OverviewNodeConfig fields
        inputs: Up to four child tiles (nw, ne, sw, se; None for missing),
                or empty to load the child paths

    Returns:
        The parent tile, or the output Path when `output_path` is set

    Raises:
        ValueError: If more than four child tiles are supplied
    """
    config = OverviewNodeConfig.from_dict(node)
    children = tile_inputs(inputs)

    if not children:
        children = [
            load_tile_or_placeholder(p, config.tile_size) for p in config.child_paths()
        ]
    elif len(children) > 4:
        raise ValueError(f"Overview node takes at most 4 children, got {len(children)}")

    children = children + [None] * (4 - len(children))
    compositor = TileCompositor(CompositorOptions(tile_size=config.tile_size))
    result = compositor.assemble_overview(*children)

    if config.output_path:
        return write_node_output(result, config.output_path, config.overwrite)
    return result


def create_overview_node(
    node_id: str,
    nw_path: Optional[str] = None,
    ne_path: Optional[str] = None,
    sw_path: Optional[str] = None,
    se_path: Optional[str] = None,
    output_path: Optional[str] = None,
    overwrite: bool = False,
) -> Dict[str, Any]:
    """Helper to create an overview node dictionary for graph building."""
    return {
        "id": node_id,
        "type": NODE_TYPE_OVERVIEW,
        "nw_path": nw_path,
        "ne_path": ne_path,
        "sw_path": sw_path,
        "se_path": se_path,
        "output_path": output_path,
        "tile_size": TILE_SIZE,
        "overwrite": overwrite,
    }
