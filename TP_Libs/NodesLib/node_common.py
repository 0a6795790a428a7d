"""
Helpers shared by the tile node executors.

Functions:
    require_tile: Validate that a node input is a PIL Image
    tile_inputs: Normalize a node's inputs list to a list of tiles
    write_node_output: Save a node's result tile, honoring the overwrite flag
"""

from pathlib import Path
from typing import Any, List, Optional

from TP_Libs.PixelLib.tile_io import encode_tile


def require_tile(value: Any, label: str = "input") -> Any:
    if not hasattr(value, "mode") or not hasattr(value, "convert"):
        raise TypeError(f"Expected PIL Image for {label}, got {type(value)}")
    return value


def tile_inputs(inputs: Optional[List[Any]]) -> List[Any]:
    """
    Flatten a node's inputs into a list of tiles.

    Upstream nodes may hand over a single tile or a list/tuple of tiles. None
    entries are kept (they stand for a missing tile).
    """
    tiles: List[Any] = []
    for item in inputs or []:
        if isinstance(item, (list, tuple)):
            tiles.extend(item)
        else:
            tiles.append(item)

    for index, tile in enumerate(tiles):
        if tile is not None:
            require_tile(tile, f"input {index}")
    return tiles


def write_node_output(tile: Any, output_path: str, overwrite: bool) -> Path:
    """
    Save a node's result tile.

    Raises:
        ValueError: If the file exists and overwrite=False
        TileEncodeError: If the file cannot be written
    """
    path = Path(output_path)
    if path.exists() and not overwrite:
        raise ValueError(
            f"Output tile already exists: {path}. "
            f"Set overwrite=True to replace."
        )
    return encode_tile(tile, path)
