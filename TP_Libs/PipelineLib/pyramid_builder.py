"""
Overview Pyramid Builder.

Builds coarser zoom levels of a tile directory laid out as `{z}/{x}/{y}.png`.
Each parent tile (z-1, x, y) is assembled from its four children at zoom z:

    (2x, 2y) -> nw    (2x+1, 2y) -> ne
    (2x, 2y+1) -> sw  (2x+1, 2y+1) -> se

Missing children are rendered as transparent. A parent is only produced when
at least one of its children exists, and an existing parent is kept unless
`overwrite` is set. Parents at one level are independent of each other, so a
level can be built on a thread pool.

Classes:
    PyramidBuilderConfig: Builder settings
    PyramidBuilder: Level-by-level overview generation

Functions:
    tile_path: Path of tile (z, x, y) under a root directory
    child_tile_paths: Paths of a tile's four children (nw, ne, sw, se)
    build_overview_level: Build zoom z-1 from zoom z
    build_pyramid: Build every level from max_zoom down to min_zoom

Example:
    >>> counts = build_pyramid("tiles", max_zoom=6, min_zoom=0)
    >>> counts[5]
    {'written': 412, 'skipped': 0}
"""

import concurrent.futures
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from TP_Libs.constants import TILE_EXTENSION, TILE_SIZE
from TP_Libs.CompositeLib.tile_compositor import CompositorOptions, generate_overview_tile

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
TileKey = Tuple[int, int]


def tile_path(root: PathLike, z: int, x: int, y: int) -> Path:
    """Path of tile (z, x, y) in a `{z}/{x}/{y}.png` layout."""
    return Path(root) / str(z) / str(x) / f"{y}{TILE_EXTENSION}"


def child_tile_paths(root: PathLike, z: int, x: int, y: int) -> Tuple[Path, Path, Path, Path]:
    """
    Paths of the four children of tile (z, x, y), at zoom z + 1.

    Returns:
        (nw, ne, sw, se) paths; the files need not exist
    """
    child_z = z + 1
    return (
        tile_path(root, child_z, 2 * x, 2 * y),
        tile_path(root, child_z, 2 * x + 1, 2 * y),
        tile_path(root, child_z, 2 * x, 2 * y + 1),
        tile_path(root, child_z, 2 * x + 1, 2 * y + 1),
    )


@dataclass
class PyramidBuilderConfig:
    """Configuration for pyramid building.

    Attributes:
        root: Tile directory laid out as {z}/{x}/{y}.png
        tile_size: Standard tile edge length in pixels
        overwrite: Rebuild parent tiles that already exist (default: False)
        use_threading: Build parents of one level on a thread pool
        max_workers: Thread count (None = executor default)
    """
    root: str = "."
    tile_size: int = TILE_SIZE
    overwrite: bool = False
    use_threading: bool = False
    max_workers: Optional[int] = None

    def __post_init__(self):
        """Validate parameters."""
        self.root = str(self.root)
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.max_workers is not None and self.max_workers <= 0:
            raise ValueError(f"max_workers must be positive, got {self.max_workers}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PyramidBuilderConfig":
        """Create from dictionary."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


class PyramidBuilder:
    """Generates overview levels for a tile directory."""

    def __init__(self, config: PyramidBuilderConfig):
        self.config = config
        self.options = CompositorOptions(tile_size=config.tile_size)

    @property
    def root(self) -> Path:
        return Path(self.config.root)

    def list_tiles(self, z: int) -> List[TileKey]:
        """
        List (x, y) of every tile present at zoom z.

        Entries whose directory or file name is not an integer are ignored.
        """
        level_dir = self.root / str(z)
        if not level_dir.is_dir():
            return []

        tiles: List[TileKey] = []
        for x_dir in level_dir.iterdir():
            if not x_dir.is_dir() or not x_dir.name.isdigit():
                continue
            for tile_file in x_dir.glob(f"*{TILE_EXTENSION}"):
                if tile_file.stem.isdigit():
                    tiles.append((int(x_dir.name), int(tile_file.stem)))
        return sorted(tiles)

    def parent_keys(self, z: int) -> List[TileKey]:
        """(x, y) of every zoom z-1 parent with at least one child at zoom z."""
        parents: Set[TileKey] = {(x // 2, y // 2) for x, y in self.list_tiles(z)}
        return sorted(parents)

    def build_parent(self, z: int, x: int, y: int) -> bool:
        """
        Build parent tile (z, x, y) from its children at zoom z + 1.

        Returns:
            True if the tile was written, False if it already existed

        Raises:
            TileEncodeError: If the parent cannot be written
        """
        destination = tile_path(self.root, z, x, y)
        if destination.exists() and not self.config.overwrite:
            return False

        nw, ne, sw, se = child_tile_paths(self.root, z, x, y)
        generate_overview_tile(destination, nw, ne, sw, se, self.options)
        return True

    def build_level(self, z: int) -> Dict[str, int]:
        """
        Build zoom z-1 from the tiles present at zoom z.

        Returns:
            {"written": n, "skipped": m}

        Raises:
            ValueError: If z is not positive
            TileEncodeError: If a parent cannot be written
        """
        if z <= 0:
            raise ValueError(f"Cannot build below zoom 0 (source zoom {z})")

        parent_z = z - 1
        parents = self.parent_keys(z)
        counts = {"written": 0, "skipped": 0}

        if self.config.use_threading and len(parents) > 1:
            with concurrent.futures.ThreadPoolExecutor(
                max_workers=self.config.max_workers
            ) as executor:
                futures = {
                    executor.submit(self.build_parent, parent_z, x, y): (x, y)
                    for x, y in parents
                }
                for future in concurrent.futures.as_completed(futures):
                    written = future.result()
                    counts["written" if written else "skipped"] += 1
        else:
            for x, y in parents:
                written = self.build_parent(parent_z, x, y)
                counts["written" if written else "skipped"] += 1

        logger.info(
            f"Zoom {parent_z}: wrote {counts['written']} tiles, "
            f"skipped {counts['skipped']} existing"
        )
        return counts

    def build(self, max_zoom: int, min_zoom: int = 0) -> Dict[int, Dict[str, int]]:
        """
        Build every level from max_zoom - 1 down to min_zoom.

        Returns:
            Mapping of generated zoom level -> counts

        Raises:
            ValueError: If min_zoom is negative or not below max_zoom
        """
        if min_zoom < 0 or min_zoom >= max_zoom:
            raise ValueError(
                f"min_zoom must be in [0, max_zoom), got min={min_zoom}, max={max_zoom}"
            )

        results: Dict[int, Dict[str, int]] = {}
        for z in range(max_zoom, min_zoom, -1):
            results[z - 1] = self.build_level(z)
        return results


def build_overview_level(
    root: PathLike,
    z: int,
    overwrite: bool = False,
    tile_size: int = TILE_SIZE,
) -> Dict[str, int]:
    """Build zoom z-1 of the tile directory at root from zoom z."""
    config = PyramidBuilderConfig(root=str(root), tile_size=tile_size, overwrite=overwrite)
    return PyramidBuilder(config).build_level(z)


def build_pyramid(
    root: PathLike,
    max_zoom: int,
    min_zoom: int = 0,
    overwrite: bool = False,
    tile_size: int = TILE_SIZE,
    use_threading: bool = False,
    max_workers: Optional[int] = None,
) -> Dict[int, Dict[str, int]]:
    """
    Build all overview levels of the tile directory at root.

    Args:
        root: Tile directory laid out as {z}/{x}/{y}.png
        max_zoom: Most detailed zoom present on disk
        min_zoom: Coarsest zoom to generate (default 0)
        overwrite: Rebuild parents that already exist
        tile_size: Standard tile edge length
        use_threading: Build each level on a thread pool
        max_workers: Thread count for the pool

    Returns:
        Mapping of generated zoom level -> {"written": n, "skipped": m}
    """
    config = PyramidBuilderConfig(
        root=str(root),
        tile_size=tile_size,
        overwrite=overwrite,
        use_threading=use_threading,
        max_workers=max_workers,
    )
    return PyramidBuilder(config).build(max_zoom, min_zoom)
