"""
Tile data models for the tile engine.

This module defines the core data structures shared by the pixel, coverage and
compositing code.

Classes:
    Rectangle: Half-open axis-aligned region (x0, y0, x1, y1)
    Edge: One of the four tile sides
    Corner: One of the four tile corners
    ScanAxis: Orientation of a scanline pass (columns or rows)

Type Aliases:
    RgbaColor: A tuple of 4 integers representing RGBA color values (0-255)
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple

RgbaColor = Tuple[int, int, int, int]


class Edge(IntEnum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def from_far_side(self) -> bool:
        """True when scanning starts at the right or bottom of the tile."""
        return self % 2 == 1

    @property
    def scan_axis(self) -> "ScanAxis":
        """Edges 0/1 scan whole columns, edges 2/3 scan whole rows."""
        return ScanAxis.ROWS if self > 1 else ScanAxis.COLUMNS


class Corner(IntEnum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3

    @property
    def right(self) -> bool:
        return self % 2 == 1

    @property
    def bottom(self) -> bool:
        return self > 1


class ScanAxis(Enum):
    """Which lines a scan visits: whole columns or whole rows."""

    COLUMNS = "columns"
    ROWS = "rows"


def to_edge(edge: int) -> Edge:
    """Coerce an int edge index to Edge, raising ValueError outside 0-3."""
    try:
        return Edge(edge)
    except ValueError:
        raise ValueError(f"edge must be 0-3, got {edge!r}") from None


def to_corner(corner: int) -> Corner:
    """Coerce an int corner index to Corner, raising ValueError outside 0-3."""
    try:
        return Corner(corner)
    except ValueError:
        raise ValueError(f"corner must be 0-3, got {corner!r}") from None


@dataclass(frozen=True)
class Rectangle:
    """Half-open rectangle covering x0 <= x < x1 and y0 <= y < y1."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return max(0, self.x1 - self.x0)

    @property
    def height(self) -> int:
        return max(0, self.y1 - self.y0)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def as_box(self) -> Tuple[int, int, int, int]:
        """Return the rectangle as a Pillow (left, upper, right, lower) box."""
        return (self.x0, self.y0, self.x1, self.y1)

    @classmethod
    def full(cls, size: Tuple[int, int]) -> "Rectangle":
        """Rectangle covering a whole tile of the given (width, height)."""
        width, height = size
        return cls(0, 0, width, height)
