"""
Geometry utilities for axis-aligned obstacles and square grid regions.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned obstacle with integer origin and dimensions."""
    x: int
    y: int
    w: int
    h: int

    @property
    def x2(self) -> int:
        """Exclusive right edge."""
        return self.x + self.w

    @property
    def y2(self) -> int:
        """Exclusive top edge."""
        return self.y + self.h


def intersects(rect: Rect, qx: int, qy: int, qsize: int) -> bool:
    """
    Check whether a rectangle overlaps a square region.

    Edges are half-open: a rectangle that only touches the square's
    boundary does not intersect it.

    Args:
        rect: Obstacle rectangle
        qx: Square origin x
        qy: Square origin y
        qsize: Square side length

    Returns:
        True if the rectangle overlaps the square
    """
    return not (
        rect.x >= qx + qsize or rect.x2 <= qx or
        rect.y >= qy + qsize or rect.y2 <= qy
    )


def covers(rect: Rect, qx: int, qy: int, qsize: int) -> bool:
    """
    Check whether a rectangle fully contains a square region.

    Args:
        rect: Obstacle rectangle
        qx: Square origin x
        qy: Square origin y
        qsize: Square side length

    Returns:
        True if the rectangle's bounds contain the square on all four sides
    """
    return (
        rect.x <= qx and rect.x2 >= qx + qsize and
        rect.y <= qy and rect.y2 >= qy + qsize
    )


def square_center(x: int, y: int, size: int) -> Tuple[float, float]:
    """Compute the center of a square region."""
    half = size / 2.0
    return (x + half, y + half)


def is_power_of_two(n: int) -> bool:
    """Check whether n is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0
