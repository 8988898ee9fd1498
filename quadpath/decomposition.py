"""
Quadtree decomposition of a square grid into free and blocked regions.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from .geometry import Rect, covers, intersects, is_power_of_two


class DecompositionError(ValueError):
    """Raised when a grid cannot be halved down to the minimum region size."""


@dataclass(frozen=True)
class Free:
    """Leaf square with no obstacle overlap."""
    x: int
    y: int
    size: int


@dataclass(frozen=True)
class Blocked:
    """Leaf square that is not navigable."""


@dataclass(frozen=True)
class Split:
    """Partially obstructed square owning its four quadrants."""
    nw: "QuadrantNode"
    ne: "QuadrantNode"
    sw: "QuadrantNode"
    se: "QuadrantNode"

    @property
    def children(self) -> Tuple["QuadrantNode", "QuadrantNode", "QuadrantNode", "QuadrantNode"]:
        """Children in traversal order: north-west, north-east, south-west, south-east."""
        return (self.nw, self.ne, self.sw, self.se)


QuadrantNode = Union[Free, Blocked, Split]

BLOCKED = Blocked()


@dataclass
class TreeStats:
    """Node counts of a decomposition tree."""
    free: int = 0
    blocked: int = 0
    split: int = 0
    depth: int = 0

    @property
    def leaves(self) -> int:
        return self.free + self.blocked


def child_squares(x: int, y: int, size: int) -> List[Tuple[int, int, int]]:
    """
    Compute the four quadrants of a square.

    Args:
        x: Square origin x
        y: Square origin y
        size: Square side length

    Returns:
        List of (x, y, size) for north-west, north-east, south-west, south-east
    """
    h = size // 2
    return [
        (x, y + h, h),
        (x + h, y + h, h),
        (x, y, h),
        (x + h, y, h),
    ]


def decompose(obstacles: Sequence[Rect], origin_x: int, origin_y: int, size: int,
              min_size: int = 1) -> QuadrantNode:
    """
    Recursively subdivide a square into free, blocked and split quadrants.

    Args:
        obstacles: Obstacle rectangles (read only)
        origin_x: Square origin x
        origin_y: Square origin y
        size: Square side length, a power of two
        min_size: Granularity below which squares are not split further

    Returns:
        Root node of the decomposition tree

    Raises:
        DecompositionError: If size or min_size is not a positive power of two
    """
    if not is_power_of_two(size):
        raise DecompositionError(
            f"grid size must be a positive power of two, got {size}"
        )
    if not is_power_of_two(min_size):
        raise DecompositionError(
            f"minimum region size must be a positive power of two, got {min_size}"
        )
    return _build(obstacles, origin_x, origin_y, size, min_size)


def _build(obstacles: Sequence[Rect], x: int, y: int, size: int, min_size: int) -> QuadrantNode:
    if size <= min_size:
        if any(intersects(obs, x, y, size) for obs in obstacles):
            return BLOCKED
        return Free(x, y, size)

    # A single covering obstacle blocks the whole square
    if any(covers(obs, x, y, size) for obs in obstacles):
        return BLOCKED

    if not any(intersects(obs, x, y, size) for obs in obstacles):
        return Free(x, y, size)

    nw, ne, sw, se = (
        _build(obstacles, cx, cy, cs, min_size) for cx, cy, cs in child_squares(x, y, size)
    )
    return Split(nw, ne, sw, se)


def iter_leaves(tree: QuadrantNode, origin_x: int, origin_y: int,
                size: int) -> Iterator[Tuple[QuadrantNode, int, int, int]]:
    """
    Walk the leaves of a tree depth-first in traversal order.

    Blocked leaves carry no geometry, so the square of every leaf is
    recomputed from its position under the root square.

    Args:
        tree: Decomposition tree
        origin_x: Root square origin x
        origin_y: Root square origin y
        size: Root square side length

    Yields:
        Tuples of (leaf, x, y, size)
    """
    if isinstance(tree, (Free, Blocked)):
        yield tree, origin_x, origin_y, size
    elif isinstance(tree, Split):
        for child, (cx, cy, cs) in zip(tree.children, child_squares(origin_x, origin_y, size)):
            yield from iter_leaves(child, cx, cy, cs)
    else:
        raise TypeError(f"not a quadrant node: {tree!r}")


def count_nodes(tree: QuadrantNode) -> TreeStats:
    """Count free, blocked and split nodes and measure the tree depth."""
    stats = TreeStats()

    def visit(node, depth):
        stats.depth = max(stats.depth, depth)
        if isinstance(node, Free):
            stats.free += 1
        elif isinstance(node, Blocked):
            stats.blocked += 1
        elif isinstance(node, Split):
            stats.split += 1
            for child in node.children:
                visit(child, depth + 1)
        else:
            raise TypeError(f"not a quadrant node: {node!r}")

    visit(tree, 0)
    return stats


def occupancy_grid(tree: QuadrantNode, size: int) -> np.ndarray:
    """
    Rasterize a decomposition tree rooted at (0, 0).

    Args:
        tree: Decomposition tree
        size: Root square side length

    Returns:
        occupancy_grid: 2D array indexed [y, x] where 0=free, 1=blocked
    """
    grid = np.zeros((size, size), dtype=np.uint8)
    for leaf, x, y, s in iter_leaves(tree, 0, 0, size):
        if isinstance(leaf, Blocked):
            grid[y:y + s, x:x + s] = 1
    return grid
