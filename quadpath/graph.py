"""
Proximity graph over the free regions of a decomposition tree.

Region ids are dense integers handed out in depth-first traversal order
(north-west, north-east, south-west, south-east). The center table and the
adjacency lists are built by two separate walks over the same tree; each walk
takes its own TraversalCounter so both assign identical ids.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from .decomposition import Blocked, Free, QuadrantNode, Split
from .geometry import square_center

Center = Tuple[float, float]
Adjacency = List[List[Tuple[int, float]]]

EDGE_MODES = ("all_pairs", "cross_child")


class TraversalCounter:
    """Mutable id counter threaded through one traversal."""

    def __init__(self, start: int = 0):
        self.value = start

    def next_id(self) -> int:
        current = self.value
        self.value += 1
        return current


@dataclass
class RegionGraph:
    """Region center table together with its adjacency lists."""
    centers: Dict[int, Center] = field(default_factory=dict)
    adjacency: Adjacency = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        """Number of directed adjacency entries, duplicates included."""
        return sum(len(neighbors) for neighbors in self.adjacency)


def collect_free_centers(tree: QuadrantNode,
                         counter: Optional[TraversalCounter] = None) -> Dict[int, Center]:
    """
    Assign an id to every free leaf and record its center.

    Args:
        tree: Decomposition tree
        counter: Traversal counter, a fresh one starting at 0 if omitted

    Returns:
        Mapping of region id to center (x, y), in id order
    """
    if counter is None:
        counter = TraversalCounter()
    centers = {}

    def visit(node):
        if isinstance(node, Free):
            centers[counter.next_id()] = square_center(node.x, node.y, node.size)
        elif isinstance(node, Split):
            for child in node.children:
                visit(child)
        elif not isinstance(node, Blocked):
            raise TypeError(f"not a quadrant node: {node!r}")

    visit(tree)
    return centers


def build_graph(tree: QuadrantNode, centers: Dict[int, Center],
                counter: Optional[TraversalCounter] = None,
                edge_mode: str = "all_pairs") -> Adjacency:
    """
    Connect free regions that share a split ancestor.

    With edge_mode "all_pairs" every split node links every pair of regions
    in its subtree, so regions deep in the tree are linked again at each
    ancestor. With "cross_child" a split node only links regions taken from
    two different children, which yields each undirected edge exactly once.

    Args:
        tree: Decomposition tree the centers were collected from
        centers: Region table from collect_free_centers
        counter: Traversal counter, a fresh one starting at 0 if omitted
        edge_mode: "all_pairs" or "cross_child"

    Returns:
        Adjacency lists indexed by region id, of (neighbor id, distance)

    Raises:
        ValueError: If edge_mode is unknown or the traversal hands out an id
            that is missing from centers
    """
    if edge_mode not in EDGE_MODES:
        raise ValueError(f"unknown edge mode {edge_mode!r}, expected one of {EDGE_MODES}")
    if counter is None:
        counter = TraversalCounter()

    graph = [[] for _ in range(len(centers))]

    def link(ids_a, ids_b, same_group):
        points_a = np.array([centers[i] for i in ids_a], dtype=np.float64)
        points_b = np.array([centers[i] for i in ids_b], dtype=np.float64)
        weights = cdist(points_a, points_b)
        for i, id1 in enumerate(ids_a):
            start = i + 1 if same_group else 0
            for j in range(start, len(ids_b)):
                id2 = ids_b[j]
                dist = float(weights[i, j])
                graph[id1].append((id2, dist))
                graph[id2].append((id1, dist))

    def visit(node):
        if isinstance(node, Free):
            region_id = counter.next_id()
            if region_id not in centers or region_id >= len(graph):
                raise ValueError(
                    f"region {region_id} is not in the center table; "
                    "centers must come from the same tree with a fresh counter"
                )
            return [region_id]
        if isinstance(node, Blocked):
            return []
        if not isinstance(node, Split):
            raise TypeError(f"not a quadrant node: {node!r}")

        groups = [visit(child) for child in node.children]
        if edge_mode == "all_pairs":
            ids = [i for group in groups for i in group]
            if len(ids) > 1:
                link(ids, ids, same_group=True)
            return ids

        for a in range(len(groups)):
            for b in range(a + 1, len(groups)):
                if groups[a] and groups[b]:
                    link(groups[a], groups[b], same_group=False)
        return [i for group in groups for i in group]

    visit(tree)
    return graph


def build_region_graph(tree: QuadrantNode, edge_mode: str = "all_pairs") -> RegionGraph:
    """Run both traversals over a tree with fresh counters."""
    centers = collect_free_centers(tree, TraversalCounter())
    adjacency = build_graph(tree, centers, TraversalCounter(), edge_mode=edge_mode)
    return RegionGraph(centers=centers, adjacency=adjacency)
