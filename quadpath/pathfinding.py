"""
Shortest-path search over region graphs.
"""

import math
from heapq import heappush, heappop
from typing import Dict, List, Optional, Tuple

import numpy as np


class EmptyRegionTableError(ValueError):
    """Raised when a lookup needs at least one free region and there is none."""


def dijkstra(graph: List[List[Tuple[int, float]]], start: int, goal: int) -> Optional[float]:
    """
    Dijkstra search for the cheapest path cost between two regions.

    Args:
        graph: Adjacency lists of (neighbor id, weight) indexed by region id
        start: Start region id
        goal: Goal region id

    Returns:
        Total path cost, or None if the goal is unreachable

    Raises:
        IndexError: If start or goal is not a node of the graph
        ValueError: If a relaxed edge has a NaN or negative weight
    """
    n = len(graph)
    for name, node in (("start", start), ("goal", goal)):
        if not 0 <= node < n:
            raise IndexError(f"{name} node {node} out of range for graph of {n} nodes")

    dist = [math.inf] * n
    dist[start] = 0.0

    frontier = []
    heappush(frontier, (0.0, start))

    while frontier:
        cost, node = heappop(frontier)

        if node == goal:
            return cost

        # Stale entry from an earlier relaxation
        if cost > dist[node]:
            continue

        for neighbor, weight in graph[node]:
            if not weight >= 0.0:
                raise ValueError(f"invalid edge weight {weight} on edge {node} -> {neighbor}")
            tentative = cost + weight
            if tentative < dist[neighbor]:
                dist[neighbor] = tentative
                heappush(frontier, (tentative, neighbor))

    return None  # No path found


def find_nearest(query_x: float, query_y: float, centers: Dict[int, Tuple[float, float]]) -> int:
    """
    Find the region whose center is closest to a query point.

    Ties go to the first region in the table's iteration order.

    Args:
        query_x: Query x coordinate
        query_y: Query y coordinate
        centers: Mapping of region id to center (x, y)

    Returns:
        Id of the nearest region

    Raises:
        EmptyRegionTableError: If centers is empty
    """
    if not centers:
        raise EmptyRegionTableError("no free regions to search")

    ids = list(centers.keys())
    points = np.array([centers[i] for i in ids], dtype=np.float64)
    sq_dist = (points[:, 0] - query_x) ** 2 + (points[:, 1] - query_y) ** 2
    return ids[int(np.argmin(sq_dist))]
