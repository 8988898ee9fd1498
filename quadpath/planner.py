"""
End-to-end planning: decompose the grid, build the region graph and search it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import DEFAULT_PLANNER_CONFIG, PlannerConfig, Point, default_query_points
from .decomposition import QuadrantNode, decompose
from .geometry import Rect
from .graph import RegionGraph, build_region_graph
from .io_utils import load_obstacle_file
from .pathfinding import EmptyRegionTableError, dijkstra, find_nearest


@dataclass
class PlanResult:
    """Outcome of one planning run."""
    grid_size: int
    obstacle_count: int
    start: Point
    goal: Point
    start_id: int
    goal_id: int
    distance: Optional[float]
    tree: QuadrantNode = field(repr=False)
    graph: RegionGraph = field(repr=False)

    @property
    def free_region_count(self) -> int:
        return len(self.graph.centers)

    @property
    def found(self) -> bool:
        return self.distance is not None

    def summary(self) -> List[str]:
        """Human-readable report lines."""
        lines = [
            f"Grid: {self.grid_size}x{self.grid_size}, Obstacles: {self.obstacle_count}",
            f"Free regions: {self.free_region_count}",
        ]
        if self.found:
            lines.append(f"Distance found: {self.distance:.2f}")
        else:
            lines.append("No path!")
        return lines

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable view of the result, without the tree."""
        return {
            'grid_size': self.grid_size,
            'num_obstacles': self.obstacle_count,
            'num_free_regions': self.free_region_count,
            'num_edges': self.graph.edge_count(),
            'start': {'x': float(self.start[0]), 'y': float(self.start[1]), 'region': self.start_id},
            'goal': {'x': float(self.goal[0]), 'y': float(self.goal[1]), 'region': self.goal_id},
            'distance': self.distance,
        }


def plan(grid_size: int, obstacles: Sequence[Rect], start: Optional[Point] = None,
         goal: Optional[Point] = None, config: Optional[PlannerConfig] = None) -> PlanResult:
    """
    Compute the shortest region-graph distance between two points of a grid.

    Args:
        grid_size: Grid side length, a power of two
        obstacles: Obstacle rectangles
        start: Start point, or None for config.start / the default start
        goal: Goal point, or None for config.goal / the default goal
        config: Planner configuration

    Returns:
        PlanResult; its distance is None when the goal is unreachable

    Raises:
        DecompositionError: If grid_size is not a power of two
        EmptyRegionTableError: If the grid has no free region
    """
    if config is None:
        config = DEFAULT_PLANNER_CONFIG
    config.validate()

    default_start, default_goal = default_query_points(grid_size)
    start = start if start is not None else (config.start or default_start)
    goal = goal if goal is not None else (config.goal or default_goal)

    tree = decompose(obstacles, 0, 0, grid_size, min_size=config.min_size)
    graph = build_region_graph(tree, edge_mode=config.edge_mode)
    if not graph.centers:
        raise EmptyRegionTableError(
            f"grid {grid_size}x{grid_size} is fully blocked by {len(obstacles)} obstacles"
        )

    start_id = find_nearest(start[0], start[1], graph.centers)
    goal_id = find_nearest(goal[0], goal[1], graph.centers)
    distance = dijkstra(graph.adjacency, start_id, goal_id)

    return PlanResult(
        grid_size=grid_size,
        obstacle_count=len(obstacles),
        start=start,
        goal=goal,
        start_id=start_id,
        goal_id=goal_id,
        distance=distance,
        tree=tree,
        graph=graph,
    )


def plan_from_file(file_path: Path, start: Optional[Point] = None, goal: Optional[Point] = None,
                   config: Optional[PlannerConfig] = None) -> PlanResult:
    """Load an obstacle file and plan on it."""
    grid_size, obstacles = load_obstacle_file(file_path)
    return plan(grid_size, obstacles, start, goal, config)
