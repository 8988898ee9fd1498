"""
Configuration utilities and default settings.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional, Tuple

from .graph import EDGE_MODES

Point = Tuple[float, float]


@dataclass
class PlannerConfig:
    """Configuration for the path planner."""
    input_path: Path = Path("examples/tree.txt")
    min_size: int = 1
    edge_mode: str = "all_pairs"  # "all_pairs" or "cross_child"
    start: Optional[Point] = None  # None = middle of the bottom row
    goal: Optional[Point] = None   # None = middle of the top row

    def validate(self):
        """Raise ValueError if the configuration is inconsistent."""
        if self.edge_mode not in EDGE_MODES:
            raise ValueError(f"unknown edge mode {self.edge_mode!r}, expected one of {EDGE_MODES}")
        if self.min_size < 1:
            raise ValueError(f"min_size must be at least 1, got {self.min_size}")


@dataclass
class VisualizationConfig:
    """Configuration for the Rerun viewer."""
    application_id: str = "quadpath"
    free_color: Tuple[int, int, int] = (0, 200, 0)
    blocked_color: Tuple[int, int, int] = (200, 0, 0)
    edge_color: Tuple[int, int, int] = (120, 120, 120)
    endpoint_radius: float = 0.5
    max_edges: int = 20000  # Edges beyond this are not drawn


# Default configurations
DEFAULT_PLANNER_CONFIG = PlannerConfig()
DEFAULT_VISUALIZATION_CONFIG = VisualizationConfig()


def default_query_points(grid_size: int) -> Tuple[Point, Point]:
    """
    Get the default start and goal for a grid.

    Args:
        grid_size: Grid side length

    Returns:
        Tuple of (start, goal): middle of the bottom row and middle of the top row
    """
    mid = grid_size // 2
    return (mid, 0), (mid, grid_size - 1)
