"""
Visualization setup utilities for Rerun.
"""

import numpy as np
import rerun as rr

from .config import DEFAULT_VISUALIZATION_CONFIG
from .decomposition import Blocked, Free, iter_leaves, occupancy_grid


def setup_planner_viewer_blueprint():
    """
    Set up the blueprint for the planner viewer.

    Returns:
        Blueprint configuration for Rerun viewer
    """
    blueprint = rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(
            rr.blueprint.Spatial2DView(name="Quadtree Regions", origin="plan"),
            rr.blueprint.Spatial2DView(name="Occupancy Grid", origin="grid"),
            column_shares=[2, 1]
        ),
        collapse_panels=False,
    )
    return blueprint


def create_occupancy_grid_image(grid):
    """
    Create colored visualization of occupancy grid.

    Rows are flipped so that the top image row is the highest y.

    Args:
        grid: 2D array indexed [y, x] where 0=free, 1=blocked

    Returns:
        Colored image array (H, W, 3) with uint8 dtype
    """
    grid = np.asarray(grid)[::-1]
    grid_viz = np.zeros((*grid.shape, 3), dtype=np.uint8)
    grid_viz[grid == 0] = [0, 255, 0]   # Green = free
    grid_viz[grid == 1] = [255, 0, 0]   # Red = blocked
    return grid_viz


def _square_arrays(squares):
    arr = np.array(squares, dtype=np.float64)
    return arr[:, :2], np.repeat(arr[:, 2:3], 2, axis=1)


def log_plan(result, config=DEFAULT_VISUALIZATION_CONFIG, spawn=True):
    """
    Log a planning result to a Rerun viewer.

    Args:
        result: PlanResult to display
        config: VisualizationConfig with colors and limits
        spawn: Whether to spawn a local viewer
    """
    rr.init(config.application_id, spawn=spawn)
    rr.send_blueprint(setup_planner_viewer_blueprint())

    free_squares = []
    blocked_squares = []
    for leaf, x, y, size in iter_leaves(result.tree, 0, 0, result.grid_size):
        if isinstance(leaf, Free):
            free_squares.append((x, y, size))
        elif isinstance(leaf, Blocked):
            blocked_squares.append((x, y, size))

    for name, squares, color in (
        ("free", free_squares, config.free_color),
        ("blocked", blocked_squares, config.blocked_color),
    ):
        if not squares:
            continue
        mins, sizes = _square_arrays(squares)
        rr.log(f"plan/regions/{name}", rr.Boxes2D(mins=mins, sizes=sizes, colors=[color]))

    centers = result.graph.centers
    if centers:
        rr.log(
            "plan/centers",
            rr.Points2D(np.array(list(centers.values())), radii=0.1, colors=[config.free_color])
        )

    # Each undirected edge once, duplicates from all-pairs linking dropped
    pairs = sorted({(a, b) for a, neighbors in enumerate(result.graph.adjacency)
                    for b, _ in neighbors if a < b})
    if len(pairs) > config.max_edges:
        print(f"  Drawing {config.max_edges:,} of {len(pairs):,} edges")
        pairs = pairs[:config.max_edges]
    strips = [[centers[a], centers[b]] for a, b in pairs]
    if strips:
        rr.log("plan/edges", rr.LineStrips2D(strips, colors=[config.edge_color], radii=0.02))

    rr.log(
        "plan/endpoints",
        rr.Points2D(
            [centers[result.start_id], centers[result.goal_id]],
            colors=[(0, 255, 255), (255, 0, 255)],
            radii=config.endpoint_radius,
            labels=["start", "goal"],
        )
    )

    grid = occupancy_grid(result.tree, result.grid_size)
    rr.log("grid/occupancy", rr.Image(create_occupancy_grid_image(grid)))
