"""
Quadtree decomposition and shortest-path planning on obstacle grids.
"""

from .geometry import Rect, intersects, covers, square_center, is_power_of_two
from .decomposition import (
    Free,
    Blocked,
    Split,
    QuadrantNode,
    TreeStats,
    DecompositionError,
    decompose,
    child_squares,
    iter_leaves,
    count_nodes,
    occupancy_grid
)
from .graph import (
    TraversalCounter,
    RegionGraph,
    collect_free_centers,
    build_graph,
    build_region_graph
)
from .pathfinding import dijkstra, find_nearest, EmptyRegionTableError
from .config import (
    PlannerConfig,
    VisualizationConfig,
    DEFAULT_PLANNER_CONFIG,
    DEFAULT_VISUALIZATION_CONFIG,
    default_query_points
)
from .io_utils import (
    ObstacleFileError,
    parse_obstacles,
    load_obstacle_file,
    save_json,
    save_image
)
from .planner import PlanResult, plan, plan_from_file
from .visualization import (
    setup_planner_viewer_blueprint,
    create_occupancy_grid_image,
    log_plan
)

__all__ = [
    # Geometry
    'Rect',
    'intersects',
    'covers',
    'square_center',
    'is_power_of_two',
    # Decomposition
    'Free',
    'Blocked',
    'Split',
    'QuadrantNode',
    'TreeStats',
    'DecompositionError',
    'decompose',
    'child_squares',
    'iter_leaves',
    'count_nodes',
    'occupancy_grid',
    # Graph
    'TraversalCounter',
    'RegionGraph',
    'collect_free_centers',
    'build_graph',
    'build_region_graph',
    # Pathfinding
    'dijkstra',
    'find_nearest',
    'EmptyRegionTableError',
    # Config
    'PlannerConfig',
    'VisualizationConfig',
    'DEFAULT_PLANNER_CONFIG',
    'DEFAULT_VISUALIZATION_CONFIG',
    'default_query_points',
    # IO utilities
    'ObstacleFileError',
    'parse_obstacles',
    'load_obstacle_file',
    'save_json',
    'save_image',
    # Planner
    'PlanResult',
    'plan',
    'plan_from_file',
    # Visualization
    'setup_planner_viewer_blueprint',
    'create_occupancy_grid_image',
    'log_plan',
]
