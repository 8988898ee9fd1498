#!/usr/bin/env python3
"""
Plan a shortest path across a grid with rectangular obstacles.

The grid is split into a quadtree of free and blocked squares, free squares
are connected into a proximity graph and Dijkstra's algorithm finds the
cheapest route between the regions nearest the start and goal points.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quadpath.config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from quadpath.decomposition import DecompositionError, count_nodes, occupancy_grid
from quadpath.io_utils import ObstacleFileError, load_obstacle_file, save_image, save_json
from quadpath.pathfinding import EmptyRegionTableError
from quadpath.planner import plan
from quadpath.visualization import create_occupancy_grid_image, log_plan


def build_parser():
    parser = argparse.ArgumentParser(
        description="Shortest path planning over a quadtree decomposition",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan on the bundled sample grid
  python plan_path.py -i examples/tree.txt

  # Custom start and goal points
  python plan_path.py -i examples/tree.txt --start 0 0 --goal 15 15

  # One edge per region pair instead of one per shared ancestor
  python plan_path.py -i examples/tree.txt --edge-mode cross_child

  # Export the result and a picture of the decomposition
  python plan_path.py -i examples/tree.txt -o plan.json --image regions.png
        """
    )

    parser.add_argument("-i", "--input", type=Path, default=DEFAULT_PLANNER_CONFIG.input_path,
                        help=f"Obstacle file (default: {DEFAULT_PLANNER_CONFIG.input_path})")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the result")
    parser.add_argument("--start", nargs=2, type=float, metavar=("X", "Y"),
                        help="Start position (default: middle of the bottom row)")
    parser.add_argument("--goal", nargs=2, type=float, metavar=("X", "Y"),
                        help="Goal position (default: middle of the top row)")
    parser.add_argument("--edge-mode", choices=["all_pairs", "cross_child"],
                        default=DEFAULT_PLANNER_CONFIG.edge_mode,
                        help="Edge insertion at split nodes (default: all_pairs)")
    parser.add_argument("--image", type=Path, help="Save the occupancy raster as PNG")
    parser.add_argument("--visualize", action="store_true", help="Show the plan in Rerun")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    config = PlannerConfig(
        input_path=args.input,
        edge_mode=args.edge_mode,
        start=tuple(args.start) if args.start else None,
        goal=tuple(args.goal) if args.goal else None,
    )

    print(f"Loading obstacles from {config.input_path}...")
    try:
        grid_size, obstacles = load_obstacle_file(config.input_path)
    except ObstacleFileError as e:
        print(f"Error: {e}")
        return 1

    try:
        result = plan(grid_size, obstacles, config=config)
    except (DecompositionError, EmptyRegionTableError) as e:
        print(f"Error: {e}")
        return 1

    stats = count_nodes(result.tree)
    print(f"  Quadtree: {stats.leaves:,} leaves ({stats.free:,} free, {stats.blocked:,} blocked), "
          f"depth {stats.depth}")
    print(f"  Graph edges: {result.graph.edge_count():,} ({config.edge_mode})")
    print(f"  Start ({result.start[0]:g}, {result.start[1]:g}) -> region {result.start_id}")
    print(f"  Goal ({result.goal[0]:g}, {result.goal[1]:g}) -> region {result.goal_id}")

    print()
    for line in result.summary():
        print(line)

    if args.output:
        if save_json(result.to_dict(), args.output):
            print(f"\n✓ Exported result to {args.output}")

    if args.image:
        image = create_occupancy_grid_image(occupancy_grid(result.tree, grid_size))
        if save_image(image, args.image):
            print(f"✓ Saved occupancy image to {args.image}")

    if args.visualize:
        print("\nLogging plan to Rerun...")
        log_plan(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
