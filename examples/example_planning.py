#!/usr/bin/env python3
"""
Example: Planning a path across a grid with obstacles.

This demonstrates how to use the planner building blocks one by one:
decompose the grid, build the region graph and search it.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quadpath import (
    load_obstacle_file,
    decompose,
    count_nodes,
    collect_free_centers,
    build_graph,
    find_nearest,
    dijkstra,
    default_query_points
)


def planning_example(obstacle_path: Path, edge_mode: str = "all_pairs"):
    """Example of planning step by step."""
    print(f"Loading {obstacle_path}...")
    grid_size, obstacles = load_obstacle_file(obstacle_path)
    print(f"Grid {grid_size}x{grid_size} with {len(obstacles)} obstacles")

    # Decompose the grid
    print("Building quadtree...")
    tree = decompose(obstacles, 0, 0, grid_size)
    stats = count_nodes(tree)
    print(f"  {stats.free} free, {stats.blocked} blocked, {stats.split} split nodes")

    # Both passes start from id 0 so their ids agree
    print("Building region graph...")
    centers = collect_free_centers(tree)
    graph = build_graph(tree, centers, edge_mode=edge_mode)
    print(f"  {len(centers)} regions, {sum(len(n) for n in graph)} adjacency entries")

    if not centers:
        print("Grid is fully blocked")
        return None

    (sx, sy), (gx, gy) = default_query_points(grid_size)
    start = find_nearest(sx, sy, centers)
    goal = find_nearest(gx, gy, centers)
    print(f"Searching from region {start} {centers[start]} to region {goal} {centers[goal]}...")

    distance = dijkstra(graph, start, goal)
    if distance is None:
        print("  No path found")
    else:
        print(f"  Distance: {distance:.2f}")
    return distance


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Quadtree planning example")
    parser.add_argument("-i", "--input", type=Path, default=Path(__file__).parent / "tree.txt",
                        help="Path to obstacle file")
    parser.add_argument("--edge-mode", choices=["all_pairs", "cross_child"], default="all_pairs",
                        help="Edge insertion at split nodes (default: all_pairs)")
    args = parser.parse_args()

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        sys.exit(1)

    planning_example(args.input, args.edge_mode)
