"""
End-to-end planning tests for quadpath.
"""

import json
import math

import pytest

from quadpath.config import PlannerConfig, default_query_points
from quadpath.decomposition import DecompositionError, Free
from quadpath.geometry import Rect
from quadpath.graph import RegionGraph
from quadpath.pathfinding import EmptyRegionTableError
from quadpath.planner import PlanResult, plan, plan_from_file


class TestPlan:
    """Test the full decompose/graph/search pipeline"""

    def test_no_obstacles(self):
        result = plan(4, [])
        assert result.tree == Free(0, 0, 4)
        assert result.free_region_count == 1
        assert result.start_id == result.goal_id == 0
        assert result.distance == 0.0
        assert result.summary() == [
            "Grid: 4x4, Obstacles: 0",
            "Free regions: 1",
            "Distance found: 0.00",
        ]

    def test_fully_blocked_grid(self):
        with pytest.raises(EmptyRegionTableError):
            plan(4, [Rect(0, 0, 4, 4)])

    def test_grid_size_not_power_of_two(self):
        with pytest.raises(DecompositionError):
            plan(6, [])

    def test_corner_block_default_queries(self, corner_block):
        size, obstacles = corner_block
        result = plan(size, obstacles)
        assert (result.start, result.goal) == ((2, 0), (2, 3))
        # (2, 0) is closest to the south-east region, (2, 3) ties and keeps the first
        assert result.start_id == 2
        assert result.goal_id == 0
        assert result.distance == pytest.approx(math.sqrt(8))
        assert result.summary()[-1] == "Distance found: 2.83"

    def test_explicit_points_override_config(self, corner_block):
        size, obstacles = corner_block
        config = PlannerConfig(start=(3, 3), goal=(3, 0))
        from_config = plan(size, obstacles, config=config)
        assert (from_config.start_id, from_config.goal_id) == (1, 2)
        explicit = plan(size, obstacles, start=(0, 4), config=config)
        assert (explicit.start_id, explicit.goal_id) == (0, 2)

    @pytest.mark.parametrize("edge_mode", ["all_pairs", "cross_child"])
    def test_edge_modes_agree_on_distance(self, random_obstacles, edge_mode):
        size, obstacles = random_obstacles
        baseline = plan(size, obstacles)
        result = plan(size, obstacles, config=PlannerConfig(edge_mode=edge_mode))
        assert result.distance == pytest.approx(baseline.distance)
        assert (result.start_id, result.goal_id) == (baseline.start_id, baseline.goal_id)

    def test_distance_between_region_centers(self, sample_file):
        result = plan_from_file(sample_file)
        assert result.grid_size == 16
        assert result.obstacle_count == 5
        assert result.found
        (x1, y1) = result.graph.centers[result.start_id]
        (x2, y2) = result.graph.centers[result.goal_id]
        assert result.distance == pytest.approx(math.hypot(x2 - x1, y2 - y1))

    def test_unknown_edge_mode(self):
        with pytest.raises(ValueError):
            plan(4, [], config=PlannerConfig(edge_mode="nearest"))

    def test_min_size_from_config(self, unit_block):
        size, obstacles = unit_block
        result = plan(size, obstacles, config=PlannerConfig(min_size=2))
        assert result.free_region_count == 3


class TestPlanResult:

    def _result(self, distance):
        graph = RegionGraph(centers={0: (0.5, 0.5), 1: (3.5, 3.5)}, adjacency=[[], []])
        return PlanResult(
            grid_size=4, obstacle_count=2, start=(0, 0), goal=(3, 3),
            start_id=0, goal_id=1, distance=distance, tree=None, graph=graph,
        )

    def test_no_path_summary(self):
        result = self._result(None)
        assert not result.found
        assert result.summary() == [
            "Grid: 4x4, Obstacles: 2",
            "Free regions: 2",
            "No path!",
        ]

    def test_to_dict_is_json_serializable(self):
        data = self._result(4.2426)
        encoded = json.loads(json.dumps(data.to_dict()))
        assert encoded['distance'] == 4.2426
        assert encoded['num_free_regions'] == 2
        assert encoded['goal'] == {'x': 3.0, 'y': 3.0, 'region': 1}


def test_default_query_points():
    assert default_query_points(16) == ((8, 0), (8, 15))
    assert default_query_points(1) == ((0, 0), (0, 0))
