"""
Visualization tests for quadpath. Rerun calls are recorded, no viewer is spawned.
"""

import numpy as np
import pytest

from quadpath import visualization
from quadpath.config import VisualizationConfig
from quadpath.planner import plan


@pytest.fixture
def recorded_logs(monkeypatch):
    logs = []
    monkeypatch.setattr(visualization.rr, "init", lambda *args, **kwargs: None)
    monkeypatch.setattr(visualization.rr, "send_blueprint", lambda *args, **kwargs: None)
    monkeypatch.setattr(visualization.rr, "log", lambda path, entity, **kwargs: logs.append((path, entity)))
    return logs


def test_occupancy_image_puts_low_y_at_bottom():
    grid = np.array([[1, 0], [0, 0]], dtype=np.uint8)
    image = visualization.create_occupancy_grid_image(grid)
    assert image.shape == (2, 2, 3)
    assert image.dtype == np.uint8
    assert tuple(image[1, 0]) == (255, 0, 0)
    assert tuple(image[0, 0]) == (0, 255, 0)


def test_blueprint_builds():
    assert visualization.setup_planner_viewer_blueprint() is not None


def test_log_plan_entities(recorded_logs, corner_block):
    size, obstacles = corner_block
    visualization.log_plan(plan(size, obstacles), spawn=False)
    paths = [path for path, _ in recorded_logs]
    assert paths == [
        "plan/regions/free",
        "plan/regions/blocked",
        "plan/centers",
        "plan/edges",
        "plan/endpoints",
        "grid/occupancy",
    ]


def test_log_plan_single_region(recorded_logs):
    visualization.log_plan(plan(4, []), spawn=False)
    paths = [path for path, _ in recorded_logs]
    assert "plan/regions/blocked" not in paths
    assert "plan/edges" not in paths


def test_log_plan_caps_edges(recorded_logs, random_obstacles, capsys):
    size, obstacles = random_obstacles
    config = VisualizationConfig(max_edges=3)
    visualization.log_plan(plan(size, obstacles), config=config, spawn=False)
    assert "Drawing 3 of" in capsys.readouterr().out
