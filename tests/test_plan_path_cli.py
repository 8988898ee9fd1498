"""
Command-line tests for scripts/plan_path.py.
"""

import json

import numpy as np
import pytest
from PIL import Image

from scripts.plan_path import main


class TestPlanPathCli:

    def test_sample_file(self, sample_file, capsys):
        assert main(["-i", str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert "Grid: 16x16, Obstacles: 5" in out
        assert "Distance found:" in out

    def test_custom_points_and_edge_mode(self, write_obstacles, capsys):
        path = write_obstacles("4\n1\n0 0 2 2\n")
        assert main(["-i", str(path), "--start", "2", "0", "--goal", "2", "3",
                     "--edge-mode", "cross_child"]) == 0
        out = capsys.readouterr().out
        assert "Free regions: 3" in out
        assert "Distance found: 2.83" in out

    def test_malformed_file(self, write_obstacles, capsys):
        path = write_obstacles("4\n2\n0 0 2 2\n")
        assert main(["-i", str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["-i", str(tmp_path / "nope.txt")]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_fully_blocked(self, write_obstacles, capsys):
        path = write_obstacles("4\n1\n0 0 4 4\n")
        assert main(["-i", str(path)]) == 1
        assert "Error:" in capsys.readouterr().out

    def test_bad_grid_size(self, write_obstacles, capsys):
        path = write_obstacles("6\n0\n")
        assert main(["-i", str(path)]) == 1
        assert "power of two" in capsys.readouterr().out

    def test_exports(self, write_obstacles, tmp_path):
        path = write_obstacles("4\n1\n0 0 2 2\n")
        out_json = tmp_path / "plan.json"
        out_png = tmp_path / "grid.png"
        assert main(["-i", str(path), "-o", str(out_json), "--image", str(out_png)]) == 0

        data = json.loads(out_json.read_text())
        assert data['num_free_regions'] == 3
        assert data['distance'] == pytest.approx(np.sqrt(8))

        image = np.array(Image.open(out_png))
        assert image.shape == (4, 4, 3)
        # South-west quadrant is blocked and drawn in the bottom-left corner
        assert tuple(image[3, 0]) == (255, 0, 0)
        assert tuple(image[0, 0]) == (0, 255, 0)
