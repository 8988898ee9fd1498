"""Test configuration and fixtures for quadpath."""
import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quadpath.geometry import Rect

SAMPLE_FILE = project_root / "examples" / "tree.txt"


@pytest.fixture
def corner_block():
    """4x4 grid whose south-west quadrant is exactly covered."""
    return 4, [Rect(0, 0, 2, 2)]


@pytest.fixture
def unit_block():
    """4x4 grid with a single blocked unit cell at the origin."""
    return 4, [Rect(0, 0, 1, 1)]


@pytest.fixture
def random_obstacles():
    """16x16 grid with a reproducible scatter of obstacles."""
    rng = np.random.RandomState(7)
    obstacles = []
    for _ in range(6):
        x, y = rng.randint(0, 14, size=2)
        w, h = rng.randint(1, 5, size=2)
        obstacles.append(Rect(int(x), int(y), int(w), int(h)))
    return 16, obstacles


@pytest.fixture
def sample_file():
    return SAMPLE_FILE


@pytest.fixture
def write_obstacles(tmp_path):
    """Write obstacle text to a temporary file and return its path."""
    def _write(text, name="obstacles.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
