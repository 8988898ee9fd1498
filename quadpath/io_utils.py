"""
Input/Output utilities for file operations.
"""

import json
import numpy as np
from pathlib import Path
from typing import Dict, Any, List, Tuple
from PIL import Image

from .geometry import Rect


class ObstacleFileError(ValueError):
    """Raised when an obstacle description is missing or malformed."""


def _parse_int(token: str, line_no: int, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ObstacleFileError(f"line {line_no}: {what} must be an integer, got {token!r}") from None


def parse_obstacles(text: str) -> Tuple[int, List[Rect]]:
    """
    Parse an obstacle description.

    The first line holds the grid side length, the second the obstacle
    count R, and each of the next R lines four integers "x y w h".

    Args:
        text: File contents

    Returns:
        Tuple of (grid_size, obstacles)

    Raises:
        ObstacleFileError: If the text is malformed
    """
    lines = text.splitlines()
    if len(lines) < 2:
        raise ObstacleFileError("expected grid size and obstacle count on the first two lines")

    grid_size = _parse_int(lines[0].strip(), 1, "grid size")
    if grid_size <= 0:
        raise ObstacleFileError(f"line 1: grid size must be positive, got {grid_size}")

    count = _parse_int(lines[1].strip(), 2, "obstacle count")
    if count < 0:
        raise ObstacleFileError(f"line 2: obstacle count must be non-negative, got {count}")

    if len(lines) < count + 2:
        raise ObstacleFileError(
            f"expected {count} obstacle lines, found {len(lines) - 2}"
        )

    obstacles = []
    for offset in range(count):
        line_no = offset + 3
        fields = lines[offset + 2].split()
        if len(fields) != 4:
            raise ObstacleFileError(
                f"line {line_no}: expected 4 fields 'x y w h', got {len(fields)}"
            )
        x, y, w, h = (_parse_int(tok, line_no, name) for tok, name in zip(fields, "xywh"))
        if w < 0 or h < 0:
            raise ObstacleFileError(f"line {line_no}: width and height must be non-negative")
        obstacles.append(Rect(x, y, w, h))

    for offset, extra in enumerate(lines[count + 2:], start=count + 3):
        if extra.strip():
            raise ObstacleFileError(f"line {offset}: unexpected content after {count} obstacles")

    return grid_size, obstacles


def load_obstacle_file(file_path: Path) -> Tuple[int, List[Rect]]:
    """
    Load an obstacle description from disk.

    Args:
        file_path: Path to obstacle file

    Returns:
        Tuple of (grid_size, obstacles)

    Raises:
        ObstacleFileError: If the file cannot be read or is malformed
    """
    file_path = Path(file_path)
    try:
        text = file_path.read_text()
    except OSError as e:
        raise ObstacleFileError(f"cannot read {file_path}: {e}") from e
    return parse_obstacles(text)


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving JSON to {file_path}: {e}")
        return False


def save_image(image: np.ndarray, image_path: Path) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3)
        image_path: Path to save image

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path = Path(image_path)
        image_path.parent.mkdir(parents=True, exist_ok=True)
        # Convert to uint8 if needed
        if image.dtype != np.uint8:
            if image.max() <= 1.0:
                image = (image * 255).astype(np.uint8)
            else:
                image = image.astype(np.uint8)

        Image.fromarray(image).save(image_path)
        return True
    except (OSError, ValueError) as e:
        print(f"Error saving image to {image_path}: {e}")
        return False
