"""
Input/Output utilities for maps, results and images.
"""

import json
import logging
import numpy as np
from pathlib import Path
from typing import Dict, Any, Optional
from PIL import Image

from .errors import GridError
from .grid import OccupancyGrid

logger = logging.getLogger(__name__)


def load_json(file_path: Path) -> Optional[Dict[str, Any]]:
    """
    Load JSON file safely.

    Args:
        file_path: Path to JSON file

    Returns:
        Dictionary with JSON data, or None if loading fails
    """
    try:
        with open(file_path, 'r') as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Error loading JSON from %s: %s", file_path, e)
        return None


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
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        logger.error("Error saving JSON to %s: %s", file_path, e)
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
        logger.error("Error saving image to %s: %s", image_path, e)
        return False


def grid_to_dict(grid: OccupancyGrid) -> Dict[str, Any]:
    """Serialize a grid to the map JSON layout."""
    return {
        'width': grid.width,
        'height': grid.height,
        'start': list(grid.start),
        'goal': list(grid.goal),
        'obstacles': [list(cell) for cell in grid.obstacle_cells()],
    }


def grid_from_dict(data: Dict[str, Any], heuristic: str = "euclidean") -> OccupancyGrid:
    """
    Build a grid from the map JSON layout.

    Raises:
        GridError: If a required key is missing
    """
    missing = [key for key in ('width', 'height', 'start', 'goal') if key not in data]
    if missing:
        raise GridError(f"Map is missing keys: {', '.join(missing)}")
    return OccupancyGrid(
        data['width'],
        data['height'],
        data['start'],
        data['goal'],
        obstacles=data.get('obstacles', []),
        heuristic=heuristic,
    )


def load_grid(file_path: Path, heuristic: str = "euclidean") -> OccupancyGrid:
    """
    Load a map JSON file.

    Raises:
        GridError: If the file cannot be read or describes a malformed grid
    """
    data = load_json(file_path)
    if not isinstance(data, dict):
        raise GridError(f"Could not read map from {file_path}")
    return grid_from_dict(data, heuristic)


def save_grid(grid: OccupancyGrid, file_path: Path) -> bool:
    return save_json(grid_to_dict(grid), file_path)


def save_plan_result(result, file_path: Path) -> bool:
    """Save a PlanResult as JSON."""
    return save_json(result.to_dict(), file_path)
