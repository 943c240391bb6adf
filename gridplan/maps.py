"""
Map construction helpers for demos and tests.
"""

from typing import Optional, Tuple

import numpy as np

from .config import DEFAULT_MAP_CONFIG, MapConfig
from .grid import OccupancyGrid


def build_sample_map(config: MapConfig = DEFAULT_MAP_CONFIG,
                     heuristic: str = "euclidean") -> OccupancyGrid:
    """
    Build the demo map: a walled room split by two offset horizontal walls.

    Args:
        config: Map layout
        heuristic: Name of the A* heuristic

    Returns:
        OccupancyGrid
    """
    w, h = config.width, config.height
    occupancy = np.zeros((w, h), dtype=bool)

    if config.border:
        occupancy[0, :] = True
        occupancy[w - 1, :] = True
        occupancy[:, 0] = True
        occupancy[:, h - 1] = True

    for y, x_min, x_max in config.walls:
        # Walls may run into the border; clip to the grid
        x_min, x_max = max(x_min, 0), min(x_max, w - 1)
        if 0 <= y < h and x_min <= x_max:
            occupancy[x_min:x_max + 1, y] = True

    return OccupancyGrid.from_occupancy(occupancy, config.start, config.goal, heuristic)


def random_map(
    width: int,
    height: int,
    density: float = 0.3,
    seed: Optional[int] = None,
    start: Tuple[int, int] = (0, 0),
    goal: Optional[Tuple[int, int]] = None,
    heuristic: str = "euclidean",
) -> OccupancyGrid:
    """
    Build a grid with uniformly random obstacles.

    Args:
        width: Grid width in cells
        height: Grid height in cells
        density: Probability that a cell is occupied
        seed: Random seed
        start: Start cell, kept free
        goal: Goal cell, kept free (default: opposite corner)
        heuristic: Name of the A* heuristic

    Returns:
        OccupancyGrid
    """
    if goal is None:
        goal = (width - 1, height - 1)
    rng = np.random.default_rng(seed)
    occupancy = rng.random((width, height)) < density
    occupancy[start[0], start[1]] = False
    occupancy[goal[0], goal[1]] = False
    return OccupancyGrid.from_occupancy(occupancy, start, goal, heuristic)


def grid_from_occupancy(occupancy, start, goal, heuristic: str = "euclidean") -> OccupancyGrid:
    """Build a grid from a 2D array where 0=free, 1=occupied (indexed [x, y])."""
    return OccupancyGrid.from_occupancy(occupancy, start, goal, heuristic)
