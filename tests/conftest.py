import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridplan import OccupancyGrid, get_planner  # noqa: E402


@pytest.fixture
def empty_grid():
    return OccupancyGrid(5, 5, start=(0, 0), goal=(4, 4))


@pytest.fixture
def wall_grid():
    """5x5 grid with a wall at x=2 whose only gap is at y=0."""
    wall = [(2, y) for y in range(1, 5)]
    return OccupancyGrid(5, 5, start=(0, 2), goal=(4, 2), obstacles=wall)


@pytest.fixture
def enclosed_grid():
    """7x7 grid whose goal at (3, 3) is ringed by obstacles."""
    ring = [(3 + dx, 3 + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if dx or dy]
    return OccupancyGrid(7, 7, start=(0, 0), goal=(3, 3), obstacles=ring)


@pytest.fixture(params=["dijkstra", "astar"])
def planner(request):
    return get_planner(request.param)
