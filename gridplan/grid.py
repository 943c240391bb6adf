"""
Occupancy grid and the query interface the planners rely on.
"""

from enum import IntEnum
from typing import Iterable, Optional, Protocol, Tuple

import numpy as np

from .errors import GridError
from .heuristics import get_heuristic

Coord = Tuple[int, int]


class CellType(IntEnum):
    """Cell classifications and display-only annotations."""
    FREE = 0
    OBSTACLE = 1
    GOAL = 2
    # Annotations, never returned by classify()
    ROBOT = 3
    PATH = 4


class GridQuery(Protocol):
    """What a planner needs from a map."""

    def classify(self, x: int, y: int) -> CellType: ...

    def start_coordinates(self) -> Coord: ...

    def goal_coordinates(self) -> Coord: ...

    def extents(self) -> Tuple[int, int]: ...

    def heuristic(self, x: int, y: int) -> float: ...

    def mark_visited(self, x: int, y: int) -> None: ...

    def mark_path(self, x: int, y: int) -> None: ...


def _as_coord(value, name: str) -> Coord:
    try:
        x, y = value
        return int(x), int(y)
    except (TypeError, ValueError):
        raise GridError(f"{name} must be an (x, y) pair, got {value!r}") from None


class OccupancyGrid:
    """
    Rectangular grid of free and occupied cells with one start and one goal.

    Cells are addressed as (x, y) with 0 <= x < width and 0 <= y < height;
    the occupancy array is indexed ``[x, y]``. Annotations written by a
    planner are kept in a separate layer and never change classification.
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: Coord,
        goal: Coord,
        obstacles: Iterable[Coord] = (),
        heuristic: str = "euclidean",
    ):
        if isinstance(width, bool) or not isinstance(width, (int, np.integer)):
            raise GridError(f"Grid width must be an integer, got {width!r}")
        if isinstance(height, bool) or not isinstance(height, (int, np.integer)):
            raise GridError(f"Grid height must be an integer, got {height!r}")
        if width <= 0 or height <= 0:
            raise GridError(f"Grid extents must be positive, got {width}x{height}")

        self.width = int(width)
        self.height = int(height)
        self.start = _as_coord(start, "start")
        self.goal = _as_coord(goal, "goal")
        self.heuristic_name = heuristic
        self._heuristic = get_heuristic(heuristic)

        self.occupancy = np.zeros((self.width, self.height), dtype=bool)
        for cell in obstacles:
            x, y = _as_coord(cell, "obstacle")
            if not self.in_bounds(x, y):
                raise GridError(
                    f"Obstacle ({x}, {y}) outside {self.width}x{self.height} grid"
                )
            self.occupancy[x, y] = True

        self.annotations = np.zeros((self.width, self.height), dtype=np.uint8)

    @classmethod
    def from_occupancy(
        cls,
        occupancy: np.ndarray,
        start: Coord,
        goal: Coord,
        heuristic: str = "euclidean",
    ) -> "OccupancyGrid":
        """
        Build a grid from an occupancy array.

        Args:
            occupancy: 2D array indexed [x, y] where 0=free, non-zero=occupied
            start: Start cell (x, y)
            goal: Goal cell (x, y)
            heuristic: Name of the A* heuristic

        Returns:
            OccupancyGrid
        """
        occupancy = np.asarray(occupancy)
        if occupancy.ndim != 2:
            raise GridError(f"Occupancy must be a 2D array, got shape {occupancy.shape}")
        width, height = occupancy.shape
        grid = cls(width, height, start, goal, heuristic=heuristic)
        grid.occupancy = occupancy != 0
        return grid

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_obstacle(self, x: int, y: int) -> bool:
        return not self.in_bounds(x, y) or bool(self.occupancy[x, y])

    # Grid query interface

    def classify(self, x: int, y: int) -> CellType:
        """Classify a cell; anything outside the grid is an obstacle."""
        if self.is_obstacle(x, y):
            return CellType.OBSTACLE
        if (x, y) == self.goal:
            return CellType.GOAL
        return CellType.FREE

    def start_coordinates(self) -> Coord:
        return self.start

    def goal_coordinates(self) -> Coord:
        return self.goal

    def extents(self) -> Tuple[int, int]:
        return self.width, self.height

    def heuristic(self, x: int, y: int) -> float:
        return self._heuristic((x, y), self.goal)

    def mark_visited(self, x: int, y: int):
        if self.in_bounds(x, y):
            self.annotations[x, y] = CellType.ROBOT

    def mark_path(self, x: int, y: int):
        if self.in_bounds(x, y):
            self.annotations[x, y] = CellType.PATH

    # Annotation layer

    def annotation(self, x: int, y: int) -> Optional[CellType]:
        value = self.annotations[x, y]
        return CellType(value) if value else None

    def clear_annotations(self):
        self.annotations[:] = 0

    def obstacle_cells(self):
        """List occupied cells as (x, y) tuples."""
        return [(int(x), int(y)) for x, y in np.argwhere(self.occupancy)]

    def __repr__(self):
        return (
            f"OccupancyGrid({self.width}x{self.height}, start={self.start}, "
            f"goal={self.goal}, obstacles={int(self.occupancy.sum())})"
        )
