"""
Dijkstra and A* search over an 8-connected occupancy grid.

Both planners share one loop and differ only in the frontier priority:
Dijkstra orders by path cost, A* by path cost plus a heuristic estimate.
The goal is never pushed onto the frontier. The search stops as soon as an
expanded cell has the goal as a neighbour.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_PLANNER_CONFIG, PlannerConfig
from .errors import InvalidCoordinatesError
from .frontier import Frontier
from .grid import CellType, GridQuery
from .heuristics import get_heuristic
from .motions import MOTIONS
from .nodes import NodeArena
from .paths import reconstruct_path

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


@dataclass
class PlanResult:
    """Outcome of one planning call."""
    algorithm: str
    found: bool
    path: List[Coord] = field(default_factory=list)
    cost: float = math.inf
    expanded: List[Coord] = field(default_factory=list)
    nodes_created: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "found": self.found,
            "cost": self.cost if self.found else None,
            "path": [[int(x), int(y)] for x, y in self.path],
            "num_expanded": len(self.expanded),
            "nodes_created": self.nodes_created,
        }


class GridPlanner:
    """
    Shared expand/terminate loop.

    Subclasses define ``priority``. A planner holds no per-call state, so one
    instance may serve several grids, including concurrently.
    """

    name = "base"

    def __init__(self, annotate: bool = True):
        self.annotate = annotate

    def priority(self, grid: GridQuery, x: int, y: int, cost: float) -> float:
        raise NotImplementedError

    def plan(self, grid: GridQuery) -> Optional[List[Coord]]:
        """
        Plan a path on the grid.

        Args:
            grid: Object implementing the grid query interface

        Returns:
            List of (x, y) cells from start to goal inclusive, or None if the
            goal is unreachable
        """
        result = self.search(grid)
        return result.path if result.found else None

    def search(self, grid: GridQuery) -> PlanResult:
        """
        Run the search and report path, cost and expansion statistics.

        Raises:
            InvalidCoordinatesError: If start or goal is outside the grid or
                on an obstacle
        """
        start, goal = self._check_endpoints(grid)

        if start == goal:
            if self.annotate:
                grid.mark_path(*start)
            return PlanResult(self.name, True, path=[start], cost=0.0)

        width, height = grid.extents()
        cost_table = np.full((width, height), np.inf)
        visited = np.zeros((width, height), dtype=bool)
        arena = NodeArena()
        frontier = Frontier()

        sx, sy = start
        cost_table[sx, sy] = 0.0
        frontier.push(self.priority(grid, sx, sy, 0.0), arena.add(sx, sy, 0.0))

        expanded = []
        terminal = None
        while frontier:
            current = frontier.pop()
            cx, cy = arena.coordinates(current)
            if visited[cx, cy]:
                continue  # stale duplicate
            visited[cx, cy] = True
            expanded.append((cx, cy))
            if self.annotate:
                grid.mark_visited(cx, cy)

            current_cost = cost_table[cx, cy]
            logger.debug("%s expanding (%d, %d) cost=%.3f", self.name, cx, cy, current_cost)

            for motion in MOTIONS:
                nx, ny = cx + motion.dx, cy + motion.dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                cell = grid.classify(nx, ny)
                if cell == CellType.GOAL:
                    terminal = arena.add(nx, ny, current_cost + motion.cost, parent=current)
                    break
                if cell == CellType.OBSTACLE or visited[nx, ny]:
                    continue

                next_cost = current_cost + motion.cost
                if next_cost < cost_table[nx, ny]:
                    cost_table[nx, ny] = next_cost
                frontier.push(
                    self.priority(grid, nx, ny, next_cost),
                    arena.add(nx, ny, next_cost, parent=current),
                )

            if terminal is not None:
                break

        if terminal is None:
            logger.info(
                "%s: no path from %s to %s (%d cells expanded)",
                self.name, start, goal, len(expanded),
            )
            result = PlanResult(
                self.name, False, expanded=expanded, nodes_created=len(arena)
            )
            arena.clear()
            return result

        path = reconstruct_path(arena, terminal)
        cost = arena.cost(terminal)
        if self.annotate:
            for x, y in path:
                grid.mark_path(x, y)
        logger.info(
            "%s: path found, %d cells, cost %.3f (%d cells expanded)",
            self.name, len(path), cost, len(expanded),
        )
        result = PlanResult(
            self.name, True,
            path=path,
            cost=cost,
            expanded=expanded,
            nodes_created=len(arena),
        )
        arena.clear()
        return result

    @staticmethod
    def _check_endpoints(grid: GridQuery) -> Tuple[Coord, Coord]:
        width, height = grid.extents()
        start = tuple(grid.start_coordinates())
        goal = tuple(grid.goal_coordinates())
        for label, (x, y) in (("start", start), ("goal", goal)):
            if not (0 <= x < width and 0 <= y < height):
                raise InvalidCoordinatesError(
                    f"{label} {(x, y)} outside {width}x{height} grid"
                )
            if grid.classify(x, y) == CellType.OBSTACLE:
                raise InvalidCoordinatesError(f"{label} {(x, y)} is on an obstacle")
        return start, goal


class DijkstraPlanner(GridPlanner):
    """Uniform-cost search."""

    name = "dijkstra"

    def priority(self, grid, x, y, cost):
        return cost


class AStarPlanner(GridPlanner):
    """
    A* search.

    The heuristic only orders the frontier; it is never added to the stored
    path cost. It must be admissible and consistent for the returned path to
    be optimal. By default the grid's own estimate is used; passing a
    heuristic name overrides it.
    """

    name = "astar"

    def __init__(self, annotate: bool = True, heuristic: Optional[str] = None):
        super().__init__(annotate)
        self.heuristic = heuristic
        self._estimate = get_heuristic(heuristic) if heuristic else None

    def priority(self, grid, x, y, cost):
        if self._estimate is None:
            return cost + grid.heuristic(x, y)
        return cost + self._estimate((x, y), tuple(grid.goal_coordinates()))


PLANNERS = {
    DijkstraPlanner.name: DijkstraPlanner,
    AStarPlanner.name: AStarPlanner,
}


def get_planner(name: str, **kwargs) -> GridPlanner:
    """
    Create a planner by algorithm name.

    Raises:
        ValueError: If the name is not "dijkstra" or "astar"
    """
    try:
        planner_cls = PLANNERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm '{name}', expected one of {sorted(PLANNERS)}"
        ) from None
    return planner_cls(**kwargs)


def make_planner(config: PlannerConfig = DEFAULT_PLANNER_CONFIG) -> GridPlanner:
    """Create the planner described by a PlannerConfig."""
    if config.algorithm.lower() == AStarPlanner.name:
        return AStarPlanner(annotate=config.annotate, heuristic=config.heuristic)
    return get_planner(config.algorithm, annotate=config.annotate)
