import math

import pytest

from gridplan import (
    AStarPlanner,
    DijkstraPlanner,
    OccupancyGrid,
    PlannerConfig,
    build_sample_map,
    get_planner,
    make_planner,
)
from gridplan.errors import InvalidCoordinatesError
from gridplan.grid import CellType
from gridplan.heuristics import euclidean, octile
from gridplan.motions import SQRT2
from gridplan.nodes import NodeArena
from gridplan.paths import is_valid_path, path_cost


def test_open_grid_goes_straight_diagonal(planner, empty_grid):
    result = planner.search(empty_grid)
    assert result.found
    assert result.path == [(i, i) for i in range(5)]
    assert result.cost == pytest.approx(4 * SQRT2)


def test_wall_forces_gap(planner, wall_grid):
    path = planner.plan(wall_grid)
    assert path is not None
    assert (2, 0) in path
    assert path[0] == (0, 2) and path[-1] == (4, 2)
    assert is_valid_path(wall_grid, path)
    assert path_cost(path) == pytest.approx(4 * SQRT2)


def test_start_equals_goal(planner):
    grid = OccupancyGrid(5, 5, start=(2, 2), goal=(2, 2))
    result = planner.search(grid)
    assert result.found
    assert result.path == [(2, 2)]
    assert result.cost == 0.0
    assert result.expanded == []


def test_goal_next_to_start(planner):
    grid = OccupancyGrid(5, 5, start=(2, 2), goal=(3, 1))
    result = planner.search(grid)
    assert result.path == [(2, 2), (3, 1)]
    assert result.cost == pytest.approx(SQRT2)
    assert result.expanded == [(2, 2)]


def test_enclosed_goal_not_found(planner, enclosed_grid):
    assert planner.plan(enclosed_grid) is None
    result = planner.search(enclosed_grid)
    assert not result.found
    assert result.path == []
    assert math.isinf(result.cost)
    # Every reachable cell is finalized before giving up
    assert len(result.expanded) == 49 - 9


def test_cells_expanded_once(planner):
    grid = OccupancyGrid(10, 10, start=(0, 0), goal=(9, 5), obstacles=[(5, y) for y in range(9)])
    result = planner.search(grid)
    assert result.found
    assert len(set(result.expanded)) == len(result.expanded)
    # Worse duplicates stay in the frontier and are discarded on pop
    assert result.nodes_created > len(result.expanded)


@pytest.mark.parametrize("start,goal", [
    ((-1, 0), (4, 4)),
    ((0, 0), (5, 4)),
    ((0, 0), (4, 40)),
])
def test_coordinates_outside_rejected(planner, start, goal):
    grid = OccupancyGrid(5, 5, start=start, goal=goal)
    with pytest.raises(InvalidCoordinatesError):
        planner.plan(grid)


def test_endpoints_on_obstacles_rejected(planner):
    grid = OccupancyGrid(5, 5, start=(0, 0), goal=(4, 4), obstacles=[(0, 0)])
    with pytest.raises(InvalidCoordinatesError):
        planner.search(grid)
    grid = OccupancyGrid(5, 5, start=(0, 0), goal=(4, 4), obstacles=[(4, 4)])
    with pytest.raises(ValueError):
        planner.search(grid)


def test_idempotent(planner):
    grid = build_sample_map()
    first = planner.search(grid)
    second = planner.search(grid)
    assert first.path == second.path
    assert first.cost == second.cost
    assert first.expanded == second.expanded


def test_sample_map(planner):
    grid = build_sample_map()
    result = planner.search(grid)
    assert result.found
    assert result.path[0] == (5, 5)
    assert result.path[-1] == (45, 45)
    assert is_valid_path(grid, result.path)
    assert result.cost == pytest.approx(path_cost(result.path))


def test_astar_expands_fewer_cells_on_sample_map():
    grid = build_sample_map()
    dijkstra = DijkstraPlanner().search(grid)
    astar = AStarPlanner().search(grid)
    assert len(astar.expanded) < len(dijkstra.expanded)
    assert astar.cost <= dijkstra.cost + 1e-9


def test_annotations_emitted(empty_grid):
    DijkstraPlanner().search(empty_grid)
    assert empty_grid.annotation(0, 0) == CellType.PATH
    assert empty_grid.annotation(4, 4) == CellType.PATH
    assert empty_grid.annotation(1, 0) == CellType.ROBOT


def test_annotations_can_be_disabled(empty_grid):
    AStarPlanner(annotate=False).search(empty_grid)
    assert not empty_grid.annotations.any()


def test_heuristic_not_added_to_cost():
    grid = OccupancyGrid(8, 3, start=(0, 1), goal=(7, 1))
    result = AStarPlanner().search(grid)
    assert result.cost == pytest.approx(7.0)


def test_result_to_dict(empty_grid):
    data = AStarPlanner().search(empty_grid).to_dict()
    assert data["found"] is True
    assert data["path"][0] == [0, 0]
    assert data["cost"] == pytest.approx(4 * SQRT2)


def test_get_planner():
    assert isinstance(get_planner("dijkstra"), DijkstraPlanner)
    assert isinstance(get_planner("AStar"), AStarPlanner)
    assert get_planner("astar", annotate=False).annotate is False
    with pytest.raises(ValueError):
        get_planner("rrt")


def test_make_planner():
    planner = make_planner(PlannerConfig(algorithm="dijkstra", annotate=False))
    assert isinstance(planner, DijkstraPlanner)
    assert planner.annotate is False
    assert make_planner().heuristic is None


class UnboundedGrid:
    """Grid query that never reports the border, leaving bounds to the planner."""

    def __init__(self, width, height, start, goal):
        self.width, self.height = width, height
        self.start, self.goal = start, goal

    def classify(self, x, y):
        return CellType.GOAL if (x, y) == self.goal else CellType.FREE

    def start_coordinates(self):
        return self.start

    def goal_coordinates(self):
        return self.goal

    def extents(self):
        return self.width, self.height

    def heuristic(self, x, y):
        return euclidean((x, y), self.goal)

    def mark_visited(self, x, y):
        pass

    def mark_path(self, x, y):
        pass


def test_neighbours_outside_extents_skipped(planner):
    grid = UnboundedGrid(6, 6, start=(0, 0), goal=(5, 5))
    result = planner.search(grid)
    assert result.found
    assert result.cost == pytest.approx(5 * SQRT2)
    for x, y in result.expanded + result.path:
        assert 0 <= x < 6 and 0 <= y < 6


def test_configured_heuristic_overrides_grid():
    grid = OccupancyGrid(5, 5, start=(0, 0), goal=(4, 4))
    planner = make_planner(PlannerConfig(algorithm="astar", heuristic="octile"))
    assert planner.heuristic == "octile"
    assert planner.priority(grid, 0, 2, 0.0) == pytest.approx(octile((0, 2), (4, 4)))
    assert planner.priority(grid, 0, 2, 0.0) != pytest.approx(grid.heuristic(0, 2))

    default = make_planner()
    assert default.priority(grid, 0, 2, 0.0) == pytest.approx(grid.heuristic(0, 2))


def test_configured_heuristic_still_optimal():
    grid = build_sample_map()
    euclid = AStarPlanner().search(grid)
    oct_result = AStarPlanner(heuristic="octile").search(grid)
    assert oct_result.cost == pytest.approx(euclid.cost)
    with pytest.raises(ValueError):
        AStarPlanner(heuristic="manhattan")


@pytest.mark.parametrize("goal", [(4, 4), (3, 3)])
def test_arena_cleared_when_search_returns(monkeypatch, planner, enclosed_grid, goal):
    released = []
    original_clear = NodeArena.clear

    def clear(self):
        released.append(len(self))
        original_clear(self)

    monkeypatch.setattr(NodeArena, "clear", clear)

    result = planner.search(OccupancyGrid(5, 5, start=(0, 0), goal=goal))
    assert result.found
    assert released == [result.nodes_created]
    assert result.nodes_created > 0

    released.clear()
    result = planner.search(enclosed_grid)
    assert not result.found
    assert released == [result.nodes_created]
