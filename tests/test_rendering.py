import numpy as np
import rerun as rr
from PIL import Image

from gridplan import DijkstraPlanner, OccupancyGrid, RenderConfig
from gridplan.config import DEFAULT_RENDER_CONFIG
from gridplan import rendering
from gridplan.rendering import grid_to_image, log_plan, render_plan, scale_image, setup_planning_blueprint

COLORS = DEFAULT_RENDER_CONFIG.colors


def _grid():
    return OccupancyGrid(6, 4, start=(0, 0), goal=(5, 3), obstacles=[(2, 1)])


def test_image_rows_are_y():
    image = grid_to_image(_grid())
    assert image.shape == (4, 6, 3)
    assert image.dtype == np.uint8
    assert tuple(image[1, 2]) == COLORS["obstacle"]
    assert tuple(image[0, 0]) == COLORS["start"]
    assert tuple(image[3, 5]) == COLORS["goal"]
    assert tuple(image[2, 2]) == COLORS["free"]


def test_explicit_path_is_drawn():
    image = grid_to_image(_grid(), path=[(0, 0), (1, 1), (2, 2)])
    assert tuple(image[1, 1]) == COLORS["path"]
    assert tuple(image[2, 2]) == COLORS["path"]


def test_annotations_are_drawn():
    grid = _grid()
    result = DijkstraPlanner().search(grid)
    image = grid_to_image(grid)
    x, y = result.path[1]
    assert tuple(image[y, x]) == COLORS["path"]
    visited_only = [c for c in result.expanded if c not in result.path]
    x, y = visited_only[0]
    assert tuple(image[y, x]) == COLORS["visited"]

    hidden = grid_to_image(grid, config=RenderConfig(draw_visited=False))
    assert tuple(hidden[y, x]) == COLORS["free"]


def test_scale_keeps_cell_colors():
    image = grid_to_image(_grid())
    scaled = scale_image(image, (60, 40))
    assert scaled.shape == (40, 60, 3)
    assert tuple(scaled[0, 0]) == COLORS["start"]
    assert tuple(scaled[15, 25]) == COLORS["obstacle"]
    original = {tuple(c) for c in image.reshape(-1, 3)}
    assert {tuple(c) for c in scaled.reshape(-1, 3)} <= original


def test_render_plan_writes_image(tmp_path):
    grid = _grid()
    result = DijkstraPlanner().search(grid)
    target = tmp_path / "planning" / "dijkstra.png"
    assert render_plan(grid, result, target)
    with Image.open(target) as saved:
        assert saved.size == DEFAULT_RENDER_CONFIG.output_size


def test_planning_blueprint():
    blueprint = setup_planning_blueprint(["dijkstra", "astar"])
    assert isinstance(blueprint, rr.blueprint.Blueprint)


def test_log_plan_accumulates_expanded_cells(monkeypatch):
    grid = _grid()
    result = DijkstraPlanner().search(grid)
    logged = []
    monkeypatch.setattr(rendering.rr, "set_time", lambda *args, **kwargs: None)
    monkeypatch.setattr(rendering.rr, "log", lambda entity, data, **kwargs: logged.append((entity, data)))
    monkeypatch.setattr(rendering.rr, "Points2D", lambda positions, **kwargs: np.asarray(positions))

    log_plan(grid, result)

    frames = [data for entity, data in logged if entity == "planning/dijkstra/expanded"]
    assert len(frames) == len(result.expanded)
    assert [len(points) for points in frames] == list(range(1, len(result.expanded) + 1))
    x, y = result.expanded[-1]
    assert tuple(frames[-1][-1]) == (x + 0.5, y + 0.5)
    assert any(entity == "planning/dijkstra/path" for entity, _ in logged)
