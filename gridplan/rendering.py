"""
Rendering of grids and planning results to images and to Rerun.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import cv2
import numpy as np
import rerun as rr

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .grid import CellType, OccupancyGrid
from .io_utils import save_image


def grid_to_image(
    grid: OccupancyGrid,
    path: Optional[List[Tuple[int, int]]] = None,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> np.ndarray:
    """
    Create a colored image of the grid.

    Visited and path cells come from the grid's annotation layer; an explicit
    ``path`` is drawn on top of them.

    Args:
        grid: Grid to draw
        path: Optional list of (x, y) cells to highlight
        config: Colors and drawing options

    Returns:
        Image array (height, width, 3) with uint8 dtype, row index = y
    """
    colors = config.colors
    # Work in [x, y] order, transpose at the end
    image = np.empty((grid.width, grid.height, 3), dtype=np.uint8)
    image[:] = colors["free"]
    image[grid.occupancy] = colors["obstacle"]

    if config.draw_visited:
        image[grid.annotations == CellType.ROBOT] = colors["visited"]
    image[grid.annotations == CellType.PATH] = colors["path"]

    for x, y in path or ():
        image[x, y] = colors["path"]

    image[grid.start] = colors["start"]
    image[grid.goal] = colors["goal"]
    return np.ascontiguousarray(image.transpose(1, 0, 2))


def scale_image(image: np.ndarray, size: Tuple[int, int]) -> np.ndarray:
    """
    Resize an image without blending neighbouring cells.

    Args:
        image: Image array (H, W) or (H, W, 3)
        size: Target (width, height) in pixels

    Returns:
        Resized image
    """
    return cv2.resize(image, tuple(int(s) for s in size), interpolation=cv2.INTER_NEAREST)


def render_plan(
    grid: OccupancyGrid,
    result,
    output_path: Path,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> bool:
    """
    Draw a planning result and save it as an image.

    Args:
        grid: Grid the result was planned on
        result: PlanResult
        output_path: Where to write the image
        config: Rendering options

    Returns:
        True if the image was written
    """
    image = grid_to_image(grid, result.path if result.found else None, config)
    if config.output_size:
        image = scale_image(image, config.output_size)
    return save_image(image, output_path)


def setup_planning_blueprint(names: Iterable[str] = ("dijkstra", "astar")):
    """
    Set up the blueprint for side-by-side planner views.

    Args:
        names: Planner names, one 2D view per planner under "planning/<name>"

    Returns:
        Blueprint configuration for Rerun viewer
    """
    views = [
        rr.blueprint.Spatial2DView(name=name, origin=f"planning/{name}")
        for name in names
    ]
    return rr.blueprint.Blueprint(
        rr.blueprint.Horizontal(*views),
        collapse_panels=False,
    )


def log_plan(grid: OccupancyGrid, result, entity_path: Optional[str] = None,
             config: RenderConfig = DEFAULT_RENDER_CONFIG):
    """
    Log the map, the expansion order and the path to Rerun.

    At each step of the "step" timeline the cells expanded so far are
    logged, so the search can be replayed in the viewer.

    Args:
        grid: Grid the result was planned on
        result: PlanResult
        entity_path: Root entity, defaults to "planning/<algorithm>"
        config: Colors
    """
    entity_path = entity_path or f"planning/{result.algorithm}"
    colors = config.colors

    rr.set_time("step", sequence=0)
    base = grid_to_image(grid, config=RenderConfig(draw_visited=False, colors=colors))
    rr.log(f"{entity_path}/map", rr.Image(base), static=True)

    # Cell centers in image coordinates
    centers = np.array(result.expanded, dtype=float).reshape(-1, 2) + 0.5
    for step in range(len(centers)):
        rr.set_time("step", sequence=step)
        rr.log(
            f"{entity_path}/expanded",
            rr.Points2D(
                positions=centers[:step + 1],
                colors=np.array([colors["visited"]], dtype=np.uint8),
                radii=np.array([0.4]),
            ),
        )

    if result.found:
        rr.set_time("step", sequence=len(result.expanded))
        strip = np.array(result.path, dtype=float) + 0.5
        rr.log(
            f"{entity_path}/path",
            rr.LineStrips2D(
                [strip],
                colors=np.array([colors["path"]], dtype=np.uint8),
                radii=np.array([0.25]),
            ),
        )
