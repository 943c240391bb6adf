"""
Grid path planning with Dijkstra and A* for mobile-robot navigation.
"""

from .errors import (
    PlanningError,
    GridError,
    InvalidCoordinatesError,
    FrontierEmptyError
)
from .motions import Motion, MOTIONS, motion_between
from .nodes import NodeArena, SearchNode
from .frontier import Frontier
from .heuristics import euclidean, octile, zero, get_heuristic, HEURISTICS
from .grid import CellType, GridQuery, OccupancyGrid
from .paths import reconstruct_path, path_cost, is_valid_path
from .planners import (
    PlanResult,
    GridPlanner,
    DijkstraPlanner,
    AStarPlanner,
    PLANNERS,
    get_planner,
    make_planner
)
from .maps import build_sample_map, random_map, grid_from_occupancy
from .config import (
    PlannerConfig,
    MapConfig,
    RenderConfig,
    DEFAULT_PLANNER_CONFIG,
    DEFAULT_MAP_CONFIG,
    DEFAULT_RENDER_CONFIG,
    get_output_dir,
    get_image_path,
    get_result_path
)
from .io_utils import (
    load_json,
    save_json,
    save_image,
    load_grid,
    save_grid,
    save_plan_result
)

__version__ = "0.1.0"

__all__ = [
    # Errors
    'PlanningError',
    'GridError',
    'InvalidCoordinatesError',
    'FrontierEmptyError',
    # Search core
    'Motion',
    'MOTIONS',
    'motion_between',
    'NodeArena',
    'SearchNode',
    'Frontier',
    'PlanResult',
    'GridPlanner',
    'DijkstraPlanner',
    'AStarPlanner',
    'PLANNERS',
    'get_planner',
    'make_planner',
    # Paths
    'reconstruct_path',
    'path_cost',
    'is_valid_path',
    # Grid
    'CellType',
    'GridQuery',
    'OccupancyGrid',
    'euclidean',
    'octile',
    'zero',
    'get_heuristic',
    'HEURISTICS',
    'build_sample_map',
    'random_map',
    'grid_from_occupancy',
    # Config
    'PlannerConfig',
    'MapConfig',
    'RenderConfig',
    'DEFAULT_PLANNER_CONFIG',
    'DEFAULT_MAP_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    'get_output_dir',
    'get_image_path',
    'get_result_path',
    # IO utilities
    'load_json',
    'save_json',
    'save_image',
    'load_grid',
    'save_grid',
    'save_plan_result',
]
