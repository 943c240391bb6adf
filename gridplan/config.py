"""
Configuration utilities and default settings.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class PlannerConfig:
    """Configuration for the search engine."""
    algorithm: str = "astar"  # "dijkstra" or "astar"
    heuristic: Optional[str] = None  # A* only; None uses the grid's heuristic
    annotate: bool = True  # emit mark_visited / mark_path on the grid


@dataclass
class MapConfig:
    """Layout of the sample map used by the demo."""
    width: int = 50
    height: int = 50
    start: Tuple[int, int] = (5, 5)
    goal: Tuple[int, int] = (45, 45)
    border: bool = True
    # (y, x_min, x_max) horizontal walls, inclusive
    walls: Tuple[Tuple[int, int, int], ...] = ((15, 0, 25), (35, 25, 49))


@dataclass
class RenderConfig:
    """Configuration for map images."""
    output_size: Tuple[int, int] = (200, 200)  # (width, height) in pixels
    draw_visited: bool = True
    colors: Dict[str, Tuple[int, int, int]] = field(default_factory=lambda: {
        "free": (255, 255, 255),
        "obstacle": (0, 0, 0),
        "visited": (170, 200, 255),
        "path": (0, 160, 0),
        "start": (0, 0, 255),
        "goal": (255, 0, 0),
    })


# Default configurations
DEFAULT_PLANNER_CONFIG = PlannerConfig()
DEFAULT_MAP_CONFIG = MapConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()


def get_output_dir(base_dir: Path, map_name: Optional[str] = None) -> Path:
    """
    Get standardized output directory path.

    Args:
        base_dir: Base output directory
        map_name: Optional map name for subdirectory

    Returns:
        Path to output directory
    """
    if map_name:
        return base_dir / "planning" / map_name
    return base_dir / "planning"


def get_image_path(output_dir: Path, algorithm: str) -> Path:
    """Get the image path for one algorithm's result."""
    return output_dir / f"{algorithm}.png"


def get_result_path(output_dir: Path, algorithm: str) -> Path:
    """Get the JSON path for one algorithm's result."""
    return output_dir / f"{algorithm}.json"
