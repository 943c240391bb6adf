"""
Path reconstruction and path checks.
"""

from typing import List, Optional, Tuple

from .grid import CellType
from .motions import motion_between
from .nodes import NodeArena

Coord = Tuple[int, int]


def reconstruct_path(arena: NodeArena, node_id: Optional[int]) -> List[Coord]:
    """
    Walk predecessor links from a terminal node back to the start.

    Args:
        arena: Node store of the finished search
        node_id: Id of the terminal (goal) node, or None if the goal was not found

    Returns:
        List of (x, y) cells ordered from start to goal, empty if node_id is None
    """
    path = []
    while node_id is not None:
        path.append(arena.coordinates(node_id))
        node_id = arena.parent(node_id)
    path.reverse()
    return path


def path_cost(path: List[Coord]) -> float:
    """
    Sum the motion costs along a path.

    Raises:
        ValueError: If two consecutive cells are not 8-neighbours
    """
    total = 0.0
    for a, b in zip(path, path[1:]):
        motion = motion_between(a, b)
        if motion is None:
            raise ValueError(f"No motion leads from {a} to {b}")
        total += motion.cost
    return total


def is_valid_path(grid, path: List[Coord]) -> bool:
    """Check that every step is one motion and no cell is an obstacle."""
    if not path:
        return False
    if any(grid.classify(x, y) == CellType.OBSTACLE for x, y in path):
        return False
    return all(motion_between(a, b) is not None for a, b in zip(path, path[1:]))
