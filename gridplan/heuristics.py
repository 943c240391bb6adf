"""
Distance-to-goal estimates for A*.

Every heuristic here is admissible and consistent for the 8-connected
motion table (unit axis moves, sqrt(2) diagonal moves). For a cell next to
the goal, euclidean and octile both return exactly the cost of the move,
which keeps A* optimal despite stopping at the first goal-adjacent cell.
With zero the search finalizes cells in Dijkstra order, so the reported
cost may exceed the optimum by up to sqrt(2) - 1.
"""

import math
from typing import Callable, Dict, Tuple

from .motions import SQRT2

Coord = Tuple[int, int]


def euclidean(a: Coord, b: Coord) -> float:
    """Straight-line distance."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def octile(a: Coord, b: Coord) -> float:
    """Exact distance on an obstacle-free 8-connected grid."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + (SQRT2 - 1.0) * min(dx, dy)


def zero(a: Coord, b: Coord) -> float:
    """No estimate; A* then expands cells in Dijkstra order and shares its
    sqrt(2) - 1 bound on the goal-adjacent stop."""
    return 0.0


HEURISTICS: Dict[str, Callable[[Coord, Coord], float]] = {
    "euclidean": euclidean,
    "octile": octile,
    "zero": zero,
}


def get_heuristic(name: str) -> Callable[[Coord, Coord], float]:
    """
    Look up a heuristic by name.

    Raises:
        ValueError: If the name is not registered
    """
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown heuristic '{name}', expected one of {sorted(HEURISTICS)}"
        ) from None
