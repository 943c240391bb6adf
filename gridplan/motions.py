"""
Motion table shared by every grid planner.
"""

import math
from collections import namedtuple
from typing import Optional, Tuple

Motion = namedtuple("Motion", ["dx", "dy", "cost"])

SQRT2 = math.sqrt(2.0)

# Axis-aligned moves first, then diagonals. This order is also the
# tie-break order when the goal is adjacent to an expanded cell.
MOTIONS = (
    Motion(1, 0, 1.0),
    Motion(0, 1, 1.0),
    Motion(0, -1, 1.0),
    Motion(-1, 0, 1.0),
    Motion(1, 1, SQRT2),
    Motion(1, -1, SQRT2),
    Motion(-1, -1, SQRT2),
    Motion(-1, 1, SQRT2),
)


def motion_between(a: Tuple[int, int], b: Tuple[int, int]) -> Optional[Motion]:
    """
    Find the motion that takes cell ``a`` to cell ``b``.

    Args:
        a: Source cell (x, y)
        b: Destination cell (x, y)

    Returns:
        The matching Motion, or None if the cells are not 8-neighbours
    """
    dx, dy = b[0] - a[0], b[1] - a[1]
    for motion in MOTIONS:
        if motion.dx == dx and motion.dy == dy:
            return motion
    return None
