"""
Priority frontier with lazy deletion.
"""

from heapq import heappush, heappop
from itertools import count
from typing import List, Tuple

from .errors import FrontierEmptyError


class Frontier:
    """
    Min-heap of node ids keyed by ascending priority.

    The same cell may be present several times with different priorities.
    Stale entries are not removed here; the caller discards them on pop by
    checking its visited table. Equal priorities pop in insertion order.
    """

    def __init__(self):
        self._heap: List[Tuple[float, int, int]] = []
        self._counter = count()

    def push(self, priority: float, node_id: int):
        heappush(self._heap, (priority, next(self._counter), node_id))

    def pop(self) -> int:
        """
        Remove and return the node id with the lowest priority.

        Raises:
            FrontierEmptyError: If the frontier holds no entries
        """
        if not self._heap:
            raise FrontierEmptyError("pop from an empty frontier")
        _, _, node_id = heappop(self._heap)
        return node_id

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
