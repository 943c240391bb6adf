"""
Search node storage.

Nodes created during one planning call live in a ``NodeArena`` and refer to
their predecessor by integer id, so path reconstruction walks ids and the
whole set is released at once when the call returns.
"""

from collections import namedtuple
from typing import List, Optional, Tuple

SearchNode = namedtuple("SearchNode", ["x", "y", "cost", "parent"])

NO_PARENT = -1


class NodeArena:
    """Append-only node store addressed by integer id."""

    def __init__(self):
        self._xs: List[int] = []
        self._ys: List[int] = []
        self._costs: List[float] = []
        self._parents: List[int] = []

    def add(self, x: int, y: int, cost: float, parent: Optional[int] = None) -> int:
        """
        Store a new node.

        Args:
            x: Cell x coordinate
            y: Cell y coordinate
            cost: Accumulated path cost from the start
            parent: Id of the predecessor node, or None for the start

        Returns:
            Id of the new node
        """
        if parent is not None and not 0 <= parent < len(self._xs):
            raise IndexError(f"Unknown parent node id: {parent}")
        self._xs.append(int(x))
        self._ys.append(int(y))
        self._costs.append(float(cost))
        self._parents.append(NO_PARENT if parent is None else parent)
        return len(self._xs) - 1

    def coordinates(self, node_id: int) -> Tuple[int, int]:
        return self._xs[node_id], self._ys[node_id]

    def cost(self, node_id: int) -> float:
        return self._costs[node_id]

    def parent(self, node_id: int) -> Optional[int]:
        parent = self._parents[node_id]
        return None if parent == NO_PARENT else parent

    def clear(self):
        """Release every node."""
        self._xs.clear()
        self._ys.clear()
        self._costs.clear()
        self._parents.clear()

    def __getitem__(self, node_id: int) -> SearchNode:
        return SearchNode(
            self._xs[node_id],
            self._ys[node_id],
            self._costs[node_id],
            self.parent(node_id),
        )

    def __len__(self) -> int:
        return len(self._xs)
