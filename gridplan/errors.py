"""
Exceptions raised by the planning core and its grid collaborators.
"""


class PlanningError(Exception):
    """Base class for all planning errors."""


class GridError(PlanningError, ValueError):
    """Raised when a grid is malformed (bad extents, out-of-range obstacles)."""


class InvalidCoordinatesError(PlanningError, ValueError):
    """Raised when the start or goal cell cannot be planned from or to."""


class FrontierEmptyError(PlanningError, IndexError):
    """Raised when popping from an empty frontier."""
