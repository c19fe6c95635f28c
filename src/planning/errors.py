# src/planning/errors.py


class PathfindError(Exception):
    """Raised when pathfinding fails."""


class UnsupportedError(PathfindError):
    """Origin and target are on different maps."""


class NoPathError(PathfindError):
    """The frontier ran out before the goal test was satisfied."""
