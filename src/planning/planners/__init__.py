# src/planning/planners/__init__.py

from .base import PlannerBase
from .a_star import AStarPathfinder, PathfindSearch


__all__ = [
    "PlannerBase",
    "AStarPathfinder",
    "PathfindSearch",
]
