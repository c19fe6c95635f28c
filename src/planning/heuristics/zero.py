# src/planning/heuristics/zero.py
from src.types import Position
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    h = 0: uniform-cost (Dijkstra) expansion.
    Useful as a baseline when measuring how much the Euclidean estimate prunes.
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return 0.0
