# src/planning/heuristics/base.py
from abc import ABC, abstractmethod
from src.types import Position

class Heuristic(ABC):
    """
    Remaining-cost estimate used to order the frontier.
    Must not exceed the true travel cost for same-map goals, otherwise A*
    loses its optimality on the sampled lattice.
    """
    @abstractmethod
    def estimate(self, current: Position, goal: Position) -> float:
        pass
