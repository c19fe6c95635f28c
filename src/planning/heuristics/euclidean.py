# src/planning/heuristics/euclidean.py
from src.config import OFFMAP_ESTIMATE
from src.types import Position
from .base import Heuristic

class EuclideanHeuristic(Heuristic):
    """
    欧氏距离启发式
    同一地图上不会高估真实代价 (Admissible)。
    跨地图时额外加上固定惩罚，搜索本身不会跨地图扩展。
    """
    def __init__(self, offmap_estimate: float = OFFMAP_ESTIMATE):
        self.offmap_estimate = offmap_estimate

    def estimate(self, current: Position, goal: Position) -> float:
        h = current.distance_to(goal)
        if current.map_id != goal.map_id:
            h += self.offmap_estimate
        return h
