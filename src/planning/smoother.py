# src/planning/smoother.py
from typing import List

from src.collision import CollisionChecker
from src.config import MAX_SEGMENT
from src.types import Position


class GreedyShortcutSmoother:
    """
    贪心捷径简化器

    从路径头部开始，对每个保留点尽量向前看：只要下一个点距离小于
    max_segment 且可直线到达，就继续延伸，最后保留最远的合格点。
    结果是原路径的子序列，首尾不变，但不保证是最短的子序列。
    """
    def __init__(self, collision_checker: CollisionChecker, max_segment: float = MAX_SEGMENT):
        self.collision_checker = collision_checker
        self.max_segment = max_segment

    def simplify(self, path: List[Position]) -> List[Position]:
        new_path: List[Position] = []

        i = 0
        while i < len(path):
            new_path.append(path[i])

            # i + 1 在搜索时已确认可达
            j = i + 2
            while j < len(path) and self._can_shortcut(path[i], path[j]):
                j += 1
            i = j - 1

        return new_path

    def _can_shortcut(self, here: Position, there: Position) -> bool:
        return (here.distance_to(there) < self.max_segment
                and self.collision_checker.can_move(here, there))
