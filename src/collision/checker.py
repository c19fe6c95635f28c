# src/collision/checker.py
from src.types import Position
from .oracle import CollisionOracle


class CollisionChecker:
    """
    Position-level front end to a CollisionOracle.
    Moves between maps are never possible and never reach the oracle.
    """

    def __init__(self, oracle: CollisionOracle):
        if oracle is None:
            raise ValueError("CollisionChecker requires an oracle")
        self.oracle = oracle
        self.query_count = 0

    def can_move(self, here: Position, there: Position) -> bool:
        """
        统一入口：能否从 here 直线移动到 there
        :return: True 表示无阻碍
        """
        if here.map_id != there.map_id:
            return False

        self.query_count += 1
        return self.oracle.can_move(here.map_id, here.x, here.y, there.x, there.y)

    def reset_stats(self):
        """清零查询计数 (实验中每个变体之间调用)"""
        self.query_count = 0
