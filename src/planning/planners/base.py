# src/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from src.config import PathfindOptions
from src.planning.interfaces import IPlannerObserver
from src.types import Position


class PlannerBase(ABC):
    """
    所有路径规划器的抽象基类
    """

    @abstractmethod
    def find_path(self,
                  origin: Position,
                  target: Position,
                  options: Optional[PathfindOptions] = None,
                  observer: Optional[IPlannerObserver] = None) -> List[Position]:
        """
        执行路径规划
        :param origin: 起点 (调用时刻的角色位置)
        :param target: 目标位置
        :param options: 搜索选项
        :param observer: 观察者钩子 (用于记录/可视化搜索过程)
        :return: 路径点列表，起点在前
        :raises PathfindError: 无法规划时抛出
        """
        pass
