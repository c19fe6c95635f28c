# src/simulation/navigator.py
import logging
from typing import Callable, Dict, Hashable, List, Optional

from src.config import PathfindOptions
from src.planning.errors import NoPathError, PathfindError
from src.planning.planners.base import PlannerBase
from src.types import Position, path_length, to_position

logger = logging.getLogger(__name__)


def movement_time(distance: float, speed: float) -> float:
    """以 speed (单位/秒) 走完 distance 所需的毫秒数"""
    if speed <= 0:
        raise ValueError(f"speed must be positive, got {speed}")
    return distance / speed * 1000


class Navigator:
    """
    调用方侧的导航封装

    工作流程：
    1. 解析目标 (Position、坐标元组或已注册的地点名)。
    2. 调用规划器得到路径。
    3. 通过宿主提供的 move 回调逐个走向路点。
    4. 移动被打断时，从最后到达的路点重新规划。
    """
    def __init__(self,
                 planner: PlannerBase,
                 locations: Optional[Dict[str, Position]] = None,
                 max_replans: int = 3):
        self.planner = planner
        self.locations: Dict[str, Position] = dict(locations or {})
        self.max_replans = max_replans

        # 运行时状态
        self.current: Optional[Position] = None
        self.path: List[Position] = []
        self.navigated_path: List[Position] = []
        self.replan_count = 0

    def register(self, name: str, position: Position):
        self.locations[name] = position

    def resolve(self, location, current_map: Hashable = None) -> Position:
        """
        地点名从注册表中查找，其他输入按坐标描述解析到 current_map 上
        :raises KeyError: 未知的地点名
        """
        if isinstance(location, str):
            if location not in self.locations:
                raise KeyError(f"Unknown location {location!r}")
            return self.locations[location]
        return to_position(location, current_map)

    def plan(self, origin: Position, location, options: Optional[PathfindOptions] = None) -> List[Position]:
        target = self.resolve(location, origin.map_id)
        return self.planner.find_path(origin, target, options)

    def navigate(self,
                 origin: Position,
                 location,
                 move: Callable[[Position], bool],
                 options: Optional[PathfindOptions] = None,
                 max_replans: Optional[int] = None) -> List[Position]:
        """
        沿规划路径逐点移动
        :param move: 宿主移动原语；移动被打断时返回 False
        :param max_replans: 本次导航允许的重规划次数，None 表示使用构造时的值
        :return: 实际到达的路点 (含起点)
        :raises NoPathError: 重规划次数用尽
        """
        if max_replans is None:
            max_replans = self.max_replans

        target = self.resolve(location, origin.map_id)
        self.current = origin
        self.navigated_path = [origin]
        self.replan_count = 0

        self.path = self._plan_from(self.current, target, options)
        while self.path:
            waypoint = self.path.pop(0)
            # 按精确坐标比较：exact 终点可能与最后一个格点同 key
            if waypoint.as_tuple() == self.current.as_tuple():
                continue

            if move(waypoint):
                self.current = waypoint
                self.navigated_path.append(waypoint)
                continue

            logger.info(f"Move to {waypoint} interrupted at {self.current}, replanning")
            if self.replan_count >= max_replans:
                raise NoPathError(f"Gave up on {target} after {self.replan_count} replans")
            self.replan_count += 1
            self.path = self._plan_from(self.current, target, options)

        logger.info(f"Arrived at {self.current} ({path_length(self.navigated_path):.1f} travelled, "
                    f"{self.replan_count} replans)")
        return self.navigated_path

    def _plan_from(self, origin: Position, target: Position, options: Optional[PathfindOptions]) -> List[Position]:
        try:
            return self.planner.find_path(origin, target, options)
        except PathfindError as e:
            logger.warning(f"Planning from {origin} to {target} failed: {e}")
            raise
