# src/types.py
import math
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Tuple


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


@dataclass(frozen=True, eq=False)
class Position:
    """
    单张地图上的连续坐标
    坐标四舍五入到整数后相同 (且在同一地图上) 的两个位置视为同一个搜索节点。
    """
    x: float
    y: float
    map_id: Hashable = None

    @property
    def key(self) -> Tuple[int, int, Hashable]:
        return (_round_half_up(self.x), _round_half_up(self.y), self.map_id)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def distance_to(self, other: "Position") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def same_map(self, other: "Position") -> bool:
        return self.map_id == other.map_id

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self):
        # 支持 `x, y, map_id = position` 解包
        return iter((self.x, self.y, self.map_id))


@dataclass
class Node:
    """搜索表条目：最优代价与回溯指针"""
    position: Position
    cost: float
    parent: Optional[Position] = None
    settled: bool = False


Path = List[Position]


def path_length(path: Path) -> float:
    """路径各直线段长度之和"""
    if not path or len(path) < 2:
        return 0.0
    length = 0.0
    for i in range(len(path) - 1):
        length += path[i].distance_to(path[i + 1])
    return length


def to_position(location, default_map: Hashable = None) -> Position:
    """
    将目标描述转换为 Position
    支持 Position、(x, y) 或 (x, y, map_id)；缺省的 map_id 取 default_map。
    :raises TypeError: 无法识别的输入
    """
    if isinstance(location, Position):
        if location.map_id is None and default_map is not None:
            return Position(location.x, location.y, default_map)
        return location
    if isinstance(location, (tuple, list)):
        if len(location) == 2:
            return Position(float(location[0]), float(location[1]), default_map)
        if len(location) == 3:
            map_id = location[2] if location[2] is not None else default_map
            return Position(float(location[0]), float(location[1]), map_id)
    raise TypeError(f"Cannot interpret {location!r} as a position")
