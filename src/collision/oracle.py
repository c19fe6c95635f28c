# src/collision/oracle.py
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Callable, Dict, Hashable, Iterable, Optional, Tuple

from src.collision.geometry import Rect, normalize_rect, point_in_rect, segment_intersects_rect

if TYPE_CHECKING:
    from src.map.grid_map import GridMap


class CollisionOracle(ABC):
    """
    碰撞预言机接口
    由宿主环境提供：判断同一地图上两点之间能否直线无阻碍移动。
    """

    @abstractmethod
    def can_move(self, map_id: Hashable, from_x: float, from_y: float, to_x: float, to_y: float) -> bool:
        """True 表示可以直线移动 (无碰撞)"""
        pass


class FunctionOracle(CollisionOracle):
    """Wrap a plain callable with the can_move signature."""

    def __init__(self, fn: Callable[[Hashable, float, float, float, float], bool]):
        self.fn = fn

    def can_move(self, map_id, from_x, from_y, to_x, to_y) -> bool:
        return bool(self.fn(map_id, from_x, from_y, to_x, to_y))


class OpenPlaneOracle(CollisionOracle):
    """
    No obstacles. If bounds are given, moves ending outside them are blocked,
    which keeps the reachable lattice finite.
    """

    def __init__(self, bounds: Optional[Rect] = None):
        self.bounds = normalize_rect(bounds) if bounds is not None else None

    def can_move(self, map_id, from_x, from_y, to_x, to_y) -> bool:
        if self.bounds is not None and not point_in_rect(to_x, to_y, self.bounds):
            return False
        return True


class RectangleOracle(OpenPlaneOracle):
    """
    Axis-aligned rectangular obstacles, keyed by map.
    A move is blocked when the segment touches any rectangle (boundary included).
    """

    def __init__(self,
                 obstacles: Dict[Hashable, Iterable[Rect]],
                 bounds: Optional[Rect] = None):
        super().__init__(bounds)
        self.obstacles = {map_id: [normalize_rect(r) for r in rects]
                          for map_id, rects in obstacles.items()}

    def can_move(self, map_id, from_x, from_y, to_x, to_y) -> bool:
        if not super().can_move(map_id, from_x, from_y, to_x, to_y):
            return False
        for rect in self.obstacles.get(map_id, ()):
            if segment_intersects_rect(from_x, from_y, to_x, to_y, rect):
                return False
        return True


class GridMapOracle(CollisionOracle):
    """Occupancy-raster backed oracle. Unknown maps are treated as unwalkable."""

    def __init__(self, grid_maps: Iterable["GridMap"]):
        self.grid_maps = {gm.map_id: gm for gm in grid_maps}

    def can_move(self, map_id, from_x, from_y, to_x, to_y) -> bool:
        grid_map = self.grid_maps.get(map_id)
        if grid_map is None:
            return False
        return grid_map.segment_is_free(from_x, from_y, to_x, to_y)


class CachedOracle(CollisionOracle):
    """Memoize answers of another oracle. Only valid while map geometry is static."""

    def __init__(self, inner: CollisionOracle):
        self.inner = inner
        self._cache: Dict[Tuple, bool] = {}
        self.hits = 0
        self.misses = 0

    def can_move(self, map_id, from_x, from_y, to_x, to_y) -> bool:
        key = (map_id, from_x, from_y, to_x, to_y)
        if key in self._cache:
            self.hits += 1
            return self._cache[key]
        self.misses += 1
        result = self.inner.can_move(map_id, from_x, from_y, to_x, to_y)
        self._cache[key] = result
        return result

    def clear(self):
        self._cache.clear()
