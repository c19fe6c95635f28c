# src/map/grid_map.py
import math
from typing import Hashable, Tuple

import numpy as np

from src.collision.geometry import Rect, normalize_rect, sample_segment


class GridMap:
    """
    Occupancy raster of one game map.
    约定：0 表示空闲，1 表示障碍物。越界视为障碍。
    """

    def __init__(self,
                 width: int,
                 height: int,
                 resolution: float = 8.0,
                 origin: Tuple[float, float] = (0.0, 0.0),
                 map_id: Hashable = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        if resolution <= 0:
            raise ValueError(f"resolution must be positive, got {resolution}")
        self._width = width
        self._height = height
        self._resolution = resolution
        self._origin = (float(origin[0]), float(origin[1]))
        self.map_id = map_id
        self._grid = np.zeros((height, width), dtype=np.int8)

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def resolution(self) -> float:
        return self._resolution

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def origin(self) -> Tuple[float, float]:
        return self._origin

    @property
    def extent(self) -> Rect:
        """物理范围 (x_min, y_min, x_max, y_max)"""
        ox, oy = self._origin
        return (ox, oy, ox + self._width * self._resolution, oy + self._height * self._resolution)

    def world_to_grid(self, x: float, y: float) -> Tuple[int, int]:
        """
        物理坐标 -> 栅格索引
        向下取整：floor((x - origin) / res)
        """
        x_idx = int(math.floor((x - self._origin[0]) / self._resolution))
        y_idx = int(math.floor((y - self._origin[1]) / self._resolution))
        return x_idx, y_idx

    def grid_to_world(self, x_idx: int, y_idx: int) -> Tuple[float, float]:
        """
        栅格索引 -> 物理坐标 (格子中心)
        """
        x = self._origin[0] + x_idx * self._resolution + self._resolution / 2.0
        y = self._origin[1] + y_idx * self._resolution + self._resolution / 2.0
        return x, y

    def is_inside(self, x: float, y: float) -> bool:
        xi, yi = self.world_to_grid(x, y)
        return self._is_valid_index(xi, yi)

    def _is_valid_index(self, x_idx: int, y_idx: int) -> bool:
        return (0 <= x_idx < self._width) and (0 <= y_idx < self._height)

    def is_obstacle(self, x_idx: int, y_idx: int) -> bool:
        if not self._is_valid_index(x_idx, y_idx):
            return True
        return self._grid[y_idx, x_idx] == 1

    def is_obstacle_at_point(self, x: float, y: float) -> bool:
        ix, iy = self.world_to_grid(x, y)
        return self.is_obstacle(ix, iy)

    def add_rectangle(self, rect: Rect):
        """Mark every cell overlapping the rectangle as occupied."""
        x_min, y_min, x_max, y_max = normalize_rect(rect)
        ix0, iy0 = self.world_to_grid(x_min, y_min)
        ix1, iy1 = self.world_to_grid(x_max, y_max)
        ix0, iy0 = max(ix0, 0), max(iy0, 0)
        ix1, iy1 = min(ix1, self._width - 1), min(iy1, self._height - 1)
        if ix0 > ix1 or iy0 > iy1:
            return
        self._grid[iy0:iy1 + 1, ix0:ix1 + 1] = 1

    def clear_circle(self, x: float, y: float, radius: float):
        """Free every cell whose centre lies within radius of (x, y)."""
        ys, xs = np.mgrid[0:self._height, 0:self._width]
        cx = self._origin[0] + (xs + 0.5) * self._resolution
        cy = self._origin[1] + (ys + 0.5) * self._resolution
        mask = (cx - x) ** 2 + (cy - y) ** 2 <= radius ** 2
        self._grid[mask] = 0

    def segment_is_free(self, x1: float, y1: float, x2: float, y2: float) -> bool:
        """
        Sample the segment at half-cell spacing and check every sample.
        Samples outside the raster count as occupied.
        """
        points = sample_segment(x1, y1, x2, y2, self._resolution / 2.0)
        ix = np.floor((points[:, 0] - self._origin[0]) / self._resolution).astype(int)
        iy = np.floor((points[:, 1] - self._origin[1]) / self._resolution).astype(int)

        inside = (ix >= 0) & (ix < self._width) & (iy >= 0) & (iy < self._height)
        if not np.all(inside):
            return False
        return not np.any(self._grid[iy, ix] == 1)
