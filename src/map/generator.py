# src/map/generator.py
from typing import List, Optional, Sequence

import numpy as np

from src.collision.geometry import Rect, point_in_rect
from src.map.grid_map import GridMap
from src.types import Position


class MapGenerator:
    """
    随机地图生成器
    在地图范围内撒下轴对齐矩形障碍物，并保证指定的关键点 (起点/终点) 周围是空闲的。
    """

    def __init__(self,
                 obstacle_density: float = 0.1,
                 min_size: float = 16.0,
                 max_size: float = 64.0,
                 clear_radius: float = 24.0,
                 seed: Optional[int] = None):
        if not 0.0 <= obstacle_density < 1.0:
            raise ValueError(f"obstacle_density must be in [0, 1), got {obstacle_density}")
        if min_size <= 0 or max_size < min_size:
            raise ValueError(f"Invalid obstacle size range [{min_size}, {max_size}]")
        self.density = obstacle_density
        self.min_size = min_size
        self.max_size = max_size
        self.clear_radius = clear_radius
        self.rng = np.random.default_rng(seed)

    def generate_rects(self, extent: Rect, keep_clear: Sequence[Position] = ()) -> List[Rect]:
        """
        Scatter rectangles until their summed area reaches density * map area.
        Rectangles that would cover a keep-clear point (grown by clear_radius) are
        rejected.
        """
        x_min, y_min, x_max, y_max = extent
        target_area = self.density * (x_max - x_min) * (y_max - y_min)
        rects: List[Rect] = []
        area = 0.0
        attempts = 0
        max_attempts = 1000

        while area < target_area and attempts < max_attempts:
            attempts += 1
            w, h = self.rng.uniform(self.min_size, self.max_size, size=2)
            x0 = self.rng.uniform(x_min, x_max - w)
            y0 = self.rng.uniform(y_min, y_max - h)
            rect = (float(x0), float(y0), float(x0 + w), float(y0 + h))

            grown = (rect[0] - self.clear_radius, rect[1] - self.clear_radius,
                     rect[2] + self.clear_radius, rect[3] + self.clear_radius)
            if any(point_in_rect(p.x, p.y, grown) for p in keep_clear):
                continue

            rects.append(rect)
            area += w * h

        return rects

    def generate(self, grid_map: GridMap, keep_clear: Sequence[Position] = ()) -> List[Rect]:
        """Rasterise random rectangles into grid_map and return them."""
        rects = self.generate_rects(grid_map.extent, keep_clear)
        for rect in rects:
            grid_map.add_rectangle(rect)
        for p in keep_clear:
            grid_map.clear_circle(p.x, p.y, self.clear_radius)
        return rects
