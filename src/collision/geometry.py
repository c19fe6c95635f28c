# src/collision/geometry.py
import math
from typing import Tuple

import numpy as np

Rect = Tuple[float, float, float, float]  # (x_min, y_min, x_max, y_max)


def normalize_rect(rect: Rect) -> Rect:
    """Reorder corners so that min <= max on both axes."""
    x0, y0, x1, y1 = rect
    return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))


def point_in_rect(x: float, y: float, rect: Rect, strict: bool = False) -> bool:
    """点是否在矩形内 (strict=True 时不含边界)"""
    x_min, y_min, x_max, y_max = rect
    if strict:
        return x_min < x < x_max and y_min < y < y_max
    return x_min <= x <= x_max and y_min <= y <= y_max


def segment_intersects_rect(x1: float, y1: float, x2: float, y2: float, rect: Rect) -> bool:
    """
    Liang-Barsky clipping: does the closed segment (x1, y1)-(x2, y2) touch the
    closed rectangle?
    """
    x_min, y_min, x_max, y_max = rect
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0

    for p, q in ((-dx, x1 - x_min), (dx, x_max - x1),
                 (-dy, y1 - y_min), (dy, y_max - y1)):
        if p == 0:
            # Parallel to this edge: outside means no hit
            if q < 0:
                return False
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return False
            t0 = max(t0, t)
        else:
            if t < t0:
                return False
            t1 = min(t1, t)
    return t0 <= t1


def sample_segment(x1: float, y1: float, x2: float, y2: float, spacing: float) -> np.ndarray:
    """
    沿线段等距采样 (含两端点)
    :return: (N, 2) 数组
    """
    length = math.hypot(x2 - x1, y2 - y1)
    n = max(2, int(math.ceil(length / spacing)) + 1)
    t = np.linspace(0.0, 1.0, n)
    xs = x1 + (x2 - x1) * t
    ys = y1 + (y2 - y1) * t
    return np.column_stack((xs, ys))
