# src/planning/neighbors.py
import math
from typing import List

from src.collision import CollisionChecker
from src.config import PathfindConfig
from src.types import Position

# 8-连通方向 (dx, dy)，单位为 step
MOTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def quantize(value: float, step: float) -> float:
    """Snap value to the nearest multiple of step (halves round up)."""
    return math.floor(value / step + 0.5) * step


def select_step(cost_so_far: float, config: PathfindConfig) -> float:
    """
    Adaptive resolution: half-size tiles close to the origin, where the
    character is often squeezed against an obstacle.
    """
    if cost_so_far < config.small_step_range:
        return config.small_step
    return config.step


def neighbours(position: Position, step: float, checker: CollisionChecker) -> List[Position]:
    """
    Lattice points around the quantized position that are reachable in a
    straight line from the (unquantized) position.
    """
    qx = quantize(position.x, step)
    qy = quantize(position.y, step)

    points = []
    for dx, dy in MOTIONS:
        candidate = Position(qx + dx * step, qy + dy * step, position.map_id)
        if checker.can_move(position, candidate):
            points.append(candidate)
    return points
