# src/config.py
from dataclasses import dataclass
from typing import Optional

# Defaults, in map units (pixels)
STEP = 16                  # Lattice tile size
SMALL_STEP_RANGE = 64      # Use half-size steps until this far from the origin
RANGE = 32                 # "Close enough" radius around the target
MAX_SEGMENT = 128          # Longest segment the simplifier will produce
OFFMAP_ESTIMATE = 10000    # Heuristic penalty for a position on another map
YIELD_INTERVAL = 0.010     # [s] Longest run of expansions between yields


@dataclass
class PathfindConfig:
    step: float = STEP
    small_step_range: float = SMALL_STEP_RANGE
    close_enough_range: float = RANGE
    max_segment: float = MAX_SEGMENT
    offmap_estimate: float = OFFMAP_ESTIMATE
    yield_interval: float = YIELD_INTERVAL

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.close_enough_range <= 0:
            raise ValueError(f"close_enough_range must be positive, got {self.close_enough_range}")
        if self.max_segment <= 0:
            raise ValueError(f"max_segment must be positive, got {self.max_segment}")
        if self.yield_interval <= 0:
            raise ValueError(f"yield_interval must be positive, got {self.yield_interval}")

    @property
    def small_step(self) -> float:
        return self.step / 2


@dataclass
class PathfindOptions:
    """
    Per-call options.
    :param max_distance: ignore expansions whose cumulative cost exceeds this (None = unbounded)
    :param exact: require the final waypoint to be the target itself
    :param simplify: run the greedy shortcut pass on the result
    """
    max_distance: Optional[float] = None
    exact: bool = False
    simplify: bool = True
