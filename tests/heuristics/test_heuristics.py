import math

import pytest

from src.config import OFFMAP_ESTIMATE
from src.planning.heuristics import EuclideanHeuristic, ZeroHeuristic
from src.types import Position


def test_euclidean_same_map():
    h = EuclideanHeuristic()
    assert h.estimate(Position(0, 0, "M"), Position(3, 4, "M")) == pytest.approx(5.0)
    assert h.estimate(Position(7, 7, "M"), Position(7, 7, "M")) == 0.0


def test_euclidean_offmap_penalty():
    h = EuclideanHeuristic()
    assert h.estimate(Position(0, 0, "A"), Position(3, 4, "B")) == pytest.approx(5.0 + OFFMAP_ESTIMATE)

    custom = EuclideanHeuristic(offmap_estimate=50)
    assert custom.estimate(Position(0, 0, "A"), Position(0, 0, "B")) == 50


@pytest.mark.parametrize("points", [
    [(0, 0), (10, 0), (10, 10)],
    [(0, 0), (16, 16), (32, 16), (48, 0), (300, 0)],
    [(5.5, -3.2), (-40, 12), (80, 80)],
])
def test_euclidean_never_exceeds_polyline_length(points):
    h = EuclideanHeuristic()
    path = [Position(x, y, "M") for x, y in points]
    length = sum(a.distance_to(b) for a, b in zip(path, path[1:]))
    assert h.estimate(path[0], path[-1]) <= length + 1e-9


def test_zero_heuristic():
    assert ZeroHeuristic().estimate(Position(0, 0, "A"), Position(math.inf, 0, "B")) == 0.0
