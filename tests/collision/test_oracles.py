import pytest

from src.collision import (
    CachedOracle,
    CollisionChecker,
    FunctionOracle,
    GridMapOracle,
    OpenPlaneOracle,
    RectangleOracle,
)
from src.collision.geometry import normalize_rect, point_in_rect, sample_segment, segment_intersects_rect
from src.map import GridMap
from src.types import Position

RECT = (100, -50, 150, 50)


@pytest.mark.parametrize("segment, hit", [
    ((0, 0, 300, 0), True),        # straight through
    ((0, 60, 300, 60), False),     # above
    ((0, 50, 300, 50), True),      # grazes the top edge
    ((120, 0, 130, 10), True),     # fully inside
    ((0, 0, 99, 0), False),        # stops short
    ((90, -70, 170, 70), True),    # diagonal
    ((90, 70, 170, 140), False),   # diagonal, misses
    ((125, 0, 125, 0), True),      # degenerate point inside
    ((0, 0, 0, 0), False),         # degenerate point outside
])
def test_segment_intersects_rect(segment, hit):
    assert segment_intersects_rect(*segment, RECT) is hit


def test_rect_helpers():
    assert normalize_rect((10, 10, 0, 0)) == (0, 0, 10, 10)
    assert point_in_rect(100, 0, RECT)
    assert not point_in_rect(100, 0, RECT, strict=True)
    assert point_in_rect(101, 0, RECT, strict=True)


def test_sample_segment_includes_endpoints():
    pts = sample_segment(0, 0, 10, 0, 4)
    assert pts.shape == (4, 2)
    assert tuple(pts[0]) == (0, 0)
    assert tuple(pts[-1]) == (10, 0)


def test_rectangle_oracle_is_per_map():
    oracle = RectangleOracle({"M": [RECT]})
    assert not oracle.can_move("M", 0, 0, 300, 0)
    assert oracle.can_move("other", 0, 0, 300, 0)


def test_bounds_block_moves_leaving_the_world():
    oracle = OpenPlaneOracle(bounds=(0, 0, 100, 100))
    assert oracle.can_move("M", 50, 50, 100, 100)
    assert not oracle.can_move("M", 50, 50, 101, 50)


def test_grid_map_oracle():
    grid_map = GridMap(40, 40, resolution=8, origin=(-160, -160), map_id="M")
    grid_map.add_rectangle(RECT)
    oracle = GridMapOracle([grid_map])

    assert not oracle.can_move("M", 0, 0, 150, 0)
    assert oracle.can_move("M", 0, 80, 150, 80)
    assert not oracle.can_move("unknown", 0, 80, 150, 80)


def test_cached_oracle_memoizes():
    calls = []

    def fn(map_id, x1, y1, x2, y2):
        calls.append((x1, y1, x2, y2))
        return x2 < 100

    oracle = CachedOracle(FunctionOracle(fn))
    assert oracle.can_move("M", 0, 0, 50, 0)
    assert oracle.can_move("M", 0, 0, 50, 0)
    assert not oracle.can_move("M", 0, 0, 150, 0)
    assert len(calls) == 2
    assert (oracle.hits, oracle.misses) == (1, 2)

    oracle.clear()
    oracle.can_move("M", 0, 0, 50, 0)
    assert len(calls) == 3


def test_checker_never_asks_oracle_across_maps():
    calls = []
    checker = CollisionChecker(FunctionOracle(lambda *args: calls.append(args) or True))

    assert not checker.can_move(Position(0, 0, "A"), Position(1, 1, "B"))
    assert calls == []
    assert checker.query_count == 0

    assert checker.can_move(Position(0, 0, "A"), Position(1, 1, "A"))
    assert calls == [("A", 0, 0, 1, 1)]
    assert checker.query_count == 1


def test_checker_requires_oracle():
    with pytest.raises(ValueError):
        CollisionChecker(None)


def test_checker_reset_stats():
    checker = CollisionChecker(OpenPlaneOracle())
    checker.can_move(Position(0, 0, "A"), Position(1, 1, "A"))
    checker.can_move(Position(1, 1, "A"), Position(2, 2, "A"))
    assert checker.query_count == 2

    checker.reset_stats()
    assert checker.query_count == 0
    checker.can_move(Position(0, 0, "A"), Position(1, 1, "A"))
    assert checker.query_count == 1
