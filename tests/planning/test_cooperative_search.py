import asyncio
import itertools

import pytest

from src.collision import CollisionChecker, RectangleOracle
from src.config import PathfindConfig
from src.planning import NoPathError
from src.planning.planners import AStarPathfinder
from src.planning.planners import a_star
from src.types import Position
from src.visualization.observers import ExperimentObserver

ORIGIN = Position(0, 0, "M")
TARGET = Position(300, 0, "M")


@pytest.fixture
def planner():
    checker = CollisionChecker(RectangleOracle({"M": [(100, -50, 150, 50)]}))
    return AStarPathfinder(checker, config=PathfindConfig(yield_interval=0.010))


@pytest.fixture
def fake_clock(monkeypatch):
    """Every clock read advances 4 ms, so a 10 ms slice covers a couple of expansions."""
    ticks = itertools.count()
    monkeypatch.setattr(a_star.time, "monotonic", lambda: next(ticks) * 0.004)


def test_resume_yields_between_slices(planner, fake_clock):
    observer = ExperimentObserver()
    search = planner.start(ORIGIN, TARGET, observer=observer)

    calls = 0
    path = None
    while path is None:
        path = search.resume()
        calls += 1

    assert calls > 1
    assert len(observer.yields) == calls - 1
    assert search.done
    assert search.resume() is path


def test_sliced_search_matches_synchronous_result(planner, fake_clock):
    sliced = planner.find_path(ORIGIN, TARGET)

    search = planner.start(ORIGIN, TARGET)
    path = None
    while path is None:
        path = search.resume(time_slice=1000.0)
    assert [(p.x, p.y) for p in path] == [(p.x, p.y) for p in sliced]


def test_frontier_is_consistent_at_yield(planner, fake_clock):
    search = planner.start(ORIGIN, TARGET)
    assert search.resume() is None
    assert search.frontier_size > 0
    for node in search.nodes.values():
        if node.parent is not None:
            assert node.parent in search.nodes


def test_async_search_lets_other_tasks_run(planner, fake_clock):
    async def scenario():
        ticks = 0
        finished = False

        async def ticker():
            nonlocal ticks
            while not finished:
                ticks += 1
                await asyncio.sleep(0)

        task = asyncio.create_task(ticker())
        path = await planner.find_path_async(ORIGIN, TARGET)
        finished = True
        await task
        return path, ticks

    path, ticks = asyncio.run(scenario())
    assert path[0] == ORIGIN
    assert ticks > 0


def test_async_search_propagates_no_path():
    checker = CollisionChecker(RectangleOracle({"M": []}, bounds=(-50, -50, 50, 50)))
    planner = AStarPathfinder(checker)
    with pytest.raises(NoPathError):
        asyncio.run(planner.find_path_async(ORIGIN, TARGET))
