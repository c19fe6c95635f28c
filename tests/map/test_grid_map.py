import numpy as np
import pytest

from src.map import GridMap, MapGenerator
from src.types import Position


@pytest.fixture
def grid_map():
    return GridMap(10, 10, resolution=8, origin=(-40, -40), map_id="M")


def test_world_grid_conversion(grid_map):
    assert grid_map.world_to_grid(-40, -40) == (0, 0)
    assert grid_map.world_to_grid(39.9, 39.9) == (9, 9)
    assert grid_map.grid_to_world(0, 0) == (-36.0, -36.0)
    assert grid_map.is_inside(0, 0)
    assert not grid_map.is_inside(40, 40)
    assert grid_map.extent == (-40.0, -40.0, 40.0, 40.0)


def test_out_of_bounds_is_obstacle(grid_map):
    assert grid_map.is_obstacle(-1, 0)
    assert grid_map.is_obstacle(0, 10)
    assert not grid_map.is_obstacle_at_point(0, 0)


def test_add_rectangle_and_segments(grid_map):
    grid_map.add_rectangle((-8, -8, 8, 8))
    assert grid_map.data[4:7, 4:7].sum() == 9
    assert grid_map.data.sum() == 9
    assert grid_map.is_obstacle_at_point(0, 0)

    assert grid_map.segment_is_free(-30, -30, 30, -30)
    assert not grid_map.segment_is_free(-30, 0, 30, 0)
    assert not grid_map.segment_is_free(0, -30, 0, 60)  # leaves the raster


def test_clear_circle(grid_map):
    grid_map.data[:, :] = 1
    grid_map.clear_circle(0, 0, 6)
    assert grid_map.data.sum() == 100 - 4


def test_invalid_sizes():
    with pytest.raises(ValueError):
        GridMap(0, 10)
    with pytest.raises(ValueError):
        GridMap(10, 10, resolution=0)


class TestMapGenerator:
    EXTENT = (0.0, 0.0, 640.0, 640.0)

    def test_same_seed_same_rects(self):
        a = MapGenerator(obstacle_density=0.1, seed=7).generate_rects(self.EXTENT)
        b = MapGenerator(obstacle_density=0.1, seed=7).generate_rects(self.EXTENT)
        assert a == b
        assert len(a) > 0

    def test_zero_density_is_empty(self):
        assert MapGenerator(obstacle_density=0.0, seed=1).generate_rects(self.EXTENT) == []

    def test_keep_clear_points_stay_free(self):
        start = Position(40, 40, "M")
        goal = Position(600, 600, "M")
        grid_map = GridMap(80, 80, resolution=8, map_id="M")
        rects = MapGenerator(obstacle_density=0.2, clear_radius=24, seed=3).generate(grid_map, [start, goal])

        assert rects
        assert np.any(grid_map.data == 1)
        assert not grid_map.is_obstacle_at_point(start.x, start.y)
        assert not grid_map.is_obstacle_at_point(goal.x, goal.y)

    def test_invalid_density(self):
        with pytest.raises(ValueError):
            MapGenerator(obstacle_density=1.0)
