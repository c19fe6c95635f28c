import matplotlib
matplotlib.use("Agg")

from src.collision import CollisionChecker, RectangleOracle
from src.planning.planners import AStarPathfinder
from src.types import Position
from src.visualization.observers import ExperimentObserver
from src.visualization.plotter import Visualizer

OBSTACLES = [(100, -50, 150, 50)]


def test_render_search(tmp_path):
    planner = AStarPathfinder(CollisionChecker(RectangleOracle({"M": OBSTACLES})))
    origin = Position(0, 0, "M")
    target = Position(300, 0, "M")
    observer = ExperimentObserver()
    observer.set_map_info({"obstacles": OBSTACLES})

    search = planner.start(origin, target, observer=observer)
    while search.resume() is None:
        pass

    viz = Visualizer()
    fig = viz.render(origin, target, search.raw_path, search.path, observer, OBSTACLES)
    save_path = tmp_path / "pathfind_result.png"
    viz.save(str(save_path))
    viz.close()

    assert fig is viz.fig
    assert len(viz.ax.patches) == 1
    assert save_path.exists()
    assert save_path.stat().st_size > 0
