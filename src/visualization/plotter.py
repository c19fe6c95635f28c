# 绘图逻辑 (Matplotlib)
from typing import Iterable, List, Optional

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from src.collision.geometry import Rect
from src.types import Position
from src.visualization.observers import ExperimentObserver


class Visualizer:
    """Draw one search: obstacles, explored nodes, raw and simplified paths."""

    def __init__(self, ax=None, figsize=(8, 8)):
        if ax is None:
            self.fig, self.ax = plt.subplots(figsize=figsize)
        else:
            self.fig, self.ax = ax.figure, ax

    def draw_obstacles(self, rects: Iterable[Rect]):
        for x_min, y_min, x_max, y_max in rects:
            self.ax.add_patch(Rectangle((x_min, y_min), x_max - x_min, y_max - y_min,
                                        facecolor='grey', edgecolor='black', alpha=0.6))

    def draw_search(self, observer: ExperimentObserver):
        if observer.open_set_history:
            op_x = [p[0] for p in observer.open_set_history]
            op_y = [p[1] for p in observer.open_set_history]
            self.ax.scatter(op_x, op_y, c='green', s=1, alpha=0.3, label='Frontier History')

        if observer.expanded_nodes:
            ex_x = [n.x for n in observer.expanded_nodes]
            ex_y = [n.y for n in observer.expanded_nodes]
            self.ax.scatter(ex_x, ex_y, c='red', s=2, alpha=0.4, label='Expanded')

    def draw_path(self, path: List[Position], style: str = 'b-', label: str = 'Path'):
        if not path:
            return
        xs = [p.x for p in path]
        ys = [p.y for p in path]
        self.ax.plot(xs, ys, style, linewidth=2, label=label)
        self.ax.scatter(xs, ys, c=style[0], s=10, zorder=5)

    def render(self,
               origin: Position,
               target: Position,
               raw_path: Optional[List[Position]] = None,
               path: Optional[List[Position]] = None,
               observer: Optional[ExperimentObserver] = None,
               obstacles: Iterable[Rect] = (),
               title: str = "Pathfind"):
        self.draw_obstacles(obstacles)
        if observer is not None:
            self.draw_search(observer)
        if raw_path:
            self.draw_path(raw_path, 'y--', 'Raw Path')
        if path:
            self.draw_path(path, 'b-', 'Simplified Path')

        self.ax.plot(origin.x, origin.y, 'go', markersize=10, label='Start')
        self.ax.plot(target.x, target.y, 'rx', markersize=10, label='Goal')
        self.ax.set_title(title)
        self.ax.set_aspect('equal')
        self.ax.grid(True, linestyle=':', alpha=0.3)
        self.ax.legend()
        return self.fig

    def save(self, filename: str):
        self.fig.tight_layout()
        self.fig.savefig(filename)

    def close(self):
        plt.close(self.fig)
