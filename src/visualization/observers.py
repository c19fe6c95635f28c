import logging
import os
import time
from collections import defaultdict
from typing import Any, Dict, List, Optional, Tuple

from src.planning.interfaces import IPlannerObserver

_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARN': logging.WARNING,
    'ERROR': logging.ERROR,
}

logger = logging.getLogger("src.planning")


class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    不记录搜索过程，只把 WARN/ERROR 转发给 logging。
    """
    def record_open_set_node(self, node: Any, g: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def record_yield(self, expansions: int, elapsed: float): pass
    def set_map_info(self, map_info: Any): pass

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level in ('WARN', 'ERROR'):
            logger.log(_LEVELS[level], message)


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录 Frontier、扩展节点与松弛边，用于比较与可视化 (Replay)。
    """
    def __init__(self):
        # List[Tuple[x, y, g, h]]
        self.open_set_history: List[Tuple[float, float, float, float]] = []
        self.expanded_nodes: List[Any] = []
        self.edges: List[Tuple[Any, Any]] = []
        self.yields: List[Tuple[int, float]] = []
        self.map_info = None

    def record_open_set_node(self, node: Any, g: float = 0.0, h: float = 0.0):
        self.open_set_history.append((node.x, node.y, g, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((start_node, end_node))

    def record_yield(self, expansions: int, elapsed: float):
        self.yields.append((expansions, elapsed))

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        pass

    def cost_history(self) -> Dict[Tuple[int, int], List[float]]:
        """Successive g values pushed for each (rounded) lattice point."""
        history = defaultdict(list)
        for x, y, g, _ in self.open_set_history:
            history[(round(x), round(y))].append(g)
        return dict(history)


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    详细日志写入文件，同时保留可视化数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/pathfind_debug"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"pathfind_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"PathfindDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, g: float = 0.0, h: float = 0.0):
        self.viz_observer.record_open_set_node(node, g, h)

    def record_current_expansion(self, node: Any):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.viz_observer.record_edge(start_node, end_node)

    def record_yield(self, expansions: int, elapsed: float):
        self.viz_observer.record_yield(expansions, elapsed)
        self.logger.debug(f"Yield after {expansions} expansions ({elapsed * 1000:.1f} ms)")

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map Info set: {map_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"
        self.logger.log(_LEVELS.get(level, logging.INFO), message)

    def close(self):
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def edges(self): return self.viz_observer.edges
    @property
    def map_info(self): return self.viz_observer.map_info
