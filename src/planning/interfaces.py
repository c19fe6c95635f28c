from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    Pathfinder observer interface.
    Keeps recording, debugging and plotting concerns out of the search loop.
    Modes:
    1. Efficient: records nothing
    2. Experiment: keeps frontier pushes, expansions and relaxations for replay
    3. Debug: experiment data plus a per-session log file
    """

    @abstractmethod
    def record_open_set_node(self, node: Any, g: float = 0.0, h: float = 0.0):
        """A node was (re-)pushed onto the frontier with cost g and estimate h."""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """A node was popped and is being expanded."""
        pass

    @abstractmethod
    def record_edge(self, start_node: Any, end_node: Any):
        """Back-pointer end_node -> start_node was set."""
        pass

    @abstractmethod
    def record_yield(self, expansions: int, elapsed: float):
        """The search handed control back to its host."""
        pass

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """Map description (obstacles, bounds) for plotting backgrounds."""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param level: 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据
        """
        pass
