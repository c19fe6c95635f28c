# src/planning/planners/a_star.py
import asyncio
import heapq
import itertools
import time
from typing import Dict, List, Optional, Tuple

from src.collision import CollisionChecker
from src.config import PathfindConfig, PathfindOptions
from src.planning.errors import NoPathError, UnsupportedError
from src.planning.heuristics import EuclideanHeuristic, Heuristic
from src.planning.interfaces import IPlannerObserver
from src.planning.neighbors import neighbours, select_step
from src.planning.planners.base import PlannerBase
from src.planning.smoother import GreedyShortcutSmoother
from src.types import Node, Position, to_position
from src.visualization.observers import EfficientObserver


class PathfindSearch:
    """
    One in-flight A* search over the adaptive lattice.

    The search is driven by repeated resume() calls. Each call expands nodes
    until the search finishes or its time slice runs out; between calls the
    frontier and node table are consistent and nothing else touches them.
    """

    def __init__(self,
                 planner: "AStarPathfinder",
                 origin: Position,
                 target: Position,
                 options: PathfindOptions,
                 observer: IPlannerObserver):
        if not origin.same_map(target):
            raise UnsupportedError(
                f"Moving between maps is not supported ({origin.map_id!r} -> {target.map_id!r})")

        self.planner = planner
        self.origin = origin
        self.target = target
        self.options = options
        self.observer = observer

        # Node table: best known cost and back-pointer per lattice point
        self.nodes: Dict[Position, Node] = {origin: Node(origin, 0.0, None)}
        # Frontier entries: (f, insertion order, g, position)
        self._frontier: List[Tuple[float, int, float, Position]] = []
        self._counter = itertools.count()

        self.expansions = 0
        self.goal: Optional[Node] = None
        self.raw_path: Optional[List[Position]] = None
        self.path: Optional[List[Position]] = None

        if origin == target and (not options.exact or origin.as_tuple() == target.as_tuple()):
            # 已在目标处，无需查询 oracle
            self.goal = self.nodes[origin]
            self._finish()
            return

        self._push(origin, 0.0)

    @property
    def done(self) -> bool:
        return self.path is not None

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    def resume(self, time_slice: Optional[float] = None) -> Optional[List[Position]]:
        """
        Continue the search for at most time_slice seconds.
        :return: the finished path, or None if the slice ran out first
        :raises NoPathError: the frontier was exhausted
        """
        if self.done:
            return self.path

        if time_slice is None:
            time_slice = self.planner.config.yield_interval
        started = time.monotonic()

        while self._frontier:
            elapsed = time.monotonic() - started
            if elapsed > time_slice:
                self.observer.record_yield(self.expansions, elapsed)
                return None

            _, _, g, current = heapq.heappop(self._frontier)
            node = self.nodes[current]
            if g > node.cost or node.settled:
                # Superseded by a cheaper push
                continue
            node.settled = True
            current = node.position
            self.expansions += 1
            self.observer.record_current_expansion(current)

            if self._goal_test(node):
                self._finish()
                return self.path

            self._expand(node)

        self.observer.log("Frontier is empty, no path found.", 'WARN',
                          payload={'origin': self.origin, 'target': self.target,
                                   'expansions': self.expansions})
        raise NoPathError(f"No path found from {self.origin} to {self.target}")

    def _push(self, position: Position, g: float):
        h = self.planner.h_fn.estimate(position, self.target)
        heapq.heappush(self._frontier, (g + h, next(self._counter), g, position))
        self.observer.record_open_set_node(position, g, h)

    def _goal_test(self, node: Node) -> bool:
        current = node.position
        checker = self.planner.collision_checker

        if self.options.exact:
            if not checker.can_move(current, self.target):
                return False
            cost = node.cost + current.distance_to(self.target)
            if self.options.max_distance is not None and cost > self.options.max_distance:
                return False
            # 落在请求的精确坐标上；前驱必须是刚检查过 current -> target 的 current
            self.goal = Node(self.target, cost, current)
            return True

        if current.distance_to(self.target) < self.planner.config.close_enough_range:
            self.goal = node
            return True
        return False

    def _expand(self, node: Node):
        current = node.position
        step = select_step(node.cost, self.planner.config)
        max_distance = self.options.max_distance

        for neighbour in neighbours(current, step, self.planner.collision_checker):
            new_cost = node.cost + current.distance_to(neighbour)
            if max_distance is not None and new_cost > max_distance:
                continue

            known = self.nodes.get(neighbour)
            if known is not None and known.cost <= new_cost:
                continue

            if known is None:
                self.nodes[neighbour] = Node(neighbour, new_cost, current)
            else:
                known.position = neighbour
                known.cost = new_cost
                known.parent = current
                known.settled = False
            self._push(neighbour, new_cost)
            self.observer.record_edge(current, neighbour)

    def _reconstruct_path(self) -> List[Position]:
        """Walk back-pointers from the goal to the origin."""
        path = [self.goal.position]
        parent = self.goal.parent
        while parent is not None:
            node = self.nodes[parent]
            path.append(node.position)
            parent = node.parent
        return path[::-1]

    def _finish(self):
        self.raw_path = self._reconstruct_path()
        if self.options.simplify:
            self.path = self.planner.smoother.simplify(self.raw_path)
        else:
            self.path = list(self.raw_path)
        self.observer.log("Path found.", 'INFO',
                          payload={'expansions': self.expansions,
                                   'cost': self.goal.cost,
                                   'raw_waypoints': len(self.raw_path),
                                   'waypoints': len(self.path)})


class AStarPathfinder(PlannerBase):
    """
    Continuous-space A* over an adaptive sample lattice.

    工作流程：
    1. 以起点为种子，按 f = g + h 从 Frontier 中取出代价最低的点。
    2. 终止条件：足够接近目标 (或 exact 模式下可直线到达目标)。
    3. 在量化后的位置周围生成 8-连通邻居，由 CollisionChecker 过滤。
    4. 每个时间片结束后交还控制权 (见 PathfindSearch.resume)。
    5. 回溯得到原始路径，再用 GreedyShortcutSmoother 合并成长直线段。
    """

    def __init__(self,
                 collision_checker: CollisionChecker,
                 heuristic: Optional[Heuristic] = None,
                 config: Optional[PathfindConfig] = None):
        self.collision_checker = collision_checker
        self.config = config or PathfindConfig()
        self.h_fn = heuristic or EuclideanHeuristic(self.config.offmap_estimate)
        self.smoother = GreedyShortcutSmoother(collision_checker, self.config.max_segment)

    def start(self,
              origin: Position,
              target,
              options: Optional[PathfindOptions] = None,
              observer: Optional[IPlannerObserver] = None) -> PathfindSearch:
        """
        Begin a resumable search. target may be a Position or an (x, y[, map])
        tuple; a missing map means the origin's map.
        :raises UnsupportedError: origin and target are on different maps
        """
        if observer is None:
            observer = EfficientObserver()
        target = to_position(target, origin.map_id)
        return PathfindSearch(self, origin, target, options or PathfindOptions(), observer)

    def find_path(self,
                  origin: Position,
                  target,
                  options: Optional[PathfindOptions] = None,
                  observer: Optional[IPlannerObserver] = None) -> List[Position]:
        """Run a search to completion on the calling thread."""
        search = self.start(origin, target, options, observer)
        path = search.path
        while path is None:
            path = search.resume()
        return path

    async def find_path_async(self,
                              origin: Position,
                              target,
                              options: Optional[PathfindOptions] = None,
                              observer: Optional[IPlannerObserver] = None) -> List[Position]:
        """Run a search from an asyncio task, yielding to the loop between time slices."""
        search = self.start(origin, target, options, observer)
        path = search.path
        while path is None:
            path = search.resume()
            if path is None:
                await asyncio.sleep(0)
        return path
