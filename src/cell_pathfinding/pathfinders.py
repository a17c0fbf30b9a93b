from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Dict, Iterator, Optional

from .cells import CellT, CostlyCellT
from .frontier import PriorityFrontier
from .paths import materialize_path


class Pathfinder(ABC):
    """
    Base class for search algorithms over caller-supplied cells.

    ``find_path`` returns a generator with one of three shapes:
    - empty when ``start == end``;
    - a single ``None`` when ``end`` cannot reach ``start``;
    - otherwise the cells strictly between ``start`` and ``end``, in order.

    Nothing is explored until the first element is requested.
    """

    name = "base"

    @abstractmethod
    def find_path(self, start: CellT, end: CellT) -> Iterator[Optional[CellT]]:
        raise NotImplementedError


class BreadthFirstPathfinder(Pathfinder):
    """Fewest-hops search; ignores costs and heuristics."""

    name = "bfs"

    def find_path(self, start: CellT, end: CellT) -> Iterator[Optional[CellT]]:
        if start == end:
            return

        # Searching from end toward start makes the predecessor walk come out forwards.
        frontier: Deque[CellT] = deque([end])
        predecessor: Dict[CellT, CellT] = {}

        if self._traverse(frontier, predecessor, start):
            yield from materialize_path(predecessor, start, end)
        else:
            yield None

    @staticmethod
    def _traverse(
        frontier: Deque[CellT],
        predecessor: Dict[CellT, CellT],
        start: CellT,
    ) -> bool:
        while frontier:
            current = frontier.popleft()
            for neighbor in current.neighbors:
                if neighbor in predecessor:
                    continue
                frontier.append(neighbor)
                predecessor[neighbor] = current
                if neighbor == start:
                    return True
        return False


class AStarPathfinder(Pathfinder):
    """
    Cost-aware search guided by ``end.heuristic``.

    A cell is closed as soon as it receives a predecessor and is never
    re-opened, so the result is a shortest path only for consistent
    heuristics. Inconsistent heuristics still terminate.
    """

    name = "astar"

    def find_path(self, start: CostlyCellT, end: CostlyCellT) -> Iterator[Optional[CostlyCellT]]:
        if start == end:
            return

        frontier: PriorityFrontier[CostlyCellT] = PriorityFrontier()
        predecessor: Dict[CostlyCellT, CostlyCellT] = {}
        cost_so_far: Dict[CostlyCellT, float] = {}

        # Searching from end toward start makes the predecessor walk come out forwards.
        frontier.enqueue(end, 0)
        cost_so_far[end] = end.entry_cost

        if self._traverse(frontier, predecessor, cost_so_far, start, end):
            yield from materialize_path(predecessor, start, end)
        else:
            yield None

    @staticmethod
    def _traverse(
        frontier: PriorityFrontier[CostlyCellT],
        predecessor: Dict[CostlyCellT, CostlyCellT],
        cost_so_far: Dict[CostlyCellT, float],
        start: CostlyCellT,
        end: CostlyCellT,
    ) -> bool:
        found, current = frontier.try_dequeue()
        while found:
            for neighbor in current.neighbors:
                if neighbor in predecessor:
                    continue
                new_cost = cost_so_far[current] + neighbor.entry_cost
                known_cost = cost_so_far.get(neighbor)
                if known_cost is not None and new_cost >= known_cost:
                    continue

                predecessor[neighbor] = current
                if neighbor == start:
                    return True

                cost_so_far[neighbor] = new_cost
                frontier.enqueue(neighbor, new_cost + end.heuristic(neighbor))
            found, current = frontier.try_dequeue()
        return False


PATHFINDERS: Dict[str, type] = {
    BreadthFirstPathfinder.name: BreadthFirstPathfinder,
    AStarPathfinder.name: AStarPathfinder,
}


def get_pathfinder(algorithm: str) -> Pathfinder:
    key = str(algorithm).strip().lower()
    if key not in PATHFINDERS:
        raise ValueError(
            f"Unknown algorithm '{algorithm}'. Expected one of: {', '.join(sorted(PATHFINDERS))}."
        )
    return PATHFINDERS[key]()
