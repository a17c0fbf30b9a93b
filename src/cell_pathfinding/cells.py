from __future__ import annotations

from typing import Any, Iterable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class PathfindingCell(Protocol):
    """
    Minimal capability a graph node needs for breadth-first search.

    The graph is implicit: it is discovered on demand through ``neighbors``.
    Cells are used as dict keys, so equality and hashing must be well defined.
    """

    @property
    def neighbors(self) -> Iterable[Any]: ...


@runtime_checkable
class CostlyPathfindingCell(PathfindingCell, Protocol):
    """
    A cell that can also be searched with A*.

    ``entry_cost`` is the non-negative cost of moving into the cell.
    ``heuristic(other)`` estimates the remaining cost between this cell and
    ``other``; it must be consistent for A* to return shortest paths.
    """

    @property
    def entry_cost(self) -> float: ...

    def heuristic(self, other: Any) -> float: ...


CellT = TypeVar("CellT", bound=PathfindingCell)
CostlyCellT = TypeVar("CostlyCellT", bound=CostlyPathfindingCell)
