from __future__ import annotations

import time
from typing import Any, Dict, Hashable, List, Optional

import networkx as nx

from .graph_cells import DEFAULT_COST_ATTRIBUTE, cell_for, find_node, resolve_heuristic
from .pathfinders import Pathfinder, get_pathfinder
from .paths import collect_path
from .validation import validate_path


class PathfindingFramework:
    """
    Runs cell searches over networkx graphs and reports the outcome.

    The search itself is delegated to a ``Pathfinder``; this class wraps the
    graph nodes as cells, re-attaches the endpoints the engine leaves out and
    validates the resulting path against the graph.
    """

    def __init__(
        self,
        *,
        algorithm: str = "astar",
        heuristic: str = "manhattan",
        cost_attribute: str = DEFAULT_COST_ATTRIBUTE,
        verbose: bool = True,
    ) -> None:
        self._pathfinder = get_pathfinder(algorithm)
        self.algorithm = self._pathfinder.name
        self.heuristic = resolve_heuristic(heuristic)
        self.cost_attribute = cost_attribute
        self.verbose = verbose

        self.last_solve_result: Optional[Dict[str, Any]] = None
        self._solve_count = 0
        self._found_count = 0
        self._no_path_count = 0
        self._total_solve_time = 0.0

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    @property
    def pathfinder(self) -> Pathfinder:
        return self._pathfinder

    def solve(
        self,
        graph: nx.Graph,
        source: Hashable,
        target: Hashable,
        expected_distance: Optional[int] = None,
        expected_cost: Optional[float] = None,
    ) -> Dict[str, Any]:
        solve_start = time.perf_counter()
        source_node = find_node(graph, source)
        target_node = find_node(graph, target)

        self._log("=" * 80)
        self._log(f"SOLVE ({self.algorithm})")
        self._log("=" * 80)
        self._log(f"Source: {source_node}")
        self._log(f"Target: {target_node}")

        start_cell = cell_for(graph, source_node, self.cost_attribute, self.heuristic)
        end_cell = cell_for(graph, target_node, self.cost_attribute, self.heuristic)
        steps = collect_path(self._pathfinder.find_path(start_cell, end_cell))

        intermediate: List[Hashable] = []
        final_path: List[Hashable] = []
        if steps is None:
            status = "no_path"
            self._log("No path between source and target.")
        elif source_node == target_node:
            status = "trivial"
            final_path = [source_node]
        else:
            status = "found"
            intermediate = [cell.node for cell in steps]
            final_path = [source_node, *intermediate, target_node]
            self._log(f"Found path with {len(final_path)} nodes.")

        validation = None
        if final_path:
            validation = validate_path(
                final_path,
                graph,
                source_node,
                target_node,
                expected_distance=expected_distance,
                expected_cost=expected_cost,
                cost_attribute=self.cost_attribute,
            )
            if not validation.get("is_valid", False):
                status = "failed_validation"

        solve_time = time.perf_counter() - solve_start
        self._solve_count += 1
        self._total_solve_time += solve_time
        if status in {"found", "trivial"}:
            self._found_count += 1
        elif status == "no_path":
            self._no_path_count += 1

        result = {
            "final_path": final_path,
            "intermediate": intermediate,
            "status": status,
            "source": source_node,
            "target": target_node,
            "algorithm": self.algorithm,
            "heuristic": self.heuristic,
            "validation": validation,
            "solve_time_seconds": solve_time,
        }

        self.last_solve_result = result
        return result

    def get_statistics(self) -> Dict[str, Any]:
        return {
            "total_solves": self._solve_count,
            "found": self._found_count,
            "no_path": self._no_path_count,
            "avg_solve_time_seconds": (
                self._total_solve_time / self._solve_count if self._solve_count else 0.0
            ),
        }
