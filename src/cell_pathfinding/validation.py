from __future__ import annotations

import math
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from .graph_cells import DEFAULT_COST_ATTRIBUTE, cell_for


def path_cost(
    graph: nx.Graph,
    path: Sequence[Hashable],
    cost_attribute: str = DEFAULT_COST_ATTRIBUTE,
) -> float:
    """Sum of the entry costs paid along ``path``; the first node is not entered."""

    return float(sum(cell_for(graph, node, cost_attribute).entry_cost for node in path[1:]))


def _unknown_nodes(graph: nx.Graph, path: Sequence[Hashable]) -> List[Hashable]:
    return [node for node in path if node not in graph]


def _broken_steps(graph: nx.Graph, path: Sequence[Hashable]) -> List[Tuple[Hashable, Hashable]]:
    # has_edge is direction-aware on directed graphs, matching GraphCell.neighbors.
    return [(u, v) for u, v in zip(path, path[1:]) if not graph.has_edge(u, v)]


def validate_path(
    path: Sequence[Hashable],
    graph: nx.Graph,
    source: Hashable,
    target: Hashable,
    expected_distance: Optional[int] = None,
    expected_cost: Optional[float] = None,
    cost_attribute: str = DEFAULT_COST_ATTRIBUTE,
) -> Dict[str, Any]:
    """
    Check a full ``source .. target`` node path against ``graph``.

    ``hops`` counts steps, ``path_cost`` uses the same entry-cost model as
    A*. ``expected_distance`` is compared with hops and ``expected_cost``
    with the cost; either is ignored when not given.
    """

    report: Dict[str, Any] = {
        "is_valid": False,
        "hops": max(len(path) - 1, 0),
        "path_cost": None,
        "errors": [],
        "unknown_nodes": [],
        "broken_steps": [],
        "expected_distance": expected_distance,
        "expected_cost": expected_cost,
        "distance_match": expected_distance is None,
        "cost_match": expected_cost is None,
    }
    errors: List[str] = report["errors"]

    if not path:
        errors.append("Path is empty.")
        return report

    if path[0] != source or path[-1] != target:
        errors.append(f"Path runs {path[0]!r} -> {path[-1]!r}, expected {source!r} -> {target!r}.")

    report["unknown_nodes"] = _unknown_nodes(graph, path)
    if report["unknown_nodes"]:
        errors.append(f"Nodes not in graph: {report['unknown_nodes']}.")
    else:
        report["broken_steps"] = _broken_steps(graph, path)
        if report["broken_steps"]:
            errors.append(f"Steps without an edge: {report['broken_steps']}.")
        report["path_cost"] = path_cost(graph, path, cost_attribute)

    if expected_distance is not None:
        report["distance_match"] = report["hops"] == expected_distance
    if expected_cost is not None and report["path_cost"] is not None:
        report["cost_match"] = math.isclose(report["path_cost"], expected_cost)

    report["is_valid"] = not errors
    return report
