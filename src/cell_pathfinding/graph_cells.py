from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Optional, Sequence

import networkx as nx

DEFAULT_COST_ATTRIBUTE = "cost"
POSITION_ATTRIBUTE = "pos"


def _manhattan(a: Sequence[float], b: Sequence[float]) -> float:
    return float(sum(abs(x - y) for x, y in zip(a, b)))


def _euclidean(a: Sequence[float], b: Sequence[float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def _chebyshev(a: Sequence[float], b: Sequence[float]) -> float:
    return float(max((abs(x - y) for x, y in zip(a, b)), default=0.0))


def _zero(a: Sequence[float], b: Sequence[float]) -> float:
    return 0.0


HEURISTICS: Dict[str, Callable[[Sequence[float], Sequence[float]], float]] = {
    "manhattan": _manhattan,
    "euclidean": _euclidean,
    "chebyshev": _chebyshev,
    "zero": _zero,
}


def resolve_heuristic(name: str) -> str:
    key = str(name).strip().lower()
    if key not in HEURISTICS:
        raise ValueError(
            f"Unknown heuristic '{name}'. Expected one of: {', '.join(sorted(HEURISTICS))}."
        )
    return key


@dataclass(frozen=True)
class GraphCell:
    """
    A node of an existing networkx graph, exposed as a pathfinding cell.

    Two cells are equal when they wrap the same node of the same graph
    object. Costs come from a node attribute (default 1); the heuristic
    compares the ``pos`` attributes of both nodes.
    """

    graph: nx.Graph = field(repr=False)
    node: Hashable
    cost_attribute: str = field(default=DEFAULT_COST_ATTRIBUTE, compare=False, repr=False)
    metric: str = field(default="manhattan", compare=False, repr=False)

    def _wrap(self, node: Hashable) -> "GraphCell":
        return GraphCell(self.graph, node, self.cost_attribute, self.metric)

    @property
    def attributes(self) -> Dict[str, Any]:
        return self.graph.nodes[self.node]

    @property
    def neighbors(self) -> List["GraphCell"]:
        # The search runs from end back to start, so directed graphs expose
        # the nodes that can move into this one.
        if self.graph.is_directed():
            adjacent = self.graph.predecessors(self.node)
        else:
            adjacent = self.graph.neighbors(self.node)
        return [self._wrap(node) for node in adjacent]

    @property
    def entry_cost(self) -> float:
        value = self.attributes.get(self.cost_attribute, 1)
        cost = float(value)
        if cost < 0:
            raise ValueError(
                f"Node '{self.node}' has negative {self.cost_attribute} {value}; "
                "entry costs must be non-negative."
            )
        return cost

    @property
    def position(self) -> Optional[Sequence[float]]:
        pos = self.attributes.get(POSITION_ATTRIBUTE)
        if pos is None:
            return None
        return tuple(float(x) for x in pos)

    def heuristic(self, other: "GraphCell") -> float:
        a = self.position
        b = other.position
        if a is None or b is None:
            return 0.0
        return HEURISTICS[self.metric](a, b)


def cell_for(
    graph: nx.Graph,
    node: Hashable,
    cost_attribute: str = DEFAULT_COST_ATTRIBUTE,
    metric: str = "manhattan",
) -> GraphCell:
    if node not in graph:
        raise ValueError(f"Node '{node}' is not in the graph.")
    return GraphCell(graph, node, cost_attribute, resolve_heuristic(metric))


def cells_for(
    graph: nx.Graph,
    cost_attribute: str = DEFAULT_COST_ATTRIBUTE,
    metric: str = "manhattan",
) -> Dict[Hashable, GraphCell]:
    """Wrap every node of ``graph``; keyed by node id."""

    metric_key = resolve_heuristic(metric)
    return {node: GraphCell(graph, node, cost_attribute, metric_key) for node in graph.nodes()}


def find_node(graph: nx.Graph, name: Any) -> Hashable:
    """Resolve a node by id, falling back to its string form or ``name`` attribute."""

    if name in graph:
        return name
    text = str(name)
    for node, attrs in graph.nodes(data=True):
        if str(node) == text or str(attrs.get("name", "")) == text:
            return node
    raise ValueError(f"Node '{name}' is not in the graph.")
