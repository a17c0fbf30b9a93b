from __future__ import annotations

import json
import pickle
from pathlib import Path
from typing import Any, Dict, Hashable, List, Tuple

import networkx as nx
from networkx.readwrite import json_graph

PICKLE_SUFFIXES = {".pkl", ".pickle", ".gpickle"}


def _is_pickle(path: Path) -> bool:
    return path.suffix.lower() in PICKLE_SUFFIXES


def graph_from_payload(payload: Dict[str, Any]) -> nx.Graph:
    """Deserialize node-link data (``{"nodes": [...], "links"|"edges": [...]}``)."""

    payload = dict(payload)
    if "edges" in payload and "links" not in payload:
        payload["links"] = payload.pop("edges")
    payload.setdefault("directed", False)
    payload.setdefault("multigraph", False)
    payload.setdefault("links", [])
    return json_graph.node_link_graph(payload, edges="links")


def load_graph(path: str | Path) -> nx.Graph:
    graph_path = Path(path)
    if _is_pickle(graph_path):
        with graph_path.open("rb") as handle:
            graph = pickle.load(handle)
    else:
        with graph_path.open("r", encoding="utf-8") as handle:
            graph = graph_from_payload(json.load(handle))
    if not isinstance(graph, nx.Graph):
        raise ValueError(f"{graph_path} does not contain a networkx graph.")
    return graph


def load_problem_set(path: str | Path) -> List[Dict[str, Any]]:
    dataset_path = Path(path)
    if _is_pickle(dataset_path):
        with dataset_path.open("rb") as handle:
            problems = pickle.load(handle)
    else:
        with dataset_path.open("r", encoding="utf-8") as handle:
            problems = json.load(handle)
    if not isinstance(problems, list):
        raise ValueError(f"{dataset_path} must contain a list of problems.")
    return problems


def resolve_problem(problem: Dict[str, Any]) -> Tuple[nx.Graph, Hashable, Hashable, int | None]:
    graph = problem["graph"]
    if isinstance(graph, dict):
        graph = graph_from_payload(graph)
    source = problem["source"]
    target = problem["target"]
    expected_distance = problem.get("exact_answer")
    return graph, source, target, expected_distance
