from __future__ import annotations

import random

import networkx as nx
import pytest

from cell_pathfinding import AStarPathfinder, PathfindingFramework


def build_line_graph() -> nx.Graph:
    graph = nx.Graph()
    names = ["A", "B", "C", "D", "E", "F", "G"]
    for idx, name in enumerate(names):
        graph.add_node(idx, name=name)
    for left, right in zip(range(len(names) - 1), range(1, len(names))):
        graph.add_edge(left, right, relation="road")
    return graph


def build_two_cluster_graph() -> nx.Graph:
    graph = nx.Graph()
    names = ["A", "B", "C", "D", "E", "F"]
    for idx, name in enumerate(names):
        graph.add_node(idx, name=name)

    cluster_one = [(0, 1), (1, 2), (0, 2)]
    cluster_two = [(3, 4), (4, 5), (3, 5)]
    for edge in cluster_one + cluster_two:
        graph.add_edge(*edge, relation="intra")
    return graph


def build_weighted_grid(seed: int) -> nx.Graph:
    rng = random.Random(seed)
    graph = nx.grid_2d_graph(7, 7)
    for node in graph.nodes():
        graph.nodes[node]["cost"] = rng.randint(1, 9)
        graph.nodes[node]["pos"] = node
    return graph


def entry_cost_weight(graph: nx.Graph):
    return lambda u, v, data: graph.nodes[v]["cost"]


@pytest.mark.parametrize("algorithm", ["astar", "bfs"])
def test_end_to_end_solve_returns_valid_path(algorithm: str) -> None:
    graph = build_line_graph()
    framework = PathfindingFramework(algorithm=algorithm, verbose=False)

    result = framework.solve(graph, "A", "G", expected_distance=6)

    assert result["status"] == "found"
    assert result["final_path"] == [0, 1, 2, 3, 4, 5, 6]
    assert result["intermediate"] == [1, 2, 3, 4, 5]
    assert result["validation"]["is_valid"] is True
    assert result["validation"]["distance_match"] is True
    assert result["algorithm"] == algorithm


def test_adjacent_nodes_keep_both_endpoints() -> None:
    graph = build_line_graph()
    result = PathfindingFramework(verbose=False).solve(graph, "A", "B")
    assert result["status"] == "found"
    assert result["intermediate"] == []
    assert result["final_path"] == [0, 1]


def test_same_source_and_target_is_trivial() -> None:
    graph = build_line_graph()
    result = PathfindingFramework(verbose=False).solve(graph, "C", "C")
    assert result["status"] == "trivial"
    assert result["final_path"] == [2]
    assert result["validation"]["hops"] == 0


def test_disconnected_clusters_report_no_path() -> None:
    graph = build_two_cluster_graph()
    framework = PathfindingFramework(verbose=False)
    result = framework.solve(graph, "A", "F")
    assert result["status"] == "no_path"
    assert result["final_path"] == []
    assert result["validation"] is None


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_astar_matches_networkx_cost_with_zero_heuristic(seed: int) -> None:
    graph = build_weighted_grid(seed)
    framework = PathfindingFramework(heuristic="zero", verbose=False)

    result = framework.solve(graph, (0, 0), (6, 6))
    expected = nx.shortest_path_length(graph, (0, 0), (6, 6), weight=entry_cost_weight(graph))

    assert result["status"] == "found"
    assert result["validation"]["path_cost"] == expected


def test_bfs_matches_networkx_hop_count() -> None:
    graph = build_weighted_grid(4)
    result = PathfindingFramework(algorithm="bfs", verbose=False).solve(graph, (0, 3), (6, 1))
    assert result["validation"]["hops"] == nx.shortest_path_length(graph, (0, 3), (6, 1))


@pytest.mark.parametrize("algorithm", ["astar", "bfs"])
def test_directed_graph_solves_along_edge_direction(algorithm: str) -> None:
    graph = nx.DiGraph()
    nx.add_path(graph, ["a", "b", "c"])
    framework = PathfindingFramework(algorithm=algorithm, verbose=False)

    forward = framework.solve(graph, "a", "c")
    assert forward["status"] == "found"
    assert forward["final_path"] == ["a", "b", "c"]
    assert forward["validation"]["broken_steps"] == []

    backward = framework.solve(graph, "c", "a")
    assert backward["status"] == "no_path"
    assert backward["final_path"] == []


def test_expected_cost_is_checked_against_entry_costs() -> None:
    graph = build_line_graph()
    graph.nodes[3]["cost"] = 4
    framework = PathfindingFramework(verbose=False)

    matching = framework.solve(graph, "A", "E", expected_cost=7)
    assert matching["validation"]["path_cost"] == 7.0
    assert matching["validation"]["cost_match"] is True

    off = framework.solve(graph, "A", "E", expected_cost=4)
    assert off["validation"]["cost_match"] is False
    assert off["status"] == "found"


def test_pathfinder_property_and_invalid_configuration() -> None:
    assert isinstance(PathfindingFramework(verbose=False).pathfinder, AStarPathfinder)
    with pytest.raises(ValueError, match="Unknown algorithm"):
        PathfindingFramework(algorithm="greedy", verbose=False)
    with pytest.raises(ValueError, match="Unknown heuristic"):
        PathfindingFramework(heuristic="octile", verbose=False)


def test_unknown_node_raises() -> None:
    graph = build_line_graph()
    with pytest.raises(ValueError, match="not in the graph"):
        PathfindingFramework(verbose=False).solve(graph, "A", "Z")


def test_statistics_track_outcomes() -> None:
    framework = PathfindingFramework(verbose=False)
    framework.solve(build_line_graph(), "A", "D")
    framework.solve(build_two_cluster_graph(), "A", "F")

    stats = framework.get_statistics()
    assert stats["total_solves"] == 2
    assert stats["found"] == 1
    assert stats["no_path"] == 1
    assert stats["avg_solve_time_seconds"] >= 0.0
    assert framework.last_solve_result["status"] == "no_path"


def test_verbose_logs_to_stdout(capsys) -> None:
    PathfindingFramework(verbose=True).solve(build_line_graph(), "A", "C")
    out = capsys.readouterr().out
    assert "SOLVE (astar)" in out
    assert "Found path with 3 nodes." in out

    PathfindingFramework(verbose=False).solve(build_line_graph(), "A", "C")
    assert capsys.readouterr().out == ""
