from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .datasets import load_graph, load_problem_set, resolve_problem
from .framework import PathfindingFramework
from .graph_cells import DEFAULT_COST_ATTRIBUTE, HEURISTICS
from .pathfinders import PATHFINDERS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Breadth-first and A* pathfinding over graph cells")
    parser.add_argument("--graph", type=str, help="Path to a node-link JSON or pickled networkx graph")
    parser.add_argument("--dataset", type=str, help="Path to a problem set (JSON or pickle)")
    parser.add_argument("--problem", type=int, default=0, help="Problem index to solve")
    parser.add_argument("--source", type=str, help="Source node (required with --graph)")
    parser.add_argument("--target", type=str, help="Target node (required with --graph)")
    parser.add_argument(
        "--algorithm",
        type=str,
        default="astar",
        choices=sorted(PATHFINDERS),
        help="Search algorithm",
    )
    parser.add_argument(
        "--heuristic",
        type=str,
        default="manhattan",
        choices=sorted(HEURISTICS),
        help="Distance metric over node 'pos' attributes (A* only)",
    )
    parser.add_argument(
        "--cost-attribute",
        type=str,
        default=DEFAULT_COST_ATTRIBUTE,
        help="Node attribute holding the entry cost",
    )
    parser.add_argument("--quiet", action="store_true", help="Disable verbose logs")
    return parser


def _print_result(result: dict) -> None:
    print("\n" + "=" * 80)
    print("RESULT")
    print("=" * 80)
    print(f"Status: {result['status']}")
    print(f"Source: {result['source']}")
    print(f"Target: {result['target']}")
    print(f"Algorithm: {result['algorithm']}")

    final_path = result.get("final_path", [])
    if final_path:
        print(f"Final path ({len(final_path)} nodes):")
        print("  " + " -> ".join(str(node) for node in final_path))
    else:
        print("Final path: <none>")

    validation = result.get("validation")
    if validation:
        print("\nValidation:")
        print(f"  is_valid: {validation.get('is_valid')}")
        print(f"  hops: {validation.get('hops')}")
        print(f"  path_cost: {validation.get('path_cost')}")
        if validation.get("expected_distance") is not None:
            print(f"  expected_distance: {validation.get('expected_distance')}")
            print(f"  distance_match: {validation.get('distance_match')}")
        if validation.get("expected_cost") is not None:
            print(f"  expected_cost: {validation.get('expected_cost')}")
            print(f"  cost_match: {validation.get('cost_match')}")
        if validation.get("errors"):
            print(f"  errors: {validation['errors']}")

    print(f"\nSolve time: {result.get('solve_time_seconds', 0.0):.3f}s")
    print("=" * 80)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if bool(args.graph) == bool(args.dataset):
        parser.error("exactly one of --graph or --dataset is required")

    try:
        if args.graph:
            if args.source is None or args.target is None:
                parser.error("--source and --target are required with --graph")
            graph = load_graph(Path(args.graph))
            source, target, expected_distance = args.source, args.target, None
        else:
            problems = load_problem_set(Path(args.dataset))
            if args.problem < 0 or args.problem >= len(problems):
                parser.error(f"--problem must be in [0, {len(problems) - 1}]")
            graph, source, target, expected_distance = resolve_problem(problems[args.problem])
            if args.source is not None:
                source = args.source
            if args.target is not None:
                target = args.target

        framework = PathfindingFramework(
            algorithm=args.algorithm,
            heuristic=args.heuristic,
            cost_attribute=args.cost_attribute,
            verbose=not args.quiet,
        )
        result = framework.solve(graph, source, target, expected_distance=expected_distance)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}")
        return 2
    _print_result(result)

    return 0 if result["status"] in {"found", "trivial"} else 1
