"""Public package interface."""

from .cells import CostlyPathfindingCell, PathfindingCell
from .framework import PathfindingFramework
from .frontier import PriorityFrontier
from .graph_cells import GraphCell, cell_for, cells_for
from .pathfinders import AStarPathfinder, BreadthFirstPathfinder, Pathfinder, get_pathfinder
from .paths import collect_path, materialize_path

__all__ = [
    "AStarPathfinder",
    "BreadthFirstPathfinder",
    "CostlyPathfindingCell",
    "GraphCell",
    "PathfindingCell",
    "PathfindingFramework",
    "Pathfinder",
    "PriorityFrontier",
    "cell_for",
    "cells_for",
    "collect_path",
    "get_pathfinder",
    "materialize_path",
]
