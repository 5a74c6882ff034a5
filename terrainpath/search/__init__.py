"""Weighted-grid A* search."""

from terrainpath.search.cells import Cell
from terrainpath.search.contracts import GridSnapshot
from terrainpath.search.engine import AStarSearch, RelaxationStep, find_path
from terrainpath.search.errors import (
    EmptyGrid,
    GraphInvariantError,
    GridError,
    InvalidCell,
    InvalidEndpoint,
    InvalidGrid,
    InvalidWeight,
    OutOfBounds,
    SearchCancelled,
)
from terrainpath.search.graph import NeighborGraph
from terrainpath.search.grid import TERRAIN_WEIGHTS, Terrain, WeightedGrid
from terrainpath.search.heuristic import octile_distance
from terrainpath.search.result import PathResult, PathStatus, SearchStats
from terrainpath.search.state import GridState

__all__ = [
    "AStarSearch",
    "Cell",
    "EmptyGrid",
    "GraphInvariantError",
    "GridError",
    "GridSnapshot",
    "GridState",
    "InvalidCell",
    "InvalidEndpoint",
    "InvalidGrid",
    "InvalidWeight",
    "NeighborGraph",
    "OutOfBounds",
    "PathResult",
    "PathStatus",
    "RelaxationStep",
    "SearchCancelled",
    "SearchStats",
    "TERRAIN_WEIGHTS",
    "Terrain",
    "WeightedGrid",
    "find_path",
    "octile_distance",
]
