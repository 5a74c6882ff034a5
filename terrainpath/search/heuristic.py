"""Octile distance heuristic.

Costs are kept integral: a diagonal step is estimated at 14 and a straight
step at 10 (sqrt(2) ~ 1.4, scaled by 10).

The estimate is a lower bound on the true remaining cost only when every
cell weight is at least ``DIAGONAL_COST``. A single diagonal move can reduce
the estimate by 14 while costing just the destination weight, so grids with
cheaper cells (Road is 10) can make A* return a costlier path than the
optimum. Weights are never rescaled to compensate.
"""

from __future__ import annotations

from typing import Callable

from terrainpath.search.cells import Cell
from terrainpath.search.grid import WeightedGrid

DIAGONAL_COST = 14
LINEAR_COST = 10

Heuristic = Callable[[Cell, Cell], int]


def octile_distance(p1: Cell, p2: Cell) -> int:
    horizontal = abs(p1.x - p2.x)
    vertical = abs(p1.y - p2.y)
    diagonal = min(horizontal, vertical)
    linear = max(horizontal, vertical) - diagonal
    return diagonal * DIAGONAL_COST + linear * LINEAR_COST


def is_admissible_for(grid: WeightedGrid) -> bool:
    return grid.min_weight() >= DIAGONAL_COST
