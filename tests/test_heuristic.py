import heapq
import itertools

from terrainpath.search.cells import Cell
from terrainpath.search.graph import NeighborGraph
from terrainpath.search.grid import Terrain, WeightedGrid
from terrainpath.search.heuristic import (
    DIAGONAL_COST,
    LINEAR_COST,
    is_admissible_for,
    octile_distance,
)


def test_octile_distance_values() -> None:
    assert octile_distance(Cell(0, 0), Cell(0, 0)) == 0
    assert octile_distance(Cell(0, 0), Cell(3, 0)) == 3 * LINEAR_COST
    assert octile_distance(Cell(0, 0), Cell(2, 2)) == 2 * DIAGONAL_COST
    assert octile_distance(Cell(7, 5), Cell(3, 3)) == 2 * DIAGONAL_COST + 2 * LINEAR_COST
    assert octile_distance(Cell(1, 4), Cell(4, 1)) == octile_distance(Cell(4, 1), Cell(1, 4))


def test_heuristic_never_exceeds_cost_on_standard_terrain() -> None:
    rows = [
        [50, 150, 1000, 50, 50],
        [50, 1000, 1000, 150, 50],
        [150, 50, 50, 50, 1000],
        [50, 50, 150, 1000, 50],
    ]
    grid = WeightedGrid(rows)
    assert is_admissible_for(grid)

    for start, goal in itertools.product(list(grid.cells()), repeat=2):
        assert octile_distance(start, goal) <= _cheapest(grid, start)[goal]


def test_road_weights_fall_below_heuristic_scale() -> None:
    grid = WeightedGrid.filled(3, 3, Terrain.ROAD.weight)

    assert not is_admissible_for(grid)
    assert octile_distance(Cell(0, 0), Cell(2, 2)) > _cheapest(grid, Cell(0, 0))[Cell(2, 2)]


def _cheapest(grid: WeightedGrid, start: Cell) -> dict[Cell, int]:
    graph = NeighborGraph.from_grid(grid)
    best = {start: 0}
    queue = [(0, start)]
    while queue:
        cost, cell = heapq.heappop(queue)
        if cost > best[cell]:
            continue
        for neighbor in graph.neighbors(cell):
            candidate = cost + grid.weight(neighbor)
            if neighbor not in best or candidate < best[neighbor]:
                best[neighbor] = candidate
                heapq.heappush(queue, (candidate, neighbor))
    return best
