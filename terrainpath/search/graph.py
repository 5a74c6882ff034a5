"""8-connected neighbor graph derived from grid dimensions."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from terrainpath.search.cells import NEIGHBOR_OFFSETS, Cell
from terrainpath.search.errors import EmptyGrid, GraphInvariantError, InvalidCell
from terrainpath.search.grid import WeightedGrid


class NeighborGraph:
    """Adjacency over grid cells. Edges carry no weight; the search reads the
    destination cell's weight at traversal time."""

    def __init__(self, adjacency: Mapping[Cell, Iterable[Cell]]) -> None:
        self._adjacency: dict[Cell, tuple[Cell, ...]] = {
            cell: tuple(neighbors) for cell, neighbors in adjacency.items()
        }

    @classmethod
    def from_grid(cls, grid: WeightedGrid) -> "NeighborGraph":
        return cls.from_dimensions(grid.width, grid.height)

    @classmethod
    def from_dimensions(cls, width: int, height: int) -> "NeighborGraph":
        if width <= 0 or height <= 0:
            raise EmptyGrid(f"Grid size {width}x{height} has zero area.")
        adjacency: dict[Cell, list[Cell]] = {}
        for y in range(height):
            for x in range(width):
                neighbors = []
                for dx, dy in NEIGHBOR_OFFSETS:
                    xx = x + dx
                    yy = y + dy
                    if xx < 0 or xx >= width or yy < 0 or yy >= height:
                        continue
                    neighbors.append(Cell(xx, yy))
                adjacency[Cell(x, y)] = neighbors
        return cls(adjacency)

    def without(self, cells: Iterable[Cell]) -> "NeighborGraph":
        """Return a sparse copy with ``cells`` removed from nodes and edges."""
        removed = set(cells)
        return NeighborGraph(
            {
                cell: [n for n in neighbors if n not in removed]
                for cell, neighbors in self._adjacency.items()
                if cell not in removed
            }
        )

    def neighbors(self, cell: Cell) -> tuple[Cell, ...]:
        try:
            return self._adjacency[cell]
        except KeyError:
            raise InvalidCell(f"Cell {cell} is not part of the graph.") from None

    def check_against(self, grid: WeightedGrid) -> None:
        for cell, neighbors in self._adjacency.items():
            if not grid.contains(cell):
                raise GraphInvariantError(f"Graph node {cell} lies outside the grid.")
            for neighbor in neighbors:
                if not grid.contains(neighbor):
                    raise GraphInvariantError(
                        f"Neighbor {neighbor} of {cell} lies outside the grid."
                    )

    def __contains__(self, cell: object) -> bool:
        return cell in self._adjacency

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)
