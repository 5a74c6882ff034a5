"""Weighted terrain grid."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, Sequence

from terrainpath.search.cells import Cell
from terrainpath.search.errors import EmptyGrid, InvalidGrid, InvalidWeight, OutOfBounds


class Terrain(str, Enum):
    ROAD = "Road"
    GRASS = "Grass"
    SWAMP = "Swamp"
    MOUNTAIN = "Mountain"

    @property
    def weight(self) -> int:
        return TERRAIN_WEIGHTS[self]

    @classmethod
    def parse(cls, raw: str) -> "Terrain":
        for terrain in cls:
            if terrain.value.lower() == raw.strip().lower():
                return terrain
        names = ", ".join(terrain.value for terrain in cls)
        raise ValueError(f"Unknown terrain {raw!r}; expected one of {names}.")


TERRAIN_WEIGHTS: dict[Terrain, int] = {
    Terrain.ROAD: 10,
    Terrain.GRASS: 50,
    Terrain.SWAMP: 150,
    Terrain.MOUNTAIN: 1000,
}


def terrain_for_weight(weight: int) -> Terrain | None:
    for terrain, value in TERRAIN_WEIGHTS.items():
        if value == weight:
            return terrain
    return None


class WeightedGrid:
    """Rectangular table of positive traversal costs, indexed ``[y][x]``.

    A cell's weight is charged to every move that lands on it. The search
    only reads the grid; edits go through :meth:`set_weight`.
    """

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        if not rows or not rows[0]:
            raise EmptyGrid("Grid must have at least one row and one column.")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidGrid(
                    f"Row {y} has {len(row)} cells; expected {width}."
                )
            for x, weight in enumerate(row):
                _check_weight(weight, Cell(x, y))
        self._rows = [list(row) for row in rows]
        self.width = width
        self.height = len(rows)

    @classmethod
    def filled(cls, width: int, height: int, weight: int) -> "WeightedGrid":
        if width <= 0 or height <= 0:
            raise EmptyGrid(f"Grid size {width}x{height} has zero area.")
        return cls([[weight] * width for _ in range(height)])

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "WeightedGrid":
        return cls([list(row) for row in rows])

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def weight(self, cell: Cell) -> int:
        self._require(cell)
        return self._rows[cell.y][cell.x]

    def set_weight(self, cell: Cell, weight: int) -> None:
        self._require(cell)
        _check_weight(weight, cell)
        self._rows[cell.y][cell.x] = weight

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)

    def rows(self) -> list[list[int]]:
        return [list(row) for row in self._rows]

    def copy(self) -> "WeightedGrid":
        return WeightedGrid(self._rows)

    def min_weight(self) -> int:
        return min(min(row) for row in self._rows)

    def path_cost(self, path: Sequence[Cell]) -> int:
        """Sum of destination weights along ``path`` (the first cell is free)."""
        return sum(self.weight(cell) for cell in path[1:])

    def _require(self, cell: Cell) -> None:
        if not self.contains(cell):
            raise OutOfBounds(
                f"Cell {cell} is outside the {self.width}x{self.height} grid."
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightedGrid):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        return f"WeightedGrid(width={self.width}, height={self.height})"


def _check_weight(weight: int, cell: Cell) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidWeight(f"Weight at {cell} must be an integer, got {weight!r}.")
    if weight <= 0:
        raise InvalidWeight(f"Weight at {cell} must be positive, got {weight}.")
