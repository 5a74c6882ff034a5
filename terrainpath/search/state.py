"""Editable grid and endpoint state owned by the caller."""

from __future__ import annotations

from dataclasses import dataclass, field

from terrainpath.search.cells import Cell
from terrainpath.search.contracts import SNAPSHOT_VERSION, CellModel, GridSnapshot
from terrainpath.search.engine import AStarSearch, Observer
from terrainpath.search.errors import OutOfBounds
from terrainpath.search.graph import NeighborGraph
from terrainpath.search.grid import Terrain, WeightedGrid
from terrainpath.search.result import PathResult

DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 20
DEFAULT_TERRAIN = Terrain.GRASS
DEFAULT_START = Cell(7, 5)
DEFAULT_END = Cell(3, 3)


def _default_grid() -> WeightedGrid:
    return WeightedGrid.filled(DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_TERRAIN.weight)


@dataclass
class GridState:
    grid: WeightedGrid = field(default_factory=_default_grid)
    start: Cell = DEFAULT_START
    end: Cell = DEFAULT_END

    def __post_init__(self) -> None:
        self._require(self.start)
        self._require(self.end)

    def paint(self, cell: Cell, terrain: Terrain) -> None:
        self._require(cell)
        self.grid.set_weight(cell, terrain.weight)

    def move_start(self, cell: Cell) -> None:
        self._require(cell)
        self.start = cell

    def move_end(self, cell: Cell) -> None:
        self._require(cell)
        self.end = cell

    def reset(self, width: int | None = None, height: int | None = None) -> None:
        """Fill with Grass and restore the default endpoints, optionally resizing."""
        width = self.grid.width if width is None else width
        height = self.grid.height if height is None else height
        self.grid = WeightedGrid.filled(width, height, DEFAULT_TERRAIN.weight)
        self.start = _clip_default(DEFAULT_START, self.grid)
        self.end = _clip_default(DEFAULT_END, self.grid)

    def resize(
        self,
        width: int,
        height: int,
        *,
        start: Cell | None = None,
        end: Cell | None = None,
    ) -> None:
        """Replace the grid with a fresh one; endpoints must fit the new size."""
        grid = WeightedGrid.filled(width, height, DEFAULT_TERRAIN.weight)
        start = start or self.start
        end = end or self.end
        for cell in (start, end):
            if not grid.contains(cell):
                raise OutOfBounds(
                    f"Endpoint {cell} does not fit in a {width}x{height} grid."
                )
        self.grid = grid
        self.start = start
        self.end = end

    def solve(
        self, *, observer: Observer | None = None, strict: bool = False
    ) -> PathResult:
        grid = self.grid.copy()
        search = AStarSearch(grid, NeighborGraph.from_grid(grid), strict=strict)
        return search.run(self.start, self.end, observer=observer)

    def to_snapshot(self) -> GridSnapshot:
        return GridSnapshot(
            version=SNAPSHOT_VERSION,
            start_node=CellModel(**self.start.as_dict()),
            end_node=CellModel(**self.end.as_dict()),
            grid=self.grid.rows(),
        )

    @classmethod
    def from_snapshot(cls, snapshot: GridSnapshot) -> "GridState":
        return cls(
            grid=WeightedGrid(snapshot.grid),
            start=Cell(snapshot.start_node.x, snapshot.start_node.y),
            end=Cell(snapshot.end_node.x, snapshot.end_node.y),
        )

    def _require(self, cell: Cell) -> None:
        if not self.grid.contains(cell):
            raise OutOfBounds(
                f"Cell {cell} is outside the {self.grid.width}x{self.grid.height} grid."
            )


def _clip_default(cell: Cell, grid: WeightedGrid) -> Cell:
    # Small grids cannot hold the default endpoints.
    if grid.contains(cell):
        return cell
    return Cell(min(cell.x, grid.width - 1), min(cell.y, grid.height - 1))
