"""A* search over a weighted grid."""

from __future__ import annotations

import heapq
import logging
import math
from dataclasses import dataclass, field
from itertools import count
from types import MappingProxyType
from typing import Callable, Mapping

from terrainpath.search.cells import Cell
from terrainpath.search.errors import EmptyGrid, InvalidEndpoint, SearchCancelled
from terrainpath.search.graph import NeighborGraph
from terrainpath.search.grid import WeightedGrid
from terrainpath.search.heuristic import Heuristic, is_admissible_for, octile_distance
from terrainpath.search.result import PathResult, SearchStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RelaxationStep:
    """What an observer sees after each neighbor is examined."""

    current: Cell
    neighbor: Cell
    tentative_g: int
    improved: bool
    g_score: Mapping[Cell, int]
    f_score: Mapping[Cell, int]
    open_size: int
    closed_size: int


# A truthy return value stops the search.
Observer = Callable[[RelaxationStep], object]


@dataclass
class SearchState:
    open: set[Cell] = field(default_factory=set)
    closed: set[Cell] = field(default_factory=set)
    g_score: dict[Cell, int] = field(default_factory=dict)
    f_score: dict[Cell, int] = field(default_factory=dict)
    came_from: dict[Cell, Cell] = field(default_factory=dict)

    def g(self, cell: Cell) -> float:
        return self.g_score.get(cell, math.inf)

    def f(self, cell: Cell) -> float:
        return self.f_score.get(cell, math.inf)


class AStarSearch:
    """Minimum-cost search from one cell to another.

    Moving onto a cell costs that cell's weight; diagonal moves are not
    charged extra. The open set is a binary heap keyed by ``(f, entry)``,
    where ``entry`` counts insertions into the open set, so ties on ``f`` go
    to the cell that entered the open set first. A cell keeps its entry
    number while it stays open and gets a new one if it re-enters.

    By default neighbors already in the closed set are still relaxed and may
    re-enter the open set. ``strict=True`` skips them instead.
    """

    def __init__(
        self,
        grid: WeightedGrid,
        graph: NeighborGraph | None = None,
        *,
        heuristic: Heuristic = octile_distance,
        strict: bool = False,
    ) -> None:
        self._grid = grid
        self._graph = graph if graph is not None else NeighborGraph.from_grid(grid)
        self._graph.check_against(grid)
        self._heuristic = heuristic
        self._strict = strict

    def run(
        self, start: Cell, end: Cell, *, observer: Observer | None = None
    ) -> PathResult:
        if not len(self._graph):
            raise EmptyGrid("Cannot search an empty graph.")
        for label, cell in (("start", start), ("end", end)):
            if cell not in self._graph:
                raise InvalidEndpoint(f"The {label} cell {cell} is not in the graph.")
        if self._heuristic is octile_distance and not is_admissible_for(self._grid):
            logger.warning(
                "Minimum weight %d is below the heuristic's diagonal step; "
                "the returned path may not be optimal.",
                self._grid.min_weight(),
            )

        logger.debug("A* search from %s to %s (strict=%s)", start, end, self._strict)
        state = SearchState()
        heap: list[tuple[int, int, Cell]] = []
        entries = count()
        entry_of: dict[Cell, int] = {}

        def push_open(cell: Cell) -> None:
            if cell not in state.open:
                state.open.add(cell)
                entry_of[cell] = next(entries)
            heapq.heappush(heap, (state.f_score[cell], entry_of[cell], cell))

        state.g_score[start] = 0
        state.f_score[start] = self._heuristic(start, end)
        push_open(start)

        expanded = 0
        relaxations = 0
        improvements = 0
        g_view = MappingProxyType(state.g_score)
        f_view = MappingProxyType(state.f_score)

        while state.open:
            f, entry, current = heapq.heappop(heap)
            if (
                current not in state.open
                or entry_of[current] != entry
                or f != state.f_score[current]
            ):
                continue

            if current == end:
                path = _reconstruct_path(state.came_from, current)
                stats = SearchStats(expanded, relaxations, improvements)
                logger.debug(
                    "Found path of %d cells, cost %s, after %d expansions",
                    len(path),
                    state.g_score[end],
                    expanded,
                )
                return PathResult.found(path, state.g_score[end], stats)

            state.open.discard(current)
            state.closed.add(current)
            expanded += 1

            for neighbor in self._graph.neighbors(current):
                if self._strict and neighbor in state.closed:
                    continue
                relaxations += 1
                tentative = state.g_score[current] + self._grid.weight(neighbor)
                improved = tentative < state.g(neighbor)
                if improved:
                    improvements += 1
                    state.came_from[neighbor] = current
                    state.g_score[neighbor] = tentative
                    state.f_score[neighbor] = tentative + self._heuristic(neighbor, end)
                    push_open(neighbor)
                if observer is None:
                    continue
                step = RelaxationStep(
                    current=current,
                    neighbor=neighbor,
                    tentative_g=tentative,
                    improved=improved,
                    g_score=g_view,
                    f_score=f_view,
                    open_size=len(state.open),
                    closed_size=len(state.closed),
                )
                if observer(step):
                    logger.debug("Search cancelled by observer at %s", current)
                    raise SearchCancelled(
                        f"Search from {start} to {end} was cancelled.",
                        expanded=expanded,
                        relaxations=relaxations,
                    )

        logger.debug("Open set exhausted after %d expansions; no path", expanded)
        return PathResult.not_found(SearchStats(expanded, relaxations, improvements))


def find_path(
    grid: WeightedGrid,
    start: Cell,
    end: Cell,
    *,
    graph: NeighborGraph | None = None,
    observer: Observer | None = None,
    strict: bool = False,
) -> PathResult:
    return AStarSearch(grid, graph, strict=strict).run(start, end, observer=observer)


def _reconstruct_path(came_from: dict[Cell, Cell], current: Cell) -> tuple[Cell, ...]:
    steps = [current]
    while current in came_from:
        current = came_from[current]
        steps.append(current)
    steps.reverse()
    return tuple(steps)
