"""Rich rendering for grids, paths and search scores."""

from __future__ import annotations

import math
from typing import Iterable, Mapping

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from terrainpath.search.cells import Cell
from terrainpath.search.grid import Terrain, terrain_for_weight
from terrainpath.search.result import PathResult
from terrainpath.search.state import GridState

TERRAIN_STYLES = {
    Terrain.ROAD: "gold1",
    Terrain.GRASS: "light_green",
    Terrain.SWAMP: "dark_orange3",
    Terrain.MOUNTAIN: "grey50",
}

TERRAIN_GLYPHS = {
    Terrain.ROAD: "=",
    Terrain.GRASS: ",",
    Terrain.SWAMP: "~",
    Terrain.MOUNTAIN: "^",
}

UNKNOWN_GLYPH = "?"
UNKNOWN_STYLE = "white"
START_STYLE = "bold red"
END_STYLE = "bold blue"
PATH_STYLE = "bold dodger_blue1"
INFINITY = "∞"


def render_grid_lines(
    state: GridState, *, path: Iterable[Cell] | None = None
) -> list[Text]:
    on_path = set(path or ())
    lines: list[Text] = []
    for y in range(state.grid.height):
        line = Text()
        for x in range(state.grid.width):
            cell = Cell(x, y)
            if cell == state.start:
                line.append("S", style=START_STYLE)
            elif cell == state.end:
                line.append("E", style=END_STYLE)
            elif cell in on_path:
                line.append("*", style=PATH_STYLE)
            else:
                terrain = terrain_for_weight(state.grid.weight(cell))
                if terrain is None:
                    line.append(UNKNOWN_GLYPH, style=UNKNOWN_STYLE)
                else:
                    line.append(TERRAIN_GLYPHS[terrain], style=TERRAIN_STYLES[terrain])
        lines.append(line)
    return lines


def render_grid(state: GridState, *, path: Iterable[Cell] | None = None) -> RenderableType:
    title = f"Grid {state.grid.width}x{state.grid.height}"
    return Panel(Group(*render_grid_lines(state, path=path)), title=title, expand=False)


def render_legend() -> RenderableType:
    table = Table(title="Legend", show_header=True, header_style="bold")
    table.add_column("Glyph")
    table.add_column("Terrain")
    table.add_column("Weight", justify="right")
    for terrain in Terrain:
        table.add_row(
            Text(TERRAIN_GLYPHS[terrain], style=TERRAIN_STYLES[terrain]),
            terrain.value,
            str(terrain.weight),
        )
    return table


def render_result(result: PathResult) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Status", result.status.value)
    if result.is_found:
        path = result.path or ()
        table.add_row("Cost", str(result.cost))
        table.add_row("Steps", str(len(path) - 1))
        table.add_row("Path", " -> ".join(str(cell) for cell in path))
    else:
        table.add_row("Path", "None")
    table.add_row("Expanded", str(result.stats.expanded))
    table.add_row("Relaxations", str(result.stats.relaxations))
    return Panel(table, title="Search Result")


def render_scores(
    g_score: Mapping[Cell, float],
    f_score: Mapping[Cell, float],
    *,
    max_rows: int | None = None,
) -> RenderableType:
    """Table of h, g and f for every scored cell, lowest f first."""
    table = Table(title="Scores", show_header=True, header_style="bold")
    table.add_column("Cell")
    table.add_column("h", justify="right")
    table.add_column("g", justify="right")
    table.add_column("f", justify="right")

    scored = [cell for cell, f in f_score.items() if f != math.inf]
    scored.sort(key=lambda cell: (f_score[cell], cell))
    if max_rows is not None:
        scored = scored[:max_rows]
    for cell in scored:
        f = f_score[cell]
        g = g_score.get(cell, math.inf)
        table.add_row(str(cell), _format_score(f - g), _format_score(g), _format_score(f))
    if not scored:
        table.add_row("-", "-", "-", "-")
    return table


def _format_score(value: float) -> str:
    if value == math.inf or math.isnan(value):
        return INFINITY
    return str(int(value))
