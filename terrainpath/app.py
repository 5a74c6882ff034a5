"""Application entry for editing and solving a stored grid."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from rich.console import Console

from terrainpath.db.grid_store import StorePaths, load_snapshot, save_snapshot
from terrainpath.render.grid_view import (
    render_grid,
    render_legend,
    render_result,
    render_scores,
)
from terrainpath.search.cells import Cell
from terrainpath.search.engine import RelaxationStep
from terrainpath.search.grid import Terrain
from terrainpath.search.result import PathResult
from terrainpath.search.state import GridState

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = StorePaths().snapshot_json
DEFAULT_SCORE_ROWS = 20


@dataclass
class GridEdits:
    size: tuple[int, int] | None = None
    reset: bool = False
    paint: list[tuple[Cell, Terrain]] = field(default_factory=list)
    start: Cell | None = None
    end: Cell | None = None

    @property
    def any(self) -> bool:
        return bool(
            self.size or self.reset or self.paint or self.start or self.end
        )


class ScoreRecorder:
    """Relaxation observer that keeps the latest score maps."""

    def __init__(self) -> None:
        self.g_score: Mapping[Cell, int] = {}
        self.f_score: Mapping[Cell, int] = {}
        self.steps = 0

    def __call__(self, step: RelaxationStep) -> bool:
        self.steps += 1
        self.g_score = step.g_score
        self.f_score = step.f_score
        return False


def resolve_store_path(store: Path | None) -> Path:
    if store is not None:
        return store
    env_value = os.getenv("TERRAINPATH_STORE")
    return Path(env_value) if env_value else DEFAULT_STORE_PATH


def load_state(store_path: Path) -> GridState:
    state = load_snapshot(store_path)
    if state is None:
        logger.info("No saved grid at %s; starting from defaults", store_path)
        return GridState()
    return state


def apply_edits(state: GridState, edits: GridEdits) -> None:
    if edits.reset:
        state.reset(*(edits.size or (None, None)))
    elif edits.size is not None:
        state.resize(*edits.size, start=edits.start, end=edits.end)
    if edits.start is not None:
        state.move_start(edits.start)
    if edits.end is not None:
        state.move_end(edits.end)
    for cell, terrain in edits.paint:
        state.paint(cell, terrain)


def run_grid(
    store: Path | None = None,
    *,
    edits: GridEdits | None = None,
    solve: bool = False,
    strict: bool = False,
    show_scores: bool = False,
    console: Console | None = None,
) -> PathResult | None:
    console = console or Console()
    store_path = resolve_store_path(store)
    state = load_state(store_path)

    if edits is not None and edits.any:
        apply_edits(state, edits)
        save_snapshot(store_path, state)

    if not solve:
        console.print(render_grid(state))
        console.print(render_legend())
        return None

    recorder = ScoreRecorder() if show_scores else None
    result = state.solve(observer=recorder, strict=strict)
    console.print(render_grid(state, path=result.path))
    console.print(render_result(result))
    if recorder is not None:
        console.print(
            render_scores(
                recorder.g_score, recorder.f_score, max_rows=DEFAULT_SCORE_ROWS
            )
        )
    return result
