"""Grid snapshot persistence (JSON)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from terrainpath.search.contracts import SNAPSHOT_VERSION, GridSnapshot
from terrainpath.search.state import GridState

logger = logging.getLogger(__name__)

SNAPSHOT_NAME = "grid.json"


@dataclass(frozen=True)
class StorePaths:
    base_dir: Path = Path("data")

    @property
    def snapshot_json(self) -> Path:
        return self.base_dir / SNAPSHOT_NAME


def save_snapshot(path: Path, state: GridState) -> None:
    payload = state.to_snapshot().model_dump(by_alias=True)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        handle.write(json.dumps(payload))
        handle.write("\n")
    logger.debug("Saved %dx%d grid to %s", state.grid.width, state.grid.height, path)


def load_snapshot(path: Path) -> GridState | None:
    """Load a saved grid, discarding files that are unreadable or outdated."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        return _discard(path, f"invalid JSON ({exc.msg})")

    if not isinstance(raw, dict) or raw.get("version") != SNAPSHOT_VERSION:
        return _discard(path, "unsupported snapshot version")

    try:
        snapshot = GridSnapshot.model_validate(raw)
    except ValidationError as exc:
        return _discard(path, f"{exc.error_count()} validation error(s)")
    return GridState.from_snapshot(snapshot)


def _discard(path: Path, reason: str) -> None:
    logger.warning("Discarding grid snapshot %s: %s", path, reason)
    path.unlink(missing_ok=True)
    return None
