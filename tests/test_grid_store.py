import json
from pathlib import Path

from terrainpath.db.grid_store import StorePaths, load_snapshot, save_snapshot
from terrainpath.search.cells import Cell
from terrainpath.search.grid import Terrain, WeightedGrid
from terrainpath.search.state import GridState


def test_save_and_load(tmp_path: Path) -> None:
    path = StorePaths(base_dir=tmp_path).snapshot_json
    state = GridState(grid=WeightedGrid.filled(4, 3, 50), start=Cell(1, 1), end=Cell(3, 2))
    state.paint(Cell(2, 2), Terrain.MOUNTAIN)

    save_snapshot(path, state)
    loaded = load_snapshot(path)

    assert path.name == "grid.json"
    assert loaded is not None
    assert loaded.grid == state.grid
    assert loaded.start == Cell(1, 1)
    assert loaded.end == Cell(3, 2)
    record = json.loads(path.read_text(encoding="utf-8"))
    assert set(record) == {"version", "startNode", "endNode", "grid"}


def test_missing_file_returns_none(tmp_path: Path) -> None:
    assert load_snapshot(tmp_path / "absent.json") is None


def test_outdated_version_is_discarded(tmp_path: Path) -> None:
    path = tmp_path / "grid.json"
    path.write_text(
        json.dumps(
            {
                "version": 0,
                "startNode": {"x": 0, "y": 0},
                "endNode": {"x": 0, "y": 0},
                "grid": [[50]],
            }
        ),
        encoding="utf-8",
    )

    assert load_snapshot(path) is None
    assert not path.exists()


def test_corrupt_payloads_are_discarded(tmp_path: Path, caplog) -> None:
    broken_json = tmp_path / "broken.json"
    broken_json.write_text("{not json", encoding="utf-8")
    bad_grid = tmp_path / "bad.json"
    bad_grid.write_text(
        json.dumps(
            {
                "version": 1,
                "startNode": {"x": 4, "y": 0},
                "endNode": {"x": 0, "y": 0},
                "grid": [[50, 50], [50]],
            }
        ),
        encoding="utf-8",
    )

    assert load_snapshot(broken_json) is None
    assert load_snapshot(bad_grid) is None
    assert not broken_json.exists()
    assert not bad_grid.exists()
    assert "Discarding grid snapshot" in caplog.text
