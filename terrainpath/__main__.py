"""Module entry point for `python -m terrainpath`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from terrainpath.app import GridEdits, run_grid
from terrainpath.search.cells import Cell
from terrainpath.search.errors import GridError
from terrainpath.search.grid import Terrain


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        edits = GridEdits(
            size=_parse_size(args.size) if args.size else None,
            reset=args.reset,
            paint=[_parse_paint(raw) for raw in args.paint],
            start=Cell.parse(args.start) if args.start else None,
            end=Cell.parse(args.end) if args.end else None,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        run_grid(
            args.store,
            edits=edits,
            solve=args.solve,
            strict=args.strict,
            show_scores=args.show_scores,
        )
    except GridError as exc:
        raise SystemExit(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Edit a weighted grid and find its cheapest path with A*."
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=None,
        help="Grid snapshot file (defaults to $TERRAINPATH_STORE or data/grid.json).",
    )
    parser.add_argument(
        "--size",
        default=None,
        help=(
            "Replace the grid with a fresh WIDTHxHEIGHT grid of Grass. "
            "Pass --start/--end or --reset when the current endpoints do not fit."
        ),
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Fill the grid with Grass and restore the default endpoints.",
    )
    parser.add_argument(
        "--paint",
        action="append",
        default=[],
        metavar="X,Y=TERRAIN",
        help="Set a cell's terrain (Road, Grass, Swamp, Mountain). Repeatable.",
    )
    parser.add_argument("--start", default=None, metavar="X,Y", help="Move the start cell.")
    parser.add_argument("--end", default=None, metavar="X,Y", help="Move the end cell.")
    parser.add_argument(
        "--solve",
        action="store_true",
        help="Run the search and draw the path.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Never relax neighbors that were already expanded.",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print the g/h/f score table after solving.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _parse_size(raw: str) -> tuple[int, int]:
    parts = raw.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Expected WIDTHxHEIGHT, got {raw!r}.")
    return int(parts[0]), int(parts[1])


def _parse_paint(raw: str) -> tuple[Cell, Terrain]:
    coords, sep, terrain = raw.partition("=")
    if not sep:
        raise ValueError(f"Expected X,Y=TERRAIN, got {raw!r}.")
    return Cell.parse(coords), Terrain.parse(terrain)


if __name__ == "__main__":
    main()
