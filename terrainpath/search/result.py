"""Search outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from terrainpath.search.cells import Cell


class PathStatus(str, Enum):
    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class SearchStats:
    expanded: int = 0
    relaxations: int = 0
    improvements: int = 0


@dataclass(frozen=True)
class PathResult:
    status: PathStatus
    path: tuple[Cell, ...] | None = None
    cost: int | None = None
    stats: SearchStats = SearchStats()

    @classmethod
    def found(
        cls, path: tuple[Cell, ...], cost: int, stats: SearchStats
    ) -> "PathResult":
        return cls(status=PathStatus.FOUND, path=path, cost=cost, stats=stats)

    @classmethod
    def not_found(cls, stats: SearchStats) -> "PathResult":
        return cls(status=PathStatus.NOT_FOUND, stats=stats)

    @property
    def is_found(self) -> bool:
        return self.status == PathStatus.FOUND

    def __post_init__(self) -> None:
        if self.status == PathStatus.FOUND:
            if not self.path or self.cost is None:
                raise ValueError("FOUND requires a non-empty path and a cost")
        elif self.path is not None or self.cost is not None:
            raise ValueError("NOT_FOUND cannot carry a path or cost")
