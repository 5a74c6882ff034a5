"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
)


@dataclass(frozen=True, order=True)
class Cell:
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Cell":
        return Cell(self.x + dx, self.y + dy)

    def as_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def parse(cls, raw: str) -> "Cell":
        """Parse ``"x,y"`` into a cell."""
        parts = raw.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected X,Y coordinates, got {raw!r}.")
        return cls(int(parts[0].strip()), int(parts[1].strip()))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
