"""Persisted grid snapshot contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

SNAPSHOT_VERSION = 1


class CellModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: int = Field(ge=0)
    y: int = Field(ge=0)


class GridSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    version: int
    start_node: CellModel = Field(alias="startNode")
    end_node: CellModel = Field(alias="endNode")
    grid: list[list[int]]

    @model_validator(mode="after")
    def validate_grid(self) -> "GridSnapshot":
        if not self.grid or not self.grid[0]:
            raise ValueError("grid must have at least one cell")
        width = len(self.grid[0])
        for row in self.grid:
            if len(row) != width:
                raise ValueError("grid rows must all have the same length")
            if any(weight <= 0 for weight in row):
                raise ValueError("grid weights must be positive")
        height = len(self.grid)
        for node in (self.start_node, self.end_node):
            if node.x >= width or node.y >= height:
                raise ValueError("endpoints must lie inside the grid")
        return self
