"""Error types raised by the grid and the search engine."""

from __future__ import annotations


class GridError(ValueError):
    """Base class for invalid grid input reported to callers."""


class OutOfBounds(GridError):
    pass


class InvalidCell(GridError):
    pass


class InvalidEndpoint(GridError):
    pass


class EmptyGrid(GridError):
    pass


class InvalidGrid(GridError):
    pass


class InvalidWeight(GridError):
    pass


class SearchCancelled(RuntimeError):
    """Raised when a relaxation observer asks the search to stop."""

    def __init__(self, message: str, *, expanded: int, relaxations: int) -> None:
        super().__init__(message)
        self.expanded = expanded
        self.relaxations = relaxations


class GraphInvariantError(AssertionError):
    """A neighbor relation references a cell outside the grid."""
