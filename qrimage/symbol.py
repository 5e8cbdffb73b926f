"""A finished QR symbol: a square grid of dark and light modules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import chain


@dataclass(frozen=True)
class Symbol:
    """A square symbol; ``modules`` holds the grid row by row."""

    version: int
    width: int
    modules: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"Invalid symbol width: {self.width}")
        if len(self.modules) != self.width * self.width:
            raise ValueError("module count does not match the symbol width")

    @classmethod
    def from_rows(cls, version: int, rows: Iterable[Iterable[int]]) -> Symbol:
        """Build a symbol from rows of module values; the low bit marks a dark module."""
        grid = [tuple(bool(int(value) & 1) for value in row) for row in rows]
        if not grid:
            raise ValueError("a symbol needs at least one row")
        width = len(grid)
        if any(len(row) != width for row in grid):
            raise ValueError("a symbol must be square")
        return cls(version, width, tuple(chain.from_iterable(grid)))

    def is_dark(self, x: int, y: int) -> bool:
        """Whether the module in column ``x`` of row ``y`` is dark."""
        if not (0 <= x < self.width and 0 <= y < self.width):
            raise IndexError(f"module ({x}, {y}) is outside the symbol")
        return self.modules[y * self.width + x]

    def rows(self) -> Iterator[tuple[bool, ...]]:
        """Yield the rows of the symbol from top to bottom."""
        for start in range(0, len(self.modules), self.width):
            yield self.modules[start:start + self.width]