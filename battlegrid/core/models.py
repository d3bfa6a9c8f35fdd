"""Core domain models used by board logic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

DEFAULT_BOARD_DIMENSION = 10

TileState: TypeAlias = int | None
GridSnapshot: TypeAlias = list[list[TileState]]


class AttackResult(StrEnum):
    """Result of a single attack."""

    HIT = "HIT"
    MISS = "MISS"


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate, addressed as ``grid[x][y]``."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class ShipSpan:
    """Inclusive rectangle covered by a ship, normalized to ascending corners."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def between(cls, start: Coord, end: Coord) -> ShipSpan:
        return cls(
            min_x=min(start.x, end.x),
            min_y=min(start.y, end.y),
            max_x=max(start.x, end.x),
            max_y=max(start.y, end.y),
        )

    @property
    def rows(self) -> slice:
        return slice(self.min_x, self.max_x + 1)

    @property
    def cols(self) -> slice:
        return slice(self.min_y, self.max_y + 1)

    def cells(self) -> list[Coord]:
        """Compute covered cells in grid iteration order."""
        return [
            Coord(x, y)
            for x in range(self.min_x, self.max_x + 1)
            for y in range(self.min_y, self.max_y + 1)
        ]


def is_straight_line(start: Coord, end: Coord) -> bool:
    """Return whether two points share a row or a column."""
    return start.x == end.x or start.y == end.y
