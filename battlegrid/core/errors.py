"""Board input validation errors."""

from __future__ import annotations

from battlegrid.core.models import Coord


class BoardError(ValueError):
    """Base class for rejected board operations."""


class InvalidDimensionError(BoardError):
    """Board was constructed with an unusable dimension."""

    def __init__(self, dimension: object) -> None:
        self.dimension = dimension
        super().__init__(f"Board dimension must be a positive integer, got {dimension!r}.")


class InvalidCoordinateError(BoardError):
    """A coordinate is not an integer."""

    def __init__(self, x: object, y: object) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Point ({x!r}, {y!r}) is not an integer coordinate.")


class OutOfBoundsError(BoardError):
    """A coordinate lies outside ``[0, dimension)`` on either axis."""

    def __init__(self, point: Coord) -> None:
        self.point = point
        super().__init__(f"Point {point} is outside board.")


class NotStraightLineError(BoardError):
    """Ship corners share neither a row nor a column."""

    def __init__(self, start: Coord, end: Coord) -> None:
        self.start = start
        self.end = end
        super().__init__("The position of the battleship needs to be at straight line position.")


class SpaceOccupiedError(BoardError):
    """Part of the requested span already holds a ship.

    ``start`` and ``end`` keep the order the caller passed them in.
    """

    def __init__(self, start: Coord, end: Coord) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Can not add a battleship from {start} to {end} because the space is occupied."
        )
