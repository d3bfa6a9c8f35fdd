"""Ship placement and attack resolution on a square naval combat grid."""

from battlegrid.core.board import Board, create_board
from battlegrid.core.errors import (
    BoardError,
    InvalidCoordinateError,
    InvalidDimensionError,
    NotStraightLineError,
    OutOfBoundsError,
    SpaceOccupiedError,
)
from battlegrid.core.locking import SynchronizedBoard
from battlegrid.core.models import AttackResult, Coord, GridSnapshot, TileState

__all__ = [
    "AttackResult",
    "Board",
    "BoardError",
    "InvalidCoordinateError",
    "Coord",
    "GridSnapshot",
    "InvalidDimensionError",
    "NotStraightLineError",
    "OutOfBoundsError",
    "SpaceOccupiedError",
    "SynchronizedBoard",
    "TileState",
    "create_board",
]
