"""Thread-safe board wrapper for hosts sharing one board across threads."""

from __future__ import annotations

from threading import Lock

from battlegrid.core.board import Board
from battlegrid.core.models import AttackResult, GridSnapshot


class SynchronizedBoard:
    """Serialize every board operation behind one lock per board."""

    def __init__(self, board: Board) -> None:
        self._board = board
        self._lock = Lock()

    @classmethod
    def create(cls, dimension: int) -> SynchronizedBoard:
        return cls(Board(dimension))

    @property
    def dimension(self) -> int:
        return self._board.dimension

    def get_state(self) -> GridSnapshot:
        with self._lock:
            return self._board.get_state()

    def add_ship(self, start_x: int, start_y: int, end_x: int, end_y: int) -> int:
        with self._lock:
            return self._board.add_ship(start_x, start_y, end_x, end_y)

    def attack(self, x: int, y: int) -> AttackResult:
        with self._lock:
            return self._board.attack(x, y)

    def has_lost(self) -> bool:
        with self._lock:
            return self._board.has_lost()

    def ship_at(self, x: int, y: int) -> int | None:
        with self._lock:
            return self._board.ship_at(x, y)

    def is_destroyed(self, ship_id: int) -> bool:
        with self._lock:
            return self._board.is_destroyed(ship_id)

    def in_bounds(self, x: int, y: int) -> bool:
        return self._board.in_bounds(x, y)

    @property
    def ship_count(self) -> int:
        with self._lock:
            return self._board.ship_count

    @property
    def destroyed_ship_ids(self) -> frozenset[int]:
        with self._lock:
            return self._board.destroyed_ship_ids

    @property
    def surviving_ship_count(self) -> int:
        with self._lock:
            return self._board.surviving_ship_count
