"""Board state representation and mutation helpers."""

from __future__ import annotations

import logging
import operator

import numpy as np

from battlegrid.core.errors import (
    InvalidCoordinateError,
    InvalidDimensionError,
    NotStraightLineError,
    OutOfBoundsError,
    SpaceOccupiedError,
)
from battlegrid.core.models import (
    AttackResult,
    Coord,
    GridSnapshot,
    ShipSpan,
    is_straight_line,
)
from battlegrid.infra.config import load_board_settings, load_default_env_files

logger = logging.getLogger(__name__)


class Board:
    """Numpy-backed N×N ship grid with destruction bookkeeping.

    Tiles keep their ship id after the ship is destroyed; destruction is
    tracked separately so the owner of any tile can still be looked up.
    """

    def __init__(self, dimension: int) -> None:
        dimension = _positive_dimension(dimension)
        self._dimension = dimension
        self._ships = np.zeros((dimension, dimension), dtype=np.int64)
        self._occupied = np.zeros((dimension, dimension), dtype=np.bool_)
        self._destroyed: set[int] = set()
        self._ship_count = 0
        self._next_ship_id = 1

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def ship_count(self) -> int:
        """Number of ships successfully placed."""
        return self._ship_count

    @property
    def destroyed_ship_ids(self) -> frozenset[int]:
        return frozenset(self._destroyed)

    @property
    def surviving_ship_count(self) -> int:
        return self._ship_count - len(self._destroyed)

    def in_bounds(self, x: int, y: int) -> bool:
        """Return whether the point lies inside the board."""
        return 0 <= x < self._dimension and 0 <= y < self._dimension

    def get_state(self) -> GridSnapshot:
        """Return a detached copy of the grid; ``None`` marks an empty tile."""
        return [
            [ship_id if occupied else None for ship_id, occupied in zip(id_row, mask_row)]
            for id_row, mask_row in zip(self._ships.tolist(), self._occupied.tolist())
        ]

    def ship_at(self, x: int, y: int) -> int | None:
        """Return the id of the ship on a tile, destroyed or not."""
        point = self._require_in_bounds(x, y)
        if not self._occupied[point.x, point.y]:
            return None
        return int(self._ships[point.x, point.y])

    def is_destroyed(self, ship_id: int) -> bool:
        return ship_id in self._destroyed

    def add_ship(self, start_x: int, start_y: int, end_x: int, end_y: int) -> int:
        """Place a ship covering the inclusive line between two points.

        A single-tile ship is placed by passing the same point twice.
        Returns the id minted for the new ship. Validation runs to completion
        before the grid is touched, so a rejected call leaves no trace.
        """
        start = self._require_in_bounds(start_x, start_y)
        end = self._require_in_bounds(end_x, end_y)
        if not is_straight_line(start, end):
            logger.debug("ship_rejected reason=not_straight start=%s end=%s", start, end)
            raise NotStraightLineError(start, end)

        span = ShipSpan.between(start, end)
        if not self._is_empty(span):
            logger.debug("ship_rejected reason=occupied start=%s end=%s", start, end)
            raise SpaceOccupiedError(start, end)

        ship_id = self._next_ship_id
        self._ships[span.rows, span.cols] = ship_id
        self._occupied[span.rows, span.cols] = True
        self._next_ship_id += 1
        self._ship_count += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "ship_added ship_id=%d start=%s end=%s cells=%s",
                ship_id,
                start,
                end,
                ",".join(str(cell) for cell in span.cells()),
            )
        return ship_id

    def attack(self, x: int, y: int) -> AttackResult:
        """Attack one tile.

        The first hit on any tile of a ship destroys it; every later attack on
        that ship, and every attack on empty water, is a miss.
        """
        target = self._require_in_bounds(x, y)
        if not self._occupied[target.x, target.y]:
            logger.debug("attack target=%s result=%s", target, AttackResult.MISS.value)
            return AttackResult.MISS

        ship_id = int(self._ships[target.x, target.y])
        if ship_id in self._destroyed:
            logger.debug(
                "attack target=%s result=%s ship_id=%d already_destroyed",
                target,
                AttackResult.MISS.value,
                ship_id,
            )
            return AttackResult.MISS

        self._destroyed.add(ship_id)
        logger.debug("attack target=%s result=%s ship_id=%d", target, AttackResult.HIT.value, ship_id)
        if self.has_lost():
            logger.info("board_lost ships=%d", self._ship_count)
        return AttackResult.HIT

    def has_lost(self) -> bool:
        """Return whether every placed ship has been destroyed.

        A board without ships has not lost.
        """
        return self._ship_count > 0 and len(self._destroyed) == self._ship_count

    def _require_in_bounds(self, x: int, y: int) -> Coord:
        try:
            point = Coord(operator.index(x), operator.index(y))
        except TypeError:
            raise InvalidCoordinateError(x, y) from None
        if not self.in_bounds(point.x, point.y):
            raise OutOfBoundsError(point)
        return point

    def _is_empty(self, span: ShipSpan) -> bool:
        return not bool(self._occupied[span.rows, span.cols].any())


def create_board(dimension: int | None = None, *, load_env: bool = False) -> Board:
    """Create a board, falling back to the configured default dimension.

    With ``load_env`` the default env files are loaded first, without
    overriding variables already set in the process.
    """
    if dimension is None:
        if load_env:
            load_default_env_files(override_existing=False)
        dimension = load_board_settings().dimension
    return Board(dimension)


def _positive_dimension(dimension: object) -> int:
    if isinstance(dimension, bool):
        raise InvalidDimensionError(dimension)
    try:
        value = operator.index(dimension)
    except TypeError:
        raise InvalidDimensionError(dimension) from None
    if value <= 0:
        raise InvalidDimensionError(dimension)
    return value
