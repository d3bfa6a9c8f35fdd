from __future__ import annotations

import logging

import pytest

from battlegrid.core.board import Board
from battlegrid.infra.logging import shutdown_logging


@pytest.fixture
def board() -> Board:
    return Board(3)


@pytest.fixture
def three_ship_board() -> Board:
    board = Board(3)
    board.add_ship(0, 0, 0, 2)
    board.add_ship(1, 0, 2, 0)
    board.add_ship(1, 1, 2, 1)
    return board


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    shutdown_logging()
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)
