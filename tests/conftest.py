"""Shared fixtures for the connectfour tests."""

from typing import Iterable

import numpy as np
import pytest

from connectfour.debug import DebugLevel, debug
from connectfour.game import Board


def play_all(board: Board, columns: Iterable[int]) -> list:
    """Play every column in order and return the landing rows."""
    return [board.play(col) for col in columns]


def pair_fill(a: int, b: int) -> list:
    """Fill two columns so each ends up alternating, with opposite bottoms."""
    return [a, b, b, a] * 3


# Fills a 6x7 board with 21 discs each and no line anywhere.
# Columns 0, 1, 4 and 5 alternate from Player 1 at the bottom,
# columns 2, 3 and 6 from Player 2.
DRAW_SEQUENCE = pair_fill(0, 2) + pair_fill(1, 3) + pair_fill(4, 6) + [5] * 6


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def rng():
    return np.random.default_rng(20240611)


@pytest.fixture(autouse=True)
def quiet_debug():
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[])
    yield
    debug.configure(level=DebugLevel.WARNING, enabled=True, components=[], log_file="")
