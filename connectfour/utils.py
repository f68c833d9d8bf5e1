"""
utils.py - Constants, enumerations and helper functions for the engine

Besides the shared enums this module holds a brute-force line scanner.
The engine never uses it to decide a game; it is the slow reference the
incremental win check is measured against.
"""

from enum import Enum, auto
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

# Game constants
ROWS = 6
COLS = 7
CONNECT_N = 4  # Number of discs in a row to win

EMPTY = 0  # Grid code of an empty cell


class Player(Enum):
    """The two players. The value is the code stored in the grid."""
    ONE = 1    # First player
    TWO = 2    # Second player

    def opponent(self) -> 'Player':
        """Get the other player."""
        return Player.TWO if self is Player.ONE else Player.ONE

    @classmethod
    def from_cell(cls, code: int) -> Optional['Player']:
        """Map a grid code back to a player, or None for an empty cell."""
        code = int(code)
        if code == EMPTY:
            return None
        return cls(code)

    def __str__(self):
        return "Player 1" if self is Player.ONE else "Player 2"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def for_winner(cls, player: Player) -> 'GameResult':
        return cls.PLAYER_ONE_WIN if player is Player.ONE else cls.PLAYER_TWO_WIN


class Direction(Enum):
    """The four line directions a win can run along."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL = auto()  # top-left to bottom-right
    ANTI_DIAGONAL = auto()  # top-right to bottom-left


# (row, col) step for each direction; rows grow downwards
DIRECTION_VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL: (1, 1),
    Direction.ANTI_DIAGONAL: (1, -1),
}


def is_valid_position(row: int, col: int, rows: int = ROWS, cols: int = COLS) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        row: Row index
        col: Column index
        rows: Number of rows on the board
        cols: Number of columns on the board

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= row < rows and 0 <= col < cols


def find_lines(grid: np.ndarray, connect_n: int = CONNECT_N) -> List[Tuple[Player, List[Tuple[int, int]]]]:
    """
    Scan the whole grid for runs of ``connect_n`` equal, occupied cells.

    Every starting cell is tried in every direction, so this is
    O(rows * cols) per call.

    Args:
        grid: 2D array of cell codes
        connect_n: Length of a winning run

    Returns:
        (player, cells) for each run found, in scan order
    """
    rows, cols = grid.shape
    lines = []

    for row in range(rows):
        for col in range(cols):
            code = grid[row, col]
            if code == EMPTY:
                continue

            for dr, dc in DIRECTION_VECTORS.values():
                end_row = row + dr * (connect_n - 1)
                end_col = col + dc * (connect_n - 1)
                if not is_valid_position(end_row, end_col, rows, cols):
                    continue

                cells = [(row + dr * i, col + dc * i) for i in range(connect_n)]
                if all(grid[r, c] == code for r, c in cells):
                    lines.append((Player(int(code)), cells))

    return lines


def players_with_lines(grid: np.ndarray, connect_n: int = CONNECT_N) -> Set[Player]:
    """Return every player that owns at least one complete run on the grid."""
    return {player for player, _ in find_lines(grid, connect_n)}
