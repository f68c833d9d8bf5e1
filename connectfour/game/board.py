"""
board.py - Board state and move rules for Connect Four

This module implements the Board class, which owns the grid, the column
fill counts and the turn state. Every move is checked for a win by
looking only at the runs that pass through the disc just dropped, so the
cost of a move does not depend on the board size.
"""

from typing import List, Optional, Tuple

import numpy as np

from connectfour.debug import debug
from connectfour.exceptions import (ColumnFullError, GameOverError,
                                    InvalidColumnError, OutOfBoundsError)
from connectfour.utils import (COLS, CONNECT_N, DIRECTION_VECTORS, EMPTY, ROWS,
                               GameResult, Player)

Position = Tuple[int, int]

# A run covers the landed disc plus at most this many steps either way
REACH = CONNECT_N - 1


class Board:
    """
    A Connect Four board and the state of the game played on it.

    Row 0 is the top of the grid and discs settle from the last row up.
    The board is the only thing that mutates its state; callers read it
    through the query methods and change it with play() and reset().

    Playing after the game has been decided raises GameOverError. Callers
    that want to keep going must reset() first.
    """

    def __init__(self, rows: int = ROWS, columns: int = COLS):
        """
        Create an empty board.

        Args:
            rows: Number of rows (column capacity)
            columns: Number of columns
        """
        if rows < 1 or columns < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{columns}")

        self._rows = rows
        self._columns = columns
        debug.debug(f"Initializing new {rows}x{columns} Board", "board")
        self.reset()

    def reset(self) -> None:
        """Reset the board to the state of a freshly created one."""
        debug.debug("Resetting board", "board")
        self._grid = np.full((self._rows, self._columns), EMPTY, dtype=np.int8)
        self._fill = [0] * self._columns
        self._current_player = Player.ONE
        self._winner: Optional[Player] = None
        self._turns = 0
        self._moves_made: List[int] = []
        self._last_move: Optional[Position] = None

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Returns:
            A new Board with the same grid and game state
        """
        debug.trace("Creating board copy", "board")
        new_board = Board(self._rows, self._columns)
        new_board._grid = self._grid.copy()
        new_board._fill = self._fill.copy()
        new_board._current_player = self._current_player
        new_board._winner = self._winner
        new_board._turns = self._turns
        new_board._moves_made = self._moves_made.copy()
        new_board._last_move = self._last_move
        return new_board

    # Dimensions

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._columns

    @property
    def last_row(self) -> int:
        return self._rows - 1

    @property
    def last_column(self) -> int:
        return self._columns - 1

    # Game state

    @property
    def current_player(self) -> Player:
        """The player who will drop the next disc."""
        return self._current_player

    @property
    def winner(self) -> Optional[Player]:
        """The player who completed a line, if any."""
        return self._winner

    @property
    def turns_played(self) -> int:
        """Number of discs on the board."""
        return self._turns

    @property
    def last_move(self) -> Optional[Position]:
        """(row, column) of the most recent disc, or None on an empty board."""
        return self._last_move

    @property
    def moves_made(self) -> List[int]:
        """Columns played so far, oldest first."""
        return self._moves_made.copy()

    @property
    def game_result(self) -> GameResult:
        if self._winner is not None:
            return GameResult.for_winner(self._winner)
        if self.is_full():
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    def is_full(self) -> bool:
        """Check if every cell holds a disc."""
        return self._turns == self.size

    def is_game_over(self) -> bool:
        """Check if the game has a winner or the board is full."""
        return self.game_result.is_game_over()

    # Queries

    def _check_column(self, column: int) -> None:
        if not 0 <= column < self._columns:
            debug.debug(f"Rejected column {column}: out of bounds", "board")
            raise InvalidColumnError(column, self._columns)

    def is_column_full(self, column: int) -> bool:
        """
        Check if a column has no empty cell left.

        Raises:
            InvalidColumnError: if the column is outside the grid
        """
        self._check_column(column)
        return self._fill[column] == self._rows

    def column_fill(self, column: int) -> int:
        """
        Get the number of discs resting in a column.

        Raises:
            InvalidColumnError: if the column is outside the grid
        """
        self._check_column(column)
        return self._fill[column]

    def cell_at(self, row: int, column: int) -> Optional[Player]:
        """
        Get the player whose disc occupies a cell.

        Args:
            row: Row index, 0 being the top
            column: Column index

        Returns:
            The owning player, or None for an empty cell

        Raises:
            OutOfBoundsError: if the position is outside the grid
        """
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            debug.debug(f"Rejected position ({row}, {column}): out of bounds", "board")
            raise OutOfBoundsError(row, column, self._rows, self._columns)
        return Player.from_cell(self._grid[row, column])

    def valid_moves(self) -> List[int]:
        """
        Get the columns a disc can currently be dropped into.

        Returns:
            Column indices in ascending order, empty once the game is over
        """
        if self.is_game_over():
            return []
        return [col for col in range(self._columns) if self._fill[col] < self._rows]

    def get_state(self) -> np.ndarray:
        """
        Get a copy of the grid as cell codes (0 empty, 1 and 2 for the players).

        Returns:
            2D numpy array of shape (rows, columns)
        """
        return self._grid.copy()

    # Moves

    def play(self, column: int) -> int:
        """
        Drop a disc for the current player into a column.

        The disc lands on the lowest empty row. If it completes a line the
        mover becomes the winner. The turn passes to the opponent either way.

        Args:
            column: Column to drop into

        Returns:
            The row the disc landed on

        Raises:
            InvalidColumnError: if the column is outside the grid
            GameOverError: if the game already has a winner or the board is full
            ColumnFullError: if the column has no empty cell
        """
        self._check_column(column)

        if self.is_game_over():
            debug.debug(f"Rejected column {column}: game is over ({self.game_result.name})", "board")
            raise GameOverError(column)

        if self._fill[column] == self._rows:
            debug.debug(f"Rejected column {column}: column is full", "board")
            raise ColumnFullError(column)

        player = self._current_player
        row = self.last_row - self._fill[column]
        debug.trace(f"Placing {player.name} at ({row}, {column})", "board")

        self._grid[row, column] = player.value
        self._fill[column] += 1
        self._turns += 1
        self._moves_made.append(column)
        self._last_move = (row, column)

        debug.start_timer("win_check")
        if self._find_run(row, column) is not None:
            self._winner = player
            debug.info(f"{player} wins after move at ({row}, {column})", "board")
        elif self.is_full():
            debug.info("Game ends in a draw", "board")
        debug.end_timer("win_check", "board")

        self._current_player = player.opponent()
        return row

    # Win detection

    def _steps_to_edge(self, row: int, column: int, dr: int, dc: int) -> int:
        """Count how many steps of (dr, dc) stay on the grid, capped at REACH."""
        steps = REACH
        if dr > 0:
            steps = min(steps, self.last_row - row)
        elif dr < 0:
            steps = min(steps, row)
        if dc > 0:
            steps = min(steps, self.last_column - column)
        elif dc < 0:
            steps = min(steps, column)
        return steps

    def _run_offsets(self, row: int, column: int, dr: int, dc: int) -> range:
        """
        Offsets of the candidate runs through (row, column) along (dr, dc).

        A run is identified by its far end, ``offset`` steps ahead of the
        landed disc, and covers the REACH cells behind that end. Clamping
        both ends keeps every run inside the grid.
        """
        min_offset = REACH - self._steps_to_edge(row, column, -dr, -dc)
        max_offset = self._steps_to_edge(row, column, dr, dc)
        return range(min_offset, max_offset + 1)

    def _match_run(self, cells: List[Position]) -> bool:
        first = self._grid[cells[0]]
        return first != EMPTY and all(self._grid[cell] == first for cell in cells[1:])

    def _find_run(self, row: int, column: int) -> Optional[List[Position]]:
        """
        Find a complete run passing through (row, column).

        Returns:
            The cells of the first matching run, or None
        """
        for dr, dc in DIRECTION_VECTORS.values():
            for offset in self._run_offsets(row, column, dr, dc):
                end_row = row + offset * dr
                end_col = column + offset * dc
                cells = [(end_row - k * dr, end_col - k * dc) for k in range(CONNECT_N)]
                if self._match_run(cells):
                    return cells
        return None

    def winning_line(self) -> List[Position]:
        """
        Get the cells of the line that won the game.

        Returns:
            (row, column) pairs sorted by row then column, or [] if nobody has won
        """
        if self._winner is None or self._last_move is None:
            return []

        cells = self._find_run(*self._last_move)
        return sorted(cells) if cells else []

    def __repr__(self) -> str:
        return (f"Board(rows={self._rows}, columns={self._columns}, "
                f"turns_played={self._turns}, current_player={self._current_player.name}, "
                f"winner={self._winner.name if self._winner else None})")
