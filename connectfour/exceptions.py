"""
exceptions.py - Errors raised by the Connect Four engine

All of them signal a bug in the caller (a UI letting the user drop into a
full column, say). They are raised before any state changes.
"""


class ConnectFourError(Exception):
    """Base class for every engine error."""

    pass


class OutOfBoundsError(ConnectFourError, IndexError):
    """Raised when a cell query names a row or column outside the grid."""

    def __init__(self, row: int, column: int, rows: int, columns: int):
        self.row = row
        self.column = column
        super().__init__(
            f"Position out of bounds: ({row}, {column}) on a {rows}x{columns} grid"
        )


class InvalidMoveError(ConnectFourError, ValueError):
    """Raised when a move cannot be applied."""

    pass


class InvalidColumnError(InvalidMoveError):
    """Raised when a column index is outside the grid."""

    def __init__(self, column: int, columns: int):
        self.column = column
        super().__init__(f"Column out of bounds: {column} (expected 0..{columns - 1})")


class ColumnFullError(InvalidMoveError):
    """Raised when a disc is dropped into a column with no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column is full: {column}")


class GameOverError(InvalidMoveError):
    """Raised when a disc is dropped after the game has been decided."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Game is over, cannot play column {column}")
