"""
Exceptions raised by the Minesweeper engine.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board dimensions, mine count, or mine layout are not valid."""


class OutOfBounds(MinesweeperError, IndexError):
    """Coordinates fall outside the current grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {rows}x{cols} board"
        )
        self.row = row
        self.col = col
