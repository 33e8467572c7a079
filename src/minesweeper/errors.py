"""
Error types raised by the Minesweeper core.

Benign player actions (clicking a revealed or flagged cell, acting after
the game ended) are never errors; they come back as no-op outcomes.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine density are out of range."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A position lies outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {height}x{width} board"
        )
        self.row = row
        self.col = col
