"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their fixed content
(mine/hint/empty) and player-visible state (hidden/revealed/flagged).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class CellType(Enum):
    """Fixed content of a cell, decided at board generation."""

    MINE = auto()
    HINT = auto()
    EMPTY = auto()


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class CellSnapshot:
    """
    Read-only view of a cell for rendering.

    Attributes:
        position: (row, col) of the cell.
        cell_type: Content of the cell, or None while it is not revealed.
        adjacent_mines: Hint count, or None while it is not revealed.
        revealed: Whether the cell has been revealed.
        flagged: Whether the cell carries a flag.
    """

    position: Position
    cell_type: Optional[CellType]
    adjacent_mines: Optional[int]
    revealed: bool
    flagged: bool


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        cell_type: Mine, hint or empty; never changes after generation.
        position: (row, col) of the cell on its board.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
    """

    cell_type: CellType = CellType.EMPTY
    position: Position = (0, 0)
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> Tuple[CellType, int]:
        """
        Reveal this cell, clearing any flag.

        Revealing an already revealed cell changes nothing. Whether a
        flagged cell may be revealed is decided by the board.

        Returns:
            The cell type and its adjacent mine count, for display.
        """
        if self.state != CellState.REVEALED:
            self.state = CellState.REVEALED
        return self.cell_type, self.adjacent_mines

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_mine(self) -> bool:
        return self.cell_type == CellType.MINE

    @property
    def is_empty(self) -> bool:
        return self.cell_type == CellType.EMPTY

    def snapshot(self) -> CellSnapshot:
        """Build a read-only view; contents stay hidden until revealed."""
        if self.is_revealed:
            return CellSnapshot(
                self.position, self.cell_type, self.adjacent_mines, True, False
            )
        return CellSnapshot(self.position, None, None, False, self.is_flagged)

    def to_observation(self) -> int:
        """
        Convert cell to a numeric observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
