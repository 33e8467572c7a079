"""
Text presentation layer for Minesweeper.

Renders boards as ASCII and turns typed commands into board actions.
"""
from dataclasses import dataclass
from enum import Enum

from .board import Board, Outcome
from .cell import CellSnapshot, CellType
from .errors import MinesweeperError


# ============================================================================
# Rendering
# ============================================================================

def render_cell(snapshot: CellSnapshot) -> str:
    """Single-character label for a cell."""
    if snapshot.flagged:
        return "F"
    if not snapshot.revealed:
        return "."
    if snapshot.cell_type == CellType.MINE:
        return "*"
    if snapshot.cell_type == CellType.EMPTY:
        return " "
    return str(snapshot.adjacent_mines)


def render_board(board: Board, show_coordinates: bool = True) -> str:
    """
    Render board as ASCII string.

    Args:
        board: Board to draw.
        show_coordinates: Prefix rows and columns with their indices.

    Returns:
        One line per row, cells separated by spaces.
    """
    rows = board.snapshot()
    width = len(str(max(board.config.height, board.config.width) - 1))
    lines = []
    if show_coordinates:
        header = " ".join(
            str(col).rjust(width) for col in range(board.config.width)
        )
        lines.append(" " * (width + 1) + header)
    for index, row in enumerate(rows):
        labels = " ".join(render_cell(cell).rjust(width) for cell in row)
        if show_coordinates:
            labels = f"{str(index).rjust(width)} {labels}"
        lines.append(labels)
    return "\n".join(lines)


# ============================================================================
# Commands
# ============================================================================

class CommandError(MinesweeperError, ValueError):
    """Typed command could not be understood."""


class Action(Enum):
    REVEAL = "reveal"
    FLAG = "flag"


ACTION_ALIASES = {
    "r": Action.REVEAL,
    "reveal": Action.REVEAL,
    "f": Action.FLAG,
    "flag": Action.FLAG,
}


@dataclass(frozen=True)
class Command:
    """A player action aimed at one cell."""

    action: Action
    row: int
    col: int


def parse_command(text: str) -> Command:
    """
    Parse commands such as ``r 2 3`` or ``flag 0 4``.

    Raises:
        CommandError: If the text is not an action followed by two
            integer coordinates.
    """
    parts = text.split()
    if len(parts) != 3:
        raise CommandError(f"Expected '<action> <row> <col>', got {text!r}")
    name, row_text, col_text = parts
    action = ACTION_ALIASES.get(name.lower())
    if action is None:
        raise CommandError(f"Unknown action {name!r}; use reveal/r or flag/f")
    try:
        return Command(action, int(row_text), int(col_text))
    except ValueError as exc:
        raise CommandError(
            f"Coordinates must be integers, got {row_text!r} {col_text!r}"
        ) from exc


def apply_command(board: Board, command: Command) -> Outcome:
    """
    Forward a command to the board.

    Flag toggles never change the game outcome, so they report NO_CHANGE.
    """
    if command.action == Action.REVEAL:
        return board.reveal(command.row, command.col)
    board.toggle_flag(command.row, command.col)
    return Outcome.NO_CHANGE
