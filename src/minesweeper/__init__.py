"""
Minesweeper game module.

Provides core game logic including board generation, cascading reveal
and cell state, plus thin console and Gymnasium front ends.
"""
from .cell import Cell, CellSnapshot, CellState, CellType, Position
from .board import Board, BoardConfig, GameState, Outcome, DEFAULT_CONFIG
from .errors import MinesweeperError, InvalidConfigurationError, OutOfBoundsError
from .console import Action, Command, CommandError, apply_command, parse_command, render_board
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellSnapshot",
    "CellState",
    "CellType",
    "Position",
    "Board",
    "BoardConfig",
    "GameState",
    "Outcome",
    "DEFAULT_CONFIG",
    "MinesweeperError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "Action",
    "Command",
    "CommandError",
    "apply_command",
    "parse_command",
    "render_board",
    "MinesweeperEnv",
]
