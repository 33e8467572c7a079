"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, CellType


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded default 10x10 board at 10% mines."""
    return Board(seed=1234)


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with a single mine in the middle."""
    return Board.from_mine_layout([
        [False, False, False],
        [False, True, False],
        [False, False, False],
    ])


@pytest.fixture
def diagonal_board() -> Board:
    """
    3x3 board where the (1, 1) hint touches the empty corner only diagonally.

        0 1 1
        1 2 M
        1 M 2
    """
    return Board.from_mine_layout([
        [False, False, False],
        [False, False, True],
        [False, True, False],
    ])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mine_layout([[False] * 5 for _ in range(5)])


@pytest.fixture
def corridor_board() -> Board:
    """
    5x5 board with a wall of mines splitting it into two regions.

        0 2 M 2 0
        0 3 M 3 0
        0 3 M 3 0
        0 3 M 3 0
        0 2 M 2 0
    """
    return Board.from_mine_layout(
        [[col == 2 for col in range(5)] for _ in range(5)]
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(CellType.MINE, (1, 1))


@pytest.fixture
def hint_cell() -> Cell:
    """Create a hidden cell with three adjacent mines."""
    return Cell(CellType.HINT, (2, 3), 3)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 15)
