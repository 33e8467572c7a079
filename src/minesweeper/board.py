"""
Board module for Minesweeper game.

Implements the game board with mine placement, hint counting, cascading
reveal and win/lose detection. Every public operation runs under a single
per-board lock, so a cascade is never observed half-done.
"""
import logging
import threading
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellSnapshot, CellType, Position
from .errors import InvalidConfigurationError, OutOfBoundsError

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Outcome(Enum):
    """Result of a single reveal."""

    NO_CHANGE = auto()
    CONTINUE = auto()
    WON = auto()
    LOST = auto()


MOORE_OFFSETS = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)
ORTHOGONAL_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_percent: Chance (1-99) that any single cell holds a mine.
    """

    width: int = 10
    height: int = 10
    mine_percent: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if not 1 <= self.mine_percent <= 99:
            raise InvalidConfigurationError(
                f"Mine percentage must be between 1 and 99, got {self.mine_percent}"
            )


DEFAULT_CONFIG = BoardConfig(10, 10, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed when the board is built: every cell independently
    becomes a mine with probability ``mine_percent / 100``. Hints count the
    8 surrounding cells, while the reveal cascade only spreads to the 4
    orthogonal ones.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    mine_layout: InitVar[Optional[np.ndarray]] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _safe_total: int = 0
    _safe_revealed: int = 0
    _last_revealed: Tuple[Position, ...] = ()
    _lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    def __post_init__(self, mine_layout: Optional[np.ndarray]) -> None:
        """Place mines and build the grid after dataclass creation."""
        if mine_layout is None:
            mine_layout = self._generate_mines()
        elif mine_layout.shape != (self.config.height, self.config.width):
            raise InvalidConfigurationError(
                f"Mine layout shape {mine_layout.shape} does not match "
                f"{self.config.height}x{self.config.width} board"
            )
        self._init_grid(mine_layout)

    @classmethod
    def generate(
        cls,
        height: int,
        width: int,
        mine_percent: int,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Build a randomly mined board.

        Raises:
            InvalidConfigurationError: If dimensions or density are invalid.
        """
        return cls(BoardConfig(width, height, mine_percent), seed=seed)

    @classmethod
    def from_mine_layout(cls, layout: Sequence[Sequence[bool]]) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            layout: Rows of booleans, True where a mine sits.

        Raises:
            InvalidConfigurationError: If the layout is not a non-empty
                rectangle.
        """
        try:
            mines = np.asarray(layout, dtype=bool)
        except ValueError as exc:
            raise InvalidConfigurationError(
                "Mine layout must be rectangular"
            ) from exc
        if mines.ndim != 2 or mines.size == 0:
            raise InvalidConfigurationError(
                "Mine layout must be a non-empty 2D grid"
            )
        height, width = mines.shape
        density = round(100 * float(mines.mean()))
        config = BoardConfig(width, height, min(99, max(1, density)))
        return cls(config, mine_layout=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _generate_mines(self) -> np.ndarray:
        """Draw an independent mine/no-mine decision for every cell."""
        rng = np.random.default_rng(self.seed)
        shape = (self.config.height, self.config.width)
        return rng.random(shape) < self.config.mine_percent / 100

    def _init_grid(self, mines: np.ndarray) -> None:
        """Create one cell per position from the mine layout."""
        self._grid = [
            [
                self._make_cell(mines, row, col)
                for col in range(self.config.width)
            ]
            for row in range(self.config.height)
        ]
        self._safe_total = int(mines.size - np.count_nonzero(mines))
        logger.debug(
            "Generated %dx%d board with %d mines",
            self.config.height,
            self.config.width,
            mines.size - self._safe_total,
        )

    def _make_cell(self, mines: np.ndarray, row: int, col: int) -> Cell:
        if mines[row, col]:
            return Cell(CellType.MINE, (row, col))
        count = self._count_adjacent_mines(mines, row, col)
        cell_type = CellType.HINT if count > 0 else CellType.EMPTY
        return Cell(cell_type, (row, col), count)

    def _count_adjacent_mines(
        self, mines: np.ndarray, row: int, col: int
    ) -> int:
        """Count mines in the Moore neighborhood of a position."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if mines[neighbor_row, neighbor_col]:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid positions of the up-to-8 surrounding cells.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        return self._offset_positions(row, col, MOORE_OFFSETS)

    def _get_orthogonal_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """Get valid positions directly above, below, left and right."""
        return self._offset_positions(row, col, ORTHOGONAL_OFFSETS)

    def _offset_positions(
        self, row: int, col: int, offsets: Sequence[Tuple[int, int]]
    ) -> List[Tuple[int, int]]:
        neighbors = []
        for delta_row, delta_col in offsets:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.height and 0 <= col < self.config.width

    def _cell_at(self, row: int, col: int) -> Cell:
        if not self._is_valid_position(row, col):
            raise OutOfBoundsError(
                row, col, self.config.height, self.config.width
            )
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal a cell at the given position.

        A mine loses the game. An empty cell cascades through its
        orthogonal neighbors. Either way a finished game exposes the whole
        board. Positions changed by this call end up in ``last_revealed``.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            NO_CHANGE if the game is over or the cell is revealed or
            flagged, otherwise CONTINUE, WON or LOST.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        with self._lock:
            cell = self._cell_at(row, col)
            if not self._can_reveal(cell):
                self._last_revealed = ()
                return Outcome.NO_CHANGE

            if cell.is_mine:
                cell.reveal()
                changed = [cell.position] + self._reveal_all()
                self._finish(GameState.LOST, changed)
                return Outcome.LOST

            changed = self._cascade(cell)
            self._safe_revealed += len(changed)
            if self._safe_revealed == self._safe_total:
                self._finish(GameState.WON, changed + self._reveal_all())
                return Outcome.WON

            self._last_revealed = tuple(changed)
            return Outcome.CONTINUE

    def _can_reveal(self, cell: Cell) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        return cell.is_hidden

    def _cascade(self, origin: Cell) -> List[Position]:
        """Reveal a safe cell and spread through connected empty cells."""
        origin.reveal()
        revealed = [origin.position]
        stack = [origin] if origin.is_empty else []
        while stack:
            current = stack.pop()
            for neighbor_row, neighbor_col in self._get_orthogonal_neighbors(
                *current.position
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.is_hidden:
                    continue
                neighbor.reveal()
                revealed.append(neighbor.position)
                if neighbor.is_empty:
                    stack.append(neighbor)
        if len(revealed) > 1:
            logger.debug(
                "Cascade from %s revealed %d cells",
                origin.position,
                len(revealed),
            )
        return revealed

    def _reveal_all(self) -> List[Position]:
        """Reveal every hidden or flagged cell, returning their positions."""
        changed = []
        for row in self._grid:
            for cell in row:
                if not cell.is_revealed:
                    cell.reveal()
                    changed.append(cell.position)
        return changed

    def _finish(self, state: GameState, changed: List[Position]) -> None:
        self._game_state = state
        self._last_revealed = tuple(changed)
        logger.info(
            "Game %s on %dx%d board",
            state.name.lower(),
            self.config.height,
            self.config.width,
        )

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if flag was toggled, False otherwise.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        with self._lock:
            cell = self._cell_at(row, col)
            if self._game_state != GameState.PLAYING:
                return False
            return cell.toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        with self._lock:
            return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def last_revealed(self) -> Tuple[Position, ...]:
        """Positions revealed by the most recent reveal, in order."""
        with self._lock:
            return self._last_revealed

    @property
    def safe_cell_count(self) -> int:
        return self._safe_total

    @property
    def mine_count(self) -> int:
        return self.config.width * self.config.height - self._safe_total

    @property
    def revealed_count(self) -> int:
        with self._lock:
            return sum(cell.is_revealed for row in self._grid for cell in row)

    @property
    def flag_count(self) -> int:
        with self._lock:
            return sum(cell.is_flagged for row in self._grid for cell in row)

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If the position is outside the board.
        """
        with self._lock:
            return self._cell_at(row, col)

    def snapshot(self) -> Tuple[Tuple[CellSnapshot, ...], ...]:
        """Take a consistent read-only view of every cell, row by row."""
        with self._lock:
            return tuple(
                tuple(cell.snapshot() for cell in row) for row in self._grid
            )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        with self._lock:
            for row in range(self.config.height):
                for col in range(self.config.width):
                    obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that a reveal would act on.

        Returns:
            List of hidden, unflagged (row, col) positions; empty once
            the game is over.
        """
        with self._lock:
            return [
                cell.position
                for row in self._grid
                for cell in row
                if cell.is_hidden
            ]
