"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, snapshots and
observation conversion.
"""
import pytest
from minesweeper import Cell, CellSnapshot, CellState, CellType


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_empty(self) -> None:
        """New cell should be empty and not a mine by default."""
        cell = Cell()
        assert cell.cell_type == CellType.EMPTY
        assert cell.is_empty is True
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_mine_cell_creation(self, mine_cell: Cell) -> None:
        """Can create a cell that is a mine."""
        assert mine_cell.is_mine is True
        assert mine_cell.position == (1, 1)

    def test_hint_cell_keeps_count(self, hint_cell: Cell) -> None:
        """Hint cell carries its adjacent mine count."""
        assert hint_cell.cell_type == CellType.HINT
        assert hint_cell.adjacent_mines == 3
        assert hint_cell.is_empty is False


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_returns_type_and_count(self, hint_cell: Cell) -> None:
        """Reveal reports what the cell holds."""
        assert hint_cell.reveal() == (CellType.HINT, 3)

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True

    def test_reveal_twice_keeps_state(self, mine_cell: Cell) -> None:
        """Revealing an already revealed cell is a no-op."""
        mine_cell.reveal()
        assert mine_cell.reveal() == (CellType.MINE, 0)
        assert mine_cell.is_revealed is True

    def test_reveal_clears_flag(self, hidden_cell: Cell) -> None:
        """A flag does not survive a reveal."""
        hidden_cell.toggle_flag()
        hidden_cell.reveal()
        assert hidden_cell.is_flagged is False
        assert hidden_cell.is_revealed is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Flagging a hidden cell should succeed."""
        assert hidden_cell.toggle_flag() is True

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_flagged is True

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# Cell Snapshot Tests
# ============================================================================

class TestCellSnapshot:
    """Test the read-only view handed to renderers."""

    def test_hidden_snapshot_conceals_contents(self, mine_cell: Cell) -> None:
        """Type and count stay unknown until the cell is revealed."""
        assert mine_cell.snapshot() == CellSnapshot((1, 1), None, None, False, False)

    def test_flagged_snapshot(self, hint_cell: Cell) -> None:
        hint_cell.toggle_flag()
        snapshot = hint_cell.snapshot()
        assert snapshot.flagged is True
        assert snapshot.cell_type is None

    def test_revealed_snapshot_shows_contents(self, hint_cell: Cell) -> None:
        hint_cell.reveal()
        assert hint_cell.snapshot() == CellSnapshot(
            (2, 3), CellType.HINT, 3, True, False
        )

    def test_snapshot_is_immutable(self, hidden_cell: Cell) -> None:
        snapshot = hidden_cell.snapshot()
        with pytest.raises(AttributeError):
            snapshot.revealed = True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test numeric observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    def test_revealed_empty_cell_observation_is_zero(
        self, hidden_cell: Cell
    ) -> None:
        """Revealed cell with 0 adjacent mines returns 0."""
        hidden_cell.reveal()
        assert hidden_cell.to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(CellType.HINT, (0, 0), count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
