"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, render codes
and observation conversion.
"""
import pytest
from minesweeper import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.state == CellState.REVEALED

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """A flagged cell stays flagged when revealed."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Cannot flag a revealed cell."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_revealed is True


# ============================================================================
# Render Code Tests
# ============================================================================

class TestCellCode:
    """Test render codes for the presentation layer."""

    def test_hidden_cell_code(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_code() == "H"

    def test_flagged_cell_code(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_code() == "F"

    def test_numbered_cell_code(self, numbered_cell: Cell) -> None:
        assert numbered_cell.to_code() == "3"

    def test_revealed_mine_code(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_code() == "M"

    def test_hidden_mine_stays_covered_while_playing(
        self, mine_cell: Cell
    ) -> None:
        assert mine_cell.to_code() == "H"

    def test_every_mine_shown_after_explosion(self, mine_cell: Cell) -> None:
        """Hidden and flagged mines are both exposed once the game is lost."""
        assert mine_cell.to_code(exploded=True) == "M"
        mine_cell.toggle_flag()
        assert mine_cell.to_code(exploded=True) == "M"

    def test_explosion_does_not_expose_safe_cells(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_code(exploded=True) == "H"


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for programmatic players."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

    def test_hidden_mine_after_explosion_is_nine(
        self, mine_cell: Cell
    ) -> None:
        assert mine_cell.to_observation(exploded=True) == 9
