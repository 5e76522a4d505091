"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their cover state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible cover states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Render codes shown to the presentation layer
CODE_HIDDEN = "H"
CODE_FLAG = "F"
CODE_MINE = "M"

# Observation values for programmatic players
OBS_HIDDEN = -1
OBS_FLAG = -2
OBS_MINE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current cover state (hidden, revealed, or flagged).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if it was already
            revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

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

    def to_code(self, exploded: bool = False) -> str:
        """
        Convert cell to its render code.

        Args:
            exploded: Whether the game was lost. Every mine is then
                shown, whatever its cover state.

        Returns:
            "H" hidden, "F" flagged, "M" mine, or "0"-"8".
        """
        if exploded and self.is_mine:
            return CODE_MINE
        if self.state == CellState.HIDDEN:
            return CODE_HIDDEN
        if self.state == CellState.FLAGGED:
            return CODE_FLAG
        if self.is_mine:
            return CODE_MINE
        return str(self.adjacent_mines)

    def to_observation(self, exploded: bool = False) -> int:
        """
        Convert cell to observation value for programmatic players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Mine (revealed, or any mine once the game is lost)
        """
        if exploded and self.is_mine:
            return OBS_MINE
        if self.state == CellState.HIDDEN:
            return OBS_HIDDEN
        if self.state == CellState.FLAGGED:
            return OBS_FLAG
        if self.is_mine:
            return OBS_MINE
        return self.adjacent_mines
