"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/cleared/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    CLEARED = auto()


HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


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
        state: Current visual state (hidden, flagged, or cleared).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def clear(self) -> bool:
        """
        Clear this cell, dropping any flag on it.

        Returns:
            True if the cell was cleared, False if it already was.
        """
        if self.state == CellState.CLEARED:
            return False
        self.state = CellState.CLEARED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is cleared.
        """
        if self.state == CellState.CLEARED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return self.state == CellState.HIDDEN

    @property
    def is_cleared(self) -> bool:
        """Check if cell is cleared."""
        return self.state == CellState.CLEARED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self, show_mine: bool = False) -> int:
        """
        Convert cell to observation value.

        Args:
            show_mine: Report an uncleared mine as 9 (used once the
                game is over).

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Cleared cell with adjacent mine count
            9: Mine
        """
        if self.is_mine and (show_mine or self.state == CellState.CLEARED):
            return MINE_VALUE
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        return self.adjacent_mines
