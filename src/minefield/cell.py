"""
Cell module for the Minefield board engine.

Represents individual grid positions as plain data records with their
state (hidden/flagged/revealed) and content (mine/proximity count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the Minefield grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        mines_in_proximity: Count of mines among the neighbours (0-8).
        state: Current state (hidden, flagged or revealed).
    """

    is_mine: bool = False
    mines_in_proximity: int = 0
    state: CellState = CellState.HIDDEN

    def initialize(self, is_mine: bool, mines_in_proximity: int) -> None:
        """Load a fresh layout into this cell and hide it."""
        self.is_mine = is_mine
        self.mines_in_proximity = mines_in_proximity
        self.state = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell was revealed, False if already revealed
            or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> int:
        """
        Toggle the flag on this cell.

        Returns:
            +1 when a flag was placed, -1 when it was removed,
            0 if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return 0
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
            return 1
        self.state = CellState.HIDDEN
        return -1

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self, show_mines: bool = False) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with its proximity count
            9: Mine, when ``show_mines`` is set
        """
        if show_mines and self.is_mine:
            return 9
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.mines_in_proximity
