"""
Cell module for the minefield board.

Represents individual grid positions with their interaction state
(undiscovered/opened/flagged) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

# Adjacent count before the board has finished generating.
UNCOMPUTED = 9


class CellState(Enum):
    """Player-visible states of a cell."""

    UNDISCOVERED = auto()
    OPENED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass
class Cell:
    """
    A single position in the board grid.

    Cells are owned by the board; callers only ever see a CellView.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Mines among the 8 surrounding cells, or
            UNCOMPUTED until generation completes.
        state: Current interaction state.
    """

    is_mine: bool = False
    adjacent_mines: int = UNCOMPUTED
    state: CellState = CellState.UNDISCOVERED

    def open(self) -> bool:
        """
        Open this cell. Flagged cells are opened too.

        Returns:
            True if the cell changed state, False if already opened.
        """
        if self.state == CellState.OPENED:
            return False
        self.state = CellState.OPENED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is opened.
        """
        if self.state == CellState.OPENED:
            return False
        if self.state == CellState.UNDISCOVERED:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.UNDISCOVERED
        return True

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state == CellState.OPENED

    def glyph(self) -> str:
        """
        Debug glyph for this cell.

        Returns:
            "!" for a flagged cell, " " for an opened cell, and for an
            undiscovered cell either "X" (mine) or its adjacent count.
        """
        if self.state == CellState.FLAGGED:
            return "!"
        if self.state == CellState.OPENED:
            return " "
        if self.is_mine:
            return "X"
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to the value a renderer or agent may observe.

        Returns:
            -1: Undiscovered cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
        """
        if self.state == CellState.UNDISCOVERED:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.adjacent_mines

    def view(self) -> "CellView":
        """Snapshot of this cell that does not alias grid storage."""
        return CellView(self.is_mine, self.state, self.adjacent_mines)


@dataclass(frozen=True)
class CellView:
    """Read-only copy of a cell, as handed to callers."""

    is_mine: bool
    state: CellState
    adjacent_mines: int

    @property
    def is_undiscovered(self) -> bool:
        """Check if cell is undiscovered."""
        return self.state == CellState.UNDISCOVERED

    @property
    def is_opened(self) -> bool:
        """Check if cell is opened."""
        return self.state == CellState.OPENED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED
