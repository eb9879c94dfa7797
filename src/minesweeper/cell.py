"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

HIDDEN_SYMBOL = "_"
MINE_SYMBOL = "*"

# Observation value for a revealed mine
MINE_OBSERVATION = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Written once, while
            the board places its mines.
        adjacent_mines: Count of mines in neighboring cells (0-8). Only
            meaningful for non-mine cells once mines are placed.
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
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
    def symbol(self) -> str:
        """
        Display symbol for the player's view.

        Returns:
            "*" for a revealed mine, the adjacent count for any other
            revealed cell, "_" while hidden.
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_SYMBOL
        return self.solution_symbol

    @property
    def solution_symbol(self) -> str:
        """Display symbol ignoring the hidden state."""
        if self.is_mine:
            return MINE_SYMBOL
        return str(self.adjacent_mines)

    def __str__(self) -> str:
        return self.symbol

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
