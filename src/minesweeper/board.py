"""
Board module for Minesweeper game.

Implements the square game board with lazy mine placement, cell
revealing, and game state queries.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple, Set, Optional

import numpy as np

from .cell import Cell, MINE_OBSERVATION


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# The first revealed cell plus its up to 8 neighbors
SAFE_ZONE_CELLS = 9


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Number of rows and columns of the square grid.
        num_mines: Total mines to place.
    """

    size: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.max_mines
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def max_mines(self) -> int:
        """Largest mine count that leaves room for the safe zone."""
        return max(self.size * self.size - SAFE_ZONE_CELLS, 0)

    @property
    def total_cells(self) -> int:
        return self.size * self.size


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Mines are placed on the first reveal so
    that the revealed cell and its neighbors are always mine-free.

    The board does not check that ``total_mines`` fits outside the safe
    zone; build it from a ``BoardConfig`` to get that validation.
    Placement never terminates when the mines do not fit.
    """

    size: int
    total_mines: int
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _game_over: bool = False
    _first_move: bool = True

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if self.rng is None:
            self.rng = np.random.default_rng()
        self._init_grid()

    @classmethod
    def from_config(
        cls,
        config: BoardConfig,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Create a board from a validated configuration.

        Args:
            config: Board configuration.
            rng: Random generator used for mine placement.
            seed: Seed for a new generator, used when rng is not given.

        Returns:
            A fresh, fully hidden board.
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        return cls(config.size, config.num_mines, rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.size)]
            for _ in range(self.size)
        ]

    def _place_mines(self, first_row: int, first_col: int) -> None:
        """
        Place mines randomly outside the safe zone of the first move.

        Draws random positions until ``total_mines`` distinct positions
        outside the safe zone have been accepted.

        Args:
            first_row: Row of the first revealed cell.
            first_col: Column of the first revealed cell.
        """
        banned = self._get_safe_zone(first_row, first_col)
        placed = 0
        while placed < self.total_mines:
            row = int(self.rng.integers(self.size))
            col = int(self.rng.integers(self.size))
            if (row, col) in banned or self._grid[row][col].is_mine:
                continue
            self._grid[row][col].is_mine = True
            placed += 1

        logger.debug(
            "Placed %d mines avoiding (%d, %d)", placed, first_row, first_col
        )

    def _get_safe_zone(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Get the cell and its in-bounds neighbors as a set."""
        safe = set(self._get_neighbors(row, col))
        safe.add((row, col))
        return safe

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        for row in range(self.size):
            for col in range(self.size):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        On the first move, places mines avoiding this cell and its
        neighbors. If the cell has no adjacent mines, the surrounding
        blank region and its numbered border are revealed as well.

        Out-of-bounds and already revealed positions are a no-op.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            False if this call revealed a mine, True otherwise.
        """
        if not self._is_valid_position(row, col):
            return True
        cell = self._grid[row][col]
        if cell.is_revealed:
            return True

        if self._first_move:
            self._handle_first_move(row, col)

        cell.reveal()

        if cell.is_mine:
            self._game_over = True
            logger.info("Mine revealed at (%d, %d)", row, col)
            return False

        if cell.adjacent_mines == 0:
            self._reveal_neighbors(row, col)

        return True

    def _handle_first_move(self, row: int, col: int) -> None:
        """Handle first move: place mines and calculate counts."""
        self._first_move = False
        self._place_mines(row, col)
        self._calculate_adjacent_mines()

    def _reveal_neighbors(self, row: int, col: int) -> None:
        """Reveal the blank region around an empty cell."""
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if not neighbor.reveal():
                    continue
                if neighbor.adjacent_mines == 0 and not neighbor.is_mine:
                    pending.append((neighbor_row, neighbor_col))

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def is_game_over(self) -> bool:
        """Check if a mine has been revealed."""
        return self._game_over

    @property
    def is_game_won(self) -> bool:
        """Check if every non-mine cell is revealed."""
        for row in self._grid:
            for cell in row:
                if not cell.is_mine and not cell.is_revealed:
                    return False
        return True

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._game_over:
            return GameState.LOST
        if self.is_game_won:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def mines_placed(self) -> bool:
        """Check if the first move has placed the mines."""
        return not self._first_move

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells."""
        return sum(cell.is_revealed for row in self._grid for cell in row)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self, reveal_all: bool = False) -> np.ndarray:
        """
        Get board state as numpy array.

        Args:
            reveal_all: Show every cell's content, ignoring hidden state.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row in range(self.size):
            for col in range(self.size):
                cell = self._grid[row][col]
                if reveal_all:
                    obs[row, col] = (
                        MINE_OBSERVATION if cell.is_mine else cell.adjacent_mines
                    )
                else:
                    obs[row, col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that are still hidden.

        Returns:
            List of (row, col) positions that can be revealed.
        """
        actions = []
        for row in range(self.size):
            for col in range(self.size):
                if self._grid[row][col].is_hidden:
                    actions.append((row, col))
        return actions
