"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Iterable, List, Tuple

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Helpers
# ============================================================================

class ScriptedRng:
    """
    Stand-in for a numpy Generator that yields fixed mine positions.

    Each position is drawn as a row then a column, matching the order
    the board samples coordinates.
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        self.values: List[int] = [v for position in positions for v in position]
        self.calls = 0

    def integers(self, high: int) -> int:
        value = self.values[self.calls]
        self.calls += 1
        assert 0 <= value < high
        return value


def count_mines(board: Board) -> int:
    """Count mine cells on a board."""
    return int(np.sum(board.get_observation(reveal_all=True) == 9))


@pytest.fixture
def scripted_rng():
    """Factory for generators that place mines at given positions."""
    return ScriptedRng


@pytest.fixture
def mine_counter():
    """Function counting mines on a board."""
    return count_mines


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(9, 10, np.random.default_rng(1234))


@pytest.fixture
def small_board() -> Board:
    """Create a 4x4 board with 1 mine."""
    return Board(4, 1, np.random.default_rng(7))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(5, 0)


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board whose only mine lands in the bottom-right corner."""
    return Board(5, 1, ScriptedRng([(4, 4)]))


@pytest.fixture
def walled_board() -> Board:
    """6x6 board with a full column of mines at column 3."""
    return Board(6, 6, ScriptedRng([(row, 3) for row in range(6)]))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)


@pytest.fixture
def mine_free_config() -> BoardConfig:
    """Configuration where the first reveal always wins."""
    return BoardConfig(4, 0)
