"""
Agent interface for playing Minesweeper through MinesweeperEnv.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class BaseAgent(ABC):
    """
    Chooses which cell to reveal from an environment observation.

    Actions are flat cell indices, row * board_size + col.
    """

    def __init__(self, board_size: int) -> None:
        self.board_size = board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick the next cell to reveal.

        Args:
            observation: 2D array of cell observations.
            valid_actions: Optional boolean mask over flat cell indices.

        Returns:
            Flat cell index.
        """

    @staticmethod
    def hidden_mask(observation: np.ndarray) -> np.ndarray:
        """Boolean mask of hidden cells (observation value -1)."""
        return observation.ravel() == -1

    def reset(self) -> None:
        """Called before each new game."""
