"""
Random agent for Minesweeper.

Serves as a baseline by selecting random hidden cells.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Agent that selects hidden cells uniformly at random."""

    def __init__(self, board_size: int = 9, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            board_size: Number of rows and columns of the board.
            seed: Random seed for reproducibility.
        """
        super().__init__(board_size)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        if valid_actions is None:
            valid_actions = self.hidden_mask(observation)

        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            # Nothing left to reveal; the environment scores this as invalid
            return 0

        return int(self.rng.choice(valid_indices))
