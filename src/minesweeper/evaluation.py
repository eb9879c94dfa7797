"""
Evaluation of Minesweeper agents.

Plays a number of games through MinesweeperEnv and reports win rate
and per-game averages.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from .agents.base_agent import BaseAgent
from .board import BoardConfig
from .environment import MinesweeperEnv


logger = logging.getLogger(__name__)


class Evaluator:
    """
    Run an agent for a fixed number of games on one board configuration.

    Attributes:
        board_config: Board every game is played on.
        num_episodes: Games to play, at least one.
        max_steps: Step cap per game, one per cell unless given.
        seed: Seed for the first game; later games continue the stream.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_episodes: int = 100,
        max_steps: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> None:
        if num_episodes < 1:
            raise ValueError("Number of games must be positive")
        self.board_config = board_config or BoardConfig()
        self.num_episodes = num_episodes
        self.max_steps = max_steps or self.board_config.total_cells
        self.seed = seed

    def _play_episode(
        self, env: MinesweeperEnv, agent: BaseAgent, seed: Optional[int]
    ) -> Tuple[float, int, Dict[str, Any]]:
        """Play one game and return its reward, step count and final info."""
        observation, info = env.reset(seed=seed)
        agent.reset()
        reward_sum = 0.0

        for step in range(1, self.max_steps + 1):
            action = agent.select_action(observation, env.get_action_mask())
            observation, reward, terminated, truncated, info = env.step(action)
            reward_sum += float(reward)
            if terminated or truncated:
                return reward_sum, step, info

        return reward_sum, self.max_steps, info

    def evaluate(self, agent: BaseAgent) -> Dict[str, float]:
        """
        Evaluate a single agent.

        Returns:
            Mapping with win_rate, avg_reward, avg_steps and avg_revealed.
        """
        env = MinesweeperEnv(config=self.board_config)
        wins = 0
        totals = {"reward": 0.0, "steps": 0, "revealed": 0}

        for episode in range(self.num_episodes):
            seed = self.seed if episode == 0 else None
            reward, steps, info = self._play_episode(env, agent, seed)
            wins += info["game_state"] == "WON"
            totals["reward"] += reward
            totals["steps"] += steps
            totals["revealed"] += info["revealed"]
            logger.debug("Game %d ended %s", episode + 1, info["game_state"])

        games = self.num_episodes
        return {
            "win_rate": wins / games,
            "avg_reward": totals["reward"] / games,
            "avg_steps": totals["steps"] / games,
            "avg_revealed": totals["revealed"] / games,
        }
