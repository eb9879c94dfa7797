"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Board, BoardConfig, MinesweeperEnv, render_board
from minesweeper.environment import (
    REWARD_INVALID,
    REWARD_MINE,
    REWARD_SAFE,
    REWARD_WIN,
)


@pytest.fixture
def walled_env(scripted_rng) -> MinesweeperEnv:
    """6x6 environment whose board has a column of mines at column 3."""
    env = MinesweeperEnv(config=BoardConfig(6, 6), render_mode="ansi")
    env.reset(seed=0)
    env.board = Board(6, 6, scripted_rng([(row, 3) for row in range(6)]))
    return env


class TestEnvironmentSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_config(self) -> None:
        """Spaces follow the board size."""
        env = MinesweeperEnv(config=BoardConfig(5, 4))
        assert env.observation_space.shape == (5, 5)
        assert env.action_space.n == 25

    def test_reset_observation_is_hidden(self) -> None:
        """Reset yields an all-hidden observation inside the space."""
        env = MinesweeperEnv(config=BoardConfig(4, 2))
        obs, info = env.reset(seed=1)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "PLAYING"
        assert info["revealed"] == 0
        assert info["total_safe"] == 14

    def test_default_config(self) -> None:
        """Default environment is 9x9 with 10 mines."""
        env = MinesweeperEnv()
        assert env.config == BoardConfig(9, 10)


class TestEnvironmentStep:
    """Test stepping and rewards."""

    def test_mine_free_board_wins_in_one_step(
        self, mine_free_config: BoardConfig
    ) -> None:
        """First reveal on a mine-free board wins."""
        env = MinesweeperEnv(config=mine_free_config)
        env.reset(seed=0)
        obs, reward, terminated, truncated, info = env.step(5)
        assert reward == REWARD_WIN
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "WON"
        assert info["revealed"] == 16
        assert np.all(obs == 0)

    def test_safe_invalid_and_mine_rewards(
        self, walled_env: MinesweeperEnv
    ) -> None:
        """Safe, repeated and mine reveals are scored differently."""
        _, reward, terminated, _, info = walled_env.step(12)
        assert reward == REWARD_SAFE
        assert terminated is False
        assert info["revealed"] == 18

        _, reward, terminated, _, _ = walled_env.step(12)
        assert reward == REWARD_INVALID
        assert terminated is False

        _, reward, terminated, _, info = walled_env.step(3)
        assert reward == REWARD_MINE
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_same_seed_same_layout(self) -> None:
        """Seeding reset reproduces the board."""
        config = BoardConfig(8, 12)
        first = MinesweeperEnv(config=config)
        second = MinesweeperEnv(config=config)
        first.reset(seed=99)
        second.reset(seed=99)
        obs_a = first.step(27)[0]
        obs_b = second.step(27)[0]
        np.testing.assert_array_equal(obs_a, obs_b)
        np.testing.assert_array_equal(
            first.board.get_observation(reveal_all=True),
            second.board.get_observation(reveal_all=True),
        )

    def test_action_mask_tracks_hidden_cells(
        self, walled_env: MinesweeperEnv
    ) -> None:
        """Mask covers hidden cells only."""
        assert walled_env.get_action_mask().sum() == 36
        walled_env.step(12)
        mask = walled_env.get_action_mask()
        assert mask.sum() == 18
        assert mask[3] and not mask[0]


class TestEnvironmentRender:
    """Test rendering."""

    def test_ansi_render_matches_board(self, walled_env: MinesweeperEnv) -> None:
        """ANSI mode returns the text grid."""
        walled_env.step(12)
        assert walled_env.render() == render_board(walled_env.board)

    def test_no_render_mode_returns_none(self) -> None:
        """Without a render mode nothing is produced."""
        env = MinesweeperEnv(config=BoardConfig(4, 1))
        env.reset(seed=0)
        assert env.render() is None
