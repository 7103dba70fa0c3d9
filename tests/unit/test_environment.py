"""
Unit tests for MinesweeperEnv.

Tests spaces, rewards, termination and action masks.
"""
import pytest
import numpy as np
from minefield import (
    GameState,
    LevelConfig,
    MinesweeperEnv,
    board_from_mines,
    flag,
    apply,
)


def env_with_board(mines, side: int = 3, **kwargs) -> MinesweeperEnv:
    """Create an environment and swap in a fixed board."""
    env = MinesweeperEnv(config=LevelConfig(side, 0.0), **kwargs)
    env.reset(seed=0)
    env.state = GameState(board_from_mines(side, mines))
    return env


class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_match_level(self) -> None:
        """Spaces are sized from the preset side."""
        env = MinesweeperEnv(level_id="medium")
        assert env.observation_space.shape == (15, 15)
        assert env.action_space.n == 225

    def test_default_level_is_easy(self) -> None:
        """Without arguments the easy preset is used."""
        env = MinesweeperEnv()
        assert env.level_id == "easy"
        assert env.config.side == 10

    def test_unknown_level_raises_error(self) -> None:
        """Unknown presets are rejected."""
        with pytest.raises(ValueError, match="Unknown level"):
            MinesweeperEnv(level_id="impossible")

    def test_reset_observation_all_hidden(self, small_config: LevelConfig) -> None:
        """Reset returns an all-hidden observation in the space."""
        env = MinesweeperEnv(config=small_config)
        obs, info = env.reset(seed=5)
        assert obs.shape == (4, 4)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["exposed"] == 0
        assert info["game_state"] == "PLAYING"

    def test_seeded_reset_is_reproducible(self, small_config: LevelConfig) -> None:
        """The same seed gives the same board."""
        env = MinesweeperEnv(config=small_config)
        env.reset(seed=9)
        first = env.state
        env.reset(seed=9)
        assert env.state == first


class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal_rewards_one(self) -> None:
        """A safe reveal that does not win scores +1."""
        env = env_with_board([0])
        _, reward, terminated, _, info = env.step(4)
        assert reward == 1.0
        assert terminated is False
        assert info["exposed"] == 1

    def test_winning_reveal_rewards_ten(self) -> None:
        """Revealing the last safe region scores +10 and terminates."""
        env = env_with_board([8])
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_mine_reveal_penalized(self) -> None:
        """Hitting a mine scores -10 and terminates."""
        env = env_with_board([0])
        obs, reward, terminated, _, info = env.step(0)
        assert reward == -10.0
        assert terminated is True
        assert obs[0, 0] == 9
        assert info["game_state"] == "LOST"

    def test_repeat_reveal_is_invalid(self) -> None:
        """Revealing an exposed tile scores -0.1."""
        env = env_with_board([0])
        env.step(4)
        _, reward, _, _, _ = env.step(4)
        assert reward == pytest.approx(-0.1)

    def test_flagged_reveal_is_invalid(self) -> None:
        """Revealing a flagged tile scores -0.1 and leaves it hidden."""
        env = env_with_board([0])
        env.state = apply(env.state, flag(4))
        _, reward, _, _, _ = env.step(4)
        assert reward == pytest.approx(-0.1)
        assert env.state.tiles[4].exposed is False

    def test_out_of_range_action_raises_error(self) -> None:
        """Actions off the board fail fast."""
        env = env_with_board([0])
        with pytest.raises(IndexError):
            env.step(9)


class TestActionMask:
    """Test valid action masks."""

    def test_mask_excludes_exposed_and_flagged(self) -> None:
        """Only hidden, unflagged tiles are valid."""
        env = env_with_board([0])
        env.step(4)
        env.state = apply(env.state, flag(8))
        mask = env.get_action_mask()
        assert mask.dtype == bool
        assert mask.sum() == 7
        assert not mask[4] and not mask[8]


class TestRender:
    """Test text rendering."""

    def test_ansi_render(self) -> None:
        """ANSI mode returns the board text."""
        env = env_with_board([0], render_mode="ansi")
        env.step(8)
        assert env.render() == "\n".join([
            ". 1  ",
            "1 1  ",
            "     ",
        ])

    def test_no_render_mode_returns_none(self) -> None:
        """Without a render mode nothing is produced."""
        env = env_with_board([0])
        assert env.render() is None
