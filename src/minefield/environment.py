"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the game reducer.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import INITIAL_LEVEL, LevelConfig, check_index, level_for
from .state import (
    GameState,
    apply,
    exposed_count,
    get_observation,
    mine_count,
    outcome,
    render,
    reset,
    reveal,
    Outcome,
)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = exposed tile with adjacent mine count
        - 9 = exposed mine

    Actions:
        Discrete action space of size side * side.
        Action i reveals tile i (row i // side, column i % side).

    Rewards:
        - +1 for revealing a safe tile
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already exposed/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        level_id: Optional[str] = None,
        config: Optional[LevelConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            level_id: Preset level name (default: easy).
            config: Explicit level configuration, overriding the preset.
            render_mode: How to render the environment.
        """
        super().__init__()

        if config is None:
            level_id = level_id or INITIAL_LEVEL
            config = level_for(level_id)
        self.level_id = level_id
        self.config = config
        self.render_mode = render_mode
        side = self.config.side

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(side, side),
            dtype=np.int8,
        )

        # One action per tile
        self.action_space = spaces.Discrete(side * side)

        command = reset(self.level_id, config=self.config)
        self.state = GameState(command.tiles, command.level_id)
        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.state = apply(
            self.state,
            reset(self.level_id, config=self.config, rng=self.np_random),
        )
        self._steps = 0

        return get_observation(self.state), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Tile index to reveal (row * side + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        observation = get_observation(self.state)
        terminated = outcome(self.state) != Outcome.PLAYING
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, action: int) -> float:
        """
        Reveal a tile and score the result.

        Args:
            action: Tile index to reveal.

        Returns:
            Reward value.
        """
        check_index(len(self.state.tiles), action)
        tile = self.state.tiles[action]

        # Invalid action (already exposed or flagged)
        if not tile.is_hidden:
            return -0.1

        self.state = apply(self.state, reveal(action))

        result = outcome(self.state)
        if result == Outcome.WON:
            return 10.0
        if result == Outcome.LOST:
            return -10.0

        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        total = len(self.state.tiles)
        return {
            "steps": self._steps,
            "exposed": exposed_count(self.state),
            "total_safe": total - mine_count(self.state),
            "game_state": outcome(self.state).name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render(self.state)
        if self.render_mode == "human":
            print(render(self.state))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden, unflagged tile.
        """
        return np.array(
            [tile.is_hidden for tile in self.state.tiles], dtype=bool
        )
