"""
Gymnasium environment wrapper for the minefield game.

Exposes a session's primary and secondary commands as one discrete
action space so agents and scripted observers can drive a game.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .controller import GameController, GameStatus
from .errors import MinefieldError
from .tile import FlagState
from .view import render_text


# ============================================================================
# Constants
# ============================================================================

WIN_REWARD = 10.0
LOSS_REWARD = -10.0
REJECTED_REWARD = -0.1
PROGRESS_REWARD = 1.0
FLAG_REWARD = 0.5


# ============================================================================
# Minefield Environment
# ============================================================================

class MinefieldEnv(gym.Env):
    """
    Gymnasium environment for the minefield game.

    Observation:
        2D array where:
        - -1 = hidden tile
        - -2 = flagged tile
        - 0-8 = revealed tile with adjacent hazard count
        - 9 = revealed hazard

    Actions:
        Discrete action space of size 2 * rows * cols.
        Action i < rows * cols is a primary click on (i // cols, i % cols);
        the upper half are secondary clicks on the same positions.

    Rewards:
        - +10 for winning (every hazard flagged)
        - -10 for revealing a hazard
        - +1 for a safe reveal or the opening handicap
        - +0.5 / -0.5 for flagging a hazard / a safe tile
        - -0.1 for a rejected command
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 10x10, 20% hazards).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.controller = GameController.new(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self._num_tiles = self.config.rows * self.config.cols
        self.action_space = spaces.Discrete(2 * self._num_tiles)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new session on a freshly generated board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        rng = random.Random(int(self.np_random.integers(2**32)))
        self.controller = GameController.new(self.config, rng)
        self._steps = 0

        return self.controller.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one command.

        Args:
            action: Encoded command, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1

        if not self.action_space.contains(action):
            reward = REJECTED_REWARD
        else:
            is_primary, row, col = self._decode_action(action)
            reward = self._apply(is_primary, row, col)

        observation = self.controller.board.get_observation()
        terminated = self.controller.is_over
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Split an action into (is_primary, row, col)."""
        is_primary = action < self._num_tiles
        index = action % self._num_tiles
        return is_primary, index // self.config.cols, index % self.config.cols

    def _apply(self, is_primary: bool, row: int, col: int) -> float:
        """Run the command and score the result."""
        try:
            if is_primary:
                result = self.controller.on_primary(row, col)
            else:
                result = self.controller.on_secondary(row, col)
        except MinefieldError:
            return REJECTED_REWARD

        status = self.controller.status
        if status == GameStatus.LOST:
            return LOSS_REWARD
        if status == GameStatus.WON:
            return WIN_REWARD

        if not isinstance(result, FlagState):
            return PROGRESS_REWARD
        if result == FlagState.FLAGGED:
            tile = self.controller.board.get_tile(row, col)
            return FLAG_REWARD if tile.is_hazard else -FLAG_REWARD
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.controller.board
        return {
            "steps": self._steps,
            "remaining_hazards": board.remaining_hazards,
            "hidden": len(board.get_hidden_positions()),
            "handicap_available": self.controller.handicap_available,
            "game_state": self.controller.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.controller.board)
        if self.render_mode == "human":
            print(render_text(self.controller.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Hidden tiles accept
            both command kinds, except that flagged tiles cannot be
            revealed once the handicap is spent.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if self.controller.is_over:
            return mask
        board = self.controller.board
        for row, col in board.get_hidden_positions():
            index = row * self.config.cols + col
            tile = board.get_tile(row, col)
            if self.controller.handicap_available or not tile.is_flagged:
                mask[index] = True
            mask[self._num_tiles + index] = True
        return mask
