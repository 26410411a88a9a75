"""
Gymnasium environment wrapper for Minefield.

Drives a Board through the same reveal/flag entry points a front-end
uses, behind a standard RL interface.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .outcome import OutcomeKind
from .presentation import render_text


# ============================================================================
# Minefield Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minefield.

    Observation:
        2D array of shape (height, width) where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with proximity count

    Actions:
        Discrete action space of size 2 * width * height.
        Action i < width * height reveals cell (i % width, i // width);
        the second half toggles a flag on the same cells.

    Rewards:
        - +1 for every safe cell revealed
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a rejected action
        - 0 for a flag toggle
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
            config: Board configuration (default: 60x40 with 300 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode
        self._cells = self.config.width * self.config.height

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

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
        self.board.reset(int(self.np_random.integers(2**32)))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal, or cell index plus
                width * height to toggle a flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        flag, x, y = self._decode_action(int(action))
        self._steps += 1

        if flag:
            reward = 0.0 if self.board.toggle_flag(x, y) else -0.1
        else:
            reward = self._reveal_reward(x, y)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        return observation, reward, terminated, False, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, x, y)."""
        flag = action >= self._cells
        index = action - self._cells if flag else action
        return flag, index % self.config.width, index // self.config.width

    def _reveal_reward(self, x: int, y: int) -> float:
        """Reveal a cell and score the outcome."""
        outcome = self.board.reveal(x, y)
        if outcome.kind == OutcomeKind.REJECTED:
            return -0.1
        if outcome.kind == OutcomeKind.LOST:
            return -10.0
        reward = float(len(outcome.revealed))
        if outcome.kind == OutcomeKind.WON:
            reward += 10.0
        return reward

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_safe_count,
            "total_safe": self.board.safe_cells,
            "flagged": self.board.flagged_count,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_text(self.board)
        if self.render_mode == "human":
            print(render_text(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for (x, y), cell in self.board.iter_cells():
            index = y * self.config.width + x
            mask[index] = cell.is_hidden
            mask[self._cells + index] = not cell.revealed
        return mask
