"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, new_game
from .terminal import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = cleared cell with adjacent mine count
        - 9 = mine (cleared, or every mine once the game is over)

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size clears cell (i // size, i % size);
        action i >= size * size toggles the flag on cell i - size * size.

    Rewards:
        - +1 for clearing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for toggling a flag
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 10x10 with 15 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self._num_cells = self.config.total_cells
        self.board: Board = new_game(
            self.config.size, self.config.num_mines, self.np_random
        )

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )

        # Clear actions first, then flag actions
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0
        self._total_safe_cells = self._num_cells - self.config.num_mines

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game on a freshly mined board.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = new_game(
            self.config.size, self.config.num_mines, self.np_random
        )
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to clear, or cell index plus size * size
                to toggle a flag.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        is_flag, row, col = self._decode_action(int(action))
        self._steps += 1

        if is_flag:
            reward = self._flag(row, col)
        else:
            reward = self._clear(row, col)

        observation = self.board.get_observation()
        terminated = self.board.game_over
        truncated = False

        if self.render_mode == "human":
            self.render()

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (is_flag, row, col)."""
        if not 0 <= action < 2 * self._num_cells:
            raise IndexError(f"Action {action} is outside the action space")
        is_flag = action >= self._num_cells
        index = action - self._num_cells if is_flag else action
        return is_flag, index // self.config.size, index % self.config.size

    def _clear(self, row: int, col: int) -> float:
        """Clear a cell and score the result."""
        if not self.board.clear(row, col):
            return -0.1
        if self.board.won:
            return 10.0
        if self.board.lost:
            return -10.0
        return 1.0

    def _flag(self, row: int, col: int) -> float:
        """Toggle a flag; only a no-op is penalised."""
        if not self.board.toggle_flag(row, col):
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "cleared": self.board.cleared_count,
            "total_safe": self._total_safe_cells,
            "flags": self.board.flags_placed,
            "game_state": self.board.game_state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the board.

        Returns:
            Boolean array where True = valid action. Every uncleared cell
            can be cleared or have its flag toggled.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            index = row * self.config.size + col
            mask[index] = True
            mask[index + self._num_cells] = True
        return mask


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
    asynchronous: bool = True,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel play.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.
        asynchronous: Run each environment in its own process.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    env_fns = [make_env for _ in range(n_envs)]
    if asynchronous:
        return gym.vector.AsyncVectorEnv(env_fns)
    return gym.vector.SyncVectorEnv(env_fns)
