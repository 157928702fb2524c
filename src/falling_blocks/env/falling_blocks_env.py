from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Game, GameConfig, MoveDirection, PieceKind, RandomPieceSupply, Board


def _kind_index(kind: Optional[PieceKind]) -> int:
    return 0 if kind is None else int(kind)


class FallingBlocksEnv(gym.Env):
    """
    Single-piece falling block environment over the engine's `Game`.

    Actions (5 total):
      0: Move Down (locks the piece when it cannot move)
      1: Move Left
      2: Move Right
      3: Rotate CW
      4: Rotate CCW

    Observation: board labels (0 empty, 1..7 piece kind, active piece included)
    plus the active and preview piece kinds. Reward is the engine score gained.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    ACT_DOWN = 0
    ACT_LEFT = 1
    ACT_RIGHT = 2
    ACT_ROTATE_CW = 3
    ACT_ROTATE_CCW = 4

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.game = Game.from_config(self.config)

        rows, columns = self.config.rows, self.config.columns
        n_kinds = len(PieceKind) + 1
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=len(PieceKind), shape=(rows, columns), dtype=np.int8),
                "active": spaces.Discrete(n_kinds),
                "preview": spaces.Discrete(n_kinds),
            }
        )
        self.action_space = spaces.Discrete(5)

        self._last_obs: Optional[Dict[str, Any]] = None
        self._steps = 0

    def _get_obs(self) -> Dict[str, Any]:
        return {
            "board": self.game.get_state().astype(np.int8),
            "active": _kind_index(self.game.active_piece.kind),
            "preview": _kind_index(self.game.preview_piece.kind),
        }

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines_cleared": self.game.lines_cleared,
            "pieces_locked": self.game.pieces_locked,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        board = Board(self.config.rows, self.config.columns)
        self.game = Game(board, RandomPieceSupply(seed))
        # First step draws the active/preview pair and spawns
        self.game.step(MoveDirection.DOWN)
        self._steps = 0
        obs = self._get_obs()
        self._last_obs = obs
        return obs, self._get_info()

    def step(self, action: int):
        action = int(action)
        score_before = self.game.score
        spawned = False

        if action == self.ACT_DOWN:
            spawned = self.game.step(MoveDirection.DOWN)
        elif action == self.ACT_LEFT:
            self.game.step(MoveDirection.LEFT)
        elif action == self.ACT_RIGHT:
            self.game.step(MoveDirection.RIGHT)
        elif action == self.ACT_ROTATE_CW:
            self.game.rotate_clockwise()
        elif action == self.ACT_ROTATE_CCW:
            self.game.rotate_counter_clockwise()
        else:
            raise ValueError(f"Unknown action {action}")

        self._steps += 1
        terminated = bool(self.game.is_game_over())
        truncated = self._steps >= self.max_episode_steps
        reward = float(self.game.score - score_before)

        obs = self._get_obs()
        info = self._get_info()
        info["spawned"] = spawned
        self._last_obs = obs
        return obs, reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode == "rgb_array":
            # Create a simple RGB image from the board
            board = self._last_obs["board"] if self._last_obs is not None else self.game.get_state()
            cell = 12
            h, w = board.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    color = (70, 200, 120) if board[y, x] else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        return None

    def close(self) -> None:
        pass
