from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import Action, FallingBlocksGame, GameConfig, TetrominoType
from falling_blocks.visualization.palette import color_for_value
from falling_blocks.visualization.text import render_text


class FallingBlocksEnv(gym.Env):
    """Agent-facing wrapper: one intent plus one gravity step per env step.

    Observation is the board with the falling piece overlaid as negative
    tetromino values. Reward is the score gained during the step.
    """

    metadata = {"render_modes": ["rgb_array", "ansi"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 max_episode_steps: int = 10000,
                 step_penalty: float = 0.0,
                 terminal_penalty: float = 0.0) -> None:
        super().__init__()
        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"unsupported render_mode {render_mode!r}")
        self.game = FallingBlocksGame(config)
        self.render_mode = render_mode
        self.max_episode_steps = int(max_episode_steps)
        self.step_penalty = float(step_penalty)
        self.terminal_penalty = float(terminal_penalty)

        h, w = self.game.grid.height, self.game.grid.width
        n_kinds = len(TetrominoType)
        self.observation_space = spaces.Box(low=-n_kinds, high=n_kinds, shape=(h, w), dtype=np.int8)
        self.action_space = spaces.Discrete(len(Action))

        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return self.game.get_state().astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "level": self.game.level,
            "lines_cleared_total": self.game.lines_cleared_total,
            "max_height": self.game.grid.get_max_height(),
            "holes": self.game.grid.count_holes(),
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game.reset(seed)
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        action = Action(int(action))
        score_before = self.game.score
        lines_before = self.game.lines_cleared_total

        self.game.step(action)
        # Hard drop already locked and respawned; gravity applies to every other action.
        if action != Action.HARD_DROP:
            self.game.gravity_step()

        self._steps += 1
        terminated = bool(self.game.game_over)
        truncated = self._steps >= self.max_episode_steps and not terminated

        reward = float(self.game.score - score_before) + self.step_penalty
        if terminated:
            reward += self.terminal_penalty

        info = self._get_info()
        info["lines_cleared"] = self.game.lines_cleared_total - lines_before
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray | str]:
        if self.render_mode == "ansi":
            return render_text(self.game.snapshot())
        if self.render_mode == "rgb_array":
            state = self.game.get_state()
            cell = 12
            h, w = state.shape
            img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
            for y in range(h):
                for x in range(w):
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color_for_value(int(state[y, x]))
            return img
        return None

    def close(self) -> None:
        pass
