from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ayo.core import (
    NUM_PITS,
    PITS_PER_SIDE,
    TOTAL_SEEDS,
    GameResult,
    apply_move,
    enumerate_legal_moves,
    initialize_game_state,
)
from ayo.engine import format_board


class AyoEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        relay_sowing: bool = False,
        max_ply: Optional[int] = 400,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._relay = relay_sowing
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0, high=TOTAL_SEEDS, shape=(NUM_PITS,), dtype=np.int16),
                "scores": spaces.Box(low=0, high=TOTAL_SEEDS, shape=(2,), dtype=np.int16),
            }
        )
        self.action_space = spaces.Discrete(PITS_PER_SIDE)

        self._state = initialize_game_state()
        self._last_info: Dict[str, np.ndarray] = {}

    @property
    def state(self):
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = initialize_game_state()
        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info
        return observation, info

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        self._state = apply_move(self._state, int(action_index), relay=self._relay)

        observation = self._build_observation()
        info = self._build_info()
        self._last_info = info

        reward = self._compute_reward(self._state.result)
        terminated = self._state.is_terminal
        truncated = (
            not terminated and self._max_ply is not None and self._state.ply_count >= self._max_ply
        )

        return observation, reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._state.is_terminal:
            return mask
        for pit in enumerate_legal_moves(self._state):
            mask[pit] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return format_board(self._state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {
            "board": self._state.board.counts(),
            "scores": np.array(self._state.scores(), dtype=np.int16),
        }

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask()}

    def _compute_reward(self, result: GameResult) -> float:
        if result == GameResult.PLAYER_A_WIN:
            return 1.0
        if result == GameResult.PLAYER_B_WIN:
            return -1.0
        return 0.0
