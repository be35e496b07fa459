from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ayo.agents import Policy, select_action
from ayo.core import GameResult, GameState, Side
from ayo.env import AyoEnv

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    games_played: int
    player_a_wins: int
    player_b_wins: int
    draws: int
    average_length: float

    def winrate_player_a(self) -> float:
        return self.player_a_wins / max(1, self.games_played)

    def winrate_player_b(self) -> float:
        return self.player_b_wins / max(1, self.games_played)


def evaluate_policies(
    policy_a: Policy,
    policy_b: Policy,
    *,
    episodes: int,
    env_factory: Optional[Callable[[], AyoEnv]] = None,
    rng: Optional[np.random.Generator] = None,
) -> EvaluationResult:
    env_factory = env_factory or AyoEnv
    rng = rng or np.random.default_rng()

    player_a_wins = 0
    player_b_wins = 0
    draws = 0
    total_ply = 0

    for episode in range(episodes):
        env = env_factory()
        obs, info = env.reset()
        terminated = env.state.is_terminal
        ply = 0

        while not terminated:
            state_snapshot: GameState = env.state.copy()
            legal_mask = info["legal_action_mask"]
            policy = policy_a if state_snapshot.current == Side.A else policy_b
            probs = policy.act(state_snapshot, legal_mask)
            if probs.sum() <= 0:
                probs = legal_mask.astype(np.float32)
            action_index = select_action(probs, rng)
            obs, reward, terminated, truncated, info = env.step(action_index)
            ply += 1
            if truncated:
                terminated = True

        total_ply += ply
        result = env.state.result
        if result == GameResult.PLAYER_A_WIN:
            player_a_wins += 1
        elif result == GameResult.PLAYER_B_WIN:
            player_b_wins += 1
        else:
            draws += 1
        logger.debug("Episode %d finished after %d plies: %s", episode, ply, result.value)

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        player_a_wins=player_a_wins,
        player_b_wins=player_b_wins,
        draws=draws,
        average_length=average_length,
    )
