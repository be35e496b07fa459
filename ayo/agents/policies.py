from __future__ import annotations

from typing import Optional

import numpy as np

from ayo.core import GameState
from ayo.search import GreedyConfig, GreedySearch


class Policy:
    """Policy interface producing probabilities over the six pits of the side to move."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Policy":
        """Return a fresh copy of this policy."""
        return self


class RandomPolicy(Policy):
    """Uniform over the legal pits; the caller's rng does the sampling."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class GreedyPolicy(Policy):
    """Puts all probability on the move chosen by the one-ply capture search."""

    def __init__(self, config: Optional[GreedyConfig] = None, *, rng: Optional[np.random.Generator] = None) -> None:
        self.config = config or GreedyConfig()
        self.search = GreedySearch(self.config, rng=rng)

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros_like(legal_mask, dtype=np.float32)
        if not legal_mask.any():
            return probs
        probs[self.search.run(state)] = 1.0
        return probs

    def spawn(self, seed: Optional[int] = None) -> "GreedyPolicy":
        return GreedyPolicy(self.config, rng=np.random.default_rng(seed))


def select_action(probabilities: np.ndarray, rng: np.random.Generator) -> int:
    if probabilities.sum() <= 0:
        raise ValueError("Policy produced zero probability over legal actions.")
    probs = probabilities.astype(np.float64, copy=True)
    probs /= probs.sum()
    return int(rng.choice(len(probs), p=probs))
