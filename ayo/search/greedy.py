from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

from ayo.core import (
    GameState,
    IllegalMoveError,
    apply_move,
    enumerate_legal_moves,
)

logger = logging.getLogger(__name__)


@dataclass
class GreedyConfig:
    relay_sowing: bool = False
    seed: Optional[int] = None


def simulate_capture(state: GameState, pit: int, *, relay: bool = False) -> int:
    """Play ``pit`` on a disposable copy of ``state`` and return the seeds captured."""
    sandbox = state.copy()
    apply_move(sandbox, pit, in_place=True, relay=relay)
    return sandbox.last_move.captured


def score_moves(state: GameState, *, relay: bool = False) -> Dict[int, int]:
    return {pit: simulate_capture(state, pit, relay=relay) for pit in enumerate_legal_moves(state)}


def find_best_move(
    state: GameState,
    *,
    relay: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """Return the relative pit whose simulated move captures the most seeds.

    Pits are scanned in increasing order and only a strictly greater capture
    replaces the running best, so ties go to the lowest pit.
    """
    legal = enumerate_legal_moves(state)
    if not legal:
        raise IllegalMoveError(f"{state.current_player.name} has no legal move.")

    best_move = -1
    max_captured = -1
    for pit in legal:
        captured = simulate_capture(state, pit, relay=relay)
        if captured > max_captured:
            max_captured = captured
            best_move = pit

    if best_move == -1:
        rng = rng or np.random.default_rng()
        best_move = int(rng.choice(legal))
        logger.debug("No scored move for %s; picked pit %d at random", state.current_player.name, best_move + 1)
    else:
        logger.debug(
            "%s best move pit %d captures %d",
            state.current_player.name,
            best_move + 1,
            max_captured,
        )
    return best_move


class GreedySearch:
    def __init__(self, config: Optional[GreedyConfig] = None, *, rng: Optional[np.random.Generator] = None) -> None:
        self.config = config or GreedyConfig()
        self.rng = rng or np.random.default_rng(self.config.seed)

    def run(self, state: GameState) -> int:
        return find_best_move(state, relay=self.config.relay_sowing, rng=self.rng)

    def scores(self, state: GameState) -> Dict[int, int]:
        return score_moves(state, relay=self.config.relay_sowing)
