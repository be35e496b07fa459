"""Core game logic for the Ayo engine."""

from .state import (
    NUM_PITS,
    PITS_PER_SIDE,
    SEEDS_PER_PIT,
    TOTAL_SEEDS,
    Board,
    GameResult,
    GameState,
    MoveRecord,
    Pit,
    Player,
    Seed,
    Side,
)
from .rules import (
    CAPTURE_COUNTS,
    MAX_RELAY_LAPS,
    IllegalMoveError,
    SowResult,
    apply_move,
    capture,
    check_game_over,
    enumerate_legal_moves,
    final_result,
    initialize_game_state,
    is_valid_move,
    sow,
    winner,
)

__all__ = [
    "NUM_PITS",
    "PITS_PER_SIDE",
    "SEEDS_PER_PIT",
    "TOTAL_SEEDS",
    "CAPTURE_COUNTS",
    "MAX_RELAY_LAPS",
    "Board",
    "GameResult",
    "GameState",
    "MoveRecord",
    "Pit",
    "Player",
    "Seed",
    "Side",
    "IllegalMoveError",
    "SowResult",
    "apply_move",
    "capture",
    "check_game_over",
    "enumerate_legal_moves",
    "final_result",
    "initialize_game_state",
    "is_valid_move",
    "sow",
    "winner",
]
