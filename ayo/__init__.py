"""Ayo (Oware-family) game engine."""

from . import agents, core, engine, env, evaluation, search
from .agents import GreedyPolicy, Policy, RandomPolicy
from .core import (
    Board,
    GameResult,
    GameState,
    IllegalMoveError,
    Pit,
    Player,
    Seed,
    apply_move,
    initialize_game_state,
)
from .engine import GameConfig, GameEngine, format_board
from .env import AyoEnv
from .evaluation import EvaluationResult, evaluate_policies
from .search import GreedyConfig, GreedySearch, find_best_move

__all__ = [
    "agents",
    "core",
    "engine",
    "env",
    "evaluation",
    "search",
    "AyoEnv",
    "Board",
    "EvaluationResult",
    "GameConfig",
    "GameEngine",
    "GameResult",
    "GameState",
    "GreedyConfig",
    "GreedyPolicy",
    "GreedySearch",
    "IllegalMoveError",
    "Pit",
    "Player",
    "Policy",
    "RandomPolicy",
    "Seed",
    "apply_move",
    "evaluate_policies",
    "find_best_move",
    "format_board",
    "initialize_game_state",
]
