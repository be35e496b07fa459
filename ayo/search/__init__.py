"""One-ply greedy move search."""

from .greedy import GreedyConfig, GreedySearch, find_best_move, score_moves, simulate_capture

__all__ = ["GreedyConfig", "GreedySearch", "find_best_move", "score_moves", "simulate_capture"]
