"""Evaluation helpers for the Ayo engine."""

from .match import EvaluationResult, evaluate_policies

__all__ = ["EvaluationResult", "evaluate_policies"]
