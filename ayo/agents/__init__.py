"""Move-selection policies for automated play."""

from .policies import GreedyPolicy, Policy, RandomPolicy, select_action

__all__ = ["GreedyPolicy", "Policy", "RandomPolicy", "select_action"]
