#!/usr/bin/env python3
"""Pit the greedy capture AI against a baseline policy and report the results."""

import argparse
import json
import logging

import numpy as np

from ayo.agents import GreedyPolicy, RandomPolicy
from ayo.env import AyoEnv
from ayo.evaluation import evaluate_policies
from ayo.search import GreedyConfig


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--baseline", choices=["random", "greedy"], default="random")
    parser.add_argument("--ai-side", choices=["A", "B"], default="A")
    parser.add_argument("--relay-sowing", action="store_true")
    parser.add_argument("--max-ply", type=int, default=400)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(format='%(asctime)s [%(levelname)s]: %(message)s',
                        datefmt='%m/%d/%Y %I:%M:%S %p', level=args.log_level.upper())

    rng = np.random.default_rng(args.seed)
    greedy_config = GreedyConfig(relay_sowing=args.relay_sowing, seed=args.seed)
    ai_policy = GreedyPolicy(greedy_config, rng=rng)
    if args.baseline == "random":
        baseline_policy = RandomPolicy()
    else:
        baseline_policy = GreedyPolicy(greedy_config, rng=rng)

    if args.ai_side == "A":
        policy_a, policy_b = ai_policy, baseline_policy
    else:
        policy_a, policy_b = baseline_policy, ai_policy

    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=args.episodes,
        env_factory=lambda: AyoEnv(relay_sowing=args.relay_sowing, max_ply=args.max_ply),
        rng=rng,
    )

    output = {
        "games": result.games_played,
        "player_a_wins": result.player_a_wins,
        "player_b_wins": result.player_b_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "player_a_winrate": result.winrate_player_a(),
        "player_b_winrate": result.winrate_player_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
