#!/usr/bin/env python3
"""Play Ayo in the console, against another human or the AI, with optional move logs & replay."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from ayo import GameConfig, GameEngine, format_board
from ayo.core import GameResult, apply_move, initialize_game_state

logger = logging.getLogger(__file__)


def ask_single_player(input_fn=input) -> bool:
    return input_fn("Single-player mode? (yes/no): ").strip().lower() == "yes"


def build_log(engine: GameEngine) -> Dict:
    metadata = {
        "players": [player.name for player in engine.state.players],
        "ai": [player.is_ai for player in engine.state.players],
        "relay_sowing": engine.config.relay_sowing,
        "result": engine.state.result.value,
        "scores": list(engine.state.scores()),
    }
    moves: List[Dict] = []
    for index, record in enumerate(engine.history):
        moves.append(
            {
                "move_index": index,
                "side": record.side.name,
                "pit": record.pit + 1,
                "landing": record.landing,
                "captured": record.captured,
            }
        )
    return {"metadata": metadata, "moves": moves}


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Move log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    metadata = data.get("metadata", {})
    relay = bool(metadata.get("relay_sowing", False))
    state = initialize_game_state()
    if verbose:
        print("Replaying logged game.")
        print(format_board(state))
    for entry in data.get("moves", []):
        state = apply_move(state, int(entry["pit"]) - 1, relay=relay)
        if verbose:
            print(f"\n{state.players[0 if entry['side'] == 'A' else 1].name} plays pit {entry['pit']}")
            print(format_board(state))
    summary = {
        "result": state.result.value,
        "moves": state.ply_count,
        "scores": list(state.scores()),
        "board": state.board.counts().tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def play_interactive(args: argparse.Namespace) -> Optional[GameResult]:
    if args.single_player is None:
        single_player = ask_single_player()
    else:
        single_player = args.single_player

    config = GameConfig(single_player=single_player, relay_sowing=args.relay_sowing, seed=args.seed)
    engine = GameEngine(config)
    try:
        result = engine.start()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        logger.info("Session aborted after %d moves", engine.state.ply_count)
        return None

    if args.log_file:
        save_log(build_log(engine), Path(args.log_file))
    return result


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Ayo (Oware) in the console.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--single-player", dest="single_player", action="store_true", default=None,
                      help="Play against the AI without asking")
    mode.add_argument("--two-player", dest="single_player", action="store_false",
                      help="Two humans share the console")
    parser.set_defaults(single_player=None)
    parser.add_argument("--relay-sowing", action="store_true",
                        help="Keep sowing from the landing pit until a seed falls into an empty pit")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the AI's random fallback")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(format='%(asctime)s [%(levelname)s]: %(message)s',
                        datefmt='%m/%d/%Y %I:%M:%S %p', level=args.log_level.upper())

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    try:
        play_interactive(args)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye.")
        sys.exit(0)


if __name__ == "__main__":
    main()
