from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from ayo.core import (
    PITS_PER_SIDE,
    GameResult,
    GameState,
    MoveRecord,
    apply_move,
    check_game_over,
    initialize_game_state,
    is_valid_move,
    winner,
)
from ayo.core.rules import DEFAULT_PLAYER_NAMES
from ayo.search import GreedyConfig, GreedySearch

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MOVE_PROMPT = f"Choose a pit (1-{PITS_PER_SIDE}): "
INVALID_MOVE_MESSAGE = "Invalid move! Choose a pit on your side that has seeds."
NOT_A_NUMBER_MESSAGE = f"Please enter a number between 1 and {PITS_PER_SIDE}."


@dataclass
class GameConfig:
    single_player: bool = False
    player_names: Tuple[str, str] = DEFAULT_PLAYER_NAMES
    relay_sowing: bool = False
    seed: Optional[int] = None


def format_board(state: GameState) -> str:
    """Render the board with the second player's row reversed on top."""
    bottom, top = state.players
    rule = "-" * 33
    top_row = "| " + "".join(f"{state.board.pit_at(i).count:2d}  | " for i in reversed(top.pit_indices()))
    bottom_row = "| " + "".join(f"{state.board.pit_at(i).count:2d}  | " for i in bottom.pit_indices())
    lines = [
        f"{top.name} Score: {top.score}",
        rule,
        f"{top_row} ({top.name})",
        rule,
        f"{bottom_row} ({bottom.name})",
        rule,
        f"{bottom.name} Score: {bottom.score}",
    ]
    return "\n".join(lines)


class GameEngine:
    """Drives a game turn by turn, asking humans for moves and searching for the AI."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        state: Optional[GameState] = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.state = state or initialize_game_state(
            single_player=self.config.single_player,
            names=self.config.player_names,
        )
        self.search = GreedySearch(
            GreedyConfig(relay_sowing=self.config.relay_sowing, seed=self.config.seed),
            rng=rng,
        )
        self.history: List[MoveRecord] = []
        self._input = input_fn
        self._output = output_fn
        self._selectors: Dict[bool, Callable[[], int]] = {
            False: self._human_move,
            True: self._ai_move,
        }

    def start(self) -> GameResult:
        self._output("Welcome to Ayo (Oware)!")
        self._output(format_board(self.state))
        while not check_game_over(self.state):
            self.play_turn()
        return self.finalize()

    def play_turn(self) -> MoveRecord:
        player = self.state.current_player
        self._output(f"\n{player.name}'s turn.")
        pit = self.select_move()
        apply_move(self.state, pit, in_place=True, relay=self.config.relay_sowing)
        record = self.state.last_move
        self.history.append(record)
        if record.captured:
            self._output(f"{player.name} captured {record.captured} seeds.")
        self._output(format_board(self.state))
        return record

    def select_move(self) -> int:
        return self._selectors[self.state.current_player.is_ai]()

    def finalize(self) -> GameResult:
        player_a, player_b = self.state.players
        self._output("")
        self._output("Game Over!")
        self._output("Final Scores:")
        self._output(f"{player_a.name}: {player_a.score}")
        self._output(f"{player_b.name}: {player_b.score}")

        best = winner(self.state)
        if best is None:
            self._output("It's a Draw!")
        else:
            self._output(f"{best.name} Wins!")
        logger.info(
            "Game finished after %d moves: %s (%d-%d)",
            self.state.ply_count,
            self.state.result.value,
            player_a.score,
            player_b.score,
        )
        return self.state.result

    # ------------------------------------------------------------------
    # Move selection
    # ------------------------------------------------------------------
    def _human_move(self) -> int:
        while True:
            raw = self._input(MOVE_PROMPT).strip()
            if not raw.isdecimal():
                self._output(NOT_A_NUMBER_MESSAGE)
                continue
            pit = int(raw) - 1
            if is_valid_move(self.state, pit):
                return pit
            self._output(INVALID_MOVE_MESSAGE)

    def _ai_move(self) -> int:
        self._output("AI is thinking...")
        pit = self.search.run(self.state)
        self._output(f"AI chooses pit {pit + 1}")
        return pit
