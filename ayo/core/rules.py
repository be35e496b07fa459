from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .state import (
    NUM_PITS,
    PITS_PER_SIDE,
    Board,
    GameResult,
    GameState,
    MoveRecord,
    Player,
    Side,
)

logger = logging.getLogger(__name__)

CAPTURE_COUNTS = (1, 2)
MAX_RELAY_LAPS = 64
DEFAULT_PLAYER_NAMES = ("Player A", "Player B")


class IllegalMoveError(ValueError):
    pass


@dataclass(frozen=True)
class SowResult:
    landing: int
    sown: int
    laps: int = 1


def initialize_game_state(
    *,
    single_player: bool = False,
    names: Tuple[str, str] = DEFAULT_PLAYER_NAMES,
) -> GameState:
    player_a = Player(names[0], False, 0, PITS_PER_SIDE - 1)
    player_b = Player(names[1], single_player, PITS_PER_SIDE, NUM_PITS - 1)
    return GameState(board=Board(), players=(player_a, player_b), current=Side.A)


def is_valid_move(state: GameState, pit: int) -> bool:
    if not 0 <= pit < PITS_PER_SIDE:
        return False
    index = state.current_player.absolute_index(pit)
    return state.board.pit_at(index).count > 0


def enumerate_legal_moves(state: GameState) -> List[int]:
    return [pit for pit in range(PITS_PER_SIDE) if is_valid_move(state, pit)]


def sow(board: Board, source: int, *, relay: bool = False) -> SowResult:
    """Distribute the seeds of ``source`` one by one into the following pits.

    Sowing wraps around the board and does not skip the source pit. With
    ``relay`` enabled, the seeds of the landing pit are picked up and sown
    again until the last seed falls into a previously empty pit, or the lap
    limit is reached.
    """
    hand = deque(board.pit_at(source).take_all())
    index = source
    sown = 0
    laps = 1
    while True:
        landed_empty = False
        while hand:
            index = (index + 1) % NUM_PITS
            target = board.pit_at(index)
            landed_empty = target.count == 0
            target.add(hand.popleft())
            sown += 1
        if not relay or landed_empty or laps >= MAX_RELAY_LAPS:
            return SowResult(landing=index, sown=sown, laps=laps)
        hand = deque(board.pit_at(index).take_all())
        laps += 1


def capture(board: Board, landing: int, opponent: Player) -> Tuple[int, Tuple[int, ...]]:
    if not opponent.owns(landing):
        return 0, ()
    if board.pit_at(landing).count not in CAPTURE_COUNTS:
        return 0, ()

    captured = 0
    cleared: List[int] = []
    index = landing
    while opponent.owns(index) and board.pit_at(index).count in CAPTURE_COUNTS:
        pit = board.pit_at(index)
        captured += pit.count
        pit.clear()
        cleared.append(index)
        index -= 1
    return captured, tuple(cleared)


def apply_move(
    state: GameState,
    pit: int,
    *,
    in_place: bool = False,
    relay: bool = False,
) -> GameState:
    if state.is_terminal:
        raise IllegalMoveError("Cannot apply a move to a finished game.")
    if not is_valid_move(state, pit):
        raise IllegalMoveError(f"Pit {pit + 1} is not a valid move for {state.current_player.name}.")

    target_state = state if in_place else state.copy()
    mover = target_state.current_player
    source = mover.absolute_index(pit)

    sown = sow(target_state.board, source, relay=relay)
    captured, cleared = capture(target_state.board, sown.landing, target_state.opponent)
    if captured > 0:
        mover.add_score(captured)

    target_state.last_move = MoveRecord(
        side=target_state.current,
        pit=pit,
        source=source,
        landing=sown.landing,
        sown=sown.sown,
        captured=captured,
        captured_pits=cleared,
    )
    target_state.ply_count += 1
    logger.debug(
        "%s sowed pit %d: landed on %d, captured %d",
        mover.name,
        pit + 1,
        sown.landing,
        captured,
    )

    target_state.current = target_state.current.other()
    check_game_over(target_state)
    return target_state


def check_game_over(state: GameState) -> bool:
    if state.is_terminal:
        return True
    player = state.current_player
    if state.board.side_empty(player.pit_start, player.pit_end):
        state.result = final_result(state)
        logger.debug("Game over: %s has no seeds left, result %s", player.name, state.result.value)
        return True
    return False


def final_result(state: GameState) -> GameResult:
    score_a, score_b = state.scores()
    if score_a > score_b:
        return GameResult.PLAYER_A_WIN
    if score_b > score_a:
        return GameResult.PLAYER_B_WIN
    return GameResult.DRAW


def winner(state: GameState) -> Optional[Player]:
    if state.result == GameResult.PLAYER_A_WIN:
        return state.players[0]
    if state.result == GameResult.PLAYER_B_WIN:
        return state.players[1]
    return None
