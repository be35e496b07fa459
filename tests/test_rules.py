import numpy as np
import pytest

from ayo.core import (
    TOTAL_SEEDS,
    Board,
    GameResult,
    GameState,
    IllegalMoveError,
    Side,
    apply_move,
    capture,
    check_game_over,
    enumerate_legal_moves,
    initialize_game_state,
    is_valid_move,
    sow,
)


def make_state(counts, *, current=Side.A, scores=(0, 0)) -> GameState:
    state = initialize_game_state()
    state.board = Board.from_counts(counts)
    state.current = current
    for player, score in zip(state.players, scores):
        player.score = score
    return state


def test_opening_move_sows_into_next_four_pits():
    state = initialize_game_state()
    next_state = apply_move(state, 0)

    assert next_state.board.counts().tolist() == [0, 5, 5, 5, 5, 4, 4, 4, 4, 4, 4, 4]
    assert next_state.last_move.landing == 4
    assert next_state.last_move.captured == 0
    assert next_state.scores() == (0, 0)
    assert next_state.current == Side.B
    assert next_state.result == GameResult.ONGOING
    # the input state is left untouched
    assert state.board.counts().tolist() == [4] * 12
    assert state.current == Side.A


def test_sowing_wraps_around_and_refills_source():
    board = Board.from_counts([12, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1])
    result = sow(board, 0)

    assert result.landing == 0
    assert result.sown == 12
    assert board.counts().tolist() == [1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2]


def test_relay_sowing_continues_from_occupied_landing_pit():
    counts = [1, 2, 0, 0, 0, 0, 4, 4, 4, 4, 4, 4]

    single = Board.from_counts(counts)
    assert sow(single, 0).landing == 1
    assert single.counts().tolist()[:6] == [0, 3, 0, 0, 0, 0]

    relay = Board.from_counts(counts)
    result = sow(relay, 0, relay=True)
    assert result.landing == 4
    assert result.laps == 2
    assert result.sown == 4
    assert relay.counts().tolist()[:6] == [0, 0, 1, 1, 1, 0]


def test_chained_capture_takes_whole_run():
    state = make_state([0, 0, 0, 0, 0, 3, 1, 0, 1, 5, 5, 5])
    next_state = apply_move(state, 5)

    record = next_state.last_move
    assert record.landing == 8
    assert record.captured == 5
    assert record.captured_pits == (8, 7, 6)
    assert next_state.players[0].score == 5
    assert next_state.board.counts().tolist() == [0, 0, 0, 0, 0, 0, 0, 0, 0, 5, 5, 5]


def test_capture_chain_stops_at_pit_outside_one_or_two():
    state = make_state([0, 0, 0, 0, 0, 4, 3, 3, 3, 1, 2, 5])
    next_state = apply_move(state, 5)

    assert next_state.last_move.landing == 9
    assert next_state.last_move.captured == 2
    assert next_state.players[0].score == 2
    assert next_state.board.counts().tolist() == [0, 0, 0, 0, 0, 0, 4, 4, 4, 0, 2, 5]


def test_capture_chain_stops_at_range_boundary_for_player_b():
    state = make_state([1, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 2], current=Side.B)
    next_state = apply_move(state, 5)

    assert next_state.last_move.landing == 1
    assert next_state.last_move.captured_pits == (1, 0)
    assert next_state.players[1].score == 3
    assert next_state.board.counts().tolist() == [0, 0, 0, 4, 0, 0, 0, 0, 0, 0, 0, 0]
    assert next_state.current == Side.A
    assert next_state.result == GameResult.ONGOING


def test_no_capture_on_own_side_or_large_count():
    state = initialize_game_state()
    board = Board.from_counts([2, 1, 1, 1, 1, 1, 3, 4, 4, 4, 4, 4])
    # landing on the mover's own side never captures
    assert capture(board, 1, state.players[1]) == (0, ())
    # landing pit count outside 1..2
    assert capture(board, 6, state.players[1]) == (0, ())
    assert board.counts().tolist() == [2, 1, 1, 1, 1, 1, 3, 4, 4, 4, 4, 4]


def test_invalid_moves_raise_without_mutation():
    state = make_state([0, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4])

    assert not is_valid_move(state, 0)
    assert not is_valid_move(state, 6)
    assert not is_valid_move(state, -1)
    assert enumerate_legal_moves(state) == [1, 2, 3, 4, 5]

    for pit in (0, 6, -1):
        with pytest.raises(IllegalMoveError):
            apply_move(state, pit, in_place=True)
    assert state.board.counts().tolist() == [0, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4, 4]
    assert state.ply_count == 0


def test_move_that_empties_opponent_ends_game():
    state = make_state([0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0])
    next_state = apply_move(state, 5)

    assert next_state.last_move.captured == 1
    assert next_state.result == GameResult.PLAYER_A_WIN
    assert next_state.is_terminal
    with pytest.raises(IllegalMoveError):
        apply_move(next_state, 0)


def test_empty_side_to_move_is_game_over():
    state = make_state([0, 0, 0, 0, 0, 0, 4, 4, 4, 4, 4, 4], scores=(3, 5))
    assert check_game_over(state)
    assert state.result == GameResult.PLAYER_B_WIN


def test_equal_scores_draw_and_leftover_seeds_not_awarded():
    state = make_state([0, 0, 0, 0, 0, 0, 4, 4, 4, 4, 4, 4], scores=(6, 6))
    assert check_game_over(state)
    assert state.result == GameResult.DRAW
    assert state.scores() == (6, 6)


def test_seeds_are_conserved_through_random_game():
    rng = np.random.default_rng(7)
    state = initialize_game_state()
    for _ in range(300):
        if check_game_over(state):
            break
        pit = int(rng.choice(enumerate_legal_moves(state)))
        previous_scores = state.scores()
        state = apply_move(state, pit)
        assert state.seeds_in_play() == TOTAL_SEEDS
        assert state.scores()[0] >= previous_scores[0]
        assert state.scores()[1] >= previous_scores[1]


def test_relay_sowing_stops_at_lap_limit(monkeypatch):
    counts = [1, 2, 0, 0, 1, 0, 0, 4, 4, 4, 4, 4]

    uncapped = Board.from_counts(counts)
    result = sow(uncapped, 0, relay=True)
    assert result.laps == 3
    assert result.landing == 6

    monkeypatch.setattr("ayo.core.rules.MAX_RELAY_LAPS", 2)
    capped = Board.from_counts(counts)
    result = sow(capped, 0, relay=True)

    assert result.laps == 2
    assert result.landing == 4
    assert result.sown == 4
    assert capped.counts().tolist() == [0, 0, 1, 1, 2, 0, 0, 4, 4, 4, 4, 4]
    assert capped.total_seeds() == sum(counts)
