import random

import pytest

from mancala.game.board import (
    DAVIDMONTALA,
    JONAKALA,
    PLAYER_ONE,
    PLAYER_TWO,
    TIE,
    VARIANTS,
    Board,
    pit_indices,
    store_of,
)
from mancala.game.errors import InvalidMoveError
from mancala.game.rules import (
    apply_move,
    finalize,
    is_terminal,
    legal_moves,
    new_game,
    play_move,
    trace_of,
    winner_of,
)
from mancala.game.sowing import MAX_RELAYS


def test_new_game_and_legal_moves():
    b = new_game(JONAKALA)
    assert b.variant == JONAKALA
    assert legal_moves(b) == frozenset(range(6))


def test_davidmontala_extra_turn():
    b = apply_move(new_game(DAVIDMONTALA), 2)
    assert b.current_player == PLAYER_ONE
    assert b.pits[6] == 1
    assert b.move_number == 2
    assert legal_moves(b) == frozenset({0, 1, 3, 4, 5})


def test_davidmontala_turn_passes():
    res = play_move(new_game(DAVIDMONTALA), 0)
    assert res.board.current_player == PLAYER_TWO
    assert res.board.pits[:6] == (0, 5, 5, 5, 5, 4)
    assert not res.extra_turn
    assert res.mover == PLAYER_ONE


def test_jonakala_chain_continues_past_first_landing():
    res = play_move(new_game(JONAKALA), 5)
    # First relay lands on pit 9 which already held stones, so sowing goes on.
    assert res.sow.relays > 1
    assert res.sow.landing_index != 9
    assert res.sow.landing_index == 6
    assert res.board.pits == (5, 0, 5, 5, 5, 1, 2, 5, 5, 0, 5, 5, 5, 0)


def test_jonakala_store_landing_passes_turn():
    res = play_move(new_game(JONAKALA), 2)
    assert res.sow.ended_in_own_store
    assert res.board.current_player == PLAYER_TWO
    assert not res.extra_turn
    assert res.board.pits[6] == 1


def test_jonakala_chain_ending_in_empty_pit_passes_turn():
    b = Board(pits=[0, 0, 0, 2, 0, 1, 0, 0, 3, 3, 3, 3, 3, 0], variant=JONAKALA)
    nb = apply_move(b, 3)
    assert nb.current_player == PLAYER_TWO
    assert nb.pits[7] == 1


@pytest.mark.parametrize("pit", [6, 13, 7, 12, 14, -1])
def test_invalid_move_out_of_range(pit):
    b = new_game(DAVIDMONTALA)
    before = b.pits
    with pytest.raises(InvalidMoveError):
        apply_move(b, pit)
    assert b.pits == before
    assert b.pits is before
    assert b.current_player == PLAYER_ONE


def test_invalid_move_empty_pit():
    b = apply_move(new_game(DAVIDMONTALA), 2)  # extra turn, pit 2 now empty
    with pytest.raises(InvalidMoveError):
        apply_move(b, 2)
    assert b.pits[2] == 0
    assert b.current_player == PLAYER_ONE


@pytest.mark.parametrize("pit", [True, 2.0, "2", None])
def test_invalid_move_wrong_type(pit):
    with pytest.raises(InvalidMoveError):
        apply_move(new_game(DAVIDMONTALA), pit)


def test_player_two_cannot_play_player_one_pits():
    b = apply_move(new_game(DAVIDMONTALA), 0)
    assert b.current_player == PLAYER_TWO
    with pytest.raises(InvalidMoveError):
        apply_move(b, 3)
    assert apply_move(b, 7).move_number == 3


def test_is_terminal():
    assert not is_terminal(new_game().pits)
    assert is_terminal([0] * 6 + [0] + [1] * 6 + [0])
    assert is_terminal([1] * 6 + [0] + [0] * 6 + [0])
    assert not is_terminal([0] * 5 + [1] + [0] + [0] * 5 + [1] + [0])


def test_finalize_tie():
    pits, winner = finalize([0, 0, 0, 0, 0, 0, 6, 1, 1, 1, 1, 1, 1, 0])
    assert pits == (0, 0, 0, 0, 0, 0, 6, 0, 0, 0, 0, 0, 0, 6)
    assert winner == TIE


def test_winner_of():
    assert winner_of([0] * 6 + [25] + [0] * 6 + [23]) == PLAYER_ONE
    assert winner_of([0] * 6 + [23] + [0] * 6 + [25]) == PLAYER_TWO
    assert winner_of([0] * 6 + [24] + [0] * 6 + [24]) == TIE


@pytest.mark.parametrize("variant", VARIANTS)
def test_move_emptying_side_finalizes(variant):
    b = Board(pits=[0, 0, 0, 0, 0, 1, 20, 2, 2, 2, 2, 2, 2, 15], variant=variant)
    nb = apply_move(b, 5)
    assert nb.game_over
    assert nb.pits == (0, 0, 0, 0, 0, 0, 21, 0, 0, 0, 0, 0, 0, 27)
    assert nb.winner == PLAYER_TWO
    assert sum(nb.pits) == 48
    assert legal_moves(nb) == frozenset()
    with pytest.raises(InvalidMoveError):
        apply_move(nb, 0)


def test_finalized_tie_after_move():
    b = Board(pits=[0, 0, 0, 0, 0, 1, 23, 1, 1, 1, 1, 1, 1, 18], variant=DAVIDMONTALA)
    nb = apply_move(b, 5)
    assert nb.game_over
    assert nb.pits[6] == nb.pits[13] == 24
    assert nb.winner == TIE


def test_trace_of_does_not_apply_move():
    b = new_game(DAVIDMONTALA)
    trace = trace_of(b, 2)
    assert trace == ((2, 0), (3, 5), (4, 5), (5, 5), (6, 1))
    assert b.pits == new_game(DAVIDMONTALA).pits
    with pytest.raises(InvalidMoveError):
        trace_of(b, 9)


def test_trace_replays_to_final_pits():
    b = new_game(JONAKALA)
    pits = list(b.pits)
    for index, count in trace_of(b, 0):
        pits[index] = count
    assert tuple(pits) == play_move(b, 0).sow.pits


@pytest.mark.parametrize("variant", VARIANTS)
@pytest.mark.parametrize("seed", range(10))
def test_random_play_conserves_stones(variant, seed):
    rng = random.Random(seed)
    b = new_game(variant)
    for _ in range(2000):
        if b.game_over:
            break
        res = play_move(b, rng.choice(b.legal_moves()))
        assert res.sow.relays < MAX_RELAYS
        b = res.board
        assert sum(b.pits) == 48
        assert all(x >= 0 for x in b.pits)

    if b.game_over:
        assert all(b.pits[i] == 0 for i in pit_indices(PLAYER_ONE))
        assert all(b.pits[i] == 0 for i in pit_indices(PLAYER_TWO))
        assert b.winner == winner_of(b.pits)
        assert b.pits[store_of(PLAYER_ONE)] + b.pits[store_of(PLAYER_TWO)] == 48
