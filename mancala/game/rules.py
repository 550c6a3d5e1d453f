"""
Turn handling for Davidmontala and Jonakala.

This module implements:
- Terminal detection (one side's six pits empty after a completed move)
- Finalization (remaining stones swept into each side's own store)
- Move validation and application, including who moves next
- Placement traces for hosts that animate a move stone by stone
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import FrozenSet, Sequence, Tuple

from .board import (
    DAVIDMONTALA,
    PLAYER_ONE,
    PLAYER_TWO,
    TIE,
    Board,
    Winner,
    opponent_of,
    owns_pit,
    pit_indices,
    store_of,
)
from .errors import InvalidMoveError
from .sowing import Placement, SowResult, sow


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one applied move: the successor board and how the sow went."""

    board: Board
    sow: SowResult
    mover: int
    pit_index: int

    @property
    def extra_turn(self) -> bool:
        return not self.board.game_over and self.board.current_player == self.mover


# ------------------------------ Game lifecycle ------------------------------ #
def new_game(variant: str = DAVIDMONTALA) -> Board:
    return Board.initial(variant)


def legal_moves(board: Board) -> FrozenSet[int]:
    return frozenset(board.legal_moves())


def is_terminal(pits: Sequence[int]) -> bool:
    """True when either player's six pits are all empty."""
    return all(pits[i] == 0 for i in pit_indices(PLAYER_ONE)) or all(
        pits[i] == 0 for i in pit_indices(PLAYER_TWO)
    )


def winner_of(pits: Sequence[int]) -> Winner:
    one, two = pits[store_of(PLAYER_ONE)], pits[store_of(PLAYER_TWO)]
    if one > two:
        return PLAYER_ONE
    if two > one:
        return PLAYER_TWO
    return TIE


def finalize(pits: Sequence[int]) -> Tuple[Tuple[int, ...], Winner]:
    """Sweep each side's remaining stones into its own store and decide the winner."""
    final = list(pits)
    for player in (PLAYER_ONE, PLAYER_TWO):
        store = store_of(player)
        for i in pit_indices(player):
            final[store] += final[i]
            final[i] = 0
    return tuple(final), winner_of(final)


# --------------------------- Move application ------------------------------ #
def validate_move(board: Board, pit_index: int) -> None:
    if board.game_over:
        raise InvalidMoveError("The game is over")
    if isinstance(pit_index, bool) or not isinstance(pit_index, int):
        raise InvalidMoveError(f"Pit index must be an int, got {pit_index!r}")
    if not owns_pit(board.current_player, pit_index):
        raise InvalidMoveError(
            f"Pit {pit_index} is not playable by player {board.current_player}"
        )
    if board.pits[pit_index] == 0:
        raise InvalidMoveError(f"Pit {pit_index} is empty")


def play_move(board: Board, pit_index: int) -> MoveResult:
    """Apply a legal move and return the next board together with the sow details.

    Turn rules:
    - Davidmontala: last stone in the mover's own store keeps the turn.
    - Jonakala: the turn always passes once the chain has ended, store landing
      included.
    - If the move leaves either side without stones the board is finalized and
      nobody moves again.
    """
    validate_move(board, pit_index)
    mover = board.current_player
    result = sow(board.pits, pit_index, mover, board.variant)

    logger.debug(
        "Player %d sowed pit %d (%s): landed on %d after %d relay(s)",
        mover, pit_index, board.variant, result.landing_index, result.relays,
    )

    if is_terminal(result.pits):
        final_pits, winner = finalize(result.pits)
        logger.info("Game over after move %d: stores %d-%d, winner %s",
                    board.move_number, final_pits[store_of(PLAYER_ONE)],
                    final_pits[store_of(PLAYER_TWO)], winner)
        next_board = replace(
            board,
            pits=final_pits,
            game_over=True,
            winner=winner,
            move_number=board.move_number + 1,
        )
        return MoveResult(board=next_board, sow=result, mover=mover, pit_index=pit_index)

    if board.variant == DAVIDMONTALA and result.ended_in_own_store:
        next_player = mover
    else:
        next_player = opponent_of(mover)

    next_board = replace(
        board,
        pits=result.pits,
        current_player=next_player,
        move_number=board.move_number + 1,
    )
    return MoveResult(board=next_board, sow=result, mover=mover, pit_index=pit_index)


def apply_move(board: Board, pit_index: int) -> Board:
    return play_move(board, pit_index).board


def trace_of(board: Board, pit_index: int) -> Tuple[Placement, ...]:
    """Ordered (index, new_count) updates the move would make, without applying it.

    The trace stops at the end of sowing; the finalization sweep is not part of it.
    """
    validate_move(board, pit_index)
    return sow(board.pits, pit_index, board.current_player, board.variant).trace
