"""
Position serialization for the agent CLI, logs and debugging.

Format: ``variant|player|p0-p1-...-p13|move_number``, for example the start
position of a Jonakala game is::

    jonakala|1|4-4-4-4-4-4-0-4-4-4-4-4-4-0|1
"""

from __future__ import annotations

from dataclasses import replace

from .board import NUM_SLOTS, Board
from .rules import finalize, is_terminal


def serialize_fen(board: Board) -> str:
    return "|".join(
        [
            board.variant,
            str(board.current_player),
            "-".join(str(x) for x in board.pits),
            str(board.move_number),
        ]
    )


def deserialize_fen(s: str) -> Board:
    """Parse a position string.

    A layout with one side already empty is finalized on load, so the returned
    board always satisfies the game-over invariants.
    """
    parts = s.strip().split("|")
    if len(parts) != 4:
        raise ValueError(f"Expected 4 '|'-separated fields, got {len(parts)}: {s!r}")
    variant, player_s, pits_s, mv_s = parts
    try:
        pits = [int(x) for x in pits_s.split("-")]
        player = int(player_s)
        move_number = int(mv_s)
    except ValueError as exc:
        raise ValueError(f"Malformed position string {s!r}") from exc
    if len(pits) != NUM_SLOTS:
        raise ValueError(f"Expected {NUM_SLOTS} pit counts, got {len(pits)}")

    board = Board(pits=tuple(pits), variant=variant, current_player=player, move_number=move_number)
    if is_terminal(board.pits):
        final_pits, winner = finalize(board.pits)
        board = replace(board, pits=final_pits, game_over=True, winner=winner)
    return board
