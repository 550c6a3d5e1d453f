#!/usr/bin/env python3
"""Play Davidmontala or Jonakala in the console, against a friend or the heuristic."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable

from mancala.game.board import VARIANTS, Board, pit_indices
from mancala.game.errors import InvalidMoveError
from mancala.session import COMPUTER, OPPONENTS, GameSession


def render_board(board: Board) -> str:
    """Text layout of the board, player 2 on top, stores at the ends."""
    pits = board.pits
    top = "  ".join(f"{i:>2}:{pits[i]:<2}" for i in reversed(pit_indices(2)))
    bottom = "  ".join(f"{i:>2}:{pits[i]:<2}" for i in pit_indices(1))
    middle = f"P2 store:{pits[13]:<3}{' ' * (len(top) - 8)}P1 store:{pits[6]}"
    header = f"{board.variant.capitalize()} - move {board.move_number}"
    return "\n".join([header, "         " + top, middle, "         " + bottom])


def prompt_move(board: Board, input_fn: Callable[[str], str], output_fn: Callable[[str], None]) -> int:
    legal = board.legal_moves()
    while True:
        raw = input_fn(f"Player {board.current_player}, choose a pit {legal} (q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            output_fn("Leaving the game.")
            sys.exit(0)
        if not raw.lstrip("-").isdigit():
            output_fn("Please enter a number.")
            continue
        pit = int(raw)
        if pit in legal:
            return pit
        output_fn("That pit cannot be played. Try again.")


def run(
    session: GameSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Board:
    """Drive ``session`` to the end of the game and return the final board."""
    while not session.board.game_over:
        output_fn("")
        output_fn(render_board(session.board))
        output_fn(session.message)
        if session.computer_to_move:
            result = session.play_computer()
            output_fn(f"Computer plays pit {result.pit_index}")
            continue
        pit = prompt_move(session.board, input_fn, output_fn)
        try:
            session.play(pit)
        except InvalidMoveError as exc:
            output_fn(str(exc))

    output_fn("")
    output_fn(render_board(session.board))
    output_fn(session.message)
    return session.board


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Play Davidmontala or Jonakala in the console.")
    parser.add_argument("--variant", choices=VARIANTS, default=VARIANTS[0])
    parser.add_argument("--opponent", choices=OPPONENTS, default=COMPUTER)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's tie-breaking")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(format='%(asctime)s [%(levelname)s]: %(message)s',
                        datefmt='%m/%d/%Y %I:%M:%S %p',
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    session = GameSession(variant=args.variant, opponent=args.opponent, rng=random.Random(args.seed))
    run(session)


if __name__ == "__main__":
    main()
