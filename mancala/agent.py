from __future__ import annotations

import argparse
import json
import logging
import random
from typing import Optional

from mancala.ai.heuristic import HeuristicConfig, choose_board_move
from mancala.game.encoding import deserialize_fen


def choose_move(fen: str, seed: Optional[int] = None, jitter: bool = True) -> int:
    """Heuristic move for the side to move in ``fen``; -1 when the game is over."""
    board = deserialize_fen(fen)
    config = HeuristicConfig() if jitter else HeuristicConfig(jitter=0.0)
    move = choose_board_move(board, rng=random.Random(seed), config=config)
    if move is None:
        return -1
    return move


def main(argv=None):
    parser = argparse.ArgumentParser(description="Davidmontala / Jonakala heuristic agent")
    parser.add_argument("fen", type=str, help="Position string, e.g. davidmontala|1|4-4-4-4-4-4-0-4-4-4-4-4-4-0|1")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the tie-breaking noise")
    parser.add_argument("--no-jitter", action="store_true", help="Disable the random tie-breaking noise")
    parser.add_argument("--verbose", action="store_true", help="Log candidate scores")
    args = parser.parse_args(argv)

    logging.basicConfig(format='%(asctime)s [%(levelname)s]: %(message)s',
                        datefmt='%m/%d/%Y %I:%M:%S %p',
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    action = choose_move(args.fen, args.seed, jitter=not args.no_jitter)
    print(json.dumps({"action": action}))


if __name__ == "__main__":
    main()
