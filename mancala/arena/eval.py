from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from mancala.ai.heuristic import HeuristicConfig, choose_board_move
from mancala.game.board import DAVIDMONTALA, PLAYER_ONE, PLAYER_TWO, Board
from mancala.game.rules import apply_move, new_game


logger = logging.getLogger(__name__)

Agent = Callable[[Board, random.Random], int]


@dataclass
class ArenaConfig:
    variant: str = DAVIDMONTALA
    games: int = 50
    seed: Optional[int] = None
    max_plies: int = 1000


def random_agent(board: Board, rng: random.Random) -> int:
    return rng.choice(board.legal_moves())


def heuristic_agent(board: Board, rng: random.Random) -> int:
    return choose_board_move(board, rng=rng)


def make_heuristic_agent(config: HeuristicConfig) -> Agent:
    def agent(board: Board, rng: random.Random) -> int:
        return choose_board_move(board, rng=rng, config=config)

    return agent


def play_game(agent_one: Agent, agent_two: Agent, cfg: ArenaConfig, rng: Optional[random.Random] = None) -> int:
    """Play one game: returns 1 if player 1 wins, 0 for a tie or ply cap, -1 if player 2 wins."""
    rng = rng or random.Random(cfg.seed)
    board = new_game(cfg.variant)
    plies = 0
    while not board.game_over:
        if plies >= cfg.max_plies:
            logger.warning("Game stopped after %d plies without a result", plies)
            return 0
        agent = agent_one if board.current_player == PLAYER_ONE else agent_two
        board = apply_move(board, agent(board, rng))
        plies += 1

    if board.winner == PLAYER_ONE:
        return 1
    if board.winner == PLAYER_TWO:
        return -1
    return 0


def arena(agent_new: Agent, agent_ref: Agent, cfg: ArenaConfig) -> Tuple[int, int, int, float]:
    """Play matches alternating seats; return (wins, draws, losses, win_rate) for ``agent_new``."""
    rng = random.Random(cfg.seed)
    wins = draws = losses = 0
    for i in range(cfg.games):
        if i % 2 == 0:
            res = play_game(agent_new, agent_ref, cfg, rng)
        else:
            res = -play_game(agent_ref, agent_new, cfg, rng)
        if res > 0:
            wins += 1
        elif res < 0:
            losses += 1
        else:
            draws += 1
    win_rate = (wins + 0.5 * draws) / max(1, cfg.games)
    logger.info("%s arena: %d wins, %d draws, %d losses (%.3f)", cfg.variant, wins, draws, losses, win_rate)
    return wins, draws, losses, win_rate
