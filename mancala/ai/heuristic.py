"""
One-ply heuristic move selection for a computer opponent.

Every legal pit is sown on a private copy of the board and scored:

    score = store_weight * (stones gained in own store)
          + extra_turn_bonus            (Davidmontala, last stone in own store)
          - threat_penalty * (opponent replies that would earn an extra turn)
          + uniform noise in [0, jitter)

The opponent check only looks for Davidmontala extra turns. Jonakala chains
are not evaluated for the opponent.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from mancala.game.board import DAVIDMONTALA, Board, opponent_of, pit_indices, store_of
from mancala.game.errors import IllegalStateError
from mancala.game.sowing import sow


logger = logging.getLogger(__name__)


@dataclass
class HeuristicConfig:
    store_weight: float = 10.0
    extra_turn_bonus: float = 20.0
    threat_penalty: float = 5.0
    jitter: float = 3.0  # 0 makes the choice deterministic


def candidate_moves(pits: Sequence[int], player: int) -> List[int]:
    return [i for i in pit_indices(player) if pits[i] > 0]


def score_moves(
    pits: Sequence[int],
    player: int,
    variant: str,
    rng: Optional[random.Random] = None,
    config: Optional[HeuristicConfig] = None,
) -> Dict[int, float]:
    """Score every legal pit for ``player``. Keys are in ascending pit order."""
    cfg = config or HeuristicConfig()
    rng = rng or random.Random()
    own_store = store_of(player)
    opponent = opponent_of(player)

    scores: Dict[int, float] = {}
    for move in candidate_moves(pits, player):
        result = sow(pits, move, player, variant)
        score = (result.pits[own_store] - pits[own_store]) * cfg.store_weight

        if variant == DAVIDMONTALA and result.ended_in_own_store:
            score += cfg.extra_turn_bonus

        # Penalize leaving the opponent an immediate repeat turn.
        for reply in candidate_moves(result.pits, opponent):
            reply_result = sow(result.pits, reply, opponent, variant)
            if variant == DAVIDMONTALA and reply_result.ended_in_own_store:
                score -= cfg.threat_penalty

        if cfg.jitter > 0:
            score += rng.random() * cfg.jitter
        scores[move] = score

    logger.debug("Player %d candidate scores (%s): %s", player, variant, scores)
    return scores


def choose_move(
    pits: Sequence[int],
    player: int,
    variant: str,
    rng: Optional[random.Random] = None,
    config: Optional[HeuristicConfig] = None,
) -> Optional[int]:
    """Return the best-scoring pit, or None when ``player`` has no stones to sow.

    Only a strictly higher score replaces the current best, so exact ties go
    to the lowest pit index.
    """
    scores = score_moves(pits, player, variant, rng=rng, config=config)
    best_move: Optional[int] = None
    best_score = float("-inf")
    for move, score in scores.items():
        if score > best_score:
            best_score = score
            best_move = move
    return best_move


def choose_board_move(
    board: Board,
    rng: Optional[random.Random] = None,
    config: Optional[HeuristicConfig] = None,
) -> Optional[int]:
    """Pick a move for the side to move on ``board``; None once the game is over."""
    if board.game_over:
        return None
    move = choose_move(board.pits, board.current_player, board.variant, rng=rng, config=config)
    if move is None:
        raise IllegalStateError(
            f"Player {board.current_player} has no legal move but the game is not over"
        )
    return move
