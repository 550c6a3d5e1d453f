"""A single game owned by one host: the authoritative board plus opponent mode and status text."""

from __future__ import annotations

import logging
import random
import threading
from typing import List, Optional

from mancala.ai.heuristic import HeuristicConfig, choose_board_move
from mancala.game.board import DAVIDMONTALA, JONAKALA, PLAYER_TWO, TIE, Board
from mancala.game.errors import InvalidMoveError
from mancala.game.rules import MoveResult, new_game, play_move


logger = logging.getLogger(__name__)

HUMAN: str = "human"
COMPUTER: str = "computer"
OPPONENTS = (HUMAN, COMPUTER)

# In computer mode the engine always plays the second seat.
COMPUTER_PLAYER: int = PLAYER_TWO


def describe(result: MoveResult) -> str:
    """Status line shown after a move."""
    board = result.board
    if board.game_over:
        return "It's a tie!" if board.winner == TIE else f"Player {board.winner} wins!"
    if result.extra_turn:
        return f"Landed in store! Player {result.mover} goes again!"
    if board.variant == JONAKALA:
        if result.sow.ended_in_own_store:
            return f"Scored! Player {board.current_player}'s turn"
        return f"Chain ended. Player {board.current_player}'s turn"
    return f"Player {board.current_player}'s turn"


class GameSession:
    """Owns the board of one game.

    Moves are serialized through a lock so two callers (a UI handler and a
    computer-opponent driver, say) can never apply moves to the same board at
    the same time. Sessions share no state with each other.
    """

    def __init__(
        self,
        variant: str = DAVIDMONTALA,
        opponent: str = HUMAN,
        rng: Optional[random.Random] = None,
        ai_config: Optional[HeuristicConfig] = None,
    ) -> None:
        if opponent not in OPPONENTS:
            raise ValueError(f"opponent must be one of {OPPONENTS}, got {opponent!r}")
        self.opponent = opponent
        self.rng = rng or random.Random()
        self.ai_config = ai_config or HeuristicConfig()
        self._lock = threading.Lock()
        self.board: Board = new_game(variant)
        self.history: List[int] = []
        self.last_result: Optional[MoveResult] = None
        self.message = "Player 1's turn - Select a pit"

    @property
    def variant(self) -> str:
        return self.board.variant

    @property
    def computer_to_move(self) -> bool:
        return (
            self.opponent == COMPUTER
            and not self.board.game_over
            and self.board.current_player == COMPUTER_PLAYER
        )

    def reset(self, variant: Optional[str] = None) -> Board:
        with self._lock:
            self.board = new_game(variant or self.board.variant)
            self.history = []
            self.last_result = None
            self.message = "Player 1's turn - Select a pit"
            logger.info("New %s game (%s opponent)", self.board.variant, self.opponent)
            return self.board

    def play(self, pit_index: int) -> MoveResult:
        """Apply a human move for the side to move."""
        with self._lock:
            if self.computer_to_move:
                raise InvalidMoveError("It is the computer's turn")
            return self._apply(pit_index)

    def play_computer(self) -> MoveResult:
        """Let the heuristic pick and apply a move for the computer seat."""
        with self._lock:
            if not self.computer_to_move:
                raise InvalidMoveError("It is not the computer's turn")
            move = choose_board_move(self.board, rng=self.rng, config=self.ai_config)
            logger.debug("Computer plays pit %s", move)
            return self._apply(move)

    def _apply(self, pit_index: int) -> MoveResult:
        result = play_move(self.board, pit_index)
        self.board = result.board
        self.history.append(pit_index)
        self.last_result = result
        self.message = describe(result)
        return result
