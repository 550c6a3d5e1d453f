"""
Board model shared by the Davidmontala and Jonakala variants.

The board is a ring of 14 slots:

    12 11 10  9  8  7        <- player 2 pits
 13                    6     <- stores (13 = player 2, 6 = player 1)
     0  1  2  3  4  5        <- player 1 pits

Sowing runs counter-clockwise, i.e. towards increasing indices modulo 14.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union


PLAYER_ONE: int = 1
PLAYER_TWO: int = 2

PITS_PER_SIDE: int = 6
NUM_SLOTS: int = 14
INITIAL_STONES: int = 4
TOTAL_STONES: int = INITIAL_STONES * PITS_PER_SIDE * 2

DAVIDMONTALA: str = "davidmontala"
JONAKALA: str = "jonakala"
VARIANTS: Tuple[str, ...] = (DAVIDMONTALA, JONAKALA)

TIE: str = "tie"

Winner = Union[int, str]


def opponent_of(player: int) -> int:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE


def store_of(player: int) -> int:
    """Index of ``player``'s store (6 or 13)."""
    return PITS_PER_SIDE if player == PLAYER_ONE else NUM_SLOTS - 1


def pit_indices(player: int) -> range:
    """Indices of the six pits ``player`` may sow from."""
    if player == PLAYER_ONE:
        return range(0, PITS_PER_SIDE)
    return range(PITS_PER_SIDE + 1, NUM_SLOTS - 1)


def owns_pit(player: int, index: int) -> bool:
    return index in pit_indices(player)


def initial_pits() -> Tuple[int, ...]:
    side = [INITIAL_STONES] * PITS_PER_SIDE
    return tuple(side + [0] + side + [0])


@dataclass(frozen=True)
class Board:
    """Immutable game state.

    Attributes:
        pits: 14 stone counts, see the module docstring for the layout.
        variant: DAVIDMONTALA or JONAKALA, fixed for the whole game.
        current_player: PLAYER_ONE or PLAYER_TWO, the side allowed to sow.
        game_over: True once a move left one side's pits empty and the
            remaining stones were swept into the stores.
        winner: None while the game runs, then PLAYER_ONE, PLAYER_TWO or TIE.
        move_number: Increments after every move (1-based).
    """

    pits: Tuple[int, ...]
    variant: str = DAVIDMONTALA
    current_player: int = PLAYER_ONE
    game_over: bool = False
    winner: Optional[Winner] = None
    move_number: int = 1

    def __post_init__(self) -> None:
        if self.variant not in VARIANTS:
            raise ValueError(f"Unknown variant {self.variant!r}; expected one of {VARIANTS}")
        if self.current_player not in (PLAYER_ONE, PLAYER_TWO):
            raise ValueError(f"current_player must be 1 or 2, got {self.current_player!r}")
        pits = tuple(int(x) for x in self.pits)
        if len(pits) != NUM_SLOTS:
            raise ValueError(f"Board needs {NUM_SLOTS} slots, got {len(pits)}")
        if any(x < 0 for x in pits):
            raise ValueError("Stone counts cannot be negative")
        # Accept lists from callers but always store a tuple.
        object.__setattr__(self, "pits", pits)

    # ------------------------- Construction helpers ------------------------- #
    @staticmethod
    def initial(variant: str = DAVIDMONTALA) -> "Board":
        return Board(pits=initial_pits(), variant=variant)

    # ----------------------------- Query methods ---------------------------- #
    def legal_moves(self) -> List[int]:
        """Return the non-empty pits of the side to move, in index order."""
        if self.game_over:
            return []
        return [i for i in pit_indices(self.current_player) if self.pits[i] > 0]

    def side(self, player: int) -> Tuple[int, ...]:
        return tuple(self.pits[i] for i in pit_indices(player))

    def store(self, player: int) -> int:
        return self.pits[store_of(player)]

    def scores(self) -> Tuple[int, int]:
        return self.pits[store_of(PLAYER_ONE)], self.pits[store_of(PLAYER_TWO)]
