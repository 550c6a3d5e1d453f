"""
Sowing rules for the two variants.

Davidmontala sows the picked-up pit once. Jonakala keeps relaying: when the
last stone lands in an occupied pit that is not the mover's store, the whole
landing pit is picked up and sown on, until a sow ends in the mover's store
or in a pit that was empty.

Both variants skip the opponent's store without spending a stone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .board import DAVIDMONTALA, JONAKALA, NUM_SLOTS, VARIANTS, opponent_of, owns_pit, store_of
from .errors import IllegalStateError, InvalidMoveError


logger = logging.getLogger(__name__)

# A chain drains a non-empty pit on every relay and can only pass the mover's
# store 48 times, so real chains stay far below this.
MAX_RELAYS: int = 10_000

Placement = Tuple[int, int]  # (index, stone count after the update)
PlacementCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class SowResult:
    pits: Tuple[int, ...]
    ended_in_own_store: bool
    landing_index: int
    relays: int = 1
    trace: Tuple[Placement, ...] = ()


def sow(
    pits: Sequence[int],
    start_pit: int,
    player: int,
    variant: str,
    on_place: Optional[PlacementCallback] = None,
) -> SowResult:
    """Sow from ``start_pit`` for ``player`` and return the resulting layout.

    ``pits`` is never modified. Every pickup is reported as ``(index, 0)`` and
    every dropped stone as ``(index, new_count)``, both in the returned trace
    and through ``on_place`` when given.
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant {variant!r}")
    if not owns_pit(player, start_pit):
        raise InvalidMoveError(f"Pit {start_pit} does not belong to player {player}")
    if pits[start_pit] <= 0:
        raise InvalidMoveError(f"Pit {start_pit} is empty")

    board = list(pits)
    trace: List[Placement] = []
    own_store = store_of(player)
    skip = store_of(opponent_of(player))

    def record(index: int) -> None:
        trace.append((index, board[index]))
        if on_place is not None:
            on_place(index, board[index])

    pickup = start_pit
    relays = 0
    while True:
        relays += 1
        if relays > MAX_RELAYS:
            raise IllegalStateError(f"Relay chain from pit {start_pit} did not terminate")

        landing = _distribute(board, pickup, skip, record)

        if variant == DAVIDMONTALA or landing == own_store or board[landing] == 1:
            break
        # JONAKALA: landed on an occupied pit, keep sowing from there.
        pickup = landing

    if variant == JONAKALA:
        logger.debug("Chain from pit %d for player %d: %d relay(s), landed on %d",
                     start_pit, player, relays, landing)

    return SowResult(
        pits=tuple(board),
        ended_in_own_store=landing == own_store,
        landing_index=landing,
        relays=relays,
        trace=tuple(trace),
    )


def _distribute(board: List[int], pickup: int, skip: int, record: Callable[[int], None]) -> int:
    """Empty ``board[pickup]`` into the following slots, in place. Returns the landing index."""
    stones = board[pickup]
    board[pickup] = 0
    record(pickup)

    index = pickup
    while stones > 0:
        index = (index + 1) % NUM_SLOTS
        if index == skip:
            continue
        board[index] += 1
        stones -= 1
        record(index)
    return index
