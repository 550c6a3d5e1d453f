"""Exceptions raised by the Mancala rules engine."""

from __future__ import annotations


class MancalaError(Exception):
    """Base class for engine errors."""


class InvalidMoveError(MancalaError, ValueError):
    """The requested pit cannot be played by the side to move.

    Raised before anything is sown, so the board the caller holds is unchanged.
    """


class IllegalStateError(MancalaError, RuntimeError):
    """An engine invariant was violated. Indicates a bug upstream, not a game outcome."""
