"""Domain exceptions."""

from __future__ import annotations


class IllegalMoveError(ValueError):
    """Raised when a move that fails the legality check is executed."""
