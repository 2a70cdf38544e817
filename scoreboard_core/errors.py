"""Exceptions raised by the scoreboard core."""
from __future__ import annotations


class ScoreboardError(Exception):
    """Base exception for all scoreboard errors."""


class InvalidArgumentError(ScoreboardError, ValueError):
    """Raised when a caller passes a missing reference, a blank team name or a negative score.

    ``param`` names the offending argument when known.
    """

    def __init__(self, message: str, param: str | None = None):
        super().__init__(message)
        self.param = param


class InvalidStateError(ScoreboardError, RuntimeError):
    """Raised when an operation is not valid for the current game or board state."""
