"""Exception hierarchy for the LOA engine.

All engine exceptions derive from :class:`LOAError`. The core raises them and
never recovers from them; the front ends (CLI, HTTP API) decide how to show
them to a user.
"""

from typing import Any, Dict, Optional

__all__ = [
    "LOAError",
    "GameOverError",
    "SearchError",
    "IllegalMoveError",
    "InvalidPositionError",
    "WrongTurnError",
]


class LOAError(Exception):
    """Base exception for all engine errors.

    Attributes:
        message: Human-readable error description
        context: Additional context for debugging
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class GameOverError(LOAError):
    """A move or a search was requested on a game that is already decided."""


class SearchError(LOAError):
    """The search found no move on a position that is not over."""


class IllegalMoveError(LOAError, ValueError):
    """Move text could not be parsed, or the move is not legal here."""


class InvalidPositionError(LOAError, ValueError):
    """A board layout could not be parsed."""


class WrongTurnError(LOAError):
    """A player was asked to move while it is the other side's turn."""
