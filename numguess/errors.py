"""
Exceptions raised for misuse of the engine and the game manager.

Bad guesses are never exceptions - they come back as rejected outcomes.
"""

from __future__ import annotations


class NumguessError(Exception):
    """Base class for numguess errors."""


class UnknownTierError(NumguessError, ValueError):
    """Raised when a tier name is not registered."""

    def __init__(self, tier_name: str, known: list[str] | None = None):
        self.tier_name = tier_name
        self.known = known or []
        message = f"Unknown tier: {tier_name!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class GameNotFoundError(NumguessError, LookupError):
    """Raised when a game id does not refer to a live game."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")
