"""
Session State - One play-through from first guess to win or loss.

Design principles:
- Explicit value owned by the caller, never a module-level game
- Copy-on-write: the engine returns new sessions instead of mutating
- Serializable: plain ints, a tuple of guesses and a tier
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .tiers import DifficultyTier


class SessionPhase(Enum):
    """Where a session is in its lifecycle."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass
class Session:
    """
    Complete state of one game.

    Invariants held by the engine:
    - lower_bound <= secret <= upper_bound
    - attempts_used <= attempt_limit
    - history holds distinct values inside the tier range, in guess order
    """
    tier: DifficultyTier
    secret: int
    attempts_used: int = 0
    history: tuple[int, ...] = ()
    lower_bound: int = 0
    upper_bound: int = 0
    phase: SessionPhase = SessionPhase.IN_PROGRESS

    # Best score for the tier, as read from the store at session start
    best_score: int | None = None

    @classmethod
    def fresh(cls, tier: DifficultyTier, secret: int, best_score: int | None = None) -> Session:
        """A session with no guesses yet and bounds set to the tier range."""
        return cls(
            tier=tier,
            secret=secret,
            lower_bound=tier.min_value,
            upper_bound=tier.max_value,
            best_score=best_score,
        )

    @property
    def attempt_limit(self) -> int:
        return self.tier.attempt_limit

    @property
    def min_value(self) -> int:
        return self.tier.min_value

    @property
    def max_value(self) -> int:
        return self.tier.max_value

    @property
    def remaining_attempts(self) -> int:
        return self.attempt_limit - self.attempts_used

    @property
    def is_terminal(self) -> bool:
        return self.phase != SessionPhase.IN_PROGRESS

    def has_tried(self, guess: int) -> bool:
        return guess in self.history

    def _copy_with(self, **kwargs) -> Session:
        """Create a copy with some fields replaced."""
        return Session(
            tier=kwargs.get("tier", self.tier),
            secret=kwargs.get("secret", self.secret),
            attempts_used=kwargs.get("attempts_used", self.attempts_used),
            history=kwargs.get("history", self.history),
            lower_bound=kwargs.get("lower_bound", self.lower_bound),
            upper_bound=kwargs.get("upper_bound", self.upper_bound),
            phase=kwargs.get("phase", self.phase),
            best_score=kwargs.get("best_score", self.best_score),
        )
