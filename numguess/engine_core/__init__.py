"""
Engine Core - Guess evaluation and range narrowing.

The engine is the runtime that:
1. Starts a Session on a DifficultyTier
2. Validates each guess
3. Classifies it as rejected, incorrect, won or lost
4. Narrows the known bounds after incorrect guesses
5. Records best scores through the injected store
"""

from .tiers import (
    DifficultyTier,
    ClosenessScale,
    TIERS,
    DEFAULT_TIER,
    DEFAULT_SCALE,
    get_tier,
)
from .state import Session, SessionPhase
from .outcome import Outcome, OutcomeKind, RejectReason, Direction
from .engine import GuessEngine, start_session, evaluate

__all__ = [
    "DifficultyTier",
    "ClosenessScale",
    "TIERS",
    "DEFAULT_TIER",
    "DEFAULT_SCALE",
    "get_tier",
    "Session",
    "SessionPhase",
    "Outcome",
    "OutcomeKind",
    "RejectReason",
    "Direction",
    "GuessEngine",
    "start_session",
    "evaluate",
]
