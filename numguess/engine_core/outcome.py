"""
Outcomes - The structured result of evaluating one guess.

Every call to evaluate() produces exactly one Outcome:
1. Rejected - the guess was not accepted, session untouched
2. Incorrect - accepted, wrong, attempts remain
3. Won - accepted and equal to the secret
4. Lost - accepted, wrong, and the budget is spent

Rendering is the caller's job; outcomes carry data only.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .state import Session


class OutcomeKind(Enum):
    REJECTED = "rejected"
    INCORRECT = "incorrect"
    WON = "won"
    LOST = "lost"


class RejectReason(Enum):
    """Why a guess was not accepted."""
    OUT_OF_RANGE = "out_of_range"  # Not an integer, or outside the tier range
    ALREADY_TRIED = "already_tried"
    GAME_OVER = "game_over"  # Session is already won or lost


class Direction(Enum):
    """Where the secret lies relative to the guess."""
    HIGHER = "higher"  # Guess was too low
    LOWER = "lower"  # Guess was too high


@dataclass
class Outcome:
    """
    Result of one evaluate() call.

    `session` is the session after the guess. For rejections it is
    the very session that was passed in.
    """
    kind: OutcomeKind
    session: Session
    guess: int | None = None

    # Rejected
    reason: RejectReason | None = None

    # Incorrect
    direction: Direction | None = None
    magnitude: int | None = None
    closeness: str | None = None

    # Won / Lost
    attempts_used: int = 0
    secret: int | None = None
    new_best: bool = False

    @property
    def accepted(self) -> bool:
        return self.kind != OutcomeKind.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.kind in {OutcomeKind.WON, OutcomeKind.LOST}

    @classmethod
    def rejected(cls, session: Session, reason: RejectReason, guess: int | None = None) -> Outcome:
        return cls(
            kind=OutcomeKind.REJECTED,
            session=session,
            guess=guess,
            reason=reason,
            attempts_used=session.attempts_used,
        )

    @classmethod
    def incorrect(
        cls,
        session: Session,
        guess: int,
        direction: Direction,
        magnitude: int,
        closeness: str,
    ) -> Outcome:
        return cls(
            kind=OutcomeKind.INCORRECT,
            session=session,
            guess=guess,
            direction=direction,
            magnitude=magnitude,
            closeness=closeness,
            attempts_used=session.attempts_used,
        )

    @classmethod
    def won(cls, session: Session, guess: int, new_best: bool = False) -> Outcome:
        return cls(
            kind=OutcomeKind.WON,
            session=session,
            guess=guess,
            attempts_used=session.attempts_used,
            secret=session.secret,
            new_best=new_best,
        )

    @classmethod
    def lost(cls, session: Session, guess: int) -> Outcome:
        return cls(
            kind=OutcomeKind.LOST,
            session=session,
            guess=guess,
            attempts_used=session.attempts_used,
            secret=session.secret,
        )
