"""
Feedback - Turns raw input into guesses and outcomes into text.

Shared by the terminal CLI and the HTTP surface so both show the
same messages.
"""

from __future__ import annotations
import re
from typing import Any

from .engine_core import Outcome, OutcomeKind, RejectReason, Direction, Session

# ASCII digits only: int() alone also takes "1_0" and non-ASCII digits
_DECIMAL = re.compile(r"[+-]?[0-9]+")

# Phrasing per closeness label of the default scale. Labels from
# other scales fall back to a generic "<Label>: too high!".
_HIGH_PHRASES = {
    "hot": "Just a bit too high!",
    "warm": "High!",
    "cold": "Way too high!",
}
_LOW_PHRASES = {
    "hot": "Just a bit too low!",
    "warm": "Low!",
    "cold": "Way too low!",
}


def parse_guess(raw: Any) -> int | None:
    """
    Parse a submitted value into an int.

    Returns None for anything that is not a base-10 integer.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not _DECIMAL.fullmatch(text):
        return None
    return int(text)


def remaining_attempts(session: Session) -> int:
    return session.remaining_attempts


def describe(outcome: Outcome) -> str:
    """Player-facing message for an outcome."""
    session = outcome.session

    if outcome.kind == OutcomeKind.REJECTED:
        if outcome.reason == RejectReason.ALREADY_TRIED:
            return "You already tried that!"
        if outcome.reason == RejectReason.GAME_OVER:
            return "This game is over. Start a new one!"
        return f"Enter a number between {session.min_value} and {session.max_value}"

    if outcome.kind == OutcomeKind.WON:
        message = f"Victory! It was {outcome.secret}"
        if outcome.new_best:
            message += f" - new best score: {outcome.attempts_used}"
        return message

    if outcome.kind == OutcomeKind.LOST:
        return f"Defeat! The number was {outcome.secret}"

    too_high = outcome.direction == Direction.LOWER
    phrases = _HIGH_PHRASES if too_high else _LOW_PHRASES
    phrase = phrases.get(outcome.closeness)
    if phrase is None:
        label = (outcome.closeness or "").capitalize()
        phrase = f"{label}: too {'high' if too_high else 'low'}!"
    return phrase


def status_line(session: Session) -> str:
    """One-line summary of the session: range, attempts and best score."""
    best = session.best_score if session.best_score is not None else "-"
    return (
        f"Range {session.lower_bound}-{session.upper_bound} | "
        f"attempts {session.attempts_used}/{session.attempt_limit} | "
        f"best {best}"
    )
