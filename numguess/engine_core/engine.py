"""
Guess Engine - Starts sessions and evaluates guesses.

The engine is the single point of session change.
All state changes go through evaluate().

Design principles:
- Pure over sessions: (session, guess) -> Outcome carrying the new session
- Validates before applying; rejections leave the session untouched
- Randomness and persistence are injected, never ambient
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from typing import Any

from .state import Session, SessionPhase
from .outcome import Outcome, RejectReason, Direction
from .tiers import DifficultyTier, ClosenessScale, DEFAULT_SCALE
from ..storage.scores import BestScoreStore, InMemoryScoreStore

logger = logging.getLogger(__name__)


@dataclass
class GuessEngine:
    """
    Engine for the hotter/colder game.

    Stateless apart from its collaborators - all game state is in Session.
    The store is read when a session starts and written on a qualifying win.
    """
    store: BestScoreStore = field(default_factory=InMemoryScoreStore)
    scale: ClosenessScale = DEFAULT_SCALE
    rng: random.Random = field(default_factory=random.Random)

    def start_session(self, tier: DifficultyTier, secret: int | None = None) -> Session:
        """
        Begin a new play-through on a tier.

        The secret is drawn uniformly from the tier range unless forced.
        """
        if secret is None:
            secret = self.rng.randint(tier.min_value, tier.max_value)
        elif not tier.contains(secret):
            raise ValueError(
                f"Secret {secret} is outside {tier.name} range "
                f"{tier.min_value}..{tier.max_value}"
            )

        session = Session.fresh(tier, secret, best_score=self.store.get(tier.name))
        logger.debug(
            "New %s session: range %d..%d, %d attempts, best %s",
            tier.name, tier.min_value, tier.max_value, tier.attempt_limit, session.best_score,
        )
        return session

    def evaluate(self, session: Session, guess: Any) -> Outcome:
        """
        Evaluate one guess against a session.

        Returns an Outcome whose `session` is the state after the guess.
        """
        rejection = self._validate_guess(session, guess)
        if rejection:
            return Outcome.rejected(session, rejection, guess=guess if _is_int(guess) else None)

        attempts_used = session.attempts_used + 1
        history = session.history + (guess,)

        if guess == session.secret:
            return self._handle_win(
                session._copy_with(
                    attempts_used=attempts_used,
                    history=history,
                    phase=SessionPhase.WON,
                ),
                guess,
            )

        if attempts_used >= session.attempt_limit:
            lost = session._copy_with(
                attempts_used=attempts_used,
                history=history,
                phase=SessionPhase.LOST,
            )
            logger.info(
                "Lost %s session after %d attempts, secret was %d",
                lost.tier.name, attempts_used, lost.secret,
            )
            return Outcome.lost(lost, guess)

        return self._handle_incorrect(session, guess, attempts_used, history)

    def _validate_guess(self, session: Session, guess: Any) -> RejectReason | None:
        """
        Check that a guess may be applied to the session.

        Returns the rejection reason if invalid, None if valid.
        """
        if session.is_terminal:
            return RejectReason.GAME_OVER
        if not _is_int(guess) or not session.tier.contains(guess):
            return RejectReason.OUT_OF_RANGE
        if session.has_tried(guess):
            return RejectReason.ALREADY_TRIED
        return None

    def _handle_incorrect(
        self,
        session: Session,
        guess: int,
        attempts_used: int,
        history: tuple[int, ...],
    ) -> Outcome:
        magnitude = abs(guess - session.secret)

        if guess > session.secret:
            direction = Direction.LOWER
            new_session = session._copy_with(
                attempts_used=attempts_used,
                history=history,
                upper_bound=min(session.upper_bound, guess - 1),
            )
        else:
            direction = Direction.HIGHER
            new_session = session._copy_with(
                attempts_used=attempts_used,
                history=history,
                lower_bound=max(session.lower_bound, guess + 1),
            )

        return Outcome.incorrect(
            new_session,
            guess,
            direction=direction,
            magnitude=magnitude,
            closeness=self.scale.label_for(magnitude),
        )

    def _handle_win(self, session: Session, guess: int) -> Outcome:
        tier_name = session.tier.name
        best = self.store.get(tier_name)
        if best is None:
            best = session.best_score
        elif session.best_score is not None:
            best = min(best, session.best_score)

        new_best = best is None or session.attempts_used < best
        if new_best:
            self.store.put(tier_name, session.attempts_used)
            session.best_score = session.attempts_used
        else:
            session.best_score = best

        logger.info(
            "Won %s session in %d attempts%s",
            tier_name, session.attempts_used, " (new best)" if new_best else "",
        )
        return Outcome.won(session, guess, new_best=new_best)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def start_session(
    tier: DifficultyTier,
    secret: int | None = None,
    rng: random.Random | None = None,
) -> Session:
    """
    Convenience function to start a session without a persistent store.
    """
    engine = GuessEngine(rng=rng or random.Random())
    return engine.start_session(tier, secret=secret)


def evaluate(session: Session, guess: Any, scale: ClosenessScale = DEFAULT_SCALE) -> Outcome:
    """
    Convenience function to evaluate a guess without a persistent store.

    Best-score tracking only sees the session's own best_score.
    """
    engine = GuessEngine(scale=scale)
    return engine.evaluate(session, guess)
