"""
Game Manager - Creates and tracks live games.

LIFECYCLE:
1. Player picks a tier -> start() creates a game with a fresh session
2. During play each guess goes through the engine; the game keeps
   the resulting session and the last outcome
3. Restart or tier change -> the session is replaced, same game id
4. Player leaves -> end() drops the game

Each game holds exactly one live session. Sessions of different
games share nothing except the best-score store.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
import logging
import time
import uuid

from ..engine_core import (
    GuessEngine,
    Session,
    Outcome,
    DifficultyTier,
    TIERS,
)
from ..errors import GameNotFoundError, UnknownTierError
from ..feedback import parse_guess

logger = logging.getLogger(__name__)


@dataclass
class ManagedGame:
    """
    A live game: the current session plus bookkeeping.

    The session is replaced wholesale on every accepted guess
    and on restart.
    """
    game_id: str
    session: Session
    created_at: float
    updated_at: float
    last_outcome: Outcome | None = None
    sessions_played: int = 1

    @property
    def tier(self) -> DifficultyTier:
        return self.session.tier

    def is_active(self) -> bool:
        """Check if the current session still accepts guesses."""
        return not self.session.is_terminal


class GameManager:
    """
    Manages games.

    Responsibilities:
    - Start games on a tier
    - Route guesses to the engine
    - Restart games, optionally on another tier
    - Clean up games left idle

    Games are in-memory only. Best scores go through the engine's store.
    """

    def __init__(
        self,
        engine: GuessEngine | None = None,
        tiers: dict[str, DifficultyTier] | None = None,
        idle_timeout: int = 3600,
    ):
        self.engine = engine or GuessEngine()
        self.idle_timeout = idle_timeout
        self.tiers = tiers if tiers is not None else dict(TIERS)
        self._games: dict[str, ManagedGame] = {}

    def resolve_tier(self, tier_name: str) -> DifficultyTier:
        try:
            return self.tiers[tier_name]
        except KeyError:
            raise UnknownTierError(tier_name, known=list(self.tiers)) from None

    def start(self, tier_name: str, secret: int | None = None) -> ManagedGame:
        """
        Start a new game.

        Args:
            tier_name: Name of a registered tier
            secret: Force the secret (for tests and replays)

        Returns:
            New ManagedGame with a fresh session
        """
        tier = self.resolve_tier(tier_name)
        self.cleanup_stale()
        session = self.engine.start_session(tier, secret=secret)
        now = time.time()
        game = ManagedGame(
            game_id=str(uuid.uuid4()),
            session=session,
            created_at=now,
            updated_at=now,
        )
        self._games[game.game_id] = game
        logger.debug("Started game %s on %s", game.game_id, tier.name)
        return game

    def get(self, game_id: str) -> ManagedGame:
        """Get a game by ID."""
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def guess(self, game_id: str, raw: Any) -> Outcome:
        """
        Submit a raw value (text or int) as a guess.

        Unparseable input is evaluated as-is so the engine rejects it.
        """
        game = self.get(game_id)
        parsed = parse_guess(raw)
        outcome = self.engine.evaluate(game.session, parsed if parsed is not None else raw)
        game.session = outcome.session
        game.last_outcome = outcome
        game.updated_at = time.time()
        return outcome

    def restart(self, game_id: str, tier_name: str | None = None, secret: int | None = None) -> ManagedGame:
        """
        Replace the game's session with a fresh one.

        Keeps the current tier unless a new tier name is given.
        """
        game = self.get(game_id)
        tier = self.resolve_tier(tier_name) if tier_name else game.tier
        game.session = self.engine.start_session(tier, secret=secret)
        game.last_outcome = None
        game.sessions_played += 1
        game.updated_at = time.time()
        logger.debug("Restarted game %s on %s", game_id, tier.name)
        return game

    def end(self, game_id: str) -> bool:
        """
        End a game and forget it.

        Returns False if the game did not exist.
        """
        game = self._games.pop(game_id, None)
        if game is None:
            return False
        logger.debug("Ended game %s", game_id)
        return True

    def list_active(self) -> list[str]:
        """List IDs of games whose session still accepts guesses."""
        return [
            gid for gid, game in self._games.items()
            if game.is_active()
        ]

    def cleanup_stale(self, max_age_seconds: int | None = None) -> int:
        """
        Drop games untouched for longer than max_age, finished or not.

        Called on every start(), so abandoned games do not pile up.
        Returns how many games were removed.
        """
        if max_age_seconds is None:
            max_age_seconds = self.idle_timeout
        current_time = time.time()
        to_remove = [
            gid for gid, game in self._games.items()
            if current_time - game.updated_at > max_age_seconds
        ]

        for gid in to_remove:
            self.end(gid)
        return len(to_remove)
