"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to game manager calls
2. Renders outcomes into response models
3. Keeps the secret hidden until a game is over

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    StartGameRequest,
    RestartGameRequest,
    GuessRequest,
    # Responses
    GameResponse,
    GuessResponse,
    TierListResponse,
    BestScoresResponse,
    # Shared
    TierInfo,
    RangeInfo,
    # Enums
    GameStatus,
    OutcomeType,
)
from ..engine_core import DEFAULT_TIER, Outcome, DifficultyTier
from ..feedback import describe
from ..session import GameManager, ManagedGame


@dataclass
class APIService:
    """
    Main API service for the browser page.

    Usage:
        service = APIService()

        game = service.start_game(StartGameRequest(tier="hard"))
        result = service.submit_guess(game.game_id, GuessRequest(guess="42"))
    """
    game_manager: GameManager = field(default_factory=GameManager)
    default_tier: str = DEFAULT_TIER

    def list_tiers(self) -> TierListResponse:
        return TierListResponse(
            tiers=[self._tier_info(tier) for tier in self.game_manager.tiers.values()],
            default_tier=self.default_tier,
        )

    def start_game(self, request: StartGameRequest) -> GameResponse:
        """
        Start a new game. Raises UnknownTierError for unknown tiers.
        """
        game = self.game_manager.start(request.tier or self.default_tier)
        return self._game_response(game)

    def get_game(self, game_id: str) -> GameResponse:
        """Raises GameNotFoundError for unknown ids."""
        return self._game_response(self.game_manager.get(game_id))

    def submit_guess(self, game_id: str, request: GuessRequest) -> GuessResponse:
        outcome = self.game_manager.guess(game_id, request.guess)
        game = self.game_manager.get(game_id)
        return self._guess_response(game, outcome)

    def restart_game(self, game_id: str, request: RestartGameRequest | None = None) -> GameResponse:
        tier_name = request.tier if request else None
        game = self.game_manager.restart(game_id, tier_name=tier_name)
        return self._game_response(game)

    def end_game(self, game_id: str) -> bool:
        return self.game_manager.end(game_id)

    def list_games(self) -> list[str]:
        return self.game_manager.list_active()

    def best_scores(self) -> BestScoresResponse:
        scores = {name: None for name in self.game_manager.tiers}
        scores.update(self.game_manager.engine.store.all())
        return BestScoresResponse(scores=scores)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _tier_info(self, tier: DifficultyTier) -> TierInfo:
        return TierInfo(
            name=tier.name,
            min_value=tier.min_value,
            max_value=tier.max_value,
            attempt_limit=tier.attempt_limit,
            best_score=self.game_manager.engine.store.get(tier.name),
        )

    def _game_response(self, game: ManagedGame) -> GameResponse:
        session = game.session
        return GameResponse(
            game_id=game.game_id,
            status=GameStatus(session.phase.value),
            tier=TierInfo(
                name=session.tier.name,
                min_value=session.min_value,
                max_value=session.max_value,
                attempt_limit=session.attempt_limit,
                best_score=session.best_score,
            ),
            attempts_used=session.attempts_used,
            remaining_attempts=session.remaining_attempts,
            range=RangeInfo(
                lower_bound=session.lower_bound,
                upper_bound=session.upper_bound,
            ),
            history=list(session.history),
            best_score=session.best_score,
            message=describe(game.last_outcome) if game.last_outcome else "Guess the number to begin!",
            secret=session.secret if session.is_terminal else None,
        )

    def _guess_response(self, game: ManagedGame, outcome: Outcome) -> GuessResponse:
        return GuessResponse(
            outcome=OutcomeType(outcome.kind.value),
            accepted=outcome.accepted,
            message=describe(outcome),
            guess=outcome.guess,
            reason=outcome.reason.value if outcome.reason else None,
            direction=outcome.direction.value if outcome.direction else None,
            magnitude=outcome.magnitude,
            closeness=outcome.closeness,
            new_best=outcome.new_best,
            game=self._game_response(game),
        )
