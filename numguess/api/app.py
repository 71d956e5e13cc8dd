"""
FastAPI Application - REST API for the browser page.

Endpoints:
    GET    /api/v1/health                  Liveness and version
    GET    /api/v1/tiers                   Difficulty tiers with best scores
    POST   /api/v1/games                   Start a game on a tier
    GET    /api/v1/games                   List active games
    GET    /api/v1/games/{id}              Get game state
    POST   /api/v1/games/{id}/guesses      Submit a guess
    POST   /api/v1/games/{id}/restart      Restart, optionally on another tier
    DELETE /api/v1/games/{id}              End a game
    GET    /api/v1/best-scores             Best score per tier

Guess Flow:
    1. The page posts whatever the player typed
    2. Rejected guesses come back as 200 with outcome="rejected";
       the page re-prompts
    3. Accepted guesses return the outcome and the narrowed range
    4. Won/lost games reveal the secret and accept no more guesses

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional
import logging
import os

from .. import __version__
from ..errors import GameNotFoundError, UnknownTierError

# Environment configuration
NUMGUESS_ENV = os.getenv("NUMGUESS_ENV", "development")
NUMGUESS_SCORES_PATH = os.getenv("NUMGUESS_SCORES_PATH", None)
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
NUMGUESS_IDLE_TIMEOUT = int(os.getenv("NUMGUESS_IDLE_TIMEOUT", "3600"))

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Body, Request
        from fastapi.exceptions import RequestValidationError
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError(
            "FastAPI not installed. Install with: pip install fastapi uvicorn"
        )

    from .service import APIService
    from .schemas import (
        # Request models
        StartGameRequest,
        RestartGameRequest,
        GuessRequest,
        # Response models
        GameResponse,
        GuessResponse,
        TierListResponse,
        BestScoresResponse,
        GameListResponse,
        EndGameResponse,
        HealthResponse,
        ErrorResponse,
        # Enums
        ErrorCode,
    )

    app = FastAPI(
        title="numguess API",
        description="""
Hotter/colder number guessing game.

## Guess Outcomes

| Outcome | Meaning |
|---------|---------|
| `rejected` | Not accepted: `out_of_range`, `already_tried` or `game_over` |
| `incorrect` | Wrong; `direction` says where the secret lies |
| `won` | Correct; `new_best` is set when the tier record improved |
| `lost` | Attempt budget spent; the secret is revealed |

## Error Codes

| Code | Description |
|------|-------------|
| `GAME_NOT_FOUND` | Game does not exist or has been ended |
| `UNKNOWN_TIER` | Tier name is not registered |
| `VALIDATION_ERROR` | Request body is invalid |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Service instance
    if service is None:
        from ..engine_core import GuessEngine
        from ..session import GameManager
        from ..storage import JsonScoreStore

        engine = GuessEngine(store=JsonScoreStore(NUMGUESS_SCORES_PATH))
        service = APIService(
            game_manager=GameManager(engine=engine, idle_timeout=NUMGUESS_IDLE_TIMEOUT),
        )
    api_service = service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    @app.exception_handler(GameNotFoundError)
    async def game_not_found(request: Request, exc: GameNotFoundError):
        return make_error_response(ErrorCode.GAME_NOT_FOUND, str(exc), status_code=404)

    @app.exception_handler(UnknownTierError)
    async def unknown_tier(request: Request, exc: UnknownTierError):
        return make_error_response(
            ErrorCode.UNKNOWN_TIER,
            str(exc),
            details={"known_tiers": exc.known},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Invalid request",
            status_code=422,
            details={"errors": [
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in exc.errors()
            ]},
        )

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return make_error_response(ErrorCode.INTERNAL_ERROR, "Internal error", status_code=500)

    # =========================================================================
    # Meta Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Meta"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__, environment=NUMGUESS_ENV)

    @app.get(
        "/api/v1/tiers",
        response_model=TierListResponse,
        tags=["Meta"],
        summary="List difficulty tiers",
    )
    async def list_tiers() -> TierListResponse:
        """Difficulty tiers with their current best scores."""
        return api_service.list_tiers()

    @app.get(
        "/api/v1/best-scores",
        response_model=BestScoresResponse,
        tags=["Meta"],
        summary="Best score per tier",
    )
    async def best_scores() -> BestScoresResponse:
        return api_service.best_scores()

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameResponse,
        responses={400: {"model": ErrorResponse, "description": "Unknown tier"}},
        tags=["Games"],
        summary="Start a new game",
    )
    async def start_game(
        body: Annotated[Optional[StartGameRequest], Body()] = None,
    ) -> GameResponse:
        """
        Start a new game. Defaults to the medium tier when no body is sent.
        """
        return api_service.start_game(body or StartGameRequest())

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List active games",
    )
    async def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    async def get_game(game_id: str) -> GameResponse:
        return api_service.get_game(game_id)

    @app.post(
        "/api/v1/games/{game_id}/guesses",
        response_model=GuessResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Submit a guess",
    )
    async def submit_guess(game_id: str, body: GuessRequest) -> GuessResponse:
        """
        Submit a guess. The value may be an int or the raw text typed by
        the player; text that is not a number is rejected as out of range.
        """
        return api_service.submit_guess(game_id, body)

    @app.post(
        "/api/v1/games/{game_id}/restart",
        response_model=GameResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Unknown tier"},
            404: {"model": ErrorResponse},
        },
        tags=["Games"],
        summary="Restart a game",
    )
    async def restart_game(
        game_id: str,
        body: Annotated[Optional[RestartGameRequest], Body()] = None,
    ) -> GameResponse:
        """Start a fresh session, keeping the tier unless one is given."""
        return api_service.restart_game(game_id, body)

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        tags=["Games"],
        summary="End a game",
    )
    async def end_game(game_id: str) -> EndGameResponse:
        success = api_service.end_game(game_id)
        return EndGameResponse(success=success, game_id=game_id)

    return app


# For running directly: uvicorn numguess.api.app:app
app = create_app()
