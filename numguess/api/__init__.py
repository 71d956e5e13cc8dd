"""
API Module - Browser page interface.

Exposes the engine via REST API. The page:
1. Lists tiers and best scores
2. Starts a game on a tier
3. Posts each guess as typed
4. Renders the outcome, range and history
5. Restarts or switches tier

Games live in memory; best scores go to the configured store.
"""

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
    ErrorResponse,
    # Shared
    TierInfo,
    RangeInfo,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "StartGameRequest",
    "RestartGameRequest",
    "GuessRequest",
    # Responses
    "GameResponse",
    "GuessResponse",
    "TierListResponse",
    "BestScoresResponse",
    "ErrorResponse",
    # Shared
    "TierInfo",
    "RangeInfo",
    # Service
    "APIService",
    "create_app",
]
