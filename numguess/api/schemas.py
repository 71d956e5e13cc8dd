"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between the browser page and the engine.

Error Codes:
- GAME_NOT_FOUND: Game does not exist or has been ended
- UNKNOWN_TIER: Tier name is not registered
- VALIDATION_ERROR: Request body could not be validated
- INTERNAL_ERROR: Unexpected failure
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Session phase as seen by clients."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class OutcomeType(str, Enum):
    """Classification of one guess."""
    REJECTED = "rejected"
    INCORRECT = "incorrect"
    WON = "won"
    LOST = "lost"


class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    UNKNOWN_TIER = "UNKNOWN_TIER"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class TierInfo(BaseModel):
    """A difficulty tier."""
    name: str
    min_value: int
    max_value: int
    attempt_limit: int
    best_score: Optional[int] = None

    model_config = {"from_attributes": True}


class RangeInfo(BaseModel):
    """Bounds the secret is known to lie within."""
    lower_bound: int
    upper_bound: int


# =============================================================================
# Requests
# =============================================================================

class StartGameRequest(BaseModel):
    """Start a game on a tier."""
    tier: str = Field("medium", description="easy, medium, hard, or a configured tier")


class RestartGameRequest(BaseModel):
    """Restart a game, optionally switching tier."""
    tier: Optional[str] = Field(None, description="Keep the current tier when omitted")


class GuessRequest(BaseModel):
    """
    A submitted guess, as typed or already parsed.

    Values are taken as sent: booleans and floats are not coerced to ints,
    so the engine rejects them as out of range.
    """
    guess: Union[StrictInt, StrictStr, StrictBool, StrictFloat] = Field(
        description="Integer guess or the raw text entered"
    )


# =============================================================================
# Responses
# =============================================================================

class GameResponse(BaseModel):
    """Full view of a game for rendering."""
    game_id: str
    status: GameStatus
    tier: TierInfo
    attempts_used: int
    remaining_attempts: int
    range: RangeInfo
    history: list[int] = Field(default_factory=list)
    best_score: Optional[int] = None
    message: Optional[str] = None

    # Only revealed once the game is lost or won
    secret: Optional[int] = None


class GuessResponse(BaseModel):
    """Result of one guess plus the updated game."""
    outcome: OutcomeType
    accepted: bool
    message: str
    guess: Optional[int] = None

    reason: Optional[str] = Field(None, description="out_of_range, already_tried, game_over")
    direction: Optional[str] = Field(None, description="higher or lower: where the secret lies")
    magnitude: Optional[int] = None
    closeness: Optional[str] = None
    new_best: bool = False

    game: GameResponse


class TierListResponse(BaseModel):
    tiers: list[TierInfo]
    default_tier: str


class BestScoresResponse(BaseModel):
    scores: dict[str, Optional[int]]


class GameListResponse(BaseModel):
    games: list[str]
    count: int


class EndGameResponse(BaseModel):
    success: bool
    game_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    environment: str


class ErrorResponse(BaseModel):
    """Error body for every non-2xx response."""
    success: bool = False
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
