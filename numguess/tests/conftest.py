"""
Pytest fixtures for numguess tests.
"""

import random

import pytest

from ..engine_core import GuessEngine, DifficultyTier, TIERS, Session
from ..storage import InMemoryScoreStore, JsonScoreStore
from ..session import GameManager


@pytest.fixture
def medium_tier() -> DifficultyTier:
    """The 1-100, ten attempt tier."""
    return TIERS["medium"]


@pytest.fixture
def store() -> InMemoryScoreStore:
    return InMemoryScoreStore()


@pytest.fixture
def json_store(tmp_path) -> JsonScoreStore:
    """File store in a throwaway directory."""
    return JsonScoreStore(tmp_path / "scores" / "best_scores.json")


@pytest.fixture
def engine(store) -> GuessEngine:
    """Engine with an in-memory store and a fixed seed."""
    return GuessEngine(store=store, rng=random.Random(1234))


@pytest.fixture
def session_42(engine, medium_tier) -> Session:
    """Medium session with the secret forced to 42."""
    return engine.start_session(medium_tier, secret=42)


@pytest.fixture
def manager(engine) -> GameManager:
    return GameManager(engine=engine)
