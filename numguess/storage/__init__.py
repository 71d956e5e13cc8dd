"""
Storage - Best-score persistence.

The engine only sees the BestScoreStore interface. Callers pick
the in-memory store for tests and one-off games, or the JSON file
store when records should survive restarts.
"""

from .scores import BestScoreStore, InMemoryScoreStore, JsonScoreStore

__all__ = [
    "BestScoreStore",
    "InMemoryScoreStore",
    "JsonScoreStore",
]
