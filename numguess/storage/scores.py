"""
Best Scores - Persists the fewest attempts needed to win, per tier.

The store:
- Is keyed by tier name
- Holds one positive int (or nothing) per tier
- Is the ONLY persistence in the system
- Never fails a session start: bad data reads as "no best score"

Design decisions:
- Injected into the engine, so the engine does no I/O of its own
- File store is a single JSON object, e.g. {"easy": null, "medium": 4}
"""

from __future__ import annotations
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _coerce_score(tier: str, value: Any) -> int | None:
    """Return a valid score or None, logging anything unusable."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning("Ignoring malformed best score for %s: %r", tier, value)
        return None
    return value


class BestScoreStore(ABC):
    """
    Key-value store for best scores.

    Implementations must survive garbage: a value that is not a
    positive int is reported as absent.
    """

    @abstractmethod
    def get(self, tier: str) -> int | None:
        """Best score for a tier, or None if there is none."""
        pass

    @abstractmethod
    def put(self, tier: str, score: int):
        """Record a new best score for a tier."""
        pass

    @abstractmethod
    def all(self) -> dict[str, int | None]:
        """All recorded tiers and their best scores."""
        pass

    @abstractmethod
    def clear(self):
        """Forget every best score."""
        pass


class InMemoryScoreStore(BestScoreStore):
    """
    Store that lives as long as the process.

    Usage:
        store = InMemoryScoreStore({"medium": 7})
        store.get("medium")  # 7
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._scores: dict[str, int | None] = {}
        for tier, value in (initial or {}).items():
            self._scores[tier] = _coerce_score(tier, value)

    def get(self, tier: str) -> int | None:
        return self._scores.get(tier)

    def put(self, tier: str, score: int):
        if _coerce_score(tier, score) is None:
            raise ValueError(f"Best score must be a positive int, got {score!r}")
        self._scores[tier] = score

    def all(self) -> dict[str, int | None]:
        return dict(self._scores)

    def clear(self):
        self._scores.clear()


class JsonScoreStore(BestScoreStore):
    """
    File-backed store that survives process restarts.

    Usage:
        store = JsonScoreStore("~/.numguess/best_scores.json")

        best = store.get("hard")
        store.put("hard", 6)

    The file is read on every access so that several processes
    sharing one file see each other's records.
    """

    def __init__(self, path: str | Path | None = None):
        if path is None:
            path = Path.home() / ".numguess" / "best_scores.json"
        self.path = Path(path).expanduser()

    def get(self, tier: str) -> int | None:
        return self._load().get(tier)

    def put(self, tier: str, score: int):
        if _coerce_score(tier, score) is None:
            raise ValueError(f"Best score must be a positive int, got {score!r}")
        scores = self._load()
        scores[tier] = score
        self._save(scores)

    def all(self) -> dict[str, int | None]:
        return self._load()

    def clear(self):
        self.path.unlink(missing_ok=True)

    def _load(self) -> dict[str, int | None]:
        """
        Read the file, treating anything unreadable as empty.
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable best-score file %s: %s", self.path, e)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Ignoring best-score file %s: expected a JSON object", self.path)
            return {}

        return {str(tier): _coerce_score(str(tier), value) for tier, value in raw.items()}

    def _save(self, scores: dict[str, int | None]):
        """
        Write the whole file through a temp file and a rename, so an
        interrupted write leaves the previous records in place.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(scores, f, indent=2, sort_keys=True)
            tmp_path.replace(self.path)
        finally:
            tmp_path.unlink(missing_ok=True)
