"""
Tiers - Difficulty tiers and the closeness scale.

Both are immutable configuration:
- A tier fixes the range and the attempt budget of a session
- A scale maps the distance between guess and secret to a label

Selecting a tier always starts a new session. Best scores are
scoped by tier name, so custom tiers get their own record.
"""

from __future__ import annotations
from bisect import bisect_right
from dataclasses import dataclass

from ..errors import UnknownTierError


@dataclass(frozen=True)
class DifficultyTier:
    """
    A named range and attempt budget.

    Tiers are optional: callers without difficulty levels can build
    a single custom tier and use it for every session.
    """
    name: str
    min_value: int
    max_value: int
    attempt_limit: int

    def __post_init__(self):
        if not self.name:
            raise ValueError("Tier name must not be empty")
        if self.min_value > self.max_value:
            raise ValueError(
                f"Tier {self.name}: min_value {self.min_value} exceeds max_value {self.max_value}"
            )
        if self.attempt_limit < 1:
            raise ValueError(f"Tier {self.name}: attempt_limit must be at least 1")

    @property
    def size(self) -> int:
        """Number of candidate values in the range."""
        return self.max_value - self.min_value + 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


EASY = DifficultyTier("easy", 1, 50, 12)
MEDIUM = DifficultyTier("medium", 1, 100, 10)
HARD = DifficultyTier("hard", 1, 200, 8)

TIERS: dict[str, DifficultyTier] = {
    EASY.name: EASY,
    MEDIUM.name: MEDIUM,
    HARD.name: HARD,
}

DEFAULT_TIER = MEDIUM.name


def get_tier(name: str) -> DifficultyTier:
    """Look up a built-in tier by name."""
    try:
        return TIERS[name]
    except KeyError:
        raise UnknownTierError(name, known=list(TIERS)) from None


@dataclass(frozen=True)
class ClosenessScale:
    """
    Step function from |guess - secret| to a qualitative label.

    A distance d gets labels[i] for the first threshold with d < thresholds[i],
    and the last label when it reaches every threshold. Labels run from
    closest to farthest, so the mapping is monotone in distance.
    """
    thresholds: tuple[int, ...]
    labels: tuple[str, ...]

    def __post_init__(self):
        if len(self.labels) != len(self.thresholds) + 1:
            raise ValueError("A closeness scale needs exactly one more label than thresholds")
        if any(t <= 0 for t in self.thresholds):
            raise ValueError("Closeness thresholds must be positive")
        if any(a >= b for a, b in zip(self.thresholds, self.thresholds[1:])):
            raise ValueError("Closeness thresholds must be strictly increasing")

    def label_for(self, distance: int) -> str:
        return self.labels[bisect_right(self.thresholds, abs(distance))]

    def rank_of(self, label: str) -> int:
        """Position of a label, 0 being the closest bucket."""
        return self.labels.index(label)


DEFAULT_SCALE = ClosenessScale(thresholds=(5, 15), labels=("hot", "warm", "cold"))
