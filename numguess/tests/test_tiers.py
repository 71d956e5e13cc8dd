"""
Tests for tiers and the closeness scale.
"""

import pytest

from ..engine_core import DifficultyTier, ClosenessScale, DEFAULT_SCALE, TIERS, get_tier
from ..errors import UnknownTierError


class TestDifficultyTier:

    def test_builtin_tiers(self):
        assert (TIERS["easy"].max_value, TIERS["easy"].attempt_limit) == (50, 12)
        assert (TIERS["medium"].max_value, TIERS["medium"].attempt_limit) == (100, 10)
        assert (TIERS["hard"].max_value, TIERS["hard"].attempt_limit) == (200, 8)

    def test_tiers_are_immutable(self):
        with pytest.raises(AttributeError):
            TIERS["easy"].attempt_limit = 99

    @pytest.mark.parametrize("args", [
        ("", 1, 10, 3),
        ("bad_range", 10, 1, 3),
        ("no_attempts", 1, 10, 0),
    ])
    def test_invalid_tiers(self, args):
        with pytest.raises(ValueError):
            DifficultyTier(*args)

    def test_single_value_tier(self):
        tier = DifficultyTier("one", 5, 5, 1)
        assert tier.size == 1
        assert tier.contains(5)
        assert not tier.contains(6)

    def test_get_unknown_tier(self):
        with pytest.raises(UnknownTierError) as exc_info:
            get_tier("impossible")

        assert "impossible" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


class TestClosenessScale:

    def test_default_buckets(self):
        assert DEFAULT_SCALE.label_for(0) == "hot"
        assert DEFAULT_SCALE.label_for(4) == "hot"
        assert DEFAULT_SCALE.label_for(5) == "warm"
        assert DEFAULT_SCALE.label_for(14) == "warm"
        assert DEFAULT_SCALE.label_for(15) == "cold"
        assert DEFAULT_SCALE.label_for(-30) == "cold"

    def test_monotone_in_distance(self):
        scale = ClosenessScale(
            thresholds=(5, 10, 20),
            labels=("burning hot", "hot", "cool", "ice cold"),
        )
        ranks = [scale.rank_of(scale.label_for(d)) for d in range(0, 60)]

        assert ranks == sorted(ranks)
        assert ranks[0] == 0
        assert ranks[-1] == 3

    @pytest.mark.parametrize("thresholds,labels", [
        ((5, 15), ("hot", "cold")),
        ((15, 5), ("a", "b", "c")),
        ((0, 5), ("a", "b", "c")),
    ])
    def test_invalid_scales(self, thresholds, labels):
        with pytest.raises(ValueError):
            ClosenessScale(thresholds=thresholds, labels=labels)
