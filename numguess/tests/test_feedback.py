"""
Tests for input parsing and outcome messages.
"""

import pytest

from ..engine_core import GuessEngine, DifficultyTier, ClosenessScale
from ..feedback import parse_guess, describe, status_line, remaining_attempts


class TestParseGuess:

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42),
        ("  7 ", 7),
        ("-3", -3),
        (15, 15),
        ("", None),
        ("   ", None),
        ("4.5", None),
        ("abc", None),
        ("12abc", None),
        ("1_0", None),
        ("٤٢", None),
        ("+8", 8),
        (None, None),
        (True, None),
        (3.0, None),
    ])
    def test_parse(self, raw, expected):
        assert parse_guess(raw) == expected


class TestDescribe:

    def test_too_high_messages(self, engine, session_42):
        assert describe(engine.evaluate(session_42, 44)) == "Just a bit too high!"
        assert describe(engine.evaluate(session_42, 50)) == "High!"
        assert describe(engine.evaluate(session_42, 90)) == "Way too high!"

    def test_too_low_messages(self, engine, session_42):
        assert describe(engine.evaluate(session_42, 40)) == "Just a bit too low!"
        assert describe(engine.evaluate(session_42, 1)) == "Way too low!"

    def test_rejection_messages(self, engine, session_42):
        assert describe(engine.evaluate(session_42, 0)) == "Enter a number between 1 and 100"

        session = engine.evaluate(session_42, 50).session
        assert describe(engine.evaluate(session, 50)) == "You already tried that!"

    def test_win_and_loss_messages(self, engine):
        tier = DifficultyTier("short", 1, 10, 1)

        won = engine.evaluate(engine.start_session(tier, secret=3), 3)
        assert describe(won).startswith("Victory! It was 3")

        lost = engine.evaluate(engine.start_session(tier, secret=3), 9)
        assert describe(lost) == "Defeat! The number was 3"

        over = engine.evaluate(lost.session, 4)
        assert describe(over) == "This game is over. Start a new one!"

    def test_custom_scale_falls_back(self, medium_tier):
        scale = ClosenessScale(thresholds=(3,), labels=("scorching", "frozen"))
        engine = GuessEngine(scale=scale)
        session = engine.start_session(medium_tier, secret=42)

        assert describe(engine.evaluate(session, 43)) == "Scorching: too high!"
        assert describe(engine.evaluate(session, 10)) == "Frozen: too low!"


class TestStatusLine:

    def test_status_after_guess(self, engine, session_42):
        session = engine.evaluate(session_42, 50).session

        assert status_line(session) == "Range 1-49 | attempts 1/10 | best -"
        assert remaining_attempts(session) == 9
