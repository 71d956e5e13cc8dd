"""
Tests for the command-line interface.
"""

import argparse

import pytest

from ..cli import main, cmd_play
from ..storage import JsonScoreStore


def _scripted(lines):
    """Stand-in for input() that replays lines, then signals EOF."""
    remaining = list(lines)

    def read(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


class TestCLI:

    def test_tiers(self, capsys):
        assert main(["tiers"]) == 0

        out = capsys.readouterr().out
        assert "easy" in out
        assert "medium   1-100, 10 attempts (default)" in out

    def test_scores_empty(self, tmp_path, capsys):
        assert main(["scores", "--scores", str(tmp_path / "s.json")]) == 0

        out = capsys.readouterr().out
        assert "medium   -" in out

    def test_scores_reset(self, tmp_path, capsys):
        path = tmp_path / "s.json"
        JsonScoreStore(path).put("hard", 4)

        main(["scores", "--scores", str(path), "--reset"])

        assert not path.exists()

    def test_invalid_log_level_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "chatty", "tiers"])

        assert exc_info.value.code == 2
        assert "invalid choice" in capsys.readouterr().err

    def test_log_level_is_case_insensitive(self, capsys):
        assert main(["--log-level", "debug", "tiers"]) == 0

    def test_no_command_exits(self, capsys):
        with pytest.raises(SystemExit):
            main([])


class TestTerminalPlay:

    def _args(self, tmp_path, tier="medium"):
        return argparse.Namespace(tier=tier, seed=3, scores=str(tmp_path / "s.json"))

    def test_play_until_quit(self, tmp_path, capsys):
        args = self._args(tmp_path)
        result = cmd_play(args, read=_scripted(["abc", "500", ":quit"]))

        out = capsys.readouterr().out
        assert result == 0
        assert "guess a number between 1 and 100" in out
        assert out.count("Enter a number between 1 and 100") == 2

    def test_binary_search_wins_and_records(self, tmp_path, capsys):
        args = self._args(tmp_path, tier="hard")
        low, high = 1, 200
        guesses = []

        # Feed guesses lazily so each one can use the printed status line
        def read(prompt=""):
            out = capsys.readouterr().out
            if "Victory!" in out or len(guesses) >= 8:
                raise EOFError
            if "Range " in out:
                status = out.split("Range ")[-1].split(" |")[0]
                lo, hi = (int(v) for v in status.split("-"))
                bounds[:] = [lo, hi]
            guess = (bounds[0] + bounds[1]) // 2
            guesses.append(guess)
            return str(guess)

        bounds = [low, high]
        cmd_play(args, read=read)

        assert JsonScoreStore(args.scores).get("hard") == len(guesses)

    def test_switch_tier(self, tmp_path, capsys):
        args = self._args(tmp_path)
        cmd_play(args, read=_scripted([":tier easy", ":tier nope", ":quit"]))

        out = capsys.readouterr().out
        assert "New easy game" in out
        assert "Unknown tier: 'nope'" in out

    def test_bare_tier_command_prints_usage(self, tmp_path, capsys):
        args = self._args(tmp_path)
        cmd_play(args, read=_scripted([":tier", ":tierz", ":quit"]))

        out = capsys.readouterr().out
        assert "Usage: :tier NAME (one of: easy, medium, hard)" in out
        assert "Unknown command: :tierz" in out
        assert out.count("New medium game") == 1

    def test_unknown_starting_tier(self, tmp_path):
        with pytest.raises(SystemExit):
            cmd_play(self._args(tmp_path, tier="nope"), read=_scripted([]))
