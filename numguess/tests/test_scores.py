"""
Tests for best-score stores.

Tests:
- Round trip through the JSON file
- Malformed data reads as absent
- Persistence across store instances
"""

import json

import pytest

from ..engine_core import GuessEngine, TIERS
from ..storage import InMemoryScoreStore, JsonScoreStore


class TestInMemoryScoreStore:

    def test_empty(self, store):
        assert store.get("medium") is None
        assert store.all() == {}

    def test_put_and_get(self, store):
        store.put("hard", 5)
        assert store.get("hard") == 5

    @pytest.mark.parametrize("score", [0, -1, "3", True])
    def test_put_rejects_invalid(self, store, score):
        with pytest.raises(ValueError):
            store.put("hard", score)

    def test_clear(self, store):
        store.put("easy", 2)
        store.clear()
        assert store.all() == {}


class TestJsonScoreStore:

    def test_missing_file_is_empty(self, json_store):
        assert json_store.get("medium") is None
        assert json_store.all() == {}

    def test_creates_parent_directories(self, json_store):
        json_store.put("medium", 4)

        assert json_store.path.exists()
        assert json.loads(json_store.path.read_text()) == {"medium": 4}

    def test_survives_new_instance(self, json_store):
        json_store.put("easy", 7)
        reopened = JsonScoreStore(json_store.path)

        assert reopened.get("easy") == 7

    def test_put_keeps_other_tiers(self, json_store):
        json_store.put("easy", 7)
        json_store.put("hard", 3)

        assert json_store.all() == {"easy": 7, "hard": 3}

    @pytest.mark.parametrize("content", [
        "not json at all",
        "[1, 2, 3]",
        "",
        "42",
    ])
    def test_unreadable_file_reads_as_empty(self, json_store, content):
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text(content)

        assert json_store.get("medium") is None
        assert json_store.all() == {}

    def test_malformed_values_read_as_absent(self, json_store):
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text(json.dumps({
            "easy": "three",
            "medium": -2,
            "hard": 6,
            "custom": None,
        }))

        assert json_store.all() == {"easy": None, "medium": None, "hard": 6, "custom": None}

    def test_malformed_file_does_not_fail_session_start(self, json_store):
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text("{broken")

        engine = GuessEngine(store=json_store)
        session = engine.start_session(TIERS["medium"])

        assert session.best_score is None

    def test_win_overwrites_malformed_file(self, json_store):
        json_store.path.parent.mkdir(parents=True, exist_ok=True)
        json_store.path.write_text("{broken")

        engine = GuessEngine(store=json_store)
        session = engine.start_session(TIERS["easy"], secret=10)
        engine.evaluate(session, 10)

        assert JsonScoreStore(json_store.path).get("easy") == 1

    def test_interrupted_write_keeps_old_records(self, json_store, monkeypatch):
        json_store.put("easy", 7)
        json_store.put("hard", 3)

        def fail_midway(obj, fp, **kwargs):
            fp.write('{"easy": ')
            raise OSError("disk full")

        monkeypatch.setattr("numguess.storage.scores.json.dump", fail_midway)
        with pytest.raises(OSError):
            json_store.put("medium", 4)
        monkeypatch.undo()

        assert json_store.all() == {"easy": 7, "hard": 3}
        assert list(json_store.path.parent.iterdir()) == [json_store.path]

    def test_clear_removes_file(self, json_store):
        json_store.put("medium", 4)
        json_store.clear()

        assert not json_store.path.exists()
        json_store.clear()
