"""Tests for HighScoreStore."""
import json
import logging

from tick_snake import HighScoreStore, Signal, SignalBus


def test_in_memory_starts_at_zero():
    store = HighScoreStore()
    assert store.high_score == 0
    assert store.path is None


def test_record_only_improvements():
    store = HighScoreStore()
    assert store.record(30) is True
    assert store.record(20) is False
    assert store.record(30) is False
    assert store.high_score == 30


def test_missing_file_reads_zero(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    assert store.high_score == 0


def test_persists_to_json(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    HighScoreStore(path).record(120)
    assert json.loads(path.read_text()) == {"high_score": 120}
    assert HighScoreStore(path).high_score == 120


def test_malformed_file_logged_and_ignored(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("not json")
    with caplog.at_level(logging.WARNING, logger="tick_snake.highscore"):
        store = HighScoreStore(path)
    assert store.high_score == 0
    assert "unreadable high score" in caplog.text


def test_wrong_shape_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("[1, 2]")
    assert HighScoreStore(path).high_score == 0


def test_subscribe_records_from_signals():
    bus = SignalBus()
    store = HighScoreStore()
    store.subscribe(bus)
    bus.publish(Signal.FOOD_EATEN, score=10)
    bus.publish(Signal.GAME_OVER, score=20, reason="wall")
    bus.flush()
    assert store.high_score == 20


def test_infinite_value_ignored(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text('{"high_score": Infinity}')
    assert HighScoreStore(path).high_score == 0


def test_directory_path_logged_and_ignored(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="tick_snake.highscore"):
        store = HighScoreStore(tmp_path)
    assert store.high_score == 0
    assert "unreadable high score" in caplog.text
