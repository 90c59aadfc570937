import json

from sidescroller.game.engine import GameEngine
from sidescroller.game.entities import Entity
from sidescroller.storage.highscore import (
    HIGHSCORE_KEY,
    HighScoreStore,
    JsonHighScoreStore,
    MemoryHighScoreStore,
    load_high_score,
    save_high_score,
)


class BrokenStore(HighScoreStore):
    def get_high_score(self):
        raise OSError("disk gone")

    def set_high_score(self, value):
        raise OSError("disk gone")


def test_missing_file_reads_as_zero(tmp_path):
    assert JsonHighScoreStore(tmp_path / "hs.json").get_high_score() == 0


def test_json_store_persists(tmp_path):
    path = tmp_path / "nested" / "hs.json"
    JsonHighScoreStore(path).set_high_score(120)

    assert json.loads(path.read_text()) == {HIGHSCORE_KEY: 120}
    assert JsonHighScoreStore(path).get_high_score() == 120


def test_corrupt_file_reads_as_zero(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text("{not json")
    assert JsonHighScoreStore(path).get_high_score() == 0


def test_negative_value_reads_as_zero(tmp_path):
    path = tmp_path / "hs.json"
    path.write_text(json.dumps({HIGHSCORE_KEY: -7}))
    assert JsonHighScoreStore(path).get_high_score() == 0


def test_unwritable_location_is_skipped(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = JsonHighScoreStore(blocker / "hs.json")
    store.set_high_score(50)
    assert store.get_high_score() == 0


def test_unreadable_location_reads_as_zero(tmp_path, monkeypatch):
    def denied(self, *args, **kwargs):
        raise PermissionError("permission denied")

    monkeypatch.setattr(type(tmp_path), "exists", denied)
    assert JsonHighScoreStore(tmp_path / "hs.json").get_high_score() == 0


def test_helpers_swallow_store_failures():
    assert load_high_score(BrokenStore()) == 0
    assert not save_high_score(BrokenStore(), 10)
    assert save_high_score(MemoryHighScoreStore(), 10)


def test_engine_survives_broken_store(settings, clock, scheduler):
    engine = GameEngine(settings=settings, clock=clock, scheduler=scheduler, store=BrokenStore())
    assert engine.high_score == 0

    engine.start()
    engine.run.last_spawn_time = float("inf")
    engine.entities.append(Entity(x=-38, y=320, width=40, height=40))
    scheduler.pump(clock.advance(16))
    assert engine.score == 10
    assert engine.high_score == 10
