import json
import random

import pytest

from entities import GroundObstacle
from highscore_store import HighScoreStore, MemoryScoreStore
from simulation import Simulation, Phase


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "nope.json").load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "dir" / "hs.json"
    store = HighScoreStore(path)
    store.save(1234)
    assert json.loads(path.read_text(encoding="utf-8")) == {"high_score": 1234}
    assert HighScoreStore(path).load() == 1234


@pytest.mark.parametrize("content", [
    "not json at all",
    "",
    "[1, 2, 3]",
    '{"high_score": "123"}',
    '{"high_score": -5}',
    '{"high_score": 12.5}',
    '{"high_score": true}',
    '{"other": 10}',
])
def test_bad_content_reads_zero(tmp_path, content):
    path = tmp_path / "hs.json"
    path.write_text(content, encoding="utf-8")
    assert HighScoreStore(path).load() == 0


def test_memory_store():
    store = MemoryScoreStore()
    assert store.load() == 0
    store.save(9)
    assert store.load() == 9


def test_game_over_persists_new_record(tmp_path):
    path = tmp_path / "hs.json"
    HighScoreStore(path).save(10)

    sim = Simulation(800, 300, store=HighScoreStore(path), rng=random.Random(5))
    assert sim.world.high_score == 10
    sim.start()
    sim.world.score = 88.8
    sim.ground_obstacles.append(GroundObstacle(x=80, y=210, width=20, height=40))
    assert sim.update() is Phase.GAME_OVER
    assert HighScoreStore(path).load() == 88
