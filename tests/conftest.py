import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from flappy.game_engine import GameEngine
from flappy.highscores import HighScoreStore
from flappy.scaling import ScalingContext
from flappy.screens import ScreenController


class FakeAudio:
    """Counts sound requests instead of playing them."""

    def __init__(self):
        self.bounces = 0
        self.game_overs = 0
        self.inits = 0

    def init_audio(self):
        self.inits += 1
        return False

    def play_bounce_sound(self):
        self.bounces += 1

    def play_game_over_sound(self):
        self.game_overs += 1


class SequenceRng:
    """Returns the given values from random() in order, then repeats the last."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scaling():
    # Reference size: every scale factor is exactly 1
    return ScalingContext(500, 200)


@pytest.fixture
def audio():
    return FakeAudio()


@pytest.fixture
def engine(scaling, audio):
    return GameEngine(scaling=scaling, audio=audio, rng=random.Random(1234))


@pytest.fixture
def game(engine):
    return engine.new_game()


@pytest.fixture
def store(tmp_path):
    store = HighScoreStore(tmp_path / "scores.db")
    yield store
    store.close()


@pytest.fixture
def screens(engine, store, audio):
    return ScreenController(engine, store, audio)
