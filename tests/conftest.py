import random

import pytest

from game.starfall.config import GameConfig
from game.starfall.controls import InputTracker
from game.starfall.simulation import new_game

FRAME_MS = 1000 / 60


@pytest.fixture
def config():
    # No random spawns, no stars: tests place every entity themselves
    return GameConfig.from_dict({"spawn_chance": 0.0, "star_count": 0})


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def state(config, rng):
    return new_game(config, rng)


@pytest.fixture
def controls():
    return InputTracker()


class RecordingHud:
    def __init__(self):
        self.calls = []

    def show_score(self, score):
        self.calls.append(("score", score))

    def show_lives(self, lives):
        self.calls.append(("lives", lives))

    def show_game_over(self, final_score):
        self.calls.append(("game_over", final_score))

    def hide_game_over(self):
        self.calls.append(("hide_game_over",))

    def last(self, kind):
        for call in reversed(self.calls):
            if call[0] == kind:
                return call
        return None


@pytest.fixture
def hud():
    return RecordingHud()
