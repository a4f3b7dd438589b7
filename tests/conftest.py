import random

import pytest
from blessed.keyboard import Keystroke

from tunnel_runner.config import GameConfig
from tunnel_runner.world import World


class FakeTerminal:
    """Stands in for blessed.Terminal: readable markers, scripted keys."""

    home = '<home>'
    clear = '<clear>'
    normal = '<normal>'

    def __init__(self, width: int = 40, height: int = 20, batches=()):
        self.width = width
        self.height = height
        self._batches = [list(batch) for batch in batches]
        self._current: list = []
        self.polls: list = []

    def move_xy(self, x: int, y: int) -> str:
        return f'<{x},{y}>'

    def inkey(self, timeout=None):
        if timeout:
            self.polls.append(timeout)
            self._current = self._batches.pop(0) if self._batches else []
        if self._current:
            return self._current.pop(0)
        return Keystroke('')


def key(ucs: str) -> Keystroke:
    return Keystroke(ucs)


def arrow(name: str) -> Keystroke:
    codes = {'KEY_UP': 259, 'KEY_DOWN': 258, 'KEY_LEFT': 260, 'KEY_RIGHT': 261, 'KEY_ESCAPE': 361}
    ucs = '\x1b' if name == 'KEY_ESCAPE' else '\x1b[A'
    return Keystroke(ucs, code=codes[name], name=name)


@pytest.fixture
def quiet_config() -> GameConfig:
    """No spawns, no retargets: the tunnel only drifts to its first targets."""
    return GameConfig(enemy_spawn_chance=0.0, retarget_chance=0.0)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def world() -> World:
    return World.new(40, 20)
