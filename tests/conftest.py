# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable (so core.* imports work when running from repo root)
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def cfg():
    from config import AppConfig
    return AppConfig(grid_w=10, grid_h=8, cell=4, seed=1234)

@pytest.fixture
def snake_factory():
    from core.snake_rules import Snake
    def make(cells=((5, 5),), heading=None, **kwargs):
        s = Snake(cells, **kwargs)
        s.heading = heading
        return s
    return make

@pytest.fixture
def scene_factory(cfg, snake_factory):
    from core.scene import SceneController
    from core.snake_rules import Fruit
    from core.interfaces import Cell
    def make(cells=((5, 5),), fruit=(0, 0), heading=None, on_game_over=None, **kwargs):
        return SceneController(
            kwargs.pop("cfg", cfg),
            on_game_over=on_game_over,
            rng=random.Random(7),
            snake=snake_factory(cells, heading=heading),
            fruit=Fruit(Cell(*fruit)) if fruit is not None else None,
            **kwargs,
        )
    return make

class RecordingTarget:
    """Tickable that remembers every call the loop makes."""
    def __init__(self):
        self.calls = []
    def update(self, dt):
        self.calls.append(("update", dt))
    def render(self):
        self.calls.append(("render", None))
    @property
    def ticks(self):
        return sum(1 for name, _ in self.calls if name == "update")

@pytest.fixture
def target():
    return RecordingTarget()
