import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flappy_arcade.config import GameSettings
from flappy_arcade.session import GameSession


class FixedRandom(random.Random):
    """Always picks the same gap centre."""

    def __init__(self, value: int) -> None:
        super().__init__(0)
        self.value = value

    def randint(self, a: int, b: int) -> int:
        return self.value


@pytest.fixture
def pygame_display():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def floating_session():
    """A session whose bird never falls, with every gap centred on the bird."""
    return GameSession(GameSettings(gravity=0.0), rng=FixedRandom(220))


@pytest.fixture
def session():
    return GameSession(rng=random.Random(1234))


@pytest.fixture
def tick_session():
    """Build a floating session whose gaps are all centred on ``centre``."""

    def build(centre: int) -> GameSession:
        return GameSession(GameSettings(gravity=0.0), rng=FixedRandom(centre))

    return build
