"""Flappy Bird inspired arcade game implemented with pygame.

Run the game with ``python -m flappy_arcade``.  Click or press space to
start, press space to flap.  Avoid the pipes and the ground; after a crash
click or press space to get back to the start screen.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import pygame

from . import config
from .controls import EventTranslator, wants_quit
from .log import setup_logging
from .render import Renderer
from .session import GameSession

logger = logging.getLogger(__name__)


def frame_time(elapsed_ms: float) -> float:
    """Elapsed frame time, capped at ``config.MAX_FRAME_MS``."""
    return min(elapsed_ms, config.MAX_FRAME_MS)


class Game:
    def __init__(self, session: Optional[GameSession] = None) -> None:
        self.session = session or GameSession()
        settings = self.session.settings
        pygame.display.set_caption(config.CAPTION)
        self.window = pygame.display.set_mode((settings.width, settings.height))
        self.clock = pygame.time.Clock()
        self.events = EventTranslator(self.session.input)
        self.renderer = Renderer(self.session)
        self.running = False

    def run(self) -> None:
        self.running = True
        while self.running:
            dt_ms = frame_time(self.clock.tick(config.FPS))
            self.handle_events()
            if not self.running:
                break
            self.session.update(dt_ms)
            self.renderer.draw(self.window, dt_ms / 1000.0)
            pygame.display.flip()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if wants_quit(event):
                logger.info("quit requested")
                self.running = False
                return
            self.events.handle(event)


def main() -> None:
    setup_logging(os.environ.get("FLAPPY_LOG_LEVEL", "warning"))
    pygame.init()
    try:
        Game().run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
