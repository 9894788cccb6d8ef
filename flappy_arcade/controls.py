"""Input adapter: pygame events in, logical game actions out.

Raw events are reduced to edge triggers and queued.  The session drains the
queue once per tick and resolves each trigger against its phase at that
moment, so a key press is only ever interpreted once.
"""

from __future__ import annotations

import enum
from collections import deque
from typing import Deque, List, Set

import pygame

FLAP_KEY = pygame.K_SPACE
POINTER_BUTTON = 1


class Trigger(enum.Enum):
    KEY = "key"
    POINTER = "pointer"


class Action(enum.Enum):
    START = "start"
    FLAP = "flap"
    RESTART = "restart"


class InputQueue:
    def __init__(self) -> None:
        self._pending: Deque[Trigger] = deque()

    def push(self, trigger: Trigger) -> None:
        self._pending.append(trigger)

    def drain(self) -> List[Trigger]:
        triggers = list(self._pending)
        self._pending.clear()
        return triggers

    def __len__(self) -> int:
        return len(self._pending)


class EventTranslator:
    """Turns pygame events into :class:`Trigger` edges.

    A KEYDOWN for the flap key that arrives while the key is still held
    (keyboard auto-repeat) is swallowed until the matching KEYUP.
    """

    def __init__(self, queue: InputQueue) -> None:
        self.queue = queue
        self._held: Set[int] = set()

    def handle(self, event: pygame.event.Event) -> bool:
        """Queue the trigger for ``event``.  Returns ``True`` if consumed."""

        if event.type == pygame.KEYDOWN and event.key == FLAP_KEY:
            if event.key not in self._held:
                self._held.add(event.key)
                self.queue.push(Trigger.KEY)
            return True
        if event.type == pygame.KEYUP and event.key == FLAP_KEY:
            self._held.discard(event.key)
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == POINTER_BUTTON:
            self.queue.push(Trigger.POINTER)
            return True
        return False


def wants_quit(event: pygame.event.Event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
