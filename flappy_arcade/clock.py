"""Simulated game clock with repeating and one-shot timers."""

from __future__ import annotations

from typing import Callable, List


class Timer:
    """A callback scheduled on a :class:`GameClock`."""

    def __init__(self, due_ms: float, delay_ms: float, callback: Callable[[], None], loop: bool) -> None:
        self.due_ms = due_ms
        self.delay_ms = delay_ms
        self.callback = callback
        self.loop = loop
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled


class GameClock:
    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[Timer] = []

    def add_timer(self, delay_ms: float, callback: Callable[[], None], *, loop: bool = False) -> Timer:
        if delay_ms <= 0:
            raise ValueError(f"timer delay must be positive, got {delay_ms}")
        timer = Timer(self.now + delay_ms, delay_ms, callback, loop)
        self.timers = [t for t in self.timers if t.active]
        self.timers.append(timer)
        return timer

    def advance(self, dt_ms: float) -> None:
        """Move time forward and fire the timers that fall due.

        Each timer fires at most once per call.  A looping timer that fell
        behind stays due and fires again on the following calls until it has
        caught up.  Cancelling a timer from inside any callback stops it
        immediately.
        """

        self.now += dt_ms
        for timer in list(self.timers):
            if timer.cancelled or timer.due_ms > self.now:
                continue
            timer.callback()
            if timer.loop:
                timer.due_ms += timer.delay_ms
            else:
                timer.cancel()
        self.timers = [timer for timer in self.timers if timer.active]
