"""Game entities: the bird, the pipes and the score zones."""

from __future__ import annotations

import enum
from typing import Tuple

from .physics import Body


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class Orientation(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"


class Bird:
    """The player.  One per session; moved back to its start on restart."""

    def __init__(self, body: Body, start: Tuple[float, float]) -> None:
        self.body = body
        self.start = start
        self.angle = 0.0
        self.tinted = False
        body.collide_world_bounds = True
        self.reset()

    @property
    def x(self) -> float:
        return self.body.x

    @property
    def y(self) -> float:
        return self.body.y

    @y.setter
    def y(self, value: float) -> None:
        self.body.y = value

    @property
    def velocity(self) -> float:
        return self.body.velocity_y

    @property
    def gravity_enabled(self) -> bool:
        return self.body.allow_gravity

    @gravity_enabled.setter
    def gravity_enabled(self, enabled: bool) -> None:
        self.body.allow_gravity = enabled

    def flap(self, velocity: float) -> None:
        self.body.velocity_y = velocity

    def stop(self) -> None:
        self.body.set_velocity(0.0, 0.0)

    def tilt(self, divisor: float, low: float, high: float) -> None:
        self.angle = clamp(self.body.velocity_y / divisor, low, high)

    def reset(self) -> None:
        self.body.x, self.body.y = float(self.start[0]), float(self.start[1])
        self.stop()
        self.angle = 0.0
        self.tinted = False
        self.gravity_enabled = False


class Pipe:
    """One half of a pipe pair, scrolling left at a constant speed."""

    def __init__(self, body: Body, orientation: Orientation, speed: float) -> None:
        self.body = body
        self.orientation = orientation
        body.allow_gravity = False
        body.immovable = True
        body.velocity_x = -speed

    @classmethod
    def top(cls, body: Body, bottom_edge: float, speed: float) -> "Pipe":
        body.bottom = bottom_edge
        return cls(body, Orientation.TOP, speed)

    @classmethod
    def bottom(cls, body: Body, top_edge: float, speed: float) -> "Pipe":
        body.top = top_edge
        return cls(body, Orientation.BOTTOM, speed)

    @property
    def x(self) -> float:
        return self.body.x

    @property
    def velocity(self) -> float:
        return self.body.velocity_x

    @property
    def active(self) -> bool:
        return self.body.active

    def freeze(self) -> None:
        self.body.set_velocity(0.0, 0.0)

    def destroy(self) -> None:
        self.body.destroy()


class ScoreZone:
    """Invisible one-shot trigger travelling with a pipe pair."""

    def __init__(self, body: Body, speed: float) -> None:
        self.body = body
        body.allow_gravity = False
        body.velocity_x = -speed
        self.triggered = False

    @property
    def x(self) -> float:
        return self.body.x

    @property
    def velocity(self) -> float:
        return self.body.velocity_x

    @property
    def active(self) -> bool:
        return self.body.active

    def trigger(self) -> bool:
        """Consume the zone.  Returns ``False`` if it was already used."""
        if self.triggered or not self.body.active:
            return False
        self.triggered = True
        self.destroy()
        return True

    def freeze(self) -> None:
        self.body.set_velocity(0.0, 0.0)

    def destroy(self) -> None:
        self.body.destroy()
