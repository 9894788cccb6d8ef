"""Arcade style physics: gravity, constant velocities and box overlap.

The game only talks to the :class:`PhysicsProvider` protocol.  Any engine
that can create boxes, integrate them and report pairwise overlaps can stand
in for :class:`ArcadePhysics`.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Protocol, Tuple, Union

import pygame

logger = logging.getLogger(__name__)


class Body:
    """An axis-aligned box positioned by its centre."""

    def __init__(self, x: float, y: float, width: float, height: float, *, static: bool = False) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.static = static
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.allow_gravity = not static
        self.immovable = static
        self.collide_world_bounds = False
        self.active = True

    @property
    def left(self) -> float:
        return self.x - self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width / 2

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @top.setter
    def top(self, value: float) -> None:
        self.y = value + self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2

    @bottom.setter
    def bottom(self, value: float) -> None:
        self.y = value - self.height / 2

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.left), round(self.top), round(self.width), round(self.height))

    def set_velocity(self, x: float, y: float) -> None:
        self.velocity_x = x
        self.velocity_y = y

    def overlaps(self, other: "Body") -> bool:
        return self.rect.colliderect(other.rect)

    def destroy(self) -> None:
        self.active = False


class BodyGroup:
    """Bodies kept in creation order; destroyed members drop out."""

    def __init__(self, world: "ArcadePhysics") -> None:
        self.world = world
        self._bodies: List[Body] = []

    def create(self, x: float, y: float, width: float, height: float) -> Body:
        body = self.world.add_body(x, y, width, height)
        self._bodies.append(body)
        return body

    @property
    def children(self) -> List[Body]:
        self._bodies = [body for body in self._bodies if body.active]
        return list(self._bodies)

    def clear(self) -> None:
        for body in self._bodies:
            body.destroy()
        self._bodies = []

    def __iter__(self) -> Iterator[Body]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


Target = Union[Body, BodyGroup]
CollisionCallback = Callable[[Body, Body], None]


class Collider:
    """A registered collision or overlap check between two targets."""

    def __init__(self, first: Target, second: Target, callback: CollisionCallback, separate: bool) -> None:
        self.first = first
        self.second = second
        self.callback = callback
        self.separate = separate
        self.active = True

    def destroy(self) -> None:
        self.active = False

    def pairs(self) -> Iterator[Tuple[Body, Body]]:
        for a in _members(self.first):
            for b in _members(self.second):
                if a.active and b.active:
                    yield a, b

    @property
    def stale(self) -> bool:
        for target in (self.first, self.second):
            if isinstance(target, Body) and not target.active:
                return True
        return False


def _members(target: Target) -> List[Body]:
    if isinstance(target, BodyGroup):
        return target.children
    return [target]


class PhysicsProvider(Protocol):
    def add_body(self, x: float, y: float, width: float, height: float) -> Body: ...

    def add_static_body(self, x: float, y: float, width: float, height: float) -> Body: ...

    def add_group(self) -> BodyGroup: ...

    def add_collider(self, first: Target, second: Target, callback: CollisionCallback) -> Collider: ...

    def add_overlap(self, first: Target, second: Target, callback: CollisionCallback) -> Collider: ...

    def step(self, dt: float) -> None: ...


class ArcadePhysics:
    """Velocity integration under uniform gravity with AABB collisions.

    ``step`` integrates every live body first, clamps bodies that collide
    with the world bounds, then runs the registered colliders and overlaps in
    registration order.  Colliders push the movable body out of the other
    before calling back; overlaps only call back.
    """

    def __init__(self, width: int, height: int, gravity: float) -> None:
        self.width = width
        self.height = height
        self.gravity = gravity
        self.bodies: List[Body] = []
        self.colliders: List[Collider] = []

    def add_body(self, x: float, y: float, width: float, height: float) -> Body:
        body = Body(x, y, width, height)
        self.bodies.append(body)
        return body

    def add_static_body(self, x: float, y: float, width: float, height: float) -> Body:
        body = Body(x, y, width, height, static=True)
        self.bodies.append(body)
        return body

    def add_group(self) -> BodyGroup:
        return BodyGroup(self)

    def add_collider(self, first: Target, second: Target, callback: CollisionCallback) -> Collider:
        return self._register(first, second, callback, separate=True)

    def add_overlap(self, first: Target, second: Target, callback: CollisionCallback) -> Collider:
        return self._register(first, second, callback, separate=False)

    def _register(self, first: Target, second: Target, callback: CollisionCallback, separate: bool) -> Collider:
        collider = Collider(first, second, callback, separate)
        self.colliders.append(collider)
        return collider

    def step(self, dt: float) -> None:
        for body in self.bodies:
            if body.active and not body.static:
                self._integrate(body, dt)

        for collider in list(self.colliders):
            if not collider.active or collider.stale:
                continue
            for a, b in list(collider.pairs()):
                if not collider.active:
                    break
                if not (a.active and b.active and a.overlaps(b)):
                    continue
                if collider.separate:
                    _separate(a, b)
                collider.callback(a, b)

        self.bodies = [body for body in self.bodies if body.active]
        self.colliders = [c for c in self.colliders if c.active and not c.stale]

    def _integrate(self, body: Body, dt: float) -> None:
        if body.allow_gravity:
            body.velocity_y += self.gravity * dt
        body.x += body.velocity_x * dt
        body.y += body.velocity_y * dt

        if not body.collide_world_bounds:
            return
        if body.top < 0:
            body.top = 0
            body.velocity_y = 0.0
        elif body.bottom > self.height:
            body.bottom = self.height
            body.velocity_y = 0.0
        if body.left < 0:
            body.x = body.width / 2
            body.velocity_x = 0.0
        elif body.right > self.width:
            body.x = self.width - body.width / 2
            body.velocity_x = 0.0


def _separate(a: Body, b: Body) -> None:
    if not a.immovable:
        mover, anchor = a, b
    elif not b.immovable:
        mover, anchor = b, a
    else:
        return

    overlap_x = min(mover.right, anchor.right) - max(mover.left, anchor.left)
    overlap_y = min(mover.bottom, anchor.bottom) - max(mover.top, anchor.top)
    if overlap_y <= overlap_x:
        if mover.y < anchor.y:
            mover.bottom = anchor.top
        else:
            mover.top = anchor.bottom
        mover.velocity_y = 0.0
    else:
        if mover.x < anchor.x:
            mover.x = anchor.left - mover.width / 2
        else:
            mover.x = anchor.right + mover.width / 2
        mover.velocity_x = 0.0
    logger.debug("separated body at (%.1f, %.1f)", mover.x, mover.y)
