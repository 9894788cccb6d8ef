"""Pipe pair spawning."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from .config import GameSettings
from .entities import Bird, Pipe, ScoreZone
from .physics import Body, BodyGroup, PhysicsProvider

logger = logging.getLogger(__name__)


class PipeSpawner:
    """Creates a top pipe, a bottom pipe and a score zone around a random gap.

    ``on_score`` is called with the zone the bird flew through.  The overlap
    that calls it is registered per zone and disappears with the zone.
    """

    def __init__(
        self,
        world: PhysicsProvider,
        settings: GameSettings,
        pipes: BodyGroup,
        on_score: Callable[[ScoreZone], None],
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.settings = settings
        self.pipes = pipes
        self.on_score = on_score
        self.rng = rng or random.Random()

    def gap_center(self) -> int:
        low, high = self.settings.gap_center_range
        return self.rng.randint(low, high)

    def spawn(self, bird: Bird) -> Tuple[List[Pipe], ScoreZone]:
        s = self.settings
        x = s.spawn_x
        center = self.gap_center()
        width, height = s.pipe_size

        top = Pipe.top(self.pipes.create(x, 0, width, height), center - s.pipe_gap / 2, s.pipe_speed)
        bottom = Pipe.bottom(self.pipes.create(x, 0, width, height), center + s.pipe_gap / 2, s.pipe_speed)

        zone_body = self.world.add_body(x + s.score_zone_offset, s.height / 2, s.score_zone_width, s.height)
        zone = ScoreZone(zone_body, s.pipe_speed)

        def passed(_bird: Body, _zone: Body) -> None:
            self.on_score(zone)

        self.world.add_overlap(bird.body, zone_body, passed)
        logger.debug("spawned pipe pair at x=%d with gap centre %d", x, center)
        return [top, bottom], zone
