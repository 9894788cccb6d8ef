"""The game session: phases, transitions and the per-tick update."""

from __future__ import annotations

import enum
import logging
import math
import random
from typing import List, Optional

from . import config
from .clock import GameClock, Timer
from .config import GameSettings
from .controls import Action, InputQueue, Trigger
from .entities import Bird, Pipe, ScoreZone
from .physics import ArcadePhysics, Body, PhysicsProvider
from .spawner import PipeSpawner

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameSession:
    """All mutable game state, owned in one place.

    The session owns the bird, the pipes and score zones, the spawn timer and
    the score.  Each tick of ``update`` runs in a fixed order: queued input,
    timers, physics (whose collision callbacks drive the game-over and scoring
    transitions), then the per-phase update.
    """

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        *,
        rng: Optional[random.Random] = None,
        world: Optional[PhysicsProvider] = None,
    ) -> None:
        self.settings = settings or GameSettings()
        s = self.settings
        self.clock = GameClock()
        self.world = world or ArcadePhysics(s.width, s.height, s.gravity)
        self.input = InputQueue()

        self.ground = self.world.add_static_body(s.width / 2, s.ground_center_y, s.width, s.ground_height)
        self.pipe_bodies = self.world.add_group()
        self.pipes: List[Pipe] = []
        self.zones: List[ScoreZone] = []
        bird_body = self.world.add_body(s.bird_start[0], s.bird_start[1], *s.bird_size)
        self.bird = Bird(bird_body, s.bird_start)
        self.spawner = PipeSpawner(self.world, s, self.pipe_bodies, self.pass_zone, rng)

        self.phase = Phase.IDLE
        self.score = 0
        self.spawn_timer: Optional[Timer] = None
        self.message = config.IDLE_MESSAGE
        self.message_visible = True

        self.world.add_collider(self.bird.body, self.ground, self._crashed)
        self.world.add_overlap(self.bird.body, self.pipe_bodies, self._crashed)

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"

    # Transitions ---------------------------------------------------------

    def start(self) -> None:
        if self.phase is not Phase.IDLE:
            logger.debug("start ignored in phase %s", self.phase.value)
            return

        self.phase = Phase.PLAYING
        self.score = 0
        self.message_visible = False

        self.bird.tinted = False
        self.bird.angle = 0.0
        self.bird.stop()
        self.bird.gravity_enabled = True

        self.spawn_timer = self.clock.add_timer(self.settings.spawn_interval_ms, self.spawn_pipe_pair, loop=True)
        self.spawn_pipe_pair()
        logger.info("game started")

    def flap(self) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.bird.flap(self.settings.flap_velocity)

    def end_game(self) -> None:
        if self.phase is not Phase.PLAYING:
            return

        self.phase = Phase.GAME_OVER
        self.bird.tinted = True
        self.bird.stop()
        self.bird.gravity_enabled = False
        for pipe in self.pipes:
            pipe.freeze()
        for zone in self.zones:
            zone.freeze()
        if self.spawn_timer is not None:
            self.spawn_timer.cancel()
            self.spawn_timer = None

        self.message = config.GAME_OVER_MESSAGE
        self.message_visible = True
        logger.info("game over with score %d", self.score)

    def restart(self) -> None:
        if self.phase is not Phase.GAME_OVER:
            logger.debug("restart ignored in phase %s", self.phase.value)
            return

        for pipe in self.pipes:
            pipe.destroy()
        for zone in self.zones:
            zone.destroy()
        self.pipe_bodies.clear()
        self.pipes = []
        self.zones = []

        self.bird.reset()
        self.phase = Phase.IDLE
        self.score = 0
        self.message = config.IDLE_MESSAGE
        self.message_visible = True
        logger.info("game reset")

    def handle(self, action: Action) -> None:
        if action is Action.START:
            self.start()
        elif action is Action.FLAP:
            self.flap()
        elif action is Action.RESTART:
            self.restart()

    def resolve(self, trigger: Trigger) -> Optional[Action]:
        """The action ``trigger`` stands for in the current phase.

        The pointer starts and restarts but never flaps.
        """

        if self.phase is Phase.IDLE:
            return Action.START
        if self.phase is Phase.GAME_OVER:
            return Action.RESTART
        if trigger is Trigger.KEY:
            return Action.FLAP
        return None

    # Spawning and scoring ------------------------------------------------

    def spawn_pipe_pair(self) -> None:
        if self.phase is not Phase.PLAYING:
            return
        pipes, zone = self.spawner.spawn(self.bird)
        self.pipes.extend(pipes)
        self.zones.append(zone)

    def pass_zone(self, zone: ScoreZone) -> None:
        if self.phase is not Phase.PLAYING:
            return
        if not zone.trigger():
            return
        self.score += 1
        logger.debug("scored, now %d", self.score)

    def _crashed(self, _bird: Body, _other: Body) -> None:
        self.end_game()

    # Tick ----------------------------------------------------------------

    def update(self, dt_ms: float) -> None:
        """Run one frame of ``dt_ms`` milliseconds.

        Queued input is applied once, then the frame is split into equal
        slices no longer than ``settings.tick_ms`` so that timers, movement
        and overlap checks never jump further than one fixed tick.
        """

        for trigger in self.input.drain():
            action = self.resolve(trigger)
            if action is not None:
                self.handle(action)

        slices = max(1, math.ceil(dt_ms / self.settings.tick_ms))
        for _ in range(slices):
            self._tick(dt_ms / slices)

    def _tick(self, dt_ms: float) -> None:
        s = self.settings
        self.clock.advance(dt_ms)
        self.world.step(dt_ms / 1000.0)

        if self.phase is Phase.IDLE:
            bob = math.sin(self.clock.now / s.idle_bob_period_ms) * s.idle_bob_amplitude
            self.bird.y += bob * dt_ms / s.tick_ms
        elif self.phase is Phase.PLAYING:
            self.bird.tilt(s.tilt_divisor, *s.tilt_range)
            self._remove_offscreen()

        self.pipes = [pipe for pipe in self.pipes if pipe.active]
        self.zones = [zone for zone in self.zones if zone.active]

    def _remove_offscreen(self) -> None:
        cull_x = self.settings.cull_x
        for pipe in self.pipes:
            if pipe.x < cull_x:
                pipe.destroy()
        for zone in self.zones:
            if zone.x < cull_x:
                zone.destroy()
