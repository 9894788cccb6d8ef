"""Procedural sprites and drawing of a :class:`GameSession`."""

from __future__ import annotations

from typing import List, Tuple

import pygame

from . import config
from .entities import Orientation
from .session import GameSession, Phase


WING_ANGLES = (-25, 0, 25)


def create_bird_frames(size: Tuple[int, int], wing_angles: Tuple[int, ...] = WING_ANGLES) -> List[pygame.Surface]:
    """One frame per wing angle.  Body, eye, beak and wing scale with ``size``."""

    width, height = size
    eye = (int(width * 0.68), int(height * 0.35))
    beak = [
        (int(width * 0.8), int(height * 0.45)),
        (width - 1, int(height * 0.55)),
        (int(width * 0.8), int(height * 0.65)),
    ]
    wing = pygame.Rect(0, 0, int(width * 0.45), int(height * 0.35))

    frames = []
    for angle in wing_angles:
        surface = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.ellipse(surface, config.BIRD_YELLOW, (0, 0, int(width * 0.9), height))
        pygame.draw.polygon(surface, config.BEAK_ORANGE, beak)
        pygame.draw.circle(surface, config.WHITE, eye, max(2, height // 5))
        pygame.draw.circle(surface, config.BLACK, (eye[0] + 2, eye[1]), max(1, height // 10))

        wing_surface = pygame.Surface(wing.size, pygame.SRCALPHA)
        pygame.draw.ellipse(wing_surface, config.WING_ORANGE, wing)
        wing_surface = pygame.transform.rotate(wing_surface, angle)
        surface.blit(wing_surface, wing_surface.get_rect(center=(int(width * 0.35), int(height * 0.6))))
        frames.append(surface)
    return frames


def tint(surface: pygame.Surface, colour: Tuple[int, int, int]) -> pygame.Surface:
    tinted = surface.copy()
    tinted.fill(colour, special_flags=pygame.BLEND_RGB_MULT)
    return tinted


def create_pipe_surface(width: int, height: int, flipped: bool = False) -> pygame.Surface:
    """Create a green pipe with its cap on the gap side."""

    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    body_rect = pygame.Rect(6, 20, width - 12, height - 20)
    head_rect = pygame.Rect(0, 0, width, 30)
    pygame.draw.rect(surface, config.PIPE_GREEN, body_rect)
    pygame.draw.rect(surface, config.PIPE_DARK_GREEN, head_rect, border_radius=6)
    if flipped:
        surface = pygame.transform.flip(surface, False, True)
    return surface


def create_ground_surface(width: int, height: int) -> pygame.Surface:
    """Dirt with slanted stripes under a strip of grass, sized to ``height``."""

    surface = pygame.Surface((width, height))
    surface.fill(config.BASE_BROWN)
    stripe = max(4, height // 4)
    for x in range(-height, width, stripe * 2):
        points = [(x, height), (x + stripe, height), (x + stripe + height, 0), (x + height, 0)]
        pygame.draw.polygon(surface, config.BASE_STRIPE, points)
    pygame.draw.rect(surface, config.GRASS_GREEN, (0, 0, width, max(3, height // 8)))
    return surface


def create_background(width: int, height: int) -> pygame.Surface:
    gradient_surface = pygame.Surface((width, height))
    for y in range(height):
        color_ratio = y / height
        r = int(config.SKY_BLUE[0] * (1 - color_ratio) + config.DEEP_BLUE[0] * color_ratio)
        g = int(config.SKY_BLUE[1] * (1 - color_ratio) + config.DEEP_BLUE[1] * color_ratio)
        b = int(config.SKY_BLUE[2] * (1 - color_ratio) + config.DEEP_BLUE[2] * color_ratio)
        pygame.draw.line(gradient_surface, (r, g, b), (0, y), (width, y))
    return gradient_surface


class Ground:
    """Striped ground strip that scrolls with the pipes while playing."""

    def __init__(self, rect: pygame.Rect, speed: float) -> None:
        self.rect = rect
        self.speed = speed
        self.surface = create_ground_surface(rect.width * 2, rect.height)
        self.offset = 0.0

    def move(self, dt: float) -> None:
        self.offset = (self.offset + self.speed * dt) % self.rect.width

    def draw(self, window: pygame.Surface) -> None:
        area = pygame.Rect(int(self.offset), 0, self.rect.width, self.rect.height)
        window.blit(self.surface, self.rect.topleft, area=area)


class Renderer:
    def __init__(self, session: GameSession) -> None:
        s = session.settings
        self.session = session
        self.background = create_background(s.width, s.height)
        self.bird_frames = create_bird_frames(s.bird_size)
        self.dead_frame = tint(self.bird_frames[1], config.DEATH_TINT)
        self.pipe_bottom = create_pipe_surface(*s.pipe_size)
        self.pipe_top = create_pipe_surface(*s.pipe_size, flipped=True)
        self.ground = Ground(session.ground.rect, s.pipe_speed)
        self.font = pygame.font.Font(None, config.FONT_SIZE)
        self.animation_time = 5
        self.animation_index = 0

    def draw(self, window: pygame.Surface, dt: float) -> None:
        session = self.session
        if session.phase is not Phase.GAME_OVER:
            self.ground.move(dt)
            self.animation_index = (self.animation_index + 1) % (self.animation_time * len(self.bird_frames))

        window.blit(self.background, (0, 0))
        for pipe in session.pipes:
            surface = self.pipe_top if pipe.orientation is Orientation.TOP else self.pipe_bottom
            window.blit(surface, pipe.body.rect)
        self.ground.draw(window)
        self.draw_bird(window)
        self.draw_score(window)
        if session.message_visible:
            self.draw_message(window, session.message)

    def draw_bird(self, window: pygame.Surface) -> None:
        bird = self.session.bird
        if bird.tinted:
            frame = self.dead_frame
        else:
            frame = self.bird_frames[self.animation_index // self.animation_time]
        rotated = pygame.transform.rotate(frame, -bird.angle)
        window.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))

    def draw_score(self, window: pygame.Surface) -> None:
        text = self.font.render(self.session.score_text, True, config.WHITE)
        panel = pygame.Surface((text.get_width() + 20, text.get_height() + 12), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 90))
        panel.blit(text, (10, 6))
        window.blit(panel, (16, 16))

    def draw_message(self, window: pygame.Surface, message: str) -> None:
        lines = [self.font.render(line, True, config.WHITE) for line in message.split("\n")]
        width = max(line.get_width() for line in lines) + 28
        height = sum(line.get_height() for line in lines) + 24
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 128))
        y = 12
        for line in lines:
            panel.blit(line, line.get_rect(midtop=(width // 2, y)))
            y += line.get_height()
        window.blit(panel, panel.get_rect(center=(window.get_width() // 2, window.get_height() // 2)))
