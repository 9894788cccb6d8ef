import pygame
import pytest

from flappy_arcade import config
from flappy_arcade.game import Game, frame_time
from flappy_arcade.render import Renderer, create_background, create_bird_frames, create_ground_surface, tint


@pytest.fixture
def window(pygame_display):
    return pygame.Surface((800, 600))


def test_bird_frames_match_the_bird_size(pygame_display):
    frames = create_bird_frames((51, 36))

    assert len(frames) == 3
    assert all(frame.get_size() == (51, 36) for frame in frames)


def test_tint_reddens_the_bird(pygame_display):
    frame = create_bird_frames((51, 36))[1]

    dead = tint(frame, config.DEATH_TINT)

    r, g, b, _ = dead.get_at((25, 18))
    assert g < frame.get_at((25, 18)).g
    assert r == frame.get_at((25, 18)).r


def test_background_is_a_vertical_gradient(pygame_display):
    background = create_background(800, 600)

    assert background.get_at((0, 0))[:3] == config.SKY_BLUE
    assert background.get_at((0, 599))[:3] != config.SKY_BLUE


def test_renderer_draws_every_phase(window, session):
    renderer = Renderer(session)

    renderer.draw(window, 0.016)
    session.start()
    for _ in range(10):
        session.update(16)
        renderer.draw(window, 0.016)
    session.end_game()
    renderer.draw(window, 0.016)

    assert window.get_at((int(session.bird.x), int(session.bird.y)))[:3] != config.SKY_BLUE


def test_game_queues_input_and_quits(pygame_display):
    game = Game()

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    game.handle_events()
    assert len(game.session.input) == 1

    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.running = True
    game.handle_events()
    assert not game.running


def test_frames_are_capped():
    assert frame_time(16) == 16
    assert frame_time(900) == config.MAX_FRAME_MS


def test_bird_frames_follow_wing_angles(pygame_display):
    frames = create_bird_frames((34, 24), wing_angles=(-30, 30))

    assert len(frames) == 2
    assert frames[0].get_size() == (34, 24)


def test_ground_has_grass_on_top(pygame_display):
    ground = create_ground_surface(800, 64)

    assert ground.get_size() == (800, 64)
    assert ground.get_at((10, 0))[:3] == config.GRASS_GREEN
    assert ground.get_at((10, 63))[:3] in (config.BASE_BROWN, config.BASE_STRIPE)
