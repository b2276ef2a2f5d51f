"""
Tests for the pygame driver, run against the dummy SDL video driver.
"""

import pygame
import pytest

from flappy_arcade.client import FlappyClient, PygameSurface


@pytest.fixture
def client(session):
    client = FlappyClient(session)
    yield client
    pygame.quit()


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


class TestInput:
    """Test event mapping."""

    @pytest.mark.parametrize("k", [pygame.K_SPACE, pygame.K_UP, pygame.K_x])
    def test_flap_keys(self, client, config, k):
        client.handle_event(key(k))
        assert client.session.bird.velocity == config.flap_impulse

    def test_other_keys_ignored(self, client):
        client.handle_event(key(pygame.K_a))
        assert client.session.bird.velocity == 0

    def test_mouse_flaps(self, client, config):
        client.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
        assert client.session.bird.velocity == config.flap_impulse

    def test_synthetic_touch_mouse_ignored(self, client):
        client.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10), touch=True))
        assert client.session.bird.velocity == 0

    def test_finger_flaps(self, client, config):
        client.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.5))
        assert client.session.bird.velocity == config.flap_impulse

    def test_flap_restarts_after_over(self, client, config):
        client.session.state.score = 4
        client.session.end_game()
        client.handle_event(key(pygame.K_SPACE))
        assert not client.session.over
        assert client.session.score == 0
        assert client.session.bird.velocity == config.flap_impulse

    def test_r_restarts_without_flap(self, client):
        client.session.end_game()
        client.handle_event(key(pygame.K_r))
        assert not client.session.over
        assert client.session.bird.velocity == 0

    def test_quit_and_escape_stop(self, client):
        client.running = True
        client.handle_event(pygame.event.Event(pygame.QUIT))
        assert not client.running

        client.running = True
        client.handle_event(key(pygame.K_ESCAPE))
        assert not client.running


class TestSpawnTimer:
    """Pipes spawn on wall-clock time, not frame count."""

    def test_spawns_every_interval(self, client):
        assert client.advance_spawn_timer(1.0) == 0
        assert client.advance_spawn_timer(0.5) == 1
        assert len(client.session.pipes) == 2

    def test_long_frame_spawns_several(self, client):
        assert client.advance_spawn_timer(3.0) == 2
        assert len(client.session.pipes) == 4

    def test_timer_runs_while_over(self, client):
        client.session.end_game()
        assert client.advance_spawn_timer(1.5) == 1
        assert client.session.pipes == []
        assert client.spawn_timer == 0


class TestFrame:

    def test_step_frame_ticks_and_draws(self, client, config):
        client.step_frame(1 / 60)
        assert client.session.bird.velocity == pytest.approx(config.gravity)
        assert client.screen.get_size() == (config.game_width, config.game_height)

    def test_frame_with_pipes_and_game_over(self, client):
        client.session.spawn_pipes()
        client.step_frame(1 / 60)
        client.session.end_game()
        client.step_frame(1 / 60)
        assert client.session.over

    def test_bird_drawn_in_logical_pixels(self, client):
        surface = PygameSurface(client.screen)
        surface.clear()
        sky = tuple(client.screen.get_at((1, 1)))
        surface.draw_bird(client.session.bird)
        bird = client.session.bird
        inside = (int(bird.x) + 2, int(bird.y) + 2)
        assert tuple(client.screen.get_at(inside)) != sky
        assert tuple(client.screen.get_at((1, 1))) == sky
