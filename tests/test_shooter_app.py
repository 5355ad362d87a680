import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from hexwarz.shooter.app import BACKGROUND, OUTLINE, ShooterApp, main
from hexwarz.shooter.world import (
    BULLET_SPEED,
    PLAYER_STEP,
    SCENE_HEIGHT,
    SCENE_WIDTH,
    SPAWN_MS,
    TICK_MS,
)


@pytest.fixture
def app():
    return ShooterApp(pygame.Surface((SCENE_WIDTH, SCENE_HEIGHT)))


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_arrow_keys_move_player(app):
    x0 = app.world.player.x
    app.handle_event(_key(pygame.K_RIGHT))
    assert app.world.player.x == x0 + PLAYER_STEP
    app.handle_event(_key(pygame.K_LEFT))
    app.handle_event(_key(pygame.K_LEFT))
    assert app.world.player.x == x0 - PLAYER_STEP


def test_space_fires(app):
    app.handle_event(_key(pygame.K_SPACE))
    assert len(app.world.bullets) == 1


def test_unmapped_key_ignored(app):
    pos = (app.world.player.x, app.world.player.y)
    app.handle_event(_key(pygame.K_UP))
    assert (app.world.player.x, app.world.player.y) == pos
    assert app.world.bullets == []


def test_quit_event_stops(app):
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.running is False


def test_update_runs_ticks(app):
    app.handle_event(_key(pygame.K_SPACE))
    y0 = app.world.bullets[0].y
    app.update(1000)
    assert app.world.bullets[0].y == y0
    app.update(1000 + 2 * TICK_MS)
    assert app.world.bullets[0].y == y0 - 2 * BULLET_SPEED


def test_update_spawns_enemies(app):
    app.update(0)
    app.update(SPAWN_MS - 1)
    assert app.world.enemies == []
    app.update(SPAWN_MS)
    assert len(app.world.enemies) == 1


def test_draw_outlines_player(app):
    app.draw()
    player = app.world.player
    assert tuple(app.screen.get_at((int(player.x), int(player.y))))[:3] == OUTLINE
    centre = (int(player.x + player.width / 2), int(player.y + player.height / 2))
    assert tuple(app.screen.get_at(centre))[:3] == BACKGROUND


def test_run_stops_on_quit():
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
        shooter = ShooterApp(screen)
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        shooter.run()
        assert shooter.running is False
    finally:
        pygame.display.quit()


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])