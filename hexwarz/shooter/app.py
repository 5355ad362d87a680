"""A pygame window running the shooter."""

from __future__ import annotations

import argparse

import pygame

from hexwarz.shooter.world import (
    SCENE_HEIGHT,
    SCENE_WIDTH,
    SPAWN_MS,
    TICK_MS,
    Key,
    World,
)

BACKGROUND = (255, 255, 255)
OUTLINE = (0, 0, 0)
SCORE_COLOUR = (0, 0, 255)
HEALTH_COLOUR = (255, 0, 0)
SCORE_POS = (0, 0)
HEALTH_POS = (0, 25)
FONT_NAME = "times"
FONT_SIZE = 16
FRAME_RATE = 60

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
}


class ShooterApp:
    """Feeds input and timer steps into a World and draws it onto ``screen``."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.world = World()
        self.running = True
        pygame.font.init()
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE)
        self._last_tick: int | None = None
        self._last_spawn: int | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to a quit request or a key press."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key in _KEYS:
            self.world.key_press(_KEYS[event.key])

    def update(self, now_ms: int) -> None:
        """Run every movement step and spawn that is due by ``now_ms``."""
        if self._last_tick is None or self._last_spawn is None:
            self._last_tick = self._last_spawn = now_ms
            return
        while now_ms - self._last_tick >= TICK_MS:
            self.world.tick()
            self._last_tick += TICK_MS
        while now_ms - self._last_spawn >= SPAWN_MS:
            self.world.spawn()
            self._last_spawn += SPAWN_MS

    def draw(self) -> None:
        """Render the scene onto the screen surface."""
        self.screen.fill(BACKGROUND)
        world = self.world
        for body in (world.player, *world.bullets, *world.enemies):
            rect = pygame.Rect(int(body.x), int(body.y), int(body.width), int(body.height))
            pygame.draw.rect(self.screen, OUTLINE, rect, width=1)
        self.screen.blit(self.font.render(world.score.text(), True, SCORE_COLOUR), SCORE_POS)
        self.screen.blit(self.font.render(world.health.text(), True, HEALTH_COLOUR), HEALTH_POS)

    def run(self) -> None:
        """Process events and redraw until the window is closed."""
        pygame.key.set_repeat(300, 30)
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.update(pygame.time.get_ticks())
            self.draw()
            pygame.display.flip()
            clock.tick(FRAME_RATE)


def main(argv: list[str] | None = None) -> int:
    """Open the shooter window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="hexwarz-shooter", description="Shoot the falling blocks."
    )
    parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
        pygame.display.set_caption("Shooter")
        ShooterApp(screen).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())