"""State and rules of the falling-blocks shooter, independent of any display."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar

SCENE_WIDTH = 800
SCENE_HEIGHT = 600

TICK_MS = 50
SPAWN_MS = 2000

PLAYER_START = (400, 500)
PLAYER_STEP = 10
BULLET_SPEED = 10
ENEMY_SPEED = 5
ENEMY_SPAWN_RANGE = 700

STARTING_SCORE = 0
STARTING_HEALTH = 10


class Key(Enum):
    """Keys the player can press."""

    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()


@dataclass
class Score:
    """Number of enemies shot down."""

    value: int = STARTING_SCORE

    def increase(self) -> None:
        self.value += 1

    def text(self) -> str:
        return f"Score: {self.value}"


@dataclass
class Health:
    """Number of enemies that may still get past."""

    value: int = STARTING_HEALTH

    def decrease(self) -> None:
        self.value -= 1

    def text(self) -> str:
        return f"Health: {self.value}"


@dataclass
class _Body:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float
    y: float
    width: ClassVar[float] = 0
    height: ClassVar[float] = 0

    def overlaps(self, other: _Body) -> bool:
        """Return True if the two rectangles overlap or touch."""
        return (
            self.x <= other.x + other.width
            and other.x <= self.x + self.width
            and self.y <= other.y + other.height
            and other.y <= self.y + self.height
        )


@dataclass
class Enemy(_Body):
    """A block falling from the top of the scene."""

    width: ClassVar[float] = 50
    height: ClassVar[float] = 50


@dataclass
class Bullet(_Body):
    """A shot travelling up the scene."""

    width: ClassVar[float] = 10
    height: ClassVar[float] = 50

    def collides_with(self, enemy: Enemy) -> bool:
        """Return True if this bullet touches ``enemy``."""
        return self.overlaps(enemy)


@dataclass
class Player(_Body):
    """The player's block at the bottom of the scene."""

    width: ClassVar[float] = 100
    height: ClassVar[float] = 100


@dataclass
class World:
    """Everything in the scene: the player, bullets, enemies and counters."""

    rng: random.Random | None = None
    player: Player = field(default_factory=lambda: Player(*PLAYER_START))
    score: Score = field(default_factory=Score)
    health: Health = field(default_factory=Health)
    bullets: list[Bullet] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()

    def key_press(self, key: Key) -> Bullet | None:
        """Move the player or fire; returns the bullet fired, if any."""
        player = self.player
        if key is Key.LEFT:
            if player.x > 0:
                player.x -= PLAYER_STEP
        elif key is Key.RIGHT:
            if player.x + player.width < SCENE_WIDTH:
                player.x += PLAYER_STEP
        elif key is Key.SPACE:
            bullet = Bullet(player.x, player.y)
            self.bullets.append(bullet)
            return bullet
        return None

    def spawn(self) -> Enemy:
        """Drop a new enemy at a random column along the top edge."""
        enemy = Enemy(self.rng.randrange(ENEMY_SPAWN_RANGE), 0)
        self.enemies.append(enemy)
        return enemy

    def tick(self) -> None:
        """Advance every bullet and enemy by one timer step."""
        for bullet in list(self.bullets):
            hit = next((e for e in self.enemies if bullet.collides_with(e)), None)
            if hit is not None:
                self.score.increase()
                self.enemies.remove(hit)
                self.bullets.remove(bullet)
                continue
            bullet.y -= BULLET_SPEED
            if bullet.y + bullet.height < 0:
                self.bullets.remove(bullet)

        for enemy in list(self.enemies):
            enemy.y += ENEMY_SPEED
            if enemy.y > SCENE_HEIGHT:
                self.health.decrease()
                self.enemies.remove(enemy)