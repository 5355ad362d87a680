"""A single hex: a board cell or a playable card with six side attacks."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from hexwarz.geometry import Point, hexagon_points, ray_end, segment_intersects_polygon

SIDES = 6
SCALE = 40
CENTER_OFFSET: Point = (60, 40)
LINE_LENGTH = 65

# Where each side's attack number is drawn, relative to the hex position.
ATTACK_TEXT_POSITIONS: tuple[Point, ...] = (
    (50, 0),
    (20, 15),
    (20, 40),
    (50, 55),
    (80, 40),
    (80, 15),
)


class Owner(Enum):
    """Who a hex belongs to."""

    NOONE = "NOONE"
    PLAYER1 = "PLAYER1"
    PLAYER2 = "PLAYER2"

    def opponent(self) -> Owner:
        """Return the other player; a neutral owner stays neutral."""
        if self is Owner.PLAYER1:
            return Owner.PLAYER2
        if self is Owner.PLAYER2:
            return Owner.PLAYER1
        return self

    @property
    def colour(self) -> tuple[int, int, int]:
        """Fill colour of a hex with this owner."""
        return _COLOURS[self]


_COLOURS = {
    Owner.NOONE: (192, 192, 192),
    Owner.PLAYER1: (0, 0, 255),
    Owner.PLAYER2: (255, 0, 0),
}


class Hex:
    """A hexagon placed at (x, y), with an owner and six side attacks."""

    def __init__(self, x: float = 0, y: float = 0) -> None:
        self.x = x
        self.y = y
        self.owner = Owner.NOONE
        self.is_placed = False
        self.attacks_visible = False
        self.neighbors: list[Hex] = []
        self._attacks = [0] * SIDES

    def __repr__(self) -> str:
        return (
            f"Hex(x={self.x!r}, y={self.y!r}, owner={self.owner.name}, "
            f"attacks={self._attacks})"
        )

    @property
    def pos(self) -> Point:
        return (self.x, self.y)

    @pos.setter
    def pos(self, value: Point) -> None:
        self.x, self.y = value

    @property
    def center(self) -> Point:
        return (self.x + CENTER_OFFSET[0], self.y + CENTER_OFFSET[1])

    @property
    def attacks(self) -> tuple[int, ...]:
        return tuple(self._attacks)

    @staticmethod
    def _check_side(side: int) -> None:
        if not 0 <= side < SIDES:
            raise ValueError(f"side must be between 0 and {SIDES - 1}, got {side}")

    def attack_of(self, side: int) -> int:
        """Return the attack value of ``side`` (0 is the top, counting anticlockwise)."""
        self._check_side(side)
        return self._attacks[side]

    def set_attack(self, side: int, attack: int) -> None:
        """Set the attack of ``side`` and of every higher-numbered side.

        Setting the sides in order 0 to 5 therefore leaves each side with its
        own value.
        """
        self._check_side(side)
        self._attacks[side:] = [attack] * (SIDES - side)

    def display_side_attacks(self) -> None:
        """Make the attack numbers visible."""
        self.attacks_visible = True

    def polygon(self) -> list[Point]:
        """Return the hexagon's corners at the hex's current position."""
        return [(self.x + px, self.y + py) for px, py in hexagon_points(SCALE)]

    def side_lines(self) -> list[tuple[Point, Point]]:
        """Return the six probe segments leaving the centre, one per side."""
        center = self.center
        return [
            (center, ray_end(center, LINE_LENGTH, 90 + 60 * side))
            for side in range(SIDES)
        ]

    def find_neighbors(self, hexes: Iterable[Hex]) -> None:
        """Append to ``neighbors`` every other hex that a side line touches."""
        candidates = [other for other in hexes if other is not self]
        for start, end in self.side_lines():
            self.neighbors.extend(
                other
                for other in candidates
                if segment_intersects_polygon(start, end, other.polygon())
            )

    def switch_owner(self) -> None:
        """Hand the hex to the other player; neutral hexes are unchanged."""
        self.owner = self.owner.opponent()

    def capture_neighbors(self) -> None:
        """Take over every enemy neighbour whose touching side is weaker."""
        for index, neighbour in enumerate(self.neighbors):
            if neighbour.owner is self.owner or neighbour.owner is Owner.NOONE:
                continue
            # The position in the neighbour list decides which sides are compared.
            if index < SIDES:
                mine = self.attack_of(index)
                theirs = neighbour.attack_of((index + 3) % SIDES)
            else:
                mine = theirs = 0
            if mine > theirs:
                neighbour.switch_owner()