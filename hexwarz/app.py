"""A pygame window running Hex Warz: main menu, board and game-over screen."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator
from enum import Enum, auto

import pygame

from hexwarz.game import Game
from hexwarz.geometry import Point, point_in_polygon
from hexwarz.hexcard import ATTACK_TEXT_POSITIONS, Hex, Owner

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
FRAME_RATE = 60

BUTTON_WIDTH = 200
BUTTON_HEIGHT = 50

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
DARK_CYAN = (0, 128, 128)
CYAN = (0, 255, 255)
LIGHT_GRAY = (192, 192, 192)

PANEL_WIDTH = 150
LEFT_PANEL_X = 0
RIGHT_PANEL_X = 874
TEXT_MARGIN = 25
TURN_TEXT_POS = (490, 0)

TITLE = "Hex Warz"
TITLE_Y = 150
TITLE_FONT_SIZE = 50
TEXT_FONT_SIZE = 20
PLAY_BUTTON_Y = 275
QUIT_BUTTON_Y = 350

OVERLAY_OPACITY = 0.65
DIALOG_RECT = (312, 184, 400, 400)
DIALOG_OPACITY = 0.75
PLAY_AGAIN_POS = (410, 300)
GAME_OVER_QUIT_POS = (410, 375)
RESULT_TEXT_POS = (460, 225)

LEFT_MOUSE_BUTTON = 1
RIGHT_MOUSE_BUTTON = 3


class Button:
    """A clickable dark cyan rectangle with a centred label; cyan while hovered."""

    def __init__(self, name: str, x: int, y: int, font: pygame.font.Font) -> None:
        self.name = name
        self.rect = pygame.Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.hovered = False
        self._label = font.render(name, True, BLACK)
        label_w, label_h = self._label.get_size()
        self.label_offset = (
            int(BUTTON_WIDTH / 2 - label_w / 2),
            int(BUTTON_HEIGHT / 2 - label_h / 2),
        )

    @property
    def fill_colour(self) -> tuple[int, int, int]:
        return CYAN if self.hovered else DARK_CYAN

    def contains(self, point: Point) -> bool:
        """Return True if ``point`` lies on the button."""
        return bool(self.rect.collidepoint(int(point[0]), int(point[1])))

    def hover(self, point: Point) -> bool:
        """Update the hover state for a pointer at ``point`` and return it."""
        self.hovered = self.contains(point)
        return self.hovered

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the button and its label onto ``surface``."""
        pygame.draw.rect(surface, self.fill_colour, self.rect)
        surface.blit(
            self._label,
            (self.rect.x + self.label_offset[0], self.rect.y + self.label_offset[1]),
        )


class View(Enum):
    """Which screen the application shows."""

    MENU = auto()
    PLAYING = auto()


class HexWarzApp:
    """Turns pygame events into game moves and draws the game onto ``screen``."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.game = Game()
        self.view = View.MENU
        self.running = True
        pygame.font.init()
        self.font = pygame.font.Font(None, TEXT_FONT_SIZE)
        self.title_font = pygame.font.Font(None, TITLE_FONT_SIZE)

        centre_x = screen.get_width() // 2 - BUTTON_WIDTH // 2
        self.play_button = Button("Play", centre_x, PLAY_BUTTON_Y, self.font)
        self.quit_button = Button("Quit", centre_x, QUIT_BUTTON_Y, self.font)
        self.play_again_button = Button("Play Again", *PLAY_AGAIN_POS, self.font)
        self.game_over_quit_button = Button("Quit", *GAME_OVER_QUIT_POS, self.font)

    def _active_buttons(self) -> list[tuple[Button, Callable[[], None]]]:
        if self.view is View.MENU:
            return [(self.play_button, self._start), (self.quit_button, self._quit)]
        if self.game.is_over:
            return [
                (self.play_again_button, self.game.restart),
                (self.game_over_quit_button, self._quit),
            ]
        return []

    def _start(self) -> None:
        self.game.start()
        self.view = View.PLAYING

    def _quit(self) -> None:
        self.running = False

    def _hexes_in_draw_order(self) -> Iterator[Hex]:
        held = self.game.card_to_place
        yield from (h for h in self.game.board if h is not held)
        for player in (Owner.PLAYER1, Owner.PLAYER2):
            yield from (c for c in self.game.cards_of(player) if c is not held)
        if held is not None:
            yield held

    def _hex_at(self, point: Point) -> Hex | None:
        held = self.game.card_to_place
        under = [
            h
            for h in self._hexes_in_draw_order()
            if h is not held and point_in_polygon(point, h.polygon())
        ]
        return under[-1] if under else None

    def _click_hex(self, point: Point) -> None:
        hex_ = self._hex_at(point)
        if hex_ is None:
            return
        if not hex_.is_placed:
            self.game.pick_up_card(hex_)
        elif self.game.card_to_place is not None:
            self.game.place_card(hex_)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to quitting, pointer movement and mouse clicks."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEMOTION:
            for button, _ in self._active_buttons():
                button.hover(event.pos)
            if self.view is View.PLAYING:
                self.game.move_card(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == RIGHT_MOUSE_BUTTON:
                if self.view is View.PLAYING:
                    self.game.cancel_pick_up()
                return
            if event.button != LEFT_MOUSE_BUTTON:
                return
            for button, action in self._active_buttons():
                if button.contains(event.pos):
                    action()
                    return
            if self.view is View.PLAYING and not self.game.is_over:
                self._click_hex(event.pos)

    def _draw_panel(
        self, rect: tuple[int, int, int, int], colour: tuple[int, int, int], opacity: float
    ) -> None:
        panel = pygame.Surface(rect[2:], pygame.SRCALPHA)
        panel.fill((*colour, round(255 * opacity)))
        self.screen.blit(panel, rect[:2])

    def _draw_text(self, text: str, pos: Point, font: pygame.font.Font | None = None) -> None:
        surface = (font or self.font).render(text, True, BLACK)
        self.screen.blit(surface, pos)

    def _draw_hex(self, hex_: Hex) -> None:
        corners = hex_.polygon()
        pygame.draw.polygon(self.screen, hex_.owner.colour, corners)
        pygame.draw.polygon(self.screen, BLACK, corners, width=1)
        if hex_.attacks_visible:
            for attack, (dx, dy) in zip(hex_.attacks, ATTACK_TEXT_POSITIONS):
                self._draw_text(str(attack), (hex_.x + dx, hex_.y + dy))

    def _draw_menu(self) -> None:
        title = self.title_font.render(TITLE, True, BLACK)
        x = self.screen.get_width() // 2 - title.get_width() // 2
        self.screen.blit(title, (x, TITLE_Y))

    def _draw_board(self) -> None:
        height = self.screen.get_height()
        self._draw_panel((LEFT_PANEL_X, 0, PANEL_WIDTH, height), DARK_CYAN, 1)
        self._draw_panel((RIGHT_PANEL_X, 0, PANEL_WIDTH, height), DARK_CYAN, 1)
        self._draw_text("Player 1's Cards: ", (LEFT_PANEL_X + TEXT_MARGIN, 0))
        self._draw_text("Player 2's Cards: ", (RIGHT_PANEL_X + TEXT_MARGIN, 0))
        self._draw_text(self.game.turn_text, TURN_TEXT_POS)
        for hex_ in self._hexes_in_draw_order():
            self._draw_hex(hex_)

    def _draw_game_over(self) -> None:
        size = self.screen.get_size()
        self._draw_panel((0, 0, *size), BLACK, OVERLAY_OPACITY)
        self._draw_panel(DIALOG_RECT, LIGHT_GRAY, DIALOG_OPACITY)
        self._draw_text(self.game.result or "", RESULT_TEXT_POS)

    def draw(self) -> None:
        """Render the current screen."""
        self.screen.fill(WHITE)
        if self.view is View.MENU:
            self._draw_menu()
        else:
            self._draw_board()
            if self.game.is_over:
                self._draw_game_over()
        for button, _ in self._active_buttons():
            button.draw(self.screen)

    def run(self) -> None:
        """Process events and redraw until the window is closed."""
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.draw()
            pygame.display.flip()
            clock.tick(FRAME_RATE)


def main(argv: list[str] | None = None) -> int:
    """Open the Hex Warz window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="hexwarz", description="Two players capture hexes with numbered cards."
    )
    parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        HexWarzApp(screen).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())