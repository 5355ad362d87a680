"""Game rules: two players take turns laying hex cards onto a board."""

from __future__ import annotations

import random

from hexwarz.board import HexBoard
from hexwarz.geometry import Point
from hexwarz.hexcard import SIDES, Hex, Owner

BOARD_ORIGIN: Point = (200, 30)
BOARD_COLS = 7
BOARD_ROWS = 7
HAND_SIZE = 5
MIN_ATTACK = 1
MAX_ATTACK = 6

LEFT_PANEL_X = 0
RIGHT_PANEL_X = 874
CARD_MARGIN_X = 13
CARD_TOP = 25
CARD_SPACING = 85

PLAYER1_WINS = "Player 1 has won!"
PLAYER2_WINS = "Player 2 has won!"
TIE = "Tie game!"


class NoCardHeldError(RuntimeError):
    """Raised when a card is to be placed but none has been picked up."""


class Game:
    """The state of a Hex Warz match, independent of any display."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = HexBoard()
        self.whos_turn = Owner.PLAYER1
        self.card_to_place: Hex | None = None
        self.original_pos: Point = (0, 0)
        self.num_cards_placed = 0
        self.result: str | None = None
        self._hands: dict[Owner, list[Hex]] = {
            Owner.PLAYER1: [],
            Owner.PLAYER2: [],
        }

    @property
    def is_over(self) -> bool:
        return self.result is not None

    @property
    def turn_text(self) -> str:
        return f"Whos turn: {self.whos_turn.value}"

    def start(self) -> None:
        """Set up a fresh board and deal each player a hand."""
        self.card_to_place = None
        self.num_cards_placed = 0
        self.result = None
        self.board = HexBoard()
        self.board.place_hexes(*BOARD_ORIGIN, BOARD_COLS, BOARD_ROWS)
        self.whos_turn = Owner.PLAYER1
        for player in (Owner.PLAYER1, Owner.PLAYER2):
            for _ in range(HAND_SIZE):
                self.create_new_card(player)
        self.lay_out_cards()

    def restart(self) -> None:
        """Throw away both hands and the board, then start again."""
        for hand in self._hands.values():
            hand.clear()
        self.board.hexes.clear()
        self.start()

    def cards_of(self, player: Owner) -> list[Hex]:
        """Return a copy of ``player``'s hand in display order."""
        return list(self._hand(player))

    def _hand(self, player: Owner) -> list[Hex]:
        return self._hands[Owner.PLAYER1 if player is Owner.PLAYER1 else Owner.PLAYER2]

    def create_new_card(self, player: Owner) -> Hex:
        """Deal ``player`` a card with random side attacks and return it."""
        card = Hex()
        card.owner = player
        card.is_placed = False
        for side in range(SIDES):
            card.set_attack(side, self.rng.randint(MIN_ATTACK, MAX_ATTACK))
        card.display_side_attacks()
        self._hand(player).append(card)
        self.lay_out_cards()
        return card

    def lay_out_cards(self) -> None:
        """Stack each hand down its side panel."""
        columns = (
            (Owner.PLAYER1, LEFT_PANEL_X + CARD_MARGIN_X),
            (Owner.PLAYER2, RIGHT_PANEL_X + CARD_MARGIN_X),
        )
        for player, x in columns:
            for index, card in enumerate(self._hands[player]):
                card.pos = (x, CARD_TOP + CARD_SPACING * index)

    def pick_up_card(self, card: Hex) -> bool:
        """Hold ``card`` if it belongs to the player to move and nothing is held."""
        if self.is_over or card.owner is not self.whos_turn or self.card_to_place:
            return False
        self.card_to_place = card
        self.original_pos = card.pos
        return True

    def move_card(self, x: float, y: float) -> None:
        """Make the held card follow the pointer."""
        if self.card_to_place is not None:
            self.card_to_place.pos = (x, y)

    def cancel_pick_up(self) -> bool:
        """Put the held card back where it came from."""
        if self.card_to_place is None:
            return False
        self.card_to_place.pos = self.original_pos
        self.card_to_place = None
        return True

    def place_card(self, hex_to_replace: Hex) -> None:
        """Replace ``hex_to_replace`` on the board with the held card."""
        card = self.card_to_place
        if card is None:
            raise NoCardHeldError("no card has been picked up")
        if hex_to_replace not in self.board.hexes:
            raise ValueError("the hex to replace is not on the board")

        player = self.whos_turn
        card.pos = hex_to_replace.pos
        self.board.hexes[:] = [h for h in self.board.hexes if h is not hex_to_replace]
        self.board.hexes.append(card)
        card.is_placed = True
        self.remove_from_deck(card, player)

        in_scene = [*self.board.hexes, *self._hands[Owner.PLAYER1], *self._hands[Owner.PLAYER2]]
        card.find_neighbors(in_scene)
        card.capture_neighbors()

        self.card_to_place = None
        self.create_new_card(player)
        self.next_players_turn()
        self.num_cards_placed += 1

        if self.num_cards_placed >= len(self.board):
            self.game_over()

    def next_players_turn(self) -> None:
        """Pass the turn to the other player."""
        if self.whos_turn is Owner.PLAYER1:
            self.whos_turn = Owner.PLAYER2
        else:
            self.whos_turn = Owner.PLAYER1

    def remove_from_deck(self, card: Hex, player: Owner) -> None:
        """Take every occurrence of ``card`` out of ``player``'s hand."""
        if player in self._hands:
            hand = self._hands[player]
            hand[:] = [c for c in hand if c is not card]

    def game_over(self) -> str:
        """Count owned hexes, record the outcome and return its message."""
        p1 = sum(1 for h in self.board if h.owner is Owner.PLAYER1)
        p2 = sum(1 for h in self.board if h.owner is Owner.PLAYER2)
        if p1 > p2:
            self.result = PLAYER1_WINS
        elif p2 > p1:
            self.result = PLAYER2_WINS
        else:
            self.result = TIE
        self.card_to_place = None
        return self.result