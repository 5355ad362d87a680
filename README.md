# hexwarz

Hex Warz is a two-player board game played on a 7 x 7 field of hexagons.
Each player holds five hexagonal cards. Each side of a card carries an
attack value from 1 to 6. The package also includes a small arcade shooter.
Both games open a pygame window.

## Installing

```
pip install .
```

You need `pygame` to play. To run the tests, install with the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing Hex Warz

```
hexwarz
```

The window is 1024 x 768. The main menu offers **Play** and **Quit**. A button
turns cyan while the pointer is over it. In a game:

- Player 1's cards are in the left panel and Player 2's cards are in the right
  panel. The text at the top shows whose turn it is.
- Left-click one of your own cards to pick it up. You can pick up a card only
  when it is your turn and you are not already holding one.
- The card you hold follows the mouse. Left-click a hexagon on the board to
  put the card there. The card takes the place of that hexagon.
- Right-click to put the card you hold back where it came from.
- When a card is placed, it collects the hexagons that its six side lines touch.
  Each one is checked in the order it was found. Neutral hexagons and your own
  are skipped. For the n-th hexagon found (n counted from 0, up to 5), side n of
  the placed card is compared with side n + 3 (modulo 6) of that hexagon. If
  the placed card's side is higher, the hexagon changes owner.
- The player who placed the card is dealt a new card, and then the other
  player takes a turn.
- The game ends after 49 cards have been placed, one for every board hexagon.
  The player who owns more hexagons wins. If both own the same number, the
  game is a tie. The result screen offers **Play Again** and **Quit**.

## Playing the shooter

```
hexwarz-shooter
```

The window is 800 x 600. Move with the Left and Right arrow keys and fire with
Space. A held key repeats. A new enemy appears at the top every two seconds
and falls towards the bottom. Each enemy you hit adds one point to your score.
Each enemy that falls past the bottom edge costs one point of health, and you
start with 10.

## Using the game logic

The rules do not depend on any drawing code, so you can drive them directly:

```python
import random
from hexwarz.game import Game
from hexwarz.hexcard import Owner

game = Game(random.Random(1))
game.start()
card = game.cards_of(game.whos_turn)[0]
game.pick_up_card(card)          # True: the card is now held
game.place_card(game.board.hexes[0])
print(game.whos_turn is Owner.PLAYER2)  # True
```

- `Game.place_card` raises `hexwarz.game.NoCardHeldError` if no card is held.
  It raises `ValueError` if the hexagon is not on the board.
- `Game.game_over` counts the hexagons and returns the result message. After
  that, `Game.result` holds the same message.
- `hexwarz.board.HexBoard` and `hexwarz.hexcard.Hex` hold the board and the
  individual hexagons. `hexwarz.geometry` has the segment and polygon tests
  that are used to find neighbours.

`hexwarz.shooter.world.World` holds the state of the shooter in the same way.
Call `key_press` with a `Key`, and call `spawn` and `tick` to move the game on.
The score and health are in `World.score` and `World.health`.

## What it does not do

- The shooter has no end. Health can drop to zero and below, and play goes on
  until you close the window.
- There is no sound, and there are no images. The shooter draws every object as
  an outlined rectangle.
- Neither game saves anything. Neither command takes options other than
  `--help`.