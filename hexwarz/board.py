"""The board of neutral hexes that cards are played onto."""

from __future__ import annotations

from collections.abc import Iterator

from hexwarz.hexcard import Hex, Owner

X_SHIFT = 82
ODD_COLUMN_Y_SHIFT = 41
ROW_SPACING = 82


class HexBoard:
    """A grid of hexes laid out in offset columns."""

    def __init__(self) -> None:
        self.hexes: list[Hex] = []

    def __iter__(self) -> Iterator[Hex]:
        return iter(self.hexes)

    def __len__(self) -> int:
        return len(self.hexes)

    def place_hexes(self, x: float, y: float, cols: int, rows: int) -> list[Hex]:
        """Add ``cols`` columns of ``rows`` neutral hexes with top-left at (x, y).

        Odd columns are pushed down by half a hex. Returns the new hexes.
        """
        created: list[Hex] = []
        for col in range(cols):
            shift = ODD_COLUMN_Y_SHIFT if col % 2 else 0
            created.extend(self._create_hex_column(x + X_SHIFT * col, y + shift, rows))
        return created

    def _create_hex_column(self, x: float, y: float, rows: int) -> list[Hex]:
        column = []
        for row in range(rows):
            hex_ = Hex(x, y + ROW_SPACING * row)
            hex_.owner = Owner.NOONE
            hex_.is_placed = True
            column.append(hex_)
        self.hexes.extend(column)
        return column