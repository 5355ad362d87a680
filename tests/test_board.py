from hexwarz.board import HexBoard
from hexwarz.hexcard import Owner


def test_new_board_is_empty():
    board = HexBoard()
    assert len(board) == 0
    assert list(board) == []


def test_place_hexes_creates_cols_times_rows():
    board = HexBoard()
    created = board.place_hexes(200, 30, 7, 7)
    assert len(board) == 7 * 7
    assert created == board.hexes


def test_placed_hexes_are_neutral_and_placed():
    board = HexBoard()
    board.place_hexes(200, 30, 3, 4)
    assert all(h.owner is Owner.NOONE for h in board)
    assert all(h.is_placed for h in board)


def test_first_hex_at_origin():
    board = HexBoard()
    board.place_hexes(200, 30, 2, 2)
    assert board.hexes[0].pos == (200, 30)


def test_column_spacing_and_odd_offset():
    board = HexBoard()
    rows = 3
    board.place_hexes(200, 30, 3, rows)
    first = board.hexes[0]
    second_col = board.hexes[rows]
    third_col = board.hexes[2 * rows]
    assert second_col.x - first.x == 82
    assert second_col.y - first.y == 41
    assert third_col.y == first.y
    assert third_col.x - second_col.x == 82


def test_rows_within_column_are_evenly_spaced():
    board = HexBoard()
    board.place_hexes(0, 0, 1, 4)
    ys = [h.y for h in board]
    assert all(b - a == 82 for a, b in zip(ys, ys[1:]))
    assert len({h.x for h in board}) == 1


def test_zero_columns_places_nothing():
    board = HexBoard()
    assert board.place_hexes(0, 0, 0, 5) == []
    assert len(board) == 0


def test_repeated_placement_accumulates():
    board = HexBoard()
    board.place_hexes(0, 0, 2, 2)
    board.place_hexes(500, 0, 1, 3)
    assert len(board) == 2 * 2 + 3


def test_interior_hex_has_six_neighbours():
    board = HexBoard()
    board.place_hexes(200, 30, 7, 7)
    # column 2 (even), row 3
    interior = board.hexes[2 * 7 + 3]
    interior.find_neighbors(board)
    assert len(interior.neighbors) == 6
    assert len({id(h) for h in interior.neighbors}) == 6
    assert interior not in interior.neighbors


def test_corner_hex_has_fewer_neighbours():
    board = HexBoard()
    board.place_hexes(200, 30, 7, 7)
    corner = board.hexes[0]
    corner.find_neighbors(board)
    assert 0 < len(corner.neighbors) < 6