import pytest

from dropfour.core.board import Board


def test_new_board_is_empty():
    b = Board()
    assert (b.rows, b.cols) == (6, 7)
    assert len(b.cells) == 42
    assert b.occupied() == 0
    assert all(b.top_is_empty(c) for c in range(b.cols))
    assert not b.is_full()


def test_column_major_index():
    b = Board()
    assert b.index(0, 0) == 0
    assert b.index(0, 5) == 5
    assert b.index(1, 0) == 6
    assert b.index(3, 2) == 20
    assert b.index(6, 5) == 41


def test_from_columns_places_pieces_bottom_up():
    b = Board.from_columns([[0, 1], [], [1]])
    assert b.cell(0, 0) == 0
    assert b.cell(0, 1) == 1
    assert b.cell(0, 2) is None
    assert b.cell(2, 0) == 1
    assert b.height(0) == 2
    assert b.height(1) == 0
    assert b.height(2) == 1
    assert b.occupied() == 3


def test_from_columns_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_columns([[0] * 7])
    with pytest.raises(ValueError):
        Board.from_columns([[2]])
    with pytest.raises(ValueError):
        Board.from_columns([[]] * 8)


def test_wrong_cell_count_rejected():
    with pytest.raises(ValueError):
        Board(rows=6, cols=7, cells=[None] * 10)


def test_copy_is_independent(tie_board):
    dup = tie_board.copy()
    assert dup.cells == tie_board.cells
    dup.cells[0] = None
    assert tie_board.cells[0] is not None


def test_full_board(tie_board):
    assert tie_board.is_full()
    assert tie_board.occupied() == 42
    assert all(tie_board.height(c) == 6 for c in range(7))
