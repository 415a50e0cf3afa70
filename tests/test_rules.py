from dropfour.core.board import Board
from dropfour.core.rules import check_winner, is_tie, winning_line
from dropfour.game.results import InProgress, Over, Tie, Winner, evaluate
from dropfour.game.state import GameState


def test_empty_board_in_progress(empty_state):
    assert evaluate(empty_state) == InProgress()
    assert winning_line(empty_state.board) is None


def test_evaluate_is_pure(forced_loss_state):
    before = forced_loss_state.board.cells[:]
    first = evaluate(forced_loss_state)
    second = evaluate(forced_loss_state)
    assert first == second
    assert forced_loss_state.board.cells == before


def test_evaluate_ignores_next_player(tie_board):
    assert evaluate(GameState(tie_board, 0)) == evaluate(GameState(tie_board, 1))


def test_full_board_without_line_is_tie(tie_board):
    assert winning_line(tie_board) is None
    assert evaluate(tie_board) == Over(Tie())
    assert is_tie(tie_board)


def test_vertical_win():
    b = Board.from_columns([[], [], [1, 1, 1, 1]])
    assert evaluate(b) == Over(Winner(1))
    assert winning_line(b) == (1, [(2, 0), (2, 1), (2, 2), (2, 3)])


def test_vertical_three_is_not_a_win():
    b = Board.from_columns([[0, 1, 1, 1]])
    assert evaluate(b) == InProgress()


def test_horizontal_win_top_row():
    # tie pattern below, player 0 across the top of columns 0-3
    cols = [[(r // 2 + c) % 2 for r in range(5)] + [0] for c in range(4)]
    b = Board.from_columns(cols)
    assert check_winner(b) == 0
    assert winning_line(b) == (0, [(0, 5), (1, 5), (2, 5), (3, 5)])


def test_horizontal_near_miss_in_progress():
    b = Board.from_columns([[0], [0], [0], [1]])
    assert evaluate(b) == InProgress()


def test_diagonal_up_win():
    b = Board.from_columns([[1], [0, 1], [0, 0, 1], [0, 0, 0, 1]])
    assert evaluate(b) == Over(Winner(1))
    assert winning_line(b) == (1, [(0, 0), (1, 1), (2, 2), (3, 3)])


def test_diagonal_down_win():
    b = Board.from_columns([[1, 0, 1, 0], [1, 1, 0], [1, 0], [0]])
    assert evaluate(b) == Over(Winner(0))
    assert winning_line(b) == (0, [(0, 3), (1, 2), (2, 1), (3, 0)])


def test_diagonal_touching_right_edge():
    # (3,0) (4,1) (5,2) (6,3) for player 0
    cols = [[], [], [], [0], [1, 0], [1, 1, 0], [1, 1, 1, 0]]
    b = Board.from_columns(cols)
    assert evaluate(b) == Over(Winner(0))


def test_win_on_full_board_beats_tie(tie_board):
    board = tie_board.copy()
    # column 0 becomes all player 0
    for r in range(4):
        board.cells[board.index(0, r)] = 0
    assert board.is_full()
    assert evaluate(board) == Over(Winner(0))
    assert not is_tie(board)


def test_outcome_strings():
    assert str(Winner(1)) == "Winner(1)"
    assert str(Tie()) == "Tie"
