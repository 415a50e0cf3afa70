import random

import pytest

from dropfour.errors import ActionError, ColumnFull, InvalidColumn
from dropfour.game.actions import Action, apply_action, is_legal, legal_actions
from dropfour.game.results import InProgress, Over, Winner, evaluate
from dropfour.game.state import GameState


def _gap_free(board) -> bool:
    for c in range(board.cols):
        h = board.height(c)
        if any(board.cell(c, r) is not None for r in range(h, board.rows)):
            return False
    return True


def test_drop_lands_on_bottom_and_toggles(empty_state):
    status = apply_action(empty_state, Action(3))
    assert status == InProgress()
    assert empty_state.board.cell(3, 0) == 0
    assert empty_state.next_player == 1

    apply_action(empty_state, Action(3))
    assert empty_state.board.cell(3, 1) == 1
    assert empty_state.next_player == 0


def test_vertical_scenario(empty_state):
    # player 0 stacks column 3, player 1 answers in column 0
    for move in (3, 0, 3, 0, 3, 0):
        assert apply_action(empty_state, Action(move)) == InProgress()
    status = apply_action(empty_state, Action(3))
    assert status == Over(Winner(0))
    assert evaluate(empty_state) == Over(Winner(0))


def test_random_play_keeps_invariants(empty_state):
    rng = random.Random(42)
    expected_player = 0
    while isinstance(evaluate(empty_state), InProgress):
        moves = legal_actions(empty_state)
        before = empty_state.board.occupied()
        assert empty_state.next_player == expected_player

        apply_action(empty_state, rng.choice(moves))

        assert empty_state.board.occupied() == before + 1
        assert _gap_free(empty_state.board)
        expected_player = 1 - expected_player
    assert empty_state.next_player == expected_player


def test_full_column_fails_and_leaves_board_unchanged(empty_state):
    for _ in range(6):
        apply_action(empty_state, Action(0))
    assert not is_legal(empty_state, Action(0))

    cells = empty_state.board.cells[:]
    player = empty_state.next_player
    for _ in range(2):
        with pytest.raises(ColumnFull) as exc:
            apply_action(empty_state, Action(0))
        assert exc.value.column == 0
        assert empty_state.board.cells == cells
        assert empty_state.next_player == player


@pytest.mark.parametrize("col", [-1, 7, 100])
def test_out_of_range_column(empty_state, col):
    assert not is_legal(empty_state, Action(col))
    with pytest.raises(InvalidColumn, match="between 0 and 6"):
        apply_action(empty_state, Action(col))
    assert empty_state.board.occupied() == 0
    assert empty_state.next_player == 0


def test_action_errors_are_value_errors():
    assert issubclass(ColumnFull, ActionError)
    assert issubclass(InvalidColumn, ActionError)
    assert issubclass(ActionError, ValueError)
    assert str(ColumnFull(4)) == "Column `4` is full."


def test_legal_actions_in_column_order(forced_loss_state, tie_board):
    assert legal_actions(forced_loss_state) == [Action(5), Action(6)]
    assert legal_actions(GameState(tie_board, 0)) == []


def test_action_is_immutable():
    a = Action(2)
    with pytest.raises(AttributeError):
        a.column = 3
