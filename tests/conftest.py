import pytest

from dropfour.core.board import Board
from dropfour.game.state import GameState, new_game


def tie_columns():
    """
    Full 6x7 position with no four-in-a-row anywhere.

    Owner of (col, row) is (row // 2 + col) % 2: columns read 0,0,1,1,0,0
    or 1,1,0,0,1,1 bottom-up, rows alternate, diagonals change owner every
    second step.
    """
    return [[(r // 2 + c) % 2 for r in range(6)] for c in range(7)]


@pytest.fixture
def empty_state() -> GameState:
    return new_game()


@pytest.fixture
def tie_board() -> Board:
    return Board.from_columns(tie_columns())


@pytest.fixture
def forced_loss_state() -> GameState:
    """
    Tie pattern with (3, 2) switched to player 1 and the top cells of
    columns 5 and 6 left empty, player 0 to move.

    Player 1 owns (3,2), (4,3), (5,4), so (6,5) completes a diagonal.
    Playing column 5 forces player 1 into column 6 and loses; playing
    column 6 blocks and the game ends in a tie.
    """
    columns = tie_columns()
    columns[3][2] = 1
    columns[5] = columns[5][:5]
    columns[6] = columns[6][:5]
    return GameState(board=Board.from_columns(columns), next_player=0)
