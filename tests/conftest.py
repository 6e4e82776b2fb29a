import pytest

from connectfour.game.board import COLUMNS, ROWS, Board


def fill_drawn_board() -> Board:
    """Full board with no four-in-a-row: owners alternate by column and by pairs of rows."""
    board = Board()
    for c in range(COLUMNS):
        for r in range(ROWS):
            board.push(c, 1 if (c + r // 2) % 2 == 0 else 2)
    return board


@pytest.fixture
def drawn_board() -> Board:
    return fill_drawn_board()
