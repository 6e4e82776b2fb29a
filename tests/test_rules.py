import pytest

from connectfour.game.board import COLUMNS, ROWS, Board
from connectfour.game.rules import check_win, scan_lines
from connectfour.game.types import Outcome


def stack(board: Board, column: int, owners) -> None:
    for owner in owners:
        board.push(column, owner)


# ---------------------------------------------------------------------------
# Line scanner
# ---------------------------------------------------------------------------

class TestScanLines:
    def test_empty_board_has_no_line(self):
        assert scan_lines(Board(), 0, ROWS, 0, COLUMNS - 3, 0, 1, 4) == 0

    def test_owner_one_product(self):
        b = Board()
        for c in range(4):
            b.push(c, 1)
        assert scan_lines(b, 0, 1, 0, 1, 0, 1, 4) == 1

    def test_owner_two_product(self):
        b = Board()
        for c in range(4):
            b.push(c, 2)
        assert scan_lines(b, 0, 1, 0, 1, 0, 1, 4) == 2

    def test_mixed_line_is_not_a_win(self):
        b = Board()
        for c, owner in enumerate((2, 2, 1, 2)):
            b.push(c, owner)
        assert scan_lines(b, 0, 1, 0, 1, 0, 1, 4) == 0

    def test_window_outside_the_run_misses_it(self):
        b = Board()
        for c in range(3, 7):
            b.push(c, 1)
        # Origins 0..2 only reach columns up to 5
        assert scan_lines(b, 0, 1, 0, 3, 0, 1, 4) == 0
        assert scan_lines(b, 0, 1, 0, 4, 0, 1, 4) == 1

    def test_shorter_run_length(self):
        b = Board()
        stack(b, 0, [2, 2, 2])
        assert scan_lines(b, 0, 1, 0, 1, 1, 0, 3) == 2
        assert scan_lines(b, 0, 1, 0, 1, 1, 0, 4) == 0

    def test_first_winner_in_scan_order(self):
        b = Board()
        # Row 0 is yellow four, row 1 is red four: rows scan outer, so yellow first
        for c in range(4):
            b.push(c, 2)
            b.push(c, 1)
        assert scan_lines(b, 0, 2, 0, 4, 0, 1, 4) == 2


# ---------------------------------------------------------------------------
# Win evaluator
# ---------------------------------------------------------------------------

class TestCheckWin:
    def test_empty_board_is_ongoing(self):
        assert check_win(Board()) is Outcome.ONGOING

    @pytest.mark.parametrize("owner", [1, 2])
    @pytest.mark.parametrize("start", range(COLUMNS - 3))
    def test_horizontal(self, owner, start):
        b = Board()
        for c in range(start, start + 4):
            b.push(c, owner)
        assert check_win(b) == owner

    @pytest.mark.parametrize("owner", [1, 2])
    def test_vertical_top_of_column(self, owner):
        b = Board()
        other = 3 - owner
        stack(b, 6, [other, other, owner, owner, owner, owner])
        assert check_win(b) == owner

    @pytest.mark.parametrize("owner", [1, 2])
    def test_ascending_diagonal(self, owner):
        b = Board()
        other = 3 - owner
        for c in range(4):
            stack(b, c, [other] * c + [owner])
        assert check_win(b) == owner

    @pytest.mark.parametrize("owner", [1, 2])
    def test_descending_diagonal(self, owner):
        b = Board()
        other = 3 - owner
        for c in range(4):
            stack(b, c, [other] * (3 - c) + [owner])
        assert check_win(b) == owner

    def test_descending_diagonal_top_right(self):
        b = Board()
        # (3,5) (4,4) (5,3) (6,2) owned by red
        fill = {3: [2, 1, 2, 2, 1], 4: [1, 2, 2, 1], 5: [2, 1, 1], 6: [1, 2]}
        for c, owners in fill.items():
            stack(b, c, owners + [1])
        assert check_win(b) is Outcome.RED_WINS

    def test_run_of_three_is_not_a_win(self):
        b = Board()
        for c in range(3):
            b.push(c, 1)
        stack(b, 6, [2, 2, 2])
        assert check_win(b) is Outcome.ONGOING

    def test_mixed_run_of_four_is_not_a_win(self):
        b = Board()
        for c, owner in enumerate([1, 1, 2, 1, 1, 2, 1]):
            b.push(c, owner)
        assert check_win(b) is Outcome.ONGOING

    def test_full_board_without_line_is_draw(self, drawn_board):
        assert check_win(drawn_board) is Outcome.DRAW

    def test_full_board_with_line_is_a_win(self, drawn_board):
        # Top row reads R Y R Y R Y R; recolour columns 1 and 3
        for column in (1, 3):
            assert drawn_board.pop(column) == 2
            drawn_board.push(column, 1)
        assert drawn_board.is_full()
        assert check_win(drawn_board) is Outcome.RED_WINS


class TestScenarios:
    def test_alternating_in_one_column_stays_ongoing(self):
        b = Board()
        for owner in (1, 2, 1, 2):
            b.push(3, owner)
            assert check_win(b) is Outcome.ONGOING

    def test_four_across_the_bottom_wins_on_fourth_push(self):
        b = Board()
        for c in range(3):
            b.push(c, 1)
            assert check_win(b) is Outcome.ONGOING
        b.push(3, 1)
        assert check_win(b) is Outcome.RED_WINS
