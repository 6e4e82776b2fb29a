"""Line scanning and outcome classification."""

from __future__ import annotations

from .board import COLUMNS, ROWS, TO_WIN, Board
from .types import Outcome


def scan_lines(
    board: Board,
    start_row: int,
    row_count: int,
    start_column: int,
    column_count: int,
    row_step: int,
    column_step: int,
    run_length: int = TO_WIN,
) -> int:
    """Look for a run of `run_length` same-owner tokens in one direction family.

    Every origin (row, column) in the given window starts a candidate line
    stepping by (row_step, column_step). The product of the cell values
    classifies a line: 0 means it has an empty cell, 1 means every cell is
    owner 1, 2 ** run_length means every cell is owner 2, anything else is a
    mix of both owners.

    Returns the winning owner id of the first winning line, scanning rows
    outer and columns inner, or 0 if none.
    """
    cells = board.columns()
    all_yellow = 2 ** run_length
    for i in range(start_row, start_row + row_count):
        for j in range(start_column, start_column + column_count):
            product = 1
            for k in range(run_length):
                product *= cells[j + k * column_step][i + k * row_step]
            if product == 0:
                continue
            if product == 1:
                return 1
            if product == all_yellow:
                return 2
    return 0


def check_win(board: Board) -> Outcome:
    """Classify the position as ongoing, a win for either owner, or a draw."""
    span_rows = ROWS - TO_WIN + 1
    span_cols = COLUMNS - TO_WIN + 1
    scans = (
        (0, ROWS, 0, span_cols, 0, 1),           # horizontal
        (0, span_rows, 0, COLUMNS, 1, 0),        # vertical
        (0, span_rows, 0, span_cols, 1, 1),      # ascending diagonal
        (TO_WIN - 1, span_rows, 0, span_cols, -1, 1),  # descending diagonal
    )
    for start_row, row_count, start_col, col_count, dr, dc in scans:
        winner = scan_lines(board, start_row, row_count, start_col, col_count, dr, dc, TO_WIN)
        if winner:
            return Outcome(winner)
    if board.is_full():
        return Outcome.DRAW
    return Outcome.ONGOING
