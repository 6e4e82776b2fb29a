"""Minimax search with alpha-beta pruning and a transposition table."""

from __future__ import annotations

import logging

from connectfour.engine.transposition import TranspositionTable
from connectfour.game.board import Board
from connectfour.game.errors import NoLegalMovesError
from connectfour.game.rules import check_win
from connectfour.game.types import Outcome

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 15

# A win found at the root child scores WIN_SCORE; each extra ply costs 1.
WIN_SCORE = 100

INF = 1_000_000


class Searcher:
    """Depth-limited minimax over a single mutable board.

    The board is walked in place: every token pushed while exploring a branch
    is popped again before the branch returns, so the caller gets its board
    back unchanged.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        if depth < 0:
            raise ValueError(f"Search depth must be non-negative, got {depth}")
        self.depth = depth
        self.tt = TranspositionTable()
        self.nodes = 0
        self._board: Board | None = None
        self._computer = 0

    def best_move(self, board: Board, computer: int) -> int:
        """Return the column `computer` should play on `board`.

        Ties keep the lowest column.
        """
        legal = board.legal_moves()
        if not legal:
            raise NoLegalMovesError("No legal column to search")

        self.tt.reset()
        self.nodes = 0
        self._board = board
        self._computer = int(computer)

        best_score = -INF
        best_column = legal[0]
        for column in legal:
            with board.explore(column, self._computer):
                score = self.minimax(self.depth, -INF, INF, False)
            if score > best_score:
                best_score = score
                best_column = column

        logger.debug(
            "Search for player %d: column %d (score %d, %d nodes, %d cache hits)",
            self._computer, best_column, best_score, self.nodes, self.tt.hits,
        )
        return best_column

    def minimax(self, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        board = self._board
        self.nodes += 1

        key = board.key()
        cached = self.tt.get(key)
        if cached is not None:
            return cached

        outcome = check_win(board)
        if depth == 0 or outcome is not Outcome.ONGOING:
            return self._score(outcome, depth)

        pruned = False
        if maximizing:
            best = -INF
            for column in board.legal_moves():
                with board.explore(column, self._computer):
                    score = self.minimax(depth - 1, alpha, beta, False)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    pruned = True
                    break
        else:
            opponent = 3 - self._computer
            best = INF
            for column in board.legal_moves():
                with board.explore(column, opponent):
                    score = self.minimax(depth - 1, alpha, beta, True)
                best = min(best, score)
                beta = min(beta, score)
                if beta <= alpha:
                    pruned = True
                    break

        # A pruned score is only a bound.
        if not pruned:
            self.tt.put(key, best)
        return best

    def _score(self, outcome: Outcome, depth: int) -> int:
        if outcome is Outcome.ONGOING or outcome is Outcome.DRAW:
            return 0
        value = WIN_SCORE - (self.depth - depth)
        if outcome == self._computer:
            return value
        return -value


def choose_column(board: Board, computer: int, depth: int = DEFAULT_DEPTH) -> int:
    """Run a fresh search and return the chosen column."""
    return Searcher(depth).best_move(board, computer)
