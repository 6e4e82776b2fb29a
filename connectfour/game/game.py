from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from connectfour.engine.search import DEFAULT_DEPTH, Searcher

from .board import COLUMNS, ROWS, Board
from .errors import ConnectFourError, NoLegalMovesError
from .rules import check_win
from .types import Outcome, Player

logger = logging.getLogger(__name__)

SYMBOLS = {0: ".", 1: "R", 2: "Y"}


@dataclass
class Move:
    column: int
    player: Player
    elapsed: Optional[float] = None

    def __str__(self) -> str:
        return f"{self.player}: {self.column}"


class ConnectFourGame:
    """A game of Connect Four: one board, whose turn it is, and the outcome so far."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.board = Board()
        self.turn = Player.RED
        self.winner = Outcome.ONGOING
        self.moves: list[Move] = []
        self._rng = rng or random.Random()

    @property
    def is_over(self) -> bool:
        return self.winner is not Outcome.ONGOING

    @property
    def is_draw(self) -> bool:
        return self.winner is Outcome.DRAW

    def legal_moves(self) -> list[int]:
        return self.board.legal_moves()

    def play(self, column: int, elapsed: Optional[float] = None) -> None:
        """Drop a token for the current player.

        Raises OutOfRangeError or ColumnFullError without changing anything
        if the column cannot take a token.
        """
        player = self.turn
        self.board.push(column, player)
        self.moves.append(Move(column=column, player=player, elapsed=elapsed))
        self.turn = player.other
        self.winner = check_win(self.board)
        logger.debug("%s played column %d", player, column)
        if self.is_over:
            logger.info("Game over after %d moves: %s", len(self.moves), self.winner.name)

    def safe_play(self, column: int) -> bool:
        """Like play(), but report an illegal column by returning False."""
        try:
            self.play(column)
        except ConnectFourError as exc:
            logger.debug("Rejected move: %s", exc)
            return False
        return True

    def play_random(self) -> int:
        legal = self.legal_moves()
        if not legal:
            raise NoLegalMovesError("Board is full")
        column = self._rng.choice(legal)
        self.play(column)
        return column

    def play_computer(self, depth: int = DEFAULT_DEPTH) -> int:
        """Search for the current player's best column and play it."""
        column = Searcher(depth).best_move(self.board, self.turn)
        self.play(column)
        return column

    def __str__(self) -> str:
        return render_text(self)


def render_text(game: ConnectFourGame) -> str:
    """Plain-text board, top row first, followed by column numbers and the turn."""
    lines: list[str] = []
    for row in range(ROWS - 1, -1, -1):
        lines.append("".join(SYMBOLS[game.board.get(c, row)] + " " for c in range(COLUMNS)))
    lines.append("".join(f"{c} " for c in range(COLUMNS)))
    lines.append("--" * COLUMNS)
    lines.append(f"Turn: {game.turn.symbol}")
    return "\n".join(lines)
