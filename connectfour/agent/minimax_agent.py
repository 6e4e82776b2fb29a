"""Minimax agent: alpha-beta search with a per-move transposition table."""

from __future__ import annotations

from connectfour.engine.search import DEFAULT_DEPTH, Searcher
from connectfour.game.game import ConnectFourGame

from .base import Agent


class MinimaxAgent(Agent):
    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        self.depth = depth

    @property
    def name(self) -> str:
        return f"MinimaxAgent(d={self.depth})"

    def select_move(self, game: ConnectFourGame) -> int:
        return Searcher(self.depth).best_move(game.board, game.turn)
