from __future__ import annotations

import random

from connectfour.game.errors import NoLegalMovesError
from connectfour.game.game import ConnectFourGame

from .base import Agent


class RandomAgent(Agent):
    def select_move(self, game: ConnectFourGame) -> int:
        moves = game.legal_moves()
        if not moves:
            raise NoLegalMovesError("No legal moves available")
        return random.choice(moves)
