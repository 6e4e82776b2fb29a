from __future__ import annotations

import abc

from connectfour.game.game import ConnectFourGame


class Agent(abc.ABC):
    @abc.abstractmethod
    def select_move(self, game: ConnectFourGame) -> int:
        """Return the column this agent wants to play."""

    @property
    def name(self) -> str:
        return self.__class__.__name__
