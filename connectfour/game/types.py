from __future__ import annotations

import enum


class Player(enum.IntEnum):
    RED = 1
    YELLOW = 2

    @property
    def other(self) -> Player:
        return Player.YELLOW if self is Player.RED else Player.RED

    @property
    def symbol(self) -> str:
        return self.name[0]

    def __str__(self) -> str:
        return self.name.capitalize()


class Outcome(enum.IntEnum):
    ONGOING = 0
    RED_WINS = 1
    YELLOW_WINS = 2
    DRAW = 3

    @property
    def winner(self) -> Player | None:
        if self is Outcome.RED_WINS:
            return Player.RED
        if self is Outcome.YELLOW_WINS:
            return Player.YELLOW
        return None
