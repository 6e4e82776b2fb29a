from __future__ import annotations

from typing import Hashable, Optional


class TranspositionTable:
    """Scores of fully searched positions, valid for one search only."""

    def __init__(self) -> None:
        self.table: dict[Hashable, int] = {}
        self.hits = 0

    def get(self, key: Hashable) -> Optional[int]:
        if key in self.table:
            self.hits += 1
            return self.table[key]
        return None

    def put(self, key: Hashable, score: int) -> None:
        self.table[key] = score

    def reset(self) -> None:
        self.table.clear()
        self.hits = 0

    def __len__(self) -> int:
        return len(self.table)
