"""Save and load game records as JSON files."""

from __future__ import annotations

import json
import os
from datetime import datetime
from pathlib import Path

from .game import ConnectFourGame

SAVED_GAMES_DIR = Path(__file__).resolve().parents[2] / "saved_games"


def _ensure_dir() -> None:
    SAVED_GAMES_DIR.mkdir(exist_ok=True)


def describe_result(game: ConnectFourGame) -> str:
    if not game.is_over:
        return "In progress"
    winner = game.winner.winner
    if winner is not None:
        return f"{winner} wins"
    return "Draw"


def save_game(
    game: ConnectFourGame,
    red_name: str,
    yellow_name: str,
    result: str = "",
) -> str:
    """Save a game to a JSON file. Returns the filename."""
    _ensure_dir()
    if not result:
        result = describe_result(game)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = f"{timestamp}_{red_name}_vs_{yellow_name}.json"
    filename = filename.replace(" ", "_").replace("(", "").replace(")", "").replace("=", "")

    record = {
        "date": datetime.now().isoformat(),
        "red": red_name,
        "yellow": yellow_name,
        "result": result,
        "moves": [m.column for m in game.moves],
    }

    with open(SAVED_GAMES_DIR / filename, "w") as f:
        json.dump(record, f, indent=2)

    return filename


def load_game(filename: str) -> dict:
    with open(SAVED_GAMES_DIR / filename) as f:
        return json.load(f)


def list_saved_games() -> list[str]:
    """Return saved game filenames, newest first."""
    _ensure_dir()
    files = [f for f in os.listdir(SAVED_GAMES_DIR) if f.endswith(".json")]
    files.sort(reverse=True)
    return files


def replay_to_move(record: dict, move_index: int) -> ConnectFourGame:
    """Rebuild a game with moves replayed up to move_index (inclusive).

    move_index = -1 means empty board, 0 means first move, etc.
    Entries that are not playable columns are skipped.
    """
    game = ConnectFourGame()
    moves = record.get("moves", [])
    for column in moves[: max(move_index + 1, 0)]:
        if isinstance(column, int):
            game.safe_play(column)
    return game
