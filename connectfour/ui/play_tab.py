"""Play tab: Human vs AI with interactive SVG board."""

from __future__ import annotations

import logging
import random as _random
import time as _time
from dataclasses import dataclass, field
from typing import Optional

import gradio as gr

from connectfour.agent.base import Agent
from connectfour.agent.minimax_agent import MinimaxAgent
from connectfour.agent.random_agent import RandomAgent
from connectfour.game.board import COLUMNS
from connectfour.game.game import ConnectFourGame
from connectfour.game.record import save_game
from connectfour.game.types import Player
from connectfour.ui.board_component import render_board_svg

logger = logging.getLogger(__name__)

AGENT_CHOICES: dict[str, Agent] = {
    "MinimaxAgent (d=4)": MinimaxAgent(depth=4),
    "MinimaxAgent (d=2)": MinimaxAgent(depth=2),
    "MinimaxAgent (d=6)": MinimaxAgent(depth=6),
    "MinimaxAgent (d=8)": MinimaxAgent(depth=8),
    "RandomAgent": RandomAgent(),
}


@dataclass
class GameSession:
    """Per-tab game state held in gr.State."""

    game: ConnectFourGame = field(default_factory=ConnectFourGame)
    agent: Agent = field(default_factory=lambda: MinimaxAgent(depth=4))
    human_player: Player = field(default=Player.RED)
    _turn_start: float = field(default_factory=_time.time)

    def reset(self, human_player: Optional[Player] = None) -> None:
        self.game = ConnectFourGame()
        self._turn_start = _time.time()
        if human_player is not None:
            self.human_player = human_player

    def mark_turn_start(self) -> None:
        self._turn_start = _time.time()

    def elapsed_since_turn_start(self) -> float:
        return _time.time() - self._turn_start

    @property
    def game_over_banner(self) -> str:
        """Short text for the SVG overlay banner. Empty if game is not over."""
        g = self.game
        if not g.is_over:
            return ""
        winner = g.winner.winner
        if winner is not None:
            if winner == self.human_player:
                return "You win!"
            return "AI wins!"
        return "Draw!"

    @property
    def status_text(self) -> str:
        g = self.game
        if g.is_over:
            winner = g.winner.winner
            if winner is not None:
                who = "You win!" if winner == self.human_player else "AI wins!"
                return f"Game over: {who} ({winner} connects four)"
            return "Game over: Draw!"
        if g.turn == self.human_player:
            return f"Your turn ({g.turn})"
        return f"AI is thinking... ({g.turn})"

    @property
    def move_history_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for i, move in enumerate(self.game.moves):
            t = f"{move.elapsed:.2f}" if move.elapsed is not None else "-"
            rows.append([str(i + 1), str(move.player), str(move.column), t])
        return rows


def _make_board_html(session: GameSession) -> str:
    clickable = not session.game.is_over and session.game.turn == session.human_player
    return render_board_svg(
        session.game,
        clickable=clickable,
        game_over_message=session.game_over_banner,
    )


def _ai_move(session: GameSession) -> None:
    t0 = _time.time()
    column = session.agent.select_move(session.game)
    elapsed = _time.time() - t0
    session.game.play(column, elapsed=elapsed)
    logger.debug("%s chose column %d in %.2fs", session.agent.name, column, elapsed)
    session.mark_turn_start()


def _ai_opening_move(session: GameSession) -> None:
    """If AI goes first (human is Yellow), let the AI play the opening move."""
    if (
        session.human_player == Player.YELLOW
        and not session.game.moves
        and not session.game.is_over
    ):
        _ai_move(session)


def _parse_column(text: str) -> Optional[int]:
    try:
        column = int(text.strip())
    except ValueError:
        return None
    if not 0 <= column < COLUMNS:
        return None
    return column


def _apply_human_move(column_text: str, session: GameSession):
    """Process a human move, then let the AI respond."""
    if session.game.is_over:
        return (
            _make_board_html(session),
            session.status_text,
            session.move_history_table,
            session,
            "",
        )

    if session.game.turn != session.human_player:
        return (
            _make_board_html(session),
            "Wait, it's the AI's turn.",
            session.move_history_table,
            session,
            "",
        )

    column = _parse_column(column_text)
    if column is None:
        return (
            _make_board_html(session),
            f"Invalid column: '{column_text}'. Use 0-{COLUMNS - 1}.",
            session.move_history_table,
            session,
            "",
        )

    if column not in session.game.legal_moves():
        return (
            _make_board_html(session),
            f"Column {column} is full.",
            session.move_history_table,
            session,
            "",
        )

    session.game.play(column, elapsed=session.elapsed_since_turn_start())

    if not session.game.is_over:
        _ai_move(session)

    return (
        _make_board_html(session),
        session.status_text,
        session.move_history_table,
        session,
        "",
    )


def _new_game_with_color(color_choice: str, agent_choice: str, session: GameSession):
    """Start a new game. color_choice is 'Red', 'Yellow', or 'Random'."""
    if color_choice == "Random":
        human = _random.choice([Player.RED, Player.YELLOW])
    elif color_choice == "Yellow":
        human = Player.YELLOW
    else:
        human = Player.RED

    session.agent = AGENT_CHOICES.get(agent_choice, RandomAgent())
    session.reset(human_player=human)

    # Red always moves first
    _ai_opening_move(session)

    return (
        _make_board_html(session),
        session.status_text,
        session.move_history_table,
        session,
        f"You are {human}.",
    )


def _save_game(session: GameSession) -> str:
    if not session.game.moves:
        return "No moves to save."
    human_name = f"Human_{session.human_player}"
    if session.human_player is Player.RED:
        red_name, yellow_name = human_name, session.agent.name
    else:
        red_name, yellow_name = session.agent.name, human_name
    filename = save_game(session.game, red_name, yellow_name)
    return f"Saved: {filename}"


def build_play_tab() -> None:
    """Construct the Play tab UI inside a gr.Blocks context."""

    session_state = gr.State(GameSession())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(ConnectFourGame()),
                label="Board",
            )
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Your turn (Red)",
                label="Status",
                interactive=False,
                lines=2,
            )
            color_info = gr.Textbox(
                value="You are Red.",
                label="Color",
                interactive=False,
                lines=1,
            )

            gr.Markdown("### New Game")
            color_choice = gr.Radio(
                choices=["Random", "Red", "Yellow"],
                value="Random",
                label="Play as",
            )
            agent_choice = gr.Dropdown(
                choices=list(AGENT_CHOICES.keys()),
                value=list(AGENT_CHOICES.keys())[0],
                label="Opponent",
            )
            new_game_btn = gr.Button("New Game", variant="primary")
            save_btn = gr.Button("Save Game")
            save_status = gr.Textbox(label="Save", interactive=False, lines=1)

            gr.Markdown("### Enter Move")
            column_input = gr.Textbox(
                label=f"Column (0-{COLUMNS - 1})",
                placeholder="3",
                elem_id="column-input",
                lines=1,
            )
            column_submit = gr.Button(
                "Submit Move",
                elem_id="column-submit",
            )

            gr.Markdown("### Move History")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Column", "Time (s)"],
                datatype=["number", "str", "str", "str"],
                interactive=False,
                column_count=4,
            )

    board_outputs = [board_html, status_text, move_table, session_state]

    column_submit.click(
        fn=_apply_human_move,
        inputs=[column_input, session_state],
        outputs=board_outputs + [column_input],
    )

    new_game_btn.click(
        fn=_new_game_with_color,
        inputs=[color_choice, agent_choice, session_state],
        outputs=board_outputs + [color_info],
    )

    save_btn.click(
        fn=_save_game,
        inputs=[session_state],
        outputs=[save_status],
    )
