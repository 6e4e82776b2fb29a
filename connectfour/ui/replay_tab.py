"""Replay tab: step through saved games one dropped token at a time."""

from __future__ import annotations

from dataclasses import dataclass, field

import gradio as gr

from connectfour.game.game import ConnectFourGame, render_text
from connectfour.game.record import list_saved_games, load_game, replay_to_move
from connectfour.game.types import Outcome, Player
from connectfour.ui.board_component import render_board_svg


@dataclass(frozen=True)
class ReplayStep:
    """One token that actually landed while replaying a record."""

    number: int
    player: Player
    column: int
    row: int
    outcome: Outcome

    def describe(self) -> str:
        text = f"{self.player} drops in column {self.column} (row {self.row})"
        if self.outcome is Outcome.DRAW:
            return f"{text}, board full: draw"
        if self.outcome.winner is not None:
            return f"{text}, {self.outcome.winner} connects four"
        return text


def replay_steps(record: dict) -> list[ReplayStep]:
    """Replay every entry of `record`, keeping only the tokens that landed.

    Entries that are not integers, point off the grid or into a full column
    are skipped, and so is anything after the game has been decided.
    """
    game = ConnectFourGame()
    steps: list[ReplayStep] = []
    for column in record.get("moves", []):
        if game.is_over:
            break
        player = game.turn
        if not game.safe_play(column):
            continue
        steps.append(ReplayStep(
            number=len(steps) + 1,
            player=player,
            column=column,
            row=game.board.height(column) - 1,
            outcome=game.winner,
        ))
    return steps


def _outcome_banner(outcome: Outcome) -> str:
    if outcome is Outcome.DRAW:
        return "Draw!"
    if outcome.winner is not None:
        return f"{outcome.winner} wins!"
    return ""


@dataclass
class ReplayState:
    """Per-tab replay state held in gr.State."""

    record: dict = field(default_factory=dict)
    steps: list[ReplayStep] = field(default_factory=list)
    step_index: int = -1  # -1 = empty board

    def load(self, record: dict) -> None:
        self.record = record
        self.steps = replay_steps(record)
        self.step_index = -1

    def position(self) -> ConnectFourGame:
        """Rebuild the game as it stood after the current step."""
        landed = {"moves": [step.column for step in self.steps]}
        return replay_to_move(landed, self.step_index)

    @property
    def current_step(self) -> ReplayStep | None:
        if self.step_index < 0:
            return None
        return self.steps[self.step_index]

    @property
    def status_text(self) -> str:
        if not self.record:
            return "Load a game to begin."
        info = f"{self.record.get('red', '?')} (Red) vs {self.record.get('yellow', '?')} (Yellow)"
        result = self.record.get("result", "")
        step = self.current_step
        if step is None:
            pos = f"Start (0/{len(self.steps)})"
        else:
            pos = f"Move {step.number}/{len(self.steps)}: {step.describe()}"
        return " | ".join([info, f"Result: {result}", pos])

    @property
    def move_table(self) -> list[list[str]]:
        rows: list[list[str]] = []
        for step in self.steps[: self.step_index + 1]:
            outcome = _outcome_banner(step.outcome) or "-"
            rows.append([str(step.number), str(step.player), str(step.column), str(step.row), outcome])
        return rows


def _outputs(state: ReplayState):
    game = state.position()
    step = state.current_step
    banner = _outcome_banner(step.outcome) if step is not None else ""
    board_html = render_board_svg(game, clickable=False, game_over_message=banner)
    return board_html, state.status_text, render_text(game), state.move_table, state


def _load_game(filename: str, state: ReplayState):
    if not filename:
        outputs = list(_outputs(state))
        outputs[1] = "Select a game file."
        return tuple(outputs)
    state.load(load_game(filename))
    return _outputs(state)


def _step_forward(state: ReplayState):
    if state.step_index < len(state.steps) - 1:
        state.step_index += 1
    return _outputs(state)


def _step_backward(state: ReplayState):
    if state.step_index >= 0:
        state.step_index -= 1
    return _outputs(state)


def _jump_start(state: ReplayState):
    state.step_index = -1
    return _outputs(state)


def _jump_end(state: ReplayState):
    state.step_index = len(state.steps) - 1
    return _outputs(state)


def _refresh_file_list():
    files = list_saved_games()
    return gr.update(choices=files, value=files[0] if files else None)


def build_replay_tab() -> None:
    """Construct the Replay tab UI inside a gr.Blocks context."""

    replay_state = gr.State(ReplayState())

    with gr.Row():
        with gr.Column(scale=3):
            board_html = gr.HTML(
                value=render_board_svg(ConnectFourGame(), clickable=False),
                label="Board",
            )
            text_board = gr.Textbox(
                value=render_text(ConnectFourGame()),
                label="Text diagram",
                interactive=False,
                lines=10,
            )
        with gr.Column(scale=1):
            status_text = gr.Textbox(
                value="Load a game to begin.",
                label="Status",
                interactive=False,
                lines=3,
            )

            gr.Markdown("### Load Game")
            file_dropdown = gr.Dropdown(
                choices=list_saved_games(),
                label="Saved Games",
            )
            with gr.Row():
                refresh_btn = gr.Button("Refresh")
                load_btn = gr.Button("Load", variant="primary")

            gr.Markdown("### Controls")
            with gr.Row():
                start_btn = gr.Button("<<")
                back_btn = gr.Button("<")
                fwd_btn = gr.Button(">")
                end_btn = gr.Button(">>")

            gr.Markdown("### Drops")
            move_table = gr.Dataframe(
                headers=["#", "Player", "Column", "Row", "Outcome"],
                datatype=["number", "str", "number", "number", "str"],
                interactive=False,
                column_count=5,
            )

    outputs = [board_html, status_text, text_board, move_table, replay_state]

    load_btn.click(fn=_load_game, inputs=[file_dropdown, replay_state], outputs=outputs)
    refresh_btn.click(fn=_refresh_file_list, outputs=[file_dropdown])

    fwd_btn.click(fn=_step_forward, inputs=[replay_state], outputs=outputs)
    back_btn.click(fn=_step_backward, inputs=[replay_state], outputs=outputs)
    start_btn.click(fn=_jump_start, inputs=[replay_state], outputs=outputs)
    end_btn.click(fn=_jump_end, inputs=[replay_state], outputs=outputs)
