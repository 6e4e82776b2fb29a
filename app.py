"""Connect Four: Gradio web app entry point."""

import logging

import gradio as gr

from connectfour.ui.board_component import BOARD_CLICK_JS
from connectfour.ui.play_tab import build_play_tab
from connectfour.ui.replay_tab import build_replay_tab

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

with gr.Blocks(title="Connect Four") as demo:
    gr.Markdown("# Connect Four")
    gr.Markdown("7 columns x 6 rows. Drop tokens, connect four to win.")

    with gr.Tab("Play"):
        build_play_tab()

    with gr.Tab("Replay"):
        build_replay_tab()

    # Bind board click handler JS on page load
    demo.load(fn=None, js=BOARD_CLICK_JS)

if __name__ == "__main__":
    demo.launch(theme=gr.themes.Soft())
