"""SVG board renderer + JavaScript click handler for Gradio."""

from __future__ import annotations

from connectfour.game.board import COLUMNS, ROWS
from connectfour.game.game import ConnectFourGame

# Layout constants
CELL_SIZE = 70
MARGIN = 30
LABEL_HEIGHT = 30
BOARD_W = MARGIN * 2 + CELL_SIZE * COLUMNS
BOARD_H = MARGIN * 2 + CELL_SIZE * ROWS + LABEL_HEIGHT
TOKEN_RADIUS = 28

# Colors
FRAME_COLOR = "#1D4ED8"
HOLE_COLOR = "#F8FAFC"
LABEL_COLOR = "#1E293B"
RED_TOKEN = "#DC2626"
YELLOW_TOKEN = "#FACC15"
TOKEN_STROKE = "#7F1D1D"
LAST_MOVE_COLOR = "#FFFFFF"

BANNER_WIN = "#4ADE80"
BANNER_LOSS = "#F87171"
BANNER_DRAW = "#FFFFFF"

TOKEN_FILL = {1: RED_TOKEN, 2: YELLOW_TOKEN}


def _coord(column: int, row: int) -> tuple[int, int]:
    """Centre of a cell in SVG pixels. Row 0 is drawn at the bottom."""
    x = MARGIN + column * CELL_SIZE + CELL_SIZE // 2
    y = MARGIN + (ROWS - 1 - row) * CELL_SIZE + CELL_SIZE // 2
    return x, y


def _banner_color(message: str) -> str:
    if "win" not in message.lower():
        return BANNER_DRAW
    if message.startswith("You"):
        return BANNER_WIN
    return BANNER_LOSS


def render_board_svg(
    game: ConnectFourGame,
    clickable: bool = True,
    highlight_last: bool = True,
    game_over_message: str = "",
) -> str:
    """Render the board as an SVG string."""
    parts: list[str] = []
    board = game.board

    parts.append(
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{BOARD_W}" height="{BOARD_H}" '
        f'viewBox="0 0 {BOARD_W} {BOARD_H}" '
        f'id="connectfour-board">'
    )

    # Frame
    parts.append(
        f'<rect x="{MARGIN - 10}" y="{MARGIN - 10}" '
        f'width="{CELL_SIZE * COLUMNS + 20}" height="{CELL_SIZE * ROWS + 20}" '
        f'fill="{FRAME_COLOR}" rx="12"/>'
    )

    last = game.moves[-1] if game.moves else None

    for c in range(COLUMNS):
        for r in range(ROWS):
            x, y = _coord(c, r)
            owner = board.get(c, r)
            fill = TOKEN_FILL.get(owner, HOLE_COLOR)
            stroke = TOKEN_STROKE if owner else "none"
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="{TOKEN_RADIUS}" '
                f'fill="{fill}" stroke="{stroke}" stroke-width="1.5"/>'
            )
        # Last move marker sits on the top token of the column
        if highlight_last and last is not None and last.column == c:
            x, y = _coord(c, board.height(c) - 1)
            parts.append(
                f'<circle cx="{x}" cy="{y}" r="8" '
                f'fill="{LAST_MOVE_COLOR}" opacity="0.7"/>'
            )

    # Column labels
    label_y = MARGIN + CELL_SIZE * ROWS + LABEL_HEIGHT
    for c in range(COLUMNS):
        x, _ = _coord(c, 0)
        parts.append(
            f'<text x="{x}" y="{label_y}" text-anchor="middle" '
            f'font-size="16" font-family="monospace" fill="{LABEL_COLOR}">'
            f'{c}</text>'
        )

    # Clickable column targets (invisible full-height strips)
    if clickable and not game.is_over:
        for c in board.legal_moves():
            x = MARGIN + c * CELL_SIZE
            parts.append(
                f'<rect x="{x}" y="{MARGIN}" width="{CELL_SIZE}" '
                f'height="{CELL_SIZE * ROWS}" fill="transparent" '
                f'class="board-click" data-column="{c}" style="cursor:pointer">'
                f'<title>Column {c}</title></rect>'
            )

    if game_over_message:
        color = _banner_color(game_over_message)
        parts.append(
            f'<rect x="0" y="{BOARD_H // 2 - 30}" width="{BOARD_W}" height="60" '
            f'fill="rgba(0, 0, 0, 0.6)"/>'
        )
        parts.append(
            f'<text x="{BOARD_W // 2}" y="{BOARD_H // 2 + 10}" text-anchor="middle" '
            f'font-size="32" font-weight="bold" font-family="sans-serif" '
            f'fill="{color}">{game_over_message}</text>'
        )

    parts.append("</svg>")
    parts.append(f"<script>{BOARD_CLICK_JS}();</script>")
    return "\n".join(parts)


# JavaScript that handles clicks on the SVG and writes the column to
# a hidden Gradio Textbox, then triggers the submit button.
CLICK_JS = """
(() => {
    if (window._connectFourClickBound) return;
    window._connectFourClickBound = true;

    document.addEventListener('click', function(e) {
        const strip = e.target.closest('.board-click');
        if (!strip) return;
        const column = strip.getAttribute('data-column');
        if (column === null) return;

        const input = document.querySelector('#column-input textarea, #column-input input');
        if (input) {
            // Native setter so Gradio notices the change
            const nativeSetter = Object.getOwnPropertyDescriptor(
                Object.getPrototypeOf(input), 'value'
            )?.set;
            if (nativeSetter) {
                nativeSetter.call(input, column);
            } else {
                input.value = column;
            }
            input.dispatchEvent(new Event('input', { bubbles: true }));
            const btn = document.querySelector('#column-submit');
            if (btn) btn.click();
        }
    });
})
"""

BOARD_CLICK_JS = CLICK_JS.strip()
