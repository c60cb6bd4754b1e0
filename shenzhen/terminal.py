from __future__ import annotations
import curses
import logging
from typing import Optional

from shenzhen.config import tweak
from shenzhen.engine import NUM_SPARES, NUM_TRAYS
from shenzhen.game import Game
from shenzhen.models import Location, Suit
from shenzhen.selection import Selection_Kind

logger = logging.getLogger(__name__)

SEPARATOR = "+--+--+--+-----+--+--+--+"
ESCAPE = 27

# A row is a list of (text, style) segments
Segment = tuple[str, str]


def spare_text(game: Game, index: int) -> str:
    if game.board.collected[index]:
        return "##"
    card = game.board.spare[index]
    return str(card) if card is not None else "  "


def spare_style(game: Game, index: int) -> str:
    selection = game.selection
    if selection.kind == Selection_Kind.COLLECTING_DRAGON:
        return "semi"
    if selection.kind == Selection_Kind.HELD and selection.location == Location.spare(index):
        return "selected"
    return "normal"


def tray_style(game: Game, column: int, row: int) -> str:
    selection = game.selection
    if selection.kind == Selection_Kind.PARTIAL_STACK and selection.tray == column:
        return "semi"
    if selection.kind == Selection_Kind.HELD:
        location = selection.location
        if location.is_tray() and location.index == column and row >= location.depth - 1:
            return "selected"
    return "normal"


def render_rows(game: Game) -> list[list[Segment]]:
    """Project the game onto styled text rows. Pure, no terminal access."""
    board = game.board
    rows: list[list[Segment]] = [[(" " + SEPARATOR, "normal")]]

    top: list[Segment] = [(" ", "normal")]
    for i in range(NUM_SPARES):
        top.append(("|", "normal"))
        top.append((spare_text(game, i), spare_style(game, i)))
    top.append(("| ", "normal"))
    top.append(("F L" if board.flower else "   ", "flower"))
    out = board.out
    top.append((f" |G{out[Suit.BAMBOO]}|B{out[Suit.CHARACTERS]}|R{out[Suit.COIN]}|", "normal"))
    rows.append(top)
    rows.append([(" " + SEPARATOR, "normal")])

    height = max((len(column) for column in board.tray), default=0)
    for row in range(height):
        # Row numbers are the depths typed after choosing a column
        line: list[Segment] = [(str(row + 1) if row < 9 else " ", "label")]
        for j in range(NUM_TRAYS):
            column = board.tray[j]
            line.append((" ", "normal"))
            if row < len(column):
                line.append((str(column[row]), tray_style(game, j, row)))
            else:
                line.append(("  ", "normal"))
        rows.append(line)

    rows.append([(game.status_text(), "notice" if game.notice is not None else "normal")])
    return rows


def render_text(game: Game) -> str:
    return "\n".join("".join(text for text, _ in row) for row in render_rows(game))


def key_from_curses(ch: int) -> Optional[str]:
    if ch == ESCAPE:
        return tweak["cancel_key"]
    if 0 <= ch < 256:
        return chr(ch)
    return None


def init_styles() -> dict[str, int]:
    styles = {
        "normal": curses.A_NORMAL,
        "label": curses.A_DIM,
        "semi": curses.A_REVERSE,
        "selected": curses.A_REVERSE | curses.A_BOLD,
        "flower": curses.A_BOLD,
        "notice": curses.A_BOLD,
    }
    if curses.has_colors():
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_WHITE)
        curses.init_pair(2, curses.COLOR_WHITE, curses.COLOR_BLACK)
        curses.init_pair(3, curses.COLOR_RED, -1)
        curses.init_pair(4, curses.COLOR_WHITE, curses.COLOR_RED)
        styles["semi"] = curses.color_pair(1)
        styles["selected"] = curses.color_pair(2) | curses.A_BOLD
        styles["flower"] = curses.color_pair(3)
        styles["notice"] = curses.color_pair(4)
    return styles


def draw(stdscr, game: Game, styles: dict[str, int]) -> None:
    stdscr.erase()
    for y, row in enumerate(render_rows(game)):
        x = 0
        for text, style in row:
            try:
                stdscr.addstr(y, x, text, styles[style])
            except curses.error:
                # Terminal too small, the rest of the row is off screen
                break
            x += len(text)
    stdscr.refresh()


def run(stdscr, game: Game) -> None:
    """Event loop: each pass either handles one key or redraws on timeout."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.set_escdelay(25)
    stdscr.keypad(True)
    stdscr.timeout(tweak["redraw_interval_ms"])
    styles = init_styles()
    draw(stdscr, game, styles)

    while True:
        ch = stdscr.getch()
        if ch == -1:
            draw(stdscr, game, styles)
            continue
        key = key_from_curses(ch)
        if key is None:
            continue
        logger.debug("Key %r", key)
        if not game.handle_key(key):
            break


def play(game: Game) -> None:
    # curses.wrapper restores the terminal on every exit, exceptions included
    curses.wrapper(run, game)
