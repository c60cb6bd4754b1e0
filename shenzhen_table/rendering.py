from __future__ import annotations
from pyray import *
from shenzhen.config import tweak as game_tweak
from shenzhen.engine import NUM_SPARES, NUM_TRAYS
from shenzhen.game import Game
from shenzhen.models import Card, Dragon_Color, Location, Suit
from shenzhen.selection import Selection_Kind
from shenzhen_table.config import tweak

SUIT_COLORS = {
    Suit.BAMBOO: "color_bamboo",
    Suit.CHARACTERS: "color_characters",
    Suit.COIN: "color_coin",
}

DRAGON_COLORS = {
    Dragon_Color.GREEN: "color_dragon_green",
    Dragon_Color.WHITE: "color_dragon_white",
    Dragon_Color.RED: "color_dragon_red",
}


def color_from_tuple(c: tuple) -> Color:
    """Convert RGBA tuple to raylib Color."""
    return Color(c[0], c[1], c[2], c[3])


def slot_x(column: int) -> int:
    return tweak["margin"] + column * (tweak["card_width"] + tweak["slot_gap"])


def label_color(card: Card) -> Color:
    if card.is_number():
        return color_from_tuple(tweak[SUIT_COLORS[card.suit]])
    if card.is_flower():
        return color_from_tuple(tweak["color_flower"])
    return color_from_tuple(tweak[DRAGON_COLORS[card.color]])


def draw_card(x: float, y: float, card: Card, highlight: tuple | None = None, collected: bool = False) -> None:
    """Draw a single face-up card, optionally outlined with a highlight color."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]
    padding = tweak["card_padding"]

    # Card background
    background = tweak["collected_background"] if collected else tweak["card_background"]
    draw_rectangle_rounded(
        Rectangle(x, y, w, h), r / min(w, h), 8,
        color_from_tuple(background)
    )

    # Border
    border = highlight if highlight is not None else tweak["card_border"]
    draw_rectangle_rounded_lines_ex(
        Rectangle(x, y, w, h), r / min(w, h), 8, 3 if highlight else 2,
        color_from_tuple(border)
    )

    # Label in the top left corner, visible when cards overlap
    draw_text(
        str(card),
        int(x + padding),
        int(y + padding),
        tweak["label_font_size"],
        label_color(card)
    )


def draw_slot_placeholder(x: float, y: float, label: str, highlight: tuple | None = None) -> None:
    """Draw an empty slot placeholder with label."""
    w = tweak["card_width"]
    h = tweak["card_height"]
    r = tweak["card_corner_radius"]

    outline = color_from_tuple(highlight) if highlight else Color(100, 100, 100, 100)
    draw_rectangle_rounded_lines_ex(
        Rectangle(x, y, w, h), r / min(w, h), 8, 1,
        outline
    )

    text_width = measure_text(label, 14)
    draw_text(
        label,
        int(x + (w - text_width) / 2),
        int(y + h / 2 - 7),
        14,
        Color(100, 100, 100, 150)
    )


def spare_highlight(game: Game, index: int) -> tuple | None:
    selection = game.selection
    if selection.kind == Selection_Kind.COLLECTING_DRAGON:
        return tweak["semi_selected_color"]
    if selection.kind == Selection_Kind.HELD and selection.location == Location.spare(index):
        return tweak["selected_color"]
    return None


def tray_highlight(game: Game, column: int, row: int) -> tuple | None:
    selection = game.selection
    if selection.kind == Selection_Kind.PARTIAL_STACK and selection.tray == column:
        return tweak["semi_selected_color"]
    if selection.kind == Selection_Kind.HELD:
        location = selection.location
        if location.is_tray() and location.index == column and row >= location.depth - 1:
            return tweak["selected_color"]
    return None


def draw_top_row(game: Game) -> None:
    """Spare cells, the flower slot and the out piles."""
    board = game.board
    y = tweak["top_row_y"]
    for i in range(NUM_SPARES):
        card = board.spare[i]
        if card is None:
            draw_slot_placeholder(slot_x(i), y, game_tweak["spare_keys"][i], spare_highlight(game, i))
        else:
            draw_card(slot_x(i), y, card, spare_highlight(game, i), collected=board.collected[i])

    if board.flower:
        draw_card(slot_x(NUM_SPARES), y, Card.flower())
    else:
        draw_slot_placeholder(slot_x(NUM_SPARES), y, "flower")

    for i, suit in enumerate(Suit):
        x = slot_x(NUM_TRAYS - len(Suit) + i)
        rank = board.out[suit]
        if rank == 0:
            draw_slot_placeholder(x, y, suit.value)
        else:
            draw_card(x, y, Card.number(suit, rank))


def draw_trays(game: Game) -> None:
    board = game.board
    y = tweak["tray_y"]
    spread = tweak["pile_spread_y"]
    for j in range(NUM_TRAYS):
        column = board.tray[j]
        if not column:
            draw_slot_placeholder(slot_x(j), y, str(j + 1))
            continue
        for row, card in enumerate(column):
            draw_card(slot_x(j), y + row * spread, card, tray_highlight(game, j, row))


def draw_status(game: Game) -> None:
    color = tweak["notice_color"] if game.notice is not None else tweak["status_color"]
    draw_text(
        game.status_text(),
        tweak["margin"],
        tweak["status_y"],
        tweak["status_font_size"],
        color_from_tuple(color)
    )


def draw_game(game: Game) -> None:
    """Draw the complete board and status line."""
    draw_top_row(game)
    draw_trays(game)
    draw_status(game)
