from __future__ import annotations
from pyray import *
from shenzhen.config import tweak as game_tweak
from shenzhen.game import Game


def pressed_keys() -> list[str]:
    """Key symbols pressed since the last frame."""
    keys = []
    if is_key_pressed(KeyboardKey.KEY_ESCAPE):
        keys.append(game_tweak["cancel_key"])
    # Character queue, in typing order
    ch = get_char_pressed()
    while ch > 0:
        keys.append(chr(ch))
        ch = get_char_pressed()
    return keys


def update_input(game: Game) -> bool:
    """Main input processing - call each frame. Returns False on quit."""
    for key in pressed_keys():
        if not game.handle_key(key):
            return False
    return True
