from __future__ import annotations
from pyray import *
from shenzhen.game import Game
from shenzhen_table.config import tweak
from shenzhen_table.input import update_input
from shenzhen_table.rendering import color_from_tuple, draw_game


def play_window(game: Game) -> None:
    # Initialize window
    init_window(
        tweak["window_width"],
        tweak["window_height"],
        tweak["window_title"]
    )
    set_target_fps(tweak["target_fps"])
    # Escape cancels a selection, it must not close the window
    set_exit_key(KeyboardKey.KEY_NULL)

    try:
        # Main loop
        while not window_should_close():
            # Update
            if not update_input(game):
                break

            # Draw
            begin_drawing()
            clear_background(color_from_tuple(tweak["background_color"]))
            draw_game(game)
            end_drawing()
    finally:
        # Cleanup
        close_window()


if __name__ == "__main__":
    play_window(Game())
