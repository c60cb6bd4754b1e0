from shenzhen.models import Dragon_Color

CANCEL_KEY = "esc"

tweak = {
    # Key bindings
    "spare_keys": ["a", "b", "c"],
    "tray_keys": ["1", "2", "3", "4", "5", "6", "7", "8"],
    "dragon_key": "d",
    "dragon_color_keys": {
        Dragon_Color.GREEN: "g",
        Dragon_Color.WHITE: "w",
        Dragon_Color.RED: "r",
    },
    "cancel_key": CANCEL_KEY,
    "new_game_key": "n",
    "quit_key": "q",

    # Event loop
    "redraw_interval_ms": 100,

    # Notices (shown until the next key)
    "notice_cannot_collect": "Cannot collect dragon",
    "notice_invalid_stack": "Not a valid stack",
    "notice_cannot_stack": "Cannot stack onto that",
    "notice_nothing_to_move": "Nothing to move there",

    # Status line
    "status_remaining": "Cards left: {count}",
    "status_won": "You win! Press n for a new game",

    # Logging (only used when a log file is given)
    "log_format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    "log_level": "INFO",
}
