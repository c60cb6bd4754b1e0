tweak = {
    # Window settings
    "window_width": 780,
    "window_height": 720,
    "window_title": "Shenzhen Solitaire",
    "target_fps": 10,  # the board only changes on key presses
    "background_color": (40, 44, 52, 255),

    # Layout
    "margin": 20,
    "slot_gap": 12,
    "top_row_y": 20,
    "tray_y": 160,
    "status_y": 680,

    # Card dimensions
    "card_width": 80,
    "card_height": 110,
    "card_corner_radius": 10,
    "card_padding": 8,

    # Card colors
    "card_background": (255, 255, 255, 255),
    "card_border": (80, 80, 80, 255),
    "collected_background": (60, 80, 120, 255),
    "label_font_size": 20,

    # Label colors per suit / dragon
    "color_bamboo": (40, 140, 60, 255),
    "color_characters": (30, 30, 30, 255),
    "color_coin": (190, 40, 40, 255),
    "color_dragon_green": (40, 140, 60, 255),
    "color_dragon_white": (90, 110, 150, 255),
    "color_dragon_red": (190, 40, 40, 255),
    "color_flower": (160, 60, 160, 255),

    # Stack spread (how much cards offset from each other)
    "pile_spread_y": 28,

    # Selection highlights
    "semi_selected_color": (180, 200, 230, 255),
    "selected_color": (255, 215, 0, 255),

    # Status line
    "status_font_size": 20,
    "status_color": (220, 220, 220, 255),
    "notice_color": (230, 90, 90, 255),
}
