from __future__ import annotations
from typing import Optional

from shenzhen.config import tweak
from shenzhen.models import Dragon_Color, Slot


class No_Mapping(Exception):
    """The key does not address any slot."""


def map_key(key: str) -> Slot:
    """Map a key symbol to the spare cell or tray column it selects."""
    spare_keys = tweak["spare_keys"]
    tray_keys = tweak["tray_keys"]
    if key in spare_keys:
        return Slot.spare(spare_keys.index(key))
    if key in tray_keys:
        return Slot.tray(tray_keys.index(key))
    raise No_Mapping(key)


def try_map_key(key: str) -> Optional[Slot]:
    try:
        return map_key(key)
    except No_Mapping:
        return None


def dragon_color_for_key(key: str) -> Optional[Dragon_Color]:
    for color, color_key in tweak["dragon_color_keys"].items():
        if key == color_key:
            return color
    return None


def parse_count(key: str) -> Optional[int]:
    """Digit keys typed while choosing how deep to pick up a column."""
    if len(key) == 1 and key in "0123456789":
        return int(key)
    return None
