from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from shenzhen.config import tweak
from shenzhen.engine import Engine
from shenzhen.keys import dragon_color_for_key, parse_count, try_map_key
from shenzhen.models import Location, Slot
from shenzhen.moves import Empty_Source, Move_Error, execute

logger = logging.getLogger(__name__)


class Selection_Kind(Enum):
    NEUTRAL = "neutral"
    COLLECTING_DRAGON = "collecting-dragon"
    PARTIAL_STACK = "partial-stack"  # tray chosen, waiting for the depth
    HELD = "held"  # cards in hand, waiting for a destination


@dataclass(frozen=True)
class Selection:
    kind: Selection_Kind = Selection_Kind.NEUTRAL
    tray: Optional[int] = None  # PARTIAL_STACK only
    location: Optional[Location] = None  # HELD only

    @staticmethod
    def neutral() -> Selection:
        return Selection()

    @staticmethod
    def collecting_dragon() -> Selection:
        return Selection(kind=Selection_Kind.COLLECTING_DRAGON)

    @staticmethod
    def partial_stack(tray: int) -> Selection:
        return Selection(kind=Selection_Kind.PARTIAL_STACK, tray=tray)

    @staticmethod
    def held(location: Location) -> Selection:
        return Selection(kind=Selection_Kind.HELD, location=location)

    def is_neutral(self) -> bool:
        return self.kind == Selection_Kind.NEUTRAL


def run_is_valid(engine: Engine, tray: int, depth: int) -> bool:
    """Check the cards from depth (1-based from the bottom) to the top form a run."""
    slot = Slot.tray(tray)
    for i in range(depth, engine.count_in(slot)):
        upper = engine.card_at(slot, i)
        lower = engine.card_at(slot, i - 1)
        if not engine.stacking_base_ok(upper, lower):
            return False
    return True


class Selection_Machine:
    """Turns keystrokes into selections and, once complete, into moves."""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.selection = Selection.neutral()
        self.notice: Optional[str] = None

    def reset(self) -> None:
        self.selection = Selection.neutral()
        self.notice = None

    def handle_key(self, key: str) -> None:
        self.notice = None
        before = self.selection
        kind = self.selection.kind
        if kind == Selection_Kind.NEUTRAL:
            self._handle_neutral(key)
        elif kind == Selection_Kind.COLLECTING_DRAGON:
            self._handle_collecting_dragon(key)
        elif kind == Selection_Kind.PARTIAL_STACK:
            self._handle_partial_stack(key)
        elif kind == Selection_Kind.HELD:
            self._handle_held(key)
        else:
            raise ValueError(f"Unknown selection kind: {kind}")
        if self.selection != before:
            logger.debug("Key %r: %s -> %s", key, before.kind.value, self.selection.kind.value)

    def _handle_neutral(self, key: str) -> None:
        if key == tweak["dragon_key"]:
            self.selection = Selection.collecting_dragon()
            return
        slot = try_map_key(key)
        if slot is None:
            return
        if slot.is_spare():
            self.selection = Selection.held(Location.spare(slot.index))
        else:
            self.selection = Selection.partial_stack(slot.index)

    def _handle_collecting_dragon(self, key: str) -> None:
        if key == tweak["cancel_key"]:
            self.selection = Selection.neutral()
            return
        color = dragon_color_for_key(key)
        if color is None:
            return
        if self.engine.collect_dragon(color):
            self.engine.auto_complete()
            self.selection = Selection.neutral()
        else:
            # Stay in this mode so another color can be tried
            self.notice = tweak["notice_cannot_collect"]

    def _handle_partial_stack(self, key: str) -> None:
        if key == tweak["cancel_key"]:
            self.selection = Selection.neutral()
            return
        depth = parse_count(key)
        if depth is None:
            return
        tray = self.selection.tray
        if depth == 0 or depth > self.engine.count_in(Slot.tray(tray)):
            return
        if not run_is_valid(self.engine, tray, depth):
            self.notice = tweak["notice_invalid_stack"]
            return
        self.selection = Selection.held(Location.tray(tray, depth))

    def _handle_held(self, key: str) -> None:
        if key == tweak["cancel_key"]:
            self.selection = Selection.neutral()
            return
        destination = try_map_key(key)
        if destination is None:
            return
        source = self.selection.location
        self.selection = Selection.neutral()
        try:
            execute(self.engine, source, destination)
        except Move_Error as e:
            logger.debug("Move rejected: %s", e)
            self.notice = notice_for(e)


def notice_for(error: Move_Error) -> str:
    if isinstance(error, Empty_Source):
        return tweak["notice_nothing_to_move"]
    return tweak["notice_cannot_stack"]
