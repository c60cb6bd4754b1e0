from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from shenzhen.models import Card, Dragon_Color, Slot, Suit

logger = logging.getLogger(__name__)

NUM_SPARES = 3
NUM_TRAYS = 8
DRAGONS_PER_COLOR = 4
MAX_RANK = 9


class Engine(Protocol):
    """The board operations the selection layer relies on."""

    def count_in(self, slot: Slot) -> int: ...
    def card_at(self, slot: Slot, depth: int) -> Optional[Card]: ...
    def stacking_base_ok(self, upper: Card, lower: Card) -> bool: ...
    def appendable(self, slot: Slot, card: Card) -> bool: ...
    def remove_top(self, slot: Slot) -> Card: ...
    def place(self, slot: Slot, card: Card) -> None: ...
    def auto_complete(self) -> None: ...
    def collect_dragon(self, color: Dragon_Color) -> bool: ...
    def remaining_card_count(self) -> int: ...


def can_stack_onto(upper: Card, lower: Card) -> bool:
    """Number cards stack on a number of another suit one rank higher."""
    if not (upper.is_number() and lower.is_number()):
        return False
    return upper.suit != lower.suit and lower.rank == upper.rank + 1


@dataclass
class Board:
    spare: list[Optional[Card]] = field(default_factory=lambda: [None] * NUM_SPARES)
    collected: list[bool] = field(default_factory=lambda: [False] * NUM_SPARES)  # spare holds a dragon group
    flower: bool = False  # flower has been played
    out: dict[Suit, int] = field(default_factory=lambda: {suit: 0 for suit in Suit})
    tray: list[list[Card]] = field(default_factory=lambda: [[] for _ in range(NUM_TRAYS)])

    def count_in(self, slot: Slot) -> int:
        if slot.is_spare():
            return 0 if self.spare[slot.index] is None or self.collected[slot.index] else 1
        return len(self.tray[slot.index])

    def card_at(self, slot: Slot, depth: int) -> Optional[Card]:
        if depth < 0:
            return None
        if slot.is_spare():
            if depth != 0 or self.collected[slot.index]:
                return None
            return self.spare[slot.index]
        column = self.tray[slot.index]
        if depth >= len(column):
            return None
        return column[depth]

    def top(self, slot: Slot) -> Optional[Card]:
        return self.card_at(slot, self.count_in(slot) - 1)

    def stacking_base_ok(self, upper: Card, lower: Card) -> bool:
        return can_stack_onto(upper, lower)

    def appendable(self, slot: Slot, card: Card) -> bool:
        if slot.is_spare():
            return self.spare[slot.index] is None and not self.collected[slot.index]
        column = self.tray[slot.index]
        if not column:
            return True
        return can_stack_onto(card, column[-1])

    def remove_top(self, slot: Slot) -> Card:
        if slot.is_spare():
            card = self.spare[slot.index]
            if card is None or self.collected[slot.index]:
                raise IndexError(f"Nothing to remove from spare {slot.index}")
            self.spare[slot.index] = None
            return card
        return self.tray[slot.index].pop()

    def place(self, slot: Slot, card: Card) -> None:
        if slot.is_spare():
            if self.spare[slot.index] is not None or self.collected[slot.index]:
                raise ValueError(f"Spare {slot.index} is occupied")
            self.spare[slot.index] = card
        else:
            self.tray[slot.index].append(card)

    def exposed_slots(self) -> list[Slot]:
        """Slots whose top card is free to move, spares first."""
        slots = [Slot.spare(i) for i in range(NUM_SPARES)]
        slots += [Slot.tray(i) for i in range(NUM_TRAYS)]
        return [slot for slot in slots if self.count_in(slot) > 0]

    def can_go_out(self, card: Card) -> bool:
        if not card.is_number() or self.out[card.suit] != card.rank - 1:
            return False
        # Low cards always go, higher ones only once nothing could still need them
        if card.rank <= 2:
            return True
        return all(n >= card.rank - 1 for n in self.out.values())

    def auto_complete(self) -> None:
        moved = True
        while moved:
            moved = False
            for slot in self.exposed_slots():
                card = self.top(slot)
                if card.is_flower():
                    self.remove_top(slot)
                    self.flower = True
                    logger.debug("Flower played from %s %d", slot.area.value, slot.index)
                    moved = True
                    break
                if self.can_go_out(card):
                    self.remove_top(slot)
                    self.out[card.suit] = card.rank
                    logger.debug("%s went out from %s %d", card, slot.area.value, slot.index)
                    moved = True
                    break

    def collect_dragon(self, color: Dragon_Color) -> bool:
        sources = [slot for slot in self.exposed_slots() if self.top(slot).is_dragon(color)]
        if len(sources) < DRAGONS_PER_COLOR:
            logger.debug("Only %d %s dragons exposed", len(sources), color.value)
            return False

        target = None
        for slot in sources:
            if slot.is_spare():
                target = slot.index
                break
        if target is None:
            for i in range(NUM_SPARES):
                if self.spare[i] is None and not self.collected[i]:
                    target = i
                    break
        if target is None:
            logger.debug("No spare free to collect %s dragons", color.value)
            return False

        for slot in sources:
            self.remove_top(slot)
        self.spare[target] = Card.dragon(color)
        self.collected[target] = True
        logger.debug("Collected %s dragons into spare %d", color.value, target)
        return True

    def remaining_card_count(self) -> int:
        loose = sum(1 for i in range(NUM_SPARES) if self.spare[i] is not None and not self.collected[i])
        return loose + sum(len(column) for column in self.tray)
