from __future__ import annotations
import logging

from shenzhen.engine import Engine
from shenzhen.models import Card, Location, Slot

logger = logging.getLogger(__name__)


class Move_Error(Exception):
    """A completed move request that cannot be carried out."""


class Illegal_Destination(Move_Error):
    def __init__(self, card: Card, destination: Slot):
        super().__init__(f"{card} cannot go onto {destination.area.value} {destination.index}")
        self.card = card
        self.destination = destination


class Empty_Source(Move_Error):
    def __init__(self, source: Location):
        super().__init__(f"Nothing to move at {source}")
        self.source = source


def source_card(engine: Engine, source: Location) -> Card:
    """The base card of the selection, the one tested against the destination."""
    if source.is_spare():
        card = engine.card_at(source.slot(), 0)
    else:
        card = engine.card_at(source.slot(), source.depth - 1)
    if card is None:
        raise Empty_Source(source)
    return card


def selected_count(engine: Engine, source: Location) -> int:
    if source.is_spare():
        return 1
    return engine.count_in(source.slot()) - source.depth + 1


def extract_cards(engine: Engine, source: Location) -> list[Card]:
    """Remove the selected cards from the source, bottom-most first."""
    slot = source.slot()
    if source.is_spare():
        return [engine.remove_top(slot)]
    count = selected_count(engine, source)
    popped = [engine.remove_top(slot) for _ in range(count)]
    popped.reverse()
    return popped


def execute(engine: Engine, source: Location, destination: Slot) -> list[Card]:
    """Move the selection at source onto destination.

    Raises Move_Error without touching the board when the move is illegal.
    Returns the cards moved, in the order they were placed.
    """
    card = source_card(engine, source)
    if not engine.appendable(destination, card):
        raise Illegal_Destination(card, destination)
    # A spare cell holds a single card
    if destination.is_spare() and selected_count(engine, source) > 1:
        raise Illegal_Destination(card, destination)

    cards = extract_cards(engine, source)
    for c in cards:
        engine.place(destination, c)
    engine.auto_complete()
    logger.debug("Moved %s from %s to %s %d", " ".join(str(c) for c in cards), source,
                 destination.area.value, destination.index)
    return cards
