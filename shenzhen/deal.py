from __future__ import annotations
import logging
import random
from typing import Optional

from shenzhen.engine import Board, DRAGONS_PER_COLOR, MAX_RANK, NUM_TRAYS
from shenzhen.models import Card, Dragon_Color, Suit

logger = logging.getLogger(__name__)

DECK_SIZE = 40


def new_deck() -> list[Card]:
    """All 40 cards: 27 numbers, 12 dragons and the flower."""
    deck = [Card.number(suit, rank) for suit in Suit for rank in range(1, MAX_RANK + 1)]
    deck += [Card.dragon(color) for color in Dragon_Color for _ in range(DRAGONS_PER_COLOR)]
    deck.append(Card.flower())
    return deck


def deal_board(deck: list[Card]) -> Board:
    """Deal the cards round-robin across the trays, in deck order."""
    board = Board()
    for i, card in enumerate(deck):
        board.tray[i % NUM_TRAYS].append(card)
    return board


def new_shuffled_game(seed: Optional[int] = None) -> Board:
    rng = random.Random(seed)
    deck = new_deck()
    rng.shuffle(deck)
    board = deal_board(deck)
    board.auto_complete()
    logger.info("Dealt new game (seed=%s)", seed)
    return board
