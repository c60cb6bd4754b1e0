from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Suit(Enum):
    BAMBOO = "bamboo"
    CHARACTERS = "characters"
    COIN = "coin"


class Dragon_Color(Enum):
    GREEN = "green"
    WHITE = "white"
    RED = "red"


class Card_Kind(Enum):
    NUMBER = "number"
    DRAGON = "dragon"
    FLOWER = "flower"


SUIT_LETTERS = {
    Suit.BAMBOO: "G",
    Suit.CHARACTERS: "B",
    Suit.COIN: "R",
}

DRAGON_LETTERS = {
    Dragon_Color.GREEN: "G",
    Dragon_Color.WHITE: "W",
    Dragon_Color.RED: "R",
}


@dataclass(frozen=True)
class Card:
    kind: Card_Kind
    suit: Optional[Suit] = None  # number cards only
    rank: int = 0  # 1..9 for number cards
    color: Optional[Dragon_Color] = None  # dragon cards only

    @staticmethod
    def number(suit: Suit, rank: int) -> Card:
        if not 1 <= rank <= 9:
            raise ValueError(f"Invalid rank: {rank}")
        return Card(kind=Card_Kind.NUMBER, suit=suit, rank=rank)

    @staticmethod
    def dragon(color: Dragon_Color) -> Card:
        return Card(kind=Card_Kind.DRAGON, color=color)

    @staticmethod
    def flower() -> Card:
        return Card(kind=Card_Kind.FLOWER)

    def is_number(self) -> bool:
        return self.kind == Card_Kind.NUMBER

    def is_dragon(self, color: Optional[Dragon_Color] = None) -> bool:
        if self.kind != Card_Kind.DRAGON:
            return False
        return color is None or self.color == color

    def is_flower(self) -> bool:
        return self.kind == Card_Kind.FLOWER

    def __str__(self) -> str:
        # Always two characters wide, the renderers rely on it
        if self.kind == Card_Kind.NUMBER:
            return f"{SUIT_LETTERS[self.suit]}{self.rank}"
        if self.kind == Card_Kind.DRAGON:
            return f"D{DRAGON_LETTERS[self.color]}"
        return "FL"


class Slot_Area(Enum):
    SPARE = "spare"
    TRAY = "tray"


@dataclass(frozen=True)
class Slot:
    """A container the player can address: a spare cell or a tray column."""
    area: Slot_Area
    index: int

    @staticmethod
    def spare(index: int) -> Slot:
        return Slot(area=Slot_Area.SPARE, index=index)

    @staticmethod
    def tray(index: int) -> Slot:
        return Slot(area=Slot_Area.TRAY, index=index)

    def is_spare(self) -> bool:
        return self.area == Slot_Area.SPARE

    def is_tray(self) -> bool:
        return self.area == Slot_Area.TRAY


@dataclass(frozen=True)
class Location:
    """An occupied position.

    For a spare cell this is the single occupant. For a tray, depth is the
    1-based position from the bottom of the column of the base card; the card
    there and everything above it form the selected run.
    """
    area: Slot_Area
    index: int
    depth: int = 0

    @staticmethod
    def spare(index: int) -> Location:
        return Location(area=Slot_Area.SPARE, index=index)

    @staticmethod
    def tray(index: int, depth: int) -> Location:
        if depth < 1:
            raise ValueError(f"Invalid tray depth: {depth}")
        return Location(area=Slot_Area.TRAY, index=index, depth=depth)

    def slot(self) -> Slot:
        return Slot(area=self.area, index=self.index)

    def is_spare(self) -> bool:
        return self.area == Slot_Area.SPARE

    def is_tray(self) -> bool:
        return self.area == Slot_Area.TRAY

    def __str__(self) -> str:
        if self.area == Slot_Area.SPARE:
            return f"spare {self.index}"
        return f"tray {self.index} from {self.depth}"
