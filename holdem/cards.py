from __future__ import annotations

import random
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List, Optional, Sequence

from .errors import DeckExhausted, InvalidCardFormat

RANKS = "AKQJT98765432"
SUITS = "hdcs"

RANK_ORDER = RANKS[::-1]
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}

SUIT_SYMBOLS = {"♥": "h", "♦": "d", "♣": "c", "♠": "s"}


@total_ordering
@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if not isinstance(self.rank, str) or len(self.rank) != 1 or self.rank not in RANKS:
            raise InvalidCardFormat(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, str) or len(self.suit) != 1 or self.suit not in SUITS:
            raise InvalidCardFormat(f"Invalid suit: {self.suit!r}")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return (self.value, SUITS.index(self.suit)) < (other.value, SUITS.index(other.suit))

    def __str__(self) -> str:
        return self.label

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    @classmethod
    def from_label(cls, label: str) -> "Card":
        return parse_label(label)


def build_deck(seed: Optional[int] = None) -> List[Card]:
    rng = random.Random(seed)
    deck = [Card(rank, suit) for rank in RANK_ORDER for suit in SUITS]
    rng.shuffle(deck)
    return deck


def deal(deck: List[Card], count: int) -> List[Card]:
    if len(deck) < count:
        raise DeckExhausted(f"Not enough cards left in deck: wanted {count}, {len(deck)} remain")
    cards = deck[:count]
    del deck[:count]
    return cards


def cards_to_labels(cards: Iterable[Card]) -> List[str]:
    return [card.label for card in cards]


def parse_label(label: str) -> Card:
    """Parse a short card label such as ``"Ah"``, ``"Tc"`` or ``"10♦"``."""
    if not isinstance(label, str):
        raise InvalidCardFormat(f"Card label must be a string, got {type(label).__name__}")
    text = label.strip()
    if text[:2] == "10":
        text = "T" + text[2:]
    if len(text) != 2:
        raise InvalidCardFormat(f"Invalid card label: {label!r}")
    rank, suit = text[0].upper(), SUIT_SYMBOLS.get(text[1], text[1].lower())
    if rank not in RANKS or suit not in SUITS:
        raise InvalidCardFormat(f"Invalid card label: {label!r}")
    return Card(rank, suit)


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]
