from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from .cards import Card, build_deck, deal
from .errors import DeckExhausted, InvalidInput

LOGGER = logging.getLogger("holdem.deck")


class CardSource(Protocol):
    """Anything a hand can draw from. Must never return the same card twice."""

    def draw(self) -> Card:
        ...


class Deck:
    """A 52-card deck dealt from the top without replacement."""

    def __init__(self, seed: Optional[int] = None, cards: Optional[Sequence[Card]] = None) -> None:
        if cards is None:
            self._cards: List[Card] = build_deck(seed)
        else:
            self._cards = list(cards)
            if len(set(self._cards)) != len(self._cards):
                raise InvalidInput("Deck contains duplicate cards")
        self.seed = seed
        self.drawn: List[Card] = []

    def draw(self) -> Card:
        return self.draw_many(1)[0]

    def draw_many(self, count: int) -> List[Card]:
        # deal() checks the size before slicing, so a failed draw removes nothing.
        try:
            cards = deal(self._cards, count)
        except DeckExhausted:
            LOGGER.warning("Deck exhausted after %d cards", len(self.drawn))
            raise
        self.drawn.extend(cards)
        return cards

    @property
    def remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)
