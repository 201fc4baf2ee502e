from __future__ import annotations

from typing import List, Optional, Tuple

from .cards import Card, cards_to_labels
from .errors import InvalidAction
from .models import HOLE_CARDS


class Player:
    """A seat in the hand. Holds hole cards once the hand is dealt."""

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self._hole_cards: List[Card] = []

    @property
    def hole_cards(self) -> Tuple[Card, ...]:
        return tuple(self._hole_cards)

    @property
    def hole_card_count(self) -> int:
        return len(self._hole_cards)

    @property
    def has_cards(self) -> bool:
        return bool(self._hole_cards)

    def hole_labels(self) -> List[str]:
        return cards_to_labels(self._hole_cards)

    def receive_card(self, card: Card) -> None:
        if len(self._hole_cards) >= HOLE_CARDS:
            raise InvalidAction(f"Player already holds {HOLE_CARDS} hole cards")
        self._hole_cards.append(card)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.name == other.name and self._hole_cards == other._hole_cards

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, hole_cards={self.hole_labels()})"
