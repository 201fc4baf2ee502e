from __future__ import annotations

import itertools
from collections import Counter
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from .cards import Card
from .errors import InvalidInput
from .models import HandCategory

RANK_NAMES = {
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "jack",
    12: "queen",
    13: "king",
    14: "ace",
}

WHEEL = frozenset([14, 2, 3, 4, 5])


class HandValue(NamedTuple):
    """Strength of a five-card hand. Compares category first, then kickers."""

    category: HandCategory
    kickers: Tuple[int, ...]

    @property
    def label(self) -> str:
        return self.category.label

    def describe(self) -> str:
        top = RANK_NAMES[self.kickers[0]]
        second = _plural(self.kickers[1]) if len(self.kickers) > 1 else ""
        category = self.category
        if category == HandCategory.STRAIGHT_FLUSH:
            return "Royal flush" if self.kickers[0] == 14 else f"Straight flush, {top} high"
        if category == HandCategory.FOUR_OF_A_KIND:
            return f"Four of a kind, {_plural(self.kickers[0])}"
        if category == HandCategory.FULL_HOUSE:
            return f"Full house, {_plural(self.kickers[0])} full of {second}"
        if category == HandCategory.FLUSH:
            return f"Flush, {top} high"
        if category == HandCategory.STRAIGHT:
            return f"Straight, {top} high"
        if category == HandCategory.THREE_OF_A_KIND:
            return f"Three of a kind, {_plural(self.kickers[0])}"
        if category == HandCategory.TWO_PAIR:
            return f"Two pair, {_plural(self.kickers[0])} and {second}"
        if category == HandCategory.PAIR:
            return f"Pair of {_plural(self.kickers[0])}"
        return f"High card, {top}"


def _plural(rank: int) -> str:
    name = RANK_NAMES[rank]
    return name + "es" if name.endswith("x") else name + "s"


def evaluate_best(cards: Sequence[Card]) -> HandValue:
    """Return the strongest five-card value among 5 to 7 cards. Higher is better."""
    return _best(cards)[0]


def best_five(cards: Sequence[Card]) -> List[Card]:
    """Return the five cards that make the strongest hand, highest card first."""
    return sorted(_best(cards)[1], reverse=True)


def _best(cards: Sequence[Card]) -> Tuple[HandValue, Tuple[Card, ...]]:
    _validate(cards)
    best: Optional[Tuple[HandValue, Tuple[Card, ...]]] = None
    # Sorting first makes the chosen combo independent of input order.
    for combo in itertools.combinations(sorted(cards, reverse=True), 5):
        value = evaluate_five(combo)
        if best is None or value > best[0]:
            best = (value, combo)
    assert best is not None
    return best


def _validate(cards: Sequence[Card]) -> None:
    for card in cards:
        if not isinstance(card, Card):
            raise InvalidInput(f"Expected Card, got {type(card).__name__}")
    if not 5 <= len(cards) <= 7:
        raise InvalidInput(f"Need between 5 and 7 cards, got {len(cards)}")
    if len(set(cards)) != len(cards):
        raise InvalidInput("Duplicate cards in hand")


def evaluate_five(cards: Iterable[Card]) -> HandValue:
    cards = list(cards)
    if len(cards) != 5:
        raise InvalidInput(f"Expected 5 cards, got {len(cards)}")

    ranks = sorted((card.value for card in cards), reverse=True)
    is_flush = len({card.suit for card in cards}) == 1
    straight_high = _straight_high(ranks)

    # Most frequent rank first, ties broken by the higher rank.
    ordered_counts = sorted(Counter(ranks).items(), key=lambda x: (x[1], x[0]), reverse=True)
    count_values = [count for _, count in ordered_counts]
    grouped = tuple(rank for rank, _ in ordered_counts)

    if straight_high and is_flush:
        return HandValue(HandCategory.STRAIGHT_FLUSH, (straight_high,))
    if count_values[0] == 4:
        return HandValue(HandCategory.FOUR_OF_A_KIND, grouped)
    if count_values[0] == 3 and count_values[1] == 2:
        return HandValue(HandCategory.FULL_HOUSE, grouped)
    if is_flush:
        return HandValue(HandCategory.FLUSH, tuple(ranks))
    if straight_high:
        return HandValue(HandCategory.STRAIGHT, (straight_high,))
    if count_values[0] == 3:
        return HandValue(HandCategory.THREE_OF_A_KIND, grouped)
    if count_values[0] == 2 and count_values[1] == 2:
        return HandValue(HandCategory.TWO_PAIR, grouped)
    if count_values[0] == 2:
        return HandValue(HandCategory.PAIR, grouped)
    return HandValue(HandCategory.HIGH_CARD, tuple(ranks))


def _straight_high(ranks: Sequence[int]) -> Optional[int]:
    distinct = set(ranks)
    if len(distinct) != 5:
        return None
    if distinct == WHEEL:  # Ace plays low
        return 5
    if max(distinct) - min(distinct) == 4:
        return max(distinct)
    return None


def describe_rank(value: HandValue) -> str:
    return value.category.label
