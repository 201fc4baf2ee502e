from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Street(str, Enum):
    NOT_DEALT = "NOT_DEALT"
    PLAYER_CARDS_DEALT = "PLAYER_CARDS_DEALT"
    FLOP = "FLOP"
    TURN = "TURN"
    RIVER = "RIVER"

    @property
    def community_count(self) -> int:
        return _COMMUNITY_COUNTS[self]


_COMMUNITY_COUNTS = {
    Street.NOT_DEALT: 0,
    Street.PLAYER_CARDS_DEALT: 0,
    Street.FLOP: 3,
    Street.TURN: 4,
    Street.RIVER: 5,
}


class HandCategory(IntEnum):
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def label(self) -> str:
        return self.name.lower()


HOLE_CARDS = 2


@dataclass(frozen=True)
class HandConfig:
    min_players: int = 2
    max_players: int = 10
    burn_cards: bool = False

    def __post_init__(self) -> None:
        if self.min_players < 2:
            raise ValueError("A hand needs at least two players")
        if self.max_players < self.min_players:
            raise ValueError("max_players must be >= min_players")
        # Hole cards, burns and a five card board must fit in one deck.
        burns = 3 if self.burn_cards else 0
        if self.max_players * HOLE_CARDS + burns + 5 > 52:
            raise ValueError("Configuration needs more than 52 cards")
