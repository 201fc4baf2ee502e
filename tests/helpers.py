from __future__ import annotations

from typing import List, Optional, Sequence

from holdem.cards import parse_cards
from holdem.deck import Deck
from holdem.hand import Hand
from holdem.models import HandConfig
from holdem.player import Player


def create_players(count: int) -> List[Player]:
    return [Player(f"Player{idx}") for idx in range(count)]


def stacked_deck(hole_cards: Sequence[Sequence[str]], community: Sequence[str] = ()) -> Deck:
    """Order a deck so a round-robin deal produces the given hole cards and board."""
    rounds = max((len(cards) for cards in hole_cards), default=0)
    order: List[str] = []
    for round_idx in range(rounds):
        order.extend(cards[round_idx] for cards in hole_cards)
    order.extend(community)
    return Deck(cards=parse_cards(order))


def build_hand(
    community: Sequence[str],
    hole_cards: Sequence[Sequence[str]],
    config: Optional[HandConfig] = None,
) -> Hand:
    """Play a hand up to the street implied by ``community`` with fixed cards."""
    hand = Hand(create_players(len(hole_cards)), deck=stacked_deck(hole_cards, community), config=config)
    hand.deal()
    if len(community) >= 3:
        hand.flop()
    if len(community) >= 4:
        hand.turn()
    if len(community) >= 5:
        hand.river()
    return hand


def play_to(hand: Hand, streets: int) -> Hand:
    """Advance a hand ``streets`` steps (1 = deal, 2 = flop, ...)."""
    for _ in range(streets):
        hand.advance()
    return hand
