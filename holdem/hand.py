from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .cards import Card, cards_to_labels
from .deck import CardSource, Deck
from .errors import DeckExhausted, InvalidAction, InvalidHandSize, InvalidInput
from .evaluator import HandValue
from .models import HOLE_CARDS, HandConfig, Street
from .player import Player
from .showdown import resolve_winners, score_players

LOGGER = logging.getLogger("holdem.hand")

# Hand keeps the state of one deal in memory: seats, board and street.
# Betting and chip accounting live with the caller.

_NEXT_STREET = {
    Street.NOT_DEALT: Street.PLAYER_CARDS_DEALT,
    Street.PLAYER_CARDS_DEALT: Street.FLOP,
    Street.FLOP: Street.TURN,
    Street.TURN: Street.RIVER,
}


class Hand:
    """A single hand of No-Limit Texas Hold'em."""

    def __init__(
        self,
        players: Sequence[Player],
        deck: Optional[CardSource] = None,
        config: Optional[HandConfig] = None,
    ) -> None:
        self.config = config or HandConfig()
        try:
            players = list(players)
        except TypeError:
            raise InvalidInput(f"Expected a list of players, got {type(players).__name__}") from None
        for player in players:
            if not isinstance(player, Player):
                raise InvalidInput(f"Expected Player, got {type(player).__name__}")
        if not self.config.min_players <= len(players) <= self.config.max_players:
            raise InvalidHandSize(
                f"Hand needs {self.config.min_players}-{self.config.max_players} players, got {len(players)}"
            )
        if len({id(player) for player in players}) != len(players):
            raise InvalidInput("The same player cannot take two seats")
        if any(player.has_cards for player in players):
            raise InvalidInput("Players must not hold cards before the deal")

        self._players: List[Player] = players
        self._community: List[Card] = []
        self.deck: CardSource = deck if deck is not None else Deck()
        self.street = Street.NOT_DEALT

    # Accessors -------------------------------------------------------
    @property
    def players(self) -> List[Player]:
        return list(self._players)

    @property
    def community_cards(self) -> List[Card]:
        return list(self._community)

    def get_players(self) -> List[Player]:
        return self.players

    def get_community_cards(self) -> List[Card]:
        return self.community_cards

    @property
    def is_complete(self) -> bool:
        return self.street == Street.RIVER

    # Streets ---------------------------------------------------------
    def deal(self) -> None:
        self._require(Street.NOT_DEALT, "deal")
        cards = self._draw(HOLE_CARDS * len(self._players))
        # Round-robin: one card to every seat, then the next round.
        for round_idx in range(HOLE_CARDS):
            for seat_idx, player in enumerate(self._players):
                player.receive_card(cards[round_idx * len(self._players) + seat_idx])
        self.street = Street.PLAYER_CARDS_DEALT
        LOGGER.debug(
            "Dealt %s", {idx: player.hole_labels() for idx, player in enumerate(self._players)}
        )

    def flop(self) -> None:
        self._require(Street.PLAYER_CARDS_DEALT, "flop")
        self._reveal(3, Street.FLOP)

    def turn(self) -> None:
        self._require(Street.FLOP, "turn")
        self._reveal(1, Street.TURN)

    def river(self) -> None:
        self._require(Street.TURN, "river")
        self._reveal(1, Street.RIVER)

    def advance(self) -> Street:
        """Deal whatever comes next and return the new street."""
        if self.street == Street.NOT_DEALT:
            self.deal()
        elif self.street == Street.PLAYER_CARDS_DEALT:
            self.flop()
        elif self.street == Street.FLOP:
            self.turn()
        elif self.street == Street.TURN:
            self.river()
        else:
            raise InvalidAction("Hand is complete; nothing left to deal")
        return self.street

    def run_out(self) -> Dict[int, Player]:
        while not self.is_complete:
            self.advance()
        return self.get_winners()

    # Showdown --------------------------------------------------------
    def showdown(self) -> Dict[int, HandValue]:
        return score_players(self._players, self._community)

    def get_winners(self) -> Dict[int, Player]:
        return resolve_winners(self._players, self._community)

    # Internals -------------------------------------------------------
    def _require(self, street: Street, action: str) -> None:
        if self.street != street or len(self._community) != street.community_count:
            raise InvalidAction(f"Cannot {action} during {self.street.value}")

    def _reveal(self, count: int, street: Street) -> None:
        burn = 1 if self.config.burn_cards else 0
        cards = self._draw(burn + count)[burn:]
        self._community.extend(cards)
        self.street = street
        LOGGER.debug("%s: %s", street.value, cards_to_labels(cards))

    def _draw(self, count: int) -> List[Card]:
        # Draw everything up front so an exhausted deck leaves the hand untouched.
        draw_many = getattr(self.deck, "draw_many", None)
        if draw_many is not None:
            cards = list(draw_many(count))
        else:
            cards = [self.deck.draw() for _ in range(count)]
        if len(cards) != count:
            raise DeckExhausted(f"Expected {count} cards from deck, got {len(cards)}")
        seen = set(self._community)
        for player in self._players:
            seen.update(player.hole_cards)
        if seen.intersection(cards) or len(set(cards)) != len(cards):
            raise InvalidInput("Deck returned a card that is already in play")
        return cards


NoLimitHoldem = Hand
