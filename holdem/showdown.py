from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence

from .cards import Card, cards_to_labels
from .errors import InvalidAction
from .evaluator import HandValue, evaluate_best
from .models import HOLE_CARDS
from .player import Player

LOGGER = logging.getLogger("holdem.showdown")

BOARD_SIZE = 5


def find_winners(scores: Mapping[int, HandValue]) -> List[int]:
    """Seats holding the best value. More than one seat means a split pot."""
    if not scores:
        return []
    best = max(scores.values())
    return sorted(seat for seat, score in scores.items() if score == best)


def score_players(players: Sequence[Player], community: Sequence[Card]) -> Dict[int, HandValue]:
    if len(community) != BOARD_SIZE:
        raise InvalidAction(f"Showdown needs {BOARD_SIZE} community cards, have {len(community)}")
    scores: Dict[int, HandValue] = {}
    for seat_idx, player in enumerate(players):
        if player.hole_card_count != HOLE_CARDS:
            raise InvalidAction(f"Seat {seat_idx} holds {player.hole_card_count} hole cards, expected {HOLE_CARDS}")
        scores[seat_idx] = evaluate_best(list(player.hole_cards) + list(community))
        LOGGER.debug(
            "Seat %s shows %s: %s",
            seat_idx,
            player.hole_labels(),
            scores[seat_idx].describe(),
        )
    return scores


def resolve_winners(players: Sequence[Player], community: Sequence[Card]) -> Dict[int, Player]:
    scores = score_players(players, community)
    winners = {seat_idx: players[seat_idx] for seat_idx in find_winners(scores)}
    if not winners:
        return winners
    LOGGER.info(
        "Board %s won by seat(s) %s with %s",
        cards_to_labels(community),
        list(winners),
        scores[next(iter(winners))].describe(),
    )
    return winners


def rank_players(players: Sequence[Player], community: Sequence[Card]) -> List[List[int]]:
    """Group seats from strongest to weakest. Equal hands share a group."""
    scores = score_players(players, community)
    groups: List[List[int]] = []
    for value in sorted(set(scores.values()), reverse=True):
        groups.append(sorted(seat for seat, score in scores.items() if score == value))
    return groups
