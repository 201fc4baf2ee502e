"""Single-hand No-Limit Texas Hold'em: dealing, streets and showdown."""

from .cards import Card, RANKS, SUITS, build_deck, cards_to_labels, deal, parse_cards, parse_label
from .deck import CardSource, Deck
from .errors import (
    DeckExhausted,
    HandError,
    InvalidAction,
    InvalidCardFormat,
    InvalidHandSize,
    InvalidInput,
    PokerError,
)
from .evaluator import HandValue, best_five, describe_rank, evaluate_best, evaluate_five
from .hand import Hand, NoLimitHoldem
from .models import HandCategory, HandConfig, Street
from .player import Player
from .showdown import find_winners, rank_players, resolve_winners

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "build_deck",
    "cards_to_labels",
    "deal",
    "parse_cards",
    "parse_label",
    "CardSource",
    "Deck",
    "DeckExhausted",
    "HandError",
    "InvalidAction",
    "InvalidCardFormat",
    "InvalidHandSize",
    "InvalidInput",
    "PokerError",
    "HandValue",
    "best_five",
    "describe_rank",
    "evaluate_best",
    "evaluate_five",
    "Hand",
    "NoLimitHoldem",
    "HandCategory",
    "HandConfig",
    "Street",
    "Player",
    "find_winners",
    "rank_players",
    "resolve_winners",
]
