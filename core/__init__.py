"""Core blackjack round engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit, create_shuffled_deck
from core.exceptions import BlackjackError, IllegalActionError, InvalidArgumentError
from core.hand import Hand, HandScore, can_double, can_split, score_cards
from core.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "create_shuffled_deck",
    "BlackjackError",
    "IllegalActionError",
    "InvalidArgumentError",
    "Hand",
    "HandScore",
    "can_double",
    "can_split",
    "score_cards",
    "RuleSet",
]
