"""Pytest fixtures for blackjack round engine tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit, create_shuffled_deck
from core.hand import Hand
from core.rules import RuleSet
from core.game import EventEmitter, RoundState


def cards(*codes: str) -> list[Card]:
    """Build cards from strings like 'AS', '10H', 'KC'."""
    return [Card.from_string(code) for code in codes]


def hand_of(*codes: str) -> Hand:
    """Build a hand from card strings."""
    return Hand(cards=cards(*codes))


def stacked_deck(*codes: str) -> Deck:
    """
    A deck that deals ``codes`` in order.

    Initial deal order is player, player, dealer, dealer.
    """
    return Deck.from_cards(cards(*codes))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled 6-pack deck."""
    return create_shuffled_deck(num_packs=6, rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return hand_of("AS", "KH")


@pytest.fixture
def soft_16_hand():
    """A soft 16 hand (A-5)."""
    return hand_of("AS", "5H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return hand_of("10S", "6H")


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    return hand_of("8S", "8H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return hand_of("10S", "6H", "KC")


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def new_round(events):
    """Factory for rounds dealt from a stacked deck."""

    def _new_round(*codes: str, wager=10, rules=None) -> RoundState:
        return RoundState(wager, rules=rules, deck=stacked_deck(*codes), events=events)

    return _new_round


@pytest.fixture
def seeded_round(rng):
    """A round dealt from a seeded shuffle."""
    return RoundState(10, rng=rng)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def card_list_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random list of cards."""
    return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
