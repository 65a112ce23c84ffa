"""Hand scoring and action legality for blackjack."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21


@dataclass(frozen=True, slots=True)
class HandScore:
    """Scored view of a card sequence."""

    score: int
    is_soft: bool
    is_busted: bool
    is_natural: bool


def score_cards(cards: Iterable[Card]) -> HandScore:
    """
    Score a sequence of cards.

    Every ace starts at 11 and is demoted to 1, one at a time, while the
    total is over 21. The hand is soft when an ace is still counted as 11
    afterwards.
    """
    cards = list(cards)
    total = 0
    soft_aces = 0

    for card in cards:
        if card.is_ace:
            soft_aces += 1
        total += card.value

    while total > BLACKJACK and soft_aces > 0:
        total -= 10
        soft_aces -= 1

    return HandScore(
        score=total,
        is_soft=soft_aces > 0,
        is_busted=total > BLACKJACK,
        is_natural=total == BLACKJACK and len(cards) == 2,
    )


@dataclass
class Hand:
    """
    A blackjack hand.

    Cards are append-only. Score, soft, bust and blackjack are recomputed
    together from the full card list after every change.
    """

    cards: list[Card] = field(default_factory=list)
    is_split_hand: bool = False
    _score: HandScore = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)
        self.rescore()

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)
        self.rescore()

    def rescore(self) -> HandScore:
        """Recompute the derived values from the cards."""
        self._score = score_cards(self.cards)
        return self._score

    @property
    def value(self) -> int:
        """Return the best hand total."""
        return self._score.score

    score = value

    @property
    def is_soft(self) -> bool:
        """Check if an ace is still counted as 11."""
        return self._score.is_soft

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self._score.is_busted

    @property
    def is_blackjack(self) -> bool:
        """
        Check if the hand is a natural blackjack (21 with 2 cards).

        Hands produced by a split never count as naturals.
        """
        return self._score.is_natural and not self.is_split_hand

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def can_double(hand: Hand) -> bool:
    """Check if the hand may double down (exactly two cards, any ranks)."""
    return len(hand.cards) == 2


def can_split(hand: Hand) -> bool:
    """
    Check if the hand may be split.

    Two cards of equal blackjack value qualify, so King + Queen is a pair.
    """
    return (
        len(hand.cards) == 2
        and hand.cards[0].value == hand.cards[1].value
    )
