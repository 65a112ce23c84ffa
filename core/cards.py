"""Card and Deck classes - immutable cards, mutable multi-pack draw pile."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator

CARDS_PER_PACK = 52


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value

    @property
    def blackjack_value(self) -> int:
        """
        Return the face value used for pair comparison (Ace = 11, faces = 10).

        This is not the scoring value: the hand scorer demotes aces to 1 on
        its own when a total would bust. Split eligibility compares these
        fixed values only.
        """
        return _BLACKJACK_VALUES[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self is Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_BLACKJACK_VALUES: dict[Rank, int] = {
    Rank.ACE: 11,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.value: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """
    The remaining draw pile for a round.

    Built from one or more standard 52-card packs. The order is randomized
    once by ``shuffle()``; ``draw()`` pops from the end of the sequence.
    """

    def __init__(self, num_packs: int = 6, rng: Random | None = None) -> None:
        """
        Initialize an unshuffled deck.

        Args:
            num_packs: Number of 52-card packs in the deck
            rng: Random number generator used for shuffling
        """
        if num_packs < 1:
            raise ValueError("Deck must have at least 1 pack")

        self._num_packs: int | None = num_packs
        self._rng: Random | None = rng or Random()
        self._stacked: list[Card] | None = None
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Create a deck holding exactly ``cards``, drawn in the given order.

        Used to stack a deck for reproducible rounds. A stacked deck is not
        built from packs, so ``num_packs`` is None, and ``reset()`` restores
        the stacked order.
        """
        deck = cls.__new__(cls)
        deck._num_packs = None
        deck._rng = rng
        deck._stacked = list(reversed(list(cards)))
        deck._cards = list(deck._stacked)
        return deck

    def reset(self) -> None:
        """Reset deck to all cards from all packs in order, or to the stacked order."""
        if self._stacked is not None:
            self._cards = list(self._stacked)
            return
        self._cards = [
            Card(rank, suit)
            for _ in range(self._num_packs)
            for suit in Suit
            for rank in Rank
        ]

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        if self._rng is None:
            self._rng = Random()
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop()

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def num_packs(self) -> int | None:
        """Return the number of packs the deck was built from, None if stacked."""
        return self._num_packs

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)


def create_shuffled_deck(num_packs: int = 6, rng: Random | None = None) -> Deck:
    """Build a deck of ``num_packs`` packs and shuffle it once."""
    deck = Deck(num_packs=num_packs, rng=rng)
    deck.shuffle()
    return deck
