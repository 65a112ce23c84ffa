"""Blackjack table rules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Table rules for a round.

    Defaults: six packs, 3:2 naturals, dealer stands on every 17, unlimited
    resplitting.
    """

    # Deck configuration
    num_decks: int = 6

    # Blackjack payout (3:2 = 1.5, 6:5 = 1.2)
    blackjack_payout: float = 1.5

    # Dealer rules
    dealer_hits_soft_17: bool = False  # H17 vs S17

    # Split rules; None means no cap on the number of hands
    max_split_hands: int | None = None

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.num_decks < 1 or self.num_decks > 8:
            raise ValueError("num_decks must be between 1 and 8")
        if self.blackjack_payout < 1.0:
            raise ValueError("blackjack_payout must be at least 1.0")
        if self.max_split_hands is not None and self.max_split_hands < 2:
            raise ValueError("max_split_hands must be at least 2")

    @classmethod
    def vegas_strip(cls) -> "RuleSet":
        """Standard Vegas Strip rules (S17, resplit to four hands)."""
        return cls(
            num_decks=6,
            dealer_hits_soft_17=False,
            blackjack_payout=1.5,
            max_split_hands=4,
        )

    @classmethod
    def downtown_vegas(cls) -> "RuleSet":
        """Downtown Las Vegas rules (typically H17)."""
        return cls(
            num_decks=6,
            dealer_hits_soft_17=True,
            blackjack_payout=1.5,
            max_split_hands=4,
        )

    @classmethod
    def single_deck(cls) -> "RuleSet":
        """Single deck rules with a 6:5 natural."""
        return cls(
            num_decks=1,
            dealer_hits_soft_17=True,
            blackjack_payout=1.2,
            max_split_hands=2,
        )
