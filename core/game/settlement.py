"""Per-hand settlement against the dealer outcome."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Sequence

from core.exceptions import InvalidArgumentError
from core.hand import Hand
from core.rules import RuleSet

logger = logging.getLogger(__name__)

# Nominal return to player under standard rules and basic strategy
THEORETICAL_RTP = Decimal("0.995")


class Outcome(Enum):
    """Result classification for one player hand."""

    WIN = "win"
    LOSE = "lose"
    PUSH = "push"
    BLACKJACK = "blackjack"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SettlementResult:
    """Settled result of one player hand."""

    hand_index: int
    outcome: Outcome
    stake: Decimal
    payout: Decimal

    @property
    def net(self) -> Decimal:
        """Return the payout minus the stake."""
        return self.payout - self.stake


def _payout_multiplier(rules: RuleSet) -> Decimal:
    return 1 + Decimal(str(rules.blackjack_payout))


def settle_hand(
    player_hand: Hand,
    dealer_hand: Hand,
    stake: Decimal,
    rules: RuleSet | None = None,
) -> tuple[Outcome, Decimal]:
    """
    Classify one player hand and compute what it returns.

    Payouts include the stake: a win returns twice the stake, a push
    returns the stake, a natural returns the stake plus the blackjack payout.

    Returns:
        (outcome, payout)
    """
    rules = rules or RuleSet()

    if player_hand.is_blackjack:
        if dealer_hand.is_blackjack:
            return Outcome.PUSH, stake
        return Outcome.BLACKJACK, stake * _payout_multiplier(rules)

    if player_hand.is_busted:
        return Outcome.LOSE, Decimal("0")

    if dealer_hand.is_busted:
        return Outcome.WIN, stake * 2

    if player_hand.value > dealer_hand.value:
        return Outcome.WIN, stake * 2
    if player_hand.value < dealer_hand.value:
        return Outcome.LOSE, Decimal("0")
    return Outcome.PUSH, stake


def settle_round(
    player_hands: Sequence[Hand],
    dealer_hand: Hand,
    wager: Decimal,
    doubled_bets: Sequence[bool],
    rules: RuleSet | None = None,
) -> tuple[SettlementResult, ...]:
    """
    Settle every player hand against the dealer hand.

    Args:
        player_hands: Player hands in table order
        dealer_hand: The finished dealer hand
        wager: Base wager per hand
        doubled_bets: Parallel flags; a doubled hand stakes twice the wager
        rules: Table rules

    Returns:
        One result per hand, in hand order
    """
    if len(player_hands) != len(doubled_bets):
        raise InvalidArgumentError(
            "doubled_bets must have one entry per player hand"
        )

    results = []
    for i, (hand, doubled) in enumerate(zip(player_hands, doubled_bets)):
        stake = wager * 2 if doubled else wager
        outcome, payout = settle_hand(hand, dealer_hand, stake, rules)
        logger.debug("hand %d: %s, stake %s, payout %s", i, outcome, stake, payout)
        results.append(
            SettlementResult(
                hand_index=i,
                outcome=outcome,
                stake=stake,
                payout=payout,
            )
        )
    return tuple(results)


def max_win(wager: Decimal | int | float, rules: RuleSet | None = None) -> Decimal:
    """Return the largest payout a single undoubled wager can return."""
    rules = rules or RuleSet()
    return Decimal(str(wager)) * _payout_multiplier(rules)
