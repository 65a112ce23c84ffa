"""Dealer drawing procedure."""

import logging
from typing import Callable

from core.cards import Card, Deck
from core.hand import Hand
from core.rules import RuleSet

logger = logging.getLogger(__name__)

DEALER_STAND_TOTAL = 17


def dealer_should_hit(hand: Hand, rules: RuleSet | None = None) -> bool:
    """Determine if the dealer draws another card."""
    rules = rules or RuleSet()
    value = hand.value
    if value < DEALER_STAND_TOTAL:
        return True
    if value == DEALER_STAND_TOTAL and hand.is_soft and rules.dealer_hits_soft_17:
        return True
    return False


def play_dealer_hand(
    hand: Hand,
    deck: Deck,
    rules: RuleSet | None = None,
    on_draw: Callable[[Card], None] | None = None,
) -> int:
    """
    Draw onto the dealer hand until it stands.

    Each draw consumes exactly one card and rescoring never lowers the total,
    so the loop ends within the remaining deck size.

    Args:
        hand: The dealer hand, mutated in place
        deck: The shared draw pile
        rules: Table rules (soft 17 stands unless ``dealer_hits_soft_17``)
        on_draw: Called with each card after it is added

    Returns:
        Number of cards drawn
    """
    rules = rules or RuleSet()
    draws = 0
    while dealer_should_hit(hand, rules):
        card = deck.draw()
        hand.add_card(card)
        draws += 1
        logger.debug("dealer draws %s, total %d", card, hand.value)
        if on_draw is not None:
            on_draw(card)
    return draws
