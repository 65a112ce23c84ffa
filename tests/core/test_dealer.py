"""Tests for the dealer drawing procedure."""

import pytest

from core.game import dealer_should_hit, play_dealer_hand
from core.rules import RuleSet

from conftest import hand_of, stacked_deck


class TestDealerShouldHit:
    """Tests for the dealer hit decision."""

    @pytest.mark.parametrize(
        "codes, expected",
        [
            (("10S", "6H"), True),
            (("10S", "7H"), False),
            (("AS", "5H"), True),
            (("AS", "6H"), False),
            (("10S", "6H", "5C"), False),
        ],
    )
    def test_stands_on_17(self, codes, expected):
        """Test the dealer draws below 17 and stands on any 17 by default."""
        assert dealer_should_hit(hand_of(*codes)) is expected

    def test_hits_soft_17_when_configured(self):
        """Test H17 rules draw on a soft 17 only."""
        rules = RuleSet(dealer_hits_soft_17=True)
        assert dealer_should_hit(hand_of("AS", "6H"), rules)
        assert not dealer_should_hit(hand_of("10S", "7H"), rules)


class TestPlayDealerHand:
    """Tests for the dealer draw loop."""

    def test_draws_until_17(self):
        """Test the dealer keeps drawing until reaching 17."""
        hand = hand_of("2S", "3H")
        deck = stacked_deck("2C", "4D", "3S", "5H", "KC")
        draws = play_dealer_hand(hand, deck)
        assert draws == 4
        assert hand.value == 19
        assert len(deck) == 1

    def test_no_draw_when_standing(self):
        """Test a made hand draws nothing."""
        hand = hand_of("10S", "8H")
        deck = stacked_deck("2C")
        assert play_dealer_hand(hand, deck) == 0
        assert len(deck) == 1

    def test_soft_17_stands(self):
        """Test soft 17 is not special-cased by default."""
        hand = hand_of("AS", "6H")
        deck = stacked_deck("2C")
        assert play_dealer_hand(hand, deck) == 0
        assert hand.is_soft

    def test_soft_17_hits_under_h17(self):
        """Test soft 17 draws under H17 rules."""
        hand = hand_of("AS", "6H")
        deck = stacked_deck("2C")
        assert play_dealer_hand(hand, deck, RuleSet(dealer_hits_soft_17=True)) == 1
        assert hand.value == 19

    def test_bust(self):
        """Test the dealer may bust."""
        hand = hand_of("10S", "6H")
        deck = stacked_deck("KC")
        play_dealer_hand(hand, deck)
        assert hand.is_busted

    def test_on_draw_callback(self):
        """Test every drawn card is reported in order."""
        hand = hand_of("2S", "3H")
        deck = stacked_deck("10C", "4D")
        seen = []
        play_dealer_hand(hand, deck, on_draw=seen.append)
        assert [str(c) for c in seen] == ["10♣", "4♦"]

    def test_draws_bounded_by_deck(self, deck):
        """Test the loop ends within the deck and at 17 or more."""
        hand = hand_of("2S", "2H")
        remaining = deck.cards_remaining
        draws = play_dealer_hand(hand, deck)
        assert draws <= remaining
        assert deck.cards_remaining == remaining - draws
        assert hand.value >= 17

    def test_empty_deck_is_an_error(self):
        """Test running out of cards is a hard failure."""
        hand = hand_of("2S", "3H")
        with pytest.raises(IndexError):
            play_dealer_hand(hand, stacked_deck("2C"))
