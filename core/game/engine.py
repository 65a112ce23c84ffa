"""Blackjack round engine with state machine."""

import logging
from decimal import Decimal
from random import Random
from typing import NoReturn

from transitions import Machine

from core.cards import Card, Deck, create_shuffled_deck
from core.exceptions import IllegalActionError, InvalidArgumentError
from core.game.dealer import play_dealer_hand
from core.game.events import EventEmitter, EventType
from core.game.settlement import SettlementResult, settle_round
from core.game.state import PHASE_TRIGGERS, Phase
from core.hand import Hand, can_double, can_split
from core.rules import RuleSet

logger = logging.getLogger(__name__)


def _coerce_wager(wager: object) -> Decimal:
    """Validate a wager and return it as a Decimal."""
    if isinstance(wager, bool) or not isinstance(wager, (int, float, Decimal)):
        raise InvalidArgumentError(
            f"wager must be a number, got {type(wager).__name__}"
        )
    amount = Decimal(str(wager))
    if not amount.is_finite() or amount <= 0:
        raise InvalidArgumentError("wager must be greater than zero")
    return amount


class RoundState:
    """
    One blackjack round, from the initial deal to settlement.

    The round owns its deck and hands and is mutated in place by each
    action. Every action validates its preconditions before touching any
    state, so a rejected action leaves the round exactly as it was.
    Once the phase is COMPLETE the round is read-only.
    """

    # State machine states
    STATES = [p.value for p in Phase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": trigger, "source": source.value, "dest": dest.value}
        for trigger, (source, dest) in PHASE_TRIGGERS.items()
    ]

    def __init__(
        self,
        wager: Decimal | int | float,
        rules: RuleSet | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Deal a new round.

        Args:
            wager: Base wager per hand, must be positive
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible shuffles
            deck: Pre-built deck to draw from instead of a fresh shuffled one
            events: Emitter to publish round events on
        """
        self.wager = _coerce_wager(wager)
        self.rules = rules or RuleSet()
        self.deck = deck if deck is not None else create_shuffled_deck(
            num_packs=self.rules.num_decks, rng=rng
        )
        self.events = events or EventEmitter()

        self.player_hands: list[Hand] = [Hand()]
        self.dealer_hand = Hand()
        self.current_hand_index = 0
        self.doubled_bets: list[bool] = [False]
        self._results: tuple[SettlementResult, ...] = ()

        player_hand = self.player_hands[0]
        self._deal_card_to_hand(player_hand, "player")
        self._deal_card_to_hand(player_hand, "player")
        self._deal_card_to_hand(self.dealer_hand, "dealer")
        self._deal_card_to_hand(self.dealer_hand, "dealer", face_up=False)

        initial = Phase.PLAYING
        if player_hand.is_blackjack:
            # Nothing to decide; go straight to the dealer
            initial = Phase.DEALER_TURN

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=initial.value,
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.events.emit_new(
            EventType.ROUND_STARTED,
            wager=str(self.wager),
            phase=self.phase.value,
        )
        if player_hand.is_blackjack:
            self.events.emit_new(EventType.PLAYER_BLACKJACK, hand_index=0)

        logger.info(
            "round started: wager=%s player=%s phase=%s",
            self.wager,
            player_hand,
            self.phase.value,
        )

    @property
    def phase(self) -> Phase:
        """Get current phase as enum."""
        return Phase(self._machine_state)  # type: ignore[attr-defined]

    @property
    def is_player_turn(self) -> bool:
        """Check if the player has an action to take."""
        return self.phase is Phase.PLAYING

    @property
    def current_hand(self) -> Hand | None:
        """Get the hand the player is acting on, if any."""
        if not self.is_player_turn:
            return None
        return self.player_hands[self.current_hand_index]

    @property
    def results(self) -> tuple[SettlementResult, ...]:
        """Settlement results; empty until the round is complete."""
        return self._results

    @property
    def total_payout(self) -> Decimal:
        """Return the sum of all hand payouts."""
        return sum((r.payout for r in self._results), Decimal("0"))

    @property
    def total_staked(self) -> Decimal:
        """Return the total wagered across all hands, doubles included."""
        return sum(
            (self.wager * 2 if d else self.wager for d in self.doubled_bets),
            Decimal("0"),
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.is_player_turn

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.is_player_turn

    @property
    def can_double(self) -> bool:
        """Check if doubling is allowed."""
        hand = self.current_hand
        return hand is not None and can_double(hand)

    @property
    def can_split(self) -> bool:
        """Check if splitting is allowed."""
        hand = self.current_hand
        if hand is None or not can_split(hand):
            return False
        return not self._split_cap_reached()

    def _split_cap_reached(self) -> bool:
        cap = self.rules.max_split_hands
        return cap is not None and len(self.player_hands) >= cap

    def _reject(self, action: str, message: str) -> NoReturn:
        """Publish and raise an illegal action."""
        self.events.emit_new(
            EventType.INVALID_ACTION,
            action=action,
            message=message,
            phase=self.phase.value,
        )
        logger.debug("rejected %s: %s", action, message)
        raise IllegalActionError(message)

    def _require_player_turn(self, action: str) -> Hand:
        if self.phase is not Phase.PLAYING:
            self._reject(action, f"Cannot {action}: not the player's turn")
        return self.player_hands[self.current_hand_index]

    def _deal_card_to_hand(self, hand: Hand, owner: str, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self.deck.draw()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=owner,
            hand_value=hand.value if face_up else None,
        )
        return card

    def hit(self) -> "RoundState":
        """Player takes another card on the current hand."""
        hand = self._require_player_turn("hit")

        self._deal_card_to_hand(hand, "player")
        self.events.emit_new(
            EventType.PLAYER_HIT,
            hand_index=self.current_hand_index,
            hand_value=hand.value,
        )

        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_index=self.current_hand_index)
            self._advance_to_next_hand()

        return self

    def stand(self) -> "RoundState":
        """Player keeps the current hand."""
        hand = self._require_player_turn("stand")

        self.events.emit_new(
            EventType.PLAYER_STAND,
            hand_index=self.current_hand_index,
            hand_value=hand.value,
        )
        self._advance_to_next_hand()
        return self

    def double_down(self) -> "RoundState":
        """Double the current hand's wager, take exactly one card, and end the hand."""
        hand = self._require_player_turn("double")
        if not can_double(hand):
            self._reject("double", "double only allowed with 2 cards")

        self.doubled_bets[self.current_hand_index] = True
        self._deal_card_to_hand(hand, "player")
        self.events.emit_new(
            EventType.PLAYER_DOUBLE,
            hand_index=self.current_hand_index,
            hand_value=hand.value,
            stake=str(self.wager * 2),
        )

        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_index=self.current_hand_index)

        self._advance_to_next_hand()
        return self

    def split(self) -> "RoundState":
        """
        Split the current pair into two hands.

        The first new hand takes the original position and the second is
        inserted right after it; each is completed with one card. The player
        keeps acting on the first new hand.
        """
        hand = self._require_player_turn("split")
        if not can_split(hand):
            self._reject("split", "split only allowed with a pair of equal value")
        if self._split_cap_reached():
            self._reject("split", "maximum split hands reached")

        index = self.current_hand_index
        first = Hand(cards=[hand.cards[0]], is_split_hand=True)
        second = Hand(cards=[hand.cards[1]], is_split_hand=True)
        self._deal_card_to_hand(first, "player")
        self._deal_card_to_hand(second, "player")

        self.player_hands[index:index + 1] = [first, second]
        self.doubled_bets[index:index + 1] = [False, False]

        self.events.emit_new(
            EventType.PLAYER_SPLIT,
            hand_index=index,
            hand1_value=first.value,
            hand2_value=second.value,
            num_hands=len(self.player_hands),
        )
        return self

    def _advance_to_next_hand(self) -> None:
        """Move to the next hand or to the dealer's turn."""
        if self.current_hand_index + 1 < len(self.player_hands):
            self.current_hand_index += 1
            logger.debug("advancing to hand %d", self.current_hand_index)
            return

        self.player_done()  # type: ignore[attr-defined]
        logger.debug("player turn over, %d hand(s)", len(self.player_hands))

    def play_dealer_turn(self) -> "RoundState":
        """Run the dealer procedure, settle every hand, and complete the round."""
        if self.phase is not Phase.DEALER_TURN:
            self._reject("play_dealer_turn", "Cannot play dealer turn: not the dealer's turn")

        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(self.dealer_hand.cards[1]),
            hand_value=self.dealer_hand.value,
        )

        def on_draw(card: Card) -> None:
            self.events.emit_new(
                EventType.DEALER_HITS,
                card=str(card),
                hand_value=self.dealer_hand.value,
            )

        play_dealer_hand(self.dealer_hand, self.deck, self.rules, on_draw=on_draw)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

        self._results = settle_round(
            self.player_hands,
            self.dealer_hand,
            self.wager,
            self.doubled_bets,
            self.rules,
        )
        for result in self._results:
            self.events.emit_new(
                EventType.HAND_SETTLED,
                hand_index=result.hand_index,
                outcome=result.outcome.value,
                payout=str(result.payout),
            )

        self.dealer_done()  # type: ignore[attr-defined]

        self.events.emit_new(
            EventType.ROUND_ENDED,
            total_staked=str(self.total_staked),
            total_payout=str(self.total_payout),
        )
        logger.info(
            "round complete: dealer=%s staked=%s payout=%s",
            self.dealer_hand,
            self.total_staked,
            self.total_payout,
        )
        return self


def initialize(
    wager: Decimal | int | float,
    rules: RuleSet | None = None,
    rng: Random | None = None,
    deck: Deck | None = None,
    events: EventEmitter | None = None,
) -> RoundState:
    """Deal a new round. Raises InvalidArgumentError for a non-positive wager."""
    return RoundState(wager, rules=rules, rng=rng, deck=deck, events=events)


def hit(state: RoundState) -> RoundState:
    """Hit the current hand."""
    return state.hit()


def stand(state: RoundState) -> RoundState:
    """Stand on the current hand."""
    return state.stand()


def double(state: RoundState) -> RoundState:
    """Double down on the current hand."""
    return state.double_down()


def split(state: RoundState) -> RoundState:
    """Split the current pair."""
    return state.split()


def play_dealer_turn(state: RoundState) -> RoundState:
    """Play the dealer's hand and settle the round."""
    return state.play_dealer_turn()
