"""Blackjack round API endpoints."""

from decimal import Decimal
from fastapi import APIRouter, HTTPException

from api.schemas import (
    ActionRequest,
    CardResponse,
    HandResponse,
    MaxWinResponse,
    NewRoundRequest,
    RoundResponse,
    SettlementResponse,
)
from api.session import load_round, save_round
from config import config
from core.cards import Card
from core.game import THEORETICAL_RTP, Phase, RoundState, max_win
from core.game import double, hit, initialize, play_dealer_turn, split, stand
from core.hand import Hand

router = APIRouter()

_ACTIONS = {
    "hit": hit,
    "stand": stand,
    "double": double,
    "split": split,
}


def _card_to_response(card: Card) -> CardResponse:
    """Convert a Card to CardResponse."""
    return CardResponse(rank=str(card.rank), suit=str(card.suit), value=card.value)


def _hand_to_response(hand: Hand, doubled: bool = False) -> HandResponse:
    """Convert a Hand to HandResponse."""
    return HandResponse(
        cards=[_card_to_response(c) for c in hand.cards],
        score=hand.value,
        is_soft=hand.is_soft,
        is_blackjack=hand.is_blackjack,
        is_busted=hand.is_busted,
        doubled=doubled,
    )


def _round_response(round_id: str, state: RoundState) -> RoundResponse:
    """Convert round state to response. The hole card stays hidden while the player acts."""
    dealer_hand = None
    if state.phase is not Phase.PLAYING:
        dealer_hand = _hand_to_response(state.dealer_hand)

    complete = state.phase is Phase.COMPLETE
    return RoundResponse(
        round_id=round_id,
        phase=state.phase.value,
        is_player_turn=state.is_player_turn,
        wager=state.wager,
        player_hands=[
            _hand_to_response(h, doubled)
            for h, doubled in zip(state.player_hands, state.doubled_bets)
        ],
        current_hand_index=state.current_hand_index,
        dealer_upcard=_card_to_response(state.dealer_hand.cards[0]),
        dealer_hand=dealer_hand,
        can_hit=state.can_hit,
        can_stand=state.can_stand,
        can_double=state.can_double,
        can_split=state.can_split,
        results=[
            SettlementResponse(
                hand_index=r.hand_index,
                outcome=r.outcome.value,
                stake=r.stake,
                payout=r.payout,
            )
            for r in state.results
        ],
        total_payout=state.total_payout if complete else None,
    )


async def _get_round(round_id: str) -> RoundState:
    """Look up a round or fail with 404."""
    state = await load_round(round_id)
    if state is None:
        raise HTTPException(status_code=404, detail="Round not found")
    return state


@router.post("/rounds", status_code=201)
async def new_round(request: NewRoundRequest) -> RoundResponse:
    """Deal a new round."""
    state = initialize(request.wager, rules=config.game.to_rules())
    round_id = await save_round(state)
    return _round_response(round_id, state)


@router.get("/rounds/{round_id}")
async def get_round(round_id: str) -> RoundResponse:
    """Get current round state."""
    state = await _get_round(round_id)
    return _round_response(round_id, state)


@router.post("/rounds/{round_id}/action")
async def player_action(round_id: str, request: ActionRequest) -> RoundResponse:
    """Execute a player action."""
    state = await _get_round(round_id)
    _ACTIONS[request.action](state)
    return _round_response(round_id, state)


@router.post("/rounds/{round_id}/dealer")
async def dealer_turn(round_id: str) -> RoundResponse:
    """Play the dealer's hand and settle the round."""
    state = await _get_round(round_id)
    play_dealer_turn(state)
    return _round_response(round_id, state)


@router.get("/max-win")
async def get_max_win(wager: Decimal) -> MaxWinResponse:
    """Largest payout a wager can return under the configured rules."""
    if wager <= 0:
        raise HTTPException(status_code=400, detail="wager must be greater than zero")
    return MaxWinResponse(
        wager=wager,
        max_win=max_win(wager, config.game.to_rules()),
        theoretical_rtp=THEORETICAL_RTP,
    )
