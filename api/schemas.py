"""Pydantic schemas for API requests and responses."""

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class NewRoundRequest(BaseModel):
    """Request to deal a new round."""

    wager: Decimal = Field(..., description="Base wager per hand")


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand", "double", "split"]


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    value: int


class HandResponse(BaseModel):
    """Hand representation."""

    cards: list[CardResponse]
    score: int
    is_soft: bool
    is_blackjack: bool
    is_busted: bool
    doubled: bool = False


class SettlementResponse(BaseModel):
    """Settled result of one hand."""

    hand_index: int
    outcome: Literal["win", "lose", "push", "blackjack"]
    stake: Decimal
    payout: Decimal


class RoundResponse(BaseModel):
    """Current round state."""

    round_id: str
    phase: Literal["playing", "dealer_turn", "complete"]
    is_player_turn: bool
    wager: Decimal
    player_hands: list[HandResponse]
    current_hand_index: int
    dealer_upcard: CardResponse
    dealer_hand: HandResponse | None
    can_hit: bool
    can_stand: bool
    can_double: bool
    can_split: bool
    results: list[SettlementResponse]
    total_payout: Decimal | None


class MaxWinResponse(BaseModel):
    """Largest payout for a wager."""

    wager: Decimal
    max_win: Decimal
    theoretical_rtp: Decimal
