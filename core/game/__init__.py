"""Round engine and state management."""

from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import Phase
from core.game.dealer import dealer_should_hit, play_dealer_hand
from core.game.settlement import (
    THEORETICAL_RTP,
    Outcome,
    SettlementResult,
    max_win,
    settle_hand,
    settle_round,
)
from core.game.engine import (
    RoundState,
    double,
    hit,
    initialize,
    play_dealer_turn,
    split,
    stand,
)

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "Phase",
    "dealer_should_hit",
    "play_dealer_hand",
    "THEORETICAL_RTP",
    "Outcome",
    "SettlementResult",
    "max_win",
    "settle_hand",
    "settle_round",
    "RoundState",
    "initialize",
    "hit",
    "stand",
    "double",
    "split",
    "play_dealer_turn",
]
