"""Round phase enumeration."""

from enum import Enum


class Phase(Enum):
    """
    Round state machine phases.

    Flow: PLAYING → DEALER_TURN → COMPLETE. A round dealt a player natural
    starts in DEALER_TURN.
    """

    # Player acting on the current hand
    PLAYING = "playing"

    # All player hands resolved, dealer draws next
    DEALER_TURN = "dealer_turn"

    # Settled; no further actions
    COMPLETE = "complete"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Machine trigger -> (source, dest). The only legal phase moves.
PHASE_TRIGGERS: dict[str, tuple[Phase, Phase]] = {
    "player_done": (Phase.PLAYING, Phase.DEALER_TURN),
    "dealer_done": (Phase.DEALER_TURN, Phase.COMPLETE),
}
