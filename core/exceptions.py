"""Errors raised by the blackjack round engine."""


class BlackjackError(Exception):
    """Base class for round engine errors."""


class InvalidArgumentError(BlackjackError, ValueError):
    """Malformed input when constructing a round (e.g. non-positive wager)."""


class IllegalActionError(BlackjackError):
    """An action invoked outside its phase or without its preconditions."""
