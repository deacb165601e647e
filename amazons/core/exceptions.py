"""
Custom exceptions used across layers.

NOTE: None of these derive from ValueError. Pydantic wraps a ValueError raised inside a validator into a ValidationError,
we want the domain error to reach the caller as is.
"""


class AmazonsError(Exception):
    """Base class for everything the engine (or the layers around it) raises on purpose."""


class IndexOutOfRangeError(AmazonsError):
    """A linear board index that does not decode into a (row, col) pair."""


class InvalidBoardError(AmazonsError):
    """Board snapshot cannot be constructed from the supplied cells."""


class InvalidMessageError(AmazonsError):
    """Incoming message from the game server is malformed."""


class GameStateError(AmazonsError):
    """The service was asked to do something its current state does not allow."""
