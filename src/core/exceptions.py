"""
Custom exceptions shared by all layers.

Everything raised on purpose inherits from GameError, so the shell / service can catch a single type
and report the message back to the player without crashing.
"""

from enum import StrEnum


class GameError(Exception):
    """Top-level error for anything that went wrong while handling a game."""


class ParseError(GameError):
    """A square name could not be interpreted, ex. 'A', '1A', 'B0'."""


class MoveErrorKind(StrEnum):
    OUT_OF_BOUNDS = "out of bounds"
    SAME_SQUARE = "same square"
    EMPTY_ORIGIN = "empty origin"
    WRONG_TURN = "wrong turn"
    ILLEGAL_DESTINATION = "illegal destination"


class MoveError(GameError):
    """A proposed move was rejected. The board is left untouched."""

    kind: MoveErrorKind


class OutOfBoundsError(MoveError):
    kind = MoveErrorKind.OUT_OF_BOUNDS


class SameSquareError(MoveError):
    kind = MoveErrorKind.SAME_SQUARE


class EmptyOriginError(MoveError):
    kind = MoveErrorKind.EMPTY_ORIGIN


class NotYourTurnError(MoveError):
    kind = MoveErrorKind.WRONG_TURN


class IllegalMoveError(MoveError):
    kind = MoveErrorKind.ILLEGAL_DESTINATION


class GameStateError(GameError):
    """Request does not fit the current status of the game (ex. moving after the game has ended)."""


class InvalidRequestError(GameError):
    """Raised by the request validators of the boundary layer."""


class RepositoryError(GameError):
    """Record could not be found / stored."""
