"""Errors raised by the chess model."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all errors of the chess model."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class GameAlreadyFinishedError(ChessError):
    """An operation was attempted on a game that has already ended."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class IllegalMoveError(ChessError):
    """A move that is not allowed in the current state was attempted."""

    default_message = "This move cannot be performed, as it is illegal in this state."


class NoMoveToChooseFromError(ChessError):
    """A player had to pick a move but none was available."""


class StateIntegrityError(ChessError):
    """The game state is inconsistent with the rules of chess."""