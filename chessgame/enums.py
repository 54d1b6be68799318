"""Enumerations shared across the chess model."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class ActionType(Enum):
    """Side effect that a move carries out besides moving its unit."""

    CAPTURE = auto()
    CASTLE = auto()


class CastleType(Enum):
    """Which side of the board a castle is made towards."""

    SHORT_CASTLE = auto()
    LONG_CASTLE = auto()


class PlayerColor(Enum):
    """Colour of a player and of the units that player owns."""

    BLACK = 0
    WHITE = 1

    def opposite(self) -> PlayerColor:
        """Return the other colour."""
        return PlayerColor.BLACK if self is PlayerColor.WHITE else PlayerColor.WHITE


class PromotionType(Enum):
    """Unit a pawn may be promoted to."""

    KNIGHT = auto()
    ROOK = auto()
    QUEEN = auto()
    BISHOP = auto()


class Conclusion(Enum):
    """How a game stands or how it has ended."""

    IN_PROGRESS = auto()
    DRAW = auto()
    STALEMATE = auto()
    WHITE_WINS = auto()
    BLACK_WINS = auto()
    FIFTY_MOVES_DRAW = auto()
    INSUFFICIENT_MATERIAL_DRAW = auto()
    REPETITION_DRAW = auto()
    AGREED_DRAW = auto()


class LetterIndex(IntEnum):
    """Column of the board, from A (0) to H (7)."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7


class NumberIndex(IntEnum):
    """Row of the board, from rank one (0) to rank eight (7)."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7