"""Board coordinates and relative move vectors."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import LetterIndex, NumberIndex


@dataclass(frozen=True)
class MoveVector:
    """Relative displacement given as a column offset and a row offset."""

    column_offset: int
    row_offset: int


@dataclass(frozen=True)
class Position:
    """A square of the board, given by its column and its row."""

    letter: LetterIndex
    number: NumberIndex

    def __post_init__(self) -> None:
        object.__setattr__(self, "letter", LetterIndex(self.letter))
        object.__setattr__(self, "number", NumberIndex(self.number))

    def apply_move_vector(self, vector: MoveVector | None) -> Position | None:
        """Return the position shifted by ``vector``, or None if it leaves the board."""
        if vector is None:
            return None
        column = self.letter + vector.column_offset
        row = self.number + vector.row_offset
        if 0 <= column <= 7 and 0 <= row <= 7:
            return Position(LetterIndex(column), NumberIndex(row))
        return None

    def __str__(self) -> str:
        return f"{self.letter.name}{self.number + 1}"