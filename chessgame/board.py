"""The chess board: sixty-four fields and the units standing on them."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .enums import LetterIndex, NumberIndex, PlayerColor
from .exceptions import StateIntegrityError
from .field import Field
from .king import King
from .pawn import Pawn
from .position import Position
from .units import Bishop, Knight, Queen, Rook, Unit

_BACK_RANK = (Rook, Knight, Bishop, Queen, King, Bishop, Knight, Rook)


class Board:
    """A board holding one field for every square.

    Without ``fields`` the board is set up for the start of a game. Given
    fields are kept as they are and the squares they miss are added empty.
    """

    def __init__(self, fields: Iterable[Field] | None = None) -> None:
        if fields is None:
            self.fields = self._fill_missing([])
            self._place_default_units()
        else:
            self.fields = self._fill_missing(list(fields))

    @staticmethod
    def _fill_missing(fields: list[Field]) -> list[Field]:
        present = {field.position for field in fields}
        for number in NumberIndex:
            for letter in LetterIndex:
                position = Position(letter, number)
                if position not in present:
                    fields.append(Field(position))
                    present.add(position)
        return fields

    def _place_default_units(self) -> None:
        for color, back_row, pawn_row in (
            (PlayerColor.WHITE, NumberIndex.ONE, NumberIndex.TWO),
            (PlayerColor.BLACK, NumberIndex.EIGHT, NumberIndex.SEVEN),
        ):
            for letter, unit_type in zip(LetterIndex, _BACK_RANK):
                self.field_at(Position(letter, back_row)).unit = unit_type(color)
                self.field_at(Position(letter, pawn_row)).unit = Pawn(color)

    def field_at(self, position: Position) -> Field | None:
        """Return the field at ``position``, or None if there is none."""
        return next((field for field in self.fields if field.position == position), None)

    def field_of(self, unit: Any) -> Field | None:
        """Return the field on which ``unit`` stands, or None."""
        return next((field for field in self.fields if field.unit is unit), None)

    def units(self) -> list[Unit]:
        """Return every unit on the board, in field order."""
        return [field.unit for field in self.fields if field.unit is not None]

    def king_field(self, color: PlayerColor) -> Field:
        """Return the field of the king of ``color``.

        Raises StateIntegrityError if that king is not on the board.
        """
        for field in self.fields:
            unit = field.unit
            if unit is not None and unit.color == color and isinstance(unit, King):
                return field
        raise StateIntegrityError(
            f"There is no king of color {color.name} present on the board"
        )