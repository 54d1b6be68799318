"""The king and its castling rules."""

from __future__ import annotations

from typing import Any, ClassVar

from .enums import ActionType, LetterIndex
from .move import Action, Move
from .position import MoveVector, Position
from .units import Rook, Unit

_LONG_CASTLE_PASSAGE = (LetterIndex.B, LetterIndex.C, LetterIndex.D)
_SHORT_CASTLE_PASSAGE = (LetterIndex.F, LetterIndex.G)


class King(Unit):
    """Moves one square in any direction and may castle with an unmoved rook."""

    is_king: ClassVar[bool] = True

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        return [
            [MoveVector(column, row)]
            for column in (-1, 0, 1)
            for row in (-1, 0, 1)
            if (column, row) != (0, 0)
        ]

    def legal_moves(self, state: Any) -> list[Move]:
        """Return the king's moves to unattacked squares, plus any castles."""
        moves = [
            move
            for move in self.legal_moves_assume_no_check(state)
            if not state.is_attacked(move.target_field, self.color)
        ]
        if not state.has_moved(self) and not state.is_check(self.color):
            moves.extend(self._castling_moves(state))
        return moves

    def _castling_moves(self, state: Any) -> list[Move]:
        board = state.board
        current = board.field_of(self)
        moves = []
        for rook_field in board.fields:
            rook = rook_field.unit
            if rook is None or rook.color != self.color:
                continue
            if not isinstance(rook, Rook) or state.has_moved(rook):
                continue

            column = rook_field.position.letter
            if column == LetterIndex.A:
                passage, target_column = _LONG_CASTLE_PASSAGE, LetterIndex.C
            elif column == LetterIndex.H:
                passage, target_column = _SHORT_CASTLE_PASSAGE, LetterIndex.G
            else:
                continue

            row = rook_field.position.number
            between = (board.field_at(Position(letter, row)) for letter in passage)
            if any(
                field.is_occupied() or state.is_attacked(field, self.color)
                for field in between
            ):
                continue

            target = board.field_at(Position(target_column, current.position.number))
            move = Move(current, target)
            move.action = Action(ActionType.CASTLE, rook_field)
            moves.append(move)
        return moves