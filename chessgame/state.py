"""The state of a game: board, move history, captures, turn and conclusion."""

from __future__ import annotations

from typing import Any

from .board import Board
from .enums import ActionType, CastleType, Conclusion, LetterIndex, NumberIndex, PlayerColor
from .exceptions import GameAlreadyFinishedError, IllegalMoveError, StateIntegrityError
from .field import Field
from .move import Action, Move
from .pawn import Pawn
from .position import Position
from .units import Queen

_FIFTY_MOVE_LIMIT = 50
_CASTLE_ROWS = {PlayerColor.WHITE: NumberIndex.ONE, PlayerColor.BLACK: NumberIndex.EIGHT}
_PROMOTION_ROWS = {PlayerColor.WHITE: NumberIndex.EIGHT, PlayerColor.BLACK: NumberIndex.ONE}
_ROOK_CASTLE_TARGETS = {
    CastleType.SHORT_CASTLE: LetterIndex.F,
    CastleType.LONG_CASTLE: LetterIndex.D,
}


class State:
    """Board, move history, captured units, turn and conclusion of one game."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = Board() if board is None else board
        self._move_history: list[Move] = []
        self._taken_pieces: list[Any] = []
        self._fifty_move_rule_counter = 0
        self._conclusion = Conclusion.IN_PROGRESS
        self._turn = PlayerColor.WHITE

    @property
    def turn(self) -> PlayerColor:
        """Colour of the player whose move it is."""
        return self._turn

    @property
    def conclusion(self) -> Conclusion:
        """How the game stands or how it has ended."""
        return self._conclusion

    @property
    def move_history(self) -> tuple[Move, ...]:
        """Moves made so far, oldest first."""
        return tuple(self._move_history)

    @property
    def taken_pieces(self) -> tuple[Any, ...]:
        """Units captured so far, in the order they were taken."""
        return tuple(self._taken_pieces)

    @property
    def fifty_move_rule_counter(self) -> int:
        """Half moves since the last pawn move or capture."""
        return self._fifty_move_rule_counter

    def conclude(self, conclusion: Conclusion) -> None:
        """End the game with ``conclusion``.

        Raises GameAlreadyFinishedError if the game has already ended.
        """
        if self._conclusion is not Conclusion.IN_PROGRESS:
            raise GameAlreadyFinishedError("Cannot conclude a game that has already ended")
        self._conclusion = conclusion

    def has_concluded(self) -> bool:
        """Return True once the game has ended."""
        return self._conclusion is not Conclusion.IN_PROGRESS

    def make_move(self, move: Move) -> None:
        """Carry out ``move``, check for the end of the game and pass the turn.

        Raises GameAlreadyFinishedError if the game has already ended.
        """
        if self.has_concluded():
            raise GameAlreadyFinishedError(
                "Cannot register a move in a game that has concluded"
            )
        self._move_history.append(move)
        self._perform_action(move)
        self._move_unit_between_fields(move)
        self._conclude_if_applicable(move)
        if self.has_concluded():
            return
        self._turn = self._turn.opposite()

    def legal_moves(self, color: PlayerColor | None = None) -> list[Move]:
        """Return the legal moves of ``color``, by default of the player to move."""
        if color is None:
            color = self._turn
        return [
            move
            for field in self.board.fields
            if field.is_occupied_by_ally(color)
            for move in field.unit.legal_moves(self)
        ]

    def is_check(self, color: PlayerColor | None = None) -> bool:
        """Return True if the king of ``color`` (default: player to move) is attacked."""
        if color is None:
            color = self._turn
        return self.is_attacked(self.board.king_field(color), color)

    def is_attacked(self, field: Field | None, defender: PlayerColor) -> bool:
        """Return True if any unit not of ``defender``'s colour covers ``field``."""
        if field is None:
            raise ValueError("Field cannot be None")
        return any(
            move.target_field is field
            for attacker in self.board.units()
            if attacker.color != defender
            for move in attacker.attack_coverage(self)
        )

    def last_move(self) -> Move | None:
        """Return the most recent move, or None before the first move."""
        return self._move_history[-1] if self._move_history else None

    def has_moved(self, unit: Any) -> bool:
        """Return True if ``unit`` has made a move in this game."""
        return any(move.moved_unit is unit for move in self._move_history)

    def _perform_action(self, move: Move) -> None:
        action = move.action
        if action is None:
            return
        if action.type is ActionType.CAPTURE:
            self._taken_pieces.append(action.field.unit)
            action.field.unit = None
        elif action.type is ActionType.CASTLE:
            self._move_rook_to_castle(action)

    def _move_unit_between_fields(self, move: Move) -> None:
        if move.target_field.is_occupied():
            raise StateIntegrityError("Field has to be empty after an action is performed")
        move.target_field.unit = move.moved_unit
        move.current_field.unit = None
        if self._is_pawn_promotion(move):
            self._promote_pawn(move)

    @staticmethod
    def _is_pawn_promotion(move: Move) -> bool:
        unit = move.moved_unit
        if not isinstance(unit, Pawn):
            return False
        return move.target_field.position.number == _PROMOTION_ROWS[unit.color]

    @staticmethod
    def _promote_pawn(move: Move) -> None:
        pawn = move.target_field.unit
        if not isinstance(pawn, Pawn):
            raise IllegalMoveError("Cannot promote a Unit that isn't a Pawn")
        move.target_field.unit = Queen(pawn.color)

    def _move_rook_to_castle(self, action: Action) -> None:
        rook_field = action.field
        target = self._rook_castle_target_field(rook_field)
        target.unit = rook_field.unit
        rook_field.unit = None

    def _rook_castle_target_field(self, rook_field: Field) -> Field:
        row = rook_field.position.number
        if row != _CASTLE_ROWS[rook_field.unit.color]:
            raise IllegalMoveError("Rook is not in correct position to castle.")
        castle_type = self._castle_type_by_column(rook_field.position.letter)
        return self.board.field_at(Position(_ROOK_CASTLE_TARGETS[castle_type], row))

    @staticmethod
    def _castle_type_by_column(column: LetterIndex) -> CastleType:
        if column == LetterIndex.A:
            return CastleType.LONG_CASTLE
        if column == LetterIndex.H:
            return CastleType.SHORT_CASTLE
        raise IllegalMoveError("Rook is not in correct position to castle.")

    def _is_fifty_move_rule_draw(self, move: Move) -> bool:
        self._fifty_move_rule_counter += 1
        if isinstance(move.moved_unit, Pawn):
            self._fifty_move_rule_counter = 0
        if move.action is not None and move.action.type is ActionType.CAPTURE:
            self._fifty_move_rule_counter = 0
        return self._fifty_move_rule_counter >= _FIFTY_MOVE_LIMIT

    def _conclude_if_applicable(self, move: Move) -> None:
        if self._is_fifty_move_rule_draw(move):
            self.conclude(Conclusion.FIFTY_MOVES_DRAW)
        elif self._is_checkmate():
            self.conclude(
                Conclusion.WHITE_WINS
                if self._turn is PlayerColor.WHITE
                else Conclusion.BLACK_WINS
            )
        elif self._is_stalemate():
            self.conclude(Conclusion.STALEMATE)
        elif self._is_insufficient_material():
            self.conclude(Conclusion.INSUFFICIENT_MATERIAL_DRAW)
        elif self._is_draw_by_repetition():
            self.conclude(Conclusion.REPETITION_DRAW)

    def _is_checkmate(self) -> bool:
        color = self._turn.opposite()
        king_field = self.board.king_field(color)
        if king_field.unit.legal_moves(self):
            return False
        return self.is_attacked(king_field, color)

    def _is_stalemate(self) -> bool:
        color = self._turn.opposite()
        if self.legal_moves(color):
            return False
        return not self.is_attacked(self.board.king_field(color), color)

    def _is_insufficient_material(self) -> bool:
        return False

    def _is_draw_by_repetition(self) -> bool:
        return False