"""The pawn, with its forward steps, diagonal captures and en passant."""

from __future__ import annotations

from typing import Any

from .enums import ActionType, NumberIndex, PlayerColor
from .king import King
from .move import Action, Move
from .position import MoveVector
from .units import Unit


class Pawn(Unit):
    """Steps forward, captures diagonally and may take en passant."""

    def __init__(self, color: PlayerColor) -> None:
        super().__init__(color)
        self.promotion_row = (
            NumberIndex.EIGHT if color is PlayerColor.WHITE else NumberIndex.ONE
        )

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        if self.color is PlayerColor.WHITE:
            return [
                [MoveVector(0, 1), MoveVector(0, 2)],
                [MoveVector(-1, 1)],
                [MoveVector(1, 1)],
            ]
        return [
            [MoveVector(0, -1), MoveVector(0, -2)],
            [MoveVector(1, -1)],
            [MoveVector(-1, -1)],
        ]

    def legal_moves(self, state: Any) -> list[Move]:
        """Return forward steps, diagonal captures and en passant captures."""
        moves: list[Move] = []
        current = self.current_field(state)
        position = current.position

        for branch in self.branches_of_move_vectors():
            for vector in branch:
                target_position = position.apply_move_vector(vector)
                if target_position is None:
                    continue
                target = state.board.field_at(target_position)

                if target_position.letter == position.letter:
                    if target.is_occupied():
                        break
                    double_step = abs(position.number - target_position.number) == 2
                    if not double_step or not state.has_moved(self):
                        moves.append(Move(current, target))
                    continue

                if target.is_occupied():
                    if target.is_occupied_by_enemy(self) and not isinstance(target.unit, King):
                        move = Move(current, target)
                        move.action = Action(ActionType.CAPTURE, target)
                        moves.append(move)
                else:
                    en_passant = self._en_passant(state, current, target)
                    if en_passant is not None:
                        moves.append(en_passant)
        return moves

    def _en_passant(self, state: Any, current: Any, target: Any) -> Move | None:
        last = state.last_move()
        if last is None:
            return None
        enemy = last.moved_unit
        if not isinstance(enemy, Pawn) or enemy.color == self.color:
            return None
        enemy_position = last.target_field.position
        white = self.color is PlayerColor.WHITE
        if enemy_position.number != (NumberIndex.FIVE if white else NumberIndex.FOUR):
            return None
        if enemy_position.letter != target.position.letter:
            return None
        row_offset = -1 if white else 1
        if target.position.number + row_offset != enemy_position.number:
            return None
        move = Move(current, target)
        move.action = Action(ActionType.CAPTURE, last.target_field)
        return move

    def attack_coverage(self, state: Any) -> list[Move]:
        """Return only the diagonal moves: a pawn never attacks straight ahead."""
        return [
            move
            for move in super().attack_coverage(state)
            if move.target_field.position.letter != move.current_field.position.letter
        ]