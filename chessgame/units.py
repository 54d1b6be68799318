"""Chess units and the move generation they share."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from .enums import ActionType, PlayerColor
from .field import Field
from .move import Action, Move
from .position import MoveVector, Position

_MAX_DISTANCE = 7


def _ray(column_step: int, row_step: int) -> list[MoveVector]:
    return [
        MoveVector(column_step * distance, row_step * distance)
        for distance in range(1, _MAX_DISTANCE + 1)
    ]


def _is_king(unit: Any) -> bool:
    return unit is not None and getattr(unit, "is_king", False)


class Unit(ABC):
    """A unit of one colour standing on the board.

    Units compare by identity: the board finds a unit's field by the unit itself.
    """

    is_king: ClassVar[bool] = False

    def __init__(self, color: PlayerColor) -> None:
        self.color = color

    @abstractmethod
    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        """Return the move vectors of this unit, one list per direction.

        Within a direction the vectors are ordered by distance, so a blocked
        square ends the rest of its branch.
        """

    def legal_moves(self, state: Any) -> list[Move]:
        """Return the moves this unit may make in ``state``.

        A unit has no moves when it is not its colour's turn.
        """
        if state.turn != self.color:
            return []
        if state.is_check(self.color):
            return self.check_breaking_moves(state)
        return self.legal_moves_assume_no_check(state)

    def legal_moves_assume_no_check(self, state: Any) -> list[Move]:
        """Return the moves of this unit, ignoring whether its king is in check."""
        return [
            move
            for branch in self.move_branches_including_occupied(state)
            for move in branch
            if not move.target_field.is_occupied_by_ally(self.color)
            and not _is_king(move.target_field.unit)
        ]

    def attack_coverage(self, state: Any) -> list[Move]:
        """Return every move reaching a field this unit attacks or defends."""
        return [
            move
            for branch in self.move_branches_including_occupied(state)
            for move in branch
        ]

    def check_breaking_moves(self, state: Any) -> list[Move]:
        """Return the moves that lift a check; none are generated yet."""
        return []

    def current_field(self, state: Any) -> Field | None:
        """Return the field of the board in ``state`` on which this unit stands."""
        return state.board.field_of(self)

    def position_branches(self, state: Any) -> list[list[Position]]:
        """Return the on-board positions reachable along each direction."""
        current = self.current_field(state).position
        branches = []
        for vectors in self.branches_of_move_vectors():
            targets = (current.apply_move_vector(vector) for vector in vectors)
            branches.append([position for position in targets if position is not None])
        return branches

    def move_branches_including_occupied(self, state: Any) -> list[list[Move]]:
        """Return moves along each direction up to and including the first occupied field.

        A move onto an enemy unit carries a capture action; a move onto an
        ally is kept as well, since it counts as covered.
        """
        current = self.current_field(state)
        branches = []
        for positions in self.position_branches(state):
            branch = []
            for position in positions:
                target = state.board.field_at(position)
                move = Move(current, target)
                if target.is_occupied_by_enemy(self):
                    move.action = Action(ActionType.CAPTURE, target)
                branch.append(move)
                if target.is_occupied():
                    break
            branches.append(branch)
        return branches

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name})"


class Bishop(Unit):
    """Moves diagonally any number of squares."""

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        return [_ray(1, 1), _ray(1, -1), _ray(-1, 1), _ray(-1, -1)]


class Knight(Unit):
    """Jumps in an L shape: two squares one way and one square across."""

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        jumps = [(2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1)]
        return [[MoveVector(column, row)] for column, row in jumps]


class Queen(Unit):
    """Moves along rows, columns and diagonals any number of squares."""

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        return [
            _ray(1, 1),
            _ray(1, -1),
            _ray(-1, 1),
            _ray(-1, -1),
            _ray(1, 0),
            _ray(0, -1),
            _ray(0, 1),
            _ray(-1, 0),
        ]


class Rook(Unit):
    """Moves along rows and columns any number of squares."""

    def branches_of_move_vectors(self) -> list[list[MoveVector]]:
        return [_ray(1, 0), _ray(0, -1), _ray(0, 1), _ray(-1, 0)]