"""Moves of units between fields and the actions they carry."""

from __future__ import annotations

from typing import Any

from .enums import ActionType
from .field import Field


class Action:
    """A side effect of a move, such as a capture or the rook part of a castle."""

    def __init__(self, type: ActionType, field: Field | None) -> None:
        if field is None:
            raise ValueError("Action must have a field which it affects")
        if not field.is_occupied():
            raise ValueError("Action field must be occupied")
        self.type = type
        self.field = field

    def __repr__(self) -> str:
        return f"Action({self.type.name}, {self.field.position})"


class Move:
    """A unit moving from one field to another, with an optional action."""

    def __init__(self, current_field: Field | None, target_field: Field | None) -> None:
        if current_field is None or target_field is None:
            raise ValueError("Pointers to both fields have to point to a Field object")
        if current_field is target_field:
            raise ValueError("Current and target fields cannot be the same")
        if not current_field.is_occupied():
            raise ValueError("Current field for a move must be occupied")
        self.current_field = current_field
        self.target_field = target_field
        self.moved_unit: Any = current_field.unit
        self.action: Action | None = None

    def __repr__(self) -> str:
        return (
            f"Move({self.current_field.position} -> {self.target_field.position}, "
            f"action={self.action!r})"
        )