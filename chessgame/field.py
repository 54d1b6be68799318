"""A single square of the board and the unit standing on it."""

from __future__ import annotations

from typing import Any

from .enums import PlayerColor
from .position import Position


def _color_of(color_or_unit: Any) -> PlayerColor:
    if isinstance(color_or_unit, PlayerColor):
        return color_or_unit
    return color_or_unit.color


class Field:
    """A board square with a position and, optionally, a unit on it.

    Fields compare by identity: each square of a board is one object.
    """

    def __init__(self, position: Position, unit: Any = None) -> None:
        self.position = position
        self.unit = unit

    def is_occupied(self) -> bool:
        """Return True if a unit stands on this field."""
        return self.unit is not None

    def is_occupied_by_enemy(self, color: Any) -> bool:
        """Return True if a unit of a colour other than ``color`` stands here.

        ``color`` may be a PlayerColor or a unit whose colour is used.
        """
        return self.is_occupied() and self.unit.color != _color_of(color)

    def is_occupied_by_ally(self, color: Any) -> bool:
        """Return True if a unit of ``color`` stands here.

        ``color`` may be a PlayerColor or a unit whose colour is used.
        """
        return self.is_occupied() and self.unit.color == _color_of(color)

    def __repr__(self) -> str:
        return f"Field({self.position}, {self.unit!r})"