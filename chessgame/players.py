"""Players that choose moves: a human at the keyboard and a random computer."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any

from .enums import LetterIndex, NumberIndex, PlayerColor
from .exceptions import StateIntegrityError
from .move import Move
from .position import Position

_LETTER_RANGES = {"a": "h", "A": "H"}
_NUMBER_RANGES = {"1": "8"}
_NO_MOVES_MESSAGE = (
    "There should be at least one legal move if the game has not concluded yet."
)


def letter_index_from(char: str) -> LetterIndex:
    """Return the column named by ``char`` (A to H, either case).

    Raises ValueError for any other character.
    """
    if len(char) == 1 and char.upper() in LetterIndex.__members__:
        return LetterIndex[char.upper()]
    raise ValueError("Provided character does not correspond to any LetterIndex")


def number_index_from(char: str) -> NumberIndex:
    """Return the row named by ``char`` (1 to 8).

    Raises ValueError for any other character.
    """
    if len(char) == 1 and "1" <= char <= "8":
        return NumberIndex(ord(char) - ord("1"))
    raise ValueError("Provided character does not correspond to any NumberIndex")


def _square_name(position: Position) -> str:
    return f"{position.letter.name}{position.number + 1}"


class Player(ABC):
    """A participant of the game playing the units of one colour."""

    def __init__(self, color: PlayerColor) -> None:
        self.color = color

    @abstractmethod
    def choose_move(self, game: Any) -> Move:
        """Return the move this player makes in ``game``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color.name})"


class HumanPlayer(Player):
    """A player who types moves in through the game's user interface."""

    def __init__(self, color: PlayerColor, rng: random.Random | None = None) -> None:
        super().__init__(color)
        self._rng = rng if rng is not None else random.Random()

    def choose_move(self, game: Any) -> Move:
        """Ask the user for a move until a legal one is given.

        Raises StateIntegrityError if there is no legal move to choose.
        """
        ui = game.ui
        legal_moves = game.state.legal_moves()
        if not legal_moves:
            raise StateIntegrityError(_NO_MOVES_MESSAGE)

        while True:
            example = self._rng.choice(legal_moves)
            side = "BIAŁE" if self.color is PlayerColor.WHITE else "CZARNE"
            print()
            print(f"Grasz jako {side}")
            print(
                "Wybierz ruch (np. "
                f"{_square_name(example.current_field.position)}"
                f"{_square_name(example.target_field.position)}): ",
                end="",
            )

            from_letter = letter_index_from(ui.get_from_user(_LETTER_RANGES))
            from_number = number_index_from(ui.get_from_user(_NUMBER_RANGES))
            to_letter = letter_index_from(ui.get_from_user(_LETTER_RANGES))
            to_number = number_index_from(ui.get_from_user(_NUMBER_RANGES))
            print()

            origin = Position(from_letter, from_number)
            destination = Position(to_letter, to_number)
            for move in legal_moves:
                if (
                    move.current_field.position == origin
                    and move.target_field.position == destination
                ):
                    return move

            print("Podany ruch nie jest dozwolony. Wybierz inny. ", end="")


class ComputerPlayer(Player):
    """A player that picks one of its legal moves at random."""

    def __init__(self, color: PlayerColor, rng: random.Random | None = None) -> None:
        super().__init__(color)
        self._rng = rng if rng is not None else random.Random()

    def choose_move(self, game: Any) -> Move:
        """Return a random legal move of this player's colour.

        Raises StateIntegrityError if there is no legal move to choose.
        """
        legal_moves = game.state.legal_moves(self.color)
        if not legal_moves:
            raise StateIntegrityError(_NO_MOVES_MESSAGE)
        return self._rng.choice(legal_moves)