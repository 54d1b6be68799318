"""User interfaces that show the game and take input from the user."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, TextIO

from .enums import Conclusion, LetterIndex, NumberIndex, PlayerColor
from .king import King
from .pawn import Pawn
from .players import ComputerPlayer, HumanPlayer, Player
from .position import Position
from .units import Bishop, Knight, Queen, Rook

RESET = "\033[0m"
BLACK_BG = "\033[44m"
WHITE_BG = "\033[47m"
WHITE_FG = "\033[97m"
BLACK_FG = "\033[30m"

# Checked in this order, so a subclass never shadows its base's icon.
_ICONS = (
    (King, "♔", "♚"),
    (Queen, "♕", "♛"),
    (Rook, "♖", "♜"),
    (Bishop, "♗", "♝"),
    (Knight, "♘", "♞"),
    (Pawn, "♙", "♟"),
)

_CONCLUSION_NAMES = {
    Conclusion.IN_PROGRESS: "In Progress",
    Conclusion.DRAW: "Draw",
    Conclusion.STALEMATE: "Stalemate",
    Conclusion.WHITE_WINS: "White Won",
    Conclusion.BLACK_WINS: "Black Won",
    Conclusion.FIFTY_MOVES_DRAW: "Draw by 50 moves rule",
    Conclusion.INSUFFICIENT_MATERIAL_DRAW: "Draw by insufficient material",
    Conclusion.AGREED_DRAW: "Draw by agreement",
}

_INVALID_INPUT = "Nieprawidlowa wartosc. Wybierz ponownie: "
_FOOTER = "  " + "    A      B      C      D      E      F      G      H"


class UI(ABC):
    """Interface through which a game is shown and the user is asked for input."""

    @abstractmethod
    def update(self, state: Any) -> None:
        """Show the current state of the game."""

    @abstractmethod
    def end_game_screen(self, state: Any) -> None:
        """Show the final state of the game and how it ended."""

    @abstractmethod
    def get_from_user(self, ranges: Mapping[str, str]) -> str:
        """Return a character the user gives that lies in one of ``ranges``.

        ``ranges`` maps the first character of each allowed range to its last.
        """

    @abstractmethod
    def player_by_user_choice(self, color: PlayerColor) -> Player:
        """Ask the user which kind of player plays ``color`` and return it."""


class TextUI(UI):
    """A console interface drawing the board with Unicode pieces and ANSI colours."""

    def __init__(
        self, input_stream: TextIO | None = None, output_stream: TextIO | None = None
    ) -> None:
        self._input = input_stream
        self._output = output_stream

    @property
    def _in(self) -> TextIO:
        return self._input if self._input is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read_char(self) -> str:
        """Return the next character of input that is not whitespace."""
        while True:
            char = self._in.read(1)
            if not char:
                raise EOFError("No more input to read")
            if not char.isspace():
                return char

    def render_board(self, state: Any) -> str:
        """Return the board of ``state`` drawn as coloured text, rank eight on top."""
        lines = [""]
        for row in reversed(NumberIndex):
            parts = [f"{chr(ord('1') + row)} "]
            for column in LetterIndex:
                parts.append(BLACK_BG if (row + column) % 2 == 0 else WHITE_BG)
                parts.append("  ")
                unit = state.board.field_at(Position(column, row)).unit
                if unit is not None:
                    black = unit.color is PlayerColor.BLACK
                    parts.append(BLACK_FG if black else WHITE_FG)
                    for unit_type, white_icon, black_icon in _ICONS:
                        if isinstance(unit, unit_type):
                            parts.append(black_icon if black else white_icon)
                            break
                else:
                    parts.append("   ")
                parts.append("  " + RESET)
            lines.append("".join(parts))
        lines.append(_FOOTER)
        return "\n".join(lines) + "\n"

    def update(self, state: Any) -> None:
        self._write(self.render_board(state))

    def end_game_screen(self, state: Any) -> None:
        name = _CONCLUSION_NAMES.get(state.conclusion, "")
        self._write(f"The game has ended.\nConclusion: {name}")

    def get_from_user(self, ranges: Mapping[str, str]) -> str:
        """Read characters until one lies in ``ranges``; complain about the others.

        Raises EOFError if the input ends first.
        """
        while True:
            char = self._read_char()
            if any(begin <= char <= end for begin, end in ranges.items()):
                return char
            self._write(_INVALID_INPUT)

    def player_by_user_choice(self, color: PlayerColor) -> Player:
        """Return a human player for input 1 or a computer player for input 2."""
        choice = self.get_from_user({"1": "2"})
        if choice == "1":
            return HumanPlayer(color)
        if choice == "2":
            return ComputerPlayer(color)
        raise ValueError(
            "Input validation has failed and player type input was out of range"
        )