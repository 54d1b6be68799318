"""The flow of one game: players taking turns until the game is concluded."""

from __future__ import annotations

from typing import Any

from .enums import PlayerColor
from .players import Player
from .state import State


class Game:
    """Two players of opposing colours, a game state and a user interface."""

    def __init__(self, first_player: Player | None, second_player: Player | None, ui: Any) -> None:
        self._state = State()
        self._ui = ui
        if first_player is None or second_player is None:
            raise ValueError("Pointers to both players have to be valid.")
        if first_player.color == second_player.color:
            raise ValueError("Players must have opposing colors.")
        self._first_player = first_player
        self._second_player = second_player

    @property
    def state(self) -> State:
        """Current state of the game."""
        return self._state

    @property
    def ui(self) -> Any:
        """User interface that shows the game and takes input."""
        return self._ui

    def player(self, color: PlayerColor) -> Player:
        """Return the player playing ``color``."""
        if self._first_player.color == color:
            return self._first_player
        return self._second_player

    def run(self) -> None:
        """Let the players move in turn until the game concludes, then show the result."""
        while not self._state.has_concluded():
            self._ui.update(self._state)
            current = self.player(self._state.turn)
            move = current.choose_move(self)
            self._state.make_move(move)
        self._ui.end_game_screen(self._state)