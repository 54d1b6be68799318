"""Command that starts a game of chess in the terminal."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .enums import PlayerColor
from .game import Game
from .ui import TextUI


def main(argv: Sequence[str] | None = None) -> int:
    """Ask who plays each colour, then play the game to its end."""
    parser = argparse.ArgumentParser(
        prog="chessgame", description="Play chess in the terminal."
    )
    parser.parse_args(argv)

    ui = TextUI()
    print(
        "Wybierz, kto będzie grał białymi (1 - człowiek, 2 - komputer): ",
        end="",
        flush=True,
    )
    white = ui.player_by_user_choice(PlayerColor.WHITE)
    print(
        "Wybierz, kto będzie grał czarnymi (1 - człowiek, 2 - komputer): ",
        end="",
        flush=True,
    )
    black = ui.player_by_user_choice(PlayerColor.BLACK)

    Game(white, black, ui).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())