import random
from types import SimpleNamespace

import pytest

from chessgame.enums import LetterIndex, NumberIndex, PlayerColor
from chessgame.exceptions import StateIntegrityError
from chessgame.players import (
    ComputerPlayer,
    HumanPlayer,
    Player,
    letter_index_from,
    number_index_from,
)
from chessgame.position import Position
from chessgame.state import State


class ScriptedUI:
    def __init__(self, chars):
        self.chars = list(chars)
        self.ranges_seen = []

    def get_from_user(self, ranges):
        self.ranges_seen.append(dict(ranges))
        return self.chars.pop(0)


def _game(ui=None, state=None):
    return SimpleNamespace(ui=ui, state=state if state is not None else State())


def _squares(move):
    return (move.current_field.position, move.target_field.position)


@pytest.mark.parametrize(
    "char, expected",
    [("a", LetterIndex.A), ("A", LetterIndex.A), ("e", LetterIndex.E), ("H", LetterIndex.H)],
)
def test_letter_index_from(char, expected):
    assert letter_index_from(char) == expected


@pytest.mark.parametrize("char", ["i", "z", "1", "", "ab"])
def test_letter_index_from_rejects(char):
    with pytest.raises(ValueError):
        letter_index_from(char)


@pytest.mark.parametrize(
    "char, expected",
    [("1", NumberIndex.ONE), ("4", NumberIndex.FOUR), ("8", NumberIndex.EIGHT)],
)
def test_number_index_from(char, expected):
    assert number_index_from(char) == expected


@pytest.mark.parametrize("char", ["0", "9", "a", ""])
def test_number_index_from_rejects(char):
    with pytest.raises(ValueError):
        number_index_from(char)


def test_player_is_abstract():
    with pytest.raises(TypeError):
        Player(PlayerColor.WHITE)


def test_human_player_picks_typed_move(capsys):
    ui = ScriptedUI("e2e4")
    player = HumanPlayer(PlayerColor.WHITE, rng=random.Random(1))
    move = player.choose_move(_game(ui))
    assert _squares(move) == (
        Position(LetterIndex.E, NumberIndex.TWO),
        Position(LetterIndex.E, NumberIndex.FOUR),
    )
    assert ui.ranges_seen == [
        {"a": "h", "A": "H"},
        {"1": "8"},
        {"a": "h", "A": "H"},
        {"1": "8"},
    ]
    assert "Grasz jako BIAŁE" in capsys.readouterr().out


def test_human_player_retries_after_illegal_move(capsys):
    ui = ScriptedUI("e2e5G1F3")
    player = HumanPlayer(PlayerColor.WHITE, rng=random.Random(2))
    move = player.choose_move(_game(ui))
    assert _squares(move) == (
        Position(LetterIndex.G, NumberIndex.ONE),
        Position(LetterIndex.F, NumberIndex.THREE),
    )
    assert ui.chars == []
    assert "Podany ruch nie jest dozwolony" in capsys.readouterr().out


def test_human_player_example_is_a_legal_move(capsys):
    state = State()
    player = HumanPlayer(PlayerColor.WHITE, rng=random.Random(3))
    player.choose_move(_game(ScriptedUI("b1c3"), state))
    out = capsys.readouterr().out
    names = {
        f"{m.current_field.position}{m.target_field.position}" for m in state.legal_moves()
    }
    example = out.split("(np. ")[1].split(")")[0]
    assert example in names


def test_human_player_without_moves_raises():
    state = SimpleNamespace(legal_moves=lambda color=None: [])
    with pytest.raises(StateIntegrityError):
        HumanPlayer(PlayerColor.WHITE).choose_move(_game(ScriptedUI(""), state))


def test_computer_player_picks_legal_move():
    state = State()
    player = ComputerPlayer(PlayerColor.WHITE, rng=random.Random(5))
    legal = {_squares(m) for m in state.legal_moves(PlayerColor.WHITE)}
    for _ in range(5):
        move = player.choose_move(_game(state=state))
        assert _squares(move) in legal
        assert move.moved_unit.color is PlayerColor.WHITE


def test_computer_player_without_moves_raises():
    state = SimpleNamespace(legal_moves=lambda color=None: [])
    with pytest.raises(StateIntegrityError):
        ComputerPlayer(PlayerColor.BLACK).choose_move(_game(state=state))


def test_player_keeps_color():
    assert ComputerPlayer(PlayerColor.BLACK).color is PlayerColor.BLACK
    assert HumanPlayer(PlayerColor.WHITE).color is PlayerColor.WHITE