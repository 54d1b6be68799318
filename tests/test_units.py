from __future__ import annotations

import pytest

from chessgame.enums import ActionType, LetterIndex, NumberIndex, PlayerColor
from chessgame.field import Field
from chessgame.position import MoveVector, Position
from chessgame.units import Bishop, Knight, Queen, Rook, Unit

WHITE = PlayerColor.WHITE
BLACK = PlayerColor.BLACK


def pos(name: str) -> Position:
    return Position(LetterIndex[name[0]], NumberIndex(int(name[1]) - 1))


class _Board:
    def __init__(self, placements: dict[str, Unit]) -> None:
        self.fields = [
            Field(Position(LetterIndex(c), NumberIndex(r)))
            for r in range(8)
            for c in range(8)
        ]
        for name, unit in placements.items():
            self.field_at(pos(name)).unit = unit

    def field_at(self, position: Position) -> Field | None:
        for field in self.fields:
            if field.position == position:
                return field
        return None

    def field_of(self, unit: Unit) -> Field | None:
        for field in self.fields:
            if field.unit is unit:
                return field
        return None


class _State:
    def __init__(self, placements, turn=WHITE, check=False) -> None:
        self.board = _Board(placements)
        self.turn = turn
        self.check = check

    def is_check(self, color=None) -> bool:
        return self.check


class _FakeKing(Unit):
    is_king = True

    def branches_of_move_vectors(self):
        return [[MoveVector(1, 0)]]


def targets(moves):
    return {str(move.target_field.position) for move in moves}


def test_unit_is_abstract():
    with pytest.raises(TypeError):
        Unit(WHITE)


def test_equal_looking_units_are_told_apart_on_the_board():
    first = Rook(WHITE)
    second = Rook(WHITE)
    state = _State({"A1": first, "H1": second})
    assert first.current_field(state).position == pos("A1")
    assert second.current_field(state).position == pos("H1")


def test_rook_on_empty_board_moves_along_row_and_column():
    rook = Rook(WHITE)
    state = _State({"A1": rook})
    moves = rook.legal_moves(state)
    assert len(moves) == 14
    for move in moves:
        p = move.target_field.position
        assert p.letter == LetterIndex.A or p.number == NumberIndex.ONE
        assert move.current_field.position == pos("A1")
        assert move.moved_unit is rook
        assert move.action is None


def test_knight_in_corner():
    knight = Knight(WHITE)
    state = _State({"A1": knight})
    assert targets(knight.legal_moves(state)) == {"B3", "C2"}


def test_knight_in_centre_reaches_eight_fields():
    knight = Knight(BLACK)
    state = _State({"D4": knight}, turn=BLACK)
    assert len(knight.legal_moves(state)) == len(knight.branches_of_move_vectors())


def test_ally_blocks_and_is_excluded():
    rook = Rook(WHITE)
    state = _State({"A1": rook, "A3": Knight(WHITE), "B1": Knight(WHITE)})
    assert targets(rook.legal_moves(state)) == {"A2"}


def test_enemy_blocks_and_is_captured():
    rook = Rook(WHITE)
    state = _State({"A1": rook, "A3": Knight(BLACK), "B1": Knight(WHITE)})
    moves = rook.legal_moves(state)
    assert targets(moves) == {"A2", "A3"}
    capture = next(m for m in moves if str(m.target_field.position) == "A3")
    assert capture.action.type is ActionType.CAPTURE
    assert capture.action.field is capture.target_field


def test_no_moves_when_not_own_turn():
    queen = Queen(WHITE)
    state = _State({"D4": queen}, turn=BLACK)
    assert queen.legal_moves(state) == []


def test_no_moves_when_in_check():
    bishop = Bishop(WHITE)
    state = _State({"C1": bishop}, check=True)
    assert bishop.legal_moves(state) == []
    assert bishop.check_breaking_moves(state) == []
    assert bishop.legal_moves_assume_no_check(state)


def test_attack_coverage_includes_ally_field():
    rook = Rook(WHITE)
    ally = Knight(WHITE)
    state = _State({"A1": rook, "A2": ally, "B1": Knight(WHITE)})
    coverage = rook.attack_coverage(state)
    assert targets(coverage) == {"A2", "B1"}
    assert rook.legal_moves(state) == []


def test_enemy_king_is_attacked_but_not_capturable():
    rook = Rook(WHITE)
    king = _FakeKing(BLACK)
    state = _State({"A1": rook, "A2": king, "B1": Knight(WHITE)})
    assert "A2" in targets(rook.attack_coverage(state))
    assert "A2" not in targets(rook.legal_moves(state))


def test_current_field():
    bishop = Bishop(BLACK)
    state = _State({"F8": bishop}, turn=BLACK)
    assert bishop.current_field(state).unit is bishop
    assert bishop.current_field(state).position == pos("F8")


def test_position_branches_stay_on_board():
    bishop = Bishop(WHITE)
    state = _State({"A1": bishop})
    branches = bishop.position_branches(state)
    assert len(branches) == len(bishop.branches_of_move_vectors())
    assert sum(1 for branch in branches if branch) == 1
    for branch in branches:
        for p in branch:
            assert p.letter == p.number


def test_move_branches_stop_at_first_occupied():
    queen = Queen(WHITE)
    state = _State({"D4": queen, "D6": Rook(BLACK), "F6": Rook(WHITE)})
    branches = queen.move_branches_including_occupied(state)
    reached = {
        str(move.target_field.position): move for branch in branches for move in branch
    }
    assert {"D5", "D6", "E5", "F6"} <= set(reached)
    assert "D7" not in reached
    assert "G7" not in reached
    assert reached["D6"].action.type is ActionType.CAPTURE
    assert reached["F6"].action is None
    for branch in branches:
        occupied = [m.target_field.is_occupied() for m in branch]
        assert occupied[:-1] == [False] * (len(occupied) - 1) if occupied else occupied == []


def test_vector_branch_shapes():
    for unit in (Bishop(WHITE), Rook(WHITE), Queen(WHITE)):
        for branch in unit.branches_of_move_vectors():
            assert len(branch) == 7
    assert len(Bishop(WHITE).branches_of_move_vectors()) == 4
    assert len(Rook(WHITE).branches_of_move_vectors()) == 4


def test_queen_vectors_are_rook_and_bishop_vectors():
    def flat(unit):
        return {v for branch in unit.branches_of_move_vectors() for v in branch}

    assert flat(Queen(WHITE)) == flat(Rook(WHITE)) | flat(Bishop(WHITE))
    assert not flat(Rook(WHITE)) & flat(Bishop(WHITE))


def test_knight_vectors_fixed_by_rules():
    vectors = [branch[0] for branch in Knight(WHITE).branches_of_move_vectors()]
    assert all(len(b) == 1 for b in Knight(WHITE).branches_of_move_vectors())
    assert {(abs(v.column_offset), abs(v.row_offset)) for v in vectors} == {(1, 2), (2, 1)}
    assert len(set(vectors)) == len(vectors)