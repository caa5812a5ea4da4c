"""Tests for the board contract, run against both board shapes."""

import pydantic
import pytest

from cetkaik_naive import absolute, relative
from cetkaik_naive.errors import InvalidStateError
from cetkaik_naive.interface import IsAbsoluteField, IsBoard, IsField
from cetkaik_naive.models import TAM2, AbsoluteSide, Color, ColorAndProf, Profession


@pytest.fixture(params=["absolute", "relative"])
def board_setup(request):
    """(empty board, two distinct coordinates, an owned piece) for each shape."""
    if request.param == "absolute":
        piece = absolute.NonTam2Piece(
            color=Color.KOK1, prof=Profession.GUA2, side=AbsoluteSide.A_SIDE
        )
        return absolute.Board(), absolute.Coord.parse("LE"), absolute.Coord.parse("ZO"), piece
    piece = relative.NonTam2Piece(
        color=Color.KOK1, prof=Profession.GUA2, side=relative.Side.UPWARD
    )
    return relative.Board(), relative.Coord(row=1, col=1), relative.Coord(row=4, col=4), piece


class TestBoardContract:
    def test_satisfies_protocol(self, board_setup):
        board, _, _, _ = board_setup
        assert isinstance(board, IsBoard)

    def test_empty_board_peeks_none(self, board_setup):
        board, c, _, _ = board_setup
        assert board.peek(c) is None
        assert list(board.occupied_squares()) == []
        assert board.piece_count() == 0

    def test_put_then_peek(self, board_setup):
        board, c, other, piece = board_setup
        board.put(c, piece)
        assert board.peek(c) == piece
        assert board.peek(other) is None

    def test_put_replaces(self, board_setup):
        board, c, _, piece = board_setup
        board.put(c, piece)
        board.put(c, TAM2)
        assert board.peek(c) == TAM2
        assert board.piece_count() == 1

    def test_pop_is_idempotent(self, board_setup):
        board, c, _, piece = board_setup
        board.put(c, piece)
        assert board.pop(c) == piece
        assert board.pop(c) is None
        assert board.peek(c) is None

    def test_put_none_clears(self, board_setup):
        board, c, _, piece = board_setup
        board.put(c, piece)
        board.put(c, None)
        assert board.peek(c) is None
        assert board.piece_count() == 0

    def test_assert_empty(self, board_setup):
        board, c, other, piece = board_setup
        board.put(c, piece)
        board.assert_empty(other)
        with pytest.raises(InvalidStateError):
            board.assert_empty(c)

    def test_assert_occupied(self, board_setup):
        board, c, other, piece = board_setup
        board.put(c, piece)
        board.assert_occupied(c)
        with pytest.raises(InvalidStateError) as exc_info:
            board.assert_occupied(other)
        assert exc_info.value.context == {"coord": str(other)}

    def test_occupied_squares(self, board_setup):
        board, c, other, piece = board_setup
        board.put(c, piece)
        board.put(other, TAM2)
        assert sorted(
            (str(coord), p.is_tam2()) for coord, p in board.occupied_squares()
        ) == sorted([(str(c), False), (str(other), True)])


class TestAbsoluteBoard:
    def test_keys_are_tokens(self):
        board = absolute.Board.from_pieces({absolute.Coord.parse("ZO"): TAM2})
        assert list(board.squares) == ["ZO"]

    def test_rejects_malformed_key(self):
        with pytest.raises(pydantic.ValidationError):
            absolute.Board(squares={"ZZ": TAM2})


class TestRelativeBoard:
    def test_default_is_nine_by_nine(self):
        board = relative.Board()
        assert len(board.rows) == 9
        assert all(len(row) == 9 and all(sq is None for sq in row) for row in board.rows)

    def test_rejects_wrong_shape(self):
        with pytest.raises(pydantic.ValidationError):
            relative.Board(rows=[[None] * 9 for _ in range(8)])
        with pytest.raises(pydantic.ValidationError):
            relative.Board(rows=[[None] * 8 for _ in range(9)])

    def test_rotate_board(self):
        board = relative.Board()
        piece = relative.NonTam2Piece(
            color=Color.HUOK2, prof=Profession.TUK2, side=relative.Side.UPWARD
        )
        board.put(relative.Coord(row=7, col=1), piece)
        rotated = relative.rotate_board(board)
        assert rotated.peek(relative.Coord(row=7, col=1)) is None
        assert rotated.peek(relative.Coord(row=1, col=7)) == relative.rotate_piece(piece)
        assert relative.rotate_board(rotated) == board


class TestFields:
    @pytest.mark.parametrize("field_cls", [absolute.Field, relative.Field])
    def test_satisfies_field_protocol(self, field_cls):
        assert isinstance(field_cls(), IsField)

    def test_only_absolute_field_builds_initial(self):
        assert isinstance(absolute.Field(), IsAbsoluteField)
        assert not isinstance(relative.Field(), IsAbsoluteField)

    def test_insert_into_hand(self, abs_field_factory):
        field = abs_field_factory()
        field.insert_nontam_piece_into_hop1zuo1(Color.KOK1, Profession.IO, AbsoluteSide.IA_SIDE)
        assert field.hop1zuo1_of(AbsoluteSide.IA_SIDE) == [
            ColorAndProf(color=Color.KOK1, prof=Profession.IO)
        ]
        assert field.hop1zuo1_of(AbsoluteSide.A_SIDE) == []

    def test_hand_keeps_duplicates(self, rel_field_factory):
        field = rel_field_factory()
        for _ in range(2):
            field.insert_nontam_piece_into_hop1zuo1(
                Color.HUOK2, Profession.KAUK2, relative.Side.DOWNWARD
            )
        assert len(field.hop1zuo1_of(relative.Side.DOWNWARD)) == 2

    def test_clone_is_independent(self, abs_field_factory):
        field = abs_field_factory(pieces={"ZO": TAM2}, a_side_hand=[(Color.KOK1, Profession.IO)])
        copy = field.clone()
        copy.as_board().pop(absolute.Coord.parse("ZO"))
        copy.hop1zuo1_of(AbsoluteSide.A_SIDE).clear()
        assert field.as_board().peek(absolute.Coord.parse("ZO")) == TAM2
        assert len(field.hop1zuo1_of(AbsoluteSide.A_SIDE)) == 1

    def test_nontam_piece(self, rel_field_factory):
        piece = rel_field_factory().nontam_piece(Color.KOK1, Profession.DAU2, relative.Side.UPWARD)
        assert isinstance(piece, relative.NonTam2Piece)
        assert piece.has_side(relative.Side.UPWARD)
