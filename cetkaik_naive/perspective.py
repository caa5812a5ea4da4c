"""Perspective: which of the two fixed sides is the viewer.

Fixing a perspective turns the absolute and the relative representations
into one another. Every conversion here is a pure function of its input
and an explicit ``Perspective``; there is no "current viewpoint" state.
For both perspectives each ``to_relative_*`` / ``to_absolute_*`` pair is
a two-sided inverse.

Everything is derived from the coordinate mapping and the side mapping:

- IA_IS_DOWN_AND_POINTS_UPWARD: row A is relative row 0, column K is
  relative column 0, and the IA side points upward (it is the viewer).
- IA_IS_UP_AND_POINTS_DOWNWARD: the same, rotated 180 degrees, and the
  IA side points downward (it is the opponent).
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Union

from . import absolute, moves, relative
from .models import AbsoluteSide, ColorAndProf, Tam2

__all__ = [
    "Perspective",
    "to_relative_coord",
    "to_absolute_coord",
    "to_relative_side",
    "to_absolute_side",
    "to_relative_piece",
    "to_absolute_piece",
    "to_relative_board",
    "to_absolute_board",
    "to_relative_field",
    "to_absolute_field",
    "to_relative_move",
    "to_absolute_move",
]


class Perspective(str, Enum):
    # IA is the lowermost row; the player who started on the IA row has
    # pieces that point upward (i.e. you).
    IA_IS_DOWN_AND_POINTS_UPWARD = "IaIsDownAndPointsUpward"
    # IA is the uppermost row; the player who started on the IA row has
    # pieces that point downward (i.e. the opponent).
    IA_IS_UP_AND_POINTS_DOWNWARD = "IaIsUpAndPointsDownward"

    def ia_is_down(self) -> bool:
        return self is Perspective.IA_IS_DOWN_AND_POINTS_UPWARD

    def flip(self) -> "Perspective":
        if self.ia_is_down():
            return Perspective.IA_IS_UP_AND_POINTS_DOWNWARD
        return Perspective.IA_IS_DOWN_AND_POINTS_UPWARD


_ROWS: List[absolute.Row] = list(absolute.Row)
_COLUMNS: List[absolute.Column] = list(absolute.Column)
_ROW_INDEX: Dict[absolute.Row, int] = {row: i for i, row in enumerate(_ROWS)}
_COLUMN_INDEX: Dict[absolute.Column, int] = {column: i for i, column in enumerate(_COLUMNS)}
_LAST = relative.BOARD_SIZE - 1


def to_relative_coord(coord: absolute.Coord, p: Perspective) -> relative.Coord:
    row = _ROW_INDEX[coord.row]
    col = _COLUMN_INDEX[coord.column]
    if p.ia_is_down():
        return relative.Coord(row=row, col=col)
    return relative.Coord(row=_LAST - row, col=_LAST - col)


def to_absolute_coord(coord: relative.Coord, p: Perspective) -> absolute.Coord:
    if p.ia_is_down():
        row, col = coord.row, coord.col
    else:
        row, col = _LAST - coord.row, _LAST - coord.col
    return absolute.Coord(row=_ROWS[row], column=_COLUMNS[col])


def to_relative_side(side: AbsoluteSide, p: Perspective) -> relative.Side:
    ia_points_upward = p.ia_is_down()
    if (side is AbsoluteSide.IA_SIDE) == ia_points_upward:
        return relative.Side.UPWARD
    return relative.Side.DOWNWARD


def to_absolute_side(side: relative.Side, p: Perspective) -> AbsoluteSide:
    ia_points_upward = p.ia_is_down()
    if (side is relative.Side.UPWARD) == ia_points_upward:
        return AbsoluteSide.IA_SIDE
    return AbsoluteSide.A_SIDE


def to_relative_piece(
    piece: Union[Tam2, absolute.NonTam2Piece], p: Perspective
) -> Union[Tam2, relative.NonTam2Piece]:
    """
    Convert an absolute piece; Tam2 is shared by both representations::

        to_relative_piece(
            absolute.NonTam2Piece(prof=Profession.UAI1, color=Color.KOK1, side=AbsoluteSide.IA_SIDE),
            Perspective.IA_IS_DOWN_AND_POINTS_UPWARD,
        ) == relative.NonTam2Piece(prof=Profession.UAI1, color=Color.KOK1, side=relative.Side.UPWARD)
    """
    if piece.is_tam2():
        return piece
    return relative.NonTam2Piece(
        color=piece.color, prof=piece.prof, side=to_relative_side(piece.side, p)
    )


def to_absolute_piece(
    piece: Union[Tam2, relative.NonTam2Piece], p: Perspective
) -> Union[Tam2, absolute.NonTam2Piece]:
    if piece.is_tam2():
        return piece
    return absolute.NonTam2Piece(
        color=piece.color, prof=piece.prof, side=to_absolute_side(piece.side, p)
    )


def to_relative_board(board: absolute.Board, p: Perspective) -> relative.Board:
    ans = relative.Board()
    for coord, piece in board.occupied_squares():
        ans.put(to_relative_coord(coord, p), to_relative_piece(piece, p))
    return ans


def to_absolute_board(board: relative.Board, p: Perspective) -> absolute.Board:
    ans = absolute.Board()
    for coord, piece in board.occupied_squares():
        ans.put(to_absolute_coord(coord, p), to_absolute_piece(piece, p))
    return ans


def _copy_hand(hand: List[ColorAndProf]) -> List[ColorAndProf]:
    return [ColorAndProf(color=entry.color, prof=entry.prof) for entry in hand]


def to_relative_field(field: absolute.Field, p: Perspective) -> relative.Field:
    upward = to_absolute_side(relative.Side.UPWARD, p)
    downward = to_absolute_side(relative.Side.DOWNWARD, p)
    return relative.Field(
        current_board=to_relative_board(field.board, p),
        hop1zuo1of_upward=_copy_hand(field.hop1zuo1_of(upward)),
        hop1zuo1of_downward=_copy_hand(field.hop1zuo1_of(downward)),
    )


def to_absolute_field(field: relative.Field, p: Perspective) -> absolute.Field:
    ia_side = to_relative_side(AbsoluteSide.IA_SIDE, p)
    a_side = to_relative_side(AbsoluteSide.A_SIDE, p)
    return absolute.Field(
        board=to_absolute_board(field.current_board, p),
        ia_side_hop1zuo1=_copy_hand(field.hop1zuo1_of(ia_side)),
        a_side_hop1zuo1=_copy_hand(field.hop1zuo1_of(a_side)),
    )


def to_relative_move(move: moves.PureMove, p: Perspective) -> moves.PureMove:
    return moves.map_coords(move, lambda c: to_relative_coord(c, p))


def to_absolute_move(move: moves.PureMove, p: Perspective) -> moves.PureMove:
    return moves.map_coords(move, lambda c: to_absolute_coord(c, p))
