"""The standardized (y1 huap1) opening position.

The layout is stored once, in absolute terms; the relative boards are
derived from it through the perspective transform.
"""
from __future__ import annotations

from typing import List, Tuple

from .absolute import Board, Coord, Field, NonTam2Piece
from .models import TAM2, AbsoluteSide, Color, Profession
from .perspective import Perspective, to_relative_board
from . import relative

__all__ = [
    "TAM2_SQUARE",
    "yhuap_initial_board",
    "yhuap_initial_field",
    "yhuap_initial_board_where_black_king_points_upward",
    "yhuap_initial_board_where_red_king_points_upward",
]

K, H = Color.KOK1, Color.HUOK2

TAM2_SQUARE = "ZO"

_IA_SIDE_LAYOUT: List[Tuple[str, Color, Profession]] = [
    ("ZAI", H, Profession.NUAK1),
    ("KAI", H, Profession.KAUK2),
    ("LAI", K, Profession.KAUK2),
    ("NAI", H, Profession.KAUK2),
    ("TAI", K, Profession.KAUK2),
    ("XAI", K, Profession.KAUK2),
    ("CAI", H, Profession.KAUK2),
    ("MAI", K, Profession.KAUK2),
    ("PAI", H, Profession.KAUK2),
    ("KAU", H, Profession.TUK2),
    ("LAU", H, Profession.GUA2),
    ("TAU", H, Profession.DAU2),
    ("XAU", K, Profession.DAU2),
    ("MAU", K, Profession.GUA2),
    ("PAU", K, Profession.TUK2),
    ("KIA", K, Profession.KUA2),
    ("LIA", K, Profession.MAUN1),
    ("NIA", K, Profession.KAUN1),
    ("TIA", K, Profession.UAI1),
    ("ZIA", H, Profession.IO),
    ("XIA", H, Profession.UAI1),
    ("CIA", H, Profession.KAUN1),
    ("MIA", H, Profession.MAUN1),
    ("PIA", H, Profession.KUA2),
]

_A_SIDE_LAYOUT: List[Tuple[str, Color, Profession]] = [
    ("ZI", K, Profession.NUAK1),
    ("KI", H, Profession.KAUK2),
    ("LI", K, Profession.KAUK2),
    ("NI", H, Profession.KAUK2),
    ("TI", K, Profession.KAUK2),
    ("XI", K, Profession.KAUK2),
    ("CI", H, Profession.KAUK2),
    ("MI", K, Profession.KAUK2),
    ("PI", H, Profession.KAUK2),
    ("KE", K, Profession.TUK2),
    ("LE", K, Profession.GUA2),
    ("TE", K, Profession.DAU2),
    ("XE", H, Profession.DAU2),
    ("ME", H, Profession.GUA2),
    ("PE", H, Profession.TUK2),
    ("KA", H, Profession.KUA2),
    ("LA", H, Profession.MAUN1),
    ("NA", H, Profession.KAUN1),
    ("TA", H, Profession.UAI1),
    ("ZA", K, Profession.IO),
    ("XA", K, Profession.UAI1),
    ("CA", K, Profession.KAUN1),
    ("MA", K, Profession.MAUN1),
    ("PA", K, Profession.KUA2),
]


def yhuap_initial_board() -> Board:
    board = Board()
    board.put(Coord.parse(TAM2_SQUARE), TAM2)
    for side, layout in (
        (AbsoluteSide.IA_SIDE, _IA_SIDE_LAYOUT),
        (AbsoluteSide.A_SIDE, _A_SIDE_LAYOUT),
    ):
        for token, color, prof in layout:
            board.put(Coord.parse(token), NonTam2Piece(color=color, prof=prof, side=side))
    return board


def yhuap_initial_field() -> Field:
    return Field(board=yhuap_initial_board())


def yhuap_initial_board_where_black_king_points_upward() -> relative.Board:
    # The black king starts on the IA row.
    return to_relative_board(yhuap_initial_board(), Perspective.IA_IS_DOWN_AND_POINTS_UPWARD)


def yhuap_initial_board_where_red_king_points_upward() -> relative.Board:
    return relative.rotate_board(yhuap_initial_board_where_black_king_points_upward())
