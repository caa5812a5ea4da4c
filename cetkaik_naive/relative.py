"""Relative representation: "which piece is the opponent's?"

Squares are dense ``[0, 9) x [0, 9)`` indices as seen by one viewer, row 0
being the far edge. Pieces point either toward the viewer (UPWARD, the
viewer's own) or away (DOWNWARD). Which absolute side that is depends on
the Perspective; see ``perspective``.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Iterator, List, Literal, Optional, Sequence, Tuple, Union

import pydantic
from pydantic import BaseModel, field_validator, model_validator

from .errors import InvalidStateError
from .field_engine import FieldEngine
from .models import TAM2, Color, ColorAndProf, Profession, Tam2, serialize_color, serialize_prof

__all__ = [
    "BOARD_SIZE",
    "Side",
    "Coord",
    "NonTam2Piece",
    "Piece",
    "Board",
    "Field",
    "Tam2",
    "TAM2",
    "distance",
    "same_direction",
    "rotate_coord",
    "rotate_piece",
    "rotate_piece_or_null",
    "rotate_board",
    "is_water",
    "serialize_coord",
    "serialize_piece",
]

BOARD_SIZE = 9


class Side(str, Enum):
    """Relative side"""
    UPWARD = "Upward"  # pointing toward the viewer
    DOWNWARD = "Downward"  # pointing away from the viewer

    def flip(self) -> "Side":
        return Side.DOWNWARD if self is Side.UPWARD else Side.UPWARD


class Coord(BaseModel):
    """Relative coordinate ``(row, col)``; also validates from a 2-sequence."""
    row: int = pydantic.Field(ge=0, lt=BOARD_SIZE)
    col: int = pydantic.Field(ge=0, lt=BOARD_SIZE)

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return {"row": data[0], "col": data[1]}
        return data

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return serialize_coord(self)


class NonTam2Piece(BaseModel):
    """Every piece other than Tam2; points either upward or downward."""
    kind: Literal["non_tam2"] = "non_tam2"
    color: Color
    prof: Profession
    side: Side

    class Config:
        frozen = True

    def is_tam2(self) -> bool:
        return False

    def has_color(self, color: Color) -> bool:
        return self.color == color

    def has_prof(self, prof: Profession) -> bool:
        return self.prof == prof

    def has_side(self, side: Side) -> bool:
        return self.side == side


Piece = Annotated[Union[Tam2, NonTam2Piece], pydantic.Field(discriminator="kind")]


def serialize_coord(coord: Coord) -> str:
    return f"[{coord.row},{coord.col}]"


def rotate_coord(coord: Coord) -> Coord:
    """Rotate 180 degrees about the central square."""
    return Coord(row=BOARD_SIZE - 1 - coord.row, col=BOARD_SIZE - 1 - coord.col)


def distance(a: Coord, b: Coord) -> int:
    """Larger of the row difference and the column difference."""
    return max(abs(a.row - b.row), abs(a.col - b.col))


def same_direction(origin: Coord, a: Coord, b: Coord) -> bool:
    """Whether origin->a and origin->b are positive multiples of each other.

    A zero vector (``a == origin`` or ``b == origin``) is never in any
    direction.
    """
    a_u, a_v = a.row - origin.row, a.col - origin.col
    b_u, b_v = b.row - origin.row, b.col - origin.col
    return (a_u * b_u + a_v * b_v > 0) and (a_u * b_v - a_v * b_u == 0)


# Row 4 from column 2 to 6, plus column 4 from row 2 to 6.
_WATER = frozenset(
    [(4, col) for col in range(2, 7)] + [(row, 4) for row in (2, 3, 5, 6)]
)


def is_water(coord: Coord) -> bool:
    return coord.as_tuple() in _WATER


def rotate_piece(piece: Union[Tam2, NonTam2Piece]) -> Union[Tam2, NonTam2Piece]:
    """Turn a piece around: Tam2 stays, an owned piece changes sides."""
    if piece.is_tam2():
        return piece
    return piece.model_copy(update={"side": piece.side.flip()})


def rotate_piece_or_null(piece: Optional[Union[Tam2, NonTam2Piece]]) -> Optional[Union[Tam2, NonTam2Piece]]:
    if piece is None:
        return None
    return rotate_piece(piece)


_ARROWS = {Side.UPWARD: "↑", Side.DOWNWARD: "↓"}


def serialize_piece(piece: Union[Tam2, NonTam2Piece]) -> str:
    if piece.is_tam2():
        return "皇"
    return f"{serialize_color(piece.color)}{serialize_prof(piece.prof)}{_ARROWS[piece.side]}"


def _empty_rows() -> List[List[Optional[Union[Tam2, NonTam2Piece]]]]:
    return [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]


class Board(BaseModel):
    """The 9x9 squares as a dense list of rows."""
    rows: List[List[Optional[Piece]]] = pydantic.Field(default_factory=_empty_rows)

    @field_validator("rows")
    @classmethod
    def _check_shape(cls, rows: Sequence[Sequence[Any]]) -> Sequence[Sequence[Any]]:
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return rows

    def peek(self, c: Coord) -> Optional[Union[Tam2, NonTam2Piece]]:
        return self.rows[c.row][c.col]

    def pop(self, c: Coord) -> Optional[Union[Tam2, NonTam2Piece]]:
        piece = self.rows[c.row][c.col]
        self.rows[c.row][c.col] = None
        return piece

    def put(self, c: Coord, p: Optional[Union[Tam2, NonTam2Piece]]) -> None:
        self.rows[c.row][c.col] = p

    def assert_empty(self, c: Coord) -> None:
        if self.peek(c) is not None:
            raise InvalidStateError(
                f"Expected the square {c} to be empty, but it was occupied",
                context={"coord": str(c)},
            )

    def assert_occupied(self, c: Coord) -> None:
        if self.peek(c) is None:
            raise InvalidStateError(
                f"Expected the square {c} to be occupied, but it was empty",
                context={"coord": str(c)},
            )

    def occupied_squares(self) -> Iterator[Tuple[Coord, Union[Tam2, NonTam2Piece]]]:
        for i, row in enumerate(self.rows):
            for j, piece in enumerate(row):
                if piece is not None:
                    yield Coord(row=i, col=j), piece

    def piece_count(self) -> int:
        return sum(1 for row in self.rows for piece in row if piece is not None)


def rotate_board(board: Board) -> Board:
    """Rotate the whole board 180 degrees, turning every piece around."""
    last = BOARD_SIZE - 1
    return Board(rows=[
        [rotate_piece_or_null(board.rows[last - i][last - j]) for j in range(BOARD_SIZE)]
        for i in range(BOARD_SIZE)
    ])


class Field(BaseModel):
    """A board plus the hop1zuo1 of the upward and of the downward player."""
    current_board: Board = pydantic.Field(default_factory=Board)
    hop1zuo1of_upward: List[ColorAndProf] = pydantic.Field(default_factory=list)
    hop1zuo1of_downward: List[ColorAndProf] = pydantic.Field(default_factory=list)

    def as_board(self) -> Board:
        return self.current_board

    def clone(self) -> "Field":
        return self.model_copy(deep=True)

    def hop1zuo1_of(self, side: Side) -> List[ColorAndProf]:
        if side is Side.UPWARD:
            return self.hop1zuo1of_upward
        return self.hop1zuo1of_downward

    def insert_nontam_piece_into_hop1zuo1(self, color: Color, prof: Profession, side: Side) -> None:
        self.hop1zuo1_of(side).append(ColorAndProf(color=color, prof=prof))

    def nontam_piece(self, color: Color, prof: Profession, side: Side) -> NonTam2Piece:
        return NonTam2Piece(color=color, prof=prof, side=side)

    def move_nontam_piece(self, src: Coord, dest: Coord, whose_turn: Side) -> "Field":
        return FieldEngine.move_nontam_piece(self, src, dest, whose_turn)

    def search_from_hop1zuo1_and_parachute_at(
        self, color: Color, prof: Profession, side: Side, to: Coord
    ) -> Optional["Field"]:
        return FieldEngine.parachute(self, color, prof, side, to)
