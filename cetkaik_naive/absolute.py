"""Absolute representation: "which piece lies in the square LIA?"

Squares are named by a Row and a Column, independent of who is looking at
the board. The board is sparse: a dict from the coordinate token (the same
string ``serialize_coord`` prints) to the piece standing there, so it dumps
to JSON as-is.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Iterator, List, Literal, Mapping, Optional, Tuple, Union

import pydantic
from pydantic import BaseModel, field_validator, model_serializer, model_validator

from .errors import InvalidStateError, MalformedCoordinateError
from .field_engine import FieldEngine
from .models import TAM2, AbsoluteSide, Color, ColorAndProf, Profession, Tam2

__all__ = [
    "Row",
    "Column",
    "Coord",
    "NonTam2Piece",
    "Piece",
    "Board",
    "Field",
    "Tam2",
    "TAM2",
    "distance",
    "same_direction",
    "is_water",
    "parse_coord",
    "serialize_coord",
]


class Row(str, Enum):
    """Row of the board; A is the top row when IA is at the bottom."""
    A = "A"
    E = "E"
    I = "I"  # noqa: E741
    U = "U"
    O = "O"  # noqa: E741
    Y = "Y"
    AI = "AI"
    AU = "AU"
    IA = "IA"


class Column(str, Enum):
    """Column of the board; K is the leftmost column when IA is at the bottom."""
    K = "K"
    L = "L"
    N = "N"
    T = "T"
    Z = "Z"
    X = "X"
    C = "C"
    M = "M"
    P = "P"


class Coord(BaseModel):
    """Absolute coordinate.

    Validates from either field values or a coordinate token, and
    serializes back to the token::

        Coord(row=Row.IA, column=Column.L).model_dump() == "LIA"
        Coord.model_validate("LIA") == Coord(row=Row.IA, column=Column.L)
    """
    row: Row
    column: Column

    class Config:
        frozen = True

    @model_validator(mode="before")
    @classmethod
    def _from_token(cls, data: Any) -> Any:
        if isinstance(data, str):
            coord = parse_coord(data)
            if coord is None:
                raise MalformedCoordinateError(data)
            return {"row": coord.row, "column": coord.column}
        return data

    @model_serializer
    def _to_token(self) -> str:
        return serialize_coord(self)

    @classmethod
    def parse(cls, token: str) -> "Coord":
        """Like ``parse_coord`` but raises MalformedCoordinateError."""
        coord = parse_coord(token)
        if coord is None:
            raise MalformedCoordinateError(token)
        return coord

    def to_key(self) -> str:
        return serialize_coord(self)

    def __str__(self) -> str:
        return serialize_coord(self)


class NonTam2Piece(BaseModel):
    """Every piece other than Tam2; belongs to exactly one side."""
    kind: Literal["non_tam2"] = "non_tam2"
    color: Color
    prof: Profession
    side: AbsoluteSide

    class Config:
        frozen = True

    def is_tam2(self) -> bool:
        return False

    def has_color(self, color: Color) -> bool:
        return self.color == color

    def has_prof(self, prof: Profession) -> bool:
        return self.prof == prof

    def has_side(self, side: AbsoluteSide) -> bool:
        return self.side == side


Piece = Annotated[Union[Tam2, NonTam2Piece], pydantic.Field(discriminator="kind")]


# Tokens are matched whole; no prefix of a longer token is accepted.
_COLUMN_TOKENS: Dict[str, Column] = {column.value: column for column in Column}
_ROW_TOKENS: Dict[str, Row] = {row.value: row for row in Row}


def parse_coord(token: str) -> Optional[Coord]:
    """Parse a coordinate token such as ``"LIA"`` (column, then row).

    Case-sensitive; returns None for anything malformed::

        parse_coord("LIA") == Coord(row=Row.IA, column=Column.L)
        parse_coord("LiA") is None
    """
    if not token or len(token) > 3:
        return None
    column = _COLUMN_TOKENS.get(token[0])
    row = _ROW_TOKENS.get(token[1:])
    if column is None or row is None:
        return None
    return Coord(row=row, column=column)


def serialize_coord(coord: Coord) -> str:
    return f"{coord.column.value}{coord.row.value}"


def distance(a: Coord, b: Coord) -> int:
    """Chebyshev distance between two squares.

    Computed on the relative indices; any perspective gives the same value,
    so one is picked.
    """
    from .perspective import Perspective, to_relative_coord
    from .relative import distance as relative_distance

    p = Perspective.IA_IS_DOWN_AND_POINTS_UPWARD
    return relative_distance(to_relative_coord(a, p), to_relative_coord(b, p))


def same_direction(origin: Coord, a: Coord, b: Coord) -> bool:
    """Whether ``a`` and ``b`` lie in the same direction seen from ``origin``."""
    from .perspective import Perspective, to_relative_coord
    from .relative import same_direction as relative_same_direction

    p = Perspective.IA_IS_DOWN_AND_POINTS_UPWARD
    return relative_same_direction(
        to_relative_coord(origin, p),
        to_relative_coord(a, p),
        to_relative_coord(b, p),
    )


_WATER_ROW_O = {Column.N, Column.T, Column.Z, Column.X, Column.C}
_WATER_COLUMN_Z = {Row.I, Row.U, Row.Y, Row.AI}


def is_water(coord: Coord) -> bool:
    """Whether the square is tam2 nua2 (Tam2's water), entry to which is restricted."""
    if coord.row is Row.O:
        return coord.column in _WATER_ROW_O
    return coord.row in _WATER_COLUMN_Z and coord.column is Column.Z


class Board(BaseModel):
    """The 9x9 squares, keyed by absolute coordinate token. Empty squares are absent."""
    squares: Dict[str, Piece] = pydantic.Field(default_factory=dict)

    @field_validator("squares")
    @classmethod
    def _check_keys(cls, squares: Dict[str, Any]) -> Dict[str, Any]:
        for key in squares:
            if parse_coord(key) is None:
                raise MalformedCoordinateError(key)
        return squares

    @classmethod
    def from_pieces(cls, pieces: Mapping[Coord, Union[Tam2, NonTam2Piece]]) -> "Board":
        return cls(squares={c.to_key(): p for c, p in pieces.items()})

    def peek(self, c: Coord) -> Optional[Union[Tam2, NonTam2Piece]]:
        return self.squares.get(c.to_key())

    def pop(self, c: Coord) -> Optional[Union[Tam2, NonTam2Piece]]:
        return self.squares.pop(c.to_key(), None)

    def put(self, c: Coord, p: Optional[Union[Tam2, NonTam2Piece]]) -> None:
        if p is None:
            self.squares.pop(c.to_key(), None)
        else:
            self.squares[c.to_key()] = p

    def assert_empty(self, c: Coord) -> None:
        if c.to_key() in self.squares:
            raise InvalidStateError(
                f"Expected the square {c} to be empty, but it was occupied",
                context={"coord": str(c)},
            )

    def assert_occupied(self, c: Coord) -> None:
        if c.to_key() not in self.squares:
            raise InvalidStateError(
                f"Expected the square {c} to be occupied, but it was empty",
                context={"coord": str(c)},
            )

    def occupied_squares(self) -> Iterator[Tuple[Coord, Union[Tam2, NonTam2Piece]]]:
        for key, piece in self.squares.items():
            yield Coord.parse(key), piece

    def piece_count(self) -> int:
        return len(self.squares)


class Field(BaseModel):
    """A board plus each side's hop1zuo1 (hand)."""
    board: Board = pydantic.Field(default_factory=Board)
    a_side_hop1zuo1: List[ColorAndProf] = pydantic.Field(default_factory=list)
    ia_side_hop1zuo1: List[ColorAndProf] = pydantic.Field(default_factory=list)

    @classmethod
    def yhuap_initial(cls) -> "Field":
        """The standardized (y1 huap1) opening with both hands empty."""
        from .initial import yhuap_initial_field

        return yhuap_initial_field()

    def as_board(self) -> Board:
        return self.board

    def clone(self) -> "Field":
        return self.model_copy(deep=True)

    def hop1zuo1_of(self, side: AbsoluteSide) -> List[ColorAndProf]:
        if side is AbsoluteSide.A_SIDE:
            return self.a_side_hop1zuo1
        return self.ia_side_hop1zuo1

    def insert_nontam_piece_into_hop1zuo1(
        self, color: Color, prof: Profession, side: AbsoluteSide
    ) -> None:
        self.hop1zuo1_of(side).append(ColorAndProf(color=color, prof=prof))

    def nontam_piece(self, color: Color, prof: Profession, side: AbsoluteSide) -> NonTam2Piece:
        return NonTam2Piece(color=color, prof=prof, side=side)

    def move_nontam_piece(self, src: Coord, dest: Coord, whose_turn: AbsoluteSide) -> "Field":
        """Move a non-Tam2 piece, capturing whatever opponent piece sits at ``dest``.

        Returns a new Field; raises an InvalidMoveError subclass otherwise.
        """
        return FieldEngine.move_nontam_piece(self, src, dest, whose_turn)

    def search_from_hop1zuo1_and_parachute_at(
        self, color: Color, prof: Profession, side: AbsoluteSide, to: Coord
    ) -> Optional["Field"]:
        return FieldEngine.parachute(self, color, prof, side, to)
