"""
Board and Field protocols.

Both board shapes (the sparse, absolute-keyed ``absolute.Board`` and the
dense 9x9 ``relative.Board``) satisfy the same structural contract, so the
move-application protocol in ``field_engine`` is written once against it:

- `IsBoard` - peek/pop/put plus the diagnostic occupancy assertions
- `IsField` - a board plus one hop1zuo1 per side
- `IsAbsoluteField` - a field that can construct the standard opening

Neither board inherits from these; conformance is structural.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Protocol, Tuple, TypeVar, runtime_checkable

from .models import Color, ColorAndProf, Profession

CoordT = TypeVar("CoordT")
PieceT = TypeVar("PieceT")
SideT = TypeVar("SideT")
FieldT = TypeVar("FieldT", bound="IsField")


@runtime_checkable
class IsBoard(Protocol[CoordT, PieceT]):
    """Total function from coordinate to optional piece."""

    def peek(self, c: CoordT) -> Optional[PieceT]:
        """Return the piece at ``c`` without side effects."""
        ...

    def pop(self, c: CoordT) -> Optional[PieceT]:
        """Remove and return the piece at ``c``; a second call returns None."""
        ...

    def put(self, c: CoordT, p: Optional[PieceT]) -> None:
        """Unconditionally set (or, with None, clear) the square ``c``."""
        ...

    def assert_empty(self, c: CoordT) -> None:
        ...

    def assert_occupied(self, c: CoordT) -> None:
        ...

    def occupied_squares(self) -> Iterator[Tuple[CoordT, PieceT]]:
        ...


@runtime_checkable
class IsField(Protocol[CoordT, PieceT, SideT]):
    """A board plus each side's hop1zuo1."""

    def as_board(self) -> IsBoard[CoordT, PieceT]:
        ...

    def clone(self) -> "IsField[CoordT, PieceT, SideT]":
        """Return an independent deep copy."""
        ...

    def hop1zuo1_of(self, side: SideT) -> List[ColorAndProf]:
        ...

    def insert_nontam_piece_into_hop1zuo1(
        self, color: Color, prof: Profession, side: SideT
    ) -> None:
        ...

    def nontam_piece(self, color: Color, prof: Profession, side: SideT) -> PieceT:
        """Build an owned piece in this field's coordinate system."""
        ...


@runtime_checkable
class IsAbsoluteField(Protocol):
    @classmethod
    def yhuap_initial(cls) -> "IsAbsoluteField":
        ...
