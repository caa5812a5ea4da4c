"""
Shared pytest fixtures for cetkaik-naive tests.

Board and field fixtures are function-scoped: the models are mutable and
each test should get its own copy.
"""

from pathlib import Path
import sys
from typing import Callable, Dict, List, Optional, Tuple

import pytest

# Ensure the repository root is on sys.path so `import cetkaik_naive` works
# when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from cetkaik_naive import absolute, relative  # noqa: E402
from cetkaik_naive.models import (  # noqa: E402
    AbsoluteSide,
    Color,
    ColorAndProf,
    Profession,
)


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def abs_piece_factory() -> Callable[..., absolute.NonTam2Piece]:
    """Factory for absolute owned pieces."""

    def _create_piece(
        side: AbsoluteSide = AbsoluteSide.A_SIDE,
        color: Color = Color.KOK1,
        prof: Profession = Profession.KAUK2,
    ) -> absolute.NonTam2Piece:
        return absolute.NonTam2Piece(color=color, prof=prof, side=side)

    return _create_piece


@pytest.fixture
def rel_piece_factory() -> Callable[..., relative.NonTam2Piece]:
    """Factory for relative owned pieces."""

    def _create_piece(
        side: relative.Side = relative.Side.UPWARD,
        color: Color = Color.KOK1,
        prof: Profession = Profession.KAUK2,
    ) -> relative.NonTam2Piece:
        return relative.NonTam2Piece(color=color, prof=prof, side=side)

    return _create_piece


@pytest.fixture
def abs_field_factory() -> Callable[..., absolute.Field]:
    """Factory for absolute fields from ``{token: piece}``."""

    def _create_field(
        pieces: Optional[Dict[str, object]] = None,
        a_side_hand: Optional[List[Tuple[Color, Profession]]] = None,
        ia_side_hand: Optional[List[Tuple[Color, Profession]]] = None,
    ) -> absolute.Field:
        board = absolute.Board()
        for token, piece in (pieces or {}).items():
            board.put(absolute.Coord.parse(token), piece)
        return absolute.Field(
            board=board,
            a_side_hop1zuo1=[ColorAndProf(color=c, prof=p) for c, p in a_side_hand or []],
            ia_side_hop1zuo1=[ColorAndProf(color=c, prof=p) for c, p in ia_side_hand or []],
        )

    return _create_field


@pytest.fixture
def rel_field_factory() -> Callable[..., relative.Field]:
    """Factory for relative fields from ``{(row, col): piece}``."""

    def _create_field(
        pieces: Optional[Dict[Tuple[int, int], object]] = None,
        upward_hand: Optional[List[Tuple[Color, Profession]]] = None,
        downward_hand: Optional[List[Tuple[Color, Profession]]] = None,
    ) -> relative.Field:
        board = relative.Board()
        for (row, col), piece in (pieces or {}).items():
            board.put(relative.Coord(row=row, col=col), piece)
        return relative.Field(
            current_board=board,
            hop1zuo1of_upward=[ColorAndProf(color=c, prof=p) for c, p in upward_hand or []],
            hop1zuo1of_downward=[ColorAndProf(color=c, prof=p) for c, p in downward_hand or []],
        )

    return _create_field
