"""
Pydantic Models for cetkaik value types
Shared by the absolute and the relative representations.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel


class Color(str, Enum):
    """Color of a piece"""
    KOK1 = "Kok1"  # red
    HUOK2 = "Huok2"  # black


class Profession(str, Enum):
    """Profession (role) of a piece"""
    NUAK1 = "Nuak1"  # vessel
    KAUK2 = "Kauk2"  # pawn
    GUA2 = "Gua2"  # rook
    KAUN1 = "Kaun1"  # bishop
    DAU2 = "Dau2"  # tiger
    MAUN1 = "Maun1"  # horse
    KUA2 = "Kua2"  # clerk
    TUK2 = "Tuk2"  # shaman
    UAI1 = "Uai1"  # general
    IO = "Io"  # king


class AbsoluteSide(str, Enum):
    """The two fixed sides, named after the row each one starts behind."""
    A_SIDE = "ASide"
    IA_SIDE = "IASide"

    def opponent(self) -> "AbsoluteSide":
        return AbsoluteSide.IA_SIDE if self is AbsoluteSide.A_SIDE else AbsoluteSide.A_SIDE


class ColorAndProf(BaseModel):
    """A hop1zuo1 (hand) entry: a captured piece without side or square."""
    color: Color
    prof: Profession

    class Config:
        frozen = True


class Tam2(BaseModel):
    """Tam2, the single piece belonging to both sides.

    It has no color, no profession and no side, so every ownership
    predicate reports False for it.
    """
    kind: Literal["tam2"] = "tam2"

    class Config:
        frozen = True

    def is_tam2(self) -> bool:
        return True

    def has_color(self, color: Color) -> bool:
        return False

    def has_prof(self, prof: Profession) -> bool:
        return False

    def has_side(self, side: object) -> bool:
        return False


TAM2 = Tam2()


_COLOR_GLYPHS = {
    Color.KOK1: "赤",
    Color.HUOK2: "黒",
}

_PROF_GLYPHS = {
    Profession.NUAK1: "船",
    Profession.KAUK2: "兵",
    Profession.GUA2: "弓",
    Profession.KAUN1: "車",
    Profession.DAU2: "虎",
    Profession.MAUN1: "馬",
    Profession.KUA2: "筆",
    Profession.TUK2: "巫",
    Profession.UAI1: "将",
    Profession.IO: "王",
}


def serialize_color(color: Color) -> str:
    return _COLOR_GLYPHS[color]


def serialize_prof(prof: Profession) -> str:
    return _PROF_GLYPHS[prof]
