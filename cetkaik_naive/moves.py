"""Move descriptions ("pure moves").

A pure move says *what* was played, not whether it was legal. The variants
are generic over the coordinate type so that one set of classes serves
both representations; ``AbsolutePureMove`` / ``RelativePureMove`` are the
parametrized unions for validating serialized input.

Board-to-board moves of ordinary pieces map onto
``FieldEngine.move_nontam_piece`` and ``NonTamMoveFromHopZuo`` maps onto
``FieldEngine.parachute``. Tam2's two-destination moves are described here
but are not executed by this package.
"""
from __future__ import annotations

from typing import Annotated, Any, Callable, Dict, Generic, List, Literal, Tuple, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel

from . import absolute, relative
from .models import Color, Profession

__all__ = [
    "NonTamMoveSrcDst",
    "NonTamMoveSrcStepDstFinite",
    "InfAfterStep",
    "NonTamMoveFromHopZuo",
    "TamMoveNoStep",
    "TamMoveStepsDuringFormer",
    "TamMoveStepsDuringLatter",
    "PureMove",
    "AbsolutePureMove",
    "RelativePureMove",
    "coords_of",
    "map_coords",
    "is_tam_move",
    "is_parachute",
]

CoordT = TypeVar("CoordT")


class NonTamMoveSrcDst(BaseModel, Generic[CoordT]):
    """A non-Tam2 piece moves from ``src`` to ``dest`` without stepping."""
    type: Literal["non_tam_move_src_dst"] = "non_tam_move_src_dst"
    src: CoordT
    dest: CoordT
    is_water_entry_ciurl: bool = False

    class Config:
        frozen = True


class NonTamMoveSrcStepDstFinite(BaseModel, Generic[CoordT]):
    """A non-Tam2 piece steps over ``step`` and lands on ``dest``."""
    type: Literal["non_tam_move_src_step_dst_finite"] = "non_tam_move_src_step_dst_finite"
    src: CoordT
    step: CoordT
    dest: CoordT
    is_water_entry_ciurl: bool = False

    class Config:
        frozen = True


class InfAfterStep(BaseModel, Generic[CoordT]):
    """
    First half of a step-then-range move: the destination is decided by
    ciurl, so only the planned direction is known.
    """
    type: Literal["inf_after_step"] = "inf_after_step"
    src: CoordT
    step: CoordT
    planned_direction: CoordT

    class Config:
        frozen = True


class NonTamMoveFromHopZuo(BaseModel, Generic[CoordT]):
    """Parachute: a piece from hop1zuo1 is placed on ``dest``."""
    type: Literal["non_tam_move_from_hop_zuo"] = "non_tam_move_from_hop_zuo"
    color: Color
    prof: Profession
    dest: CoordT

    class Config:
        frozen = True


class TamMoveNoStep(BaseModel, Generic[CoordT]):
    type: Literal["tam_move_no_step"] = "tam_move_no_step"
    src: CoordT
    first_dest: CoordT
    second_dest: CoordT

    class Config:
        frozen = True


class TamMoveStepsDuringFormer(BaseModel, Generic[CoordT]):
    type: Literal["tam_move_steps_during_former"] = "tam_move_steps_during_former"
    src: CoordT
    step: CoordT
    first_dest: CoordT
    second_dest: CoordT

    class Config:
        frozen = True


class TamMoveStepsDuringLatter(BaseModel, Generic[CoordT]):
    type: Literal["tam_move_steps_during_latter"] = "tam_move_steps_during_latter"
    src: CoordT
    first_dest: CoordT
    step: CoordT
    second_dest: CoordT

    class Config:
        frozen = True


_VARIANTS: Tuple[Type[BaseModel], ...] = (
    NonTamMoveSrcDst,
    NonTamMoveSrcStepDstFinite,
    InfAfterStep,
    NonTamMoveFromHopZuo,
    TamMoveNoStep,
    TamMoveStepsDuringFormer,
    TamMoveStepsDuringLatter,
)

_BY_TYPE: Dict[str, Type[BaseModel]] = {
    cls.model_fields["type"].default: cls for cls in _VARIANTS
}

# Coordinate-valued fields per variant, in notation order.
_COORD_FIELDS: Dict[str, Tuple[str, ...]] = {
    "non_tam_move_src_dst": ("src", "dest"),
    "non_tam_move_src_step_dst_finite": ("src", "step", "dest"),
    "inf_after_step": ("src", "step", "planned_direction"),
    "non_tam_move_from_hop_zuo": ("dest",),
    "tam_move_no_step": ("src", "first_dest", "second_dest"),
    "tam_move_steps_during_former": ("src", "step", "first_dest", "second_dest"),
    "tam_move_steps_during_latter": ("src", "first_dest", "step", "second_dest"),
}

_TAM_MOVES = frozenset(
    ["tam_move_no_step", "tam_move_steps_during_former", "tam_move_steps_during_latter"]
)

PureMove = Union[
    NonTamMoveSrcDst,
    NonTamMoveSrcStepDstFinite,
    InfAfterStep,
    NonTamMoveFromHopZuo,
    TamMoveNoStep,
    TamMoveStepsDuringFormer,
    TamMoveStepsDuringLatter,
]

AbsolutePureMove = Annotated[
    Union[
        NonTamMoveSrcDst[absolute.Coord],
        NonTamMoveSrcStepDstFinite[absolute.Coord],
        InfAfterStep[absolute.Coord],
        NonTamMoveFromHopZuo[absolute.Coord],
        TamMoveNoStep[absolute.Coord],
        TamMoveStepsDuringFormer[absolute.Coord],
        TamMoveStepsDuringLatter[absolute.Coord],
    ],
    pydantic.Field(discriminator="type"),
]

RelativePureMove = Annotated[
    Union[
        NonTamMoveSrcDst[relative.Coord],
        NonTamMoveSrcStepDstFinite[relative.Coord],
        InfAfterStep[relative.Coord],
        NonTamMoveFromHopZuo[relative.Coord],
        TamMoveNoStep[relative.Coord],
        TamMoveStepsDuringFormer[relative.Coord],
        TamMoveStepsDuringLatter[relative.Coord],
    ],
    pydantic.Field(discriminator="type"),
]


def coords_of(move: PureMove) -> List[Any]:
    """The coordinates a move mentions, in notation order."""
    return [getattr(move, name) for name in _COORD_FIELDS[move.type]]


def map_coords(move: PureMove, fn: Callable[[Any], Any]) -> PureMove:
    """Rebuild ``move`` with ``fn`` applied to every coordinate field."""
    cls = _BY_TYPE[move.type]
    values = {name: getattr(move, name) for name in cls.model_fields}
    for name in _COORD_FIELDS[move.type]:
        values[name] = fn(values[name])
    return cls(**values)


def is_tam_move(move: PureMove) -> bool:
    return move.type in _TAM_MOVES


def is_parachute(move: PureMove) -> bool:
    return move.type == "non_tam_move_from_hop_zuo"
