"""cetkaik-naive: a naive representation of the cetkaik board.

- absolute: squares named by row/column ("which piece lies in LIA?")
- relative: squares as seen by one player ("which piece is the opponent's?")
- perspective: conversions between the two
- field_engine: applying moves and parachutes to a Field
- moves: move descriptions
"""

from . import absolute, relative, perspective, moves
from .models import TAM2, AbsoluteSide, Color, ColorAndProf, Profession, Tam2
from .perspective import Perspective
from .field_engine import FieldEngine
from .initial import yhuap_initial_board, yhuap_initial_field
from .errors import (
    CetkaikError,
    InvalidMoveError,
    EmptySourceError,
    SourceIsNeutralError,
    NotOwnerError,
    SourceIsOpponentOwnedError,
    CannotCaptureNeutralError,
    CannotCaptureOwnError,
    InvalidStateError,
    MalformedCoordinateError,
)

__version__ = "1.0.0"

__all__ = [
    "absolute", "relative", "perspective", "moves",
    "TAM2", "Tam2", "AbsoluteSide", "Color", "ColorAndProf", "Profession",
    "Perspective",
    "FieldEngine",
    "yhuap_initial_board", "yhuap_initial_field",
    "CetkaikError", "InvalidMoveError",
    "EmptySourceError", "SourceIsNeutralError", "NotOwnerError", "SourceIsOpponentOwnedError",
    "CannotCaptureNeutralError", "CannotCaptureOwnError",
    "InvalidStateError", "MalformedCoordinateError",
]
