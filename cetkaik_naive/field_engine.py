"""Move-application protocol for cetkaik fields.

Both representations (``absolute.Field`` and ``relative.Field``) delegate
here; the engine only talks to them through the ``IsField`` / ``IsBoard``
protocols.

Every entry point copies its input first and works on the copy, so a
failure can never leave a half-applied move visible to the caller, and a
success yields a field that shares nothing with the input.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from .config import strict_invariants_enabled
from .errors import (
    CannotCaptureNeutralError,
    CannotCaptureOwnError,
    EmptySourceError,
    InvalidMoveError,
    InvalidStateError,
    NotOwnerError,
    SourceIsNeutralError,
)
from .interface import FieldT
from .models import Color, ColorAndProf, Profession

__all__ = ["FieldEngine"]

logger = logging.getLogger(__name__)


class FieldEngine:
    """Stateless operations taking a field and returning a new one."""

    @staticmethod
    def move_nontam_piece(field: FieldT, src: Any, dest: Any, whose_turn: Any) -> FieldT:
        """
        Move the non-Tam2 piece at ``src`` to ``dest``, taking the opponent
        piece at ``dest`` (if any) into ``whose_turn``'s hop1zuo1.

        Whether the piece can actually reach ``dest`` is the caller's
        business; this only enforces ownership and capture rules.

        Raises:
            EmptySourceError: ``src`` holds no piece.
            SourceIsNeutralError: ``src`` holds Tam2.
            NotOwnerError: the piece at ``src`` is not ``whose_turn``'s.
            CannotCaptureNeutralError: ``dest`` holds Tam2.
            CannotCaptureOwnError: ``dest`` holds a piece of ``whose_turn``.
        """
        try:
            new_field = FieldEngine._move_nontam_piece(field, src, dest, whose_turn)
        except InvalidMoveError as e:
            logger.debug("rejected move %s -> %s by %s: %s", src, dest, whose_turn, e.code)
            raise
        FieldEngine._maybe_check_invariants(new_field)
        return new_field

    @staticmethod
    def _move_nontam_piece(field: FieldT, src: Any, dest: Any, whose_turn: Any) -> FieldT:
        new_field = field.clone()
        board = new_field.as_board()
        context = {"src": str(src), "dest": str(dest), "whose_turn": getattr(whose_turn, "value", whose_turn)}

        src_piece = board.peek(src)
        if src_piece is None:
            raise EmptySourceError("src does not contain a piece", context=context)
        if src_piece.is_tam2():
            raise SourceIsNeutralError(
                "Expected a non-Tam2 piece at src, but found Tam2", context=context
            )
        if not src_piece.has_side(whose_turn):
            raise NotOwnerError("Found the opponent piece at src", context=context)

        # Read before moving so that src == dest sees the mover itself.
        maybe_captured = board.peek(dest)
        board.pop(src)
        board.put(dest, src_piece)

        if maybe_captured is not None:
            if maybe_captured.is_tam2():
                raise CannotCaptureNeutralError("Tried to capture Tam2", context=context)
            if maybe_captured.has_side(whose_turn):
                raise CannotCaptureOwnError("Tried to capture an ally", context=context)
            new_field.insert_nontam_piece_into_hop1zuo1(
                maybe_captured.color, maybe_captured.prof, whose_turn
            )
            logger.debug(
                "%s captured %s %s at %s",
                whose_turn, maybe_captured.color.value, maybe_captured.prof.value, dest,
            )

        logger.debug("moved %s %s from %s to %s", src_piece.color.value, src_piece.prof.value, src, dest)
        return new_field

    @staticmethod
    def parachute(
        field: FieldT, color: Color, prof: Profession, side: Any, dest: Any
    ) -> Optional[FieldT]:
        """
        Take one ``(color, prof)`` out of ``side``'s hop1zuo1 and place it at
        ``dest``.

        Returns None when the hop1zuo1 has no such entry or when ``dest`` is
        occupied; placing never captures.
        """
        entry = ColorAndProf(color=color, prof=prof)
        if entry not in field.hop1zuo1_of(side):
            logger.debug("no %s %s in hop1zuo1 of %s", color.value, prof.value, side)
            return None
        if field.as_board().peek(dest) is not None:
            logger.debug("cannot parachute onto occupied square %s", dest)
            return None

        new_field = field.clone()
        # Entries are value-equal, so which duplicate goes is unobservable.
        new_field.hop1zuo1_of(side).remove(entry)
        new_field.as_board().put(dest, new_field.nontam_piece(color, prof, side))

        logger.debug("parachuted %s %s of %s at %s", color.value, prof.value, side, dest)
        FieldEngine._maybe_check_invariants(new_field)
        return new_field

    @staticmethod
    def check_invariants(field: Any) -> None:
        """Raise InvalidStateError if the board holds more than one Tam2."""
        tam2_squares = [
            str(coord) for coord, piece in field.as_board().occupied_squares() if piece.is_tam2()
        ]
        if len(tam2_squares) > 1:
            raise InvalidStateError(
                "More than one Tam2 on the board",
                context={"squares": ",".join(tam2_squares)},
            )

    @staticmethod
    def _maybe_check_invariants(field: Any) -> None:
        if strict_invariants_enabled():
            FieldEngine.check_invariants(field)
