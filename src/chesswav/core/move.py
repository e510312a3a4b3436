"""Move value objects.

A :class:`NotationMove` is what the notation parser knows about a move: the
piece kind and destination, never the origin. :meth:`Board.resolve_move`
turns it into a :class:`ResolvedMove` that :meth:`Board.apply_move` consumes.
"""

from __future__ import annotations

from dataclasses import dataclass

from chesswav.core.enums import Capture, CastlingSide, PieceKind, Threat
from chesswav.core.types import Square

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class NotationMove:
    """A parsed algebraic move token."""

    piece: PieceKind
    dest: Square
    threat: Threat = Threat.NONE
    capture: Capture = Capture.NONE
    promotion: PieceKind | None = None
    # Disambiguation data extracted by the parser, 0-7 indexes.
    file_hint: int | None = None
    rank_hint: int | None = None
    castling: CastlingSide | None = None


@dataclass(frozen=True, slots=True)
class ResolvedMove:
    """A fully specified move: origin, destination and side effects."""

    origin: Square
    dest: Square
    promotion: PieceKind | None = None
    # (rook_from, rook_to) when the move is a castle.
    castling_rook: tuple[Square, Square] | None = None

    def __str__(self) -> str:
        base = f"{self.origin}{self.dest}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base
