"""Algebraic notation: tokenizing, parsing and disambiguation hints."""

from __future__ import annotations

import re

from chesswav.core.enums import Capture, CastlingSide, Color, PieceKind, Threat
from chesswav.core.move import NotationMove
from chesswav.core.piece import SAN_KINDS
from chesswav.core.types import FILES, RANKS, Square

_CASTLING: dict[str, CastlingSide] = {
    "O-O": CastlingSide.KINGSIDE,
    "0-0": CastlingSide.KINGSIDE,
    "O-O-O": CastlingSide.QUEENSIDE,
    "0-0-0": CastlingSide.QUEENSIDE,
}
_RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_PROMOTION_KINDS = frozenset(
    {PieceKind.QUEEN, PieceKind.ROOK, PieceKind.BISHOP, PieceKind.KNIGHT}
)


class NotationError(ValueError):
    """Raised when a token is not a readable algebraic move."""


# -- Tokenizing -------------------------------------------------------------


def tokenize(text: str) -> list[str]:
    """Split movetext into move tokens.

    Move numbers (``1.``, ``12...``) and result markers are dropped; a number
    glued to its move (``1.e4``) leaves the move behind.
    """
    tokens: list[str] = []
    for raw in text.split():
        if raw in _RESULT_TOKENS:
            continue
        token = _MOVE_NUMBER_RE.sub("", raw)
        if token:
            tokens.append(token)
    return tokens


# -- Hint helpers (shared with Board.resolve_move) ---------------------------


def castling_side(notation: str) -> CastlingSide | None:
    return _CASTLING.get(notation.rstrip("+#!?"))


def is_castling(notation: str) -> bool:
    """``O-O`` / ``O-O-O`` (or the zero forms), annotations allowed."""
    return castling_side(notation) is not None


def strip_annotations(notation: str) -> str:
    """Drop the promotion suffix and every ``+#!?x-`` character.

    ``"Nxf3+"`` -> ``"Nf3"``, ``"e8=Q"`` -> ``"e8"``.
    """
    head = notation.split("=", 1)[0]
    return "".join(ch for ch in head if ch not in "+#!?x-")


def extract_hints(clean: str, piece: PieceKind) -> tuple[int | None, int | None]:
    """``(file_hint, rank_hint)`` embedded in a stripped token.

    A pawn token longer than two characters names its source file first
    (``ed5``). A piece token longer than three characters carries hints
    between the piece letter and the destination (``Rad1``, ``N5f3``,
    ``Qh4e1``); the last file and the last rank seen win.
    """
    if piece == PieceKind.PAWN:
        if len(clean) > 2 and clean[0] in FILES:
            return FILES.index(clean[0]), None
        return None, None

    if len(clean) <= 3:
        return None, None

    file_hint: int | None = None
    rank_hint: int | None = None
    for ch in clean[1:-2]:
        if ch in FILES:
            file_hint = FILES.index(ch)
        elif ch in RANKS:
            rank_hint = RANKS.index(ch)
    return file_hint, rank_hint


# -- Parsing ----------------------------------------------------------------


def _threat_of(notation: str) -> Threat:
    if "#" in notation:
        return Threat.CHECKMATE
    if "+" in notation:
        return Threat.CHECK
    return Threat.NONE


def _promotion_of(notation: str) -> PieceKind | None:
    if "=" not in notation:
        return None
    suffix = notation.split("=", 1)[1].rstrip("+#!?")
    kind = SAN_KINDS.get(suffix)
    if kind not in _PROMOTION_KINDS:
        raise NotationError(f"Invalid promotion piece in {notation!r}")
    return kind


def parse_move(notation: str, color: Color = Color.WHITE) -> NotationMove:
    """Parse one SAN token into a :class:`NotationMove`.

    *color* is the side making the move; it only matters for castling, whose
    destination lies on the mover's back rank.
    """
    text = notation.strip()
    if not text:
        raise NotationError("Empty move")

    side = castling_side(text)
    if side is not None:
        dest_file = 6 if side == CastlingSide.KINGSIDE else 2
        return NotationMove(
            piece=PieceKind.KING,
            dest=Square(dest_file, color.back_rank),
            threat=_threat_of(text),
            castling=side,
        )

    clean = strip_annotations(text)
    if len(clean) < 2:
        raise NotationError(f"Move too short: {notation!r}")

    if clean[0] in SAN_KINDS:
        piece = SAN_KINDS[clean[0]]
    elif clean[0] in FILES:
        piece = PieceKind.PAWN
    else:
        raise NotationError(f"Unknown piece letter in {notation!r}")

    try:
        dest = Square.parse(clean[-2:])
    except ValueError:
        raise NotationError(f"Invalid destination in {notation!r}") from None

    promotion = _promotion_of(text)
    if promotion is not None and piece != PieceKind.PAWN:
        raise NotationError(f"Only pawns promote: {notation!r}")

    file_hint, rank_hint = extract_hints(clean, piece)
    if piece == PieceKind.PAWN and file_hint is None and "x" not in text:
        # A bare push stays on its own file.
        file_hint = dest.file
    return NotationMove(
        piece=piece,
        dest=dest,
        threat=_threat_of(text),
        capture=Capture.TAKEN if "x" in text else Capture.NONE,
        promotion=promotion,
        file_hint=file_hint,
        rank_hint=rank_hint,
    )
