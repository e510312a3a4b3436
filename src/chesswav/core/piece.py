"""Piece value object: what occupies a square."""

from __future__ import annotations

from dataclasses import dataclass

from chesswav.core.enums import Color, PieceKind

# FEN character <-> (PieceKind, Color)
_CHAR_MAP: dict[str, tuple[PieceKind, Color]] = {
    "P": (PieceKind.PAWN, Color.WHITE),
    "N": (PieceKind.KNIGHT, Color.WHITE),
    "B": (PieceKind.BISHOP, Color.WHITE),
    "R": (PieceKind.ROOK, Color.WHITE),
    "Q": (PieceKind.QUEEN, Color.WHITE),
    "K": (PieceKind.KING, Color.WHITE),
    "p": (PieceKind.PAWN, Color.BLACK),
    "n": (PieceKind.KNIGHT, Color.BLACK),
    "b": (PieceKind.BISHOP, Color.BLACK),
    "r": (PieceKind.ROOK, Color.BLACK),
    "q": (PieceKind.QUEEN, Color.BLACK),
    "k": (PieceKind.KING, Color.BLACK),
}
_FEN_CHARS: dict[tuple[PieceKind, Color], str] = {v: k for k, v in _CHAR_MAP.items()}

# SAN piece letters; pawns have none.
SAN_LETTERS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
SAN_KINDS: dict[str, PieceKind] = {v: k for k, v in SAN_LETTERS.items()}

_UNICODE: dict[PieceKind, tuple[str, str]] = {
    PieceKind.PAWN: ("♙", "♟"),
    PieceKind.KNIGHT: ("♘", "♞"),
    PieceKind.BISHOP: ("♗", "♝"),
    PieceKind.ROOK: ("♖", "♜"),
    PieceKind.QUEEN: ("♕", "♛"),
    PieceKind.KING: ("♔", "♚"),
}


@dataclass(frozen=True, slots=True)
class Piece:
    """A piece kind owned by one side."""

    kind: PieceKind
    color: Color

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.kind, self.color)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'n' -> black knight."""
        try:
            kind, color = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self.kind][int(self.color)]
