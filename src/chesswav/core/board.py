"""Board - piece placement on an 8x8 board, plus move resolution."""

from __future__ import annotations

import logging

from chesswav.core.enums import Color, PieceKind
from chesswav.core.move import NotationMove, ResolvedMove
from chesswav.core.move_generator import MoveGenerator
from chesswav.core.notation import extract_hints, is_castling, strip_annotations
from chesswav.core.piece import Piece
from chesswav.core.reach import can_reach
from chesswav.core.rules import Rules
from chesswav.core.types import ALL_SQUARES, Square

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 64-square board, indexed ``rank * 8 + file``.

    The board holds no castling rights, en-passant square or history: every
    rule is derived from current occupancy. :meth:`copy` is a flat list copy,
    which keeps the clone-per-trial-move checkmate search cheap.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        """Standard starting position."""
        self._squares: list[Piece | None] = [None] * 64
        for file, kind in enumerate(_BACK_RANK):
            self._squares[file] = Piece(kind, Color.WHITE)
            self._squares[8 + file] = Piece(PieceKind.PAWN, Color.WHITE)
            self._squares[48 + file] = Piece(PieceKind.PAWN, Color.BLACK)
            self._squares[56 + file] = Piece(kind, Color.BLACK)

    @classmethod
    def empty(cls) -> Board:
        """A board with no pieces, for setting up test positions."""
        b = cls.__new__(cls)
        b._squares = [None] * 64
        return b

    # -- Element access -----------------------------------------------------

    def get(self, file: int, rank: int) -> Piece | None:
        return self._squares[rank * 8 + file]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.to_index()]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        """Position setup only; play goes through :meth:`apply_move`."""
        self._squares[sq.to_index()] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.to_index()] is None

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """*color*'s pieces in scan order (a1, b1, ..., h8)."""
        return [
            (sq, piece)
            for sq, piece in zip(ALL_SQUARES, self._squares)
            if piece is not None and piece.color == color
        ]

    # -- Move resolution ----------------------------------------------------

    def resolve_move(
        self, chess_move: NotationMove, notation: str | None, color: Color
    ) -> ResolvedMove | None:
        """Turn a notation move into a fully specified move for *color*.

        When *notation* (the raw token) is given, castling and
        disambiguation hints are read from it; otherwise the hints carried
        by *chess_move* are used. Returns None when no piece of the right
        kind can reach the destination.
        """
        if notation is not None:
            castling = is_castling(notation)
        else:
            castling = chess_move.castling is not None
        if castling:
            return self._resolve_castling(chess_move, color)

        if notation is not None:
            file_hint, rank_hint = extract_hints(
                strip_annotations(notation), chess_move.piece
            )
        else:
            file_hint, rank_hint = chess_move.file_hint, chess_move.rank_hint

        origin = self.find_origin(
            chess_move.piece, chess_move.dest, color, file_hint, rank_hint
        )
        if origin is None:
            _LOGGER.debug(
                "No %s %s can reach %s (hints file=%s rank=%s)",
                color,
                chess_move.piece.name.lower(),
                chess_move.dest,
                file_hint,
                rank_hint,
            )
            return None

        return ResolvedMove(
            origin=origin,
            dest=chess_move.dest,
            promotion=chess_move.promotion,
        )

    @staticmethod
    def _resolve_castling(chess_move: NotationMove, color: Color) -> ResolvedMove:
        # Built from the notation alone: rights, path and check are not verified.
        rank = color.back_rank
        if chess_move.dest.file == 6:
            rook = (Square(7, rank), Square(5, rank))
        else:
            rook = (Square(0, rank), Square(3, rank))
        return ResolvedMove(
            origin=Square(4, rank),
            dest=chess_move.dest,
            castling_rook=rook,
        )

    def find_origin(
        self,
        piece: PieceKind,
        dest: Square,
        color: Color,
        file_hint: int | None = None,
        rank_hint: int | None = None,
    ) -> Square | None:
        """First square in scan order holding a matching piece that reaches *dest*."""
        for sq, found in zip(ALL_SQUARES, self._squares):
            if found is None or found.kind != piece or found.color != color:
                continue
            if file_hint is not None and sq.file != file_hint:
                continue
            if rank_hint is not None and sq.rank != rank_hint:
                continue
            if can_reach(self, piece, color, sq, dest):
                return sq
        return None

    # -- Mutation -----------------------------------------------------------

    def apply_move(self, move: ResolvedMove) -> None:
        """Play *move* without any legality check.

        A piece on the destination is overwritten. A castling rook is moved
        after the king.
        """
        origin_idx = move.origin.to_index()
        moving = self._squares[origin_idx]
        placed = moving
        if move.promotion is not None:
            if moving is None:
                raise ValueError(f"No piece on {move.origin} to promote")
            placed = Piece(move.promotion, moving.color)

        self._squares[origin_idx] = None
        self._squares[move.dest.to_index()] = placed

        if move.castling_rook is not None:
            rook_from, rook_to = move.castling_rook
            rook = self._squares[rook_from.to_index()]
            self._squares[rook_from.to_index()] = None
            self._squares[rook_to.to_index()] = rook

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Check / checkmate --------------------------------------------------

    def find_king(self, color: Color) -> Square | None:
        return MoveGenerator(self).find_king(color)

    def is_square_attacked_by(self, target: Square, attacker: Color) -> bool:
        return MoveGenerator(self).is_square_attacked_by(target, attacker)

    def move_leaves_king_safe(self, origin: Square, dest: Square, color: Color) -> bool:
        return MoveGenerator(self).move_leaves_king_safe(origin, dest, color)

    def has_any_legal_move(self, color: Color) -> bool:
        return MoveGenerator(self).has_any_legal_move(color)

    def is_in_check(self, color: Color) -> bool:
        return Rules.is_in_check(self, color)

    def is_checkmate(self, color: Color) -> bool:
        return Rules.is_checkmate(self, color)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.get(file, rank)
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
