"""Attack detection and legal-move enumeration.

Everything here is a fresh scan of the board: no attack maps are cached
between calls. King safety is tested by playing the candidate move on a
copy of the board and scanning for attacks on the king.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from chesswav.core.enums import Color, PieceKind
from chesswav.core.move import ResolvedMove
from chesswav.core.reach import can_attack, can_move_legally
from chesswav.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chesswav.core.board import Board


class MoveGenerator:
    """Read-only queries over a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Kings and attacks --------------------------------------------------

    def find_king(self, color: Color) -> Square | None:
        """First *color* king in scan order, or None if it is off the board."""
        board = self._board
        for sq in ALL_SQUARES:
            piece = board[sq]
            if piece is not None and piece.kind == PieceKind.KING and piece.color == color:
                return sq
        return None

    def is_square_attacked_by(self, target: Square, attacker: Color) -> bool:
        """Is *target* attacked by any piece of *attacker*?"""
        board = self._board
        for sq in ALL_SQUARES:
            piece = board[sq]
            if piece is None or piece.color != attacker:
                continue
            if can_attack(board, piece.kind, attacker, sq, target):
                return True
        return False

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent? False without a king."""
        king_sq = self.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked_by(king_sq, color.opponent())

    # -- Legal moves --------------------------------------------------------

    def move_leaves_king_safe(self, origin: Square, dest: Square, color: Color) -> bool:
        """Play origin->dest on a copy and check *color*'s king is not attacked."""
        trial = self._board.copy()
        trial[dest] = trial[origin]
        trial[origin] = None
        return not MoveGenerator(trial).is_in_check(color)

    def iter_legal_moves(self, color: Color) -> Iterator[ResolvedMove]:
        """Yield every legal non-castling move for *color*.

        Own pieces x all 64 destinations; pawn diagonals need a capture here,
        unlike during move resolution. Promotions are yielded once, without
        a promotion piece: the choice cannot change king safety.
        """
        board = self._board
        for origin, piece in board.pieces(color):
            for dest in ALL_SQUARES:
                if dest == origin:
                    continue
                target = board[dest]
                if target is not None and target.color == color:
                    continue
                if not can_move_legally(board, piece.kind, color, origin, dest):
                    continue
                if self.move_leaves_king_safe(origin, dest, color):
                    yield ResolvedMove(origin=origin, dest=dest)

    def generate_legal_moves(self, color: Color) -> list[ResolvedMove]:
        return list(self.iter_legal_moves(color))

    def has_any_legal_move(self, color: Color) -> bool:
        return next(self.iter_legal_moves(color), None) is not None
