"""Reachability predicates: can a piece on one square get to another?

Three variants share the same geometry:

* movement (``can_reach``), used to find the origin of a notation move;
  a pawn's diagonal step is accepted whatever occupies the destination.
* legal generation (``can_move_legally``), used when enumerating escapes
  from check; a pawn's diagonal step needs an enemy piece to capture.
* attack (``can_attack``), used by attack detection; a pawn attacks only
  its two forward diagonals and never the square it pushes to.

None of the predicates look at what stands on the destination except the
pawn rules; own-piece filtering is the caller's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chesswav.core.enums import Color, PieceKind
from chesswav.core.types import Square

if TYPE_CHECKING:
    from chesswav.core.board import Board


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def path_clear(board: Board, origin: Square, dest: Square) -> bool:
    """No occupied square strictly between *origin* and *dest*.

    The two squares must share a rank, file or diagonal.
    """
    df = _sign(dest.file - origin.file)
    dr = _sign(dest.rank - origin.rank)
    file = origin.file + df
    rank = origin.rank + dr
    while (file, rank) != (dest.file, dest.rank):
        if board.get(file, rank) is not None:
            return False
        file += df
        rank += dr
    return True


# -- Per-piece geometry -----------------------------------------------------


def _pawn_can_push(board: Board, color: Color, origin: Square, dest: Square) -> bool:
    if dest.file != origin.file:
        return False
    direction = color.pawn_direction
    rank_distance = dest.rank - origin.rank
    if rank_distance == direction:
        return board[dest] is None
    if rank_distance == 2 * direction and origin.rank == color.pawn_start_rank:
        return (
            board.get(origin.file, origin.rank + direction) is None
            and board[dest] is None
        )
    return False


def pawn_attacks(color: Color, origin: Square, dest: Square) -> bool:
    """Diagonal-forward step; occupancy is irrelevant."""
    return (
        abs(dest.file - origin.file) == 1
        and dest.rank - origin.rank == color.pawn_direction
    )


def knight_can_reach(origin: Square, dest: Square) -> bool:
    df = abs(dest.file - origin.file)
    dr = abs(dest.rank - origin.rank)
    return (df, dr) in ((1, 2), (2, 1))


def bishop_can_reach(board: Board, origin: Square, dest: Square) -> bool:
    df = dest.file - origin.file
    dr = dest.rank - origin.rank
    if df == 0 or abs(df) != abs(dr):
        return False
    return path_clear(board, origin, dest)


def rook_can_reach(board: Board, origin: Square, dest: Square) -> bool:
    df = dest.file - origin.file
    dr = dest.rank - origin.rank
    if (df != 0) == (dr != 0):
        # Both zero (no move) or both non-zero (not a straight line).
        return False
    return path_clear(board, origin, dest)


def king_can_reach(origin: Square, dest: Square) -> bool:
    return max(abs(dest.file - origin.file), abs(dest.rank - origin.rank)) == 1


def _non_pawn_can_reach(
    board: Board, kind: PieceKind, origin: Square, dest: Square
) -> bool:
    if kind == PieceKind.KNIGHT:
        return knight_can_reach(origin, dest)
    if kind == PieceKind.BISHOP:
        return bishop_can_reach(board, origin, dest)
    if kind == PieceKind.ROOK:
        return rook_can_reach(board, origin, dest)
    if kind == PieceKind.QUEEN:
        return bishop_can_reach(board, origin, dest) or rook_can_reach(
            board, origin, dest
        )
    if kind == PieceKind.KING:
        return king_can_reach(origin, dest)
    raise ValueError(f"Unknown piece kind: {kind!r}")


# -- Variants ---------------------------------------------------------------


def can_reach(
    board: Board, kind: PieceKind, color: Color, origin: Square, dest: Square
) -> bool:
    """Movement reachability used by move resolution."""
    if kind == PieceKind.PAWN:
        return _pawn_can_push(board, color, origin, dest) or pawn_attacks(
            color, origin, dest
        )
    return _non_pawn_can_reach(board, kind, origin, dest)


def can_move_legally(
    board: Board, kind: PieceKind, color: Color, origin: Square, dest: Square
) -> bool:
    """Movement reachability used by legal-move enumeration."""
    if kind == PieceKind.PAWN:
        if _pawn_can_push(board, color, origin, dest):
            return True
        target = board[dest]
        return (
            target is not None
            and target.color != color
            and pawn_attacks(color, origin, dest)
        )
    return _non_pawn_can_reach(board, kind, origin, dest)


def can_attack(
    board: Board, kind: PieceKind, color: Color, origin: Square, dest: Square
) -> bool:
    """Whether a piece on *origin* attacks *dest*."""
    if kind == PieceKind.PAWN:
        return pawn_attacks(color, origin, dest)
    return _non_pawn_can_reach(board, kind, origin, dest)
