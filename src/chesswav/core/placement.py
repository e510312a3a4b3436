"""FEN piece-placement field <-> :class:`Board`.

Only the first FEN field is handled; the board has no side to move,
castling rights or clocks to read or write.
"""

from __future__ import annotations

from chesswav.core.board import Board
from chesswav.core.piece import Piece
from chesswav.core.types import Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a placement field, e.g. ``"6k1/8/8/8/8/8/5PPP/r5K1"``.

    A full FEN string is accepted too; fields after the first are ignored.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty placement")
    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board.empty()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.get(file, rank)
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)
