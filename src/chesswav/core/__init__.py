"""Core domain layer: pure chess position logic with zero external dependencies.

Quick start::

    from chesswav.core import Board, Color, parse_move

    board = Board()
    move = board.resolve_move(parse_move("e4"), "e4", Color.WHITE)
    board.apply_move(move)
    board.is_in_check(Color.BLACK)
"""

from chesswav.core.board import Board
from chesswav.core.enums import Capture, CastlingSide, Color, GameStatus, PieceKind, Threat
from chesswav.core.move import NotationMove, ResolvedMove
from chesswav.core.move_generator import MoveGenerator
from chesswav.core.notation import (
    NotationError,
    extract_hints,
    is_castling,
    parse_move,
    strip_annotations,
    tokenize,
)
from chesswav.core.piece import Piece
from chesswav.core.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chesswav.core.rules import Rules
from chesswav.core.types import Square

__all__ = [
    # Enums
    "Capture",
    "CastlingSide",
    "Color",
    "GameStatus",
    "PieceKind",
    "Threat",
    # Types
    "Square",
    # Domain objects
    "Board",
    "MoveGenerator",
    "NotationMove",
    "Piece",
    "ResolvedMove",
    "Rules",
    # Notation
    "NotationError",
    "extract_hints",
    "is_castling",
    "parse_move",
    "strip_annotations",
    "tokenize",
    # Placement
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
