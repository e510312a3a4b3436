"""High-level chess rules: check, checkmate and game status."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chesswav.core.enums import Color, GameStatus
from chesswav.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chesswav.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Stalemate is not told apart from an ordinary position; only a side in
    # check with no legal move has lost.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        mated = not gen.has_any_legal_move(color)
        if mated:
            _LOGGER.debug("%s is checkmated", color)
        return mated

    @staticmethod
    def status(board: Board, color: Color) -> GameStatus:
        """Status of *color*, typically the side about to move."""
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return GameStatus.IN_PROGRESS
        if gen.has_any_legal_move(color):
            return GameStatus.CHECK
        return GameStatus.CHECKMATE
