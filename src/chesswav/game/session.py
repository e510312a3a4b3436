"""GameSession: drives the engine one notation move at a time.

The session owns the board and whose turn it is. It keeps no move history;
only the ply counter survives between moves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chesswav.core.board import Board
from chesswav.core.enums import Color, GameStatus
from chesswav.core.move import NotationMove, ResolvedMove
from chesswav.core.notation import NotationError, parse_move, tokenize
from chesswav.core.rules import Rules

_LOGGER = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """The token could not be parsed or no piece can play it."""


class GameOverError(ValueError):
    """A move was submitted after checkmate."""


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What happened when one token was played."""

    notation: str
    color: Color
    notation_move: NotationMove
    move: ResolvedMove
    # Status of the side now to move.
    status: GameStatus

    @property
    def is_check(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_checkmate(self) -> bool:
        return self.status == GameStatus.CHECKMATE


class GameSession:
    """Alternating-turn wrapper around :class:`Board`."""

    __slots__ = ("_board", "_first_to_move", "_ply", "_status")

    def __init__(self, board: Board | None = None, first_to_move: Color = Color.WHITE) -> None:
        self._board = board if board is not None else Board()
        self._first_to_move = first_to_move
        self._ply = 0
        self._status = Rules.status(self._board, first_to_move)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def ply(self) -> int:
        return self._ply

    @property
    def side_to_move(self) -> Color:
        return self._first_to_move if self._ply % 2 == 0 else self._first_to_move.opponent()

    @property
    def move_number(self) -> int:
        """Full-move number of the next move."""
        offset = 0 if self._first_to_move == Color.WHITE else 1
        return (self._ply + offset) // 2 + 1

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status == GameStatus.CHECKMATE

    # ── Play ─────────────────────────────────────────────────────────────

    def reset(self, board: Board | None = None, first_to_move: Color = Color.WHITE) -> None:
        self._board = board if board is not None else Board()
        self._first_to_move = first_to_move
        self._ply = 0
        self._status = Rules.status(self._board, first_to_move)
        _LOGGER.info("Game reset, %s to move", first_to_move)

    def play(self, notation: str) -> MoveOutcome:
        """Parse, resolve and apply one token for the side to move.

        On error the board and the turn are left untouched.
        """
        if self.is_over:
            raise GameOverError(f"Game is over; cannot play {notation!r}")

        color = self.side_to_move
        try:
            chess_move = parse_move(notation, color)
        except NotationError as exc:
            raise IllegalMoveError(str(exc)) from exc

        resolved = self._board.resolve_move(chess_move, None, color)
        if resolved is None:
            raise IllegalMoveError(f"No {color} piece can play {notation!r}")

        self._board.apply_move(resolved)
        self._ply += 1
        self._status = Rules.status(self._board, color.opponent())
        if self._status == GameStatus.CHECKMATE:
            _LOGGER.info("Checkmate: %s wins after %s", color, notation)
        return MoveOutcome(notation, color, chess_move, resolved, self._status)

    def play_line(self, text: str) -> list[MoveOutcome]:
        """Play every token of *text*; stops at the first failing token."""
        return [self.play(token) for token in tokenize(text)]
