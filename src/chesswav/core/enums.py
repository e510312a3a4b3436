"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def opponent(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        """Rank index where this side's non-pawn pieces start."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Threat(Enum):
    """Check annotation carried by a notation move."""

    NONE = "none"
    CHECK = "check"
    CHECKMATE = "checkmate"


class Capture(Enum):
    """Capture annotation carried by a notation move."""

    NONE = "none"
    TAKEN = "taken"


class CastlingSide(Enum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"


class GameStatus(IntEnum):
    """State of the side about to move."""

    IN_PROGRESS = 0
    CHECK = 1
    CHECKMATE = 2
