"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

FILES = "abcdefgh"
RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Board coordinate; file 0 is ``a``, rank 0 is ``1``."""

    file: int
    rank: int

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' -> Square(4, 3)."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(FILES.index(name[0]), RANKS.index(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index}")
        return cls(index & 7, index >> 3)

    def to_index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def file_char(self) -> str:
        return FILES[self.file]

    @property
    def rank_num(self) -> int:
        return self.rank + 1

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by ``(df, dr)``, or None when it leaves the board."""
        f = self.file + df
        r = self.rank + dr
        if 0 <= f < 8 and 0 <= r < 8:
            return Square(f, r)
        return None

    def __str__(self) -> str:
        return f"{self.file_char}{self.rank_num}"


# Scan order used by origin search and legal-move enumeration: rank-major,
# file-minor (a1, b1, ..., h1, a2, ..., h8).
ALL_SQUARES: tuple[Square, ...] = tuple(Square(f, r) for r in range(8) for f in range(8))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
