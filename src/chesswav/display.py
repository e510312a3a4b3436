"""Plain-text board rendering."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chesswav.core.board import Board


class DisplayMode(Enum):
    """How pieces are drawn; ``ASCII`` uses FEN letters."""

    ASCII = "ascii"
    UNICODE = "unicode"


def parse_display_mode(name: str) -> DisplayMode:
    try:
        return DisplayMode(name.strip().lower())
    except ValueError:
        options = ", ".join(mode.value for mode in DisplayMode)
        raise ValueError(f"Unknown display mode {name!r}. Options: {options}") from None


def render(board: Board, mode: DisplayMode = DisplayMode.UNICODE) -> str:
    """Rank 8 at the top, file labels underneath."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        cells: list[str] = []
        for file in range(8):
            piece = board.get(file, rank)
            if piece is None:
                cells.append(".")
            elif mode == DisplayMode.UNICODE:
                cells.append(piece.symbol)
            else:
                cells.append(str(piece))
        rows.append(f"{rank + 1} {' '.join(cells)}")
    rows.append("  a b c d e f g h")
    return "\n".join(rows)
