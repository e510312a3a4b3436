"""Application settings."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from chesswav.core.enums import Color
from chesswav.display import DisplayMode, parse_display_mode


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board output
    display_mode: DisplayMode = DisplayMode.UNICODE
    show_board: bool = True

    # Game
    interactive: bool = False
    placement: str | None = None  # FEN placement field; None = standard start
    first_to_move: Color = Color.WHITE

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> AppSettings:
        settings = cls()
        if args.display == "none":
            settings.show_board = False
        else:
            settings.display_mode = parse_display_mode(args.display)
        settings.interactive = args.interactive
        settings.placement = args.position
        settings.first_to_move = Color.BLACK if args.black_first else Color.WHITE
        settings.log_level = args.log_level.upper()
        return settings
