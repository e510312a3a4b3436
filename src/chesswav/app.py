"""Command-line entry point.

Usage:
    chesswav e4 e5 Nf3 Nc6           replay moves given as arguments
    echo "e4 e5 Qh5 Nc6" | chesswav  replay moves read from stdin
    chesswav --interactive           type moves one at a time
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chesswav.config import AppSettings
from chesswav.core.enums import Color, GameStatus
from chesswav.core.notation import tokenize
from chesswav.core.placement import board_from_placement
from chesswav.display import parse_display_mode, render
from chesswav.game.session import GameSession, MoveOutcome

_LOGGER = logging.getLogger(__name__)

_STATUS_SUFFIX: dict[GameStatus, str] = {
    GameStatus.IN_PROGRESS: "",
    GameStatus.CHECK: "  check",
    GameStatus.CHECKMATE: "  checkmate",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesswav",
        description="Replay algebraic chess notation and report check and checkmate.",
    )
    parser.add_argument("moves", nargs="*", help="moves in algebraic notation")
    parser.add_argument(
        "-i", "--interactive", action="store_true", help="enter moves one at a time"
    )
    parser.add_argument(
        "--display",
        choices=("unicode", "ascii", "none"),
        default="unicode",
        help="board drawing style (default: unicode)",
    )
    parser.add_argument(
        "--position", metavar="PLACEMENT", help="FEN piece placement to start from"
    )
    parser.add_argument(
        "--black-first", action="store_true", help="black moves first from --position"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "debug", "info", "warning", "error"),
    )
    return parser


def _new_session(settings: AppSettings) -> GameSession:
    board = board_from_placement(settings.placement) if settings.placement else None
    return GameSession(board, settings.first_to_move)


def format_outcome(outcome: MoveOutcome, move_number: int) -> str:
    dots = "." if outcome.color == Color.WHITE else "..."
    return f"{move_number}{dots} {outcome.notation}{_STATUS_SUFFIX[outcome.status]}"


def run_replay(session: GameSession, text: str, settings: AppSettings, out: TextIO) -> int:
    """Play every token of *text*; 1 on the first illegal move, else 0."""
    for token in tokenize(text):
        move_number = session.move_number
        try:
            outcome = session.play(token)
        except ValueError as exc:
            _LOGGER.warning("Rejected move %r: %s", token, exc)
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(format_outcome(outcome, move_number), file=out)

    if settings.show_board:
        print(render(session.board, settings.display_mode), file=out)
    return 0


def run_interactive(
    session: GameSession, settings: AppSettings, stdin: TextIO, out: TextIO
) -> int:
    """Read commands and moves line by line until ``quit`` or end of input."""
    print("Type moves in algebraic notation. Commands: display <mode>, reset, quit", file=out)
    if settings.show_board:
        print(render(session.board, settings.display_mode), file=out)

    while True:
        print(f"[Move {session.move_number} - {session.side_to_move}] > ", end="", file=out)
        out.flush()
        line = stdin.readline()
        if not line:
            break
        text = line.strip()
        if not text:
            continue

        if text == "quit":
            break
        if text == "reset":
            session.reset(
                board_from_placement(settings.placement) if settings.placement else None,
                settings.first_to_move,
            )
            print("Game reset.", file=out)
        elif text == "display" or text.startswith("display "):
            try:
                settings.display_mode = parse_display_mode(text[len("display"):])
            except ValueError as exc:
                print(str(exc), file=out)
                continue
            settings.show_board = True
        else:
            move_number = session.move_number
            try:
                outcome = session.play(text)
            except ValueError as exc:
                _LOGGER.warning("Rejected move %r: %s", text, exc)
                print(f"Invalid move: {exc}", file=out)
                continue
            print(format_outcome(outcome, move_number), file=out)

        if settings.show_board:
            print(render(session.board, settings.display_mode), file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Launch chesswav; returns the process exit status."""
    args = build_parser().parse_args(argv)
    settings = AppSettings.from_args(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        session = _new_session(settings)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if settings.interactive:
        return run_interactive(session, settings, sys.stdin, sys.stdout)

    text = " ".join(args.moves) if args.moves else sys.stdin.read()
    return run_replay(session, text, settings, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
