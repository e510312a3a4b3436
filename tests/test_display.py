"""Tests for text rendering."""

import pytest

from chesswav.core.board import Board
from chesswav.display import DisplayMode, parse_display_mode, render


class TestRender:
    def test_ascii(self, board: Board) -> None:
        lines = render(board, DisplayMode.ASCII).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_unicode(self, board: Board) -> None:
        lines = render(board, DisplayMode.UNICODE).splitlines()
        assert lines[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[7] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"


class TestParseDisplayMode:
    def test_known(self) -> None:
        assert parse_display_mode("ASCII") == DisplayMode.ASCII
        assert parse_display_mode(" unicode ") == DisplayMode.UNICODE

    def test_unknown(self) -> None:
        with pytest.raises(ValueError, match="Options: ascii, unicode"):
            parse_display_mode("sprite")
