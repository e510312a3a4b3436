"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chesswav.core.board import Board


@pytest.fixture
def board() -> Board:
    """Standard starting position."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()
