"""Game layer: turn-taking on top of the core engine.

Quick start::

    from chesswav.game import GameSession

    session = GameSession()
    session.play_line("e4 e5 Bc4 Nc6 Qh5 Nf6 Qxf7#")
    assert session.is_over
"""

from chesswav.game.session import (
    GameOverError,
    GameSession,
    IllegalMoveError,
    MoveOutcome,
)

__all__ = [
    "GameOverError",
    "GameSession",
    "IllegalMoveError",
    "MoveOutcome",
]
