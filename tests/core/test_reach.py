"""Tests for the per-piece reachability predicates."""

import pytest

from chesswav.core.board import Board
from chesswav.core.enums import Color, PieceKind
from chesswav.core.piece import Piece
from chesswav.core.reach import (
    can_attack,
    can_move_legally,
    can_reach,
    path_clear,
)
from chesswav.core.types import (
    A1, A4, A8, B2, C3, D2, D3, D4, D5, E2, E3, E4, E5, F3, G7, H1, H4, H8,
    Square,
)

WHITE = Color.WHITE
BLACK = Color.BLACK


class TestPathClear:
    def test_open_diagonal(self, empty_board: Board) -> None:
        assert path_clear(empty_board, A1, H8)

    def test_blocked_diagonal(self, empty_board: Board) -> None:
        empty_board[D4] = Piece(PieceKind.PAWN, BLACK)
        assert not path_clear(empty_board, A1, H8)

    def test_destination_is_not_checked(self, empty_board: Board) -> None:
        empty_board[H8] = Piece(PieceKind.ROOK, BLACK)
        assert path_clear(empty_board, A1, H8)

    def test_adjacent_squares(self, empty_board: Board) -> None:
        assert path_clear(empty_board, A1, B2)


class TestPawnMovement:
    def test_single_push(self, board: Board) -> None:
        assert can_reach(board, PieceKind.PAWN, WHITE, E2, E3)

    def test_double_push_from_start(self, board: Board) -> None:
        assert can_reach(board, PieceKind.PAWN, WHITE, E2, E4)

    def test_double_push_only_from_start(self, empty_board: Board) -> None:
        assert not can_reach(empty_board, PieceKind.PAWN, WHITE, E3, E5)

    def test_double_push_blocked_midway(self, board: Board) -> None:
        board[E3] = Piece(PieceKind.KNIGHT, BLACK)
        assert not can_reach(board, PieceKind.PAWN, WHITE, E2, E4)

    def test_push_into_occupied_square(self, board: Board) -> None:
        board[E3] = Piece(PieceKind.KNIGHT, BLACK)
        assert not can_reach(board, PieceKind.PAWN, WHITE, E2, E3)

    def test_no_backward_move(self, empty_board: Board) -> None:
        assert not can_reach(empty_board, PieceKind.PAWN, WHITE, E3, E2)
        assert can_reach(empty_board, PieceKind.PAWN, BLACK, E3, E2)

    def test_black_double_push(self, board: Board) -> None:
        assert can_reach(board, PieceKind.PAWN, BLACK, Square(4, 6), E5)

    def test_diagonal_unconditional_for_resolution(self, board: Board) -> None:
        # d3 is empty, yet the diagonal counts when resolving notation.
        assert can_reach(board, PieceKind.PAWN, WHITE, E2, D3)

    def test_diagonal_needs_enemy_for_legal_moves(self, board: Board) -> None:
        assert not can_move_legally(board, PieceKind.PAWN, WHITE, E2, D3)
        board[D3] = Piece(PieceKind.KNIGHT, BLACK)
        assert can_move_legally(board, PieceKind.PAWN, WHITE, E2, D3)
        board[D3] = Piece(PieceKind.KNIGHT, WHITE)
        assert not can_move_legally(board, PieceKind.PAWN, WHITE, E2, D3)


class TestPawnAttacks:
    @pytest.mark.parametrize("file", range(8))
    def test_white_pawn_attacks_diagonals_only(self, empty_board: Board, file: int) -> None:
        origin = Square(file, 3)
        for df in (-1, 1):
            target = origin.offset(df, 1)
            if target is not None:
                assert can_attack(empty_board, PieceKind.PAWN, WHITE, origin, target)
        assert not can_attack(empty_board, PieceKind.PAWN, WHITE, origin, Square(file, 4))

    def test_black_pawn_attacks_downward(self, empty_board: Board) -> None:
        assert can_attack(empty_board, PieceKind.PAWN, BLACK, E4, D3)
        assert can_attack(empty_board, PieceKind.PAWN, BLACK, E4, F3)
        assert not can_attack(empty_board, PieceKind.PAWN, BLACK, E4, D5)


class TestPieces:
    def test_knight_jumps(self, board: Board) -> None:
        assert can_reach(board, PieceKind.KNIGHT, WHITE, Square(6, 0), F3)
        assert not can_reach(board, PieceKind.KNIGHT, WHITE, Square(6, 0), Square(6, 2))

    def test_bishop_blocked(self, board: Board) -> None:
        assert not can_reach(board, PieceKind.BISHOP, WHITE, Square(2, 0), Square(0, 2))

    def test_bishop_open(self, empty_board: Board) -> None:
        assert can_reach(empty_board, PieceKind.BISHOP, WHITE, A1, H8)
        assert not can_reach(empty_board, PieceKind.BISHOP, WHITE, A1, A8)
        assert not can_reach(empty_board, PieceKind.BISHOP, WHITE, A1, A1)

    def test_rook_lines(self, empty_board: Board) -> None:
        assert can_reach(empty_board, PieceKind.ROOK, WHITE, A4, H4)
        assert can_reach(empty_board, PieceKind.ROOK, WHITE, A1, A8)
        assert not can_reach(empty_board, PieceKind.ROOK, WHITE, A1, B2)
        assert not can_reach(empty_board, PieceKind.ROOK, WHITE, A1, A1)

    def test_queen_combines_rook_and_bishop(self, empty_board: Board) -> None:
        assert can_reach(empty_board, PieceKind.QUEEN, WHITE, D4, H8)
        assert can_reach(empty_board, PieceKind.QUEEN, WHITE, D4, D2)
        assert not can_reach(empty_board, PieceKind.QUEEN, WHITE, D4, E2)

    def test_king_one_step(self, empty_board: Board) -> None:
        assert can_reach(empty_board, PieceKind.KING, WHITE, E4, E5)
        assert can_reach(empty_board, PieceKind.KING, WHITE, E4, D3)
        assert not can_reach(empty_board, PieceKind.KING, WHITE, E4, E4)
        assert not can_reach(empty_board, PieceKind.KING, WHITE, E4, E2)

    @pytest.mark.parametrize("rank", range(1, 7))
    def test_blocked_rook_does_not_attack(self, empty_board: Board, rank: int) -> None:
        empty_board[Square(0, rank)] = Piece(PieceKind.PAWN, BLACK)
        assert not can_attack(empty_board, PieceKind.ROOK, WHITE, A1, A8)

    def test_attack_matches_movement_for_pieces(self, empty_board: Board) -> None:
        empty_board[C3] = Piece(PieceKind.PAWN, WHITE)
        for kind in (PieceKind.BISHOP, PieceKind.QUEEN):
            assert not can_attack(empty_board, kind, WHITE, A1, G7)
            assert not can_reach(empty_board, kind, WHITE, A1, G7)
        assert can_attack(empty_board, PieceKind.ROOK, WHITE, A1, H1)
