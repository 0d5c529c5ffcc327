"""Tests for Board."""

import pytest

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import Square

WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)
BLACK_ROOK = Piece(Color.BLACK, PieceType.ROOK)


class TestBoardStandardSetup:
    def test_white_king_position(self) -> None:
        board = Board.standard_setup()
        assert board.piece_at(Square(4, 7)) == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.standard_setup()
        assert board.piece_at(Square(4, 0)) == Piece(Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.standard_setup()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for file, pt in enumerate(expected):
            assert board[Square(file, 0)] == Piece(Color.BLACK, pt)
            assert board[Square(file, 7)] == Piece(Color.WHITE, pt)

    def test_pawn_ranks(self) -> None:
        board = Board.standard_setup()
        for file in range(8):
            assert board[Square(file, 1)] == Piece(Color.BLACK, PieceType.PAWN)
            assert board[Square(file, 6)] == WHITE_PAWN

    def test_empty_middle(self) -> None:
        board = Board.standard_setup()
        for rank in range(2, 6):
            for file in range(8):
                assert board.is_empty_at(Square(file, rank))

    def test_piece_counts(self) -> None:
        board = Board.standard_setup()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16


class TestBoardAccess:
    def test_new_board_is_empty(self) -> None:
        board = Board()
        assert list(board.occupied()) == []
        assert board.width == 8 and board.height == 8

    @pytest.mark.parametrize("sq", [(-1, 0), (0, -1), (8, 0), (0, 8), (20, 20)])
    def test_read_outside_is_none(self, sq: tuple[int, int]) -> None:
        board = Board.standard_setup()
        assert board.piece_at(Square(*sq)) is None
        assert not board.is_valid(Square(*sq))

    def test_write_outside_raises(self) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board.set_piece(Square(8, 0), WHITE_PAWN)
        with pytest.raises(IndexError):
            board.set_empty_at(Square(0, -1))

    def test_set_and_clear(self) -> None:
        board = Board()
        board.set_piece(Square(3, 3), WHITE_PAWN)
        assert board.has_piece_at(Square(3, 3))
        board.set_empty_at(Square(3, 3))
        assert board.is_empty_at(Square(3, 3))

    def test_custom_size(self) -> None:
        board = Board(5, 6)
        assert board.is_valid(Square(4, 5))
        assert not board.is_valid(Square(5, 0))
        assert not board.is_valid(Square(0, 6))

    def test_invalid_size(self) -> None:
        with pytest.raises(ValueError):
            Board(0, 8)


class TestTryMovePiece:
    def test_moves_piece(self) -> None:
        board = Board()
        board.set_piece(Square(0, 0), BLACK_ROOK)
        assert board.try_move_piece(Square(0, 0), Square(0, 5))
        assert board[Square(0, 0)] is None
        assert board[Square(0, 5)] == BLACK_ROOK

    def test_overwrites_target(self) -> None:
        board = Board()
        board.set_piece(Square(0, 0), BLACK_ROOK)
        board.set_piece(Square(0, 6), WHITE_PAWN)
        assert board.try_move_piece(Square(0, 0), Square(0, 6))
        assert board[Square(0, 6)] == BLACK_ROOK
        assert len(list(board.occupied())) == 1

    def test_empty_source_leaves_board(self) -> None:
        board = Board.standard_setup()
        before = board.copy()
        assert not board.try_move_piece(Square(4, 4), Square(4, 3))
        assert board == before


class TestDiagram:
    def test_from_diagram(self) -> None:
        board = Board.from_diagram(
            """
            r . . . k . . r
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            R . . . K . . R
            """
        )
        assert board[Square(0, 0)] == BLACK_ROOK
        assert board[Square(4, 7)] == Piece(Color.WHITE, PieceType.KING)
        assert len(list(board.occupied())) == 6

    def test_repr_round_trip(self) -> None:
        board = Board.standard_setup()
        assert Board.from_diagram(repr(board)) == board

    def test_ragged_rows_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("k...\n...")

    def test_unknown_letter_rejected(self) -> None:
        with pytest.raises(ValueError):
            Board.from_diagram("kx..\n...K")


class TestCopyAndFind:
    def test_copy_is_independent(self) -> None:
        board = Board.standard_setup()
        clone = board.copy()
        clone.set_empty_at(Square(4, 7))
        assert board[Square(4, 7)] is not None
        assert clone != board

    def test_find(self) -> None:
        board = Board.standard_setup()
        assert board.find(Piece(Color.BLACK, PieceType.QUEEN)) == Square(3, 0)
        board.clear()
        assert board.find(Piece(Color.BLACK, PieceType.QUEEN)) is None


class TestPieceLetters:
    @pytest.mark.parametrize(
        ("char", "piece"),
        [
            ("K", Piece(Color.WHITE, PieceType.KING)),
            ("n", Piece(Color.BLACK, PieceType.KNIGHT)),
            ("P", WHITE_PAWN),
            ("r", BLACK_ROOK),
        ],
    )
    def test_from_char(self, char: str, piece: Piece) -> None:
        assert Piece.from_char(char) == piece
        assert str(piece) == char

    @pytest.mark.parametrize("char", ["x", "", "Kn", "."])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(char)

    def test_minor_pieces(self) -> None:
        assert Piece(Color.WHITE, PieceType.BISHOP).is_minor
        assert Piece(Color.BLACK, PieceType.KNIGHT).is_minor
        assert not BLACK_ROOK.is_minor
        assert not WHITE_PAWN.is_minor
