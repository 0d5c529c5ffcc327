"""Tests for move notation.

Square names read ``file letter + (rank index + 1)``, so White's back rank
is rank "8" and Black's is rank "1".
"""

import pytest

from rookery.core.enums import CastlingRights, Color, PieceType
from rookery.core.move import Move
from rookery.core.notation import format_move_list, notate
from rookery.core.position import Position
from rookery.core.types import Square, parse_square, square_name


def _play(position: Position, from_sq: Square, to_sq: Square, **match) -> tuple[Move, Position]:
    move = next(
        m
        for m in position.get_legal_moves(from_sq)
        if m.to_sq == to_sq and all(getattr(m, k) == v for k, v in match.items())
    )
    return move, position.next_position(move)


class TestSquareNames:
    def test_square_name(self) -> None:
        assert square_name(Square(0, 0)) == "a1"
        assert square_name(Square(4, 6)) == "e7"
        assert square_name(Square(7, 7)) == "h8"

    def test_parse_square(self) -> None:
        assert parse_square("e5") == Square(4, 4)

    @pytest.mark.parametrize("name", ["", "e", "z0", "4e", "e-1"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)


class TestNotate:
    def test_pawn_push(self, start: Position) -> None:
        move, after = _play(start, Square(4, 6), Square(4, 4))
        assert notate(move, after) == "e5"

    def test_knight_move(self, start: Position) -> None:
        move, after = _play(start, Square(6, 7), Square(5, 5))
        assert notate(move, after) == "Nf6"

    def test_pawn_capture_uses_origin_file(self, make_position) -> None:
        pos = make_position(
            """
            ....k...
            ........
            ........
            ...p....
            ....P...
            ........
            ........
            ....K...
            """
        )
        move, after = _play(pos, Square(4, 4), Square(3, 3))
        assert notate(move, after) == "exd4"

    def test_piece_capture(self, make_position) -> None:
        pos = make_position(
            """
            k.......
            ........
            ........
            ...n....
            ........
            ........
            ........
            ...R...K
            """
        )
        move, after = _play(pos, Square(3, 7), Square(3, 3))
        assert notate(move, after) == "Rxd4"

    def test_en_passant_is_capture(self, make_position) -> None:
        pos = make_position(
            """
            ....k...
            ...p....
            ........
            ....P...
            ........
            ........
            ........
            ....K...
            """,
            current_player=Color.BLACK,
        )
        _, pos = _play(pos, Square(3, 1), Square(3, 3))
        move, after = _play(pos, Square(4, 3), Square(3, 2))
        assert move.is_en_passant
        assert notate(move, after) == "exd3"

    def test_promotion_letter(self, make_position) -> None:
        pos = make_position(
            """
            .......k
            P.......
            ........
            ........
            ........
            ........
            ........
            K.......
            """
        )
        move, after = _play(pos, Square(0, 1), Square(0, 0))  # first is the queen
        assert move.promotion_type == PieceType.QUEEN
        assert notate(move, after) == "a1Q+"
        knight = move.with_promotion(PieceType.KNIGHT)
        assert notate(knight, pos.next_position(knight)) == "a1N"

    def test_check_suffix(self, make_position) -> None:
        pos = make_position(
            """
            ....k...
            ........
            ........
            ........
            ........
            ........
            ........
            R...K...
            """
        )
        move, after = _play(pos, Square(0, 7), Square(0, 0))
        assert notate(move, after) == "Ra1+"

    def test_mate_suffix(self, make_position) -> None:
        pos = make_position(
            """
            ......k.
            .....ppp
            ........
            ........
            ........
            ........
            ........
            R.....K.
            """
        )
        move, after = _play(pos, Square(0, 7), Square(0, 0))
        assert notate(move, after) == "Ra1#"

    def test_castling(self, make_position) -> None:
        pos = make_position(
            """
            r...k..r
            pppppppp
            ........
            ........
            ........
            ........
            PPPPPPPP
            R...K..R
            """,
            castling=CastlingRights.ALL,
        )
        short, after_short = _play(pos, Square(4, 7), Square(6, 7))
        long, after_long = _play(pos, Square(4, 7), Square(2, 7))
        assert notate(short, after_short) == "O-O"
        assert notate(long, after_long) == "O-O-O"

    def test_castling_has_no_check_suffix(self, make_position) -> None:
        pos = make_position(
            """
            .....k..
            ........
            ........
            ........
            ........
            ........
            ........
            ....K..R
            """,
            castling=CastlingRights.WHITE_KING_SIDE,
        )
        move, after = _play(pos, Square(4, 7), Square(6, 7))
        assert after.is_king_in_check(Color.BLACK)
        assert notate(move, after) == "O-O"


class TestMoveList:
    def test_pairs_moves(self) -> None:
        assert format_move_list(["e5", "e4", "Nf6"]) == ["1. e5 e4", "2. Nf6"]

    def test_empty(self) -> None:
        assert format_move_list([]) == []
