"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def index(self) -> int:
        """Stable index for per-color arrays."""
        return int(self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveFlag(IntFlag):
    """Independent special-move bits carried by a :class:`Move`."""

    NONE = 0
    EN_PASSANT = auto()
    TWO_SQUARE_ADVANCE = auto()
    PROMOTION_KNIGHT = auto()
    PROMOTION_BISHOP = auto()
    PROMOTION_ROOK = auto()
    PROMOTION_QUEEN = auto()
    CASTLE_KING_SIDE = auto()
    CASTLE_QUEEN_SIDE = auto()

    PROMOTION_ANY = (
        PROMOTION_KNIGHT | PROMOTION_BISHOP | PROMOTION_ROOK | PROMOTION_QUEEN
    )
    CASTLE_ANY = CASTLE_KING_SIDE | CASTLE_QUEEN_SIDE


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KING_SIDE = auto()
    WHITE_QUEEN_SIDE = auto()
    BLACK_KING_SIDE = auto()
    BLACK_QUEEN_SIDE = auto()

    WHITE_BOTH = WHITE_KING_SIDE | WHITE_QUEEN_SIDE
    BLACK_BOTH = BLACK_KING_SIDE | BLACK_QUEEN_SIDE
    ALL = WHITE_BOTH | BLACK_BOTH


def king_side_right(color: Color) -> CastlingRights:
    if color == Color.WHITE:
        return CastlingRights.WHITE_KING_SIDE
    return CastlingRights.BLACK_KING_SIDE


def queen_side_right(color: Color) -> CastlingRights:
    if color == Color.WHITE:
        return CastlingRights.WHITE_QUEEN_SIDE
    return CastlingRights.BLACK_QUEEN_SIDE


def both_rights(color: Color) -> CastlingRights:
    if color == Color.WHITE:
        return CastlingRights.WHITE_BOTH
    return CastlingRights.BLACK_BOTH


class GameResult(IntEnum):
    """Outcome of a game.

    ``THREEFOLD_REPETITION`` and ``FIFTY_MOVE_RULE`` are reserved: the rules
    layer never reports them.
    """

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    STALEMATE = 3
    INSUFFICIENT_MATERIAL = 4
    THREEFOLD_REPETITION = 5
    FIFTY_MOVE_RULE = 6

    @property
    def is_draw(self) -> bool:
        return self not in (
            GameResult.IN_PROGRESS,
            GameResult.WHITE_WINS,
            GameResult.BLACK_WINS,
        )
