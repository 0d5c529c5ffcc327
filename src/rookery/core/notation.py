"""Algebraic-style move notation for display."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from rookery.core.enums import MoveFlag, PieceType
from rookery.core.types import file_letter, square_name

if TYPE_CHECKING:
    from rookery.core.move import Move
    from rookery.core.position import Position

PIECE_LETTERS: dict[PieceType, str] = {
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}


def notate(move: Move, resulting_position: Position) -> str:
    """Render a played *move* given the position it produced.

    Castling is always ``O-O`` / ``O-O-O`` without a check suffix.
    """
    if move.flags & MoveFlag.CASTLE_KING_SIDE:
        return "O-O"
    if move.flags & MoveFlag.CASTLE_QUEEN_SIDE:
        return "O-O-O"

    text = ""
    if move.piece.piece_type == PieceType.PAWN:
        if move.is_capture:
            text += file_letter(move.from_sq.file)
    else:
        text += PIECE_LETTERS[move.piece.piece_type]

    if move.is_capture:
        text += "x"

    text += square_name(move.to_sq)

    promotion = move.promotion_type
    if promotion is not None:
        text += PIECE_LETTERS[promotion]

    mover = resulting_position.current_player
    if resulting_position.is_king_in_check(mover):
        text += "+" if resulting_position.has_legal_moves() else "#"

    return text


def format_move_list(notations: Sequence[str]) -> list[str]:
    """Pair notations into numbered rows, e.g. ``["1. e4 e5", "2. Nf3"]``."""
    rows: list[str] = []
    for i in range(0, len(notations), 2):
        row = f"{i // 2 + 1}. " + " ".join(notations[i : i + 2])
        rows.append(row)
    return rows
