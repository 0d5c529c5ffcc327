"""High-level chess rules: checkmate, stalemate, material draws."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookery.core.enums import Color, GameResult, PieceType

if TYPE_CHECKING:
    from rookery.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy:
    # - Terminal: checkmate, stalemate, insufficient material.
    # - Repetition and the fifty-move rule are not tracked.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return position.is_king_in_check(position.current_player)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not position.has_legal_moves()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not position.has_legal_moves()

    @staticmethod
    def is_insufficient_material(position: Position) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        pieces = list(position.board.occupied())
        non_kings = [
            (sq, piece) for sq, piece in pieces if piece.piece_type != PieceType.KING
        ]

        # K vs K
        if not non_kings:
            return True

        # K+minor vs K
        if len(non_kings) == 1:
            return non_kings[0][1].is_minor

        # K+B vs K+B with same-colour bishops
        if len(non_kings) == 2:
            (w_sq, first), (b_sq, second) = non_kings
            if (
                first.piece_type == PieceType.BISHOP
                and second.piece_type == PieceType.BISHOP
                and first.color != second.color
            ):
                return (w_sq.file + w_sq.rank) % 2 == (b_sq.file + b_sq.rank) % 2

        return False

    @staticmethod
    def game_result(position: Position) -> GameResult:
        """Determine the current game result."""
        if not position.has_legal_moves():
            if Rules.is_in_check(position):
                return (
                    GameResult.BLACK_WINS
                    if position.current_player == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            return GameResult.STALEMATE

        if Rules.is_insufficient_material(position):
            return GameResult.INSUFFICIENT_MATERIAL

        return GameResult.IN_PROGRESS
