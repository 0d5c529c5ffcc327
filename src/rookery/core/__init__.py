"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from rookery.core import Position

    pos = Position()
    for move in pos.get_legal_moves():
        print(move)
"""

from rookery.core.board import Board
from rookery.core.enums import CastlingRights, Color, GameResult, MoveFlag, PieceType
from rookery.core.history import MoveHistory
from rookery.core.move import PROMOTION_TYPES, Move
from rookery.core.notation import PIECE_LETTERS, format_move_list, notate
from rookery.core.piece import Piece
from rookery.core.position import Position
from rookery.core.rules import Rules
from rookery.core.types import Square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveHistory",
    "PROMOTION_TYPES",
    "Piece",
    "Position",
    "Rules",
    # Notation
    "PIECE_LETTERS",
    "format_move_list",
    "notate",
]
