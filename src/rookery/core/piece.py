"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.enums import Color, PieceType

# Upper-case letter per type; Black uses the lower-case form
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}
_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece kind owned by one side."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Board-diagram letter (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its diagram letter, e.g. 'n' → black knight."""
        ptype = _LETTER_TYPES.get(char.upper()) if len(char) == 1 else None
        if ptype is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def is_minor(self) -> bool:
        """Knight or bishop: cannot force mate on its own."""
        return self.piece_type in (PieceType.KNIGHT, PieceType.BISHOP)
