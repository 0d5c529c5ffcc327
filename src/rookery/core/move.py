"""Move value object: one ply, with the moving piece, capture and flag bits."""

from __future__ import annotations

from dataclasses import dataclass, replace

from rookery.core.enums import MoveFlag, PieceType
from rookery.core.piece import Piece
from rookery.core.types import Square, square_name

_PROMOTION_FLAGS: dict[PieceType, MoveFlag] = {
    PieceType.KNIGHT: MoveFlag.PROMOTION_KNIGHT,
    PieceType.BISHOP: MoveFlag.PROMOTION_BISHOP,
    PieceType.ROOK: MoveFlag.PROMOTION_ROOK,
    PieceType.QUEEN: MoveFlag.PROMOTION_QUEEN,
}

# Resolution order when reading the promotion bits back.
_PROMOTION_PRIORITY: tuple[tuple[MoveFlag, PieceType], ...] = (
    (MoveFlag.PROMOTION_QUEEN, PieceType.QUEEN),
    (MoveFlag.PROMOTION_ROOK, PieceType.ROOK),
    (MoveFlag.PROMOTION_KNIGHT, PieceType.KNIGHT),
    (MoveFlag.PROMOTION_BISHOP, PieceType.BISHOP),
)

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}

PROMOTION_TYPES: tuple[PieceType, ...] = tuple(_PROMOTION_FLAGS)


def promotion_flag(piece_type: PieceType) -> MoveFlag:
    """Flag bit selecting *piece_type* as promotion target."""
    try:
        return _PROMOTION_FLAGS[piece_type]
    except KeyError:
        raise ValueError(f"Cannot promote to {piece_type.name}") from None


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``piece`` is the moving piece as it stood before the move and
    ``capture`` the piece removed by it, including an en-passant victim.
    """

    piece: Piece
    from_sq: Square
    to_sq: Square
    capture: Piece | None = None
    flags: MoveFlag = MoveFlag.NONE

    # ── Flag queries ─────────────────────────────────────────────────────

    @property
    def is_capture(self) -> bool:
        return self.capture is not None or bool(self.flags & MoveFlag.EN_PASSANT)

    @property
    def is_en_passant(self) -> bool:
        return bool(self.flags & MoveFlag.EN_PASSANT)

    @property
    def is_two_square_advance(self) -> bool:
        return bool(self.flags & MoveFlag.TWO_SQUARE_ADVANCE)

    @property
    def is_promotion(self) -> bool:
        return bool(self.flags & MoveFlag.PROMOTION_ANY)

    @property
    def is_castling(self) -> bool:
        return bool(self.flags & MoveFlag.CASTLE_ANY)

    @property
    def promotion_type(self) -> PieceType | None:
        for flag, piece_type in _PROMOTION_PRIORITY:
            if self.flags & flag:
                return piece_type
        return None

    # ── Derivation ───────────────────────────────────────────────────────

    def with_flags(self, flags: MoveFlag) -> Move:
        """Copy with *flags* added to the existing bits."""
        return replace(self, flags=self.flags | flags)

    def with_promotion(self, piece_type: PieceType) -> Move:
        """Copy promoting to exactly *piece_type*."""
        flags = (self.flags & ~MoveFlag.PROMOTION_ANY) | promotion_flag(piece_type)
        return replace(self, flags=flags)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        promotion = self.promotion_type
        if promotion is not None:
            base += _PROMO_CHARS[promotion]
        return base
