"""Board - raw piece placement on a width x height grid."""

from __future__ import annotations

from collections.abc import Iterator

from rookery.core.enums import Color, PieceType
from rookery.core.piece import Piece
from rookery.core.types import Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable grid of optional pieces with no knowledge of the rules."""

    __slots__ = ("_width", "_height", "_squares")

    def __init__(self, width: int = 8, height: int = 8) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board size: {width}x{height}")
        self._width = width
        self._height = height
        self._squares: list[Piece | None] = [None] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, sq: Square) -> int:
        if not self.is_valid(sq):
            raise IndexError(f"Square {tuple(sq)} outside {self._width}x{self._height}")
        return sq[1] * self._width + sq[0]

    # -- Element access -----------------------------------------------------

    def is_valid(self, sq: Square) -> bool:
        file, rank = sq
        return 0 <= file < self._width and 0 <= rank < self._height

    def piece_at(self, sq: Square) -> Piece | None:
        """Occupant of *sq*; ``None`` when empty or off the board."""
        if not self.is_valid(sq):
            return None
        return self._squares[sq[1] * self._width + sq[0]]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def set_piece(self, sq: Square, piece: Piece) -> None:
        self._squares[self._index(sq)] = piece

    def set_empty_at(self, sq: Square) -> None:
        self._squares[self._index(sq)] = None

    def is_empty_at(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    def has_piece_at(self, sq: Square) -> bool:
        return self.piece_at(sq) is not None

    def try_move_piece(self, from_sq: Square, to_sq: Square) -> bool:
        """Relocate the piece on *from_sq* to *to_sq*, overwriting any occupant.

        Returns ``False`` (and leaves the board untouched) when *from_sq* is
        empty.  No capture bookkeeping happens here.
        """
        piece = self.piece_at(from_sq)
        if piece is None:
            return False
        self.set_empty_at(from_sq)
        self.set_piece(to_sq, piece)
        return True

    # -- Query helpers ------------------------------------------------------

    def squares(self) -> Iterator[Square]:
        """Every coordinate, rank by rank."""
        for rank in range(self._height):
            for file in range(self._width):
                yield Square(file, rank)

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        for sq in self.squares():
            piece = self._squares[sq.rank * self._width + sq.file]
            if piece is not None:
                yield sq, piece

    def find(self, piece: Piece) -> Square | None:
        """First square (rank by rank) holding *piece*, or ``None``."""
        for sq, occupant in self.occupied():
            if occupant == piece:
                return sq
        return None

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        return [(sq, p) for sq, p in self.occupied() if p.color == color]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board(self._width, self._height)
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (self._width * self._height)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def standard_setup(cls) -> Board:
        """Standard starting arrangement, Black on ranks 0-1, White on 6-7."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b.set_piece(Square(f, 0), Piece(Color.BLACK, pt))
            b.set_piece(Square(f, 1), Piece(Color.BLACK, PieceType.PAWN))
            b.set_piece(Square(f, 6), Piece(Color.WHITE, PieceType.PAWN))
            b.set_piece(Square(f, 7), Piece(Color.WHITE, pt))
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from rows of piece letters, ``.`` for empty squares.

        The first row is rank 0.  Whitespace inside a row is ignored, so
        both ``"r...k..r"`` and ``"r . . . k . . r"`` are accepted.
        """
        rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if not rows:
            raise ValueError("Empty board diagram")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError(f"Ragged board diagram: {rows!r}")

        b = cls(width, len(rows))
        for rank, row in enumerate(rows):
            for file, ch in enumerate(row):
                if ch != ".":
                    b.set_piece(Square(file, rank), Piece.from_char(ch))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._squares == other._squares
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(self._height):
            row = []
            for file in range(self._width):
                p = self._squares[rank * self._width + file]
                row.append(str(p) if p else ".")
            rows.append(" ".join(row))
        return "\n".join(rows)
