"""Position — the rules engine: turn, castling rights, en passant, move generation."""

from __future__ import annotations

from rookery.core.board import Board
from rookery.core.enums import (
    CastlingRights,
    Color,
    MoveFlag,
    PieceType,
    both_rights,
    king_side_right,
    queen_side_right,
)
from rookery.core.move import Move
from rookery.core.piece import Piece
from rookery.core.types import Square, midpoint, square_name

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (-1, -1), (1, -1), (-1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

KING_HOME_FILE = 4

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# Queen stays on the original entry, the rest are appended after it.
_EXTRA_PROMOTIONS: tuple[MoveFlag, ...] = (
    MoveFlag.PROMOTION_KNIGHT,
    MoveFlag.PROMOTION_BISHOP,
    MoveFlag.PROMOTION_ROOK,
)


class Position:
    """Board plus side to move, castling rights and the last pawn double-step.

    Positions behave as values: :meth:`next_position` and :meth:`copy` never
    share mutable state with the original, which lets move history rebuild
    any position by replaying moves from a base.  Legality is decided by
    simulating each candidate and testing whether the mover's king ends up
    attacked.
    """

    __slots__ = ("board", "current_player", "castling", "last_two_square_advance")

    def __init__(
        self,
        board: Board | None = None,
        current_player: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        last_two_square_advance: Move | None = None,
    ) -> None:
        self.board = board if board is not None else Board.standard_setup()
        self.current_player = current_player
        self.castling = castling
        self.last_two_square_advance = last_two_square_advance

    # ── Geometry ─────────────────────────────────────────────────────────

    def home_rank(self, color: Color) -> int:
        """Back rank of *color*: the last rank for White, rank 0 for Black."""
        return self.board.height - 1 if color == Color.WHITE else 0

    def promotion_rank(self, color: Color) -> int:
        return self.home_rank(color.opposite)

    @staticmethod
    def pawn_direction(color: Color) -> int:
        return -1 if color == Color.WHITE else 1

    def pawn_start_rank(self, color: Color) -> int:
        return self.home_rank(color) + self.pawn_direction(color)

    def _rook_corners(self) -> dict[Square, CastlingRights]:
        right_file = self.board.width - 1
        white_rank = self.home_rank(Color.WHITE)
        black_rank = self.home_rank(Color.BLACK)
        return {
            Square(0, white_rank): CastlingRights.WHITE_QUEEN_SIDE,
            Square(right_file, white_rank): CastlingRights.WHITE_KING_SIDE,
            Square(0, black_rank): CastlingRights.BLACK_QUEEN_SIDE,
            Square(right_file, black_rank): CastlingRights.BLACK_KING_SIDE,
        }

    @property
    def en_passant_square(self) -> Square | None:
        """Square the last double-stepping pawn passed over, if any."""
        advance = self.last_two_square_advance
        if advance is None:
            return None
        return midpoint(advance.from_sq, advance.to_sq)

    # ── Pseudo-legal generation ──────────────────────────────────────────

    def add_possible_moves(
        self, moves: list[Move], sq: Square, threats_only: bool = False
    ) -> None:
        """Append pseudo-legal moves of the piece on *sq* to *moves*.

        The piece moves for its own color whatever the side to move is.
        With *threats_only* set, only moves that attack a square are
        produced: pawn pushes and castling are skipped and pawn diagonals
        are reported even when nothing stands on them.
        """
        piece = self.board.piece_at(sq)
        if piece is None:
            return

        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._add_pawn_moves(moves, sq, piece, threats_only)
        elif piece_type == PieceType.KNIGHT:
            self._add_directional_moves(moves, sq, piece, KNIGHT_OFFSETS, 1)
        elif piece_type == PieceType.KING:
            self._add_directional_moves(moves, sq, piece, QUEEN_DIRS, 1)
            if not threats_only:
                self._add_castling_moves(moves, sq, piece)
        else:
            self._add_directional_moves(moves, sq, piece, _SLIDING_DIRS[piece_type])

    def get_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves for the side to move."""
        moves: list[Move] = []
        for sq, piece in self.board.occupied():
            if piece.color == self.current_player:
                self.add_possible_moves(moves, sq)
        return moves

    def _add_directional_moves(
        self,
        moves: list[Move],
        start: Square,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        max_distance: int | None = None,
    ) -> None:
        board = self.board
        for df, dr in directions:
            target = start
            distance = 0
            while max_distance is None or distance < max_distance:
                target = target.offset(df, dr)
                if not board.is_valid(target):
                    break
                occupant = board.piece_at(target)
                if occupant is not None:
                    if occupant.color != piece.color:
                        moves.append(Move(piece, start, target, occupant))
                    break
                moves.append(Move(piece, start, target))
                distance += 1

    def _add_pawn_moves(
        self, moves: list[Move], sq: Square, piece: Piece, threats_only: bool
    ) -> None:
        board = self.board
        color = piece.color
        dr = self.pawn_direction(color)
        first = len(moves)

        if not threats_only:
            one_step = sq.offset(0, dr)
            if board.is_valid(one_step) and board.is_empty_at(one_step):
                moves.append(Move(piece, sq, one_step))
                two_step = sq.offset(0, 2 * dr)
                if (
                    sq.rank == self.pawn_start_rank(color)
                    and board.is_valid(two_step)
                    and board.is_empty_at(two_step)
                ):
                    moves.append(
                        Move(piece, sq, two_step, flags=MoveFlag.TWO_SQUARE_ADVANCE)
                    )

        ep_square = self.en_passant_square
        advance = self.last_two_square_advance
        for df in (1, -1):
            target = sq.offset(df, dr)
            if not board.is_valid(target):
                continue
            occupant = board.piece_at(target)
            if occupant is not None and occupant.color != color:
                moves.append(Move(piece, sq, target, occupant))
            elif threats_only:
                moves.append(Move(piece, sq, target))
            elif (
                advance is not None
                and target == ep_square
                and advance.piece.color != color
            ):
                victim = board.piece_at(advance.to_sq)
                moves.append(Move(piece, sq, target, victim, MoveFlag.EN_PASSANT))

        if threats_only:
            return

        # Index-based: the loop appends promotion variants to the same list.
        last_rank = self.promotion_rank(color)
        count = len(moves)
        for i in range(first, count):
            move = moves[i]
            if move.to_sq.rank != last_rank:
                continue
            moves[i] = move.with_flags(MoveFlag.PROMOTION_QUEEN)
            for flag in _EXTRA_PROMOTIONS:
                moves.append(move.with_flags(flag))

    def _add_castling_moves(self, moves: list[Move], sq: Square, piece: Piece) -> None:
        color = piece.color
        rank = self.home_rank(color)
        if sq != Square(KING_HOME_FILE, rank):
            return
        if not self.castling & both_rights(color):
            return

        threatened = self.threatened_squares(color.opposite)
        if sq in threatened:
            return

        board = self.board
        rook = Piece(color, PieceType.ROOK)
        sides = (
            (king_side_right(color), board.width - 1, 1, MoveFlag.CASTLE_KING_SIDE),
            (queen_side_right(color), 0, -1, MoveFlag.CASTLE_QUEEN_SIDE),
        )
        for right, rook_file, step, flag in sides:
            if not self.castling & right:
                continue
            if board.piece_at(Square(rook_file, rank)) != rook:
                continue
            low, high = sorted((sq.file, rook_file))
            if any(board.has_piece_at(Square(f, rank)) for f in range(low + 1, high)):
                continue
            king_path = (sq.offset(step, 0), sq.offset(2 * step, 0))
            if any(path_sq in threatened for path_sq in king_path):
                continue
            moves.append(Move(piece, sq, king_path[-1], flags=flag))

    # ── Threats and check ────────────────────────────────────────────────

    def get_current_threats(self, color: Color) -> list[Move]:
        """Attacking moves of every *color* piece, regardless of the turn."""
        threats: list[Move] = []
        for sq, piece in self.board.occupied():
            if piece.color == color:
                self.add_possible_moves(threats, sq, threats_only=True)
        return threats

    def threatened_squares(self, by_color: Color) -> set[Square]:
        return {move.to_sq for move in self.get_current_threats(by_color)}

    def is_square_attacked(self, sq: Square, by_color: Color) -> bool:
        return any(move.to_sq == sq for move in self.get_current_threats(by_color))

    def find_king(self, color: Color) -> Square | None:
        return self.board.find(Piece(color, PieceType.KING))

    def is_king_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked?  A missing king is never in check."""
        king_sq = self.find_king(color)
        if king_sq is None:
            return False
        return self.is_square_attacked(king_sq, color.opposite)

    # ── Legal moves ──────────────────────────────────────────────────────

    def remove_king_in_check_moves(self, moves: list[Move]) -> list[Move]:
        """Drop candidates that would leave the mover's own king attacked."""
        return [
            move
            for move in moves
            if not self.next_position(move).is_king_in_check(move.piece.color)
        ]

    def get_legal_moves(self, sq: Square | None = None) -> list[Move]:
        """Legal moves from *sq*, or for the whole side to move.

        Empty for off-board, empty or opponent-owned squares.
        """
        if sq is None:
            return self.remove_king_in_check_moves(self.get_pseudo_legal_moves())

        piece = self.board.piece_at(sq)
        if piece is None or piece.color != self.current_player:
            return []
        moves: list[Move] = []
        self.add_possible_moves(moves, sq)
        return self.remove_king_in_check_moves(moves)

    def has_legal_moves(self) -> bool:
        for sq, piece in self.board.occupied():
            if piece.color == self.current_player and self.get_legal_moves(sq):
                return True
        return False

    def is_legal_move(self, move: Move) -> bool:
        return move in self.get_legal_moves(move.from_sq)

    # ── Move application ─────────────────────────────────────────────────

    def do_move(self, move: Move) -> None:
        """Apply *move* in place.

        No legality check: *move* is expected to come from
        :meth:`get_legal_moves`.  Raises :class:`ValueError` when the move
        cannot be applied at all.
        """
        piece = self.board.piece_at(move.from_sq)
        if piece is None:
            raise ValueError(f"No piece on {square_name(move.from_sq)}")

        previous_advance = self.last_two_square_advance
        self.last_two_square_advance = move if move.is_two_square_advance else None

        # The captured pawn stands beside the destination, not on it
        if move.is_en_passant:
            if previous_advance is None:
                raise ValueError(f"En passant {move} without a two-square advance")
            self.board.set_empty_at(previous_advance.to_sq)

        self._update_castling(move, piece)

        self.board.try_move_piece(move.from_sq, move.to_sq)

        promotion = move.promotion_type
        if promotion is not None:
            self.board.set_piece(move.to_sq, Piece(piece.color, promotion))

        if move.flags & MoveFlag.CASTLE_KING_SIDE:
            self._slide_castling_rook(
                Square(self.board.width - 1, move.to_sq.rank),
                move.to_sq.offset(-1, 0),
            )
        elif move.flags & MoveFlag.CASTLE_QUEEN_SIDE:
            self._slide_castling_rook(
                Square(0, move.to_sq.rank),
                move.to_sq.offset(1, 0),
            )

        self.current_player = self.current_player.opposite

    def next_position(self, move: Move) -> Position:
        """Copy of this position with *move* applied."""
        pos = self.copy()
        pos.do_move(move)
        return pos

    def _slide_castling_rook(self, rook_from: Square, rook_to: Square) -> None:
        if not self.board.try_move_piece(rook_from, rook_to):
            raise ValueError(f"No rook on {square_name(rook_from)} to castle with")

    def _update_castling(self, move: Move, piece: Piece) -> None:
        rights = self.castling
        if piece.piece_type == PieceType.KING:
            rights &= ~both_rights(piece.color)

        corners = self._rook_corners()
        for sq in (move.from_sq, move.to_sq):
            if sq in corners:
                rights &= ~corners[sq]
        self.castling = rights

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            current_player=self.current_player,
            castling=self.castling,
            last_two_square_advance=self.last_two_square_advance,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.current_player == other.current_player
            and self.castling == other.castling
            and self.last_two_square_advance == other.last_two_square_advance
        )

    def __repr__(self) -> str:
        return (
            f"Position({self.current_player} to move, castling={self.castling!r}, "
            f"en_passant={self.en_passant_square})\n{self.board!r}"
        )
