"""MoveHistory — linear move log with an undo/redo cursor."""

from __future__ import annotations

import logging

from rookery.core.move import Move
from rookery.core.notation import notate
from rookery.core.position import Position

_LOGGER = logging.getLogger(__name__)


class MoveHistory:
    """Ordered moves played from a base position, plus a cursor.

    The cursor counts how many moves are applied.  Adding a move while the
    cursor is behind the end discards the redo tail first, so there is
    never more than one line of play.  Positions are rebuilt by replaying
    moves from a copy of the base position.
    """

    __slots__ = ("_base", "_moves", "_cursor")

    def __init__(self, base_position: Position | None = None) -> None:
        self._base = base_position.copy() if base_position is not None else Position()
        self._moves: list[Move] = []
        self._cursor = 0

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def base_position(self) -> Position:
        return self._base.copy()

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._moves)

    @property
    def last_applied_move(self) -> Move | None:
        if self._cursor == 0:
            return None
        return self._moves[self._cursor - 1]

    def __len__(self) -> int:
        return len(self._moves)

    # ── Editing ──────────────────────────────────────────────────────────

    def add_move(self, move: Move) -> None:
        """Append *move* after the cursor, dropping any redo tail."""
        del self._moves[self._cursor :]
        self._moves.append(move)
        self._cursor = len(self._moves)

    def undo(self) -> bool:
        if not self.can_undo:
            return False
        self._cursor -= 1
        return True

    def redo(self) -> bool:
        if not self.can_redo:
            return False
        self._cursor += 1
        return True

    def jump_to(self, index: int) -> None:
        """Place the cursor after the first *index* moves."""
        if not 0 <= index <= len(self._moves):
            raise IndexError(f"History index {index} outside 0..{len(self._moves)}")
        self._cursor = index

    def clear(self) -> None:
        self._moves.clear()
        self._cursor = 0

    def reset(self, base_position: Position) -> None:
        """Clear the log and start over from *base_position*."""
        self._base = base_position.copy()
        self.clear()

    # ── Reconstruction ───────────────────────────────────────────────────

    def current_position(self) -> Position:
        """Position after the first ``cursor`` moves."""
        return self._replay(self._cursor)

    def head_position(self) -> Position:
        """Position after every recorded move, ignoring the cursor."""
        return self._replay(len(self._moves))

    def notated_moves(self) -> list[str]:
        """Display notation of every recorded move."""
        position = self._base.copy()
        notations: list[str] = []
        for move in self._moves:
            position.do_move(move)
            notations.append(notate(move, position))
        return notations

    def _replay(self, count: int) -> Position:
        _LOGGER.debug("Replaying %d of %d moves", count, len(self._moves))
        position = self._base.copy()
        for move in self._moves[:count]:
            position.do_move(move)
        return position
