"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from rookery.core.board import Board
from rookery.core.enums import CastlingRights, Color
from rookery.core.move import Move
from rookery.core.position import Position

PositionFactory = Callable[..., Position]


@pytest.fixture
def start() -> Position:
    """Standard starting position, White to move."""
    return Position()


@pytest.fixture
def make_position() -> PositionFactory:
    """Build a position from a board diagram (first row is rank 0).

    Castling rights default to none so ad-hoc boards don't need both rooks.
    """

    def _make(
        diagram: str,
        current_player: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.NONE,
        last_two_square_advance: Move | None = None,
    ) -> Position:
        return Position(
            Board.from_diagram(diagram),
            current_player=current_player,
            castling=castling,
            last_two_square_advance=last_two_square_advance,
        )

    return _make
