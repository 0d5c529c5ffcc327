"""Concrete player implementations."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from rookery.core.enums import Color
from rookery.game.interfaces import IPlayer, NewGameOptions, PlayerKind

if TYPE_CHECKING:
    from rookery.core.move import Move
    from rookery.core.position import Position


class HumanPlayer(IPlayer):
    """A human participant — moves come from square selection.

    ``choose_move`` returns ``None`` because humans pick moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, position: Position) -> Move | None:
        return None


class RandomPlayer(IPlayer):
    """Picks uniformly at random among the legal moves.

    Promotion variants are separate legal moves, so the promotion piece is
    chosen at random as well.

    Args:
        color: Side the player moves for.
        name: Display name.
        rng: Random source; a fresh unseeded one by default.
    """

    __slots__ = ("_color", "_name", "_rng")

    def __init__(
        self,
        color: Color,
        name: str = "Random",
        rng: random.Random | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._rng = rng if rng is not None else random.Random()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, position: Position) -> Move | None:
        moves = position.get_legal_moves()
        if not moves:
            return None
        return self._rng.choice(moves)


def create_player(color: Color, options: NewGameOptions) -> IPlayer:
    """Build the player *options* assign to *color*."""
    kind = options.kind_for(color)
    if kind == PlayerKind.HUMAN:
        return HumanPlayer(color)
    if kind == PlayerKind.RANDOM:
        seed = None if options.seed is None else options.seed + color.index
        return RandomPlayer(color, rng=random.Random(seed))
    raise ValueError(f"Unknown player kind: {kind!r}")
