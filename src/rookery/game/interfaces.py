"""Abstract interfaces for the game layer.

The game session depends on these, not on concrete players, so hosts can
plug in their own input sources and move pickers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from rookery.core.enums import Color, PieceType

if TYPE_CHECKING:
    from rookery.core.move import Move
    from rookery.core.position import Position


class PlayerKind(IntEnum):
    """Who supplies the moves for one side."""

    HUMAN = auto()
    RANDOM = auto()


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class NewGameOptions:
    """Per-color player assignment returned by a new-game prompt.

    Args:
        white: Kind of player for White.
        black: Kind of player for Black.
        seed: Optional seed for random players, for reproducible games.
    """

    white: PlayerKind = PlayerKind.HUMAN
    black: PlayerKind = PlayerKind.HUMAN
    seed: int | None = None

    def kind_for(self, color: Color) -> PlayerKind:
        return self.white if color == Color.WHITE else self.black


PromotionChooser = Callable[["Move"], PieceType]


def default_promotion_chooser(move: Move) -> PieceType:
    """Always promote to a queen."""
    return PieceType.QUEEN


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, position: Position) -> Move | None:
        """Pick a move in *position*.

        Humans return ``None``: their moves arrive through square selection.
        """
