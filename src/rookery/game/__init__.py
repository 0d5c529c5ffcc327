"""Game management layer — players, session state machine, selection.

Quick start::

    from rookery.game import GameSession, NewGameOptions, PlayerKind

    session = GameSession()
    session.new_game(NewGameOptions(white=PlayerKind.HUMAN, black=PlayerKind.RANDOM))
"""

from rookery.game.interfaces import (
    GamePhase,
    IPlayer,
    NewGameOptions,
    PlayerKind,
    PromotionChooser,
    default_promotion_chooser,
)
from rookery.game.player import HumanPlayer, RandomPlayer, create_player
from rookery.game.state import GameEvents, GameSession, MoveIndicator, SquareSelection

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    "NewGameOptions",
    "PlayerKind",
    "PromotionChooser",
    "default_promotion_chooser",
    # Concrete
    "GameEvents",
    "GameSession",
    "HumanPlayer",
    "MoveIndicator",
    "RandomPlayer",
    "SquareSelection",
    "create_player",
]
