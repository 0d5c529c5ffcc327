"""Game session — players, square selection, history navigation, results."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookery.core.enums import Color, GameResult
from rookery.core.history import MoveHistory
from rookery.core.move import Move
from rookery.core.notation import notate
from rookery.core.position import Position
from rookery.core.rules import Rules
from rookery.core.types import Square
from rookery.game.interfaces import (
    GamePhase,
    IPlayer,
    NewGameOptions,
    PromotionChooser,
    default_promotion_chooser,
)
from rookery.game.player import create_player

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, "GameSession"], None]  # move, notation, session
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Selection payloads for the rendering layer ──────────────────────────────


@dataclass(frozen=True, slots=True)
class MoveIndicator:
    """A destination square to mark for the selected piece."""

    square: Square
    is_capture: bool
    is_special: bool = False


@dataclass(frozen=True, slots=True)
class SquareSelection:
    """What the board view should highlight after a click."""

    highlighted: tuple[Square, ...] = ()
    indicators: tuple[MoveIndicator, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.highlighted and not self.indicators


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Drives one game: who moves next, what was played, how it ended.

    Single-threaded.  Players only ever see copies of the current position.
    """

    __slots__ = (
        "_history",
        "_players",
        "_phase",
        "_result",
        "_selected",
        "_promotion_chooser",
        "events",
    )

    def __init__(
        self, promotion_chooser: PromotionChooser = default_promotion_chooser
    ) -> None:
        self._history = MoveHistory()
        self._players: dict[Color, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._selected: Square | None = None
        self._promotion_chooser = promotion_chooser
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def history(self) -> MoveHistory:
        return self._history

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def position(self) -> Position:
        """Current position (a fresh copy on every access)."""
        return self._history.current_position()

    @property
    def side_to_move(self) -> Color:
        return self.position.current_player

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self.side_to_move)

    @property
    def selected_square(self) -> Square | None:
        return self._selected

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(
        self,
        options: NewGameOptions | None = None,
        base_position: Position | None = None,
    ) -> None:
        """Set up a new game from *options* (human vs human by default)."""
        options = options or NewGameOptions()
        self._players = {
            color: create_player(color, options) for color in (Color.WHITE, Color.BLACK)
        }
        self._history.reset(base_position if base_position is not None else Position())
        self._selected = None
        self._result = GameResult.IN_PROGRESS
        _LOGGER.info(
            "New game: white=%s black=%s", options.white.name, options.black.name
        )
        self._refresh_result()

    def legal_moves(self, sq: Square | None = None) -> list[Move]:
        return self.position.get_legal_moves(sq)

    def submit_move(self, move: Move) -> bool:
        """Apply *move* if it is legal now. Returns True when applied."""
        if self._phase != GamePhase.AWAITING_MOVE:
            return False

        position = self.position
        if not position.is_legal_move(move):
            _LOGGER.warning("Rejected illegal move %s", move)
            return False

        self._history.add_move(move)
        position.do_move(move)
        notation = notate(move, position)
        _LOGGER.debug("Played %s (%s)", notation, move)

        for cb in self.events.on_move:
            cb(move, notation, self)

        self._refresh_result(position)
        return True

    def play_automatic_moves(self, max_moves: int = 1) -> int:
        """Let non-human players move, at most *max_moves* times.

        Stops early when a human is to move or the game is over.  Returns
        the number of moves played.
        """
        played = 0
        while played < max_moves and self._phase == GamePhase.AWAITING_MOVE:
            player = self.current_player
            if player is None or player.is_human:
                break
            move = player.choose_move(self.position)
            if move is None or not self.submit_move(move):
                break
            played += 1
        return played

    # ── Square selection ─────────────────────────────────────────────────

    def select_square(self, sq: Square) -> SquareSelection:
        """Handle a click on *sq*.

        The first click on a piece selects it and returns its destinations.
        The next click plays the move to that square if there is one
        (asking the promotion chooser when needed) and clears the selection.
        """
        position = self.position

        if self._selected is not None:
            from_sq = self._selected
            self._selected = None
            for move in position.get_legal_moves(from_sq):
                if move.to_sq != sq:
                    continue
                if move.is_promotion:
                    move = move.with_promotion(self._promotion_chooser(move))
                self.submit_move(move)
                break
            return SquareSelection()

        if self._phase != GamePhase.AWAITING_MOVE:
            return SquareSelection()
        player = self.current_player
        if player is not None and not player.is_human:
            return SquareSelection()
        if position.board.piece_at(sq) is None:
            return SquareSelection()

        self._selected = sq
        indicators: dict[Square, MoveIndicator] = {}
        for move in position.get_legal_moves(sq):
            indicators.setdefault(
                move.to_sq,
                MoveIndicator(move.to_sq, move.is_capture, bool(move.flags)),
            )
        return SquareSelection((sq,), tuple(indicators.values()))

    # ── History navigation ───────────────────────────────────────────────

    def undo(self) -> bool:
        if not self._history.undo():
            return False
        self._selected = None
        self._refresh_result()
        return True

    def redo(self) -> bool:
        if not self._history.redo():
            return False
        self._selected = None
        self._refresh_result()
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _refresh_result(self, position: Position | None = None) -> None:
        position = position if position is not None else self.position
        result = Rules.game_result(position)
        previous = self._result
        self._result = result

        if result == GameResult.IN_PROGRESS:
            self._set_phase(GamePhase.AWAITING_MOVE)
            return

        self._set_phase(GamePhase.GAME_OVER)
        if previous != result:
            _LOGGER.info("Game over: %s", result.name)
            for cb in self.events.on_game_over:
                cb(result)

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
