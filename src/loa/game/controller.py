"""GameController — the central orchestrator of a game.

Coordinates players and the authoritative board, and emits events via
simple callbacks so a front end or tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from loa.core.board import Board
from loa.core.enums import GameResult, Side
from loa.core.move import Move
from loa.game.interfaces import GamePhase, IPlayer

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, str, Board], None]  # move, notation, board
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full game: validates moves, switches turns, notifies
    listeners.

    Machine players are prompted synchronously and hand their move back
    through :meth:`submit_move`. Consecutive machine turns are driven by a
    loop rather than by recursion, so machine-vs-machine games run to the
    end inside :meth:`new_game`.
    """

    __slots__ = (
        "_board",
        "_players",
        "_phase",
        "_prompting",
        "_reprompt",
        "events",
    )

    def __init__(self) -> None:
        self._board = Board.initial()
        self._players: dict[Side, IPlayer] = {}
        self._phase = GamePhase.NOT_STARTED
        self._prompting = False
        self._reprompt = False
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """A copy of the authoritative board."""
        return self._board.copy()

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._board.result()

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.turn)

    def player(self, side: Side) -> IPlayer | None:
        return self._players.get(side)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
    ) -> None:
        if white.side != Side.WHITE or black.side != Side.BLACK:
            raise ValueError("Players must be assigned to their own sides")
        self._players = {Side.WHITE: white, Side.BLACK: black}
        self._board = board.copy() if board is not None else Board.initial()

        if self._board.game_over():
            self._emit_game_over(self._board.result())
            return
        self._set_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def submit_move(self, move: Move) -> bool:
        """Apply *move* for the side to move. Returns False if not accepted."""
        if self._phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return False
        if not self._board.is_legal(move):
            _LOGGER.debug("Rejected illegal move %s for %s", move, self._board.turn)
            return False

        self._board.make_move(move)
        self._emit_move(move)

        if self._board.game_over():
            self._emit_game_over(self._board.result())
            return True

        self._prompt_current_player()
        return True

    def stop(self) -> None:
        """Abort the game without a result."""
        cp = self.current_player
        if cp is not None and not cp.is_human:
            cp.cancel()
        self._set_phase(GamePhase.GAME_OVER)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        if self._prompting:
            self._reprompt = True
            return

        self._prompting = True
        try:
            while True:
                self._reprompt = False
                cp = self.current_player
                if cp is None or self._phase == GamePhase.GAME_OVER:
                    return
                if cp.is_human:
                    self._set_phase(GamePhase.AWAITING_MOVE)
                    return
                self._set_phase(GamePhase.THINKING)
                cp.request_move(self._board.copy())
                if not self._reprompt:
                    return
        finally:
            self._prompting = False

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_move(self, move: Move) -> None:
        notation = str(move)
        for cb in self.events.on_move:
            cb(move, notation, self._board.copy())

    def _emit_game_over(self, result: GameResult) -> None:
        _LOGGER.info("Game over after %d moves: %s", self._board.moves_made, result.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)
