"""Concrete player implementations."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from loa.core.enums import Side
from loa.engine.alpha_beta import AlphaBetaEngine
from loa.game.interfaces import IPlayer

if TYPE_CHECKING:
    from loa.core.board import Board
    from loa.core.move import Move
    from loa.engine.search import IEngine, SearchLimits

_LOGGER = logging.getLogger(__name__)


class HumanPlayer(IPlayer):
    """A human participant.

    ``request_move`` is a no-op because humans submit moves themselves.
    """

    __slots__ = ("_side", "_name")

    def __init__(self, side: Side, name: str = "") -> None:
        self._side = side
        self._name = name or f"Player ({side})"

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class MachinePlayer(IPlayer):
    """An automated participant backed by a search engine.

    Args:
        side: Side the machine plays.
        name: Display name.
        engine: Searcher to use; a default :class:`AlphaBetaEngine` otherwise.
        limits: Optional fixed search limits; the depth schedule otherwise.
        on_move: ``(Move) -> object`` called with each chosen move, usually
            ``GameController.submit_move``.
    """

    __slots__ = ("_side", "_name", "_engine", "_limits", "_on_move")

    def __init__(
        self,
        side: Side,
        name: str = "Machine",
        engine: IEngine | None = None,
        limits: SearchLimits | None = None,
        on_move: Callable[[Move], object] | None = None,
    ) -> None:
        self._side = side
        self._name = name
        self._engine = engine or AlphaBetaEngine()
        self._limits = limits
        self._on_move = on_move

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def bind(self, on_move: Callable[[Move], object] | None) -> None:
        """Set the callback that receives chosen moves."""
        self._on_move = on_move

    def choose_move(self, board: Board) -> Move:
        """Search *board* and return the move to play.

        Raises ``ValueError`` when it is not this player's turn or the game
        is already over.
        """
        if board.turn != self._side:
            raise ValueError(
                f"{self._name} plays {self._side}, but {board.turn} is to move"
            )
        if board.game_over():
            raise ValueError("Cannot choose a move: the game is over")

        result = self._engine.search(board, self._limits)
        if result.best_move is None:
            raise RuntimeError("Engine returned no move for a live position")
        _LOGGER.info(
            "%s (%s) plays %s [score=%d depth=%d nodes=%d]",
            self._name,
            self._side,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )
        return result.best_move

    def request_move(self, board: Board) -> None:
        move = self.choose_move(board)
        if self._on_move is not None:
            self._on_move(move)

    def cancel(self) -> None:
        pass  # The search runs synchronously inside request_move()
