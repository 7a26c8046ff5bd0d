"""Depth-bounded minimax search with alpha-beta pruning."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.engine.config import EngineConfig
from loa.engine.depth import choose_depth
from loa.engine.evaluator import INFINITY, Evaluator
from loa.engine.search import IEngine, SearchLimits, SearchResult

_LOGGER = logging.getLogger(__name__)

_SENSE: dict[Side, int] = {
    Side.WHITE: 1,
    Side.BLACK: -1,
}


def sense_of(side: Side) -> int:
    """+1 for the side the evaluator favours with positive scores, -1 otherwise."""
    return _SENSE[side]


@dataclass(slots=True)
class _BestSoFar:
    value: int
    move: Move


class AlphaBetaEngine(IEngine):
    """Fixed-depth minimax searcher.

    Every child position is searched on its own clone, so nothing needs to be
    undone while backtracking. The chosen move is only recorded at the root.
    """

    __slots__ = ("_evaluator", "_config", "_found_move", "_nodes")

    def __init__(
        self,
        evaluator: Evaluator | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._config = config or EngineConfig()
        self._evaluator = evaluator or Evaluator.from_config(self._config)
        self._found_move: Move | None = None
        self._nodes = 0

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    def search(
        self,
        board: Board,
        limits: SearchLimits | None = None,
    ) -> SearchResult:
        """Pick a move for the side to move on *board*.

        The engine plays whichever side ``board.turn`` names and takes its
        sign from it. Callers searching on behalf of a fixed side must make
        sure that side is to move; :meth:`MachinePlayer.choose_move` does.

        Raises ``ValueError`` if the game is already over or the depth is
        below 1.
        """
        if board.game_over():
            raise ValueError("Cannot search a position where the game is over")

        depth = self._resolve_depth(board, limits)
        work = board.copy()
        self._found_move = None
        self._nodes = 0

        value = self._find_move(
            work,
            depth,
            save_move=True,
            sense=sense_of(work.turn),
            alpha=-INFINITY,
            beta=INFINITY,
        )
        _LOGGER.debug(
            "Searched %s to depth %d: score=%d nodes=%d move=%s",
            work.turn,
            depth,
            value,
            self._nodes,
            self._found_move,
        )
        return SearchResult(self._found_move, value, depth, self._nodes)

    def _resolve_depth(self, board: Board, limits: SearchLimits | None) -> int:
        if limits is not None and limits.max_depth is not None:
            depth = limits.max_depth
        elif self._config.fixed_depth is not None:
            depth = self._config.fixed_depth
        else:
            depth = choose_depth(board.moves_made)
        if depth <= 0:
            raise ValueError("Search depth must be >= 1")
        return depth

    def _find_move(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> int:
        """Return the minimax value of *board* searched *depth* plies deep.

        With ``sense == 1`` the side to move maximizes, with ``-1`` it
        minimizes. Leaves are scored statically and never record a move.
        """
        self._nodes += 1
        if depth == 0 or board.game_over():
            return self._evaluator.score(board)

        moves = board.legal_moves()
        if not moves:
            raise RuntimeError(f"No legal moves in a non-terminal position:\n{board!r}")

        best = _BestSoFar(value=-INFINITY if sense == 1 else INFINITY, move=moves[0])
        for move in moves:
            child = board.copy()
            child.make_move(move)
            value = self._find_move(child, depth - 1, False, -sense, alpha, beta)

            if sense == 1:
                if value > best.value:
                    best.value = value
                    best.move = move
                alpha = max(alpha, value)
            else:
                if value < best.value:
                    best.value = value
                    best.move = move
                beta = min(beta, value)
            if alpha >= beta:
                break

        if save_move:
            self._found_move = best.move
        return best.value
