"""Qt bridge to run engine search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from loa.core.board import Board
from loa.engine.alpha_beta import AlphaBetaEngine
from loa.engine.config import EngineConfig
from loa.engine.search import SearchLimits

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes engine moves on demand.

    A search always runs to completion. :meth:`cancel` only marks the pending
    request stale so its result is reported as cancelled instead of applied.
    """

    best_move_ready = pyqtSignal(int, object, int, int, int)
    search_cancelled = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_limits")

    def __init__(
        self,
        *,
        max_depth: int | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        super().__init__()
        self._engine = AlphaBetaEngine(config=config)
        self._limits = SearchLimits(max_depth=max_depth)
        self._cancel_event = threading.Event()

    @pyqtSlot(object, int)
    def request_move(self, board_obj: object, request_id: int) -> None:
        """Search for the best move on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(board_obj, self._limits)
        except (ValueError, RuntimeError) as exc:
            _LOGGER.warning("Search request %d failed: %s", request_id, exc)
            self.search_error.emit(request_id, str(exc))
            return

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.depth,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Discard the result of the search in progress."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_depth(self, max_depth: int) -> None:
        """Fix the search depth for the next search; ``0`` restores the schedule."""
        self._limits = SearchLimits(max_depth=max_depth or None)
