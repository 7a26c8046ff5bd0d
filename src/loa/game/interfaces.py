"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete Player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from loa.core.enums import Side

if TYPE_CHECKING:
    from loa.core.board import Board


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # machine player is computing
    GAME_OVER = auto()


class IPlayer(ABC):
    """Interface for a game participant (human or machine)."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (moves are submitted to the controller).
        For machines this runs the search and hands the move back.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Cancel an ongoing move computation (no-op for humans)."""
