"""Core enumerations for the Lines of Action domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Piece color. WHITE is the side scored positively by the evaluator."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def symbol(self) -> str:
        """Single-letter diagram symbol: 'w' or 'b'."""
        return "w" if self is Side.WHITE else "b"

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
