"""Static position evaluation."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from loa.core.enums import Side

if TYPE_CHECKING:
    from loa.core.board import Board
    from loa.engine.config import EngineConfig

# Search bound strictly above any score the evaluator can return.
INFINITY = 1_000_000
# A won position: positive when WHITE's pieces are unified, negative for BLACK.
WINNING_VALUE = INFINITY - 20


def spread(board: Board, side: Side) -> int:
    """Pieces of *side* outside its largest region."""
    sizes = board.region_sizes(side)
    largest = sizes[0] if sizes else 0
    return board.piece_count(side) - largest


class Evaluator:
    """Scores a board from WHITE's point of view.

    A unified side scores ``±WINNING_VALUE``. Otherwise the side with fewer
    pieces outside its largest region is ahead by ``magnitude``; equal spreads
    score zero.
    """

    __slots__ = ("_magnitude", "_rng")

    def __init__(self, magnitude: int = 1, rng: random.Random | None = None) -> None:
        if magnitude <= 0:
            raise ValueError("Heuristic magnitude must be >= 1")
        self._magnitude = magnitude
        self._rng = rng

    @classmethod
    def from_config(cls, config: EngineConfig) -> Evaluator:
        rng = random.Random(config.seed) if config.randomize_magnitude else None
        return cls(magnitude=config.heuristic_magnitude, rng=rng)

    @property
    def is_deterministic(self) -> bool:
        return self._rng is None

    def score(self, board: Board) -> int:
        if board.pieces_contiguous(Side.WHITE):
            return WINNING_VALUE
        if board.pieces_contiguous(Side.BLACK):
            return -WINNING_VALUE

        white_spread = spread(board, Side.WHITE)
        black_spread = spread(board, Side.BLACK)
        if white_spread < black_spread:
            return self._advantage()
        if white_spread > black_spread:
            return -self._advantage()
        return 0

    def _advantage(self) -> int:
        if self._rng is None:
            return self._magnitude
        return self._rng.randint(1, WINNING_VALUE - 1)
