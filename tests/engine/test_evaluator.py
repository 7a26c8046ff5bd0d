"""Tests for the static evaluator."""

import random

import pytest

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.notation import board_from_diagram
from loa.engine.config import EngineConfig
from loa.engine.evaluator import INFINITY, WINNING_VALUE, Evaluator, spread

# White: a8 alone, one piece. Black: scattered, eight pieces.
LONE_WHITE = """
w - - - - - - b
- - - - - - - -
- - b - - b - -
- - - - - - - -
b - - - - - - b
- - - - - - - -
- - b - - b - -
b - - - - - - -
"""

# Black unified on a1-b1-c2, white split.
BLACK_UNIFIED = """
w - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - w
- - - - - - - -
- - b - - - - -
b b - - - - - -
"""

BOTH_UNIFIED = """
w w - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
b b - - - - - -
"""

# White spread 1 (a8 b8 | a6); black spread 3 (four singletons).
WHITE_CLOSER = """
w w - - - - - b
- - - - - - - -
w - - - - - - -
- - - - - - - -
- - - - - - - b
- - - - - - - -
- - - - - - - -
b - - - - b - -
"""

# White spread 1 (a8 b8 | a6); black spread 1 (h8 h7 | a1).
EQUAL_SPREAD = """
w w - - - - - b
- - - - - - - b
w - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
b - - - - - - -
"""

BLACK_CLOSER = WHITE_CLOSER.replace("w", "x").replace("b", "w").replace("x", "b")


class TestWinningScores:
    def test_winning_value_below_infinity(self) -> None:
        assert 0 < WINNING_VALUE < INFINITY

    def test_white_unified_regardless_of_counts(self) -> None:
        board = board_from_diagram(LONE_WHITE, Side.BLACK)
        assert Evaluator().score(board) == WINNING_VALUE

    def test_black_unified(self) -> None:
        board = board_from_diagram(BLACK_UNIFIED, Side.WHITE)
        assert Evaluator().score(board) == -WINNING_VALUE

    def test_white_checked_first(self) -> None:
        board = board_from_diagram(BOTH_UNIFIED, Side.WHITE)
        assert Evaluator().score(board) == WINNING_VALUE


class TestSpreadComparison:
    def test_spread(self) -> None:
        board = board_from_diagram(WHITE_CLOSER)
        assert spread(board, Side.WHITE) == 1
        assert spread(board, Side.BLACK) == 3

    def test_white_closer_scores_positive(self) -> None:
        board = board_from_diagram(WHITE_CLOSER)
        assert Evaluator().score(board) == 1

    def test_black_closer_scores_negative(self) -> None:
        board = board_from_diagram(BLACK_CLOSER)
        assert Evaluator().score(board) == -1

    def test_equal_spread_scores_zero(self) -> None:
        board = board_from_diagram(EQUAL_SPREAD)
        assert Evaluator().score(board) == 0

    def test_initial_position_is_balanced(self, initial_board: Board) -> None:
        assert Evaluator().score(initial_board) == 0

    def test_custom_magnitude(self) -> None:
        evaluator = Evaluator(magnitude=7)
        assert evaluator.score(board_from_diagram(WHITE_CLOSER)) == 7
        assert evaluator.score(board_from_diagram(BLACK_CLOSER)) == -7

    def test_invalid_magnitude(self) -> None:
        with pytest.raises(ValueError):
            Evaluator(magnitude=0)


class TestRandomizedMagnitude:
    def test_default_is_deterministic(self) -> None:
        assert Evaluator().is_deterministic
        assert Evaluator.from_config(EngineConfig()).is_deterministic

    def test_seeded_rng_is_reproducible(self) -> None:
        board = board_from_diagram(WHITE_CLOSER)
        first = Evaluator.from_config(EngineConfig(randomize_magnitude=True, seed=7))
        second = Evaluator.from_config(EngineConfig(randomize_magnitude=True, seed=7))

        values = [first.score(board) for _ in range(5)]
        assert values == [second.score(board) for _ in range(5)]
        assert all(0 < v < WINNING_VALUE for v in values)
        assert not first.is_deterministic

    def test_sign_still_follows_spread(self) -> None:
        evaluator = Evaluator(rng=random.Random(3))
        assert evaluator.score(board_from_diagram(BLACK_CLOSER)) < 0
        assert evaluator.score(board_from_diagram(EQUAL_SPREAD)) == 0
        assert evaluator.score(board_from_diagram(LONE_WHITE)) == WINNING_VALUE
