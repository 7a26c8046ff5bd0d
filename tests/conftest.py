"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys

import pytest

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.notation import board_from_diagram

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

# White's d1 joins a2/b2 with d1-b1 (or d1-c2). Black's h3 and f1 stay apart.
WHITE_ONE_MOVE_FROM_WIN = """
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - -
- - - - - - - b
w w - - - - - -
- - - w - b - -
"""

SPARSE_MIDGAME = """
- - - b - - - -
- w - - - - - -
- - - - - w - -
- - - - - - - -
- - b - - - - -
- - - - - - w -
- w - - - b - -
- - - - - - - -
"""


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def near_win_board() -> Board:
    return board_from_diagram(WHITE_ONE_MOVE_FROM_WIN, Side.WHITE)


@pytest.fixture
def black_near_win_board() -> Board:
    """Colour-swapped WHITE_ONE_MOVE_FROM_WIN with BLACK to move."""
    swapped = WHITE_ONE_MOVE_FROM_WIN.replace("w", "x").replace("b", "w").replace("x", "b")
    return board_from_diagram(swapped, Side.BLACK)


@pytest.fixture
def sparse_board() -> Board:
    return board_from_diagram(SPARSE_MIDGAME, Side.WHITE)
