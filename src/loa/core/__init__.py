"""Core domain layer — Lines of Action rules with zero external dependencies.

Quick start::

    from loa.core import Board

    board = Board.initial()
    for move in board.legal_moves():
        print(move)
"""

from loa.core.board import DEFAULT_MOVE_LIMIT, Board
from loa.core.enums import GameResult, Side
from loa.core.move import Move
from loa.core.notation import INITIAL_DIAGRAM, board_from_diagram, board_to_diagram
from loa.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "GameResult",
    "Side",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "DEFAULT_MOVE_LIMIT",
    "Move",
    # Notation
    "INITIAL_DIAGRAM",
    "board_from_diagram",
    "board_to_diagram",
]
