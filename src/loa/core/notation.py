"""Text diagrams for positions.

A diagram is eight rank lines, rank 8 first, of ``w`` (white), ``b`` (black)
and ``-`` (empty). Characters may be separated by whitespace::

    - b b b b b b -
    w - - - - - - w
    ...
"""

from __future__ import annotations

from loa.core.board import DEFAULT_MOVE_LIMIT, Board
from loa.core.enums import Side
from loa.core.types import BOARD_SIZE, make_square

_SYMBOLS: dict[str, Side | None] = {
    "w": Side.WHITE,
    "b": Side.BLACK,
    "-": None,
}

INITIAL_DIAGRAM = """\
- b b b b b b -
w - - - - - - w
w - - - - - - w
w - - - - - - w
w - - - - - - w
w - - - - - - w
w - - - - - - w
- b b b b b b -
"""


def board_from_diagram(
    text: str,
    turn: Side = Side.BLACK,
    *,
    move_limit: int = DEFAULT_MOVE_LIMIT,
    moves_made: int = 0,
) -> Board:
    """Build a :class:`Board` from a diagram. Raises ``ValueError`` on bad shape."""
    rows = [line.replace(" ", "").replace("\t", "") for line in text.strip().splitlines()]
    rows = [row for row in rows if row]
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Diagram must have {BOARD_SIZE} ranks, got {len(rows)}")

    squares: list[Side | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
    for row_idx, row in enumerate(rows):
        if len(row) != BOARD_SIZE:
            raise ValueError(
                f"Rank {BOARD_SIZE - row_idx} must have {BOARD_SIZE} squares: {row!r}"
            )
        rank = BOARD_SIZE - 1 - row_idx
        for file, char in enumerate(row):
            try:
                squares[make_square(file, rank)] = _SYMBOLS[char.lower()]
            except KeyError:
                raise ValueError(f"Invalid diagram character: {char!r}") from None
    return Board(squares, turn, move_limit=move_limit, moves_made=moves_made)


def board_to_diagram(board: Board) -> str:
    """Render *board* in the format read by :func:`board_from_diagram`."""
    lines: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        cells = []
        for file in range(BOARD_SIZE):
            occupant = board[make_square(file, rank)]
            cells.append(occupant.symbol if occupant is not None else "-")
        lines.append(" ".join(cells))
    return "\n".join(lines) + "\n"
