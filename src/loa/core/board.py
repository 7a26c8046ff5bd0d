"""Board — Lines of Action position with move generation and win detection."""

from __future__ import annotations

from dataclasses import dataclass

from loa.core.enums import GameResult, Side
from loa.core.move import Move
from loa.core.types import BOARD_SIZE, Square, file_of, is_on_board, make_square, rank_of

DEFAULT_MOVE_LIMIT = 60

# (file delta, rank delta): N, NE, E, SE, S, SW, W, NW.
_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)

_WIN_RESULT: dict[Side, GameResult] = {
    Side.WHITE: GameResult.WHITE_WINS,
    Side.BLACK: GameResult.BLACK_WINS,
}


@dataclass(slots=True)
class _UndoState:
    """Snapshot saved before each move so it can be taken back."""

    move: Move
    captured: Side | None


class Board:
    """Mutable 8x8 Lines of Action position.

    Squares hold a :class:`Side` or ``None``. The game result and the legal
    move list are cached and dropped on every mutation.
    """

    __slots__ = (
        "_squares",
        "_turn",
        "_move_limit",
        "_initial_moves",
        "_history",
        "_result",
        "_legal",
    )

    def __init__(
        self,
        squares: list[Side | None] | None = None,
        turn: Side = Side.BLACK,
        move_limit: int = DEFAULT_MOVE_LIMIT,
        moves_made: int = 0,
    ) -> None:
        if squares is None:
            squares = [None] * (BOARD_SIZE * BOARD_SIZE)
        if len(squares) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected 64 squares, got {len(squares)}")
        if move_limit <= 0:
            raise ValueError("Move limit must be positive")
        if moves_made < 0:
            raise ValueError("Moves made cannot be negative")
        self._squares: list[Side | None] = list(squares)
        self._turn = turn
        self._move_limit = move_limit
        self._initial_moves = moves_made
        self._history: list[_UndoState] = []
        self._result: GameResult | None = None
        self._legal: list[Move] | None = None

    # ── Factory ──────────────────────────────────────────────────────────

    @classmethod
    def initial(cls, move_limit: int = DEFAULT_MOVE_LIMIT) -> Board:
        """Standard starting position, BLACK to move."""
        squares: list[Side | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for i in range(1, BOARD_SIZE - 1):
            squares[make_square(i, 0)] = Side.BLACK
            squares[make_square(i, BOARD_SIZE - 1)] = Side.BLACK
            squares[make_square(0, i)] = Side.WHITE
            squares[make_square(BOARD_SIZE - 1, i)] = Side.WHITE
        return cls(squares, Side.BLACK, move_limit)

    # ── Element access ───────────────────────────────────────────────────

    def __getitem__(self, sq: Square) -> Side | None:
        return self._squares[sq]

    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def move_limit(self) -> int:
        return self._move_limit

    @property
    def moves_made(self) -> int:
        return self._initial_moves + len(self._history)

    @property
    def last_move(self) -> Move | None:
        return self._history[-1].move if self._history else None

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*, ascending."""
        return [sq for sq, occupant in enumerate(self._squares) if occupant == side]

    def piece_count(self, side: Side) -> int:
        return self._squares.count(side)

    # ── Regions ──────────────────────────────────────────────────────────

    def region_sizes(self, side: Side) -> list[int]:
        """Sizes of the 8-connected regions of *side*'s pieces, largest first."""
        seen: set[Square] = set()
        sizes: list[int] = []
        for start in self.pieces(side):
            if start in seen:
                continue
            seen.add(start)
            stack = [start]
            size = 0
            while stack:
                sq = stack.pop()
                size += 1
                f, r = file_of(sq), rank_of(sq)
                for df, dr in _DIRECTIONS:
                    nf, nr = f + df, r + dr
                    if not is_on_board(nf, nr):
                        continue
                    neighbour = make_square(nf, nr)
                    if neighbour not in seen and self._squares[neighbour] == side:
                        seen.add(neighbour)
                        stack.append(neighbour)
            sizes.append(size)
        sizes.sort(reverse=True)
        return sizes

    def pieces_contiguous(self, side: Side) -> bool:
        """Whether all of *side*'s pieces form a single region."""
        return len(self.region_sizes(side)) == 1

    # ── Move generation ──────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move.

        Ordered by origin square, then by direction (N, NE, E, SE, S, SW, W, NW).
        Empty once the game is over on a win or the move limit.
        """
        if self._legal is None:
            if self._decided_result() is not None:
                self._legal = []
            else:
                self._legal = self._generate_moves()
        return list(self._legal)

    def is_legal(self, move: Move) -> bool:
        return move in self.legal_moves()

    def _generate_moves(self) -> list[Move]:
        moves: list[Move] = []
        side = self._turn
        for sq in self.pieces(side):
            f, r = file_of(sq), rank_of(sq)
            for df, dr in _DIRECTIONS:
                distance = self._line_count(f, r, df, dr)
                tf, tr = f + df * distance, r + dr * distance
                if not is_on_board(tf, tr):
                    continue
                if self._squares[make_square(tf, tr)] == side:
                    continue
                if self._path_blocked(f, r, df, dr, distance, side.opposite):
                    continue
                moves.append(Move(sq, make_square(tf, tr)))
        return moves

    def _line_count(self, f: int, r: int, df: int, dr: int) -> int:
        """Pieces of either side on the whole line through (f, r) along ±(df, dr)."""
        count = 1
        for sign in (1, -1):
            nf, nr = f + sign * df, r + sign * dr
            while is_on_board(nf, nr):
                if self._squares[make_square(nf, nr)] is not None:
                    count += 1
                nf += sign * df
                nr += sign * dr
        return count

    def _path_blocked(
        self,
        f: int,
        r: int,
        df: int,
        dr: int,
        distance: int,
        enemy: Side,
    ) -> bool:
        for step in range(1, distance):
            if self._squares[make_square(f + df * step, r + dr * step)] == enemy:
                return True
        return False

    # ── Mutation / copying ───────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move* for the side to move. Raises ``ValueError`` if illegal."""
        if not self.is_legal(move):
            raise ValueError(f"Illegal move {move} for {self._turn}")
        captured = self._squares[move.to_sq]
        self._history.append(_UndoState(move=move, captured=captured))
        self._squares[move.to_sq] = self._squares[move.from_sq]
        self._squares[move.from_sq] = None
        self._turn = self._turn.opposite
        self._invalidate()

    def undo_move(self) -> None:
        """Take back the last move made on this board."""
        if not self._history:
            raise ValueError("No move to undo")
        state = self._history.pop()
        self._squares[state.move.from_sq] = self._squares[state.move.to_sq]
        self._squares[state.move.to_sq] = state.captured
        self._turn = self._turn.opposite
        self._invalidate()

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        b._turn = self._turn
        b._move_limit = self._move_limit
        b._initial_moves = self._initial_moves
        b._history = self._history.copy()
        b._result = self._result
        b._legal = self._legal
        return b

    def _invalidate(self) -> None:
        self._result = None
        self._legal = None

    # ── Game status ──────────────────────────────────────────────────────

    def result(self) -> GameResult:
        """Current game result.

        The side that just moved wins if its pieces are contiguous, even when
        the move also unified the opponent. A game still undecided at the move
        limit, or with no legal move for the side to move, is drawn.
        """
        if self._result is None:
            decided = self._decided_result()
            if decided is None:
                has_moves = bool(self.legal_moves())
                decided = GameResult.IN_PROGRESS if has_moves else GameResult.DRAW
            self._result = decided
        return self._result

    def _decided_result(self) -> GameResult | None:
        for side in (self._turn.opposite, self._turn):
            if self.pieces_contiguous(side):
                return _WIN_RESULT[side]
        if self.moves_made >= self._move_limit:
            return GameResult.DRAW
        return None

    def winner(self) -> Side | None:
        """Winning side, or ``None`` while in progress or drawn."""
        result = self.result()
        if result == GameResult.WHITE_WINS:
            return Side.WHITE
        if result == GameResult.BLACK_WINS:
            return Side.BLACK
        return None

    def game_over(self) -> bool:
        return self.result() != GameResult.IN_PROGRESS

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares and self._turn == other._turn

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                occupant = self._squares[make_square(file, rank)]
                row.append(occupant.symbol if occupant is not None else "-")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        rows.append(f"Next move: {self._turn}")
        return "\n".join(rows)
