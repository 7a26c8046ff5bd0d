"""Tests for diagrams, move notation and square helpers."""

import pytest

from loa.core.board import Board
from loa.core.enums import Side
from loa.core.move import Move
from loa.core.notation import INITIAL_DIAGRAM, board_from_diagram, board_to_diagram
from loa.core.types import A1, B1, B3, H8, parse_square, square_name


class TestDiagram:
    def test_initial_diagram_matches_initial_board(self) -> None:
        assert board_from_diagram(INITIAL_DIAGRAM) == Board.initial()

    def test_render_initial(self) -> None:
        assert board_to_diagram(Board.initial()) == INITIAL_DIAGRAM

    def test_compact_rows_accepted(self) -> None:
        compact = "\n".join(row.replace(" ", "") for row in INITIAL_DIAGRAM.splitlines())
        assert board_from_diagram(compact) == Board.initial()

    def test_turn_and_counters(self) -> None:
        board = board_from_diagram(INITIAL_DIAGRAM, Side.WHITE, moves_made=25, move_limit=80)
        assert board.turn == Side.WHITE
        assert board.moves_made == 25
        assert board.move_limit == 80

    def test_wrong_rank_count_raises(self) -> None:
        with pytest.raises(ValueError, match="8 ranks"):
            board_from_diagram("- - - -\n- - - -")

    def test_wrong_file_count_raises(self) -> None:
        bad = INITIAL_DIAGRAM.replace("- b b b b b b -", "- b b b b b -", 1)
        with pytest.raises(ValueError, match="must have 8 squares"):
            board_from_diagram(bad)

    def test_bad_character_raises(self) -> None:
        bad = INITIAL_DIAGRAM.replace("w", "x", 1)
        with pytest.raises(ValueError, match="Invalid diagram character"):
            board_from_diagram(bad)


class TestMoveNotation:
    def test_str(self) -> None:
        assert str(Move(B1, B3)) == "b1-b3"

    def test_parse(self) -> None:
        assert Move.parse(" a1-h8 ") == Move(A1, H8)

    @pytest.mark.parametrize("text", ["a1h8", "a1-", "a1-h9", "a1-b2-c3"])
    def test_parse_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.parse(text)

    def test_moves_are_hashable_and_ordered(self) -> None:
        assert len({Move(B1, B3), Move(B1, B3)}) == 1
        assert Move(A1, H8) < Move(B1, B3)


class TestSquares:
    def test_names(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"
        assert parse_square("b3") == B3

    def test_invalid_name(self) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square("z9")

    def test_side_helpers(self) -> None:
        assert Side.WHITE.opposite == Side.BLACK
        assert str(Side.BLACK) == "black"
        assert Side.WHITE.symbol == "w"
