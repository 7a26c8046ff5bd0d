"""Command-line entry point: play Lines of Action in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys

from loa.core.enums import GameResult, Side
from loa.core.move import Move
from loa.engine.alpha_beta import AlphaBetaEngine
from loa.engine.config import EngineConfig
from loa.engine.search import SearchLimits
from loa.game.controller import GameController
from loa.game.interfaces import GamePhase, IPlayer
from loa.game.player import HumanPlayer, MachinePlayer

_RESULT_TEXT: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "White wins.",
    GameResult.BLACK_WINS: "Black wins.",
    GameResult.DRAW: "Draw.",
    GameResult.IN_PROGRESS: "Game stopped.",
}


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loa", description=__doc__)
    parser.add_argument("--white", choices=("human", "machine"), default="machine")
    parser.add_argument("--black", choices=("human", "machine"), default="human")
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="fixed search depth (default: grows with the number of moves made)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log engine output")
    return parser


def _make_player(
    kind: str,
    side: Side,
    ctrl: GameController,
    config: EngineConfig,
    depth: int | None,
) -> IPlayer:
    if kind == "human":
        return HumanPlayer(side)
    limits = SearchLimits(max_depth=depth) if depth is not None else None
    return MachinePlayer(
        side,
        name=f"Machine ({side})",
        engine=AlphaBetaEngine(config=config),
        limits=limits,
        on_move=ctrl.submit_move,
    )


def main(argv: list[str] | None = None) -> int:
    """Run a game on stdin/stdout. Returns the process exit code."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = EngineConfig.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    ctrl = GameController()
    ctrl.events.on_move.append(
        lambda move, notation, board: print(f"{board.turn.opposite}: {notation}")
    )
    white = _make_player(args.white, Side.WHITE, ctrl, config, args.depth)
    black = _make_player(args.black, Side.BLACK, ctrl, config, args.depth)
    ctrl.new_game(white, black)

    while ctrl.phase == GamePhase.AWAITING_MOVE:
        print(repr(ctrl.board))
        try:
            line = input(f"{ctrl.board.turn} move: ").strip()
        except EOFError:
            ctrl.stop()
            break
        if line in ("quit", "exit"):
            ctrl.stop()
            break
        try:
            move = Move.parse(line)
        except ValueError as exc:
            print(exc)
            continue
        if not ctrl.submit_move(move):
            print(f"Illegal move: {move}")

    print(repr(ctrl.board))
    print(_RESULT_TEXT[ctrl.result])
    return 0


if __name__ == "__main__":
    sys.exit(main())
