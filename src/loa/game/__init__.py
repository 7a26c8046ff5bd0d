"""Game management layer — controller, players, phase state machine.

Quick start::

    from loa.core import Side
    from loa.game import GameController, MachinePlayer

    ctrl = GameController()
    white = MachinePlayer(Side.WHITE, on_move=ctrl.submit_move)
    black = MachinePlayer(Side.BLACK, on_move=ctrl.submit_move)
    ctrl.new_game(white, black)  # plays to the end
"""

from loa.game.controller import GameController, GameEvents
from loa.game.interfaces import GamePhase, IPlayer
from loa.game.player import HumanPlayer, MachinePlayer

__all__ = [
    # Interfaces
    "GamePhase",
    "IPlayer",
    # Concrete
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "MachinePlayer",
]
