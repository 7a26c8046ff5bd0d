"""Search depth schedule tied to game progress."""

from __future__ import annotations

# (moves made strictly below, depth)
_DEPTH_SCHEDULE: tuple[tuple[int, int], ...] = (
    (20, 1),
    (30, 2),
    (40, 3),
)
_LATE_GAME_DEPTH = 4


def choose_depth(moves_made: int) -> int:
    """Return the search depth for a game with *moves_made* moves played.

    Early positions branch widely and are rarely sharp, so they are searched
    shallowly; the depth grows as the game goes on.
    """
    if moves_made < 0:
        raise ValueError(f"Moves made cannot be negative: {moves_made}")
    for threshold, depth in _DEPTH_SCHEDULE:
        if moves_made < threshold:
            return depth
    return _LATE_GAME_DEPTH
