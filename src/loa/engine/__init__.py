"""Move-selection engine: evaluator, depth schedule and alpha-beta search.

The Qt worker lives in :mod:`loa.engine.qt_bridge` and is imported on demand
so the search can run without PyQt6 loaded.
"""

from loa.engine.alpha_beta import AlphaBetaEngine, sense_of
from loa.engine.config import EngineConfig
from loa.engine.depth import choose_depth
from loa.engine.evaluator import INFINITY, WINNING_VALUE, Evaluator, spread
from loa.engine.search import IEngine, SearchLimits, SearchResult

__all__ = [
    "AlphaBetaEngine",
    "EngineConfig",
    "Evaluator",
    "IEngine",
    "INFINITY",
    "SearchLimits",
    "SearchResult",
    "WINNING_VALUE",
    "choose_depth",
    "sense_of",
    "spread",
]
