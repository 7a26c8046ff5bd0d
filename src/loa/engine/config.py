"""Engine configuration with environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_DEPTH = "LOA_SEARCH_DEPTH"
_ENV_RANDOM = "LOA_RANDOM_HEURISTIC"
_ENV_SEED = "LOA_RANDOM_SEED"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """Tunable engine behaviour.

    ``randomize_magnitude`` restores the legacy heuristic whose non-winning
    scores have a random size. It makes results depend on the seed and can
    change which lines alpha-beta prunes, so it is off by default.
    """

    heuristic_magnitude: int = 1
    randomize_magnitude: bool = False
    seed: int | None = None
    fixed_depth: int | None = None

    def __post_init__(self) -> None:
        if self.heuristic_magnitude <= 0:
            raise ValueError("Heuristic magnitude must be >= 1")
        if self.fixed_depth is not None and self.fixed_depth <= 0:
            raise ValueError("Search depth must be >= 1")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineConfig:
        """Build a config from ``LOA_*`` environment variables."""
        env = os.environ if environ is None else environ

        fixed_depth = _parse_int(env, _ENV_DEPTH)
        seed = _parse_int(env, _ENV_SEED)

        raw_random = env.get(_ENV_RANDOM, "").strip().lower()
        if raw_random in _TRUE_VALUES:
            randomize = True
        elif raw_random in _FALSE_VALUES:
            randomize = False
        else:
            raise ValueError(f"{_ENV_RANDOM} must be a boolean, got {raw_random!r}")

        return cls(randomize_magnitude=randomize, seed=seed, fixed_depth=fixed_depth)


def _parse_int(env: Mapping[str, str], name: str) -> int | None:
    raw = env.get(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
