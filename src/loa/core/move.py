"""Move value object ("b1-b3" notation)."""

from __future__ import annotations

from dataclasses import dataclass

from loa.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True, order=True)
class Move:
    """Immutable value object representing a single piece movement."""

    from_sq: Square
    to_sq: Square

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``"b1-b3"`` into a move. Raises ``ValueError`` when malformed."""
        parts = text.strip().split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(parse_square(parts[0]), parse_square(parts[1]))
