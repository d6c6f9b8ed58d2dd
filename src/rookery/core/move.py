"""Move value object (plain from/to square pair)."""

from __future__ import annotations

from dataclasses import dataclass

from rookery.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable from/to pair.

    There is no promotion piece or special-move flag, so promotions and
    castling cannot be represented yet.
    """

    from_sq: Square
    to_sq: Square

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation, e.g. ``e2e4``."""
        return str(self)

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse a square pair such as ``e2e4``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move notation: {text!r}")
        return cls(parse_square(text[:2]), parse_square(text[2:]))
