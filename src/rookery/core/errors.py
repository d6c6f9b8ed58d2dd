"""FEN parsing errors.

Every error derives from :class:`ValueError`, so callers that only care
whether a record parsed can keep catching that.
"""

from __future__ import annotations


class FenError(ValueError):
    """A FEN record could not be parsed."""

    def __init__(self, message: str, fen: str) -> None:
        super().__init__(f"{message}: {fen!r}")
        self.fen = fen


class FieldCountError(FenError):
    """The record does not have 4–6 space-separated fields."""


class PlacementError(FenError):
    """The placement field has the wrong number of ranks or squares."""


class PieceCharacterError(FenError):
    """An unknown letter appears in the placement field."""


class SideToMoveError(FenError):
    """The side-to-move field is neither ``w`` nor ``b``."""


class CastlingCharacterError(FenError):
    """The castling field holds something other than ``-`` or ``KQkq`` letters."""


class EnPassantSquareError(FenError):
    """The en-passant field is neither ``-`` nor a square name."""


class MoveCounterError(FenError):
    """The half-move clock or full-move counter is not a non-negative integer."""
