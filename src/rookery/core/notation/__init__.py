"""Notation package: FEN parsing and serialization."""

from rookery.core.notation.fen import (
    STARTING_FEN,
    FenRecord,
    castling_field,
    en_passant_field,
    parse_fen,
    placement_field,
)

__all__ = [
    "STARTING_FEN",
    "FenRecord",
    "parse_fen",
    "placement_field",
    "castling_field",
    "en_passant_field",
]
