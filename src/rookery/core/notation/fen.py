"""FEN parsing and field serialisation.

Parsing produces a :class:`FenRecord`, a complete immutable snapshot of the
six fields. Boards are only built from a record once the whole text has been
accepted, so a rejected FEN never leaves a half-loaded board behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from rookery.core.enums import CastlingRights, Color
from rookery.core.errors import (
    CastlingCharacterError,
    EnPassantSquareError,
    FenError,
    FieldCountError,
    MoveCounterError,
    PieceCharacterError,
    PlacementError,
    SideToMoveError,
)
from rookery.core.piece import Piece
from rookery.core.types import Square, make_square, parse_square, rank_of, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN: Final = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_LETTERS: Final[dict[str, CastlingRights]] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
_SIDE_LETTERS: Final[dict[str, Color]] = {"w": Color.WHITE, "b": Color.BLACK}

# Ranks (0-based) an en-passant target can sit on: 3 and 6. Targets on any
# other rank are rejected even though the square name itself is valid.
_EN_PASSANT_RANKS: Final = (2, 5)
_EMPTY_RUN_DIGITS: Final = "12345678"


@dataclass(frozen=True, slots=True)
class FenRecord:
    """Every field of a parsed FEN record."""

    placement: tuple[Piece | None, ...]
    side_to_move: Color
    castling: CastlingRights
    en_passant: Square | None
    halfmove_clock: int
    fullmove_number: int


def parse_fen(fen: str) -> FenRecord:
    """Parse a FEN string (4–6 fields) into a :class:`FenRecord`.

    Raises:
        FenError: one of its subclasses, naming the field that was rejected.
    """
    try:
        return _parse(fen)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN: %s", exc)
        raise


def _parse(fen: str) -> FenRecord:
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise FieldCountError(f"Invalid FEN (need 4-6 fields, got {len(parts)})", fen)

    placement_part, side_part, castling_part, ep_part = parts[:4]

    placement = _parse_placement(placement_part, fen)

    try:
        side = _SIDE_LETTERS[side_part]
    except KeyError:
        raise SideToMoveError(
            f"Invalid FEN side-to-move field {side_part!r}", fen
        ) from None

    castling = _parse_castling(castling_part, fen)

    ep: Square | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError as exc:
            raise EnPassantSquareError(
                f"Invalid FEN en-passant square {ep_part!r}", fen
            ) from exc
        if rank_of(ep) not in _EN_PASSANT_RANKS:
            raise EnPassantSquareError(
                f"Invalid FEN en-passant rank {ep_part!r}", fen
            )

    halfmove = _parse_counter(parts[4], "halfmove clock", fen) if len(parts) > 4 else 0
    fullmove = _parse_counter(parts[5], "fullmove number", fen) if len(parts) > 5 else 1

    return FenRecord(placement, side, castling, ep, halfmove, fullmove)


def _parse_placement(text: str, fen: str) -> tuple[Piece | None, ...]:
    ranks = text.split("/")
    if len(ranks) != 8:
        raise PlacementError("Invalid FEN board (must contain 8 ranks)", fen)

    squares: list[Piece | None] = [None] * 64
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                if ch not in _EMPTY_RUN_DIGITS:
                    raise PlacementError(f"Invalid FEN digit {ch!r}", fen)
                file += int(ch)
            else:
                try:
                    piece = Piece.from_char(ch)
                except ValueError as exc:
                    raise PieceCharacterError(
                        f"Invalid FEN piece character {ch!r}", fen
                    ) from exc
                if file >= 8:
                    raise PlacementError("Invalid FEN rank width", fen)
                squares[make_square(file, rank)] = piece
                file += 1
            if file > 8:
                raise PlacementError("Invalid FEN rank width", fen)
        if file != 8:
            raise PlacementError("Invalid FEN rank width", fen)
    return tuple(squares)


def _parse_castling(text: str, fen: str) -> CastlingRights:
    # Rights start cleared; each letter present switches one on.
    castling = CastlingRights.NONE
    if text == "-":
        return castling
    for ch in text:
        right = _CASTLING_LETTERS.get(ch)
        if right is None or castling & right:
            raise CastlingCharacterError(f"Invalid FEN castling field {text!r}", fen)
        castling |= right
    return castling


def _parse_counter(text: str, name: str, fen: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise MoveCounterError(f"Invalid FEN {name} {text!r}", fen)
    return int(text)


# -- Serialisation helpers ---------------------------------------------------


def placement_field(piece_at: Callable[[Square], Piece | None]) -> str:
    """Placement field for any occupancy lookup, rank 8 first."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = piece_at(make_square(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def castling_field(castling: CastlingRights) -> str:
    text = "".join(ch for ch, right in _CASTLING_LETTERS.items() if castling & right)
    return text or "-"


def en_passant_field(en_passant: Square | None) -> str:
    return square_name(en_passant) if en_passant is not None else "-"
