"""BitBoard - twelve 64-bit occupancy masks plus the side to move.

This representation is a placement snapshot. It keeps no castling rights,
en-passant target or clocks, and :meth:`BitBoard.apply` only relocates the
moving piece.
"""

from __future__ import annotations

import logging
from typing import Final

from rookery.core.board import Board
from rookery.core.enums import Color, PieceType
from rookery.core.move import Move
from rookery.core.notation.fen import FenRecord, placement_field
from rookery.core.piece import Piece
from rookery.core.types import Square

_LOGGER = logging.getLogger(__name__)

_PIECE_TYPE_COUNT: Final = 6
_COLOR_COUNT: Final = 2
_FULL_MASK: Final = (1 << 64) - 1

# Lookup order used by piece_at: kind first, then color.
_LOOKUP_ORDER: Final = tuple(
    (color, ptype) for ptype in PieceType for color in (Color.WHITE, Color.BLACK)
)


class BitBoard(Board):
    """Mutable board stored as one bitboard per colored piece kind.

    The masks are kept pairwise disjoint by :meth:`place`; lookups trust that
    and return the first mask that contains the square.
    """

    __slots__ = ("_masks", "side_to_move")

    def __init__(self, side_to_move: Color = Color.WHITE) -> None:
        # [color][piece_type-1] -> bitboard of occupied squares.
        self._masks: list[list[int]] = [
            [0] * _PIECE_TYPE_COUNT for _ in range(_COLOR_COUNT)
        ]
        self.side_to_move = side_to_move

    @staticmethod
    def _piece_type_index(piece_type: PieceType) -> int:
        return int(piece_type) - 1

    @staticmethod
    def _squares_from_bitboard(bitboard: int) -> list[Square]:
        squares: list[Square] = []
        while bitboard:
            lsb = bitboard & -bitboard
            squares.append(lsb.bit_length() - 1)
            bitboard ^= lsb
        return squares

    @classmethod
    def blank(cls) -> BitBoard:
        return cls()

    def _load(self, record: FenRecord) -> None:
        for sq, piece in enumerate(record.placement):
            if piece is not None:
                self.place(piece, sq)
        self.side_to_move = record.side_to_move

    def to_fen(self) -> str:
        """Placement and side to move; castling and en passant are always ``-``."""
        return f"{placement_field(self.piece_at)} {self.side_to_move.fen_char} - -"

    def copy(self) -> BitBoard:
        b = BitBoard(self.side_to_move)
        b._masks = [row.copy() for row in self._masks]
        return b

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        mask = 1 << sq
        for color, ptype in _LOOKUP_ORDER:
            if self._masks[int(color)][self._piece_type_index(ptype)] & mask:
                return Piece(color, ptype)
        return None

    def pieces_bitboard(self, color: Color, piece_type: PieceType) -> int:
        """Bitboard of squares occupied by *color*'s *piece_type*."""
        return self._masks[int(color)][self._piece_type_index(piece_type)]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        return self._squares_from_bitboard(self.pieces_bitboard(color, piece_type))

    def masks(self) -> tuple[int, ...]:
        """All twelve masks, white kinds first."""
        return tuple(mask for row in self._masks for mask in row)

    def occupancy(self) -> int:
        """Union of all masks."""
        occ = 0
        for mask in self.masks():
            occ |= mask
        return occ

    def occupied_squares(self) -> list[Square]:
        return self._squares_from_bitboard(self.occupancy())

    # -- Mutation -----------------------------------------------------------

    def clear(self, sq: Square) -> None:
        keep = ~(1 << sq) & _FULL_MASK
        for row in self._masks:
            for idx in range(_PIECE_TYPE_COUNT):
                row[idx] &= keep

    def place(self, piece: Piece, sq: Square) -> None:
        self.clear(sq)
        self._masks[int(piece.color)][self._piece_type_index(piece.piece_type)] |= 1 << sq

    def apply(self, move: Move) -> None:
        """Move the piece on the origin square; nothing else changes."""
        piece = self.piece_at(move.from_sq)
        if piece is None:
            _LOGGER.debug("Ignoring %s: origin square is empty", move)
            return
        self.clear(move.from_sq)
        self.place(piece, move.to_sq)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return self._masks == other._masks and self.side_to_move == other.side_to_move
