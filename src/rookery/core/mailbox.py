"""MailboxBoard - one slot per square plus the full game state."""

from __future__ import annotations

import logging

from rookery.core.board import Board
from rookery.core.enums import CastlingRights, Color, PieceType
from rookery.core.move import Move
from rookery.core.notation.fen import (
    FenRecord,
    castling_field,
    en_passant_field,
    placement_field,
)
from rookery.core.piece import Piece
from rookery.core.types import Square, file_of, make_square, rank_of

_LOGGER = logging.getLogger(__name__)


class MailboxBoard(Board):
    """Mutable 64-slot board: placement, side to move, castling, en passant, clocks.

    Every slot holds a :class:`Piece` or ``None`` for an empty square.
    """

    __slots__ = (
        "_squares",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self._squares: list[Piece | None] = [None] * 64
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    @classmethod
    def blank(cls) -> MailboxBoard:
        return cls()

    def _load(self, record: FenRecord) -> None:
        self._squares = list(record.placement)
        self.side_to_move = record.side_to_move
        self.castling = record.castling
        self.en_passant = record.en_passant
        self.halfmove_clock = record.halfmove_clock
        self.fullmove_number = record.fullmove_number

    def to_fen(self) -> str:
        return " ".join(
            (
                placement_field(self.piece_at),
                self.side_to_move.fen_char,
                castling_field(self.castling),
                en_passant_field(self.en_passant),
                str(self.halfmove_clock),
                str(self.fullmove_number),
            )
        )

    def copy(self) -> MailboxBoard:
        b = MailboxBoard(
            self.side_to_move,
            self.castling,
            self.en_passant,
            self.halfmove_clock,
            self.fullmove_number,
        )
        b._squares = self._squares.copy()
        return b

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    # -- Mutation -----------------------------------------------------------

    def clear(self, sq: Square) -> None:
        self._squares[sq] = None

    def place(self, piece: Piece, sq: Square) -> None:
        self._squares[sq] = piece

    def apply(self, move: Move) -> None:
        """Play *move*, updating clocks, en-passant target and turn.

        Castling rights are left as they are.
        """
        piece = self._squares[move.from_sq]
        if piece is None:
            _LOGGER.debug("Ignoring %s: origin square is empty", move)
            return

        # A null move (origin == destination) keeps the piece and is no capture.
        is_capture = move.to_sq != move.from_sq and self._squares[move.to_sq] is not None
        self._squares[move.from_sq] = None
        self._squares[move.to_sq] = piece

        is_pawn_move = piece.piece_type == PieceType.PAWN
        if is_pawn_move or is_capture:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        from_rank = rank_of(move.from_sq)
        to_rank = rank_of(move.to_sq)
        if is_pawn_move and abs(to_rank - from_rank) == 2:
            self.en_passant = make_square(file_of(move.from_sq), (from_rank + to_rank) // 2)
        else:
            self.en_passant = None

        self.side_to_move = self.side_to_move.opposite
        if self.side_to_move == Color.WHITE:
            self.fullmove_number += 1

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MailboxBoard):
            return NotImplemented
        return (
            self._squares == other._squares
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant == other.en_passant
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )
