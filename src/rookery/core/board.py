"""Board - the capability interface shared by every board representation.

Concrete storage strategies live in :mod:`rookery.core.mailbox` (one slot per
square, full game state) and :mod:`rookery.core.bitboard` (one 64-bit mask
per colored piece kind, placement and side to move only). Move generation is
written once, against this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from rookery.core.enums import Color
from rookery.core.move import Move
from rookery.core.move_generator import MoveGenerator
from rookery.core.notation.fen import STARTING_FEN, FenRecord, parse_fen
from rookery.core.piece import Piece
from rookery.core.render import render_board
from rookery.core.types import Square

_B = TypeVar("_B", bound="Board")


class Board(ABC):
    """Abstract 64-square board.

    Subclasses keep the side to move in a ``side_to_move`` attribute and
    implement placement, lookup, move application and the FEN codec.
    """

    __slots__ = ()

    side_to_move: Color

    # -- Construction -------------------------------------------------------

    @classmethod
    @abstractmethod
    def blank(cls: type[_B]) -> _B:
        """Empty board in the default state, white to move."""

    @classmethod
    def from_fen(cls: type[_B], fen: str) -> _B:
        """Parse *fen* into a fresh board.

        Raises:
            FenError: if any field is rejected; nothing is built in that case.
        """
        record = parse_fen(fen)
        board = cls.blank()
        board._load(record)
        return board

    @classmethod
    def initial(cls: type[_B]) -> _B:
        """Standard starting position."""
        return cls.from_fen(STARTING_FEN)

    @abstractmethod
    def _load(self, record: FenRecord) -> None:
        """Copy the fields this representation tracks from *record*."""

    @abstractmethod
    def to_fen(self) -> str: ...

    @abstractmethod
    def copy(self: _B) -> _B: ...

    # -- Element access -----------------------------------------------------

    @abstractmethod
    def piece_at(self, sq: Square) -> Piece | None: ...

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def is_empty(self, sq: Square) -> bool:
        return self.piece_at(sq) is None

    @property
    def white_to_move(self) -> bool:
        return self.side_to_move == Color.WHITE

    def occupied_squares(self) -> list[Square]:
        """All occupied squares in ascending order."""
        return [sq for sq in range(64) if self.piece_at(sq) is not None]

    # -- Mutation -----------------------------------------------------------

    @abstractmethod
    def clear(self, sq: Square) -> None: ...

    @abstractmethod
    def place(self, piece: Piece, sq: Square) -> None:
        """Put *piece* on *sq*, replacing whatever was there."""

    @abstractmethod
    def apply(self, move: Move) -> None:
        """Play *move* without any legality check."""

    # -- Move generation ----------------------------------------------------

    def generate_moves(self) -> list[Move]:
        """Pseudo-legal moves for the side to move."""
        return MoveGenerator(self).generate_moves()

    # -- Dunder helpers -----------------------------------------------------

    def __str__(self) -> str:
        return render_board(self.piece_at)

    def __repr__(self) -> str:
        return f"{type(self).__name__}.from_fen({self.to_fen()!r})"
