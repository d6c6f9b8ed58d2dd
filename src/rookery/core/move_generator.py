"""Pseudo-legal move generation.

Moves follow each piece's movement pattern only: nothing here checks whether
the mover's own king is left attacked. Castling, en-passant captures and
promotion variants are not generated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final, Protocol

from rookery.core.enums import Color, PieceType
from rookery.core.move import Move
from rookery.core.piece import Piece
from rookery.core.types import Square, make_square, offset_square, rank_of

if TYPE_CHECKING:
    from rookery.core.board import Board

_LOGGER = logging.getLogger(__name__)


class Occupancy(Protocol):
    """Read-only square lookup the movement rules need."""

    def piece_at(self, sq: Square) -> Piece | None: ...


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Pawn direction and double-step rank, per color.
_PAWN_FORWARD: Final = (1, -1)
_PAWN_START_RANK: Final = (1, 6)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves: list[Square] = []
        for df, dr in offsets:
            to_sq = offset_square(sq, df, dr)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = offset_square(sq, df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = offset_square(to_sq, df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


# -- Movement rules ----------------------------------------------------------


def pawn_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    """Forward pushes onto empty squares, then diagonal captures."""
    color_idx = int(piece.color)
    forward = _PAWN_FORWARD[color_idx]
    targets: list[Square] = []

    one_step = offset_square(sq, 0, forward)
    if one_step is not None and board.piece_at(one_step) is None:
        targets.append(one_step)
        if rank_of(sq) == _PAWN_START_RANK[color_idx]:
            two_step = offset_square(sq, 0, 2 * forward)
            if two_step is not None and board.piece_at(two_step) is None:
                targets.append(two_step)

    for df in (-1, 1):
        cap_sq = offset_square(sq, df, forward)
        if cap_sq is None:
            continue
        target = board.piece_at(cap_sq)
        if target is not None and target.color != piece.color:
            targets.append(cap_sq)
    return targets


def _leaper_targets(
    board: Occupancy, piece: Piece, candidates: tuple[Square, ...]
) -> list[Square]:
    targets: list[Square] = []
    for to_sq in candidates:
        target = board.piece_at(to_sq)
        if target is None or target.color != piece.color:
            targets.append(to_sq)
    return targets


def knight_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    return _leaper_targets(board, piece, _KNIGHT_TARGETS[sq])


def king_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    return _leaper_targets(board, piece, _KING_TARGETS[sq])


def sliding_targets(
    board: Occupancy,
    piece: Piece,
    rays: tuple[tuple[Square, ...], ...],
) -> list[Square]:
    """Walk each ray until the edge or the first occupied square.

    The blocker is included only when it belongs to the other side.
    """
    targets: list[Square] = []
    for ray in rays:
        for to_sq in ray:
            target = board.piece_at(to_sq)
            if target is None:
                targets.append(to_sq)
                continue
            if target.color != piece.color:
                targets.append(to_sq)
            break
    return targets


def rook_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    return sliding_targets(board, piece, _ROOK_RAYS[sq])


def bishop_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    return sliding_targets(board, piece, _BISHOP_RAYS[sq])


def queen_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    return rook_targets(board, piece, sq) + bishop_targets(board, piece, sq)


_RULES = {
    PieceType.PAWN: pawn_targets,
    PieceType.KNIGHT: knight_targets,
    PieceType.BISHOP: bishop_targets,
    PieceType.ROOK: rook_targets,
    PieceType.QUEEN: queen_targets,
    PieceType.KING: king_targets,
}


def piece_targets(board: Occupancy, piece: Piece, sq: Square) -> list[Square]:
    """Candidate destination squares for *piece* standing on *sq*."""
    return _RULES[piece.piece_type](board, piece, sq)


class MoveGenerator:
    """Generates pseudo-legal moves for any :class:`Board`.

    Squares are scanned rank 8 down to rank 1, file a to h; each piece's
    moves are emitted in the order its rule produced them.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def generate_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        board = self._board
        color: Color = board.side_to_move
        moves: list[Move] = []

        for rank in range(7, -1, -1):
            for file in range(8):
                sq = make_square(file, rank)
                piece = board.piece_at(sq)
                if piece is None or piece.color != color:
                    continue
                moves.extend(Move(sq, to_sq) for to_sq in piece_targets(board, piece, sq))

        _LOGGER.debug("Generated %d moves for %s", len(moves), color)
        return moves


def generate_moves(board: Board) -> list[Move]:
    """Pseudo-legal moves for the side to move on *board*."""
    return MoveGenerator(board).generate_moves()
