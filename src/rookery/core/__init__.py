"""Core domain layer — board state and pseudo-legal move generation.

Quick start::

    from rookery.core import MailboxBoard, generate_moves

    board = MailboxBoard.initial()
    for move in generate_moves(board):
        print(move)
"""

from rookery.core.bitboard import BitBoard
from rookery.core.board import Board
from rookery.core.enums import CastlingRights, Color, PieceType
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
from rookery.core.mailbox import MailboxBoard
from rookery.core.move import Move
from rookery.core.move_generator import MoveGenerator, generate_moves, piece_targets
from rookery.core.notation import STARTING_FEN, FenRecord, parse_fen
from rookery.core.piece import Piece
from rookery.core.render import render_board
from rookery.core.types import (
    Square,
    file_of,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
    to_square,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "offset_square",
    "parse_square",
    "rank_of",
    "square_name",
    "to_square",
    # Domain objects
    "BitBoard",
    "Board",
    "MailboxBoard",
    "Move",
    "MoveGenerator",
    "Piece",
    "generate_moves",
    "piece_targets",
    "render_board",
    # Notation
    "STARTING_FEN",
    "FenRecord",
    "parse_fen",
    # Errors
    "FenError",
    "FieldCountError",
    "PlacementError",
    "PieceCharacterError",
    "SideToMoveError",
    "CastlingCharacterError",
    "EnPassantSquareError",
    "MoveCounterError",
]
