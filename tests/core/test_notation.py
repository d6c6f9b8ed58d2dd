"""Tests for FEN parsing and serialisation."""

import pytest

from rookery.core.bitboard import BitBoard
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
from rookery.core.notation import STARTING_FEN, parse_fen
from rookery.core.piece import Piece
from rookery.core.types import E1, E3, E8

KIWIPETE = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"


class TestFenParsing:
    def test_starting_side(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert record.side_to_move == Color.WHITE

    def test_starting_castling(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert record.castling == CastlingRights.ALL

    def test_starting_clocks(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert record.en_passant is None
        assert record.halfmove_clock == 0
        assert record.fullmove_number == 1

    def test_starting_kings(self) -> None:
        record = parse_fen(STARTING_FEN)
        assert record.placement[E1] == Piece(Color.WHITE, PieceType.KING)
        assert record.placement[E8] == Piece(Color.BLACK, PieceType.KING)
        assert len(record.placement) == 64

    def test_en_passant_square(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert parse_fen(fen).en_passant == E3

    def test_dash_clears_all_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        assert parse_fen(fen).castling == CastlingRights.NONE

    def test_partial_castling(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w Kq - 0 1"
        assert parse_fen(fen).castling == (
            CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE
        )

    def test_counters_optional(self) -> None:
        record = parse_fen("8/8/8/8/8/8/8/8 b - -")
        assert record.side_to_move == Color.BLACK
        assert record.halfmove_clock == 0
        assert record.fullmove_number == 1

    def test_only_halfmove_given(self) -> None:
        record = parse_fen("8/8/8/8/8/8/8/8 w - - 7")
        assert record.halfmove_clock == 7
        assert record.fullmove_number == 1

    def test_multi_digit_counters(self) -> None:
        record = parse_fen("8/8/8/8/8/8/8/8 w - - 42 117")
        assert record.halfmove_clock == 42
        assert record.fullmove_number == 117


class TestFenErrors:
    @pytest.mark.parametrize(
        ("fen", "error"),
        [
            ("", FieldCountError),
            ("8/8/8/8/8/8/8/8 w -", FieldCountError),
            ("8/8/8/8/8/8/8/8 w - - 0 1 extra", FieldCountError),
            ("8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("9/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("0/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("ppppppppp/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("7/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX w KQkq - 0 1", PieceCharacterError),
            ("8/8/8/8/8/8/8/8 x - - 0 1", SideToMoveError),
            ("8/8/8/8/8/8/8/8 W - - 0 1", SideToMoveError),
            ("8/8/8/8/8/8/8/8 w A - 0 1", CastlingCharacterError),
            ("8/8/8/8/8/8/8/8 w KK - 0 1", CastlingCharacterError),
            ("8/8/8/8/8/8/8/8 w K- - 0 1", CastlingCharacterError),
            ("8/8/8/8/8/8/8/8 w - z9 0 1", EnPassantSquareError),
            ("8/8/8/8/8/8/8/8 w - e4 0 1", EnPassantSquareError),
            ("8/8/8/8/8/8/8/8 w - - -1 1", MoveCounterError),
            ("8/8/8/8/8/8/8/8 w - - 0 x", MoveCounterError),
            ("8/8/8/8/8/8/8/8 w - - +3 1", MoveCounterError),
            ("²/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
            ("٨/8/8/8/8/8/8/8 w - - 0 1", PlacementError),
        ],
    )
    def test_rejected(self, fen: str, error: type[FenError]) -> None:
        with pytest.raises(error):
            parse_fen(fen)

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError, match="side-to-move"):
            parse_fen("8/8/8/8/8/8/8/8 x - - 0 1")

    def test_error_keeps_source_text(self) -> None:
        fen = "8/8/8/8/8/8/8/8 w - - 0 x"
        with pytest.raises(MoveCounterError) as info:
            parse_fen(fen)
        assert info.value.fen == fen

    def test_piece_error_chains_cause(self) -> None:
        with pytest.raises(PieceCharacterError) as info:
            parse_fen("7x/8/8/8/8/8/8/8 w - - 0 1")
        assert isinstance(info.value.__cause__, ValueError)

    def test_board_from_fen_raises(self, board_cls: type) -> None:
        with pytest.raises(SideToMoveError):
            board_cls.from_fen("8/8/8/8/8/8/8/8 x - - 0 1")


class TestFenSerialisation:
    def test_roundtrip_starting(self) -> None:
        assert MailboxBoard.from_fen(STARTING_FEN).to_fen() == STARTING_FEN

    @pytest.mark.parametrize(
        "fen",
        [
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            KIWIPETE,
            "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 b - - 0 1",
            "r1bqkbnr/pppp1ppp/2n5/4p3/3P4/5N2/PPP1PPPP/RNBQKB1R b KQ - 2 3",
            "4k3/8/8/8/8/8/8/4K3 w - - 37 112",
        ],
    )
    def test_roundtrip(self, fen: str) -> None:
        assert MailboxBoard.from_fen(fen).to_fen() == fen

    def test_missing_counters_are_filled_in(self) -> None:
        board = MailboxBoard.from_fen("8/8/8/8/8/8/8/8 w Qk -")
        assert board.to_fen() == "8/8/8/8/8/8/8/8 w Qk - 0 1"

    def test_bitboard_keeps_placement_and_side_only(self) -> None:
        board = BitBoard.from_fen(KIWIPETE.replace(" w ", " b "))
        assert board.to_fen() == (
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R b - -"
        )

    def test_bitboard_fen_reparses(self) -> None:
        board = BitBoard.initial()
        assert BitBoard.from_fen(board.to_fen()) == board


class TestOccupancyCount:
    @pytest.mark.parametrize(
        "fen",
        [
            STARTING_FEN,
            KIWIPETE,
            "8/8/4k3/8/8/4K3/8/8 w - - 0 1",
            "8/8/8/8/8/8/8/8 w - - 0 1",
            "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
        ],
    )
    def test_occupied_squares_match_piece_letters(
        self, board_cls: type, fen: str
    ) -> None:
        placement = fen.split()[0]
        expected = sum(1 for ch in placement if ch.isalpha())
        assert len(board_cls.from_fen(fen).occupied_squares()) == expected
