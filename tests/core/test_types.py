"""Tests for square helpers, Piece and Move value objects."""

import pytest

from rookery.core.enums import Color, PieceType
from rookery.core.move import Move
from rookery.core.piece import Piece
from rookery.core.types import (
    A1, A8, E2, E4, H1, H8,
    file_of,
    make_square,
    offset_square,
    parse_square,
    rank_of,
    square_name,
    to_square,
)


class TestSquares:
    def test_corners(self) -> None:
        assert A1 == 0
        assert H8 == 63
        assert square_name(A8) == "a8"
        assert square_name(H1) == "h1"

    def test_rank_and_file(self) -> None:
        assert rank_of(E4) == 3
        assert file_of(E4) == 4
        assert make_square(4, 3) == E4

    def test_parse_square(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("h8") == H8

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "E4", "e44"])
    def test_parse_square_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square"):
            parse_square(name)

    def test_to_square_bounds(self) -> None:
        assert to_square(0) == 0
        assert to_square(63) == 63
        assert to_square(-1) is None
        assert to_square(64) is None

    def test_offset_square_inside(self) -> None:
        assert offset_square(E2, 0, 2) == E4
        assert offset_square(E4, -4, -3) == A1

    def test_offset_square_does_not_wrap_files(self) -> None:
        assert offset_square(H1, 1, 0) is None
        assert offset_square(A1, -1, 1) is None

    def test_offset_square_off_rank(self) -> None:
        assert offset_square(A8, 0, 1) is None
        assert offset_square(A1, 0, -1) is None


class TestPiece:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_roundtrip(self) -> None:
        for ch in "PNBRQKpnbrqk":
            assert str(Piece.from_char(ch)) == ch

    def test_invalid_char_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_is_white(self) -> None:
        assert Piece(Color.WHITE, PieceType.PAWN).is_white
        assert not Piece(Color.BLACK, PieceType.PAWN).is_white

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        assert Move(E2, E4).uci == "e2e4"

    def test_from_uci(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)

    @pytest.mark.parametrize("text", ["e2", "e2e4q", "e2z4"])
    def test_from_uci_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.from_uci(text)
