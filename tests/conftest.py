"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from rookery.core.bitboard import BitBoard
from rookery.core.board import Board
from rookery.core.mailbox import MailboxBoard


@pytest.fixture(params=[MailboxBoard, BitBoard], ids=["mailbox", "bitboard"])
def board_cls(request: pytest.FixtureRequest) -> type[Board]:
    """Run a test once per board representation."""
    return request.param
