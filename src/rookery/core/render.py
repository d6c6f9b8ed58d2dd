"""Fixed-width text diagram of a board, for debugging and logs."""

from __future__ import annotations

from collections.abc import Callable

from rookery.core.piece import Piece
from rookery.core.types import FILE_NAMES, Square, make_square

_BORDER = "   " + "-" * 17
_FILES = "    " + " ".join(FILE_NAMES)


def render_board(piece_at: Callable[[Square], Piece | None]) -> str:
    """Render ranks 8 to 1 top to bottom, two characters per square.

    Example (starting position, truncated)::

           -----------------
        8 | r n b q k b n r |
        ...
        1 | R N B Q K B N R |
           -----------------
            a b c d e f g h
    """
    lines = [_BORDER]
    for rank in range(7, -1, -1):
        cells = []
        for file in range(8):
            piece = piece_at(make_square(file, rank))
            cells.append(f"{piece} " if piece is not None else "  ")
        lines.append(f"{rank + 1} | {''.join(cells)}|")
    lines.append(_BORDER)
    lines.append(_FILES)
    return "\n".join(lines)
