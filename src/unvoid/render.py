"""Text representation of the board, as shown in the shell"""

from typing import Iterable

from src.unvoid.board import Board
from src.unvoid.square import Square

EMPTY_CELL = "."
HIGHLIGHT_CELL = "*"


def render_board(board: Board, highlights: Iterable[Square] = ()) -> str:
    """
    File letters on top, then the ranks from the top of the board (Black's side) down to rank 1.

    Highlighted squares that are empty are shown with a '*'.
    """
    marked = set(highlights)
    lines = ["   " + "".join(f" {chr(ord('A') + x)}" for x in range(board.width))]
    for y in range(board.height - 1, -1, -1):
        cells: list[str] = []
        for x in range(board.width):
            square = Square(x, y)
            piece = board.piece_at(square)
            if piece is not None:
                cells.append(piece.symbol())
            elif square in marked:
                cells.append(HIGHLIGHT_CELL)
            else:
                cells.append(EMPTY_CELL)
        lines.append(f"{y + 1:2d} " + "".join(f" {cell}" for cell in cells))
    return "\n".join(lines)
