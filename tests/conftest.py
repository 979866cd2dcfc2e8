"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.shared_types import Color, PieceKind
from src.unvoid.board import Board
from src.unvoid.pieces import Piece
from src.unvoid.square import Square

PiecePlacement = tuple[PieceKind, Color, str]


@pytest.fixture
def board_with_pieces() -> Callable[..., Board]:
    """Call the inner function with (kind, color, square name) triplets to place on an otherwise empty board"""

    def _create_board(
        *placements: PiecePlacement, width: int = 8, height: int = 8
    ) -> Board:
        board = Board.empty(width, height)
        for kind, color, square_name in placements:
            board.place_piece(Piece(kind, color), Square.from_name(square_name))
        return board

    return _create_board
