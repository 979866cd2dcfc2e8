"""Unit tests for /src/unvoid/board.py"""

from typing import Callable

import pytest

from src.core.shared_types import Color, PieceKind
from src.unvoid.board import Board
from src.unvoid.pieces import Piece
from src.unvoid.square import Square


# -- CREATION LOGIC ---
@pytest.mark.parametrize("width, height", [(6, 6), (8, 8), (12, 7), (9, 12)])
def test_starting_position(width: int, height: int) -> None:
    """White in the bottom-left corner, Black mirrored in the top-right one. Three pieces each, nothing else."""
    board = Board.starting_position(width, height)
    top = height - 1

    assert board.piece_at(Square(0, 0)) == Piece(PieceKind.PRODUCT_OWNER, Color.WHITE)
    assert board.piece_at(Square(1, 0)) == Piece(PieceKind.DEVELOPER, Color.WHITE)
    assert board.piece_at(Square(2, 0)) == Piece(PieceKind.DESIGNER, Color.WHITE)

    assert board.piece_at(Square(width - 1, top)) == Piece(
        PieceKind.PRODUCT_OWNER, Color.BLACK
    )
    assert board.piece_at(Square(width - 2, top)) == Piece(
        PieceKind.DEVELOPER, Color.BLACK
    )
    assert board.piece_at(Square(width - 3, top)) == Piece(
        PieceKind.DESIGNER, Color.BLACK
    )
    assert len(board.occupied_squares()) == 6


def test_starting_position_by_name() -> None:
    """The usual 8x8 set-up: A1 B1 C1 for White and H8 G8 F8 for Black"""
    board = Board.starting_position(8, 8)
    assert board.piece_at(Square.from_name("B1")) == Piece(
        PieceKind.DEVELOPER, Color.WHITE
    )
    assert board.piece_at(Square.from_name("F8")) == Piece(
        PieceKind.DESIGNER, Color.BLACK
    )


def test_empty_board() -> None:
    board = Board.empty(6, 6)
    assert board.occupied_squares() == []
    assert all(
        board.piece_at(Square(x, y)) is None for x in range(6) for y in range(6)
    )


# -- LOOK-UPS ---
@pytest.mark.parametrize(
    "square", [Square(-1, 0), Square(0, -1), Square(8, 0), Square(0, 8), Square(40, 40)]
)
def test_piece_at_out_of_bounds_is_empty(square: Square) -> None:
    """Never raises: off the board there simply is nothing"""
    board = Board.starting_position(8, 8)
    assert board.piece_at(square) is None


def test_locate_color(board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces(
        (PieceKind.DEVELOPER, Color.WHITE, "D4"),
        (PieceKind.DESIGNER, Color.WHITE, "A2"),
        (PieceKind.DESIGNER, Color.BLACK, "H7"),
    )
    assert set(board.locate_color(Color.WHITE)) == {
        Square.from_name("D4"),
        Square.from_name("A2"),
    }
    assert board.locate_color(Color.BLACK) == [Square.from_name("H7")]


@pytest.mark.parametrize("color", [Color.WHITE, Color.BLACK])
def test_has_royal(color: Color, board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces((PieceKind.PRODUCT_OWNER, color, "E5"))
    assert board.has_royal(color)
    assert not board.has_royal(color.opponent)


def test_has_royal_ignores_other_pieces(board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces(
        (PieceKind.DEVELOPER, Color.WHITE, "D4"),
        (PieceKind.DESIGNER, Color.WHITE, "A2"),
    )
    assert not board.has_royal(Color.WHITE)


# -- MUTATIONS ---
def test_place_and_remove_piece() -> None:
    board = Board.empty(8, 8)
    piece = Piece(PieceKind.DESIGNER, Color.BLACK)
    square = Square(3, 3)

    board.place_piece(piece, square)
    assert board.piece_at(square) == piece
    assert board.is_occupied(square)

    removed = board.remove_piece(square)
    assert removed == piece
    assert board.piece_at(square) is None
    assert not board.is_occupied(square)


def test_remove_from_empty_square_returns_none() -> None:
    board = Board.empty(8, 8)
    assert board.remove_piece(Square(3, 3)) is None


def test_place_piece_off_the_board_raises() -> None:
    board = Board.empty(6, 6)
    with pytest.raises(ValueError):
        board.place_piece(Piece(PieceKind.DESIGNER, Color.BLACK), Square(6, 0))
