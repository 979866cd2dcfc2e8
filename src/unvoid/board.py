"""The Game board holds the pieces. It knows where they stand, not how they move (see moves.py)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.shared_types import Color, PieceKind
from src.unvoid.pieces import Piece
from src.unvoid.square import Square

# Back rank layout, counted from the owner's corner: product owner, developer, designer
STARTING_LINE_UP: tuple[PieceKind, ...] = (
    PieceKind.PRODUCT_OWNER,
    PieceKind.DEVELOPER,
    PieceKind.DESIGNER,
)


@dataclass
class Board:
    width: int
    height: int
    # only occupied squares are stored
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def empty(cls, width: int, height: int) -> Self:
        return cls(width, height)

    @classmethod
    def starting_position(cls, width: int, height: int) -> Self:
        """
        White starts in the bottom-left corner: A1, B1, C1.
        Black mirrors that in the top-right corner, reading leftwards from the last file.

        NOTE: Assumes a width of at least 3.
        """
        board = cls.empty(width, height)
        top_rank = height - 1
        for offset, kind in enumerate(STARTING_LINE_UP):
            board.place_piece(Piece(kind, Color.WHITE), Square(offset, 0))
            board.place_piece(
                Piece(kind, Color.BLACK), Square(width - 1 - offset, top_rank)
            )
        return board

    def in_bounds(self, square: Square) -> bool:
        return square.is_within_bounds(self.width, self.height)

    def piece_at(self, square: Square) -> Optional[Piece]:
        """Nothing found off the board either: out of bounds is simply 'empty'"""
        return self.position.get(square)

    def is_occupied(self, square: Square) -> bool:
        return square in self.position

    def place_piece(self, piece: Piece, square: Square) -> None:
        if not self.in_bounds(square):
            raise ValueError(
                f"Cannot place {piece} on {square!r}: outside of the {self.width}x{self.height} board."
            )
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Returns what was standing there (if anything)"""
        return self.position.pop(square, None)

    def occupied_squares(self) -> list[Square]:
        return list(self.position.keys())

    def locate_color(self, color: Color) -> list[Square]:
        return [square for square, piece in self.position.items() if piece.color == color]

    def has_royal(self, color: Color) -> bool:
        """The game is over as soon as one side lost its product owner"""
        return any(
            piece.is_royal and piece.color == color for piece in self.position.values()
        )
