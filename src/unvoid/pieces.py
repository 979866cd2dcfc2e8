"""Defines the pieces: an office (kind) and the side it plays for"""

from dataclasses import dataclass

from src.core.shared_types import Color, PieceKind

# White / Black symbols used when printing the board.
PIECE_SYMBOLS: dict[PieceKind, tuple[str, str]] = {
    PieceKind.PRODUCT_OWNER: ("♔", "♚"),
    PieceKind.DEVELOPER: ("♖", "♜"),
    PieceKind.DESIGNER: ("♘", "♞"),
}


@dataclass(frozen=True)
class Piece:
    kind: PieceKind
    color: Color

    @property
    def is_royal(self) -> bool:
        # NOTE: Capturing the product owner ends the game
        return self.kind == PieceKind.PRODUCT_OWNER

    def symbol(self) -> str:
        white_symbol, black_symbol = PIECE_SYMBOLS[self.kind]
        return white_symbol if self.color == Color.WHITE else black_symbol

    def __str__(self) -> str:
        return f"{self.color} {self.kind}"
