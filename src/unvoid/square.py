"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from src.core.exceptions import ParseError

# No board comes anywhere near 1000 ranks
MAX_RANK_DIGITS = 3


@dataclass(frozen=True)
class Square:
    """0-based coordinates: x is the file (column), y the rank (row) counted from White's side."""

    x: int
    y: int

    @classmethod
    def from_name(cls, name: str) -> Square:
        """
        Square names: 'A1' -> (0, 0), 'C5' -> (2, 4)
        ---

        The letter (case-insensitive) denotes the file, the number the 1-based rank.
        NOTE: The board size is not known here. Checking the bounds is up to the caller.
        """
        cleaned = name.strip().upper()
        if len(cleaned) < 2:
            raise ParseError(f"Cannot interpret {name!r} as a square name.")

        file_char, rank_str = cleaned[0], cleaned[1:]
        if not ("A" <= file_char <= "Z"):
            raise ParseError(f"File of {name!r} must be a letter.")
        if not (rank_str.isascii() and rank_str.isdigit()):
            raise ParseError(f"Rank of {name!r} must be a number.")
        if len(rank_str) > MAX_RANK_DIGITS:
            raise ParseError(f"Rank of {name!r} is too large.")

        rank = int(rank_str)
        if rank < 1:
            raise ParseError(f"Rank of {name!r} must be at least 1.")
        return cls(ord(file_char) - ord("A"), rank - 1)

    def to_name(self) -> str:
        return f"{chr(self.x + ord('A'))}{self.y + 1}"

    def is_within_bounds(self, width: int, height: int) -> bool:
        return (0 <= self.x < width) and (0 <= self.y < height)

    def offset(self, dx: int, dy: int) -> Square:
        return Square(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return self.to_name()


def format_squares(squares: Iterable[Square]) -> list[str]:
    """Sorted (file first, then rank) list of square names, for display purposes"""
    return [square.to_name() for square in sorted(squares, key=lambda sq: (sq.x, sq.y))]
