"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the destination set for each piece kind.

Whether the piece is allowed to move at all (whose turn it is etc.) is checked later by Game
"""

from dataclasses import dataclass, field
from typing import Callable, Protocol, Self

from src.core.config import SLIDER_RANGE
from src.core.shared_types import Color, PieceKind
from src.unvoid.pieces import Piece
from src.unvoid.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece_at(self, square: Square) -> Piece | None: ...
    def in_bounds(self, square: Square) -> bool: ...


Vector = tuple[int, int]

STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
ALL_DIRECTIONS: list[Vector] = STRAIGHTS + DIAGONALS
LEAPER_DELTAS: list[Vector] = [
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
]


@dataclass
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_names(cls, from_name: str, to_name: str) -> Self:
        """ex. Move.from_names('B1', 'B4')"""
        return cls(Square.from_name(from_name), Square.from_name(to_name))

    def __str__(self) -> str:
        return f"{self.from_square.to_name()}-{self.to_square.to_name()}"


@dataclass
class MoveOutcome:
    """What happened on the board after a move got executed. Path captures come before the capture on the target square."""

    piece: Piece
    from_square: Square
    to_square: Square
    captured: list[Piece] = field(default_factory=list)

    @property
    def is_capture(self) -> bool:
        return bool(self.captured)

    @property
    def captured_royal(self) -> bool:
        return any(piece.is_royal for piece in self.captured)


# --- MOVEMENT RULES ---
def sweeping_move(
    square: Square, color: Color, board: Board, directions: list[Vector], max_steps: int
) -> set[Square]:
    """
    Raycasting with a twist
    -----

    ---
    Walk along each direction for at most `max_steps` squares.
    * Running into your own piece blocks the rest of the ray (that square included).
    * Running into an opponent's piece does NOT block: you jump over it (it gets captured on execution),
      but you can't land on it either.
    * Empty squares are always fine.
    """
    destinations: set[Square] = set()
    for dx, dy in directions:
        for step in range(1, max_steps + 1):
            target_square = square.offset(dx * step, dy * step)
            if not board.in_bounds(target_square):
                break

            piece_found = board.piece_at(target_square)
            if piece_found is None:
                destinations.add(target_square)
                continue

            if piece_found.color == color:
                break
            # opponent: keep on walking, the piece will be swept away by the move
    return destinations


def single_step_move(
    square: Square, color: Color, board: Board, deltas: list[Vector]
) -> set[Square]:
    """Jump straight to square + delta. Intervening squares are irrelevant, only your own pieces block the target."""
    destinations: set[Square] = set()
    for dx, dy in deltas:
        target_square = square.offset(dx, dy)
        if not board.in_bounds(target_square):
            continue

        piece_found = board.piece_at(target_square)
        if piece_found is None or piece_found.color != color:
            destinations.add(target_square)
    return destinations


def developer_destinations(square: Square, color: Color, board: Board) -> set[Square]:
    """Developer: up to 3 squares straight or diagonally, sweeping away opponents on the way"""
    return sweeping_move(square, color, board, ALL_DIRECTIONS, SLIDER_RANGE)


def designer_destinations(square: Square, color: Color, board: Board) -> set[Square]:
    """Designer jumps like a knight: |dx| + |dy| = 3"""
    return single_step_move(square, color, board, LEAPER_DELTAS)


def product_owner_destinations(square: Square, color: Color, board: Board) -> set[Square]:
    """The product owner can move by a single square in any direction"""
    return single_step_move(square, color, board, ALL_DIRECTIONS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
DestinationsFn = Callable[[Square, Color, Board], set[Square]]
MOVEMENT_RULES: dict[PieceKind, DestinationsFn] = {
    PieceKind.DEVELOPER: developer_destinations,
    PieceKind.DESIGNER: designer_destinations,
    PieceKind.PRODUCT_OWNER: product_owner_destinations,
}


def legal_destinations(
    kind: PieceKind, color: Color, from_square: Square, board: Board
) -> set[Square]:
    """Pure function: never touches the board, so can be called as often as you like."""
    movement_rule = MOVEMENT_RULES[kind]
    return movement_rule(from_square, color, board)


# --- PATH HELPERS ---
def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_aligned(from_square: Square, to_square: Square) -> bool:
    """On the same file, rank or diagonal"""
    dx = to_square.x - from_square.x
    dy = to_square.y - from_square.y
    return dx == 0 or dy == 0 or abs(dx) == abs(dy)


def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between the two squares specified, in the order you would pass them.

    Needed for the developer's sweep: the Game removes the opponent pieces standing on those.
    """
    if not is_aligned(from_square, to_square):
        raise ValueError(
            f"squares_between requires both squares to lie on a single line. \n from: {from_square}\n to:{to_square}"
        )

    dx = _sign(to_square.x - from_square.x)
    dy = _sign(to_square.y - from_square.y)
    squares_found: list[Square] = []
    square = from_square.offset(dx, dy)
    while square != to_square:
        squares_found.append(square)
        square = square.offset(dx, dy)
    return squares_found
