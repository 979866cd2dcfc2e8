"""Requests and Response models"""

from typing import Optional, Self
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.config import DEFAULT_BOARD_SIZE, validate_board_size
from src.core.exceptions import InvalidRequestError, ParseError
from src.core.shared_types import Color, PieceKind, Status
from src.unvoid.game import Game
from src.unvoid.moves import MoveOutcome
from src.unvoid.pieces import Piece
from src.unvoid.square import Square

SquareName = str


def _validate_square_name(value: str) -> str:
    """Normalize to upper case ('b1' -> 'B1'). Board bounds are checked by the Game."""
    try:
        return Square.from_name(value).to_name()
    except ParseError as e:
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        ) from e


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    width: int = DEFAULT_BOARD_SIZE
    height: int = DEFAULT_BOARD_SIZE

    @field_validator("width", "height")
    @classmethod
    def validate_size(cls, value: int) -> int:
        return validate_board_size(value)


class RestartGameRequest(CreateGameRequest):
    game_id: UUID


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareName
    to_square: SquareName

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square_name(value)


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    kind: PieceKind
    color: Color

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(kind=piece.kind, color=piece.color)


class GameResponse(BaseModel):
    game_id: UUID
    width: int
    height: int
    turn: Color
    status: Status
    winner: Optional[Color]
    pieces: dict[SquareName, PieceResponse]

    @classmethod
    def from_game(cls, game_id: UUID, game: Game) -> Self:
        return cls(
            game_id=game_id,
            width=game.board.width,
            height=game.board.height,
            turn=game.turn,
            status=game.status,
            winner=game.winner,
            pieces={
                square.to_name(): PieceResponse.from_piece(piece)
                for square, piece in game.board.position.items()
            },
        )


class LegalMovesResponse(BaseModel):
    game_id: UUID
    square: SquareName
    destinations: list[SquareName]


class MoveResponse(BaseModel):
    game: GameResponse
    moved: PieceResponse
    from_square: SquareName
    to_square: SquareName
    captured: list[PieceResponse]

    @classmethod
    def from_outcome(cls, game: GameResponse, outcome: MoveOutcome) -> Self:
        return cls(
            game=game,
            moved=PieceResponse.from_piece(outcome.piece),
            from_square=outcome.from_square.to_name(),
            to_square=outcome.to_square.to_name(),
            captured=[PieceResponse.from_piece(piece) for piece in outcome.captured],
        )
