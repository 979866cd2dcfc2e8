from uuid import UUID, uuid4

import pytest

from src.api.models import (
    CreateGameRequest,
    GameResponse,
    LegalMovesRequest,
    MoveRequest,
    MoveResponse,
    PieceResponse,
    RestartGameRequest,
)
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceKind, Status
from src.unvoid.game import Game
from src.unvoid.square import Square


@pytest.fixture
def mock_id() -> UUID:
    return uuid4()


# -- Validation - CreateGameRequest --
def test_default_board_size() -> None:
    request = CreateGameRequest()
    assert request.width == 8
    assert request.height == 8


@pytest.mark.parametrize("size", [6, 9, 12])
def test_valid_board_size(size: int) -> None:
    request = CreateGameRequest(width=size, height=size)
    assert request.width == size
    assert request.height == size


@pytest.mark.parametrize(
    "width, height",
    [
        (5, 8),  # too narrow
        (8, 13),  # too high
        (0, 0),
    ],
)
def test_invalid_board_size(width: int, height: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateGameRequest(width=width, height=height)


def test_restart_request_validates_size_too(mock_id: UUID) -> None:
    with pytest.raises(InvalidRequestError):
        _ = RestartGameRequest(game_id=mock_id, width=20, height=8)


# -- Validation - MoveRequest --
def test_valid_square_names(mock_id: UUID) -> None:
    """Accepted in any case, stored in upper case"""
    request = MoveRequest(game_id=mock_id, from_square="b1", to_square="B12")
    assert request.from_square == "B1"
    assert request.to_square == "B12"


@pytest.mark.parametrize(
    "square",
    [
        "nonsense",  # rank is not a number
        "11",  # First character is not a letter
        "a0",  # ranks start at 1
        "",
    ],
)
def test_invalid_square_names(mock_id: UUID, square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, from_square=square, to_square="e4")

    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(game_id=mock_id, from_square="e2", to_square=square)

    with pytest.raises(InvalidRequestError):
        _ = LegalMovesRequest(game_id=mock_id, square=square)


# -- Responses --
def test_game_response_from_game(mock_id: UUID) -> None:
    game = Game.new_game(6, 6)
    response = GameResponse.from_game(mock_id, game)
    assert response.game_id == mock_id
    assert response.turn == Color.WHITE
    assert response.status == Status.IN_PROGRESS
    assert response.pieces["F6"] == PieceResponse(
        kind=PieceKind.PRODUCT_OWNER, color=Color.BLACK
    )


def test_move_response_from_outcome(mock_id: UUID) -> None:
    game = Game.new_game(8, 8)
    outcome = game.play(Square.from_name("B1"), Square.from_name("B4"))
    response = MoveResponse.from_outcome(GameResponse.from_game(mock_id, game), outcome)
    assert response.moved == PieceResponse(kind=PieceKind.DEVELOPER, color=Color.WHITE)
    assert response.from_square == "B1"
    assert response.to_square == "B4"
    assert response.captured == []
    assert response.game.turn == Color.BLACK
