"""Orchestration of communication from the boundary models to the game logic and the repository (and the reverse direction)."""

from contextlib import contextmanager
from threading import Lock
from typing import Iterator
from uuid import UUID

from loguru import logger

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    RestartGameRequest,
)
from src.core.exceptions import MoveError, RepositoryError
from src.db.repository import GameRepository
from src.unvoid.game import Game
from src.unvoid.square import Square, format_squares


class GameService:
    """
    Orchestration of layers for the game.

    NOTE: The Board is not thread-safe, so every call touching a game holds that game's lock.
    """

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository
        self._locks: dict[UUID, Lock] = {}
        self._locks_guard = Lock()

    # -- Service entry points ---
    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """A player requested a new game of the given size."""
        new_game = Game.new_game(request.width, request.height)
        stored_game, game_id = self.repo.create_game(new_game)
        return GameResponse.from_game(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            return GameResponse.from_game(request.game_id, game)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Destinations of the piece on the requested square (for highlighting)."""
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            destinations = game.legal_destinations(Square.from_name(request.square))
            return LegalMovesResponse(
                game_id=request.game_id,
                square=request.square,
                destinations=format_squares(destinations),
            )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. On success the turn passes to the opponent (or the game ends)."""
        with self._game_lock(request.game_id):
            game = self._fetch_game(request.game_id)
            from_square = Square.from_name(request.from_square)
            to_square = Square.from_name(request.to_square)
            try:
                outcome = game.play(from_square, to_square)
            except MoveError as e:
                logger.warning(
                    f"Rejected move {request.from_square}-{request.to_square} in game {request.game_id}: {e.kind}"
                )
                raise

            self.repo.update_game(request.game_id, game)
            return MoveResponse.from_outcome(
                GameResponse.from_game(request.game_id, game), outcome
            )

    def restart_game(self, request: RestartGameRequest) -> GameResponse:
        """The old game is replaced wholesale, keeping the same ID."""
        with self._game_lock(request.game_id):
            self._fetch_game(request.game_id)
            new_game = Game.new_game(request.width, request.height)
            self.repo.update_game(request.game_id, new_game)
            logger.info(f"Restarted game {request.game_id}")
            return GameResponse.from_game(request.game_id, new_game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        with self._game_lock(request.game_id):
            self.repo.delete_game(request.game_id)
        with self._locks_guard:
            self._locks.pop(request.game_id, None)

    # -- Internal helpers --
    @contextmanager
    def _game_lock(self, game_id: UUID) -> Iterator[None]:
        """Locks are kept for existing games only: asking for an unknown ID leaves nothing behind."""
        with self._locks_guard:
            lock = self._locks.setdefault(game_id, Lock())
        with lock:
            try:
                yield
            except RepositoryError:
                with self._locks_guard:
                    self._locks.pop(game_id, None)
                raise

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game in the repository and raise error if it fails."""
        game = self.repo.get_game(game_id)
        if game is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game
