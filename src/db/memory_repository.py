"""Implementation of (Game)Repository using a plain dictionary"""

from uuid import UUID, uuid4

from loguru import logger

from src.unvoid.game import Game


class InMemoryGameRepository:
    """Games are stored by ID in a dict. Nothing is written to disk."""

    def __init__(self) -> None:
        self._games: dict[UUID, Game] = {}

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if record exists."""
        return self._games.get(game_id)

    def create_game(self, game: Game) -> tuple[Game, UUID]:
        """Store new game and return the stored game + newly created game ID."""
        new_id = uuid4()
        self._games[new_id] = game
        logger.debug(f"Stored new game {new_id}")
        return game, new_id

    def update_game(self, game_id: UUID, game: Game) -> Game | None:
        """Replace the stored game (ex. after a restart)."""
        if game_id not in self._games:
            return None
        self._games[game_id] = game
        return game

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game's record."""
        return self._games.pop(game_id, None)

    def __len__(self) -> int:
        return len(self._games)
