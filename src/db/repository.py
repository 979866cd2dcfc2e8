"""Protocol repository (in-memory for now; games only live as long as the process does)"""

from typing import Protocol
from uuid import UUID

from src.unvoid.game import Game


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID) -> Game | None:
        """Get game by ID, if record exists."""
        ...

    def create_game(self, game: Game) -> tuple[Game, UUID]:
        """Store new game and return the stored game + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: Game) -> Game | None:
        """Replace the stored game (ex. after a restart)."""
        ...

    def delete_game(self, game_id: UUID) -> Game | None:
        """Remove a game's record."""
        ...
