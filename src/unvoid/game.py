"""
The Game class will be the entrypoint into the domain layer for the service layer and the shell.
It is responsible for validating and executing a move on the board, and keeping track of whose turn it is.
"""

from dataclasses import dataclass
from typing import Optional, Self

from loguru import logger

from src.core.exceptions import (
    EmptyOriginError,
    GameStateError,
    IllegalMoveError,
    NotYourTurnError,
    OutOfBoundsError,
    SameSquareError,
)
from src.core.shared_types import Color, PieceKind, Status
from src.unvoid.board import Board
from src.unvoid.moves import MoveOutcome, legal_destinations, squares_between
from src.unvoid.pieces import Piece
from src.unvoid.square import Square, format_squares


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE / SHELL ---

    board: Board
    turn: Color = Color.WHITE
    selected: Optional[Square] = None
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None

    @classmethod
    def new_game(cls, width: int, height: int) -> Self:
        """Fresh board with the three pieces per side on their starting squares. White moves first.

        NOTE: The size limits are enforced by the callers (settings, requests, shell), not here.
        """
        logger.info(f"Starting a new {width}x{height} game")
        return cls(board=Board.starting_position(width, height))

    @property
    def is_over(self) -> bool:
        return self.status == Status.FINISHED

    def legal_destinations(self, square: Square) -> set[Square]:
        """
        Destinations of the piece standing on the square (whichever color it is).
        ----

        Off the board or no piece there? No destinations.
        """
        piece = self.board.piece_at(square)
        if piece is None:
            return set()
        destinations = legal_destinations(piece.kind, piece.color, square, self.board)
        logger.debug(f"{piece} on {square}: {format_squares(destinations)}")
        return destinations

    def select(self, square: Square) -> set[Square]:
        """Select one of your own pieces (UI convenience) and return where it can go"""
        if not self.board.in_bounds(square):
            raise OutOfBoundsError(f"Square {square} is not on the board.")

        piece = self.board.piece_at(square)
        if piece is None:
            raise EmptyOriginError(f"No piece at {square}.")
        if piece.color != self.turn:
            raise NotYourTurnError(f"No {self.turn} piece at {square}.")

        self.selected = square
        return self.legal_destinations(square)

    def execute_move(self, from_square: Square, to_square: Square) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. check both squares are on the board and differ
        2. check there is a piece to move
        3. check it is that piece's turn
        4. check the target square is one of its destinations
        5. update the board (developer: sweep the path clean, then take on the target square)

        NOTE: Does not pass the turn, see pass_turn()
        """
        piece = self._validate_move(from_square, to_square)

        captured: list[Piece] = []
        if piece.kind == PieceKind.DEVELOPER:
            captured.extend(self._sweep_path(from_square, to_square, piece.color))

        taken = self.board.remove_piece(to_square)
        if taken is not None:
            captured.append(taken)

        self.board.remove_piece(from_square)
        self.board.place_piece(piece, to_square)

        outcome = MoveOutcome(piece, from_square, to_square, captured)
        logger.debug(
            f"{piece} moved {from_square}->{to_square}, captured: {[str(p) for p in captured]}"
        )
        return outcome

    def pass_turn(self) -> None:
        """
        Turn bookkeeping after a successful move.
        ---

        If the opponent lost its product owner, the game ends and the player who just moved wins.
        """
        self.selected = None
        opponent = self.turn.opponent
        if not self.board.has_royal(opponent):
            self._finish(winner=self.turn)
            return
        self.turn = opponent

    def play(self, from_square: Square, to_square: Square) -> MoveOutcome:
        """execute_move + pass_turn: what a player does during their turn"""
        if self.is_over:
            raise GameStateError(f"Game is over. {self.winner} won.")
        outcome = self.execute_move(from_square, to_square)
        self.pass_turn()
        return outcome

    # -- PRIVATE HELPERS ---
    def _validate_move(self, from_square: Square, to_square: Square) -> Piece:
        """Checks in order, the first failing one is reported. Returns the piece to move."""
        for square in (from_square, to_square):
            if not self.board.in_bounds(square):
                raise OutOfBoundsError(f"Square {square} is not on the board.")

        if from_square == to_square:
            raise SameSquareError(f"Cannot move from {from_square} to itself.")

        piece = self.board.piece_at(from_square)
        if piece is None:
            raise EmptyOriginError(f"No piece at {from_square}.")

        if piece.color != self.turn:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.turn} to make a move first."
            )

        if to_square not in legal_destinations(
            piece.kind, piece.color, from_square, self.board
        ):
            raise IllegalMoveError(f"Illegal move to {to_square}.")
        return piece

    def _sweep_path(self, from_square: Square, to_square: Square, color: Color) -> list[Piece]:
        """Remove all opponent pieces the developer passes. (Own pieces can't be there: they would have blocked the move.)"""
        swept: list[Piece] = []
        for square in squares_between(from_square, to_square):
            piece = self.board.piece_at(square)
            if piece is not None and piece.color != color:
                self.board.remove_piece(square)
                swept.append(piece)
        return swept

    def _finish(self, winner: Color) -> None:
        self.status = Status.FINISHED
        self.winner = winner
        logger.info(f"Game over: {winner} captured the opposing product owner")
