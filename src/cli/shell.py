"""
Interactive shell: read a command, act on the Game, print the board. Repeat.

Commands: help / exit / restart / select <sq> / move <from> <to>
"""

from typing import Callable, Optional

import click
from loguru import logger

from src.core.config import (
    LOG_LEVELS,
    MAX_BOARD_SIZE,
    MIN_BOARD_SIZE,
    GameSettings,
    configure_logging,
)
from src.core.exceptions import GameError
from src.unvoid.game import Game
from src.unvoid.moves import MoveOutcome
from src.unvoid.render import render_board
from src.unvoid.square import Square, format_squares

HELP_TEXT = """Commands:
  help                 show this help
  exit                 quit the game
  restart              pick size & restart
  select <sq>          choose a piece (e.g. select A1)
  move <from> <to>     move a piece (e.g. move A1 B3)"""

BANNER = "\n".join(["-" * 24, "Welcome to Unvoid Chess", "-" * 24])

BOARD_SIZE = click.IntRange(MIN_BOARD_SIZE, MAX_BOARD_SIZE)


def prompt_dimension(name: str) -> int:
    """click keeps asking until the answer lies within the allowed range"""
    return click.prompt(
        f"Enter {name} ({MIN_BOARD_SIZE}-{MAX_BOARD_SIZE})", type=BOARD_SIZE
    )


def describe_outcome(outcome: MoveOutcome) -> str:
    line = f"{outcome.piece} {outcome.from_square} -> {outcome.to_square}"
    if outcome.captured:
        line += " captures " + ", ".join(str(piece) for piece in outcome.captured)
    return line


class GameShell:
    def __init__(self, game: Game) -> None:
        self.game = game
        self.running = True
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "help": self._help,
            "exit": self._exit,
            "restart": self._restart,
            "select": self._select,
            "move": self._move,
        }

    def run(self) -> None:
        click.echo()
        self._show_board()
        click.echo("\nType `help` for commands.")
        while self.running:
            click.echo(f"\nTurn: {self.game.turn.capitalize()}")
            try:
                line = click.prompt(
                    "", prompt_suffix="> ", default="", show_default=False
                )
            except click.Abort:
                # end of input
                break
            self.handle(line)

    def handle(self, line: str) -> None:
        parts = line.split()
        if not parts:
            return

        cmd, args = parts[0].lower(), parts[1:]
        command = self.commands.get(cmd)
        if command is None:
            click.echo(f"Unknown command: {cmd}")
            return

        try:
            command(args)
        except GameError as e:
            logger.debug(f"{cmd} {args} failed: {e!r}")
            click.echo(f"Error: {e}")

    # -- COMMANDS ---
    def _help(self, args: list[str]) -> None:
        click.echo(HELP_TEXT)

    def _exit(self, args: list[str]) -> None:
        click.echo("Goodbye!")
        self.running = False

    def _restart(self, args: list[str]) -> None:
        width, height = prompt_dimension("width"), prompt_dimension("height")
        self.game = Game.new_game(width, height)
        self._show_board()

    def _select(self, args: list[str]) -> None:
        if len(args) != 1:
            click.echo("Usage: select <square>")
            return

        square = Square.from_name(args[0])
        destinations = self.game.select(square)
        piece = self.game.board.piece_at(square)
        self._show_board(highlights=destinations)
        click.echo(
            f"Valid moves for {piece.symbol()} at {square}: {format_squares(destinations)}"
        )

    def _move(self, args: list[str]) -> None:
        if len(args) != 2:
            click.echo("Usage: move <from> <to>")
            return

        from_square, to_square = (Square.from_name(arg) for arg in args)
        outcome = self.game.play(from_square, to_square)
        self._show_board()
        click.echo(describe_outcome(outcome))
        if self.game.is_over:
            click.echo(
                f"Game over! {self.game.winner.capitalize()} wins. Type `restart` to play again or `exit` to quit."
            )
        else:
            click.echo(f"{self.game.turn.capitalize()} to move.")

    def _show_board(self, highlights: Optional[set[Square]] = None) -> None:
        click.echo(render_board(self.game.board, highlights or ()))


@click.command()
@click.option("--width", type=BOARD_SIZE, default=None, help="Number of files")
@click.option("--height", type=BOARD_SIZE, default=None, help="Number of ranks")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="loguru level, ex. DEBUG",
)
def main(width: Optional[int], height: Optional[int], log_level: Optional[str]) -> None:
    """Play Unvoid Chess in the terminal"""
    try:
        settings = GameSettings.from_env()
    except GameError as e:
        raise click.UsageError(str(e)) from e
    configure_logging(log_level or settings.log_level)

    click.echo(BANNER)
    width = width or settings.width or prompt_dimension("width")
    height = height or settings.height or prompt_dimension("height")
    click.echo(f"Starting a {width}x{height} board...")

    GameShell(Game.new_game(width, height)).run()


if __name__ == "__main__":
    main()
