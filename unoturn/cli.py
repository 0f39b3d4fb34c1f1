"""CLI entry point."""

from __future__ import annotations

import logging

import typer
from dotenv import load_dotenv

from unoturn.engine import DEFAULT_SEED, UnoError, UnoGame

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="Deterministic UNO simulator")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    players: int = typer.Option(
        2, "--players", "-n", envvar="UNO_PLAYERS", help="Number of players (2-4)"
    ),
    seed: int = typer.Option(
        DEFAULT_SEED, "--seed", "-s", envvar="UNO_SEED", help="Shuffle seed"
    ),
    max_turns: int = typer.Option(
        10_000, "--max-turns", envvar="UNO_MAX_TURNS", help="Stop after this many turns"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the result"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run a single UNO game and print the table after every turn."""
    from unoturn.orchestration.game_runner import GameRunner

    _configure_logging(verbose)

    def show(game: UnoGame) -> None:
        typer.echo(game.get_state())

    try:
        runner = GameRunner(
            players,
            seed=seed,
            max_turns=max_turns,
            on_turn=None if quiet else show,
        )
        if not quiet:
            # Deal up front to print the table before the first turn
            runner.game.initialize()
            show(runner.game)
        result = runner.run()
    except UnoError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if result.winner is not None:
        typer.echo(f"Winner is Player {result.winner}!")
    elif result.stalemate:
        typer.echo("Stalemate: draw pile empty and no playable cards")
    else:
        typer.echo(f"No result after {max_turns} turns")
    typer.echo(f"Turns: {result.num_turns}")


@app.command()
def deal(
    players: int = typer.Option(
        2, "--players", "-n", envvar="UNO_PLAYERS", help="Number of players (2-4)"
    ),
    seed: int = typer.Option(
        DEFAULT_SEED, "--seed", "-s", envvar="UNO_SEED", help="Shuffle seed"
    ),
) -> None:
    """Deal a table and print every hand without playing."""
    try:
        game = UnoGame(players, seed=seed)
        game.initialize()
    except UnoError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(game.get_state())
    for i, hand in enumerate(game.state.hands):
        typer.echo(f"P{i}: " + ", ".join(str(c) for c in hand))
    typer.echo(f"Draw pile: {len(game.state.draw_pile)} cards")


if __name__ == "__main__":
    app()
