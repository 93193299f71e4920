"""CLI entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from unotable.config import Settings
from unotable.engine import AllDiscardMode
from unotable.errors import UnoError

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO at a table of four: you against three bots")


def _settings() -> Settings:
    try:
        return Settings.from_env()
    except UnoError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show engine debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def play(
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Your player name"),
    all_discard: Optional[AllDiscardMode] = typer.Option(
        None,
        "--all-discard",
        "-d",
        case_sensitive=False,
        help="All Discard rule: off, color (colored plays only) or any",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    stats_file: Optional[str] = typer.Option(None, "--stats-file", help="Statistics JSON file"),
) -> None:
    """Play one game against three bots."""
    from unotable.agents.human_agent import InteractiveStrategy
    from unotable.orchestration.game_runner import GameRunner
    from unotable.presentation import render_card, render_event, render_status
    from unotable.stats.store import JsonStatsRepository

    settings = _settings()
    if not name:
        name = typer.prompt("Enter your name").strip()
    mode = all_discard or settings.all_discard
    if mode is None:
        enabled = typer.confirm("Enable All Discard rule?", default=False)
        mode = AllDiscardMode.COLOR_GATED if enabled else AllDiscardMode.OFF

    strategy = InteractiveStrategy(
        name=name,
        render_card=render_card,
        render_status=render_status,
    )
    runner = GameRunner(
        name,
        strategy,
        stats=JsonStatsRepository(stats_file or settings.stats_file),
        seed=seed if seed is not None else settings.seed,
        all_discard=mode,
        listener=lambda event: typer.echo(render_event(event)),
    )
    try:
        result = runner.run()
    except UnoError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo(f"\nWinner: {result.winner_name}")
    typer.echo(f"Turns: {result.num_turns}")
    if result.record is not None:
        rec = result.record
        typer.echo(f"{rec.name}: {rec.games_played} played, {rec.wins} wins, {rec.losses} losses")


@app.command()
def stats(
    name: str = typer.Argument(..., help="Player name"),
    stats_file: Optional[str] = typer.Option(None, "--stats-file", help="Statistics JSON file"),
) -> None:
    """Show the saved statistics for a player."""
    from unotable.stats.store import JsonStatsRepository

    settings = _settings()
    try:
        record = JsonStatsRepository(stats_file or settings.stats_file).load(name)
    except UnoError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo(f"Player: {record.name}")
    typer.echo(f"Games played: {record.games_played}")
    typer.echo(f"Wins: {record.wins}")
    typer.echo(f"Losses: {record.losses}")
    if record.history:
        typer.echo("History:")
        for entry in record.history:
            typer.echo(f"  {entry.date}: {entry.result}")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    all_discard: AllDiscardMode = typer.Option(
        AllDiscardMode.OFF, "--all-discard", "-d", case_sensitive=False, help="All Discard rule"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run bot-only games and count wins per seat."""
    from unotable.orchestration.tournament import run_simulation

    settings = _settings()
    wins = run_simulation(
        num_games=games,
        seed=seed if seed is not None else settings.seed,
        all_discard=all_discard,
    )
    typer.echo("Simulation results:")
    for seat_name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {seat_name}: {w} wins")


if __name__ == "__main__":
    app()
