"""CLI for GymPulse.

Read-only presentation of the workout core: browse the exercise catalog,
log sets for an exercise and review history and streak. All writes go
through SessionRecorder.commit / add_custom_exercise.
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gympulse.catalog.catalog import exercises_for, get_catalog
from gympulse.config.settings import settings
from gympulse.core.logger import setup_logger
from gympulse.workouts.errors import InvalidDateError
from gympulse.workouts.input import parse_set_notation
from gympulse.workouts.recorder import SessionRecorder
from gympulse.workouts.types import WorkoutLog

# Initialize Rich console for output
console = Console()

app = typer.Typer(
    name="gympulse",
    help="GymPulse - log sets, keep your daily streak",
    add_completion=False,
)

EXIT_INVALID = 1
EXIT_PERSISTENCE = 2


@dataclass
class CliState:
    """Per-invocation state shared by commands."""

    recorder: SessionRecorder


def _setup_logging(debug: bool = False) -> None:
    """Set up logging with console and optional file output.

    Args:
        debug: Enable debug logging level
    """
    log_level = "DEBUG" if debug else settings.log_level
    setup_logger(level=log_level, log_file=settings.log_file)


def _state(ctx: typer.Context) -> CliState:
    state: CliState = ctx.obj
    return state


def _format_sets(log: WorkoutLog) -> str:
    return " ".join(f"{s.reps}x{s.weight}lb" for s in log.sets)


def _format_day(log: WorkoutLog) -> str:
    """Weekday, month and day of the session's local calendar date."""
    day = date.fromisoformat(log.date)
    return f"{day:%a}, {day:%b} {day.day}"


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Path | None = typer.Option(None, "--data-file", "-f", help="Snapshot file (default: GYMPULSE_DATA_FILE)"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Load the stored workout state before running a command."""
    _setup_logging(debug)
    path = data_file or settings.data_file
    recorder, result = SessionRecorder.open(path)
    if result.status == "corrupt":
        console.print(
            Panel(
                Text("Stored workout data could not be read; starting with an empty history.", style="bold yellow"),
                subtitle=escape(str(result.error)),
                border_style="yellow",
            )
        )
    ctx.obj = CliState(recorder=recorder)


@app.command()
def categories() -> None:
    """List exercise categories."""
    catalog = get_catalog()
    table = Table(title="Categories")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Exercises", justify="right")
    for category in catalog.categories:
        table.add_row(category.id, category.name, str(len(catalog.exercises_by_category.get(category.id, ()))))
    console.print(table)


@app.command()
def exercises(ctx: typer.Context, category_id: str = typer.Argument(..., help="Category ID (e.g. chest)")) -> None:
    """List builtin and custom exercises for a category."""
    catalog = get_catalog()
    category = catalog.category(category_id)
    if category is None:
        console.print(f"[red]Unknown category: {escape(category_id)}[/red]")
        raise typer.Exit(EXIT_INVALID)

    custom = _state(ctx).recorder.get_custom_exercises()
    console.print(f"[bold]{escape(category.name)}[/bold]")
    for name in exercises_for(category_id, custom, catalog):
        console.print(f"  {escape(name)}")


@app.command("add-exercise")
def add_exercise(
    ctx: typer.Context,
    category_id: str = typer.Argument(..., help="Category ID (e.g. chest)"),
    name: str = typer.Argument(..., help="Name of the new exercise"),
) -> None:
    """Add a custom exercise to a category."""
    if get_catalog().category(category_id) is None:
        console.print(f"[red]Unknown category: {escape(category_id)}[/red]")
        raise typer.Exit(EXIT_INVALID)

    result = _state(ctx).recorder.add_custom_exercise(category_id, name)
    if result.status == "invalid":
        console.print("[yellow]Exercise name cannot be empty.[/yellow]")
        raise typer.Exit(EXIT_INVALID)
    if result.status == "persist_failed":
        console.print(f"[red]Could not save exercise: {escape(str(result.error))}[/red]")
        raise typer.Exit(EXIT_PERSISTENCE)
    console.print(f"[green]Added {escape(name.strip())} to {escape(category_id)}[/green]")


@app.command()
def log(
    ctx: typer.Context,
    exercise: str = typer.Argument(..., help="Exercise name"),
    sets: list[str] = typer.Option(..., "--set", "-s", help="Set as REPSxWEIGHT (e.g. 10x135) or REPS"),
    on_date: str | None = typer.Option(None, "--date", help="Local date YYYY-MM-DD (default: today)"),
) -> None:
    """Log a completed workout and update the streak."""
    raw_sets = [parse_set_notation(entry, settings.max_reps) for entry in sets]
    result = _state(ctx).recorder.commit(exercise, raw_sets, today=on_date)

    if isinstance(result.error, InvalidDateError):
        console.print(f"[red]Invalid date {escape(result.error.value)}: expected YYYY-MM-DD[/red]")
        raise typer.Exit(EXIT_INVALID)
    if result.status == "invalid":
        console.print("[yellow]Please enter reps for all sets.[/yellow]")
        raise typer.Exit(EXIT_INVALID)
    if result.status == "persist_failed":
        console.print(f"[red]Workout NOT saved: {escape(str(result.error))}[/red]")
        raise typer.Exit(EXIT_PERSISTENCE)

    logger.debug(f"Logged {exercise} with {len(raw_sets)} set(s)")
    console.print(f"[green]Workout Saved! Streak: {result.streak}[/green]")


@app.command()
def history(ctx: typer.Context) -> None:
    """Show logged workouts, most recent first."""
    logs = _state(ctx).recorder.get_history()
    if not logs:
        console.print("[dim]No workouts logged yet. Go lift![/dim]")
        return

    table = Table(title="History")
    table.add_column("Exercise", style="magenta")
    table.add_column("Day")
    table.add_column("Sets")
    for entry in logs:
        table.add_row(escape(entry.exercise_id), _format_day(entry), _format_sets(entry))
    console.print(table)


@app.command()
def streak(ctx: typer.Context) -> None:
    """Show the current daily streak."""
    console.print(f"Streak: {_state(ctx).recorder.get_streak()}")


if __name__ == "__main__":
    app()
