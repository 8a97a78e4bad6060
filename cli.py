#!/usr/bin/env python3
"""
FitTrack CLI.

Command-line client for the FitTrack backend API.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    python cli.py --help                                   # Show help

    # Server and database
    python cli.py server start --reload                    # Start FastAPI server
    python cli.py db upgrade                               # Apply migrations

    # Family members and equipment
    python cli.py members add "Sam" --age 12
    python cli.py members list
    python cli.py members workouts 1                       # Workout history
    python cli.py equipment add "Rowing machine" -c Cardio

    # Workouts and exercises
    python cli.py workouts add 1 "Leg day" --duration 45
    python cli.py exercises add 3 "Squat" --sets 5 --reps 5 --weight 185
    python cli.py workouts show 3                          # Workout with exercises

    # Health checks
    python cli.py health status -d
    python cli.py health ping

Options:
    --verbose, -v     Enable verbose output
    --debug           Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path

import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fittrack.cli.commands import (  # noqa: E402
    db_app,
    equipment_app,
    exercises_app,
    health_app,
    members_app,
    server_app,
    workouts_app,
)

app = typer.Typer(
    name="cli",
    help="FitTrack CLI - family members, equipment, workouts and exercise logs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(members_app, name="members")
app.add_typer(equipment_app, name="equipment")
app.add_typer(workouts_app, name="workouts")
app.add_typer(exercises_app, name="exercises")
app.add_typer(health_app, name="health")
app.add_typer(server_app, name="server")
app.add_typer(db_app, name="db")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    FitTrack CLI.

    Track family workouts against the FitTrack backend.
    """
    from fittrack.backend.core.config import validate_project_root
    from fittrack.backend.core.logging import setup_logging

    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging(level="WARNING", format_type="console", enable_file_logging=False)


if __name__ == "__main__":
    app()
