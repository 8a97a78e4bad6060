"""
Database Commands.

Creates and evolves the family_members, equipment, workouts and
exercise_logs tables through Alembic's command API. The target database
is whatever get_database_url() resolves (config/.env DATABASE_URL, or the
PostgreSQL settings in database.yaml).
"""

from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

import typer
from alembic import command
from alembic.config import Config
from alembic.util import CommandError
from rich.console import Console
from sqlalchemy.exc import SQLAlchemyError

from fittrack.backend.core.config import find_project_root

app = typer.Typer(help="Create and migrate the FitTrack database schema")
console = Console()

MIGRATIONS_DIR = Path(__file__).resolve().parents[2] / "backend" / "migrations"


@lru_cache
def alembic_config() -> Config:
    """Alembic configuration rooted at fittrack/backend/migrations."""
    ini_path = MIGRATIONS_DIR / "alembic.ini"
    if not ini_path.exists():
        console.print(f"[red]Error: {ini_path} not found[/red]")
        raise typer.Exit(1)
    cfg = Config(str(ini_path))
    cfg.set_main_option("prepend_sys_path", str(find_project_root()))
    return cfg


def _run(action: Callable[..., None], *args: object, **kwargs: object) -> None:
    try:
        action(alembic_config(), *args, **kwargs)
    except CommandError as e:
        console.print(f"[red]Alembic: {e}[/red]")
        raise typer.Exit(1)
    except SQLAlchemyError as e:
        console.print(f"[red]Database unavailable: {e.__class__.__name__}[/red]")
        console.print("[dim]Check DATABASE_URL / DB_PASSWORD in config/.env[/dim]")
        raise typer.Exit(1)


@app.command()
def upgrade(
    revision: str = typer.Option("head", "--revision", "-r", help="Target revision"),
) -> None:
    """
    Create or upgrade the tables.

    Examples:
        cli.py db upgrade
        cli.py db upgrade -r 0001
    """
    console.print(f"[bold]Migrating database to {revision}[/bold]")
    _run(command.upgrade, revision)
    console.print("[green]Database is up to date[/green]")


@app.command()
def downgrade(
    revision: str = typer.Option(..., "--revision", "-r", help="Target revision, e.g. -1 or base"),
) -> None:
    """
    Roll the schema back. `-r base` drops every FitTrack table.
    """
    console.print(f"[bold]Rolling database back to {revision}[/bold]")
    _run(command.downgrade, revision)
    console.print("[green]Downgrade completed[/green]")


@app.command()
def current() -> None:
    """Show the revision the database is at."""
    _run(command.current, verbose=True)


@app.command()
def history() -> None:
    """List the migrations shipped with FitTrack."""
    _run(command.history, verbose=True)


@app.command()
def generate(
    message: str = typer.Option(..., "--message", "-m", help="Migration message"),
) -> None:
    """
    Autogenerate a migration from changes to fittrack/backend/models.

    Examples:
        cli.py db generate -m "add goal column to workouts"
    """
    _run(command.revision, message=message, autogenerate=True)
    console.print(f"[green]Generated migration: {message}[/green]")
