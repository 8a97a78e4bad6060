"""
Server Commands.

Runs the FitTrack API (fittrack.backend.main:app) under uvicorn.
"""

import typer
import uvicorn
from rich.console import Console

from fittrack.backend.core.config import find_project_root, get_app_config

app = typer.Typer(help="Run the FitTrack API server")
console = Console()

APP_PATH = "fittrack.backend.main:app"


@app.command()
def start(
    host: str = typer.Option(None, "--host", "-h", help="Bind address (default: application.yaml server.host)"),
    port: int = typer.Option(None, "--port", "-p", min=1, max=65535, help="Port (default: server.port)"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Restart on code changes"),
) -> None:
    """
    Start the API server in the foreground.

    Examples:
        cli.py server start
        cli.py server start --reload
        cli.py server start --host 0.0.0.0 --port 8080
    """
    settings = get_app_config().application
    host = host or settings.server.host
    port = port or settings.server.port

    console.print(f"[bold]FitTrack API on http://{host}:{port}{settings.api_prefix}[/bold]")
    if settings.debug:
        console.print(f"[dim]Docs at http://{host}:{port}/docs[/dim]")
    if reload:
        console.print("[dim]Auto-reload enabled[/dim]")

    uvicorn.run(
        APP_PATH,
        host=host,
        port=port,
        reload=reload,
        app_dir=str(find_project_root()),
        log_config=None,
    )
