"""
Health Check Commands.

Commands for checking backend health and status.
"""

import asyncio

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fittrack.cli.client import get_api_client

app = typer.Typer(help="Health check commands")
console = Console()


@app.command()
def status(
    detailed: bool = typer.Option(False, "--detailed", "-d", help="Show detailed status"),
) -> None:
    """
    Check backend health status (requires running server).

    Examples:
        cli.py health status
        cli.py health status -d
    """
    healthy = asyncio.run(_status(detailed))
    if not healthy:
        raise typer.Exit(1)


async def _status(detailed: bool) -> bool:
    client = get_api_client()
    path = "/health/detailed" if detailed else "/health/ready"

    try:
        response = await client.get(path)
    except httpx.ConnectError:
        console.print("[red]Error: Cannot connect to backend[/red]")
        console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        return False
    except httpx.HTTPError as e:
        console.print(f"[red]Error: {e}[/red]")
        return False
    finally:
        await client.close()

    if response.status_code not in (200, 503):
        console.print(f"[red]Unexpected response: {response.status_code}[/red]")
        return False

    data = response.json()
    # /health/ready wraps its 503 payload in FastAPI's "detail" field
    if "detail" in data and isinstance(data["detail"], dict):
        data = data["detail"]
    _display_health(data, detailed)
    return response.status_code == 200 and data.get("status") == "healthy"


def _color(status: str) -> str:
    if status == "healthy":
        return "green"
    if status == "unhealthy":
        return "red"
    return "yellow"


def _display_health(data: dict, detailed: bool) -> None:
    status = data.get("status", "unknown")

    if not (detailed and "checks" in data):
        color = _color(status)
        console.print(Panel(f"[{color}]{status.upper()}[/{color}]", title="Backend Status"))
        return

    table = Table(title="Health Status", show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for component, check in data.get("checks", {}).items():
        check_status = check.get("status", "unknown")
        color = _color(check_status)
        details = []
        if "latency_ms" in check:
            details.append(f"latency: {check['latency_ms']}ms")
        if "error" in check:
            details.append(f"error: {check['error']}")
        table.add_row(
            component,
            f"[{color}]{check_status}[/{color}]",
            ", ".join(details) if details else "-",
        )

    console.print(table)

    if "application" in data:
        app_info = data["application"]
        console.print(
            f"\n[dim]Application: {app_info.get('name', 'N/A')} v{app_info.get('version', 'N/A')}[/dim]"
        )
        console.print(f"[dim]Environment: {app_info.get('environment', 'N/A')}[/dim]")


@app.command()
def ping() -> None:
    """
    Simple ping to check if backend is reachable.

    Examples:
        cli.py health ping
    """
    reachable = asyncio.run(_ping())
    if not reachable:
        raise typer.Exit(1)


async def _ping() -> bool:
    client = get_api_client()
    try:
        response = await client.get("/health")
    except httpx.ConnectError:
        console.print("[red]✗ Backend is not reachable[/red]")
        return False
    except httpx.HTTPError as e:
        console.print(f"[red]✗ Error: {e}[/red]")
        return False
    finally:
        await client.close()

    if response.status_code == 200:
        console.print("[green]✓ Backend is reachable[/green]")
        return True
    console.print(f"[yellow]Backend responded with status {response.status_code}[/yellow]")
    return False
