"""
Shared helpers for CLI commands: running API calls and rendering results.
"""

import asyncio
from collections.abc import Iterable, Sequence
from typing import Any

import httpx
import typer
from rich.console import Console
from rich.table import Table

from fittrack.backend.core.config import get_app_config
from fittrack.cli.client import APIError, get_api_client

console = Console()


def run_api(method: str, path: str, **kwargs: Any) -> Any:
    """
    Call the backend synchronously and return the response data.

    Prints a readable error and exits with code 1 when the backend is
    unreachable or answers with an error envelope.
    """
    return asyncio.run(_run_api(method, path, **kwargs))


async def _run_api(method: str, path: str, **kwargs: Any) -> Any:
    client = get_api_client()
    try:
        return await client.call(method, path, **kwargs)
    except APIError as e:
        console.print(f"[red]Error ({e.status_code} {e.code}): {e.message}[/red]")
        for err in e.details.get("validation_errors", []):
            console.print(f"[dim]  {err.get('field')}: {err.get('message')}[/dim]")
        raise typer.Exit(1)
    except httpx.ConnectError:
        console.print("[red]Error: Cannot connect to backend[/red]")
        console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        await client.close()


def fetch_all(path: str) -> list[dict[str, Any]]:
    """
    Read every row of a paginated list endpoint, one max-size page at a time.

    Used to turn family_member_id and equipment_id into names.
    """
    page_size = get_app_config().application.pagination.max_limit
    rows: list[dict[str, Any]] = []
    while True:
        page = run_api("GET", path, params={"limit": page_size, "offset": len(rows)})
        rows.extend(page)
        if len(page) < page_size:
            return rows


def build_update(**fields: Any) -> dict[str, Any]:
    """Keep only the options the user actually passed."""
    return {key: value for key, value in fields.items() if value is not None}


def apply_clears(payload: dict[str, Any], **clears: bool) -> dict[str, Any]:
    """Set fields to null for every --clear-<field> flag that was given."""
    for field, clear in clears.items():
        if clear:
            payload[field] = None
    return payload


def _cell(value: Any) -> str:
    if value is None:
        return "[dim]-[/dim]"
    return str(value)


def render_table(title: str, columns: Sequence[str], rows: Iterable[dict[str, Any]]) -> None:
    """Render a list of API records as a Rich table."""
    table = Table(title=title, show_header=True)
    for column in columns:
        table.add_column(column.replace("_", " ").title(), style="cyan" if column == "id" else None)

    count = 0
    for row in rows:
        table.add_row(*(_cell(row.get(column)) for column in columns))
        count += 1

    if count == 0:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return
    console.print(table)


def render_record(title: str, record: dict[str, Any]) -> None:
    """Render a single API record as a two-column table."""
    table = Table(title=title, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in record.items():
        table.add_row(key, _cell(value))
    console.print(table)
