"""
Equipment Commands.
"""

from typing import Optional

import typer

from fittrack.cli.history import group_by_category
from fittrack.cli.output import (
    apply_clears,
    build_update,
    console,
    fetch_all,
    render_record,
    render_table,
    run_api,
)

app = typer.Typer(help="Manage equipment")

EQUIPMENT_COLUMNS = ["id", "name", "category", "description"]


@app.command("add")
def add(
    name: str = typer.Argument(..., help="Equipment name"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    category: Optional[str] = typer.Option(None, "--category", "-c"),
) -> None:
    """
    Register a piece of equipment.

    Examples:
        cli.py equipment add "Kettlebell 16kg" --category "Free weights"
    """
    item = run_api(
        "POST",
        "/equipment",
        json={"name": name, "description": description, "category": category},
    )
    console.print(f"[green]Added equipment #{item['id']}: {item['name']}[/green]")


@app.command("list")
def list_equipment(
    limit: int = typer.Option(50, "--limit", "-l", min=1),
    offset: int = typer.Option(0, "--offset", "-o", min=0),
    by_category: bool = typer.Option(
        False, "--by-category", "-g", help="Group all equipment by category (ignores --limit/--offset)"
    ),
) -> None:
    """
    List equipment.

    Examples:
        cli.py equipment list
        cli.py equipment list --by-category
    """
    if not by_category:
        items = run_api("GET", "/equipment", params={"limit": limit, "offset": offset})
        render_table("Equipment", EQUIPMENT_COLUMNS, items)
        return

    groups = group_by_category(fetch_all("/equipment"))
    if not groups:
        console.print("[yellow]No equipment found[/yellow]")
        return
    for category, items in groups.items():
        render_table(f"{category} ({len(items)})", ["id", "name", "description"], items)


@app.command("show")
def show(equipment_id: int = typer.Argument(..., help="Equipment ID")) -> None:
    """Show one piece of equipment."""
    item = run_api("GET", f"/equipment/{equipment_id}")
    render_record(f"Equipment #{equipment_id}", item)


@app.command("update")
def update(
    equipment_id: int = typer.Argument(..., help="Equipment ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    description: Optional[str] = typer.Option(None, "--description", "-d"),
    category: Optional[str] = typer.Option(None, "--category", "-c"),
    clear_description: bool = typer.Option(False, "--clear-description"),
    clear_category: bool = typer.Option(False, "--clear-category"),
) -> None:
    """Update equipment. Only the given options are changed."""
    payload = apply_clears(
        build_update(name=name, description=description, category=category),
        description=clear_description,
        category=clear_category,
    )
    if not payload:
        console.print("[yellow]Nothing to update[/yellow]")
        raise typer.Exit(1)

    item = run_api("PATCH", f"/equipment/{equipment_id}", json=payload)
    console.print(f"[green]Updated equipment #{item['id']}[/green]")
    render_record(f"Equipment #{equipment_id}", item)
