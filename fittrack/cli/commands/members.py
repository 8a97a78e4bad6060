"""
Family Member Commands.
"""

from typing import Optional

import typer

from fittrack.cli.history import workout_stats
from fittrack.cli.output import (
    apply_clears,
    build_update,
    console,
    render_record,
    render_table,
    run_api,
)

app = typer.Typer(help="Manage family members")

MEMBER_COLUMNS = ["id", "name", "email", "age"]
WORKOUT_COLUMNS = [
    "id", "workout_date", "name", "duration_minutes", "exercises", "sets", "reps", "volume_lbs",
]


@app.command("add")
def add(
    name: str = typer.Argument(..., help="Member name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="E-mail address"),
    age: Optional[int] = typer.Option(None, "--age", "-a", min=1, help="Age in years"),
) -> None:
    """
    Add a family member.

    Examples:
        cli.py members add "Sam" --email sam@example.com --age 12
    """
    member = run_api("POST", "/family-members", json={"name": name, "email": email, "age": age})
    console.print(f"[green]Added family member #{member['id']}: {member['name']}[/green]")


@app.command("list")
def list_members(
    limit: int = typer.Option(50, "--limit", "-l", min=1, help="Maximum rows"),
    offset: int = typer.Option(0, "--offset", "-o", min=0, help="Rows to skip"),
) -> None:
    """List family members."""
    members = run_api("GET", "/family-members", params={"limit": limit, "offset": offset})
    render_table("Family Members", MEMBER_COLUMNS, members)


@app.command("show")
def show(member_id: int = typer.Argument(..., help="Member ID")) -> None:
    """Show one family member."""
    member = run_api("GET", f"/family-members/{member_id}")
    render_record(f"Family Member #{member_id}", member)


@app.command("update")
def update(
    member_id: int = typer.Argument(..., help="Member ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="New name"),
    email: Optional[str] = typer.Option(None, "--email", "-e", help="New e-mail"),
    age: Optional[int] = typer.Option(None, "--age", "-a", min=1, help="New age"),
    clear_email: bool = typer.Option(False, "--clear-email", help="Remove the e-mail"),
    clear_age: bool = typer.Option(False, "--clear-age", help="Remove the age"),
) -> None:
    """
    Update a family member. Only the given options are changed.

    Examples:
        cli.py members update 2 --age 13
        cli.py members update 2 --clear-email
    """
    payload = apply_clears(
        build_update(name=name, email=email, age=age),
        email=clear_email,
        age=clear_age,
    )
    if not payload:
        console.print("[yellow]Nothing to update[/yellow]")
        raise typer.Exit(1)

    member = run_api("PATCH", f"/family-members/{member_id}", json=payload)
    console.print(f"[green]Updated family member #{member['id']}[/green]")
    render_record(f"Family Member #{member_id}", member)


@app.command("workouts")
def workouts(member_id: int = typer.Argument(..., help="Member ID")) -> None:
    """
    Show a member's workout history, newest first, with per-workout totals.

    Volume is weight x sets x reps over the exercises that used a weight.
    """
    member = run_api("GET", f"/family-members/{member_id}")
    workouts = run_api("GET", f"/family-members/{member_id}/workouts")

    rows = []
    for workout in workouts:
        stats = workout_stats(run_api("GET", f"/workouts/{workout['id']}/exercise-logs"))
        rows.append({
            **workout,
            "exercises": stats.exercises,
            "sets": stats.total_sets,
            "reps": stats.total_reps,
            "volume_lbs": f"{stats.total_volume_lbs:,.1f}",
        })

    render_table(f"Workouts of {member['name']}", WORKOUT_COLUMNS, rows)
