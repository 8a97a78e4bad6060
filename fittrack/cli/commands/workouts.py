"""
Workout Commands.
"""

from datetime import date
from typing import Optional

import typer

from fittrack.cli.history import equipment_name, member_name, names_by_id, workout_stats
from fittrack.cli.output import (
    apply_clears,
    build_update,
    console,
    fetch_all,
    render_record,
    render_table,
    run_api,
)

app = typer.Typer(help="Log and review workouts")

WORKOUT_COLUMNS = ["id", "workout_date", "member", "name", "duration_minutes"]
EXERCISE_COLUMNS = ["id", "exercise_name", "sets", "repetitions", "weight_lbs", "equipment", "notes"]


def render_exercises(exercise_logs: list[dict]) -> None:
    """Exercise table with equipment names, followed by the workout totals."""
    equipment = {}
    if any(log["equipment_id"] is not None for log in exercise_logs):
        equipment = names_by_id(fetch_all("/equipment"))
    rows = [
        {**log, "equipment": equipment_name(log["equipment_id"], equipment)}
        for log in exercise_logs
    ]
    render_table("Exercises", EXERCISE_COLUMNS, rows)
    if exercise_logs:
        console.print(f"[bold]Totals:[/bold] {workout_stats(exercise_logs).summary()}")


@app.command("add")
def add(
    member_id: int = typer.Argument(..., help="Family member ID"),
    name: str = typer.Argument(..., help="Workout name"),
    workout_date: Optional[str] = typer.Option(
        None, "--date", help="Workout date (YYYY-MM-DD), defaults to today"
    ),
    duration: Optional[int] = typer.Option(None, "--duration", "-m", min=1, help="Minutes"),
    notes: Optional[str] = typer.Option(None, "--notes"),
) -> None:
    """
    Log a workout for a family member.

    Examples:
        cli.py workouts add 1 "Morning run" --duration 30
        cli.py workouts add 2 "Leg day" --date 2024-03-18
    """
    workout = run_api(
        "POST",
        "/workouts",
        json={
            "family_member_id": member_id,
            "name": name,
            "duration_minutes": duration,
            "notes": notes,
            "workout_date": workout_date or date.today().isoformat(),
        },
    )
    console.print(
        f"[green]Logged workout #{workout['id']}: {workout['name']} "
        f"on {workout['workout_date']}[/green]"
    )


@app.command("list")
def list_workouts(
    limit: int = typer.Option(50, "--limit", "-l", min=1),
    offset: int = typer.Option(0, "--offset", "-o", min=0),
) -> None:
    """List workouts of all members, newest first."""
    items = run_api("GET", "/workouts", params={"limit": limit, "offset": offset})
    members = names_by_id(fetch_all("/family-members")) if items else {}
    rows = [{**w, "member": member_name(w["family_member_id"], members)} for w in items]
    render_table("Workouts", WORKOUT_COLUMNS, rows)


@app.command("show")
def show(workout_id: int = typer.Argument(..., help="Workout ID")) -> None:
    """Show a workout, who did it, its exercises and totals."""
    workout = run_api("GET", f"/workouts/{workout_id}")
    member = run_api("GET", f"/family-members/{workout['family_member_id']}")
    render_record(f"Workout #{workout_id}", {**workout, "member": member["name"]})
    render_exercises(run_api("GET", f"/workouts/{workout_id}/exercise-logs"))


@app.command("update")
def update(
    workout_id: int = typer.Argument(..., help="Workout ID"),
    name: Optional[str] = typer.Option(None, "--name", "-n"),
    workout_date: Optional[str] = typer.Option(None, "--date", help="YYYY-MM-DD"),
    duration: Optional[int] = typer.Option(None, "--duration", "-m", min=1),
    notes: Optional[str] = typer.Option(None, "--notes"),
    clear_duration: bool = typer.Option(False, "--clear-duration"),
    clear_notes: bool = typer.Option(False, "--clear-notes"),
) -> None:
    """Update a workout. Only the given options are changed."""
    payload = apply_clears(
        build_update(
            name=name,
            workout_date=workout_date,
            duration_minutes=duration,
            notes=notes,
        ),
        duration_minutes=clear_duration,
        notes=clear_notes,
    )
    if not payload:
        console.print("[yellow]Nothing to update[/yellow]")
        raise typer.Exit(1)

    workout = run_api("PATCH", f"/workouts/{workout_id}", json=payload)
    console.print(f"[green]Updated workout #{workout['id']}[/green]")
    render_record(f"Workout #{workout_id}", workout)


@app.command("exercises")
def exercises(workout_id: int = typer.Argument(..., help="Workout ID")) -> None:
    """List the exercises logged in a workout, with totals."""
    render_exercises(run_api("GET", f"/workouts/{workout_id}/exercise-logs"))
