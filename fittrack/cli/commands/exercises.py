"""
Exercise Log Commands.
"""

from typing import Optional

import typer

from fittrack.cli.output import (
    apply_clears,
    build_update,
    console,
    render_record,
    run_api,
)

app = typer.Typer(help="Log exercises inside workouts")


@app.command("add")
def add(
    workout_id: int = typer.Argument(..., help="Workout ID"),
    exercise_name: str = typer.Argument(..., help="Exercise name"),
    sets: int = typer.Option(..., "--sets", "-s", min=1),
    reps: int = typer.Option(..., "--reps", "-r", min=1, help="Repetitions per set"),
    weight: Optional[float] = typer.Option(None, "--weight", "-w", help="Weight in lbs"),
    equipment_id: Optional[int] = typer.Option(None, "--equipment", "-e", help="Equipment ID"),
    notes: Optional[str] = typer.Option(None, "--notes"),
) -> None:
    """
    Log an exercise.

    Examples:
        cli.py exercises add 3 "Bench press" --sets 3 --reps 10 --weight 135 --equipment 1
        cli.py exercises add 3 "Push-ups" -s 3 -r 15
    """
    log = run_api(
        "POST",
        "/exercise-logs",
        json={
            "workout_id": workout_id,
            "equipment_id": equipment_id,
            "exercise_name": exercise_name,
            "sets": sets,
            "repetitions": reps,
            "weight_lbs": weight,
            "notes": notes,
        },
    )
    console.print(
        f"[green]Logged #{log['id']}: {log['exercise_name']} "
        f"{log['sets']}x{log['repetitions']}[/green]"
    )


@app.command("show")
def show(log_id: int = typer.Argument(..., help="Exercise log ID")) -> None:
    """Show one exercise log."""
    log = run_api("GET", f"/exercise-logs/{log_id}")
    render_record(f"Exercise Log #{log_id}", log)


@app.command("update")
def update(
    log_id: int = typer.Argument(..., help="Exercise log ID"),
    exercise_name: Optional[str] = typer.Option(None, "--name", "-n"),
    sets: Optional[int] = typer.Option(None, "--sets", "-s", min=1),
    reps: Optional[int] = typer.Option(None, "--reps", "-r", min=1),
    weight: Optional[float] = typer.Option(None, "--weight", "-w"),
    equipment_id: Optional[int] = typer.Option(None, "--equipment", "-e"),
    notes: Optional[str] = typer.Option(None, "--notes"),
    clear_weight: bool = typer.Option(False, "--clear-weight"),
    clear_equipment: bool = typer.Option(False, "--clear-equipment"),
    clear_notes: bool = typer.Option(False, "--clear-notes"),
) -> None:
    """Update an exercise log. Only the given options are changed."""
    payload = apply_clears(
        build_update(
            exercise_name=exercise_name,
            sets=sets,
            repetitions=reps,
            weight_lbs=weight,
            equipment_id=equipment_id,
            notes=notes,
        ),
        weight_lbs=clear_weight,
        equipment_id=clear_equipment,
        notes=clear_notes,
    )
    if not payload:
        console.print("[yellow]Nothing to update[/yellow]")
        raise typer.Exit(1)

    log = run_api("PATCH", f"/exercise-logs/{log_id}", json=payload)
    console.print(f"[green]Updated exercise log #{log['id']}[/green]")
    render_record(f"Exercise Log #{log_id}", log)
