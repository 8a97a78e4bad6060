"""
Workout history helpers for the CLI.

Pure functions over API records (plain dicts): per-workout totals, name
lookups that replace raw foreign keys, and grouping equipment by category.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

BODY_WEIGHT = "Body Weight"
UNCATEGORIZED = "Uncategorized"
UNKNOWN_MEMBER = "Unknown Member"
UNKNOWN_EQUIPMENT = "Unknown Equipment"


@dataclass(frozen=True)
class WorkoutStats:
    """Totals over the exercise logs of one workout."""

    exercises: int
    total_sets: int
    total_reps: int
    # weight x sets x reps, summed over logs that have a weight
    total_volume_lbs: float

    def summary(self) -> str:
        return (
            f"{self.exercises} exercises, {self.total_sets} sets, "
            f"{self.total_reps} reps, {self.total_volume_lbs:,.1f} lbs volume"
        )


def workout_stats(exercise_logs: Iterable[dict[str, Any]]) -> WorkoutStats:
    logs = list(exercise_logs)
    return WorkoutStats(
        exercises=len(logs),
        total_sets=sum(log["sets"] for log in logs),
        total_reps=sum(log["sets"] * log["repetitions"] for log in logs),
        total_volume_lbs=sum(
            log["weight_lbs"] * log["sets"] * log["repetitions"]
            for log in logs
            if log.get("weight_lbs")
        ),
    )


def names_by_id(records: Iterable[dict[str, Any]]) -> dict[int, str]:
    return {record["id"]: record["name"] for record in records}


def member_name(member_id: int, members: dict[int, str]) -> str:
    return members.get(member_id, UNKNOWN_MEMBER)


def equipment_name(equipment_id: int | None, equipment: dict[int, str]) -> str:
    """Name of the equipment used, or "Body Weight" when none was."""
    if equipment_id is None:
        return BODY_WEIGHT
    return equipment.get(equipment_id, UNKNOWN_EQUIPMENT)


def group_by_category(items: Iterable[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
    """
    Group equipment by category, alphabetically, with "Uncategorized" last.

    Items keep their API order inside each group.
    """
    groups: dict[str, list[dict[str, Any]]] = {}
    for item in items:
        groups.setdefault(item.get("category") or UNCATEGORIZED, []).append(item)
    return dict(
        sorted(groups.items(), key=lambda group: (group[0] == UNCATEGORIZED, group[0].lower()))
    )
