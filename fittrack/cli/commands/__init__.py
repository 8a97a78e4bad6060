"""
CLI Commands.

Organized by domain/feature area.
"""

from fittrack.cli.commands.db import app as db_app
from fittrack.cli.commands.equipment import app as equipment_app
from fittrack.cli.commands.exercises import app as exercises_app
from fittrack.cli.commands.health import app as health_app
from fittrack.cli.commands.members import app as members_app
from fittrack.cli.commands.server import app as server_app
from fittrack.cli.commands.workouts import app as workouts_app

__all__ = [
    "db_app",
    "equipment_app",
    "exercises_app",
    "health_app",
    "members_app",
    "server_app",
    "workouts_app",
]
