# SQLAlchemy models package. Importing it registers every table on Base.metadata.
from fittrack.backend.models.base import Base
from fittrack.backend.models.equipment import Equipment
from fittrack.backend.models.exercise_log import ExerciseLog
from fittrack.backend.models.family_member import FamilyMember
from fittrack.backend.models.workout import Workout

__all__ = [
    "Base",
    "Equipment",
    "ExerciseLog",
    "FamilyMember",
    "Workout",
]
