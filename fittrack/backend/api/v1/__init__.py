"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from fittrack.backend.api.v1.endpoints import (
    equipment,
    exercise_logs,
    family_members,
    workouts,
)

router = APIRouter()

router.include_router(family_members.router, prefix="/family-members", tags=["family-members"])
router.include_router(equipment.router, prefix="/equipment", tags=["equipment"])
router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
router.include_router(exercise_logs.router, prefix="/exercise-logs", tags=["exercise-logs"])
