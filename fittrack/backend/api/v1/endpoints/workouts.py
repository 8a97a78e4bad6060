"""
Workouts API Endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends

from fittrack.backend.core.dependencies import DbSession, RequestId
from fittrack.backend.core.pagination import (
    PaginationParams,
    create_paginated_response,
    get_pagination_params,
)
from fittrack.backend.schemas.base import ApiResponse, ResponseMetadata
from fittrack.backend.schemas.exercise_log import ExerciseLogResponse
from fittrack.backend.schemas.workout import (
    WorkoutCreate,
    WorkoutResponse,
    WorkoutUpdate,
)
from fittrack.backend.services.exercise_log import ExerciseLogService
from fittrack.backend.services.workout import WorkoutService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[WorkoutResponse],
    status_code=201,
    summary="Log a workout",
    description="Create a workout for an existing family member.",
)
async def create_workout(
    data: WorkoutCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[WorkoutResponse]:
    """Create a new workout."""
    service = WorkoutService(db)
    workout = await service.create_workout(data)
    return ApiResponse(
        data=WorkoutResponse.model_validate(workout),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    summary="List workouts (paginated)",
    description="Workouts of every family member, newest workout date first.",
)
async def list_workouts(
    db: DbSession,
    request_id: RequestId,
    pagination: PaginationParams = Depends(get_pagination_params),
) -> dict[str, Any]:
    """List all workouts."""
    service = WorkoutService(db)
    workouts, total = await service.list_workouts(
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return create_paginated_response(
        items=workouts,
        item_schema=WorkoutResponse,
        total=total,
        limit=pagination.limit,
        offset=pagination.offset,
        request_id=request_id,
    )


@router.get(
    "/{workout_id}",
    response_model=ApiResponse[WorkoutResponse],
    summary="Get a workout",
)
async def get_workout(
    workout_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[WorkoutResponse]:
    """Get a workout by ID."""
    service = WorkoutService(db)
    workout = await service.get_workout(workout_id)
    return ApiResponse(
        data=WorkoutResponse.model_validate(workout),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{workout_id}",
    response_model=ApiResponse[WorkoutResponse],
    summary="Update a workout",
    description="Only provided fields are updated. The owning member cannot change.",
)
async def update_workout(
    workout_id: int,
    data: WorkoutUpdate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[WorkoutResponse]:
    """Update a workout."""
    service = WorkoutService(db)
    workout = await service.update_workout(workout_id, data)
    return ApiResponse(
        data=WorkoutResponse.model_validate(workout),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{workout_id}/exercise-logs",
    response_model=ApiResponse[list[ExerciseLogResponse]],
    summary="List a workout's exercises",
)
async def get_exercise_logs_by_workout(
    workout_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[ExerciseLogResponse]]:
    """Get the exercises logged in a workout, in logging order."""
    service = ExerciseLogService(db)
    logs = await service.get_exercise_logs_by_workout(workout_id)
    return ApiResponse(
        data=[ExerciseLogResponse.model_validate(log) for log in logs],
        metadata=ResponseMetadata(request_id=request_id),
    )
