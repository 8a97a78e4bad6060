"""
Exercise Logs API Endpoints.
"""

from fastapi import APIRouter

from fittrack.backend.core.dependencies import DbSession, RequestId
from fittrack.backend.schemas.base import ApiResponse, ResponseMetadata
from fittrack.backend.schemas.exercise_log import (
    ExerciseLogCreate,
    ExerciseLogResponse,
    ExerciseLogUpdate,
)
from fittrack.backend.services.exercise_log import ExerciseLogService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[ExerciseLogResponse],
    status_code=201,
    summary="Log an exercise",
    description="Add an exercise to an existing workout, optionally on registered equipment.",
)
async def create_exercise_log(
    data: ExerciseLogCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[ExerciseLogResponse]:
    service = ExerciseLogService(db)
    log = await service.create_exercise_log(data)
    return ApiResponse(
        data=ExerciseLogResponse.model_validate(log),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{log_id}",
    response_model=ApiResponse[ExerciseLogResponse],
    summary="Get an exercise log",
)
async def get_exercise_log(
    log_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[ExerciseLogResponse]:
    service = ExerciseLogService(db)
    log = await service.get_exercise_log(log_id)
    return ApiResponse(
        data=ExerciseLogResponse.model_validate(log),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{log_id}",
    response_model=ApiResponse[ExerciseLogResponse],
    summary="Update an exercise log",
    description="Only provided fields are updated. The owning workout cannot change.",
)
async def update_exercise_log(
    log_id: int,
    data: ExerciseLogUpdate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[ExerciseLogResponse]:
    service = ExerciseLogService(db)
    log = await service.update_exercise_log(log_id, data)
    return ApiResponse(
        data=ExerciseLogResponse.model_validate(log),
        metadata=ResponseMetadata(request_id=request_id),
    )
