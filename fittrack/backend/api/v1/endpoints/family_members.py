"""
Family Members API Endpoints.
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
from fittrack.backend.schemas.family_member import (
    FamilyMemberCreate,
    FamilyMemberResponse,
    FamilyMemberUpdate,
)
from fittrack.backend.schemas.workout import WorkoutResponse
from fittrack.backend.services.family_member import FamilyMemberService
from fittrack.backend.services.workout import WorkoutService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[FamilyMemberResponse],
    status_code=201,
    summary="Create a family member",
)
async def create_family_member(
    data: FamilyMemberCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[FamilyMemberResponse]:
    """Create a new family member."""
    service = FamilyMemberService(db)
    member = await service.create_family_member(data)
    return ApiResponse(
        data=FamilyMemberResponse.model_validate(member),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "",
    summary="List family members (paginated)",
)
async def list_family_members(
    db: DbSession,
    request_id: RequestId,
    pagination: PaginationParams = Depends(get_pagination_params),
) -> dict[str, Any]:
    """List family members in the order they were added."""
    service = FamilyMemberService(db)
    members, total = await service.list_family_members(
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return create_paginated_response(
        items=members,
        item_schema=FamilyMemberResponse,
        total=total,
        limit=pagination.limit,
        offset=pagination.offset,
        request_id=request_id,
    )


@router.get(
    "/{member_id}",
    response_model=ApiResponse[FamilyMemberResponse],
    summary="Get a family member",
)
async def get_family_member(
    member_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[FamilyMemberResponse]:
    """Get a family member by ID."""
    service = FamilyMemberService(db)
    member = await service.get_family_member(member_id)
    return ApiResponse(
        data=FamilyMemberResponse.model_validate(member),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{member_id}",
    response_model=ApiResponse[FamilyMemberResponse],
    summary="Update a family member",
    description="Only provided fields are updated. Send null to clear email or age.",
)
async def update_family_member(
    member_id: int,
    data: FamilyMemberUpdate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[FamilyMemberResponse]:
    """Update a family member."""
    service = FamilyMemberService(db)
    member = await service.update_family_member(member_id, data)
    return ApiResponse(
        data=FamilyMemberResponse.model_validate(member),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{member_id}/workouts",
    response_model=ApiResponse[list[WorkoutResponse]],
    summary="List a member's workouts",
    description="All workouts of one family member, newest workout date first.",
)
async def get_workouts_by_member(
    member_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[list[WorkoutResponse]]:
    """Get workouts belonging to a family member."""
    service = WorkoutService(db)
    workouts = await service.get_workouts_by_member(member_id)
    return ApiResponse(
        data=[WorkoutResponse.model_validate(w) for w in workouts],
        metadata=ResponseMetadata(request_id=request_id),
    )
