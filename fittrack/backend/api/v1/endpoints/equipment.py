"""
Equipment API Endpoints.
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
from fittrack.backend.schemas.equipment import (
    EquipmentCreate,
    EquipmentResponse,
    EquipmentUpdate,
)
from fittrack.backend.services.equipment import EquipmentService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[EquipmentResponse],
    status_code=201,
    summary="Register equipment",
)
async def create_equipment(
    data: EquipmentCreate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[EquipmentResponse]:
    service = EquipmentService(db)
    equipment = await service.create_equipment(data)
    return ApiResponse(
        data=EquipmentResponse.model_validate(equipment),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get("", summary="List equipment (paginated)")
async def list_equipment(
    db: DbSession,
    request_id: RequestId,
    pagination: PaginationParams = Depends(get_pagination_params),
) -> dict[str, Any]:
    service = EquipmentService(db)
    items, total = await service.list_equipment(
        limit=pagination.limit,
        offset=pagination.offset,
    )
    return create_paginated_response(
        items=items,
        item_schema=EquipmentResponse,
        total=total,
        limit=pagination.limit,
        offset=pagination.offset,
        request_id=request_id,
    )


@router.get(
    "/{equipment_id}",
    response_model=ApiResponse[EquipmentResponse],
    summary="Get equipment",
)
async def get_equipment(
    equipment_id: int,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[EquipmentResponse]:
    service = EquipmentService(db)
    equipment = await service.get_equipment(equipment_id)
    return ApiResponse(
        data=EquipmentResponse.model_validate(equipment),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.patch(
    "/{equipment_id}",
    response_model=ApiResponse[EquipmentResponse],
    summary="Update equipment",
    description="Only provided fields are updated.",
)
async def update_equipment(
    equipment_id: int,
    data: EquipmentUpdate,
    db: DbSession,
    request_id: RequestId,
) -> ApiResponse[EquipmentResponse]:
    service = EquipmentService(db)
    equipment = await service.update_equipment(equipment_id, data)
    return ApiResponse(
        data=EquipmentResponse.model_validate(equipment),
        metadata=ResponseMetadata(request_id=request_id),
    )
