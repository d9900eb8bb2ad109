from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.errors import NotFound
from src.application.use_cases.health import (
    create_follow_up,
    create_health_record,
    delete_health_record,
    list_health_records,
    update_health_record,
)
from src.domain.value_objects.health import HealthRecordType
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_today, get_uow
from src.interfaces.http.schemas.health_records import (
    FollowUpCreate,
    FollowUpRelationResponse,
    FollowUpResponse,
    HealthRecordCreate,
    HealthRecordCreateResponse,
    HealthRecordDeleteResponse,
    HealthRecordResponse,
    HealthRecordUpdate,
)

router = APIRouter(prefix="/health/records", tags=["health"])


@router.get("/", response_model=list[HealthRecordResponse])
async def list_records(
    animal_id: UUID | None = None,
    record_type: HealthRecordType | None = None,
    is_resolved: bool | None = None,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[HealthRecordResponse]:
    records = await list_health_records.execute(
        uow,
        context.farm_id,
        animal_id=animal_id,
        record_type=record_type.value if record_type else None,
        is_resolved=is_resolved,
        limit=limit,
        offset=offset,
    )
    return [HealthRecordResponse.model_validate(r) for r in records]


@router.post("/", response_model=HealthRecordCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: HealthRecordCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> HealthRecordCreateResponse:
    result = await create_health_record.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        create_health_record.CreateHealthRecordInput(**payload.model_dump()),
        today,
    )
    return HealthRecordCreateResponse(
        health_record=HealthRecordResponse.model_validate(result.health_record),
        health_status=result.health_status,
    )


@router.get("/{record_id}", response_model=HealthRecordResponse)
async def get_record(
    record_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordResponse:
    record = await uow.health_records.get(context.farm_id, record_id)
    if record is None:
        raise NotFound("Health record not found")
    return HealthRecordResponse.model_validate(record)


@router.put("/{record_id}", response_model=HealthRecordResponse)
async def update_record(
    record_id: UUID,
    payload: HealthRecordUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> HealthRecordResponse:
    record = await update_health_record.execute(
        uow,
        context.farm_id,
        context.role,
        record_id,
        update_health_record.UpdateHealthRecordInput(**payload.model_dump()),
        today,
    )
    return HealthRecordResponse.model_validate(record)


@router.delete("/{record_id}", response_model=HealthRecordDeleteResponse)
async def delete_record(
    record_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthRecordDeleteResponse:
    result = await delete_health_record.execute(uow, context.farm_id, context.role, record_id)
    return HealthRecordDeleteResponse(
        deleted_record_ids=result.deleted_record_ids, health_status=result.health_status
    )


@router.post(
    "/{record_id}/follow-up",
    response_model=FollowUpResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record_follow_up(
    record_id: UUID,
    payload: FollowUpCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> FollowUpResponse:
    result = await create_follow_up.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        record_id,
        create_follow_up.FollowUpOutcome(**payload.model_dump()),
        today,
    )
    return FollowUpResponse(
        follow_up=HealthRecordResponse.model_validate(result.follow_up),
        relation=FollowUpRelationResponse.model_validate(result.relation),
        resolved_record_ids=result.resolved_record_ids,
        health_status=result.health_status,
        health_status_updated=result.health_status_updated,
    )
