from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.animals import (
    calculate_production_status,
    create_animal,
    get_animal,
    list_animals,
    preview_tag,
    release_animal,
    update_animal,
    update_production_status,
)
from src.domain.value_objects.health import HealthStatus
from src.domain.value_objects.production_status import AnimalStatus, ProductionStatus
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_today, get_uow
from src.interfaces.http.schemas.animals import (
    AgeCategorySummary,
    AnimalCreate,
    AnimalCreateResponse,
    AnimalReleaseResponse,
    AnimalResponse,
    AnimalsPage,
    AnimalUpdate,
    ProductionStatusUpdate,
    ReleaseRequest,
    ReleaseResponse,
    StatusCalculationRequest,
    StatusCalculationResponse,
    StatusRecalculationResponse,
    TagPreviewResponse,
)
from src.interfaces.http.schemas.health_records import HealthRecordResponse

router = APIRouter(prefix="/animals", tags=["animals"])


def _sorted_values(statuses) -> list[ProductionStatus]:
    return sorted(statuses, key=lambda s: list(ProductionStatus).index(s))


@router.get("/", response_model=AnimalsPage)
async def list_animals_endpoint(
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    status_filter: AnimalStatus | None = Query(None, alias="status"),
    production_status: ProductionStatus | None = None,
    health_status: HealthStatus | None = None,
    search: str | None = None,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalsPage:
    result = await list_animals.execute(
        uow,
        context.farm_id,
        limit=limit,
        offset=offset,
        status=status_filter.value if status_filter else None,
        production_status=production_status.value if production_status else None,
        health_status=health_status.value if health_status else None,
        search=search,
    )
    return AnimalsPage(
        items=[AnimalResponse.model_validate(a) for a in result.items],
        total=result.total,
        limit=result.limit,
        offset=result.offset,
    )


@router.post("/", response_model=AnimalCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalCreateResponse:
    result = await create_animal.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        create_animal.CreateAnimalInput(**payload.model_dump()),
        today,
    )
    return AnimalCreateResponse(
        animal=AnimalResponse.model_validate(result.animal),
        health_record=(
            HealthRecordResponse.model_validate(result.health_record)
            if result.health_record
            else None
        ),
        requires_record_type_selection=result.requires_record_type_selection,
        available_record_types=result.available_record_types,
    )


@router.get("/preview-tag", response_model=TagPreviewResponse)
async def preview_tag_endpoint(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> TagPreviewResponse:
    preview = await preview_tag.execute(uow, context.farm_id)
    return TagPreviewResponse(
        tag=preview.tag, examples=preview.examples, auto_generate=preview.auto_generate
    )


@router.post("/calculate-production-status", response_model=StatusCalculationResponse)
async def calculate_status_endpoint(
    payload: StatusCalculationRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> StatusCalculationResponse:
    derivation = await calculate_production_status.execute(
        uow, context.farm_id, payload.birth_date, payload.sex, today
    )
    return StatusCalculationResponse(
        production_status=derivation.status,
        allowed_statuses=_sorted_values(derivation.allowed_statuses),
        overridable=derivation.overridable,
        age_months=derivation.age_months,
        category=(
            AgeCategorySummary.model_validate(derivation.category) if derivation.category else None
        ),
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await get_animal.execute(uow, context.farm_id, animal_id)
    return AnimalResponse.model_validate(animal)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        context.farm_id,
        context.role,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump()),
        today,
    )
    return AnimalResponse.model_validate(animal)


@router.get("/{animal_id}/production-status", response_model=StatusRecalculationResponse)
async def recalculate_status_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> StatusRecalculationResponse:
    result = await calculate_production_status.recalculate(uow, context.farm_id, animal_id, today)
    return StatusRecalculationResponse(
        animal_id=result.animal_id,
        current=result.current,
        calculated=result.calculated,
        should_update=result.should_update,
        allowed_statuses=_sorted_values(result.derivation.allowed_statuses),
        age_months=result.derivation.age_months,
    )


@router.put("/{animal_id}/production-status", response_model=AnimalResponse)
async def update_production_status_endpoint(
    animal_id: UUID,
    payload: ProductionStatusUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalResponse:
    animal = await update_production_status.execute(
        uow,
        context.farm_id,
        context.role,
        animal_id,
        update_production_status.UpdateProductionStatusInput(**payload.model_dump()),
        today,
    )
    return AnimalResponse.model_validate(animal)


@router.post("/{animal_id}/release", response_model=AnimalReleaseResponse)
async def release_animal_endpoint(
    animal_id: UUID,
    payload: ReleaseRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    today: date = Depends(get_today),
) -> AnimalReleaseResponse:
    result = await release_animal.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        animal_id,
        release_animal.ReleaseAnimalInput(**payload.model_dump()),
        today,
    )
    return AnimalReleaseResponse(
        animal=AnimalResponse.model_validate(result.animal),
        release=ReleaseResponse.model_validate(result.release),
    )
