from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.errors import NotFound
from src.application.use_cases.settings import get_settings, update_settings
from src.domain.models.farm_settings import (
    BreedingSettings,
    FinancialSettings,
    HealthSettings,
    TaggingSettings,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.farm_settings import (
    BreedingSettingsPayload,
    BreedingSettingsResponse,
    FinancialSettingsPayload,
    FinancialSettingsResponse,
    HealthSettingsPayload,
    HealthSettingsResponse,
    TaggingSettingsPayload,
    TaggingSettingsResponse,
)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/breeding", response_model=BreedingSettingsResponse)
async def get_breeding_settings(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> BreedingSettingsResponse:
    current = await get_settings.execute(uow, context.farm_id, BreedingSettings)
    return BreedingSettingsResponse.model_validate(current)


@router.put("/breeding", response_model=BreedingSettingsResponse)
async def update_breeding_settings(
    payload: BreedingSettingsPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> BreedingSettingsResponse:
    saved = await update_settings.execute(
        uow, context.farm_id, context.role, BreedingSettings, payload.model_dump()
    )
    return BreedingSettingsResponse.model_validate(saved)


@router.get("/health", response_model=HealthSettingsResponse)
async def get_health_settings(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> HealthSettingsResponse:
    current = await get_settings.execute(uow, context.farm_id, HealthSettings)
    return HealthSettingsResponse.model_validate(current)


@router.put("/health", response_model=HealthSettingsResponse)
async def update_health_settings(
    payload: HealthSettingsPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> HealthSettingsResponse:
    saved = await update_settings.execute(
        uow, context.farm_id, context.role, HealthSettings, payload.model_dump()
    )
    return HealthSettingsResponse.model_validate(saved)


@router.get("/financial", response_model=FinancialSettingsResponse)
async def get_financial_settings(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> FinancialSettingsResponse:
    current = await get_settings.execute(uow, context.farm_id, FinancialSettings)
    return FinancialSettingsResponse.model_validate(current)


@router.put("/financial", response_model=FinancialSettingsResponse)
async def update_financial_settings(
    payload: FinancialSettingsPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> FinancialSettingsResponse:
    buyer_id = payload.default_buyer_id
    if buyer_id is not None and await uow.buyers.get(context.farm_id, buyer_id) is None:
        raise NotFound("Default buyer not found")
    saved = await update_settings.execute(
        uow, context.farm_id, context.role, FinancialSettings, payload.model_dump()
    )
    return FinancialSettingsResponse.model_validate(saved)


@router.get("/tagging", response_model=TaggingSettingsResponse)
async def get_tagging_settings(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> TaggingSettingsResponse:
    current = await get_settings.execute(uow, context.farm_id, TaggingSettings)
    return TaggingSettingsResponse.model_validate(current)


@router.put("/tagging", response_model=TaggingSettingsResponse)
async def update_tagging_settings(
    payload: TaggingSettingsPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> TaggingSettingsResponse:
    saved = await update_settings.execute(
        uow, context.farm_id, context.role, TaggingSettings, payload.model_dump()
    )
    return TaggingSettingsResponse.model_validate(saved)
