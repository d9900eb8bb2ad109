from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.age_categories import manage_categories
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.age_categories import AgeCategoryPayload, AgeCategoryResponse

router = APIRouter(prefix="/age-categories", tags=["age-categories"])


@router.get("/", response_model=list[AgeCategoryResponse])
async def list_categories(
    context: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> list[AgeCategoryResponse]:
    items = await manage_categories.list_categories(uow, context.farm_id)
    return [AgeCategoryResponse.model_validate(item) for item in items]


@router.post("/", response_model=AgeCategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: AgeCategoryPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AgeCategoryResponse:
    created = await manage_categories.create(
        uow,
        context.farm_id,
        context.role,
        manage_categories.AgeCategoryInput(**payload.model_dump()),
    )
    return AgeCategoryResponse.model_validate(created)


@router.put("/{category_id}", response_model=AgeCategoryResponse)
async def update_category(
    category_id: UUID,
    payload: AgeCategoryPayload,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AgeCategoryResponse:
    updated = await manage_categories.update(
        uow,
        context.farm_id,
        context.role,
        category_id,
        manage_categories.AgeCategoryInput(**payload.model_dump()),
    )
    return AgeCategoryResponse.model_validate(updated)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> Response:
    await manage_categories.delete(uow, context.farm_id, context.role, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
