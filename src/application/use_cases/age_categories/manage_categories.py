from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.age_category import AgeCategory
from src.domain.value_objects.production_status import ProductionStatus
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class AgeCategoryInput:
    name: str
    min_age_months: int
    production_status: ProductionStatus
    max_age_months: int | None = None
    sex: str | None = None
    allowed_statuses: list[ProductionStatus] = field(default_factory=list)
    description: str | None = None
    sort_order: int = 0


def ensure_can_manage(role: Role) -> None:
    if not role.can_manage_catalogs():
        raise PermissionDenied("Role not allowed to manage age categories")


def _as_values(payload: AgeCategoryInput) -> dict:
    return {
        "name": payload.name,
        "min_age_months": payload.min_age_months,
        "max_age_months": payload.max_age_months,
        "production_status": ProductionStatus(payload.production_status).value,
        "sex": payload.sex,
        "allowed_statuses": [ProductionStatus(s).value for s in payload.allowed_statuses],
        "description": payload.description,
        "sort_order": payload.sort_order,
    }


async def list_categories(uow: UnitOfWork, farm_id: UUID) -> list[AgeCategory]:
    return await uow.age_categories.list_for_farm(farm_id)


async def create(
    uow: UnitOfWork, farm_id: UUID, role: Role, payload: AgeCategoryInput
) -> AgeCategory:
    ensure_can_manage(role)
    try:
        category = AgeCategory.create(farm_id=farm_id, **_as_values(payload))
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    created = await uow.age_categories.add(category)
    await uow.commit()
    return created


async def update(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    category_id: UUID,
    payload: AgeCategoryInput,
) -> AgeCategory:
    ensure_can_manage(role)
    if payload.max_age_months is not None and payload.max_age_months < payload.min_age_months:
        raise ValidationError("max_age_months must be >= min_age_months")
    updated = await uow.age_categories.update(farm_id, category_id, _as_values(payload))
    if updated is None:
        raise NotFound("Age category not found")
    await uow.commit()
    return updated


async def delete(uow: UnitOfWork, farm_id: UUID, role: Role, category_id: UUID) -> None:
    ensure_can_manage(role)
    deleted = await uow.age_categories.delete(farm_id, category_id)
    if not deleted:
        raise NotFound("Age category not found")
    await uow.commit()
