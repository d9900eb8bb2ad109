from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.settings import get_settings
from src.domain.models.farm_settings import BreedingSettings
from src.domain.services.lifecycle import LifecyclePolicy, StatusDerivation, derive_status
from src.domain.value_objects.production_status import ProductionStatus, Sex


@dataclass(slots=True)
class RecalculationResult:
    animal_id: UUID
    current: ProductionStatus
    calculated: ProductionStatus
    should_update: bool
    derivation: StatusDerivation


async def derive_for_farm(
    uow: UnitOfWork, farm_id: UUID, birth_date: date, sex: Sex | str, today: date
) -> StatusDerivation:
    """Derive with the farm's age categories and breeding age."""
    breeding = await get_settings.execute(uow, farm_id, BreedingSettings)
    categories = await uow.age_categories.list_for_farm(farm_id)
    policy = LifecyclePolicy(breeding_age_months=breeding.minimum_breeding_age_months)
    try:
        return derive_status(birth_date, sex, today, categories, policy)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


async def execute(
    uow: UnitOfWork, farm_id: UUID, birth_date: date, sex: Sex | str, today: date
) -> StatusDerivation:
    return await derive_for_farm(uow, farm_id, birth_date, sex, today)


async def recalculate(
    uow: UnitOfWork, farm_id: UUID, animal_id: UUID, today: date
) -> RecalculationResult:
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if animal.birth_date is None:
        raise ValidationError("Animal has no birth date; production status cannot be derived")
    derivation = await derive_for_farm(uow, farm_id, animal.birth_date, animal.sex, today)
    current = ProductionStatus(animal.production_status)
    return RecalculationResult(
        animal_id=animal.id,
        current=current,
        calculated=derivation.status,
        should_update=not derivation.allows(current),
        derivation=derivation,
    )
