from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.calculate_production_status import derive_for_farm
from src.application.use_cases.settings import get_settings
from src.domain.models.animal import Animal
from src.domain.models.farm_settings import BreedingSettings
from src.domain.services import breeding_calendar
from src.domain.services.lifecycle import (
    check_dry_off_transition,
    ensure_status_requirements,
    valid_statuses_for_sex,
)
from src.domain.value_objects.production_status import ProductionStatus
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateProductionStatusInput:
    production_status: ProductionStatus
    override_status: bool = False
    service_date: date | None = None
    expected_calving_date: date | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    animal_id: UUID,
    payload: UpdateProductionStatusInput,
    today: date,
) -> Animal:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update animals")
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if animal.is_released:
        raise ValidationError("Released animals cannot change production status")

    new_status = ProductionStatus(payload.production_status)
    if new_status not in valid_statuses_for_sex(animal.sex):
        raise ValidationError(f"Status {new_status.value} is not valid for {animal.sex} animals")
    if animal.birth_date is not None:
        derivation = await derive_for_farm(uow, farm_id, animal.birth_date, animal.sex, today)
        if not derivation.allows(new_status):
            if not payload.override_status:
                raise ValidationError(
                    f"Status {new_status.value} is not allowed at {derivation.age_months} months"
                )
            if not role.can_override_status():
                raise PermissionDenied("Role not allowed to override production status")
            logger.info("Production status override to %s for animal %s", new_status.value, animal_id)

    data: dict = {"production_status": new_status.value}
    try:
        check_dry_off_transition(animal.production_status, new_status)
        if new_status is ProductionStatus.DRY:
            expected = payload.expected_calving_date or animal.expected_calving_date
            ensure_status_requirements(new_status, expected)
            data.update(
                {"dry_off_date": today, "service_date": None, "expected_calving_date": expected}
            )
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    if new_status is ProductionStatus.LACTATING:
        # Calving closes the breeding cycle
        data.update({"service_date": None, "expected_calving_date": None, "dry_off_date": None})

    if new_status is ProductionStatus.SERVED:
        service_date = payload.service_date or today
        breeding = await get_settings.execute(uow, farm_id, BreedingSettings)
        data["service_date"] = service_date
        data["expected_calving_date"] = payload.expected_calving_date or (
            breeding_calendar.expected_calving_date(service_date, breeding)
        )
        data["dry_off_date"] = breeding_calendar.dry_off_date(service_date, breeding)

    updated = await uow.animals.update(farm_id, animal_id, data)
    if updated is None:
        raise NotFound("Animal not found")
    await uow.commit()
    return updated
