from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.calculate_production_status import derive_for_farm
from src.domain.models.animal import Animal
from src.domain.services.lifecycle import reconcile_status, valid_statuses_for_sex
from src.domain.value_objects.production_status import ProductionStatus, Sex
from src.domain.value_objects.role import Role

_PLAIN_FIELDS = ("name", "breed", "mother_id", "purchase_date", "notes", "source")


@dataclass(slots=True)
class UpdateAnimalInput:
    version: int
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    sex: Sex | None = None
    source: str | None = None
    mother_id: UUID | None = None
    purchase_date: date | None = None
    notes: str | None = None


def ensure_can_update(role: Role) -> None:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update animals")


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    animal_id: UUID,
    payload: UpdateAnimalInput,
    today: date,
) -> Animal:
    ensure_can_update(role)
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.animals.get(farm_id, animal_id)
    if existing is None:
        raise NotFound("Animal not found")
    if existing.is_released:
        raise ValidationError("Released animals cannot be edited")
    if existing.version != payload.version:
        raise ConflictError("Version mismatch while updating animal")

    data: dict = {}
    for field_name in _PLAIN_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if payload.mother_id is not None and payload.mother_id == animal_id:
        raise ValidationError("An animal cannot be its own mother")

    birth_date = payload.birth_date or existing.birth_date
    sex = Sex(payload.sex) if payload.sex is not None else Sex(existing.sex)
    lifecycle_changed = (
        payload.birth_date is not None and payload.birth_date != existing.birth_date
    ) or sex.value != existing.sex
    if lifecycle_changed:
        data["birth_date"] = birth_date
        data["sex"] = sex.value
        if birth_date is not None:
            derivation = await derive_for_farm(uow, farm_id, birth_date, sex, today)
            status = reconcile_status(existing.production_status, derivation)
        elif ProductionStatus(existing.production_status) in valid_statuses_for_sex(sex):
            status = ProductionStatus(existing.production_status)
        else:
            raise ValidationError(
                f"Status {existing.production_status} is not valid for {sex.value} animals"
            )
        data["production_status"] = status.value

    if not data:
        return existing
    updated = await uow.animals.update(farm_id, animal_id, data, expected_version=payload.version)
    if updated is None:
        raise ConflictError("Version mismatch while updating animal")
    await uow.commit()
    return updated
