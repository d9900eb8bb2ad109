from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.animals.calculate_production_status import derive_for_farm
from src.application.use_cases.settings import get_settings
from src.domain.models.animal import Animal
from src.domain.models.farm_settings import BreedingSettings, HealthSettings, TaggingSettings
from src.domain.models.health_record import HealthRecord
from src.domain.services import breeding_calendar
from src.domain.services.auto_health_record import (
    build_auto_record,
    needs_auto_record,
    record_type_choices,
)
from src.domain.services.lifecycle import (
    StatusDerivation,
    ensure_status_requirements,
    valid_statuses_for_sex,
)
from src.domain.services.tag_format import format_tag
from src.domain.value_objects.health import HealthRecordType, HealthStatus
from src.domain.value_objects.production_status import AnimalSource, ProductionStatus, Sex
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)

# Gives up looking for a free generated tag after this many collisions
MAX_TAG_ATTEMPTS = 1000


@dataclass(slots=True)
class CreateAnimalInput:
    sex: Sex
    tag: str | None = None
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    source: AnimalSource = AnimalSource.NEWBORN_CALF
    production_status: ProductionStatus | None = None
    override_status: bool = False
    health_status: HealthStatus = HealthStatus.HEALTHY
    mother_id: UUID | None = None
    purchase_date: date | None = None
    service_date: date | None = None
    expected_calving_date: date | None = None
    notes: str | None = None


@dataclass(slots=True)
class CreateAnimalOutput:
    animal: Animal
    health_record: HealthRecord | None = None
    requires_record_type_selection: bool = False
    available_record_types: list[HealthRecordType] = field(default_factory=list)
    derivation: StatusDerivation | None = None


def ensure_can_create(role: Role) -> None:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create animals")


async def _resolve_tag(uow: UnitOfWork, farm_id: UUID, requested: str | None) -> str:
    if requested:
        tag = requested.strip()
        if await uow.animals.get_by_tag(farm_id, tag):
            raise ConflictError(f"Tag {tag} is already in use")
        return tag

    tagging = await get_settings.execute(uow, farm_id, TaggingSettings)
    if not tagging.auto_generate:
        raise ValidationError("Tag is required when automatic tagging is disabled")
    number = tagging.next_number
    for _ in range(MAX_TAG_ATTEMPTS):
        tag = format_tag(tagging.prefix, number, tagging.number_padding)
        number += 1
        if not await uow.animals.get_by_tag(farm_id, tag):
            tagging.next_number = number
            await uow.farm_settings.save(tagging)
            return tag
    raise ConflictError("Could not find a free tag number; adjust tagging settings")


async def _resolve_status(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    payload: CreateAnimalInput,
    today: date,
) -> tuple[ProductionStatus, StatusDerivation | None]:
    derivation = None
    if payload.birth_date is not None:
        derivation = await derive_for_farm(uow, farm_id, payload.birth_date, payload.sex, today)

    if payload.production_status is None:
        if derivation is None:
            raise ValidationError("Production status is required when birth date is unknown")
        return derivation.status, derivation

    status = ProductionStatus(payload.production_status)
    if status not in valid_statuses_for_sex(payload.sex):
        raise ValidationError(f"Status {status.value} is not valid for {Sex(payload.sex).value} animals")
    if derivation is not None and not derivation.allows(status):
        if not payload.override_status:
            raise ValidationError(
                f"Status {status.value} is not allowed at {derivation.age_months} months",
                details={"allowed_statuses": sorted(s.value for s in derivation.allowed_statuses)},
            )
        if not role.can_override_status():
            raise PermissionDenied("Role not allowed to override production status")
        logger.info(
            "Production status override to %s at %s months on farm %s",
            status.value,
            derivation.age_months,
            farm_id,
        )
    return status, derivation


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    payload: CreateAnimalInput,
    today: date,
) -> CreateAnimalOutput:
    ensure_can_create(role)
    status, derivation = await _resolve_status(uow, farm_id, role, payload, today)

    expected_calving = payload.expected_calving_date
    dry_off = None
    if status is ProductionStatus.SERVED and payload.service_date is not None:
        breeding = await get_settings.execute(uow, farm_id, BreedingSettings)
        if expected_calving is None:
            expected_calving = breeding_calendar.expected_calving_date(payload.service_date, breeding)
        dry_off = breeding_calendar.dry_off_date(payload.service_date, breeding)
    try:
        ensure_status_requirements(status, expected_calving)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    if payload.mother_id is not None:
        mother = await uow.animals.get(farm_id, payload.mother_id)
        if mother is None:
            raise NotFound("Mother not found")
        if mother.sex != Sex.FEMALE.value:
            raise ValidationError("Mother must be a female animal")

    tag = await _resolve_tag(uow, farm_id, payload.tag)
    animal = Animal.create(
        farm_id=farm_id,
        tag=tag,
        sex=Sex(payload.sex).value,
        production_status=status.value,
        name=payload.name,
        breed=payload.breed,
        birth_date=payload.birth_date,
        source=AnimalSource(payload.source).value,
        health_status=HealthStatus(payload.health_status).value,
        mother_id=payload.mother_id,
        purchase_date=payload.purchase_date,
        notes=payload.notes,
        service_date=payload.service_date,
        expected_calving_date=expected_calving,
        dry_off_date=dry_off,
    )
    created = await uow.animals.add(animal)

    output = CreateAnimalOutput(animal=created, derivation=derivation)
    if needs_auto_record(created.health_status):
        health = await get_settings.execute(uow, farm_id, HealthSettings)
        if health.auto_generate_records:
            record = build_auto_record(created, today, health.default_follow_up_days)
            record.created_by = actor_user_id
            output.health_record = await uow.health_records.add(record)
            output.animal = (
                await uow.animals.update(
                    farm_id, created.id, {"auto_health_record_id": record.id}
                )
                or created
            )
            choices = record_type_choices(created.health_status)
            output.requires_record_type_selection = bool(choices)
            output.available_record_types = choices

    await uow.commit()
    logger.info("Animal %s registered on farm %s as %s", tag, farm_id, status.value)
    return output
