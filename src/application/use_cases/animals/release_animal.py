from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.animal_release import AnimalRelease
from src.domain.value_objects.production_status import AnimalStatus, ReleaseReason
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReleaseAnimalInput:
    release_reason: ReleaseReason
    release_date: date
    notes: str
    sale_price: Decimal | None = None
    buyer_info: str | None = None
    death_cause: str | None = None
    transfer_location: str | None = None


@dataclass(slots=True)
class ReleaseAnimalOutput:
    animal: Animal
    release: AnimalRelease


def _snapshot(animal: Animal) -> dict:
    return {
        "tag": animal.tag,
        "name": animal.name,
        "breed": animal.breed,
        "sex": animal.sex,
        "birth_date": animal.birth_date.isoformat() if animal.birth_date else None,
        "production_status": animal.production_status,
        "health_status": animal.health_status,
        "mother_id": str(animal.mother_id) if animal.mother_id else None,
        "version": animal.version,
    }


def _validate(payload: ReleaseAnimalInput, today: date) -> None:
    if not payload.notes or not payload.notes.strip():
        raise ValidationError("Release notes are required")
    if payload.release_date > today:
        raise ValidationError("Release date cannot be in the future")
    reason = ReleaseReason(payload.release_reason)
    if reason is ReleaseReason.SOLD and payload.sale_price is not None and payload.sale_price < 0:
        raise ValidationError("Sale price must be >= 0")
    if reason is ReleaseReason.DIED and not payload.death_cause:
        raise ValidationError("Cause of death is required")
    if reason is ReleaseReason.TRANSFERRED and not payload.transfer_location:
        raise ValidationError("Transfer location is required")


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    animal_id: UUID,
    payload: ReleaseAnimalInput,
    today: date,
) -> ReleaseAnimalOutput:
    """Retire an animal from the active herd; the row itself is kept."""
    if not role.can_release():
        raise PermissionDenied("Role not allowed to release animals")
    _validate(payload, today)
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if animal.is_released:
        raise ConflictError("Animal has already been released")

    reason = ReleaseReason(payload.release_reason)
    release = AnimalRelease.create(
        farm_id=farm_id,
        animal_id=animal_id,
        release_reason=reason.value,
        release_date=payload.release_date,
        notes=payload.notes.strip(),
        sale_price=payload.sale_price,
        buyer_info=payload.buyer_info,
        death_cause=payload.death_cause,
        transfer_location=payload.transfer_location,
        animal_data=_snapshot(animal),
        released_by=actor_user_id,
    )
    saved = await uow.animal_releases.add(release)
    updated = await uow.animals.update(
        farm_id,
        animal_id,
        {
            "status": AnimalStatus.RELEASED.value,
            "release_date": payload.release_date,
            "release_reason": reason.value,
        },
        expected_version=animal.version,
    )
    if updated is None:
        raise ConflictError("Animal changed while being released")
    await uow.commit()
    logger.info("Animal %s released from farm %s (%s)", animal.tag, farm_id, reason.value)
    return ReleaseAnimalOutput(animal=updated, release=saved)
