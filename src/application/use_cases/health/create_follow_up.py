"""Record the outcome of a treatment and close out what it resolves.

Each step commits on its own. The follow-up record and its relation row are
required: when the relation cannot be written the follow-up record is removed
again and the call fails. Resolving ancestors and refreshing the animal's
health status are best effort; a failure there is logged and reported through
``health_status_updated`` while the follow-up itself is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import InfrastructureError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.health import refresh_health_status
from src.domain.models.health_follow_up import HealthFollowUp
from src.domain.models.health_record import HealthRecord
from src.domain.services.health_resolution import resolution_targets
from src.domain.value_objects.health import (
    FollowUpStatus,
    HealthRecordType,
    HealthStatus,
    TreatmentEffectiveness,
)
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FollowUpOutcome:
    status: FollowUpStatus
    description: str
    record_date: date
    resolved: bool = False
    treatment_effectiveness: TreatmentEffectiveness | None = None
    next_followup_date: date | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    notes: str | None = None
    medication_changes: str | None = None


@dataclass(slots=True)
class FollowUpResult:
    follow_up: HealthRecord
    relation: HealthFollowUp
    resolved_record_ids: list[UUID] = field(default_factory=list)
    health_status: HealthStatus | None = None
    health_status_updated: bool = False


def _validate(outcome: FollowUpOutcome, original: HealthRecord, today: date) -> None:
    if not outcome.description or not outcome.description.strip():
        raise ValidationError("Follow-up description is required")
    if outcome.record_date > today:
        raise ValidationError("Follow-up date cannot be in the future")
    if outcome.record_date < original.record_date:
        raise ValidationError("Follow-up date cannot precede the original record")
    if outcome.next_followup_date is not None and outcome.next_followup_date < outcome.record_date:
        raise ValidationError("Next follow-up date must be on or after the follow-up date")
    if outcome.cost is not None and outcome.cost < 0:
        raise ValidationError("Cost must be >= 0")


def _build_follow_up(
    original: HealthRecord, outcome: FollowUpOutcome, actor_user_id: UUID
) -> HealthRecord:
    record = HealthRecord.create(
        farm_id=original.farm_id,
        animal_id=original.animal_id,
        record_type=HealthRecordType.TREATMENT.value,
        record_date=outcome.record_date,
        description=f"Follow-up: {outcome.description.strip()}",
        veterinarian=outcome.veterinarian,
        cost=outcome.cost,
        notes=f"Original Record: {original.description}\n\nFollow-up Notes: {outcome.notes or ''}",
        medication=outcome.medication_changes,
        next_due_date=outcome.next_followup_date,
        is_follow_up=True,
        created_by=actor_user_id,
    )
    if outcome.resolved:
        # A closing follow-up must not keep the animal flagged on its own
        record.is_resolved = True
        record.resolved_date = outcome.record_date
    return record


async def _discard_follow_up(uow: UnitOfWork, farm_id: UUID, record_id: UUID) -> None:
    await uow.rollback()
    try:
        await uow.health_records.delete_many(farm_id, [record_id])
        await uow.commit()
    except Exception:
        logger.exception("Could not remove orphaned follow-up record %s", record_id)
        await uow.rollback()


async def _resolve_ancestors(
    uow: UnitOfWork, farm_id: UUID, original: HealthRecord, resolved_on: date
) -> list[UUID]:
    parent_id = await uow.health_follow_ups.find_original_of(farm_id, original.id)
    targets = resolution_targets(original.id, original.root_checkup_id, parent_id)
    await uow.health_records.mark_resolved(farm_id, targets, resolved_on)
    await uow.commit()
    return targets


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    original_record_id: UUID,
    outcome: FollowUpOutcome,
    today: date,
) -> FollowUpResult:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to record follow-ups")
    original = await uow.health_records.get(farm_id, original_record_id)
    if original is None:
        raise NotFound("Original health record not found")
    _validate(outcome, original, today)

    follow_up = await uow.health_records.add(_build_follow_up(original, outcome, actor_user_id))
    await uow.commit()

    try:
        relation = await uow.health_follow_ups.add(
            HealthFollowUp.create(
                farm_id=farm_id,
                original_record_id=original.id,
                follow_up_record_id=follow_up.id,
                status=FollowUpStatus(outcome.status).value,
                treatment_effectiveness=(
                    TreatmentEffectiveness(outcome.treatment_effectiveness).value
                    if outcome.treatment_effectiveness
                    else None
                ),
                is_resolved=outcome.resolved,
            )
        )
        await uow.commit()
    except Exception as exc:
        logger.exception("Follow-up relation for record %s could not be created", original.id)
        await _discard_follow_up(uow, farm_id, follow_up.id)
        raise InfrastructureError("Failed to link follow-up to the original record") from exc

    result = FollowUpResult(follow_up=follow_up, relation=relation)
    ancestors_ok = True
    try:
        if outcome.resolved:
            result.resolved_record_ids = await _resolve_ancestors(
                uow, farm_id, original, outcome.record_date
            )
        elif outcome.next_followup_date is not None:
            await uow.health_records.update(
                farm_id, original.id, {"next_due_date": outcome.next_followup_date}
            )
            await uow.commit()
    except Exception:
        ancestors_ok = False
        result.resolved_record_ids = []
        logger.warning(
            "Follow-up %s saved but original record %s was not updated",
            follow_up.id,
            original.id,
            exc_info=True,
        )
        await uow.rollback()

    result.health_status = await refresh_health_status.best_effort(
        uow, farm_id, original.animal_id
    )
    result.health_status_updated = ancestors_ok and result.health_status is not None
    return result
