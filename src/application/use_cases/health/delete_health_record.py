from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.health import refresh_health_status
from src.domain.value_objects.health import HealthStatus
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeleteHealthRecordResult:
    deleted_record_ids: list[UUID]
    health_status: HealthStatus | None


async def _collect_follow_ups(uow: UnitOfWork, farm_id: UUID, record_id: UUID) -> list[UUID]:
    """Follow-ups of the record, and of those follow-ups, at any depth."""
    seen = {record_id}
    collected: list[UUID] = []
    pending = [record_id]
    while pending:
        current = pending.pop()
        for relation in await uow.health_follow_ups.list_for_original(farm_id, current):
            child = relation.follow_up_record_id
            if child in seen:
                continue
            seen.add(child)
            collected.append(child)
            pending.append(child)
    return collected


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    record_id: UUID,
) -> DeleteHealthRecordResult:
    """Hard delete a record together with its follow-ups and relation rows."""
    if not role.can_update():
        raise PermissionDenied("Role not allowed to delete health records")
    record = await uow.health_records.get(farm_id, record_id)
    if record is None:
        raise NotFound("Health record not found")

    follow_up_ids = await _collect_follow_ups(uow, farm_id, record_id)

    await uow.health_follow_ups.delete_touching(farm_id, [record_id, *follow_up_ids])
    if follow_up_ids:
        await uow.health_records.delete_many(farm_id, follow_up_ids)
    await uow.health_records.delete_many(farm_id, [record_id])

    if record.is_auto_generated:
        animal = await uow.animals.get(farm_id, record.animal_id)
        if animal is not None and animal.auto_health_record_id == record_id:
            await uow.animals.update(farm_id, animal.id, {"auto_health_record_id": None})
    await uow.commit()
    logger.info(
        "Deleted health record %s with %d follow-up(s)", record_id, len(follow_up_ids)
    )

    status = await refresh_health_status.best_effort(uow, farm_id, record.animal_id)
    return DeleteHealthRecordResult(
        deleted_record_ids=[record_id, *follow_up_ids], health_status=status
    )
