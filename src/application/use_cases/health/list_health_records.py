from __future__ import annotations

from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.health_record import HealthRecord


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    animal_id: UUID | None = None,
    record_type: str | None = None,
    is_resolved: bool | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[HealthRecord]:
    if limit <= 0 or limit > 500:
        raise ValidationError("limit must be between 1 and 500")
    return await uow.health_records.list(
        farm_id,
        animal_id=animal_id,
        record_type=record_type,
        is_resolved=is_resolved,
        limit=limit,
        offset=offset,
    )
