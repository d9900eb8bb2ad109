from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.health import refresh_health_status
from src.domain.models.health_record import HealthRecord
from src.domain.services.auto_health_record import completes_auto_record
from src.domain.value_objects.health import CompletionStatus, HealthRecordType, Severity
from src.domain.value_objects.role import Role

_FIELDS = (
    "record_type",
    "record_date",
    "description",
    "severity",
    "veterinarian",
    "cost",
    "notes",
    "medication",
    "symptoms",
    "treatment",
    "next_due_date",
    "is_resolved",
    "resolved_date",
)


@dataclass(slots=True)
class UpdateHealthRecordInput:
    record_type: HealthRecordType | None = None
    record_date: date | None = None
    description: str | None = None
    severity: Severity | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    notes: str | None = None
    medication: str | None = None
    symptoms: str | None = None
    treatment: str | None = None
    next_due_date: date | None = None
    is_resolved: bool | None = None
    resolved_date: date | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    record_id: UUID,
    payload: UpdateHealthRecordInput,
    today: date,
) -> HealthRecord:
    """Patch a record; filling in an auto-generated record marks it completed."""
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update health records")
    existing = await uow.health_records.get(farm_id, record_id)
    if existing is None:
        raise NotFound("Health record not found")

    data: dict = {}
    for field_name in _FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value.value if isinstance(value, Enum) else value
    if "description" in data and not data["description"].strip():
        raise ValidationError("Description cannot be empty")
    if data.get("is_resolved") and "resolved_date" not in data:
        data["resolved_date"] = today
    if data.get("is_resolved") is False:
        data["resolved_date"] = None
    if existing.is_auto_generated and completes_auto_record(data):
        data["is_auto_generated"] = False
        data["completion_status"] = CompletionStatus.COMPLETED.value
    if not data:
        return existing

    updated = await uow.health_records.update(farm_id, record_id, data)
    if updated is None:
        raise NotFound("Health record not found")
    await uow.commit()
    if {"record_type", "severity", "is_resolved"} & data.keys():
        await refresh_health_status.best_effort(uow, farm_id, existing.animal_id)
    return updated
