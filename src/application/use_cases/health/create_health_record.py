from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.health import refresh_health_status
from src.domain.models.health_record import HealthRecord
from src.domain.value_objects.health import HealthRecordType, HealthStatus, Severity
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateHealthRecordInput:
    animal_id: UUID
    record_type: HealthRecordType
    record_date: date
    description: str
    severity: Severity | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    notes: str | None = None
    medication: str | None = None
    symptoms: str | None = None
    treatment: str | None = None
    next_due_date: date | None = None
    root_checkup_id: UUID | None = None


@dataclass(slots=True)
class CreateHealthRecordOutput:
    health_record: HealthRecord
    health_status: HealthStatus | None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    payload: CreateHealthRecordInput,
    today: date,
) -> CreateHealthRecordOutput:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create health records")
    if not payload.description or not payload.description.strip():
        raise ValidationError("Description is required")
    if payload.record_date > today:
        raise ValidationError("Record date cannot be in the future")
    if payload.cost is not None and payload.cost < 0:
        raise ValidationError("Cost must be >= 0")
    animal = await uow.animals.get(farm_id, payload.animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    if payload.root_checkup_id is not None:
        root = await uow.health_records.get(farm_id, payload.root_checkup_id)
        if root is None or root.animal_id != payload.animal_id:
            raise ValidationError("Root checkup must be a record of the same animal")

    record = HealthRecord.create(
        farm_id=farm_id,
        animal_id=payload.animal_id,
        record_type=HealthRecordType(payload.record_type).value,
        record_date=payload.record_date,
        description=payload.description.strip(),
        severity=Severity(payload.severity).value if payload.severity else None,
        veterinarian=payload.veterinarian,
        cost=payload.cost,
        notes=payload.notes,
        medication=payload.medication,
        symptoms=payload.symptoms,
        treatment=payload.treatment,
        next_due_date=payload.next_due_date,
        root_checkup_id=payload.root_checkup_id,
        created_by=actor_user_id,
    )
    created = await uow.health_records.add(record)
    await uow.commit()
    status = await refresh_health_status.best_effort(uow, farm_id, payload.animal_id)
    return CreateHealthRecordOutput(health_record=created, health_status=status)
