from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.health import CompletionStatus


@dataclass(slots=True)
class HealthRecord:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    record_type: str  # HealthRecordType
    record_date: date
    description: str

    # Common fields
    severity: str | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    notes: str | None = None
    medication: str | None = None
    symptoms: str | None = None
    treatment: str | None = None
    next_due_date: date | None = None

    # Resolution state
    is_resolved: bool = False
    resolved_date: date | None = None

    # Ancestry: the general checkup this record was derived from
    root_checkup_id: UUID | None = None
    is_follow_up: bool = False

    # Registration-time synthesis
    is_auto_generated: bool = False
    completion_status: str = CompletionStatus.COMPLETED.value
    original_health_status: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    def __post_init__(self) -> None:
        if self.root_checkup_id is not None and self.root_checkup_id == self.id:
            raise ValueError("A health record cannot be its own root checkup")

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        animal_id: UUID,
        record_type: str,
        record_date: date,
        description: str,
        severity: str | None = None,
        veterinarian: str | None = None,
        cost: Decimal | None = None,
        notes: str | None = None,
        medication: str | None = None,
        symptoms: str | None = None,
        treatment: str | None = None,
        next_due_date: date | None = None,
        root_checkup_id: UUID | None = None,
        is_follow_up: bool = False,
        is_auto_generated: bool = False,
        completion_status: str = CompletionStatus.COMPLETED.value,
        original_health_status: str | None = None,
        created_by: UUID | None = None,
    ) -> HealthRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            record_type=record_type,
            record_date=record_date,
            description=description,
            severity=severity,
            veterinarian=veterinarian,
            cost=cost,
            notes=notes,
            medication=medication,
            symptoms=symptoms,
            treatment=treatment,
            next_due_date=next_due_date,
            root_checkup_id=root_checkup_id,
            is_follow_up=is_follow_up,
            is_auto_generated=is_auto_generated,
            completion_status=completion_status,
            original_health_status=original_health_status,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def mark_resolved(self, resolved_on: date) -> None:
        self.is_resolved = True
        self.resolved_date = resolved_on
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
