from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.health import HealthStatus
from src.domain.value_objects.production_status import AnimalSource, AnimalStatus


@dataclass(slots=True)
class Animal:
    id: UUID
    farm_id: UUID
    tag: str
    sex: str  # Sex
    production_status: str  # ProductionStatus
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    source: str = AnimalSource.NEWBORN_CALF.value
    health_status: str = HealthStatus.HEALTHY.value
    status: str = AnimalStatus.ACTIVE.value
    mother_id: UUID | None = None
    purchase_date: date | None = None
    notes: str | None = None

    # Breeding fields
    service_date: date | None = None
    expected_calving_date: date | None = None
    dry_off_date: date | None = None

    # Set when registration produced an auto-generated health record
    auto_health_record_id: UUID | None = None

    # Release fields
    release_date: date | None = None
    release_reason: str | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        tag: str,
        sex: str,
        production_status: str,
        name: str | None = None,
        breed: str | None = None,
        birth_date: date | None = None,
        source: str = AnimalSource.NEWBORN_CALF.value,
        health_status: str = HealthStatus.HEALTHY.value,
        mother_id: UUID | None = None,
        purchase_date: date | None = None,
        notes: str | None = None,
        service_date: date | None = None,
        expected_calving_date: date | None = None,
        dry_off_date: date | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            tag=tag,
            sex=sex,
            production_status=production_status,
            name=name,
            breed=breed,
            birth_date=birth_date,
            source=source,
            health_status=health_status,
            mother_id=mother_id,
            purchase_date=purchase_date,
            notes=notes,
            service_date=service_date,
            expected_calving_date=expected_calving_date,
            dry_off_date=dry_off_date,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def display_name(self) -> str:
        return self.name or f"Animal {self.tag}"

    @property
    def is_released(self) -> bool:
        return self.status == AnimalStatus.RELEASED.value
