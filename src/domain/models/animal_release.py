from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4


@dataclass(slots=True)
class AnimalRelease:
    id: UUID
    farm_id: UUID
    animal_id: UUID
    release_reason: str  # ReleaseReason
    release_date: date
    notes: str
    sale_price: Decimal | None = None
    buyer_info: str | None = None
    death_cause: str | None = None
    transfer_location: str | None = None
    # Snapshot of the animal row at release time
    animal_data: dict[str, Any] = field(default_factory=dict)
    released_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        animal_id: UUID,
        release_reason: str,
        release_date: date,
        notes: str,
        sale_price: Decimal | None = None,
        buyer_info: str | None = None,
        death_cause: str | None = None,
        transfer_location: str | None = None,
        animal_data: dict[str, Any] | None = None,
        released_by: UUID | None = None,
    ) -> AnimalRelease:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            animal_id=animal_id,
            release_reason=release_reason,
            release_date=release_date,
            notes=notes,
            sale_price=sale_price,
            buyer_info=buyer_info,
            death_cause=death_cause,
            transfer_location=transfer_location,
            animal_data=animal_data or {},
            released_by=released_by,
        )
