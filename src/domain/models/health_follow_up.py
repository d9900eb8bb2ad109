from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class HealthFollowUp:
    """Link between an original health record and the record documenting its outcome."""

    id: UUID
    farm_id: UUID
    original_record_id: UUID
    follow_up_record_id: UUID
    status: str  # FollowUpStatus
    treatment_effectiveness: str | None = None
    is_resolved: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        original_record_id: UUID,
        follow_up_record_id: UUID,
        status: str,
        treatment_effectiveness: str | None = None,
        is_resolved: bool = False,
    ) -> HealthFollowUp:
        if original_record_id == follow_up_record_id:
            raise ValueError("A health record cannot follow up on itself")
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            original_record_id=original_record_id,
            follow_up_record_id=follow_up_record_id,
            status=status,
            treatment_effectiveness=treatment_effectiveness,
            is_resolved=is_resolved,
        )
