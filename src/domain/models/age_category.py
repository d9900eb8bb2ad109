from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class AgeCategory:
    id: UUID
    farm_id: UUID
    name: str
    min_age_months: int
    production_status: str  # ProductionStatus
    max_age_months: int | None = None  # open-ended when None
    sex: str | None = None  # any sex when None
    allowed_statuses: list[str] = field(default_factory=list)
    description: str | None = None
    sort_order: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        name: str,
        min_age_months: int,
        production_status: str,
        max_age_months: int | None = None,
        sex: str | None = None,
        allowed_statuses: list[str] | None = None,
        description: str | None = None,
        sort_order: int = 0,
    ) -> AgeCategory:
        if min_age_months < 0:
            raise ValueError("min_age_months must be >= 0")
        if max_age_months is not None and max_age_months < min_age_months:
            raise ValueError("max_age_months must be >= min_age_months")
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            min_age_months=min_age_months,
            production_status=production_status,
            max_age_months=max_age_months,
            sex=sex,
            allowed_statuses=list(allowed_statuses or []),
            description=description,
            sort_order=sort_order,
            created_at=now,
            updated_at=now,
        )

    def contains(self, age_months: int, sex: str) -> bool:
        if self.sex is not None and self.sex != sex:
            return False
        if age_months < self.min_age_months:
            return False
        return self.max_age_months is None or age_months <= self.max_age_months
