from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Buyer:
    id: UUID
    farm_id: UUID
    name: str
    code: str | None = None
    contact: str | None = None
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        name: str,
        code: str | None = None,
        contact: str | None = None,
    ) -> Buyer:
        name = name.strip()
        if not name:
            raise ValueError("Buyer name is required")
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            code=code,
            contact=contact,
            created_at=now,
            updated_at=now,
        )
