from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.health_record import HealthRecord


class HealthRecordRepository(Protocol):
    async def add(self, record: HealthRecord) -> HealthRecord: ...

    async def get(self, farm_id: UUID, record_id: UUID) -> HealthRecord | None: ...

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        record_type: str | None = None,
        is_resolved: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[HealthRecord]: ...

    async def list_for_animal(self, farm_id: UUID, animal_id: UUID) -> list[HealthRecord]: ...

    async def update(self, farm_id: UUID, record_id: UUID, data: dict) -> HealthRecord | None: ...

    async def mark_resolved(self, farm_id: UUID, record_ids: list[UUID], resolved_date) -> int: ...

    async def delete_many(self, farm_id: UUID, record_ids: list[UUID]) -> int: ...
