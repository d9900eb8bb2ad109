from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.health_follow_up import HealthFollowUp


class HealthFollowUpRepository(Protocol):
    async def add(self, relation: HealthFollowUp) -> HealthFollowUp: ...

    async def list_for_original(
        self, farm_id: UUID, original_record_id: UUID
    ) -> list[HealthFollowUp]: ...

    async def find_original_of(self, farm_id: UUID, follow_up_record_id: UUID) -> UUID | None: ...

    async def delete_touching(self, farm_id: UUID, record_ids: list[UUID]) -> int: ...
