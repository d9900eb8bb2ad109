from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.age_category import AgeCategory


class AgeCategoryRepository(Protocol):
    async def add(self, category: AgeCategory) -> AgeCategory: ...

    async def get(self, farm_id: UUID, category_id: UUID) -> AgeCategory | None: ...

    async def list_for_farm(self, farm_id: UUID) -> list[AgeCategory]: ...

    async def update(self, farm_id: UUID, category_id: UUID, data: dict) -> AgeCategory | None: ...

    async def delete(self, farm_id: UUID, category_id: UUID) -> bool: ...
