from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal_release import AnimalRelease


class AnimalReleaseRepository(Protocol):
    async def add(self, release: AnimalRelease) -> AnimalRelease: ...

    async def get_for_animal(self, farm_id: UUID, animal_id: UUID) -> AnimalRelease | None: ...
