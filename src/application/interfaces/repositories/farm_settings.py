from __future__ import annotations

from typing import Protocol, TypeVar
from uuid import UUID

from src.domain.models.farm_settings import (
    BreedingSettings,
    FinancialSettings,
    HealthSettings,
    TaggingSettings,
)

SettingsT = TypeVar(
    "SettingsT", BreedingSettings, HealthSettings, FinancialSettings, TaggingSettings
)


class FarmSettingsRepository(Protocol):
    async def get(self, farm_id: UUID, kind: type[SettingsT]) -> SettingsT | None: ...

    async def save(self, settings: SettingsT) -> SettingsT: ...
