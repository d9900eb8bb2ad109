from __future__ import annotations

import dataclasses
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.farm_settings import (
    FarmSettingsRepository,
    SettingsT,
)
from src.domain.models.farm_settings import (
    BreedingSettings,
    FinancialSettings,
    HealthSettings,
    TaggingSettings,
)
from src.infrastructure.db.orm.farm_settings import (
    BreedingSettingsORM,
    FinancialSettingsORM,
    HealthSettingsORM,
    TaggingSettingsORM,
)

_ORM_FOR = {
    BreedingSettings: BreedingSettingsORM,
    HealthSettings: HealthSettingsORM,
    FinancialSettings: FinancialSettingsORM,
    TaggingSettings: TaggingSettingsORM,
}


class FarmSettingsSQLAlchemyRepository(FarmSettingsRepository):
    """One row per farm and settings block, keyed by farm id."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, farm_id: UUID, kind: type[SettingsT]) -> SettingsT | None:
        orm = await self.session.get(_ORM_FOR[kind], farm_id)
        if orm is None:
            return None
        return kind(**{f.name: getattr(orm, f.name) for f in dataclasses.fields(kind)})

    async def save(self, settings: SettingsT) -> SettingsT:
        orm_cls = _ORM_FOR[type(settings)]
        values = dataclasses.asdict(settings)
        orm = await self.session.get(orm_cls, settings.farm_id)
        if orm is None:
            self.session.add(orm_cls(**values))
        else:
            for name, value in values.items():
                setattr(orm, name, value)
        await self.session.flush()
        return settings
