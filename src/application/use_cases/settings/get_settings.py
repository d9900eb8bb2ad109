from __future__ import annotations

from uuid import UUID

from src.application.interfaces.repositories.farm_settings import SettingsT
from src.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork, farm_id: UUID, kind: type[SettingsT]) -> SettingsT:
    """Stored settings block for the farm, or its defaults when never saved."""
    stored = await uow.farm_settings.get(farm_id, kind)
    if stored is not None:
        return stored
    return kind(farm_id=farm_id)
