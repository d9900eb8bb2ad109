from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.buyer import Buyer


async def execute(uow: UnitOfWork, farm_id: UUID, *, active_only: bool = False) -> list[Buyer]:
    return await uow.buyers.list(farm_id, active_only=active_only)
