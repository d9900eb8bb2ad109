from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory import InventoryItem


async def execute(
    uow: UnitOfWork, farm_id: UUID, *, low_stock_only: bool = False
) -> list[InventoryItem]:
    return await uow.inventory.list_items(farm_id, low_stock_only=low_stock_only)
