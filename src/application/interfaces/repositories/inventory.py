from __future__ import annotations

from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.inventory import InventoryItem, InventoryTransaction


class InventoryRepository(Protocol):
    async def add_item(self, item: InventoryItem) -> InventoryItem: ...

    async def get_item(self, farm_id: UUID, item_id: UUID) -> InventoryItem | None: ...

    async def list_items(self, farm_id: UUID, *, low_stock_only: bool = False) -> list[InventoryItem]: ...

    async def set_stock(
        self, farm_id: UUID, item_id: UUID, current_stock: Decimal
    ) -> InventoryItem | None: ...

    async def add_transaction(self, transaction: InventoryTransaction) -> InventoryTransaction: ...

    async def list_transactions(
        self, farm_id: UUID, item_id: UUID, *, limit: int = 50
    ) -> list[InventoryTransaction]: ...
