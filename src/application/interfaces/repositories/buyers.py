from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.buyer import Buyer


class BuyersRepository(Protocol):
    async def add(self, buyer: Buyer) -> Buyer: ...

    async def get(self, farm_id: UUID, buyer_id: UUID) -> Buyer | None: ...

    async def list(self, farm_id: UUID, *, active_only: bool = False) -> list[Buyer]: ...

    async def set_active(self, farm_id: UUID, buyer_id: UUID, is_active: bool) -> Buyer | None: ...
