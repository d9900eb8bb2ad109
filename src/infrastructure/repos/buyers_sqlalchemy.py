from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.buyers import BuyersRepository
from src.domain.models.buyer import Buyer
from src.infrastructure.db.orm.buyer import BuyerORM


class BuyersSQLAlchemyRepository(BuyersRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BuyerORM) -> Buyer:
        return Buyer(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            code=orm.code,
            contact=orm.contact,
            is_active=orm.is_active,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, buyer: Buyer) -> Buyer:
        orm = BuyerORM(
            id=buyer.id,
            farm_id=buyer.farm_id,
            name=buyer.name,
            code=buyer.code,
            contact=buyer.contact,
            is_active=buyer.is_active,
            created_at=buyer.created_at,
            updated_at=buyer.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Buyer name already exists") from exc
        return self._to_domain(orm)

    async def list(self, farm_id: UUID, *, active_only: bool = False) -> list[Buyer]:
        stmt = select(BuyerORM).where(BuyerORM.farm_id == farm_id)
        if active_only:
            stmt = stmt.where(BuyerORM.is_active.is_(True))
        result = await self.session.execute(stmt.order_by(BuyerORM.name))
        return [self._to_domain(r) for r in result.scalars().all()]

    async def get(self, farm_id: UUID, buyer_id: UUID) -> Buyer | None:
        stmt = select(BuyerORM).where(BuyerORM.farm_id == farm_id, BuyerORM.id == buyer_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def set_active(self, farm_id: UUID, buyer_id: UUID, is_active: bool) -> Buyer | None:
        stmt = (
            update(BuyerORM)
            .where(BuyerORM.farm_id == farm_id, BuyerORM.id == buyer_id)
            .values(is_active=is_active)
            .returning(BuyerORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
