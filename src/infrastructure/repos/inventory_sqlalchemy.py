from __future__ import annotations

from decimal import Decimal
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.inventory import InventoryRepository
from src.domain.models.inventory import InventoryItem, InventoryTransaction, TransactionType
from src.infrastructure.db.orm.inventory import InventoryItemORM, InventoryTransactionORM

_ITEM_COLUMNS = (
    "id",
    "farm_id",
    "name",
    "category",
    "unit",
    "current_stock",
    "minimum_stock",
    "unit_cost",
    "supplier",
    "created_at",
    "updated_at",
)


class InventorySQLAlchemyRepository(InventoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _item_to_domain(self, orm: InventoryItemORM) -> InventoryItem:
        return InventoryItem(**{name: getattr(orm, name) for name in _ITEM_COLUMNS})

    def _transaction_to_domain(self, orm: InventoryTransactionORM) -> InventoryTransaction:
        return InventoryTransaction(
            id=orm.id,
            farm_id=orm.farm_id,
            item_id=orm.item_id,
            transaction_type=TransactionType(orm.transaction_type),
            quantity=orm.quantity,
            stock_after=orm.stock_after,
            unit_cost=orm.unit_cost,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
        )

    async def add_item(self, item: InventoryItem) -> InventoryItem:
        orm = InventoryItemORM(**{name: getattr(item, name) for name in _ITEM_COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Inventory item name already exists") from exc
        return self._item_to_domain(orm)

    async def get_item(self, farm_id: UUID, item_id: UUID) -> InventoryItem | None:
        stmt = select(InventoryItemORM).where(
            InventoryItemORM.farm_id == farm_id, InventoryItemORM.id == item_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._item_to_domain(orm) if orm else None

    async def list_items(
        self, farm_id: UUID, *, low_stock_only: bool = False
    ) -> list[InventoryItem]:
        stmt = select(InventoryItemORM).where(InventoryItemORM.farm_id == farm_id)
        if low_stock_only:
            stmt = stmt.where(InventoryItemORM.current_stock <= InventoryItemORM.minimum_stock)
        result = await self.session.execute(stmt.order_by(InventoryItemORM.name))
        return [self._item_to_domain(row) for row in result.scalars().all()]

    async def set_stock(
        self, farm_id: UUID, item_id: UUID, current_stock: Decimal
    ) -> InventoryItem | None:
        stmt = (
            update(InventoryItemORM)
            .where(InventoryItemORM.farm_id == farm_id, InventoryItemORM.id == item_id)
            .values(current_stock=current_stock)
            .returning(InventoryItemORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._item_to_domain(orm) if orm else None

    async def add_transaction(self, transaction: InventoryTransaction) -> InventoryTransaction:
        orm = InventoryTransactionORM(
            id=transaction.id,
            farm_id=transaction.farm_id,
            item_id=transaction.item_id,
            transaction_type=transaction.transaction_type.value,
            quantity=transaction.quantity,
            stock_after=transaction.stock_after,
            unit_cost=transaction.unit_cost,
            notes=transaction.notes,
            created_by=transaction.created_by,
            created_at=transaction.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._transaction_to_domain(orm)

    async def list_transactions(
        self, farm_id: UUID, item_id: UUID, *, limit: int = 50
    ) -> list[InventoryTransaction]:
        stmt = (
            select(InventoryTransactionORM)
            .where(
                InventoryTransactionORM.farm_id == farm_id,
                InventoryTransactionORM.item_id == item_id,
            )
            .order_by(InventoryTransactionORM.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._transaction_to_domain(row) for row in result.scalars().all()]
