from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory import InventoryItem, InventoryTransaction, TransactionType
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AdjustStockInput:
    transaction_type: TransactionType
    quantity: Decimal
    unit_cost: Decimal | None = None
    notes: str | None = None


@dataclass(slots=True)
class AdjustStockOutput:
    item: InventoryItem
    transaction: InventoryTransaction


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    item_id: UUID,
    payload: AdjustStockInput,
) -> AdjustStockOutput:
    """Apply a stock movement: `in` adds, `out` subtracts, `adjustment` sets the level."""
    kind = TransactionType(payload.transaction_type)
    if kind is TransactionType.ADJUSTMENT and not role.can_manage_catalogs():
        raise PermissionDenied("Role not allowed to set absolute stock levels")
    item = await uow.inventory.get_item(farm_id, item_id)
    if item is None:
        raise NotFound("Inventory item not found")
    try:
        new_stock = item.stock_after(kind, payload.quantity)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc

    updated = await uow.inventory.set_stock(farm_id, item_id, new_stock)
    if updated is None:
        raise NotFound("Inventory item not found")
    transaction = await uow.inventory.add_transaction(
        InventoryTransaction.create(
            farm_id=farm_id,
            item_id=item_id,
            transaction_type=kind,
            quantity=payload.quantity,
            stock_after=new_stock,
            unit_cost=payload.unit_cost,
            notes=payload.notes,
            created_by=actor_user_id,
        )
    )
    await uow.commit()
    if updated.is_low_stock:
        logger.info("Inventory item %s is low on stock (%s %s)", item_id, new_stock, item.unit)
    return AdjustStockOutput(item=updated, transaction=transaction)
