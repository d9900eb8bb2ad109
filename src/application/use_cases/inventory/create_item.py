from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory import InventoryItem, InventoryTransaction, TransactionType
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateItemInput:
    name: str
    unit: str
    category: str | None = None
    current_stock: Decimal = Decimal("0")
    minimum_stock: Decimal = Decimal("0")
    unit_cost: Decimal | None = None
    supplier: str | None = None


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    actor_user_id: UUID,
    payload: CreateItemInput,
) -> InventoryItem:
    if not role.can_manage_catalogs():
        raise PermissionDenied("Role not allowed to manage inventory")
    try:
        item = InventoryItem.create(
            farm_id=farm_id,
            name=payload.name,
            unit=payload.unit,
            category=payload.category,
            current_stock=payload.current_stock,
            minimum_stock=payload.minimum_stock,
            unit_cost=payload.unit_cost,
            supplier=payload.supplier,
        )
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    created = await uow.inventory.add_item(item)
    if item.current_stock > 0:
        # Opening balance is recorded like any other movement
        await uow.inventory.add_transaction(
            InventoryTransaction.create(
                farm_id=farm_id,
                item_id=item.id,
                transaction_type=TransactionType.IN,
                quantity=item.current_stock,
                stock_after=item.current_stock,
                unit_cost=item.unit_cost,
                notes="Opening stock",
                created_by=actor_user_id,
            )
        )
    await uow.commit()
    return created
