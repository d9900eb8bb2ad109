from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class TransactionType(str, Enum):
    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"


@dataclass(slots=True)
class InventoryItem:
    id: UUID
    farm_id: UUID
    name: str
    unit: str
    category: str | None = None
    current_stock: Decimal = Decimal("0")
    minimum_stock: Decimal = Decimal("0")
    unit_cost: Decimal | None = None
    supplier: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        name: str,
        unit: str,
        category: str | None = None,
        current_stock: Decimal = Decimal("0"),
        minimum_stock: Decimal = Decimal("0"),
        unit_cost: Decimal | None = None,
        supplier: str | None = None,
    ) -> InventoryItem:
        if current_stock < 0 or minimum_stock < 0:
            raise ValueError("Stock quantities must be >= 0")
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            name=name,
            unit=unit,
            category=category,
            current_stock=current_stock,
            minimum_stock=minimum_stock,
            unit_cost=unit_cost,
            supplier=supplier,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_low_stock(self) -> bool:
        return self.current_stock <= self.minimum_stock

    def stock_after(self, transaction_type: TransactionType, quantity: Decimal) -> Decimal:
        """Stock level resulting from applying a movement; raises ValueError when negative."""
        if quantity < 0:
            raise ValueError("Quantity must be >= 0")
        if transaction_type is TransactionType.IN:
            new_stock = self.current_stock + quantity
        elif transaction_type is TransactionType.OUT:
            new_stock = self.current_stock - quantity
        else:
            new_stock = quantity
        if new_stock < 0:
            raise ValueError(
                f"Insufficient stock: {self.current_stock} {self.unit} available"
            )
        return new_stock


@dataclass(slots=True, frozen=True)
class InventoryTransaction:
    id: UUID
    farm_id: UUID
    item_id: UUID
    transaction_type: TransactionType
    quantity: Decimal
    stock_after: Decimal
    unit_cost: Decimal | None = None
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        *,
        farm_id: UUID,
        item_id: UUID,
        transaction_type: TransactionType,
        quantity: Decimal,
        stock_after: Decimal,
        unit_cost: Decimal | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> InventoryTransaction:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            item_id=item_id,
            transaction_type=transaction_type,
            quantity=quantity,
            stock_after=stock_after,
            unit_cost=unit_cost,
            notes=notes,
            created_by=created_by,
        )
