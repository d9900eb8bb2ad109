from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.inventory import TransactionType


class InventoryItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    unit: str = Field(min_length=1, max_length=32)
    category: str | None = None
    current_stock: Decimal = Field(default=Decimal("0"), ge=0)
    minimum_stock: Decimal = Field(default=Decimal("0"), ge=0)
    unit_cost: Decimal | None = Field(default=None, ge=0)
    supplier: str | None = None


class InventoryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    unit: str
    category: str | None
    current_stock: Decimal
    minimum_stock: Decimal
    unit_cost: Decimal | None
    supplier: str | None
    is_low_stock: bool
    created_at: datetime
    updated_at: datetime


class StockAdjustment(BaseModel):
    transaction_type: TransactionType
    quantity: Decimal = Field(ge=0)
    unit_cost: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None


class InventoryTransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    item_id: UUID
    transaction_type: TransactionType
    quantity: Decimal
    stock_after: Decimal
    unit_cost: Decimal | None
    notes: str | None
    created_at: datetime


class StockAdjustmentResponse(BaseModel):
    item: InventoryItemResponse
    transaction: InventoryTransactionResponse
