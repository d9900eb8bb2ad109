from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.application.use_cases.inventory import adjust_stock, create_item, list_items
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.inventory import (
    InventoryItemCreate,
    InventoryItemResponse,
    InventoryTransactionResponse,
    StockAdjustment,
    StockAdjustmentResponse,
)

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.get("/", response_model=list[InventoryItemResponse])
async def list_inventory(
    low_stock_only: bool = False,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items = await list_items.execute(uow, context.farm_id, low_stock_only=low_stock_only)
    return [InventoryItemResponse.model_validate(item) for item in items]


@router.post("/", response_model=InventoryItemResponse, status_code=status.HTTP_201_CREATED)
async def create_inventory_item(
    payload: InventoryItemCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    item = await create_item.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        create_item.CreateItemInput(**payload.model_dump()),
    )
    return InventoryItemResponse.model_validate(item)


@router.post("/{item_id}/adjust-stock", response_model=StockAdjustmentResponse)
async def adjust_inventory_stock(
    item_id: UUID,
    payload: StockAdjustment,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    result = await adjust_stock.execute(
        uow,
        context.farm_id,
        context.role,
        context.user_id,
        item_id,
        adjust_stock.AdjustStockInput(**payload.model_dump()),
    )
    return StockAdjustmentResponse(
        item=InventoryItemResponse.model_validate(result.item),
        transaction=InventoryTransactionResponse.model_validate(result.transaction),
    )
