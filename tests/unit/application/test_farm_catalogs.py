from __future__ import annotations

from decimal import Decimal
from uuid import uuid4

import pytest

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.use_cases.inventory import adjust_stock, create_item
from src.application.use_cases.settings import get_settings, update_settings
from src.domain.models.farm_settings import BreedingSettings, TaggingSettings
from src.domain.models.inventory import TransactionType
from src.domain.value_objects.role import Role


async def test_settings_default_when_never_saved(uow, farm_id):
    breeding = await get_settings.execute(uow, farm_id, BreedingSettings)
    assert breeding.farm_id == farm_id
    assert breeding.default_gestation_days == 280


async def test_only_owner_updates_settings(uow, farm_id):
    with pytest.raises(PermissionDenied):
        await update_settings.execute(uow, farm_id, Role.MANAGER, TaggingSettings, {"prefix": "HF"})
    saved = await update_settings.execute(
        uow, farm_id, Role.OWNER, TaggingSettings, {"prefix": "HF", "number_padding": 4}
    )
    assert saved.prefix == "HF"
    assert saved.next_number == 1
    assert uow.commits == 1


async def test_unknown_settings_fields_are_rejected(uow, farm_id):
    with pytest.raises(ValidationError):
        await update_settings.execute(
            uow, farm_id, Role.OWNER, TaggingSettings, {"farm_id": str(uuid4())}
        )


async def new_item(uow, farm_id, stock="10"):
    return await create_item.execute(
        uow,
        farm_id,
        Role.MANAGER,
        uuid4(),
        create_item.CreateItemInput(
            name="Dairy meal", unit="kg", current_stock=Decimal(stock), minimum_stock=Decimal("4")
        ),
    )


async def test_opening_stock_is_recorded_as_transaction(uow, farm_id):
    item = await new_item(uow, farm_id)
    assert len(uow.inventory.transactions) == 1
    opening = uow.inventory.transactions[0]
    assert opening.item_id == item.id
    assert opening.transaction_type is TransactionType.IN
    assert opening.stock_after == Decimal("10")


async def test_worker_cannot_create_items(uow, farm_id):
    with pytest.raises(PermissionDenied):
        await create_item.execute(
            uow, farm_id, Role.WORKER, uuid4(), create_item.CreateItemInput(name="Salt", unit="kg")
        )


async def test_stock_out_and_low_stock(uow, farm_id):
    item = await new_item(uow, farm_id)
    result = await adjust_stock.execute(
        uow,
        farm_id,
        Role.WORKER,
        uuid4(),
        item.id,
        adjust_stock.AdjustStockInput(transaction_type=TransactionType.OUT, quantity=Decimal("7")),
    )
    assert result.item.current_stock == Decimal("3")
    assert result.item.is_low_stock is True
    assert result.transaction.stock_after == Decimal("3")


async def test_stock_cannot_go_negative(uow, farm_id):
    item = await new_item(uow, farm_id, stock="2")
    with pytest.raises(ValidationError):
        await adjust_stock.execute(
            uow,
            farm_id,
            Role.OWNER,
            uuid4(),
            item.id,
            adjust_stock.AdjustStockInput(transaction_type="out", quantity=Decimal("3")),
        )
    assert item.current_stock == Decimal("2")


async def test_absolute_adjustment_needs_manager(uow, farm_id):
    item = await new_item(uow, farm_id)
    payload = adjust_stock.AdjustStockInput(
        transaction_type=TransactionType.ADJUSTMENT, quantity=Decimal("25")
    )
    with pytest.raises(PermissionDenied):
        await adjust_stock.execute(uow, farm_id, Role.WORKER, uuid4(), item.id, payload)
    result = await adjust_stock.execute(uow, farm_id, Role.MANAGER, uuid4(), item.id, payload)
    assert result.item.current_stock == Decimal("25")


async def test_adjusting_unknown_item(uow, farm_id):
    with pytest.raises(NotFound):
        await adjust_stock.execute(
            uow,
            farm_id,
            Role.OWNER,
            uuid4(),
            uuid4(),
            adjust_stock.AdjustStockInput(transaction_type="in", quantity=Decimal("1")),
        )
