from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.domain.models.farm_settings import BreedingSettings, TaggingSettings
from src.domain.models.inventory import InventoryItem, TransactionType
from src.domain.services import breeding_calendar
from src.domain.services.tag_format import example_tags, format_tag, next_tag


def test_breeding_calendar_uses_farm_settings():
    settings = BreedingSettings(farm_id=uuid4())
    served = date(2026, 1, 1)
    assert breeding_calendar.expected_calving_date(served, settings) == date(2026, 10, 8)
    assert breeding_calendar.dry_off_date(served, settings) == date(2026, 8, 9)
    assert breeding_calendar.dry_period_days(settings) == 60


def test_tags_are_zero_padded_with_prefix():
    assert format_tag("COW", 7, 3) == "COW-007"
    assert format_tag("", 12, 4) == "0012"
    assert format_tag("H", 1234, 3) == "H-1234"


def test_tag_examples_start_at_next_number():
    settings = TaggingSettings(farm_id=uuid4(), prefix="HF", next_number=9, number_padding=2)
    assert next_tag(settings) == "HF-09"
    assert example_tags(settings) == ["HF-09", "HF-10", "HF-11"]


def make_item(stock: str, minimum: str = "5") -> InventoryItem:
    return InventoryItem.create(
        farm_id=uuid4(),
        name="Dairy meal",
        unit="kg",
        current_stock=Decimal(stock),
        minimum_stock=Decimal(minimum),
    )


def test_low_stock_includes_the_minimum():
    assert make_item("5").is_low_stock
    assert not make_item("5.5").is_low_stock


def test_stock_movements():
    item = make_item("10")
    assert item.stock_after(TransactionType.IN, Decimal("2.5")) == Decimal("12.5")
    assert item.stock_after(TransactionType.OUT, Decimal("10")) == Decimal("0")
    assert item.stock_after(TransactionType.ADJUSTMENT, Decimal("3")) == Decimal("3")


@pytest.mark.parametrize(
    "kind, quantity",
    [(TransactionType.OUT, "11"), (TransactionType.IN, "-1")],
)
def test_invalid_stock_movements_are_rejected(kind, quantity):
    with pytest.raises(ValueError):
        make_item("10").stock_after(kind, Decimal(quantity))
