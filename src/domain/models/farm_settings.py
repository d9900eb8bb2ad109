"""Per-farm settings blocks.

Each block is stored as one row per farm and overwritten wholesale. When a farm
has never saved a block the defaults below apply.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID


@dataclass(slots=True)
class BreedingSettings:
    farm_id: UUID
    minimum_breeding_age_months: int = 15
    default_gestation_days: int = 280
    days_pregnant_at_dry_off: int = 220
    heat_cycle_days: int = 21
    pregnancy_check_days: int = 45
    voluntary_waiting_period_days: int = 60
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class HealthSettings:
    farm_id: UUID
    auto_generate_records: bool = True
    default_follow_up_days: int = 7
    vaccination_reminder_days: int = 14
    default_veterinarian: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class FinancialSettings:
    farm_id: UUID
    default_currency: str = "KES"
    default_buyer_id: UUID | None = None
    default_milk_price_per_l: Decimal | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class TaggingSettings:
    farm_id: UUID
    auto_generate: bool = True
    prefix: str = "COW"
    next_number: int = 1
    number_padding: int = 3
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
