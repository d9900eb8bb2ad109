from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BreedingSettingsPayload(BaseModel):
    minimum_breeding_age_months: int = Field(default=15, ge=6, le=48)
    default_gestation_days: int = Field(default=280, ge=260, le=300)
    days_pregnant_at_dry_off: int = Field(default=220, ge=150, le=280)
    heat_cycle_days: int = Field(default=21, ge=15, le=30)
    pregnancy_check_days: int = Field(default=45, ge=20, le=120)
    voluntary_waiting_period_days: int = Field(default=60, ge=0, le=200)

    @model_validator(mode="after")
    def dry_off_before_calving(self) -> BreedingSettingsPayload:
        if self.days_pregnant_at_dry_off >= self.default_gestation_days:
            raise ValueError("Dry-off must happen before the expected calving day")
        return self


class HealthSettingsPayload(BaseModel):
    auto_generate_records: bool = True
    default_follow_up_days: int = Field(default=7, ge=1, le=365)
    vaccination_reminder_days: int = Field(default=14, ge=0, le=365)
    default_veterinarian: str | None = None


class FinancialSettingsPayload(BaseModel):
    default_currency: str = Field(default="KES", min_length=3, max_length=8)
    default_buyer_id: UUID | None = None
    default_milk_price_per_l: Decimal | None = Field(default=None, ge=0)


class TaggingSettingsPayload(BaseModel):
    auto_generate: bool = True
    prefix: str = Field(default="COW", max_length=16)
    next_number: int = Field(default=1, ge=1)
    number_padding: int = Field(default=3, ge=1, le=10)


class _SettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    farm_id: UUID
    updated_at: datetime


class BreedingSettingsResponse(_SettingsResponse, BreedingSettingsPayload):
    pass


class HealthSettingsResponse(_SettingsResponse, HealthSettingsPayload):
    pass


class FinancialSettingsResponse(_SettingsResponse, FinancialSettingsPayload):
    pass


class TaggingSettingsResponse(_SettingsResponse, TaggingSettingsPayload):
    pass
