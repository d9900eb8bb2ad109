from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedingSettingsORM(Base):
    __tablename__ = "breeding_settings"

    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    minimum_breeding_age_months: Mapped[int] = mapped_column(Integer, nullable=False)
    default_gestation_days: Mapped[int] = mapped_column(Integer, nullable=False)
    days_pregnant_at_dry_off: Mapped[int] = mapped_column(Integer, nullable=False)
    heat_cycle_days: Mapped[int] = mapped_column(Integer, nullable=False)
    pregnancy_check_days: Mapped[int] = mapped_column(Integer, nullable=False)
    voluntary_waiting_period_days: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class HealthSettingsORM(Base):
    __tablename__ = "health_settings"

    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    auto_generate_records: Mapped[bool] = mapped_column(Boolean, nullable=False)
    default_follow_up_days: Mapped[int] = mapped_column(Integer, nullable=False)
    vaccination_reminder_days: Mapped[int] = mapped_column(Integer, nullable=False)
    default_veterinarian: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class FinancialSettingsORM(Base):
    __tablename__ = "financial_settings"

    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    default_currency: Mapped[str] = mapped_column(String(8), nullable=False)
    default_buyer_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    default_milk_price_per_l: Mapped[Decimal | None] = mapped_column(Numeric(10, 4), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )


class TaggingSettingsORM(Base):
    __tablename__ = "tagging_settings"

    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    auto_generate: Mapped[bool] = mapped_column(Boolean, nullable=False)
    prefix: Mapped[str] = mapped_column(String(16), nullable=False)
    next_number: Mapped[int] = mapped_column(Integer, nullable=False)
    number_padding: Mapped[int] = mapped_column(Integer, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
