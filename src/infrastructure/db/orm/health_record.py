from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class HealthRecordORM(Base):
    __tablename__ = "animal_health_records"
    __table_args__ = (
        CheckConstraint(
            "root_checkup_id IS NULL OR root_checkup_id <> id", name="ck_health_records_root_not_self"
        ),
        Index("ix_health_records_animal_open", "animal_id", "is_resolved"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id", ondelete="CASCADE"), nullable=False
    )
    record_type: Mapped[str] = mapped_column(String(32), nullable=False)
    record_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    severity: Mapped[str | None] = mapped_column(String(16), nullable=True)
    veterinarian: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    medication: Mapped[str | None] = mapped_column(Text, nullable=True)
    symptoms: Mapped[str | None] = mapped_column(Text, nullable=True)
    treatment: Mapped[str | None] = mapped_column(Text, nullable=True)
    next_due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    resolved_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    root_checkup_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animal_health_records.id", ondelete="SET NULL"), nullable=True
    )
    is_follow_up: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_auto_generated: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completion_status: Mapped[str] = mapped_column(String(16), nullable=False, default="completed")
    original_health_status: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_by: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(nullable=False, default=1)


class HealthFollowUpORM(Base):
    __tablename__ = "health_record_follow_ups"
    __table_args__ = (
        CheckConstraint(
            "original_record_id <> follow_up_record_id", name="ck_follow_ups_not_self"
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    original_record_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animal_health_records.id"), nullable=False, index=True
    )
    follow_up_record_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animal_health_records.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    treatment_effectiveness: Mapped[str | None] = mapped_column(String(32), nullable=True)
    is_resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
