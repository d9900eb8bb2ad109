from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, ForeignKey, Index, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"
    __table_args__ = (
        UniqueConstraint("farm_id", "tag", name="ux_animals_farm_tag"),
        Index("ix_animals_farm_status", "farm_id", "status"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    tag: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    breed: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sex: Mapped[str] = mapped_column(String(16), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    source: Mapped[str] = mapped_column(String(32), nullable=False)
    production_status: Mapped[str] = mapped_column(String(32), nullable=False)
    health_status: Mapped[str] = mapped_column(String(32), nullable=False, default="healthy")
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    mother_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id", ondelete="SET NULL"), nullable=True
    )
    purchase_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    expected_calving_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    dry_off_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    # Plain column; the record may be deleted independently and is cleared by the use case
    auto_health_record_id: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    release_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    release_reason: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(nullable=False, default=1)
