from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AnimalReleaseORM(Base):
    __tablename__ = "animal_releases"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    farm_id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), nullable=False, index=True)
    animal_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("animals.id"), nullable=False, unique=True
    )
    release_reason: Mapped[str] = mapped_column(String(32), nullable=False)
    release_date: Mapped[date] = mapped_column(Date, nullable=False)
    sale_price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    buyer_info: Mapped[str | None] = mapped_column(Text, nullable=True)
    death_cause: Mapped[str | None] = mapped_column(Text, nullable=True)
    transfer_location: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str] = mapped_column(Text, nullable=False)
    animal_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    released_by: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
