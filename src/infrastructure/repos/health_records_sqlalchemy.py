from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.repositories.health_records import HealthRecordRepository
from src.domain.models.health_record import HealthRecord
from src.infrastructure.db.orm.health_record import HealthRecordORM

_COLUMNS = (
    "id",
    "farm_id",
    "animal_id",
    "record_type",
    "record_date",
    "description",
    "severity",
    "veterinarian",
    "cost",
    "notes",
    "medication",
    "symptoms",
    "treatment",
    "next_due_date",
    "is_resolved",
    "resolved_date",
    "root_checkup_id",
    "is_follow_up",
    "is_auto_generated",
    "completion_status",
    "original_health_status",
    "created_by",
    "created_at",
    "updated_at",
    "version",
)


class HealthRecordsSQLAlchemyRepository(HealthRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthRecordORM) -> HealthRecord:
        return HealthRecord(**{name: getattr(orm, name) for name in _COLUMNS})

    async def add(self, record: HealthRecord) -> HealthRecord:
        orm = HealthRecordORM(**{name: getattr(record, name) for name in _COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Health record violates a constraint") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, record_id: UUID) -> HealthRecord | None:
        stmt = select(HealthRecordORM).where(
            HealthRecordORM.farm_id == farm_id, HealthRecordORM.id == record_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        animal_id: UUID | None = None,
        record_type: str | None = None,
        is_resolved: bool | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> list[HealthRecord]:
        stmt = select(HealthRecordORM).where(HealthRecordORM.farm_id == farm_id)
        if animal_id is not None:
            stmt = stmt.where(HealthRecordORM.animal_id == animal_id)
        if record_type is not None:
            stmt = stmt.where(HealthRecordORM.record_type == record_type)
        if is_resolved is not None:
            stmt = stmt.where(HealthRecordORM.is_resolved.is_(is_resolved))
        stmt = (
            stmt.order_by(HealthRecordORM.record_date.desc(), HealthRecordORM.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_for_animal(self, farm_id: UUID, animal_id: UUID) -> list[HealthRecord]:
        stmt = select(HealthRecordORM).where(
            HealthRecordORM.farm_id == farm_id, HealthRecordORM.animal_id == animal_id
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def update(self, farm_id: UUID, record_id: UUID, data: dict) -> HealthRecord | None:
        if data.get("root_checkup_id") == record_id:
            raise ValidationError("A health record cannot be its own root checkup")
        stmt = (
            update(HealthRecordORM)
            .where(HealthRecordORM.farm_id == farm_id, HealthRecordORM.id == record_id)
            .values(**data, version=HealthRecordORM.version + 1)
            .returning(HealthRecordORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def mark_resolved(
        self, farm_id: UUID, record_ids: list[UUID], resolved_date: date
    ) -> int:
        if not record_ids:
            return 0
        stmt = (
            update(HealthRecordORM)
            .where(HealthRecordORM.farm_id == farm_id, HealthRecordORM.id.in_(record_ids))
            .values(
                is_resolved=True,
                resolved_date=resolved_date,
                version=HealthRecordORM.version + 1,
            )
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def delete_many(self, farm_id: UUID, record_ids: list[UUID]) -> int:
        if not record_ids:
            return 0
        # Detach children that point at the deleted rows as their root checkup
        await self.session.execute(
            update(HealthRecordORM)
            .where(
                HealthRecordORM.farm_id == farm_id,
                HealthRecordORM.root_checkup_id.in_(record_ids),
                HealthRecordORM.id.not_in(record_ids),
            )
            .values(root_checkup_id=None)
        )
        stmt = delete(HealthRecordORM).where(
            HealthRecordORM.farm_id == farm_id, HealthRecordORM.id.in_(record_ids)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
