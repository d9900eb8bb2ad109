from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.health_follow_ups import HealthFollowUpRepository
from src.domain.models.health_follow_up import HealthFollowUp
from src.infrastructure.db.orm.health_record import HealthFollowUpORM


class HealthFollowUpsSQLAlchemyRepository(HealthFollowUpRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthFollowUpORM) -> HealthFollowUp:
        return HealthFollowUp(
            id=orm.id,
            farm_id=orm.farm_id,
            original_record_id=orm.original_record_id,
            follow_up_record_id=orm.follow_up_record_id,
            status=orm.status,
            treatment_effectiveness=orm.treatment_effectiveness,
            is_resolved=orm.is_resolved,
            created_at=orm.created_at,
        )

    async def add(self, relation: HealthFollowUp) -> HealthFollowUp:
        orm = HealthFollowUpORM(
            id=relation.id,
            farm_id=relation.farm_id,
            original_record_id=relation.original_record_id,
            follow_up_record_id=relation.follow_up_record_id,
            status=relation.status,
            treatment_effectiveness=relation.treatment_effectiveness,
            is_resolved=relation.is_resolved,
            created_at=relation.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Failed to create follow-up relation") from exc
        return self._to_domain(orm)

    async def list_for_original(
        self, farm_id: UUID, original_record_id: UUID
    ) -> list[HealthFollowUp]:
        stmt = (
            select(HealthFollowUpORM)
            .where(
                HealthFollowUpORM.farm_id == farm_id,
                HealthFollowUpORM.original_record_id == original_record_id,
            )
            .order_by(HealthFollowUpORM.created_at)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def find_original_of(self, farm_id: UUID, follow_up_record_id: UUID) -> UUID | None:
        stmt = (
            select(HealthFollowUpORM.original_record_id)
            .where(
                HealthFollowUpORM.farm_id == farm_id,
                HealthFollowUpORM.follow_up_record_id == follow_up_record_id,
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_touching(self, farm_id: UUID, record_ids: list[UUID]) -> int:
        if not record_ids:
            return 0
        stmt = delete(HealthFollowUpORM).where(
            HealthFollowUpORM.farm_id == farm_id,
            or_(
                HealthFollowUpORM.original_record_id.in_(record_ids),
                HealthFollowUpORM.follow_up_record_id.in_(record_ids),
            ),
        )
        result = await self.session.execute(stmt)
        return result.rowcount
