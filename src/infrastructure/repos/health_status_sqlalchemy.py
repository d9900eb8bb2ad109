from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError, NotFound
from src.application.interfaces.health_status import HealthStatusEvaluator
from src.domain.models.health_record import HealthRecord
from src.domain.services.health_resolution import determine_health_status
from src.domain.value_objects.health import CONCERNING_RECORD_TYPES, HealthStatus
from src.infrastructure.db.base import SCHEMA
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.health_record import HealthRecordORM


class StoredFunctionHealthStatusEvaluator(HealthStatusEvaluator):
    """Calls the determine_animal_health_status() function installed by migrations."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def determine(self, animal_id: UUID) -> HealthStatus:
        stmt = select(getattr(func, SCHEMA).determine_animal_health_status(animal_id))
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise InfrastructureError("Health status procedure failed") from exc
        value = result.scalar_one_or_none()
        if value is None:
            raise NotFound("Animal not found")
        return HealthStatus(value)


class QueryHealthStatusEvaluator(HealthStatusEvaluator):
    """Same rule as the stored function, evaluated over a plain query."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def determine(self, animal_id: UUID) -> HealthStatus:
        try:
            current = (
                await self.session.execute(
                    select(AnimalORM.health_status).where(AnimalORM.id == animal_id)
                )
            ).scalar_one_or_none()
            if current is None:
                raise NotFound("Animal not found")
            rows = (
                await self.session.execute(
                    select(
                        HealthRecordORM.id,
                        HealthRecordORM.farm_id,
                        HealthRecordORM.record_type,
                        HealthRecordORM.record_date,
                        HealthRecordORM.description,
                        HealthRecordORM.severity,
                    ).where(
                        HealthRecordORM.animal_id == animal_id,
                        HealthRecordORM.is_resolved.is_(False),
                        HealthRecordORM.record_type.in_([t.value for t in CONCERNING_RECORD_TYPES]),
                    )
                )
            ).all()
        except SQLAlchemyError as exc:
            raise InfrastructureError("Health status query failed") from exc
        open_records = [
            HealthRecord(
                id=row.id,
                farm_id=row.farm_id,
                animal_id=animal_id,
                record_type=row.record_type,
                record_date=row.record_date,
                description=row.description,
                severity=row.severity,
            )
            for row in rows
        ]
        return determine_health_status(current, open_records)


def evaluator_for(session: AsyncSession) -> HealthStatusEvaluator:
    if session.bind is not None and session.bind.dialect.name == "postgresql":
        return StoredFunctionHealthStatusEvaluator(session)
    return QueryHealthStatusEvaluator(session)
