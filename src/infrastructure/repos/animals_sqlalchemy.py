from __future__ import annotations

from enum import Enum
from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM

_COLUMNS = (
    "id",
    "farm_id",
    "tag",
    "name",
    "breed",
    "sex",
    "birth_date",
    "source",
    "production_status",
    "health_status",
    "status",
    "mother_id",
    "purchase_date",
    "notes",
    "service_date",
    "expected_calving_date",
    "dry_off_date",
    "auto_health_record_id",
    "release_date",
    "release_reason",
    "created_at",
    "updated_at",
    "version",
)


def _plain(data: dict) -> dict:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(**{name: getattr(orm, name) for name in _COLUMNS})

    def _to_orm(self, animal: Animal) -> AnimalORM:
        return AnimalORM(**{name: getattr(animal, name) for name in _COLUMNS})

    def _filtered(
        self,
        stmt,
        farm_id: UUID,
        *,
        status: str | None,
        production_status: str | None,
        health_status: str | None,
        search: str | None,
    ):
        stmt = stmt.where(AnimalORM.farm_id == farm_id)
        if status is not None:
            stmt = stmt.where(AnimalORM.status == status)
        if production_status is not None:
            stmt = stmt.where(AnimalORM.production_status == production_status)
        if health_status is not None:
            stmt = stmt.where(AnimalORM.health_status == health_status)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.tag).like(pattern),
                    func.lower(AnimalORM.name).like(pattern),
                    func.lower(AnimalORM.breed).like(pattern),
                )
            )
        return stmt

    async def add(self, animal: Animal) -> Animal:
        orm = self._to_orm(animal)
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal tag already exists for farm") from exc
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id, AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_tag(self, farm_id: UUID, tag: str) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.farm_id == farm_id, AnimalORM.tag == tag)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        farm_id: UUID,
        *,
        status: str | None = None,
        production_status: str | None = None,
        health_status: str | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Animal]:
        stmt = self._filtered(
            select(AnimalORM),
            farm_id,
            status=status,
            production_status=production_status,
            health_status=health_status,
            search=search,
        )
        stmt = stmt.order_by(AnimalORM.tag, AnimalORM.id).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def count(
        self,
        farm_id: UUID,
        *,
        status: str | None = None,
        production_status: str | None = None,
        health_status: str | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count(AnimalORM.id)),
            farm_id,
            status=status,
            production_status=production_status,
            health_status=health_status,
            search=search,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(
        self,
        farm_id: UUID,
        animal_id: UUID,
        data: dict,
        expected_version: int | None = None,
    ) -> Animal | None:
        stmt = update(AnimalORM).where(AnimalORM.farm_id == farm_id, AnimalORM.id == animal_id)
        if expected_version is not None:
            stmt = stmt.where(AnimalORM.version == expected_version)
        stmt = stmt.values(**_plain(data), version=AnimalORM.version + 1).returning(AnimalORM)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
