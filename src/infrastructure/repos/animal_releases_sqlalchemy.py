from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.animal_releases import AnimalReleaseRepository
from src.domain.models.animal_release import AnimalRelease
from src.infrastructure.db.orm.animal_release import AnimalReleaseORM

_COLUMNS = (
    "id",
    "farm_id",
    "animal_id",
    "release_reason",
    "release_date",
    "sale_price",
    "buyer_info",
    "death_cause",
    "transfer_location",
    "notes",
    "animal_data",
    "released_by",
    "created_at",
)


class AnimalReleasesSQLAlchemyRepository(AnimalReleaseRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalReleaseORM) -> AnimalRelease:
        return AnimalRelease(**{name: getattr(orm, name) for name in _COLUMNS})

    async def add(self, release: AnimalRelease) -> AnimalRelease:
        orm = AnimalReleaseORM(**{name: getattr(release, name) for name in _COLUMNS})
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal has already been released") from exc
        return self._to_domain(orm)

    async def get_for_animal(self, farm_id: UUID, animal_id: UUID) -> AnimalRelease | None:
        stmt = select(AnimalReleaseORM).where(
            AnimalReleaseORM.farm_id == farm_id, AnimalReleaseORM.animal_id == animal_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None
