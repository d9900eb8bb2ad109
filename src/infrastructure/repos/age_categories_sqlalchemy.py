from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.age_categories import AgeCategoryRepository
from src.domain.models.age_category import AgeCategory
from src.infrastructure.db.orm.age_category import AgeCategoryORM


class AgeCategoriesSQLAlchemyRepository(AgeCategoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AgeCategoryORM) -> AgeCategory:
        return AgeCategory(
            id=orm.id,
            farm_id=orm.farm_id,
            name=orm.name,
            description=orm.description,
            min_age_months=orm.min_age_months,
            max_age_months=orm.max_age_months,
            sex=orm.sex,
            production_status=orm.production_status,
            allowed_statuses=list(orm.allowed_statuses or []),
            sort_order=orm.sort_order,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, category: AgeCategory) -> AgeCategory:
        orm = AgeCategoryORM(
            id=category.id,
            farm_id=category.farm_id,
            name=category.name,
            description=category.description,
            min_age_months=category.min_age_months,
            max_age_months=category.max_age_months,
            sex=category.sex,
            production_status=category.production_status,
            allowed_statuses=list(category.allowed_statuses),
            sort_order=category.sort_order,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, farm_id: UUID, category_id: UUID) -> AgeCategory | None:
        stmt = select(AgeCategoryORM).where(
            AgeCategoryORM.farm_id == farm_id, AgeCategoryORM.id == category_id
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list_for_farm(self, farm_id: UUID) -> list[AgeCategory]:
        stmt = (
            select(AgeCategoryORM)
            .where(AgeCategoryORM.farm_id == farm_id)
            .order_by(AgeCategoryORM.sort_order, AgeCategoryORM.min_age_months)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def update(self, farm_id: UUID, category_id: UUID, data: dict) -> AgeCategory | None:
        stmt = (
            update(AgeCategoryORM)
            .where(AgeCategoryORM.farm_id == farm_id, AgeCategoryORM.id == category_id)
            .values(**data)
            .returning(AgeCategoryORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def delete(self, farm_id: UUID, category_id: UUID) -> bool:
        stmt = delete(AgeCategoryORM).where(
            AgeCategoryORM.farm_id == farm_id, AgeCategoryORM.id == category_id
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
