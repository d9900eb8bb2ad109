from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork
from src.infrastructure.db.base import SCHEMA

_REPOSITORIES = (
    "animals",
    "animal_releases",
    "age_categories",
    "health_records",
    "health_follow_ups",
    "health_status",
    "farm_settings",
    "buyers",
    "inventory",
    "memberships",
)


def create_engine(database_url: str) -> AsyncEngine:
    engine = create_async_engine(database_url, echo=False, future=True)
    if engine.dialect.name == "sqlite":
        # SQLite has no schemas; tables live in the main database
        engine = engine.execution_options(schema_translate_map={SCHEMA: None})
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self._clear_repositories()

    def _clear_repositories(self) -> None:
        for name in _REPOSITORIES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.age_categories_sqlalchemy import (
            AgeCategoriesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.animal_releases_sqlalchemy import (
            AnimalReleasesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.animals_sqlalchemy import AnimalsSQLAlchemyRepository
        from src.infrastructure.repos.buyers_sqlalchemy import BuyersSQLAlchemyRepository
        from src.infrastructure.repos.farm_settings_sqlalchemy import (
            FarmSettingsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.health_follow_ups_sqlalchemy import (
            HealthFollowUpsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.health_records_sqlalchemy import (
            HealthRecordsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.health_status_sqlalchemy import evaluator_for
        from src.infrastructure.repos.inventory_sqlalchemy import InventorySQLAlchemyRepository
        from src.infrastructure.repos.memberships_sqlalchemy import MembershipsSQLAlchemyRepository

        self.animals = AnimalsSQLAlchemyRepository(self.session)
        self.animal_releases = AnimalReleasesSQLAlchemyRepository(self.session)
        self.age_categories = AgeCategoriesSQLAlchemyRepository(self.session)
        self.health_records = HealthRecordsSQLAlchemyRepository(self.session)
        self.health_follow_ups = HealthFollowUpsSQLAlchemyRepository(self.session)
        self.health_status = evaluator_for(self.session)
        self.farm_settings = FarmSettingsSQLAlchemyRepository(self.session)
        self.buyers = BuyersSQLAlchemyRepository(self.session)
        self.inventory = InventorySQLAlchemyRepository(self.session)
        self.memberships = MembershipsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._clear_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()
