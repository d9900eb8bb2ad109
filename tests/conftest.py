from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import cast
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    age_category,
    animal,
    animal_release,
    buyer,
    farm_settings,
    health_record,
    inventory,
    membership,
)
from src.infrastructure.db.orm.membership import MembershipORM
from src.interfaces.http.main import create_app


@pytest.fixture(scope="session")
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "farm_header": "X-Farm-ID",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def jwt_service(test_settings: Settings) -> JWTService:
    return JWTService(
        secret_key=test_settings.jwt_secret_key.get_secret_value(),
        algorithm=test_settings.jwt_algorithm,
        access_token_expires_minutes=5,
    )


@pytest.fixture()
def app(test_settings: Settings, jwt_service: JWTService):
    return create_app(settings=test_settings, jwt_service=jwt_service)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
        await engine.dispose()


@pytest.fixture()
async def seeded_memberships(app, client, farm_id: UUID) -> dict[str, UUID]:
    owner_id = uuid4()
    manager_id = uuid4()
    worker_id = uuid4()
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        async_session.add_all(
            [
                MembershipORM(user_id=owner_id, farm_id=farm_id, role=Role.OWNER),
                MembershipORM(user_id=manager_id, farm_id=farm_id, role=Role.MANAGER),
                MembershipORM(user_id=worker_id, farm_id=farm_id, role=Role.WORKER),
            ]
        )
        await async_session.commit()
    return {"owner": owner_id, "manager": manager_id, "worker": worker_id}


@pytest.fixture()
def auth_headers(seeded_memberships, jwt_service: JWTService, farm_id: UUID) -> dict[str, dict]:
    """Request headers per seeded role."""
    return {
        role: {
            "Authorization": f"Bearer {jwt_service.create_access_token(subject=user_id)}",
            "X-Farm-ID": str(farm_id),
        }
        for role, user_id in seeded_memberships.items()
    }
