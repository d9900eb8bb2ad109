#!/usr/bin/env python3
"""
Script to bootstrap a farm for local use.

This script:
1. Registers the given user (or a new id) as OWNER of the farm
2. Stores the default breeding, health, financial and tagging settings
3. Prints a signed access token to call the API with

Usage:
  python scripts/create_farm.py [--farm-id UUID] [--user-id UUID] [--prefix COW]
"""

import asyncio
import sys
from pathlib import Path
from uuid import UUID, uuid4

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.models.farm_settings import (
    BreedingSettings,
    FinancialSettings,
    HealthSettings,
    TaggingSettings,
)
from src.domain.models.membership import Membership
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_farm(farm_id: UUID, user_id: UUID, prefix: str) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            await uow.memberships.add(Membership(user_id=user_id, farm_id=farm_id, role=Role.OWNER))
            await uow.farm_settings.save(BreedingSettings(farm_id=farm_id))
            await uow.farm_settings.save(HealthSettings(farm_id=farm_id))
            await uow.farm_settings.save(FinancialSettings(farm_id=farm_id))
            await uow.farm_settings.save(TaggingSettings(farm_id=farm_id, prefix=prefix))
            await uow.commit()

        jwt_service = JWTService(
            secret_key=settings.jwt_secret_key.get_secret_value(),
            algorithm=settings.jwt_algorithm,
            access_token_expires_minutes=settings.jwt_access_token_expires_minutes,
            issuer=settings.jwt_issuer,
            audience=settings.jwt_audience,
        )
        token = jwt_service.create_access_token(subject=user_id)

        print("\n✅ Farm created successfully!")
        print(f"   Farm ID: {farm_id}")
        print(f"   Owner user ID: {user_id}")
        print(f"   Tag prefix: {prefix}")
        print("\n🔑 Access token (send with the farm header):")
        print(f"   {settings.farm_header}: {farm_id}")
        print(f"   Authorization: Bearer {token}")
    finally:
        await engine.dispose()


def _parse_uuid(value: str | None, label: str) -> UUID:
    if value is None:
        return uuid4()
    try:
        return UUID(value)
    except ValueError:
        print(f"❌ Error: '{value}' is not a valid {label}")
        sys.exit(1)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create a farm with an owner membership")
    parser.add_argument("--farm-id", help="Farm ID (optional, auto-generated)")
    parser.add_argument("--user-id", help="Owner user ID from the identity provider")
    parser.add_argument("--prefix", default="COW", help="Tag prefix for auto-generated tags")

    args = parser.parse_args()

    farm_uuid = _parse_uuid(args.farm_id, "farm id")
    user_uuid = _parse_uuid(args.user_id, "user id")

    print("=" * 60)
    print("🚀 Farm Creator - DairyFarm")
    print("=" * 60)

    asyncio.run(create_farm(farm_uuid, user_uuid, args.prefix.strip().upper()))
