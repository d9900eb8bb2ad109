from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.memberships import MembershipRepository
from src.domain.models.membership import Membership
from src.domain.value_objects.role import Role
from src.infrastructure.db.orm.membership import MembershipORM


class MembershipsSQLAlchemyRepository(MembershipRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, membership: Membership) -> None:
        orm = MembershipORM(
            user_id=membership.user_id,
            farm_id=membership.farm_id,
            role=membership.role,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("User is already a member of this farm") from exc

    async def get_role(self, user_id: UUID, farm_id: UUID) -> Role | None:
        stmt = select(MembershipORM.role).where(
            MembershipORM.user_id == user_id, MembershipORM.farm_id == farm_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
