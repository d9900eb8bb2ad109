from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.buyer import Buyer
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork, farm_id: UUID, role: Role, buyer_id: UUID, is_active: bool
) -> Buyer:
    if not role.can_manage_catalogs():
        raise PermissionDenied("Role not allowed to manage buyers")
    buyer = await uow.buyers.set_active(farm_id, buyer_id, is_active)
    if buyer is None:
        raise NotFound("Buyer not found")
    await uow.commit()
    return buyer
