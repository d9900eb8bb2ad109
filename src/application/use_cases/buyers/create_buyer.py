from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.buyer import Buyer
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateBuyerInput:
    name: str
    code: str | None = None
    contact: str | None = None


async def execute(
    uow: UnitOfWork, farm_id: UUID, role: Role, payload: CreateBuyerInput
) -> Buyer:
    if not role.can_manage_catalogs():
        raise PermissionDenied("Role not allowed to manage buyers")
    try:
        buyer = Buyer.create(
            farm_id=farm_id, name=payload.name, code=payload.code, contact=payload.contact
        )
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc
    created = await uow.buyers.add(buyer)
    await uow.commit()
    return created
