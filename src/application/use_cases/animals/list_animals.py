from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal


@dataclass(slots=True)
class ListAnimalsResult:
    items: list[Animal]
    total: int
    limit: int
    offset: int


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    *,
    limit: int = 50,
    offset: int = 0,
    status: str | None = None,
    production_status: str | None = None,
    health_status: str | None = None,
    search: str | None = None,
) -> ListAnimalsResult:
    if limit <= 0 or limit > 100:
        raise ValidationError("limit must be between 1 and 100")
    if offset < 0:
        raise ValidationError("offset must be >= 0")
    filters = {
        "status": status,
        "production_status": production_status,
        "health_status": health_status,
        "search": search.strip() if search else None,
    }
    items = await uow.animals.list(farm_id, limit=limit, offset=offset, **filters)
    total = await uow.animals.count(farm_id, **filters)
    return ListAnimalsResult(items=items, total=total, limit=limit, offset=offset)
