from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.health import HealthStatus

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> HealthStatus:
    """Recompute the animal's aggregate health status and persist it."""
    animal = await uow.animals.get(farm_id, animal_id)
    if animal is None:
        raise NotFound("Animal not found")
    status = await uow.health_status.determine(animal_id)
    if status.value != animal.health_status:
        await uow.animals.update(farm_id, animal_id, {"health_status": status.value})
        logger.info(
            "Animal %s health status %s -> %s", animal_id, animal.health_status, status.value
        )
    await uow.commit()
    return status


async def best_effort(uow: UnitOfWork, farm_id: UUID, animal_id: UUID) -> HealthStatus | None:
    """Same as execute, but failures are logged and reported as None."""
    try:
        return await execute(uow, farm_id, animal_id)
    except Exception:
        logger.warning("Health status refresh failed for animal %s", animal_id, exc_info=True)
        await uow.rollback()
        return None
