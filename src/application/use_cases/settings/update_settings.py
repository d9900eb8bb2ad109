from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.repositories.farm_settings import SettingsT
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)

_READ_ONLY_FIELDS = {"farm_id", "updated_at"}


def ensure_can_manage(role: Role) -> None:
    if not role.can_manage_settings():
        raise PermissionDenied("Only farm owners can change settings")


async def execute(
    uow: UnitOfWork,
    farm_id: UUID,
    role: Role,
    kind: type[SettingsT],
    data: dict,
) -> SettingsT:
    """Overwrite a settings block wholesale; omitted fields fall back to defaults."""
    ensure_can_manage(role)
    known = {f.name for f in dataclasses.fields(kind)} - _READ_ONLY_FIELDS
    unknown = set(data) - known
    if unknown:
        raise ValidationError(f"Unknown settings fields: {', '.join(sorted(unknown))}")
    settings = kind(farm_id=farm_id, updated_at=datetime.now(timezone.utc), **data)
    saved = await uow.farm_settings.save(settings)
    await uow.commit()
    logger.info("Saved %s for farm %s", kind.__name__, farm_id)
    return saved
