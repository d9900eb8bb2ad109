from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.value_objects.health import HealthStatus


class HealthStatusEvaluator(Protocol):
    """Computes an animal's aggregate health status from its open records."""

    async def determine(self, animal_id: UUID) -> HealthStatus: ...
