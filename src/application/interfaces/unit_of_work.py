from __future__ import annotations

from typing import Protocol

from src.application.interfaces.health_status import HealthStatusEvaluator
from src.application.interfaces.repositories.age_categories import AgeCategoryRepository
from src.application.interfaces.repositories.animal_releases import AnimalReleaseRepository
from src.application.interfaces.repositories.animals import AnimalRepository
from src.application.interfaces.repositories.buyers import BuyersRepository
from src.application.interfaces.repositories.farm_settings import FarmSettingsRepository
from src.application.interfaces.repositories.health_follow_ups import HealthFollowUpRepository
from src.application.interfaces.repositories.health_records import HealthRecordRepository
from src.application.interfaces.repositories.inventory import InventoryRepository
from src.application.interfaces.repositories.memberships import MembershipRepository


class UnitOfWork(Protocol):
    animals: AnimalRepository
    animal_releases: AnimalReleaseRepository
    age_categories: AgeCategoryRepository
    health_records: HealthRecordRepository
    health_follow_ups: HealthFollowUpRepository
    health_status: HealthStatusEvaluator
    farm_settings: FarmSettingsRepository
    buyers: BuyersRepository
    inventory: InventoryRepository
    memberships: MembershipRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
