from __future__ import annotations

from dataclasses import replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from src.domain.models.animal import Animal
from src.domain.models.health_record import HealthRecord
from src.domain.services.health_resolution import determine_health_status
from src.domain.value_objects.health import HealthStatus


class StubAnimals:
    def __init__(self) -> None:
        self.rows: dict[UUID, Animal] = {}

    async def add(self, animal: Animal) -> Animal:
        self.rows[animal.id] = animal
        return animal

    async def get(self, farm_id, animal_id):
        animal = self.rows.get(animal_id)
        return animal if animal and animal.farm_id == farm_id else None

    async def get_by_tag(self, farm_id, tag):
        return next(
            (a for a in self.rows.values() if a.farm_id == farm_id and a.tag == tag), None
        )

    async def update(self, farm_id, animal_id, data, expected_version=None):
        animal = await self.get(farm_id, animal_id)
        if animal is None:
            return None
        if expected_version is not None and animal.version != expected_version:
            return None
        for key, value in data.items():
            setattr(animal, key, value)
        animal.version += 1
        return animal


class StubHealthRecords:
    def __init__(self) -> None:
        self.rows: dict[UUID, HealthRecord] = {}

    async def add(self, record: HealthRecord) -> HealthRecord:
        self.rows[record.id] = record
        return record

    async def get(self, farm_id, record_id):
        record = self.rows.get(record_id)
        return record if record and record.farm_id == farm_id else None

    async def list_for_animal(self, farm_id, animal_id):
        return [r for r in self.rows.values() if r.animal_id == animal_id]

    async def update(self, farm_id, record_id, data):
        record = await self.get(farm_id, record_id)
        if record is None:
            return None
        for key, value in data.items():
            setattr(record, key, value)
        record.bump_version()
        return record

    async def mark_resolved(self, farm_id, record_ids, resolved_date):
        count = 0
        for record_id in record_ids:
            record = await self.get(farm_id, record_id)
            if record is not None:
                record.mark_resolved(resolved_date)
                count += 1
        return count

    async def delete_many(self, farm_id, record_ids):
        removed = [rid for rid in record_ids if self.rows.pop(rid, None) is not None]
        for record in self.rows.values():
            if record.root_checkup_id in removed:
                record.root_checkup_id = None
        return len(removed)


class StubFollowUps:
    def __init__(self) -> None:
        self.rows: list = []

    async def add(self, relation):
        self.rows.append(relation)
        return relation

    async def list_for_original(self, farm_id, original_record_id):
        return [r for r in self.rows if r.original_record_id == original_record_id]

    async def find_original_of(self, farm_id, follow_up_record_id):
        return next(
            (r.original_record_id for r in self.rows if r.follow_up_record_id == follow_up_record_id),
            None,
        )

    async def delete_touching(self, farm_id, record_ids):
        ids = set(record_ids)
        before = len(self.rows)
        self.rows = [
            r for r in self.rows if r.original_record_id not in ids and r.follow_up_record_id not in ids
        ]
        return before - len(self.rows)


class StubHealthStatus:
    """Applies the same rule as the database function over the stub tables."""

    def __init__(self, animals: StubAnimals, records: StubHealthRecords) -> None:
        self.animals = animals
        self.records = records
        self.fail = False

    async def determine(self, animal_id):
        if self.fail:
            raise RuntimeError("procedure unavailable")
        animal = self.animals.rows[animal_id]
        records = [r for r in self.records.rows.values() if r.animal_id == animal_id]
        return determine_health_status(animal.health_status, records)


class StubSettings:
    def __init__(self) -> None:
        self.rows: dict = {}

    async def get(self, farm_id, kind):
        stored = self.rows.get((farm_id, kind))
        return replace(stored) if stored is not None else None

    async def save(self, settings):
        self.rows[(settings.farm_id, type(settings))] = settings
        return settings


class StubAgeCategories:
    def __init__(self) -> None:
        self.rows: list = []

    async def list_for_farm(self, farm_id):
        return [c for c in self.rows if c.farm_id == farm_id]


class StubInventory:
    def __init__(self) -> None:
        self.items: dict = {}
        self.transactions: list = []

    async def add_item(self, item):
        self.items[item.id] = item
        return item

    async def get_item(self, farm_id, item_id):
        item = self.items.get(item_id)
        return item if item and item.farm_id == farm_id else None

    async def set_stock(self, farm_id, item_id, current_stock):
        item = await self.get_item(farm_id, item_id)
        if item is not None:
            item.current_stock = current_stock
        return item

    async def add_transaction(self, transaction):
        self.transactions.append(transaction)
        return transaction


class StubReleases:
    def __init__(self) -> None:
        self.rows: list = []

    async def add(self, release):
        self.rows.append(release)
        return release


class StubUnitOfWork:
    def __init__(self) -> None:
        self.animals = StubAnimals()
        self.animal_releases = StubReleases()
        self.health_records = StubHealthRecords()
        self.health_follow_ups = StubFollowUps()
        self.health_status = StubHealthStatus(self.animals, self.health_records)
        self.farm_settings = StubSettings()
        self.age_categories = StubAgeCategories()
        self.inventory = StubInventory()
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


@pytest.fixture()
def uow() -> StubUnitOfWork:
    return StubUnitOfWork()


@pytest.fixture()
def farm_id() -> UUID:
    return uuid4()


@pytest.fixture()
def today() -> date:
    return date(2026, 6, 1)


@pytest.fixture()
def cow(uow: StubUnitOfWork, farm_id: UUID) -> Animal:
    animal = Animal.create(
        farm_id=farm_id,
        tag="COW-001",
        sex="female",
        production_status="lactating",
        birth_date=date(2022, 1, 1),
        health_status=HealthStatus.HEALTHY.value,
    )
    uow.animals.rows[animal.id] = animal
    return animal
