from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    FEMALE = "female"
    MALE = "male"


class ProductionStatus(str, Enum):
    CALF = "calf"
    HEIFER = "heifer"
    SERVED = "served"
    LACTATING = "lactating"
    DRY = "dry"
    BULL = "bull"


class AnimalSource(str, Enum):
    NEWBORN_CALF = "newborn_calf"
    PURCHASED_ANIMAL = "purchased_animal"


class AnimalStatus(str, Enum):
    ACTIVE = "active"
    RELEASED = "released"


class ReleaseReason(str, Enum):
    SOLD = "sold"
    DIED = "died"
    TRANSFERRED = "transferred"
    CULLED = "culled"
    OTHER = "other"


FEMALE_ONLY_STATUSES = frozenset(
    {
        ProductionStatus.HEIFER,
        ProductionStatus.SERVED,
        ProductionStatus.LACTATING,
        ProductionStatus.DRY,
    }
)
MALE_ONLY_STATUSES = frozenset({ProductionStatus.BULL})
