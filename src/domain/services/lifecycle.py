"""Production status derivation from age and sex.

A farm may define its own age categories; when one matches, its status and
extra allowed statuses are merged on top of the default rules for the sex.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.domain.models.age_category import AgeCategory
from src.domain.value_objects.production_status import (
    FEMALE_ONLY_STATUSES,
    MALE_ONLY_STATUSES,
    ProductionStatus,
    Sex,
)

DAYS_PER_MONTH = 30

_FEMALE_STATUSES = frozenset(
    {
        ProductionStatus.CALF,
        ProductionStatus.HEIFER,
        ProductionStatus.SERVED,
        ProductionStatus.LACTATING,
        ProductionStatus.DRY,
    }
)
_MALE_STATUSES = frozenset({ProductionStatus.CALF, ProductionStatus.BULL})


@dataclass(slots=True, frozen=True)
class LifecyclePolicy:
    calf_until_months: int = 6
    breeding_age_months: int = 15


DEFAULT_POLICY = LifecyclePolicy()


@dataclass(slots=True, frozen=True)
class StatusDerivation:
    status: ProductionStatus
    allowed_statuses: frozenset[ProductionStatus]
    overridable: bool
    age_months: int
    category: AgeCategory | None = None

    def allows(self, status: ProductionStatus | str) -> bool:
        return ProductionStatus(status) in self.allowed_statuses


def valid_statuses_for_sex(sex: Sex | str) -> frozenset[ProductionStatus]:
    return _MALE_STATUSES if Sex(sex) is Sex.MALE else _FEMALE_STATUSES


def age_in_months(birth_date: date, as_of: date) -> int:
    if birth_date > as_of:
        raise ValueError("Birth date cannot be in the future")
    return (as_of - birth_date).days // DAYS_PER_MONTH


def _default_derivation(
    age_months: int, sex: Sex, policy: LifecyclePolicy
) -> StatusDerivation:
    if age_months < policy.calf_until_months:
        return StatusDerivation(
            ProductionStatus.CALF, frozenset({ProductionStatus.CALF}), False, age_months
        )
    if sex is Sex.MALE:
        return StatusDerivation(
            ProductionStatus.BULL, frozenset({ProductionStatus.BULL}), False, age_months
        )
    if age_months < policy.breeding_age_months:
        allowed = frozenset({ProductionStatus.HEIFER, ProductionStatus.SERVED})
    else:
        allowed = frozenset(
            {
                ProductionStatus.HEIFER,
                ProductionStatus.SERVED,
                ProductionStatus.LACTATING,
                ProductionStatus.DRY,
            }
        )
    return StatusDerivation(ProductionStatus.HEIFER, allowed, True, age_months)


def _status_fits_sex(status: ProductionStatus, sex: Sex) -> bool:
    if sex is Sex.MALE:
        return status not in FEMALE_ONLY_STATUSES
    return status not in MALE_ONLY_STATUSES


def _matching_category(
    categories: Iterable[AgeCategory], age_months: int, sex: Sex
) -> AgeCategory | None:
    ordered = sorted(categories, key=lambda c: (c.sort_order, c.min_age_months))
    for category in ordered:
        if not category.contains(age_months, sex.value):
            continue
        if not _status_fits_sex(ProductionStatus(category.production_status), sex):
            continue
        return category
    return None


def derive_status(
    birth_date: date,
    sex: Sex | str,
    as_of: date,
    categories: Iterable[AgeCategory] | None = None,
    policy: LifecyclePolicy = DEFAULT_POLICY,
) -> StatusDerivation:
    sex = Sex(sex)
    age_months = age_in_months(birth_date, as_of)
    default = _default_derivation(age_months, sex, policy)

    category = _matching_category(categories or (), age_months, sex)
    if category is None:
        return default

    status = ProductionStatus(category.production_status)
    merged = set(default.allowed_statuses)
    merged.update(ProductionStatus(s) for s in category.allowed_statuses)
    merged.add(status)
    allowed = frozenset(merged) & valid_statuses_for_sex(sex)
    return StatusDerivation(
        status=status,
        allowed_statuses=allowed,
        overridable=sex is Sex.FEMALE,
        age_months=age_months,
        category=category,
    )


def reconcile_status(
    current: ProductionStatus | str | None, derivation: StatusDerivation
) -> ProductionStatus:
    """Keep the stored status while it stays allowed, else fall back to the derived one."""
    if current is not None and derivation.allows(current):
        return ProductionStatus(current)
    return derivation.status


def ensure_status_requirements(
    status: ProductionStatus | str, expected_calving_date: date | None
) -> None:
    if ProductionStatus(status) is ProductionStatus.DRY and expected_calving_date is None:
        raise ValueError("Expected calving date is required for dry animals")


def check_dry_off_transition(
    current: ProductionStatus | str, new: ProductionStatus | str
) -> None:
    current = ProductionStatus(current)
    new = ProductionStatus(new)
    if new is not ProductionStatus.DRY:
        return
    if current is ProductionStatus.DRY:
        raise ValueError("Animal is already dry")
    if current is not ProductionStatus.LACTATING:
        raise ValueError("Only lactating animals can be dried off")
