from __future__ import annotations

from datetime import date, timedelta

from src.domain.models.farm_settings import BreedingSettings


def expected_calving_date(service_date: date, settings: BreedingSettings) -> date:
    return service_date + timedelta(days=settings.default_gestation_days)


def dry_off_date(service_date: date, settings: BreedingSettings) -> date:
    """Day the cow should be dried off, counted from service."""
    return service_date + timedelta(days=settings.days_pregnant_at_dry_off)


def dry_period_days(settings: BreedingSettings) -> int:
    return settings.default_gestation_days - settings.days_pregnant_at_dry_off
