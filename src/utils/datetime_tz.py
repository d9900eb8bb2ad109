from __future__ import annotations

from datetime import date, datetime, timezone

from zoneinfo import ZoneInfo

# Farm calendar days are counted in this zone unless settings say otherwise
DEFAULT_TIMEZONE_NAME = "Africa/Nairobi"


def farm_tz(tz_name: str | None = None) -> ZoneInfo:
    return ZoneInfo(tz_name or DEFAULT_TIMEZONE_NAME)


def local_today(tz_name: str | None = None) -> date:
    """Current calendar date on the farm.

    Ages, record dates and due dates are all whole days, so "today" must be
    taken in the farm's zone rather than UTC.
    """
    return datetime.now(timezone.utc).astimezone(farm_tz(tz_name)).date()
