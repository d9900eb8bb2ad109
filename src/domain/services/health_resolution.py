"""Rules shared by the follow-up cascade and the health status evaluators."""

from __future__ import annotations

from collections.abc import Iterable
from uuid import UUID

from src.domain.models.health_record import HealthRecord
from src.domain.value_objects.health import (
    CONCERNING_RECORD_TYPES,
    HealthRecordType,
    HealthStatus,
    Severity,
)

SICK_RECORD_TYPES = frozenset({HealthRecordType.ILLNESS, HealthRecordType.INJURY})
SICK_SEVERITIES = frozenset({Severity.MEDIUM, Severity.HIGH, Severity.CRITICAL})


def resolution_targets(
    original_id: UUID,
    root_checkup_id: UUID | None = None,
    parent_original_id: UUID | None = None,
) -> list[UUID]:
    """Ids a resolved follow-up closes, in order, each at most once."""
    targets: list[UUID] = []
    for record_id in (original_id, root_checkup_id, parent_original_id):
        if record_id is not None and record_id not in targets:
            targets.append(record_id)
    return targets


def is_open(record: HealthRecord) -> bool:
    return (
        not record.is_resolved
        and HealthRecordType(record.record_type) in CONCERNING_RECORD_TYPES
    )


def _makes_sick(record: HealthRecord) -> bool:
    if record.severity is None:
        return False
    return (
        HealthRecordType(record.record_type) in SICK_RECORD_TYPES
        and Severity(record.severity) in SICK_SEVERITIES
    )


def determine_health_status(
    current_status: HealthStatus | str, records: Iterable[HealthRecord]
) -> HealthStatus:
    open_records = [r for r in records if is_open(r)]
    if not open_records:
        return HealthStatus.HEALTHY
    if HealthStatus(current_status) is HealthStatus.QUARANTINED:
        return HealthStatus.QUARANTINED
    if any(_makes_sick(r) for r in open_records):
        return HealthStatus.SICK
    return HealthStatus.REQUIRES_ATTENTION
