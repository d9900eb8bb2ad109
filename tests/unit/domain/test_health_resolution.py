from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.domain.models.health_follow_up import HealthFollowUp
from src.domain.models.health_record import HealthRecord
from src.domain.services.health_resolution import (
    determine_health_status,
    is_open,
    resolution_targets,
)
from src.domain.value_objects.health import HealthStatus

FARM = uuid4()
ANIMAL = uuid4()


def record(record_type: str, severity: str | None = None, resolved: bool = False) -> HealthRecord:
    rec = HealthRecord.create(
        farm_id=FARM,
        animal_id=ANIMAL,
        record_type=record_type,
        record_date=date(2026, 5, 1),
        description=record_type,
        severity=severity,
    )
    rec.is_resolved = resolved
    return rec


def test_resolution_targets_are_ordered_and_unique():
    original, root, parent = uuid4(), uuid4(), uuid4()
    assert resolution_targets(original, root, parent) == [original, root, parent]
    assert resolution_targets(original, None, original) == [original]
    assert resolution_targets(original, root, root) == [original, root]


def test_only_unresolved_concerning_records_are_open():
    assert is_open(record("illness"))
    assert is_open(record("treatment"))
    assert not is_open(record("vaccination"))
    assert not is_open(record("injury", resolved=True))


def test_no_open_records_means_healthy_even_when_quarantined():
    records = [record("checkup"), record("illness", "high", resolved=True)]
    assert determine_health_status(HealthStatus.QUARANTINED, records) is HealthStatus.HEALTHY


def test_quarantine_is_kept_while_records_are_open():
    assert determine_health_status("quarantined", [record("illness", "high")]) is HealthStatus.QUARANTINED


def test_serious_illness_makes_animal_sick():
    assert determine_health_status("healthy", [record("injury", "medium")]) is HealthStatus.SICK


@pytest.mark.parametrize(
    "records",
    [
        [record("illness", "low")],
        [record("treatment", "critical")],
        [record("illness")],
    ],
)
def test_minor_open_records_require_attention(records):
    assert determine_health_status("healthy", records) is HealthStatus.REQUIRES_ATTENTION


def test_record_cannot_be_its_own_root_checkup():
    rec = record("checkup")
    with pytest.raises(ValueError):
        HealthRecord(
            id=rec.id,
            farm_id=FARM,
            animal_id=ANIMAL,
            record_type="checkup",
            record_date=rec.record_date,
            description="loop",
            root_checkup_id=rec.id,
        )


def test_follow_up_cannot_link_record_to_itself():
    record_id = uuid4()
    with pytest.raises(ValueError):
        HealthFollowUp.create(
            farm_id=FARM,
            original_record_id=record_id,
            follow_up_record_id=record_id,
            status="stable",
        )
