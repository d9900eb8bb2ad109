from __future__ import annotations

from datetime import date, timedelta
from uuid import uuid4

from src.domain.models.animal import Animal
from src.domain.services.auto_health_record import (
    build_auto_record,
    completes_auto_record,
    needs_auto_record,
    record_type_choices,
)
from src.domain.value_objects.health import HealthRecordType

TODAY = date(2026, 3, 10)


def make_animal(health_status: str, name: str | None = None) -> Animal:
    return Animal.create(
        farm_id=uuid4(),
        tag="COW-007",
        sex="female",
        production_status="heifer",
        name=name,
        health_status=health_status,
    )


def test_quarantined_animal_gets_high_severity_illness_record():
    animal = make_animal("quarantined", name="Daisy")
    rec = build_auto_record(animal, TODAY, follow_up_days=7)
    assert rec is not None
    assert rec.record_type == "illness"
    assert rec.severity == "high"
    assert rec.description == "Daisy placed in quarantine - potential health concern"
    assert rec.next_due_date == TODAY + timedelta(days=7)
    assert rec.is_auto_generated is True
    assert rec.completion_status == "pending"
    assert rec.original_health_status == "quarantined"


def test_unnamed_animal_is_described_by_tag():
    rec = build_auto_record(make_animal("sick"), TODAY, follow_up_days=3)
    assert rec.description == "Animal COW-007 registered with sick status - requires medical evaluation"
    assert rec.severity == "medium"


def test_healthy_animal_needs_no_record():
    animal = make_animal("healthy")
    assert not needs_auto_record(animal.health_status)
    assert build_auto_record(animal, TODAY, follow_up_days=7) is None


def test_record_type_choices_by_status():
    assert record_type_choices("sick") == []
    assert record_type_choices("requires_attention") == [
        HealthRecordType.INJURY,
        HealthRecordType.CHECKUP,
    ]
    assert HealthRecordType.TREATMENT in record_type_choices("quarantined")


def test_completion_needs_a_clinical_field():
    assert not completes_auto_record({"notes": "checked"})
    assert not completes_auto_record({"symptoms": ""})
    assert completes_auto_record({"veterinarian": "Dr. Otieno"})
