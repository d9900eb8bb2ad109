"""Placeholder health record synthesized when an animal is registered unwell."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from src.domain.models.animal import Animal
from src.domain.models.health_record import HealthRecord
from src.domain.value_objects.health import (
    CONCERNING_HEALTH_STATUSES,
    CompletionStatus,
    HealthRecordType,
    HealthStatus,
    Severity,
)


@dataclass(slots=True, frozen=True)
class _Template:
    record_type: HealthRecordType
    severity: Severity
    summary: str
    choices: tuple[HealthRecordType, ...] = ()


_TEMPLATES: dict[HealthStatus, _Template] = {
    HealthStatus.SICK: _Template(
        HealthRecordType.ILLNESS,
        Severity.MEDIUM,
        "registered with sick status - requires medical evaluation",
    ),
    HealthStatus.REQUIRES_ATTENTION: _Template(
        HealthRecordType.CHECKUP,
        Severity.LOW,
        "requires health attention - needs assessment",
        (HealthRecordType.INJURY, HealthRecordType.CHECKUP),
    ),
    HealthStatus.QUARANTINED: _Template(
        HealthRecordType.ILLNESS,
        Severity.HIGH,
        "placed in quarantine - potential health concern",
        (
            HealthRecordType.CHECKUP,
            HealthRecordType.VACCINATION,
            HealthRecordType.ILLNESS,
            HealthRecordType.TREATMENT,
        ),
    ),
}

# Fields whose presence on an update means a person has filled the record in
COMPLETION_FIELDS = ("symptoms", "veterinarian", "medication", "treatment")


def needs_auto_record(health_status: HealthStatus | str) -> bool:
    return HealthStatus(health_status) in CONCERNING_HEALTH_STATUSES


def record_type_choices(health_status: HealthStatus | str) -> list[HealthRecordType]:
    """Record types the user may pick when the default one is only a guess."""
    template = _TEMPLATES.get(HealthStatus(health_status))
    return list(template.choices) if template else []


def build_auto_record(
    animal: Animal, today: date, follow_up_days: int
) -> HealthRecord | None:
    status = HealthStatus(animal.health_status)
    template = _TEMPLATES.get(status)
    if template is None:
        return None
    return HealthRecord.create(
        farm_id=animal.farm_id,
        animal_id=animal.id,
        record_type=template.record_type.value,
        record_date=today,
        description=f"{animal.display_name} {template.summary}",
        severity=template.severity.value,
        next_due_date=today + timedelta(days=follow_up_days),
        is_auto_generated=True,
        completion_status=CompletionStatus.PENDING.value,
        original_health_status=status.value,
    )


def completes_auto_record(changes: dict) -> bool:
    return any(changes.get(name) for name in COMPLETION_FIELDS)
