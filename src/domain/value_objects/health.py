from __future__ import annotations

from enum import Enum


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    SICK = "sick"
    REQUIRES_ATTENTION = "requires_attention"
    QUARANTINED = "quarantined"


class HealthRecordType(str, Enum):
    VACCINATION = "vaccination"
    TREATMENT = "treatment"
    CHECKUP = "checkup"
    INJURY = "injury"
    ILLNESS = "illness"
    REPRODUCTIVE = "reproductive"
    DEWORMING = "deworming"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class CompletionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class FollowUpStatus(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"
    RECOVERED = "recovered"
    REQUIRES_ATTENTION = "requires_attention"


class TreatmentEffectiveness(str, Enum):
    VERY_EFFECTIVE = "very_effective"
    EFFECTIVE = "effective"
    SOMEWHAT_EFFECTIVE = "somewhat_effective"
    NOT_EFFECTIVE = "not_effective"


# Statuses that trigger an auto-generated record at registration
CONCERNING_HEALTH_STATUSES = frozenset(
    {HealthStatus.SICK, HealthStatus.REQUIRES_ATTENTION, HealthStatus.QUARANTINED}
)

# Record types that keep an animal off "healthy" while unresolved
CONCERNING_RECORD_TYPES = frozenset(
    {HealthRecordType.ILLNESS, HealthRecordType.INJURY, HealthRecordType.TREATMENT}
)
