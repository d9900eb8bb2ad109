from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.value_objects.health import (
    CompletionStatus,
    FollowUpStatus,
    HealthRecordType,
    HealthStatus,
    Severity,
    TreatmentEffectiveness,
)


class HealthRecordCreate(BaseModel):
    animal_id: UUID
    record_type: HealthRecordType
    record_date: date
    description: str = Field(min_length=1)
    severity: Severity | None = None
    veterinarian: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None
    medication: str | None = None
    symptoms: str | None = None
    treatment: str | None = None
    next_due_date: date | None = None
    root_checkup_id: UUID | None = None


class HealthRecordUpdate(BaseModel):
    record_type: HealthRecordType | None = None
    record_date: date | None = None
    description: str | None = None
    severity: Severity | None = None
    veterinarian: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None
    medication: str | None = None
    symptoms: str | None = None
    treatment: str | None = None
    next_due_date: date | None = None
    is_resolved: bool | None = None
    resolved_date: date | None = None


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: UUID
    record_type: HealthRecordType
    record_date: date
    description: str
    severity: Severity | None
    veterinarian: str | None
    cost: Decimal | None
    notes: str | None
    medication: str | None
    symptoms: str | None
    treatment: str | None
    next_due_date: date | None
    is_resolved: bool
    resolved_date: date | None
    root_checkup_id: UUID | None
    is_follow_up: bool
    is_auto_generated: bool
    completion_status: CompletionStatus
    original_health_status: HealthStatus | None
    created_at: datetime
    updated_at: datetime
    version: int


class HealthRecordCreateResponse(BaseModel):
    health_record: HealthRecordResponse
    health_status: HealthStatus | None


class FollowUpCreate(BaseModel):
    status: FollowUpStatus
    description: str = Field(min_length=1)
    record_date: date
    resolved: bool = False
    treatment_effectiveness: TreatmentEffectiveness | None = None
    next_followup_date: date | None = None
    veterinarian: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None
    medication_changes: str | None = None


class FollowUpRelationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    original_record_id: UUID
    follow_up_record_id: UUID
    status: FollowUpStatus
    treatment_effectiveness: TreatmentEffectiveness | None
    is_resolved: bool
    created_at: datetime


class FollowUpResponse(BaseModel):
    follow_up: HealthRecordResponse
    relation: FollowUpRelationResponse
    resolved_record_ids: list[UUID]
    health_status: HealthStatus | None
    health_status_updated: bool


class HealthRecordDeleteResponse(BaseModel):
    deleted_record_ids: list[UUID]
    health_status: HealthStatus | None
