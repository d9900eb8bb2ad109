from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.value_objects.health import HealthRecordType, HealthStatus
from src.domain.value_objects.production_status import (
    AnimalSource,
    ProductionStatus,
    ReleaseReason,
    Sex,
)
from src.interfaces.http.schemas.health_records import HealthRecordResponse


class AnimalCreate(BaseModel):
    tag: str | None = Field(default=None, max_length=64)
    name: str | None = Field(default=None, max_length=255)
    breed: str | None = None
    sex: Sex
    birth_date: date | None = None
    source: AnimalSource = AnimalSource.NEWBORN_CALF
    production_status: ProductionStatus | None = None
    override_status: bool = False
    health_status: HealthStatus = HealthStatus.HEALTHY
    mother_id: UUID | None = None
    purchase_date: date | None = None
    service_date: date | None = None
    expected_calving_date: date | None = None
    notes: str | None = None

    @field_validator("tag", "name")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class AnimalUpdate(BaseModel):
    version: int
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    sex: Sex | None = None
    source: AnimalSource | None = None
    mother_id: UUID | None = None
    purchase_date: date | None = None
    notes: str | None = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag: str
    name: str | None
    breed: str | None
    sex: Sex
    birth_date: date | None
    source: AnimalSource
    production_status: ProductionStatus
    health_status: HealthStatus
    status: str
    mother_id: UUID | None
    purchase_date: date | None
    service_date: date | None
    expected_calving_date: date | None
    dry_off_date: date | None
    auto_health_record_id: UUID | None
    release_date: date | None
    release_reason: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class AnimalCreateResponse(BaseModel):
    animal: AnimalResponse
    health_record: HealthRecordResponse | None = None
    requires_record_type_selection: bool = False
    available_record_types: list[HealthRecordType] = Field(default_factory=list)


class AnimalsPage(BaseModel):
    items: list[AnimalResponse]
    total: int
    limit: int
    offset: int


class StatusCalculationRequest(BaseModel):
    birth_date: date
    sex: Sex


class AgeCategorySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    min_age_months: int
    max_age_months: int | None


class StatusCalculationResponse(BaseModel):
    production_status: ProductionStatus
    allowed_statuses: list[ProductionStatus]
    overridable: bool
    age_months: int
    category: AgeCategorySummary | None = None


class StatusRecalculationResponse(BaseModel):
    animal_id: UUID
    current: ProductionStatus
    calculated: ProductionStatus
    should_update: bool
    allowed_statuses: list[ProductionStatus]
    age_months: int


class ProductionStatusUpdate(BaseModel):
    production_status: ProductionStatus
    override_status: bool = False
    service_date: date | None = None
    expected_calving_date: date | None = None


class ReleaseRequest(BaseModel):
    release_reason: ReleaseReason
    release_date: date
    notes: str = Field(min_length=1)
    sale_price: Decimal | None = Field(default=None, ge=0)
    buyer_info: str | None = None
    death_cause: str | None = None
    transfer_location: str | None = None


class ReleaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    animal_id: UUID
    release_reason: ReleaseReason
    release_date: date
    sale_price: Decimal | None
    buyer_info: str | None
    death_cause: str | None
    transfer_location: str | None
    notes: str
    animal_data: dict
    created_at: datetime


class AnimalReleaseResponse(BaseModel):
    animal: AnimalResponse
    release: ReleaseResponse


class TagPreviewResponse(BaseModel):
    tag: str
    examples: list[str]
    auto_generate: bool
