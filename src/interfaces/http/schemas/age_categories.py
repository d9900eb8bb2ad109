from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.domain.value_objects.production_status import ProductionStatus, Sex


class AgeCategoryPayload(BaseModel):
    name: str = Field(min_length=1, max_length=128)
    min_age_months: int = Field(ge=0)
    max_age_months: int | None = Field(default=None, ge=0)
    sex: Sex | None = None
    production_status: ProductionStatus
    allowed_statuses: list[ProductionStatus] = Field(default_factory=list)
    description: str | None = None
    sort_order: int = 0

    @model_validator(mode="after")
    def check_range(self) -> AgeCategoryPayload:
        if self.max_age_months is not None and self.max_age_months < self.min_age_months:
            raise ValueError("max_age_months must be >= min_age_months")
        return self


class AgeCategoryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    min_age_months: int
    max_age_months: int | None
    sex: Sex | None
    production_status: ProductionStatus
    allowed_statuses: list[ProductionStatus]
    description: str | None
    sort_order: int
    created_at: datetime
    updated_at: datetime
