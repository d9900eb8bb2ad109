from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BuyerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    code: str | None = None
    contact: str | None = None


class BuyerActivation(BaseModel):
    is_active: bool


class BuyerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    code: str | None
    contact: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
