"""Brand request/response schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CreateBrandRequest(BaseModel):
    name: str


class UpdateBrandRequest(BaseModel):
    id: uuid.UUID
    name: str


class DeleteBrandRequest(BaseModel):
    id: uuid.UUID


class BrandResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    created_at: datetime
    updated_at: datetime
