"""Printer request/response schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CreatePrinterRequest(BaseModel):
    """References arrive as plain strings; the service parses them."""

    name: str
    model: str
    brand: str
    toner: str
    drum: str


class DeletePrinterRequest(BaseModel):
    id: uuid.UUID


class PrinterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    model: str
    brand: uuid.UUID
    toner: uuid.UUID
    drum: uuid.UUID
    created_at: datetime
    updated_at: datetime
