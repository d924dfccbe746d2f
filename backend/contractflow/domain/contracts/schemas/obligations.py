from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, ConfigDict


class ObligationCreate(BaseModel):
    clause_ref: str | None = None
    description: str | None = None
    due_date: dt.datetime | None = None
    status: str | None = None


class ObligationUpdate(BaseModel):
    # Blank text fields keep the stored value; due_date is always applied.
    clause_ref: str | None = None
    description: str | None = None
    due_date: dt.datetime | None = None
    status: str | None = None


class ObligationSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    contract_id: uuid.UUID
    clause_ref: str
    description: str
    due_date: dt.datetime | None
    status: str
