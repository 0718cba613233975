"""
Pydantic schemas for the chirp endpoints.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel


class ChirpRequest(BaseModel):
    body: str


class CleanedChirpResponse(BaseModel):
    body: str


class ChirpResponse(BaseModel):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: uuid.UUID


class ErrorResponse(BaseModel):
    error: str
