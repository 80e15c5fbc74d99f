"""
Pydantic schemas for bike endpoints.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from core.params import INT4_MAX, INT4_MIN


class BikeCreateRequest(BaseModel):
    status: str | None = Field(default=None, max_length=100)
    tip: str | None = Field(default=None, max_length=100)
    zadnje_koristenje: date | None = None
    stanica_id: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)


class BikeUpdateRequest(BikeCreateRequest):
    pass
