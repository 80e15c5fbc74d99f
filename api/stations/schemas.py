"""
Pydantic schemas for station endpoints.

Every field is optional at the schema level: missing required fields on
create are reported by the service as a 400, and on update an omitted
field keeps its stored value.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from core.params import INT4_MAX, INT4_MIN


class StationCreateRequest(BaseModel):
    naziv: str | None = Field(default=None, max_length=255)
    adresa: str | None = Field(default=None, max_length=255)
    kapacitet: int | None = Field(default=None, ge=INT4_MIN, le=INT4_MAX)
    geo_lat: float | None = None
    geo_lon: float | None = None
    aktivna: bool | None = None
    datum_posljednje_aktivnosti: date | None = None


class StationUpdateRequest(StationCreateRequest):
    pass
