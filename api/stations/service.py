"""
Station business logic.

Scope:
- input checks (path ids, required fields on create)
- existence checks that turn into 404s
- formatting rows for the response
"""

from __future__ import annotations

from datetime import date

from fastapi import HTTPException, status

from bikes import repository as bike_repository
from core import formatting, params

from . import repository, schemas

INVALID_STATION_ID = "Invalid station ID"
STATION_NOT_FOUND = "Station with the provided ID does not exist"
MISSING_FIELDS = "Missing required fields"

ACTIVE_STATUS_VALUES = {"true", "1"}


def _not_found(detail: str = STATION_NOT_FOUND) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


def parse_station_id(raw: str) -> int:
    return params.parse_id(raw, INVALID_STATION_ID)


def parse_active_status(raw: str) -> bool:
    return raw in ACTIVE_STATUS_VALUES


async def list_stations() -> list[dict]:
    return formatting.format_stations(await repository.list_stations())


async def get_station_with_bikes(station_id: int) -> dict:
    row = await repository.get_station(station_id)
    if row is None:
        raise _not_found()
    station = formatting.format_stations([row])[0]
    station["bicikli"] = formatting.format_bikes(await bike_repository.list_bikes_for_station(station_id))
    return station


async def list_station_bikes(station_id: int) -> list[dict]:
    if not await repository.station_exists(station_id):
        raise _not_found("Station not found")
    return formatting.format_bikes(await bike_repository.list_bikes_for_station(station_id))


async def list_stations_by_activity(is_active: bool) -> list[dict]:
    rows = await repository.list_stations_by_activity(is_active=is_active)
    return formatting.format_stations(rows)


async def search_by_location(location: str) -> list[dict]:
    return formatting.format_stations(await repository.search_stations_by_location(location))


async def create_station(request: schemas.StationCreateRequest) -> dict:
    if (
        not request.naziv
        or not request.adresa
        or not request.kapacitet
        or request.geo_lat is None
        or request.geo_lon is None
    ):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)

    row = await repository.create_station(
        naziv=request.naziv,
        adresa=request.adresa,
        kapacitet=request.kapacitet,
        geo_lat=request.geo_lat,
        geo_lon=request.geo_lon,
        aktivna=request.aktivna is not False,
        datum_posljednje_aktivnosti=request.datum_posljednje_aktivnosti or date.today(),
    )
    return formatting.format_stations([row])[0]


async def update_station(station_id: int, request: schemas.StationUpdateRequest) -> dict:
    if not await repository.station_exists(station_id):
        raise _not_found()

    # Omitted fields stay None and are coalesced to the stored values.
    row = await repository.update_station(station_id, **request.model_dump())
    if row is None:
        raise _not_found()
    return formatting.format_stations([row])[0]


async def delete_station(station_id: int) -> dict:
    if not await repository.station_exists(station_id):
        raise _not_found()

    deleted_id = await repository.delete_station(station_id)
    if deleted_id is None:
        raise _not_found()
    return {"deleted_id": deleted_id}
