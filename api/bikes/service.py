"""
Bike business logic.
"""

from __future__ import annotations

from datetime import date

from fastapi import HTTPException, status

from core import formatting, params
from stations import repository as station_repository

from . import repository, schemas

INVALID_BIKE_ID = "Invalid bike ID"
BIKE_NOT_FOUND = "Bike with the provided ID does not exist"
MISSING_FIELDS = "Missing required fields"
UNKNOWN_STATION = "Station with provided ID does not exist"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=BIKE_NOT_FOUND)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def parse_bike_id(raw: str) -> int:
    return params.parse_id(raw, INVALID_BIKE_ID)


async def list_bikes() -> list[dict]:
    return formatting.format_bikes(await repository.list_bikes())


async def get_bike(bike_id: int) -> dict:
    row = await repository.get_bike(bike_id)
    if row is None:
        raise _not_found()
    return formatting.format_bikes([row])[0]


async def create_bike(request: schemas.BikeCreateRequest) -> dict:
    if not request.status or not request.tip or not request.stanica_id:
        raise _bad_request(MISSING_FIELDS)
    if not await station_repository.station_exists(request.stanica_id):
        raise _bad_request(UNKNOWN_STATION)

    row = await repository.create_bike(
        status=request.status,
        tip=request.tip,
        zadnje_koristenje=request.zadnje_koristenje or date.today(),
        stanica_id=request.stanica_id,
    )
    return formatting.format_bikes([row])[0]


async def update_bike(bike_id: int, request: schemas.BikeUpdateRequest) -> dict:
    if not await repository.bike_exists(bike_id):
        raise _not_found()
    if request.stanica_id is not None and not await station_repository.station_exists(request.stanica_id):
        raise _bad_request(UNKNOWN_STATION)

    row = await repository.update_bike(bike_id, **request.model_dump())
    if row is None:
        raise _not_found()
    return formatting.format_bikes([row])[0]


async def delete_bike(bike_id: int) -> dict:
    if not await repository.bike_exists(bike_id):
        raise _not_found()

    deleted_id = await repository.delete_bike(bike_id)
    if deleted_id is None:
        raise _not_found()
    return {"deleted_id": deleted_id}
