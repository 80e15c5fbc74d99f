"""
Station API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import responses

from . import schemas, service

router = APIRouter()


@router.get("/api/stanice")
async def list_stations() -> dict:
    stations = await service.list_stations()
    return responses.ok("Successfully fetched all stations", stations)


# Literal-prefixed routes go before the `{station_id}` ones.
@router.get("/api/stanice/aktivne/{active_status}")
async def list_stations_by_activity(active_status: str) -> dict:
    is_active = service.parse_active_status(active_status)
    stations = await service.list_stations_by_activity(is_active)
    label = "active" if is_active else "inactive"
    return responses.ok(f"Successfully fetched {label} stations", stations)


@router.get("/api/stanice/lokacija/{lokacija}")
async def search_stations_by_location(lokacija: str) -> dict:
    stations = await service.search_by_location(lokacija)
    return responses.ok(f"Successfully searched stations by location: {lokacija}", stations)


@router.get("/api/stanice/{station_id}")
async def get_station(station_id: str) -> dict:
    station = await service.get_station_with_bikes(service.parse_station_id(station_id))
    return responses.ok("Successfully fetched station", station)


@router.get("/api/stanice/{station_id}/bicikli")
async def list_station_bikes(station_id: str) -> dict:
    parsed_id = service.parse_station_id(station_id)
    bikes = await service.list_station_bikes(parsed_id)
    return responses.ok(f"Successfully fetched bikes for station {parsed_id}", bikes)


@router.post("/api/stanice", status_code=status.HTTP_201_CREATED)
async def create_station(request: schemas.StationCreateRequest | None = None) -> dict:
    station = await service.create_station(request or schemas.StationCreateRequest())
    return responses.created("Station successfully created", station)


@router.put("/api/stanice/{station_id}")
async def update_station(station_id: str, request: schemas.StationUpdateRequest | None = None) -> dict:
    station = await service.update_station(
        service.parse_station_id(station_id),
        request or schemas.StationUpdateRequest(),
    )
    return responses.ok("Station successfully updated", station)


@router.delete("/api/stanice/{station_id}")
async def delete_station(station_id: str) -> dict:
    deleted = await service.delete_station(service.parse_station_id(station_id))
    return responses.ok("Station successfully deleted", deleted)
