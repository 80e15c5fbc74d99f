"""
Bike API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from core import responses

from . import schemas, service

router = APIRouter()


@router.get("/api/bicikli")
async def list_bikes() -> dict:
    bikes = await service.list_bikes()
    return responses.ok("Successfully fetched all bikes", bikes)


@router.get("/api/bicikli/{bike_id}")
async def get_bike(bike_id: str) -> dict:
    bike = await service.get_bike(service.parse_bike_id(bike_id))
    return responses.ok("Successfully fetched bike", bike)


@router.post("/api/bicikli", status_code=status.HTTP_201_CREATED)
async def create_bike(request: schemas.BikeCreateRequest | None = None) -> dict:
    bike = await service.create_bike(request or schemas.BikeCreateRequest())
    return responses.created("Bike successfully created", bike)


@router.put("/api/bicikli/{bike_id}")
async def update_bike(bike_id: str, request: schemas.BikeUpdateRequest | None = None) -> dict:
    bike = await service.update_bike(
        service.parse_bike_id(bike_id),
        request or schemas.BikeUpdateRequest(),
    )
    return responses.ok("Bike successfully updated", bike)


@router.delete("/api/bicikli/{bike_id}")
async def delete_bike(bike_id: str) -> dict:
    deleted = await service.delete_bike(service.parse_bike_id(bike_id))
    return responses.ok("Bike successfully deleted", deleted)
