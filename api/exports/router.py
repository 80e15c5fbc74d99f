"""
Legacy search and export endpoints.

These keep the {"success", "count", "data"} response shape.
"""

from __future__ import annotations

from fastapi import APIRouter, Query
from fastapi.responses import Response

from core import responses

from . import encoders, service

router = APIRouter()


@router.get("/api/data")
async def search_data(
    search: str | None = Query(default=None, max_length=500),
    attribute: str | None = Query(default=None, max_length=100),
) -> dict:
    rows = await service.search_rows(search, attribute)
    return responses.legacy_success(rows)


@router.get("/api/export/csv")
async def export_csv(
    search: str | None = Query(default=None, max_length=500),
    attribute: str | None = Query(default=None, max_length=100),
) -> Response:
    rows = await service.search_rows(search, attribute)
    return Response(
        content=encoders.encode_csv(rows),
        media_type=encoders.CSV_MEDIA_TYPE,
        headers=encoders.attachment_headers(encoders.CSV_FILENAME),
    )


@router.get("/api/export/json")
async def export_json(
    search: str | None = Query(default=None, max_length=500),
    attribute: str | None = Query(default=None, max_length=100),
) -> Response:
    stations = await service.stations_with_bikes(search, attribute)
    return Response(
        content=encoders.encode_json(stations),
        media_type=encoders.JSON_MEDIA_TYPE,
        headers=encoders.attachment_headers(encoders.JSON_FILENAME),
    )
