"""
Legacy search/export logic.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from bikes import repository as bike_repository
from core import formatting

from . import filters, repository

STATION_EXPORT_FIELDS = (
    "id",
    "naziv",
    "adresa",
    "kapacitet",
    "geo_lat",
    "geo_lon",
    "aktivna",
    "datum_posljednje_aktivnosti",
)


def _search_filter(
    search: str | None,
    attribute: str | None,
    *,
    default_columns: tuple[str, ...],
) -> filters.SearchFilter:
    try:
        return filters.build_search_filter(search, attribute, default_columns=default_columns)
    except filters.UnknownAttributeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


async def search_rows(search: str | None, attribute: str | None) -> list[dict]:
    search_filter = _search_filter(search, attribute, default_columns=filters.JOINED_SEARCH_COLUMNS)
    rows = await repository.search_station_bike_rows(search_filter)
    return formatting.format_joined(rows)


async def stations_with_bikes(search: str | None, attribute: str | None) -> list[dict]:
    search_filter = _search_filter(search, attribute, default_columns=filters.STATION_SEARCH_COLUMNS)
    stations = formatting.format_stations(await repository.search_stations(search_filter))

    bikes_by_station: dict[int, list[dict]] = {int(s["id"]): [] for s in stations}
    bike_rows = await bike_repository.list_bikes_for_stations(list(bikes_by_station))
    for bike in formatting.format_bikes(bike_rows):
        bikes_by_station.setdefault(int(bike["stanica_id"]), []).append(bike)

    return [
        {
            **{field: station.get(field) for field in STATION_EXPORT_FIELDS},
            "bicikli": bikes_by_station[int(station["id"])],
        }
        for station in stations
    ]
