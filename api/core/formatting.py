"""
Row normalization shared by every endpoint.

Rows come back from asyncpg as plain dicts. Before they leave the API:
- flag columns become real booleans (`True` or the character 't' count as true)
- date columns become `YYYY-MM-DD` strings (or None)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

STATION_FLAG_FIELDS = ("aktivna",)
STATION_DATE_FIELDS = ("datum_posljednje_aktivnosti",)
BIKE_DATE_FIELDS = ("zadnje_koristenje",)


def coerce_flag(value: Any) -> bool:
    return value is True or value == "t"


def truncate_date(value: Any) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(str(value)[:10]).isoformat()


def format_row(
    row: Mapping[str, Any],
    *,
    flags: Iterable[str] = (),
    dates: Iterable[str] = (),
) -> dict[str, Any]:
    formatted = dict(row)
    for field in flags:
        formatted[field] = coerce_flag(row.get(field))
    for field in dates:
        formatted[field] = truncate_date(row.get(field))
    return formatted


def format_stations(rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [format_row(r, flags=STATION_FLAG_FIELDS, dates=STATION_DATE_FIELDS) for r in rows]


def format_bikes(rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [format_row(r, dates=BIKE_DATE_FIELDS) for r in rows]


def format_joined(rows: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """
    Station-with-bike rows carry both entities' columns.
    """
    return [
        format_row(r, flags=STATION_FLAG_FIELDS, dates=STATION_DATE_FIELDS + BIKE_DATE_FIELDS)
        for r in rows
    ]
