"""
Cross-entity search queries (raw SQL).
"""

from __future__ import annotations

from core import db
from stations.repository import STATION_COLUMNS

from . import filters

JOINED_COLUMNS = """
    s.id AS stanica_id,
    s.naziv,
    s.adresa,
    s.kapacitet,
    s.geo_lat,
    s.geo_lon,
    s.aktivna,
    s.datum_posljednje_aktivnosti,
    b.id AS bicikl_id,
    b.status,
    b.tip,
    b.zadnje_koristenje
"""


async def search_station_bike_rows(search_filter: filters.SearchFilter) -> list[dict]:
    """
    Stations left-joined to their bikes: one row per bike, or one row with
    null bike columns for a station without bikes.
    """
    return await db.fetch_all(
        f"""
        SELECT {JOINED_COLUMNS}
        FROM stanice s
        LEFT JOIN bicikli b ON s.id = b.stanica_id
        {search_filter.where}
        ORDER BY s.id, b.id
        """,
        *search_filter.params,
    )


async def search_stations(search_filter: filters.SearchFilter) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {STATION_COLUMNS}
        FROM stanice s
        {search_filter.where}
        ORDER BY s.id
        """,
        *search_filter.params,
    )
