"""
Station persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core import db

STATION_COLUMNS = "id, naziv, adresa, kapacitet, geo_lat, geo_lon, aktivna, datum_posljednje_aktivnosti"


async def list_stations() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {STATION_COLUMNS}
        FROM stanice
        ORDER BY id
        """
    )


async def get_station(station_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {STATION_COLUMNS}
        FROM stanice
        WHERE id = $1
        """,
        station_id,
    )


async def station_exists(station_id: int) -> bool:
    row = await db.fetch_one("SELECT 1 AS ok FROM stanice WHERE id = $1", station_id)
    return row is not None


async def list_stations_by_activity(*, is_active: bool) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {STATION_COLUMNS}
        FROM stanice
        WHERE aktivna = $1
        ORDER BY id
        """,
        is_active,
    )


async def search_stations_by_location(location: str) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {STATION_COLUMNS}
        FROM stanice
        WHERE adresa ILIKE $1 OR naziv ILIKE $1
        ORDER BY id
        """,
        f"%{location}%",
    )


async def create_station(
    *,
    naziv: str,
    adresa: str,
    kapacitet: int,
    geo_lat: float,
    geo_lon: float,
    aktivna: bool,
    datum_posljednje_aktivnosti: date,
) -> dict:
    """
    Insert a station with id = max(id) + 1.

    The table lock keeps concurrent creators from reading the same max id.
    """
    async with db.transaction() as conn:
        await conn.execute("LOCK TABLE stanice IN EXCLUSIVE MODE")
        new_id = await conn.fetchval("SELECT COALESCE(MAX(id), 0) + 1 FROM stanice")
        row = await db.fetch_one_in(
            conn,
            f"""
            INSERT INTO stanice ({STATION_COLUMNS})
            VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
            RETURNING {STATION_COLUMNS}
            """,
            new_id,
            naziv,
            adresa,
            kapacitet,
            geo_lat,
            geo_lon,
            aktivna,
            datum_posljednje_aktivnosti,
        )
    if row is None:
        raise RuntimeError("Failed to create station.")
    return row


async def update_station(
    station_id: int,
    *,
    naziv: str | None = None,
    adresa: str | None = None,
    kapacitet: int | None = None,
    geo_lat: float | None = None,
    geo_lon: float | None = None,
    aktivna: bool | None = None,
    datum_posljednje_aktivnosti: date | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE stanice
        SET naziv = COALESCE($1, naziv),
            adresa = COALESCE($2, adresa),
            kapacitet = COALESCE($3, kapacitet),
            geo_lat = COALESCE($4, geo_lat),
            geo_lon = COALESCE($5, geo_lon),
            aktivna = COALESCE($6, aktivna),
            datum_posljednje_aktivnosti = COALESCE($7, datum_posljednje_aktivnosti)
        WHERE id = $8
        RETURNING {STATION_COLUMNS}
        """,
        naziv,
        adresa,
        kapacitet,
        geo_lat,
        geo_lon,
        aktivna,
        datum_posljednje_aktivnosti,
        station_id,
    )


async def delete_station(station_id: int) -> int | None:
    """
    Delete the station's bikes, then the station, in one transaction.
    """
    async with db.transaction() as conn:
        await conn.execute("DELETE FROM bicikli WHERE stanica_id = $1", station_id)
        deleted_id = await conn.fetchval("DELETE FROM stanice WHERE id = $1 RETURNING id", station_id)
    return int(deleted_id) if deleted_id is not None else None
