"""
Bike persistence (raw SQL).
"""

from __future__ import annotations

from datetime import date

from core import db

BIKE_COLUMNS = "id, status, tip, zadnje_koristenje, stanica_id"

# First bike gets BIKE_ID_BASE + 1.
BIKE_ID_BASE = 800000


async def list_bikes() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {BIKE_COLUMNS}
        FROM bicikli
        ORDER BY id
        """
    )


async def get_bike(bike_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {BIKE_COLUMNS}
        FROM bicikli
        WHERE id = $1
        """,
        bike_id,
    )


async def bike_exists(bike_id: int) -> bool:
    row = await db.fetch_one("SELECT 1 AS ok FROM bicikli WHERE id = $1", bike_id)
    return row is not None


async def list_bikes_for_station(station_id: int) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {BIKE_COLUMNS}
        FROM bicikli
        WHERE stanica_id = $1
        ORDER BY id
        """,
        station_id,
    )


async def list_bikes_for_stations(station_ids: list[int]) -> list[dict]:
    """
    Bikes of several stations in one round-trip, ordered by station then id.
    """
    if not station_ids:
        return []
    return await db.fetch_all(
        f"""
        SELECT {BIKE_COLUMNS}
        FROM bicikli
        WHERE stanica_id = ANY($1::int[])
        ORDER BY stanica_id, id
        """,
        station_ids,
    )


async def create_bike(
    *,
    status: str,
    tip: str,
    zadnje_koristenje: date,
    stanica_id: int,
) -> dict:
    async with db.transaction() as conn:
        await conn.execute("LOCK TABLE bicikli IN EXCLUSIVE MODE")
        new_id = await conn.fetchval(
            "SELECT COALESCE(MAX(id), $1::int) + 1 FROM bicikli",
            BIKE_ID_BASE,
        )
        row = await db.fetch_one_in(
            conn,
            f"""
            INSERT INTO bicikli ({BIKE_COLUMNS})
            VALUES ($1, $2, $3, $4, $5)
            RETURNING {BIKE_COLUMNS}
            """,
            new_id,
            status,
            tip,
            zadnje_koristenje,
            stanica_id,
        )
    if row is None:
        raise RuntimeError("Failed to create bike.")
    return row


async def update_bike(
    bike_id: int,
    *,
    status: str | None = None,
    tip: str | None = None,
    zadnje_koristenje: date | None = None,
    stanica_id: int | None = None,
) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE bicikli
        SET status = COALESCE($1, status),
            tip = COALESCE($2, tip),
            zadnje_koristenje = COALESCE($3, zadnje_koristenje),
            stanica_id = COALESCE($4, stanica_id)
        WHERE id = $5
        RETURNING {BIKE_COLUMNS}
        """,
        status,
        tip,
        zadnje_koristenje,
        stanica_id,
        bike_id,
    )


async def delete_bike(bike_id: int) -> int | None:
    deleted_id = await db.fetch_value("DELETE FROM bicikli WHERE id = $1 RETURNING id", bike_id)
    return int(deleted_id) if deleted_id is not None else None
